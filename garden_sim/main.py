"""
Main entry point for the simulation.
"""
import argparse
import time

from .sim_model import GardenSimulation
from .config import SCENARIO_A, SCENARIO_B, SIM_TIME
from .analytics import Analytics


def run_scenario(scenario_config, enable_viz=False):
    scenario_name = scenario_config['NAME']
    print(f"\nRunning {scenario_name}...")
    print(f"  Configuration: {scenario_config['BEDS']} beds, {scenario_config['GROWTH_MODEL']} growth")

    sim = GardenSimulation(scenario_config)

    if enable_viz:
        from .visualizer import Visualizer
        viz = Visualizer(sim, scenario_name)

        # Show transition screen
        viz.show_transition_screen(f"Starting: {scenario_name}", duration=2.0)
        if not viz.running:
            sim.stop()
            return sim

        sim.start()

        # Real-time sync: 1 sim second = 0.1 real seconds (10x speedup)
        REALTIME_FACTOR = 0.1  # Adjust this to slow down (higher = slower)

        end_time = sim.start_time + SIM_TIME
        last_sim_time = sim.now
        last_real_time = time.time()

        while sim.env.peek() < end_time:
            if not viz.running:
                break

            sim.env.step()

            # Sync to real time
            sim_elapsed = sim.now - last_sim_time
            target_real_elapsed = sim_elapsed * REALTIME_FACTOR
            actual_real_elapsed = time.time() - last_real_time

            if actual_real_elapsed < target_real_elapsed:
                time.sleep(target_real_elapsed - actual_real_elapsed)

            last_sim_time = sim.now
            last_real_time = time.time()

            viz.update()

        sim.stop()
        print("Scenario Complete. Continuing in 3 seconds...")
        viz.show_transition_screen(f"Completed: {scenario_name}", duration=3.0)
        viz.close()

    else:
        sim.run()

    return sim


def main(argv=None):
    parser = argparse.ArgumentParser(description="Garden simulation")
    parser.add_argument("--viz", action="store_true", help="show the pygame window")
    parser.add_argument("--output", default="results", help="directory for graphs")
    args = parser.parse_args(argv)

    analytics = Analytics()

    for scenario in (SCENARIO_A, SCENARIO_B):
        sim = run_scenario(scenario, enable_viz=args.viz)
        analytics.add_result(scenario["NAME"], sim)

    # Report
    analytics.print_summary()
    analytics.generate_graphs(args.output)
    print("Done.")


if __name__ == "__main__":
    main()
