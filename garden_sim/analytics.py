"""
Analytics and Visualization.
"""
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import pandas as pd
import os
import numpy as np


def harvest_frame(world):
    """One row per harvested plant."""
    rows = [
        {
            "harvested_on": h.harvested_on,
            "planted_on": h.plant.planted_on,
            "kind": h.plant.kind.value,
            "points": h.plant.points,
        }
        for h in world.stores
    ]
    return pd.DataFrame(rows, columns=["harvested_on", "planted_on", "kind", "points"])


class Analytics:
    def __init__(self):
        self.results = {} # {scenario_name: stats_dict}

    def add_result(self, scenario_name, simulation_obj):
        frame = harvest_frame(simulation_obj.world)
        temperatures = [t for _, t in simulation_obj.temperatures]
        stats = {
            "total_harvested": len(frame),
            "harvest_by_kind": frame.groupby("kind").size().to_dict(),
            "plantings": simulation_obj.plantings,
            "avg_time_to_harvest": float(np.mean(frame["harvested_on"] - frame["planted_on"])) if len(frame) else 0,
            "avg_temperature": float(np.mean(temperatures)) if temperatures else 0,
            "raw_temperatures": simulation_obj.temperatures,
        }
        self.results[scenario_name] = stats
        return stats

    def print_summary(self):
        print("\n=== SIMULATION RESULTS ===")
        for name, stats in self.results.items():
            print(f"Scenario: {name}")
            print(f"  - Plants Harvested: {stats['total_harvested']}")
            for kind, count in stats["harvest_by_kind"].items():
                print(f"      {kind}: {count}")
            print(f"  - Plantings: {stats['plantings']}")
            print(f"  - Avg Time To Harvest: {stats['avg_time_to_harvest']:.1f} s")
            print(f"  - Avg Temperature: {stats['avg_temperature']:.1f} F")
            print("-" * 30)

    def generate_graphs(self, output_dir="results"):
        if not os.path.exists(output_dir):
            os.makedirs(output_dir)

        scenarios = list(self.results.keys())
        harvested = [self.results[s]["total_harvested"] for s in scenarios]

        # 1. Harvest Comparison
        plt.figure(figsize=(10, 6))
        plt.bar(scenarios, harvested, color=['red', 'green'])
        plt.title('Plants Harvested')
        plt.ylabel('Plants')
        plt.savefig(f"{output_dir}/harvest_comparison.png")
        plt.close()

        # 2. Temperature over time
        plt.figure(figsize=(10, 6))
        for s in scenarios:
            series = self.results[s]["raw_temperatures"]
            if not series:
                continue
            start = series[0][0]
            plt.plot([t - start for t, _ in series], [temp for _, temp in series], label=s)
        plt.title('Temperature')
        plt.xlabel('Seconds')
        plt.ylabel('Degrees F')
        plt.legend()
        plt.savefig(f"{output_dir}/temperature.png")
        plt.close()

        print(f"Graphs saved to {os.path.abspath(output_dir)}")
