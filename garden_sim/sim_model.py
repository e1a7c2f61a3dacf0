"""
Core simulation driver: a simpy process ticks the World on a fixed schedule,
and an optional gardener process plants and harvests whenever it can.
"""
import itertools

import simpy

from .config import DEFAULT_EPOCH, SIM_TIME, TICK_INTERVAL
from .world import World


class GardenSimulation:
    def __init__(self, config_scenario, start_time=DEFAULT_EPOCH, world=None):
        self.env = simpy.Environment(initial_time=start_time)
        self.config = config_scenario
        self.start_time = start_time
        self.world = world or World(epoch=start_time,
                                    growth_model=config_scenario["GROWTH_MODEL"])
        for _ in range(config_scenario["BEDS"]):
            self.world.add_bed()

        self._crops = itertools.cycle(config_scenario["CROPS"])
        self._processes = []

        # Stats
        self.ticks = 0
        self.plantings = 0
        self.temperatures = [] # (now, temperature) per tick

    @property
    def now(self):
        return self.env.now

    def log(self, message):
        if self.config.get("VERBOSE"):
            print(f"[{self.env.now - self.start_time:.1f}] {message}")

    def start(self):
        """Register the ticker (and the gardener, if enabled) with the environment."""
        self._processes.append(self.env.process(self.ticker()))
        if self.config.get("AUTO_GARDENER"):
            self._processes.append(self.env.process(self.gardener()))

    def stop(self):
        """Interrupt the periodic processes so nothing keeps ticking after shutdown."""
        for process in self._processes:
            if process.is_alive:
                process.interrupt("stop")
        self._processes = []

    def run(self, duration=SIM_TIME):
        self.start()
        self.env.run(until=self.start_time + duration)
        self.stop()
        # Let the interrupts land
        self.env.run(until=self.env.now + TICK_INTERVAL)

    def ticker(self):
        """Advances plant growth once per TICK_INTERVAL."""
        try:
            while True:
                yield self.env.timeout(TICK_INTERVAL)
                now = self.env.now
                self.world.tick(now)
                self.ticks += 1
                self.temperatures.append((now, self.world.weather.on(now).temperature))
        except simpy.Interrupt:
            self.log("ticker stopped")

    def gardener(self):
        """Harvests anything producing, then fills every free section."""
        try:
            while True:
                now = self.env.now
                if self.world.can_harvest(now):
                    harvested = self.world.harvest(now)
                    self.log(f"harvested {len(harvested)} plants")
                while self.world.can_plant(now):
                    kind = next(self._crops)
                    self.world.plant(now, kind)
                    self.plantings += 1
                    self.log(f"planted {kind}")
                yield self.env.timeout(TICK_INTERVAL)
        except simpy.Interrupt:
            self.log("gardener stopped")
