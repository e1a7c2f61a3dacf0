"""
Synthetic weather. Conditions are a pure function of time: nothing is stored,
so asking twice for the same moment gives the same answer.
"""
import math
import random
from dataclasses import dataclass

from .config import (
    BASE_TEMPERATURE, SEASONAL_AMPLITUDE, DIURNAL_AMPLITUDE,
    WEATHER_JITTER, DAY_LENGTH, YEAR_LENGTH, WEATHER_SEED
)


@dataclass(frozen=True)
class WeatherInfo:
    temperature: float


class Weather:
    def __init__(self, seed=WEATHER_SEED, base_temperature=BASE_TEMPERATURE):
        self.seed = seed
        self.base_temperature = base_temperature

    def on(self, now):
        # Coldest at the turn of the year and before dawn
        season = -math.cos(2 * math.pi * now / YEAR_LENGTH)
        day = -math.cos(2 * math.pi * (now - DAY_LENGTH / 8) / DAY_LENGTH)

        # Same second, same jitter
        rng = random.Random(f"{self.seed}:{math.floor(now)}")
        jitter = rng.uniform(-WEATHER_JITTER, WEATHER_JITTER)

        temperature = (self.base_temperature
                       + SEASONAL_AMPLITUDE * season
                       + DIURNAL_AMPLITUDE * day
                       + jitter)
        return WeatherInfo(temperature)

    def __repr__(self):
        return f"Weather(seed={self.seed})"
