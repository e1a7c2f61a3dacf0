"""
Entities growing in the garden.
"""
import copy
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType

from .config import PLANTS, TEMPERATURE_BRACKETS, BASE_GROWTH_POINTS
from .errors import UnknownPlantKind, UnknownGrowthModel

GROWTH_MODELS = ("time", "score")


class PlantKind(str, Enum):
    TOMATO = "tomato"
    KALE = "kale"

    @classmethod
    def parse(cls, kind):
        try:
            return cls(kind)
        except ValueError:
            raise UnknownPlantKind(kind) from None


class PlantState(str, Enum):
    """Lifecycle stages, in the only order a plant moves through them."""
    GERMINATING = "germinating"
    GROWING = "growing"
    PRODUCING = "producing"
    DEAD = "dead"

    @property
    def rank(self):
        return STATE_ORDER.index(self)


STATE_ORDER = (
    PlantState.GERMINATING,
    PlantState.GROWING,
    PlantState.PRODUCING,
    PlantState.DEAD,
)


@dataclass(frozen=True)
class PlantInfo:
    icon: str
    germination_time: float
    production_time: float
    life_span: float
    germination_score: float
    production_score: float


# Shared, read-only catalog
PLANT_CATALOG = MappingProxyType(
    {PlantKind(kind): PlantInfo(**info) for kind, info in PLANTS.items()}
)


def plant_info(kind):
    return PLANT_CATALOG[PlantKind.parse(kind)]


def check_growth_model(model):
    if model not in GROWTH_MODELS:
        raise UnknownGrowthModel(model)
    return model


def growth_points(temperature):
    """Growth points earned in one tick at the given temperature."""
    for threshold, points in TEMPERATURE_BRACKETS:
        if temperature > threshold:
            return points
    return BASE_GROWTH_POINTS


class Plant:
    def __init__(self, planted_on, kind, points=0):
        self.planted_on = planted_on
        self.kind = PlantKind.parse(kind)
        self.points = points

    @property
    def info(self):
        return PLANT_CATALOG[self.kind]

    def state(self, now, model="time"):
        """
        Lifecycle stage at `now`.

        Death always comes from elapsed time. The earlier stages compare
        either elapsed time ("time") or accumulated points ("score") with
        the catalog thresholds.
        """
        info = self.info
        elapsed = now - self.planted_on
        if elapsed > info.life_span:
            return PlantState.DEAD

        if model == "time":
            progress = elapsed
            germination, production = info.germination_time, info.production_time
        elif model == "score":
            progress = self.points
            germination, production = info.germination_score, info.production_score
        else:
            raise UnknownGrowthModel(model)

        if progress > production:
            return PlantState.PRODUCING
        elif progress > germination:
            return PlantState.GROWING
        else:
            return PlantState.GERMINATING

    def tick(self, world, now):
        temperature = world.weather.on(now).temperature
        self.points += growth_points(temperature)

    def snapshot(self):
        return copy.copy(self)

    def __eq__(self, other):
        if not isinstance(other, Plant):
            return NotImplemented
        return (self.planted_on, self.kind, self.points) == \
            (other.planted_on, other.kind, other.points)

    __hash__ = None

    def __repr__(self):
        return f"Plant({self.kind.value}, planted_on={self.planted_on}, points={self.points})"


@dataclass(frozen=True)
class Harvested:
    """A plant as it was when it was taken out of its section."""
    harvested_on: float
    plant: Plant
