"""
Planting space in the garden: beds and the sections they are split into.
"""
from .config import BED_SIZE
from .entities import Plant, Harvested, PlantState, check_growth_model
from .errors import NoRoomInBed, NothingToHarvest


class Section:
    """
    One planting slot. Holds at most one plant.
    States: EMPTY, or whatever state its plant is in.
    """
    def __init__(self, growth_model="time"):
        self.growth_model = check_growth_model(growth_model)
        self.item = None

    def state(self, now):
        if self.item is None:
            return None
        return self.item.state(now, self.growth_model)

    def can_plant(self, now):
        return self.item is None or self.state(now) == PlantState.DEAD

    def plant(self, now, kind):
        # No room check here: Bed.plant picks a section that can_plant
        self.item = Plant(now, kind)
        return self.item

    def can_harvest(self, now):
        return self.item is not None and self.state(now) == PlantState.PRODUCING

    def harvest(self, now):
        if self.item is None:
            raise NothingToHarvest()
        result = Harvested(now, self.item.snapshot())
        self.item = None
        return result

    def tick(self, world, now):
        if self.item is not None:
            self.item.tick(world, now)

    def __repr__(self):
        return f"Section({self.item!r})"


class Bed:
    """
    A fixed row of BED_SIZE sections. Never resized; section order is stable.
    """
    def __init__(self, growth_model="time"):
        self.growth_model = check_growth_model(growth_model)
        self._sections = tuple(Section(growth_model) for _ in range(BED_SIZE))

    @property
    def sections(self):
        return self._sections

    def tick(self, world, now):
        for section in self._sections:
            section.tick(world, now)

    def can_plant(self, now):
        return any(s.can_plant(now) for s in self._sections)

    def plant(self, now, kind):
        unused_section = next((s for s in self._sections if s.can_plant(now)), None)
        if unused_section is None:
            raise NoRoomInBed()
        return unused_section.plant(now, kind)

    def can_harvest(self, now):
        return any(s.can_harvest(now) for s in self._sections)

    def harvest(self, now):
        return [s.harvest(now) for s in self._sections if s.can_harvest(now)]

    def free_sections(self, now):
        return sum(1 for s in self._sections if s.can_plant(now))

    def __repr__(self):
        return f"Bed({list(self._sections)})"
