"""
The garden world: beds, weather, the store of harvested goods and the
mapping from real time to the in-world calendar.
"""
from collections import Counter
from datetime import datetime, timezone

from .config import DEFAULT_TIME_DILATION, DEFAULT_EPOCH, GROWTH_MODEL
from .entities import check_growth_model
from .errors import NoRoomInWorld
from .resources import Bed
from .weather import Weather


class World:
    def __init__(self, time_dilation=DEFAULT_TIME_DILATION, epoch=DEFAULT_EPOCH,
                 weather=None, growth_model=GROWTH_MODEL):
        self.time_dilation = time_dilation
        self.epoch = epoch
        self.weather = weather or Weather()
        self.growth_model = check_growth_model(growth_model)

        self._beds = []
        self._stores = []

        # Change notification
        self.version = 0
        self._subscribers = []

    @property
    def beds(self):
        return tuple(self._beds)

    @property
    def stores(self):
        return tuple(self._stores)

    # --- Change notification ---

    def subscribe(self, callback):
        """Call `callback(world)` after every mutation. Returns an unsubscribe function."""
        self._subscribers.append(callback)

        def unsubscribe():
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def _changed(self):
        self.version += 1
        for callback in list(self._subscribers):
            callback(self)

    # --- Commands ---

    def add_bed(self):
        bed = Bed(self.growth_model)
        self._beds.append(bed)
        self._changed()
        return bed

    def tick(self, now):
        for bed in self._beds:
            bed.tick(self, now)
        self._changed()

    def plant(self, now, kind):
        available_bed = next((b for b in self._beds if b.can_plant(now)), None)
        if available_bed is None:
            raise NoRoomInWorld()
        plant = available_bed.plant(now, kind)
        self._changed()
        return plant

    def harvest(self, now):
        harvested = [h for bed in self._beds for h in bed.harvest(now)]
        self._stores.extend(harvested)
        self._changed()
        return harvested

    # --- Queries ---

    def can_plant(self, now):
        return any(b.can_plant(now) for b in self._beds)

    def can_harvest(self, now):
        return any(b.can_harvest(now) for b in self._beds)

    def date(self, now):
        """In-world calendar date for real time `now` (seconds)."""
        seconds = self.epoch + (now - self.epoch) * self.time_dilation
        return datetime.fromtimestamp(seconds, tz=timezone.utc)

    def store_counts(self):
        """Harvest totals per plant kind, in order of first harvest."""
        return dict(Counter(h.plant.kind.value for h in self._stores))

    def __repr__(self):
        return f"World(beds={len(self._beds)}, stores={len(self._stores)})"
