"""
Errors raised by the garden model.

All of them are precondition violations: callers are expected to check
can_plant / can_harvest before issuing the matching command.
"""


class GardenError(Exception):
    pass


class NoRoomInBed(GardenError):
    def __init__(self, message="no more room to plant in this bed"):
        super().__init__(message)


class NoRoomInWorld(GardenError):
    def __init__(self, message="no more room to plant in any bed"):
        super().__init__(message)


class NothingToHarvest(GardenError):
    def __init__(self, message="nothing is growing here"):
        super().__init__(message)


class UnknownPlantKind(GardenError, ValueError):
    def __init__(self, kind):
        self.kind = kind
        super().__init__(f"unknown plant kind: {kind!r}")


class UnknownGrowthModel(GardenError, ValueError):
    def __init__(self, model):
        self.model = model
        super().__init__(f"unknown growth model: {model!r}")
