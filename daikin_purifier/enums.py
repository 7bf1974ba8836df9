from enum import Enum, IntEnum


class Active(IntEnum):
    INACTIVE = 0
    ACTIVE = 1


class CurrentPurifierState(IntEnum):
    INACTIVE = 0
    IDLE = 1
    PURIFYING_AIR = 2


class TargetPurifierState(IntEnum):
    MANUAL = 0
    AUTO = 1


class Characteristic(str, Enum):
    """Names of the values pushed to the presentation layer."""

    ACTIVE = "Active"
    CURRENT_STATE = "CurrentAirPurifierState"
    TARGET_STATE = "TargetAirPurifierState"
