"""Constants for Catpoint."""

from .defaults import (
    DEFAULT_AWS_REGION,
    DEFAULT_CONFIDENCE_THRESHOLD,
    DEFAULT_CONFIG_FILE,
    DEFAULT_STATE_FILE,
)
from .states import AlarmStatus, ArmingStatus, SensorType
from .strings import (
    ALARM_STATUS,
    ALARM_STATUS_COLOR,
    ARMING_STATUS,
    ARMING_STATUS_COLOR,
)

__all__ = [
    "AlarmStatus",
    "ArmingStatus",
    "SensorType",
    "ALARM_STATUS",
    "ALARM_STATUS_COLOR",
    "ARMING_STATUS",
    "ARMING_STATUS_COLOR",
    "DEFAULT_AWS_REGION",
    "DEFAULT_CONFIDENCE_THRESHOLD",
    "DEFAULT_CONFIG_FILE",
    "DEFAULT_STATE_FILE",
]
