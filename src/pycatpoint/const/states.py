"""State definitions for Catpoint entities."""

from enum import Enum


class AlarmStatus(str, Enum):
    """Alarm escalation levels."""

    NO_ALARM = "NO_ALARM"
    PENDING_ALARM = "PENDING_ALARM"
    ALARM = "ALARM"

    @property
    def severity(self) -> int:
        """Escalation rank (NO_ALARM < PENDING_ALARM < ALARM)."""
        return _ALARM_SEVERITY[self]


_ALARM_SEVERITY = {
    AlarmStatus.NO_ALARM: 0,
    AlarmStatus.PENDING_ALARM: 1,
    AlarmStatus.ALARM: 2,
}


class ArmingStatus(str, Enum):
    """System arming modes."""

    DISARMED = "DISARMED"
    ARMED_HOME = "ARMED_HOME"
    ARMED_AWAY = "ARMED_AWAY"

    @property
    def is_armed(self) -> bool:
        """Check if this is any armed mode."""
        return self is not ArmingStatus.DISARMED


class SensorType(str, Enum):
    """Sensor device kinds."""

    DOOR = "DOOR"
    WINDOW = "WINDOW"
    MOTION = "MOTION"
