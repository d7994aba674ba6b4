"""Human-readable text for status values.

Kept separate from the enums so display strings can be localized later.
"""

from .states import AlarmStatus, ArmingStatus

ALARM_STATUS: dict[str, str] = {
    AlarmStatus.NO_ALARM: "Cool and Good",
    AlarmStatus.PENDING_ALARM: "I'm in Danger...",
    AlarmStatus.ALARM: "Awooga!",
}

ARMING_STATUS: dict[str, str] = {
    ArmingStatus.DISARMED: "Disarmed",
    ArmingStatus.ARMED_HOME: "Armed - At Home",
    ArmingStatus.ARMED_AWAY: "Armed - Away",
}

# rich colour names
ALARM_STATUS_COLOR: dict[str, str] = {
    AlarmStatus.NO_ALARM: "green",
    AlarmStatus.PENDING_ALARM: "yellow",
    AlarmStatus.ALARM: "red",
}

ARMING_STATUS_COLOR: dict[str, str] = {
    ArmingStatus.DISARMED: "green",
    ArmingStatus.ARMED_HOME: "red",
    ArmingStatus.ARMED_AWAY: "blue",
}

SENSOR_ACTIVE = "Active"
SENSOR_INACTIVE = "Inactive"
