"""Alarm transition rules.

Each input to the security system is described by one event variant. The
rules below map an event and the current statuses to the next alarm status,
without touching any storage, so they can be reasoned about on their own.

State machine::

    NO_ALARM      --sensor activated-------------------> PENDING_ALARM
    PENDING_ALARM --sensor activated-------------------> ALARM
    PENDING_ALARM --active sensor deactivated----------> NO_ALARM
    any           --cat seen while ARMED_HOME----------> ALARM
    any           --no cat, no active sensors----------> NO_ALARM
    any           --armed with a cat last seen---------> ALARM
    any           --disarmed---------------------------> NO_ALARM
    ALARM         --sensor activation change-----------> ALARM
"""

from dataclasses import dataclass
from typing import Union

from .const.states import AlarmStatus, ArmingStatus


@dataclass(frozen=True)
class SensorActivationChanged:
    """A sensor reported a new activation state."""

    active: bool
    was_active: bool


@dataclass(frozen=True)
class ImageProcessed:
    """A camera image was classified."""

    cat_detected: bool
    any_sensor_active: bool


@dataclass(frozen=True)
class ArmingChanged:
    """The arming status was set.

    ``cat_detected`` is the result of the most recent image.
    """

    arming_status: ArmingStatus
    cat_detected: bool


SecurityEvent = Union[SensorActivationChanged, ImageProcessed, ArmingChanged]


def _on_sensor(event: SensorActivationChanged, alarm_status: AlarmStatus) -> AlarmStatus | None:
    if alarm_status == AlarmStatus.ALARM:
        return None

    if event.active:
        # Re-triggering an already active sensor while pending also escalates
        if alarm_status == AlarmStatus.NO_ALARM:
            return AlarmStatus.PENDING_ALARM
        return AlarmStatus.ALARM

    if event.was_active and alarm_status == AlarmStatus.PENDING_ALARM:
        return AlarmStatus.NO_ALARM
    return None


def _on_image(event: ImageProcessed, arming_status: ArmingStatus) -> AlarmStatus | None:
    if event.cat_detected and arming_status == ArmingStatus.ARMED_HOME:
        return AlarmStatus.ALARM
    if not event.cat_detected and not event.any_sensor_active:
        return AlarmStatus.NO_ALARM
    return None


def _on_arming(event: ArmingChanged) -> AlarmStatus | None:
    if event.arming_status == ArmingStatus.DISARMED:
        return AlarmStatus.NO_ALARM
    if event.cat_detected:
        return AlarmStatus.ALARM
    return None


def resolve_alarm_status(
    event: SecurityEvent,
    alarm_status: AlarmStatus,
    arming_status: ArmingStatus,
) -> AlarmStatus | None:
    """Compute the alarm status that follows an event.

    Args:
        event: The event being handled
        alarm_status: Alarm status before the event
        arming_status: Arming status before the event

    Returns:
        New alarm status to store, or None if no rule fires

    Raises:
        TypeError: If event is not a known variant
    """
    if isinstance(event, SensorActivationChanged):
        return _on_sensor(event, alarm_status)
    if isinstance(event, ImageProcessed):
        return _on_image(event, arming_status)
    if isinstance(event, ArmingChanged):
        return _on_arming(event)
    raise TypeError(f"Unsupported security event: {event!r}")
