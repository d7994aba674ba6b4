"""Tests for the alarm transition rules."""

import pytest

from pycatpoint.const.states import AlarmStatus, ArmingStatus
from pycatpoint.rules import (
    ArmingChanged,
    ImageProcessed,
    SensorActivationChanged,
    resolve_alarm_status,
)

NO = AlarmStatus.NO_ALARM
PENDING = AlarmStatus.PENDING_ALARM
ALARM = AlarmStatus.ALARM


@pytest.mark.parametrize(
    "event, alarm, expected",
    [
        (SensorActivationChanged(active=True, was_active=False), NO, PENDING),
        (SensorActivationChanged(active=True, was_active=False), PENDING, ALARM),
        (SensorActivationChanged(active=True, was_active=True), PENDING, ALARM),
        (SensorActivationChanged(active=False, was_active=True), PENDING, NO),
        (SensorActivationChanged(active=False, was_active=True), NO, None),
        (SensorActivationChanged(active=False, was_active=False), NO, None),
        (SensorActivationChanged(active=False, was_active=False), PENDING, None),
        (SensorActivationChanged(active=False, was_active=False), ALARM, None),
        (SensorActivationChanged(active=True, was_active=False), ALARM, None),
        (SensorActivationChanged(active=False, was_active=True), ALARM, None),
    ],
)
def test_sensor_rules(event, alarm, expected):
    for arming in ArmingStatus:
        assert resolve_alarm_status(event, alarm, arming) == expected


@pytest.mark.parametrize(
    "event, arming, expected",
    [
        (ImageProcessed(cat_detected=True, any_sensor_active=False), ArmingStatus.ARMED_HOME, ALARM),
        (ImageProcessed(cat_detected=True, any_sensor_active=True), ArmingStatus.ARMED_HOME, ALARM),
        (ImageProcessed(cat_detected=True, any_sensor_active=False), ArmingStatus.ARMED_AWAY, None),
        (ImageProcessed(cat_detected=True, any_sensor_active=False), ArmingStatus.DISARMED, None),
        (ImageProcessed(cat_detected=False, any_sensor_active=False), ArmingStatus.ARMED_HOME, NO),
        (ImageProcessed(cat_detected=False, any_sensor_active=True), ArmingStatus.ARMED_HOME, None),
    ],
)
def test_image_rules(event, arming, expected):
    assert resolve_alarm_status(event, PENDING, arming) == expected


@pytest.mark.parametrize("alarm", list(AlarmStatus))
@pytest.mark.parametrize("cat", [True, False])
def test_disarming_always_clears(alarm, cat):
    event = ArmingChanged(arming_status=ArmingStatus.DISARMED, cat_detected=cat)
    assert resolve_alarm_status(event, alarm, ArmingStatus.ARMED_AWAY) == NO


@pytest.mark.parametrize("arming", [ArmingStatus.ARMED_HOME, ArmingStatus.ARMED_AWAY])
def test_arming_with_cat_raises_alarm(arming):
    event = ArmingChanged(arming_status=arming, cat_detected=True)
    assert resolve_alarm_status(event, NO, ArmingStatus.DISARMED) == ALARM


@pytest.mark.parametrize("arming", [ArmingStatus.ARMED_HOME, ArmingStatus.ARMED_AWAY])
def test_arming_without_cat_changes_nothing(arming):
    event = ArmingChanged(arming_status=arming, cat_detected=False)
    assert resolve_alarm_status(event, PENDING, ArmingStatus.DISARMED) is None


def test_unknown_event_rejected():
    with pytest.raises(TypeError):
        resolve_alarm_status("door opened", NO, ArmingStatus.DISARMED)


def test_alarm_severity_order():
    assert NO.severity < PENDING.severity < ALARM.severity
    assert ArmingStatus.ARMED_HOME.is_armed
    assert not ArmingStatus.DISARMED.is_armed
