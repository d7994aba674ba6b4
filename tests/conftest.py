"""Shared fixtures."""

from unittest.mock import create_autospec

import pytest

from pycatpoint.const.states import AlarmStatus, ArmingStatus, SensorType
from pycatpoint.image import ImageAnalyzer
from pycatpoint.listener import StatusListener
from pycatpoint.repository import SecurityRepository
from pycatpoint.sensor import Sensor
from pycatpoint.service import SecurityService


@pytest.fixture
def repository():
    """Mock repository: disarmed, no alarm, no sensors."""
    repo = create_autospec(SecurityRepository, instance=True)
    repo.get_alarm_status.return_value = AlarmStatus.NO_ALARM
    repo.get_arming_status.return_value = ArmingStatus.DISARMED
    repo.get_sensors.return_value = set()
    repo.get_cat_detected.return_value = False
    repo.set_cat_detected.side_effect = lambda detected: setattr(
        repo.get_cat_detected, "return_value", detected
    )
    return repo


@pytest.fixture
def image_analyzer():
    analyzer = create_autospec(ImageAnalyzer, instance=True)
    analyzer.image_contains_cat.return_value = False
    return analyzer


@pytest.fixture
def listener():
    return create_autospec(StatusListener, instance=True)


@pytest.fixture
def service(repository, image_analyzer):
    return SecurityService(repository, image_analyzer)


@pytest.fixture
def sensor():
    return Sensor("Front Door", SensorType.DOOR)
