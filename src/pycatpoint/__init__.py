"""PyCatpoint - home security status engine.

Tracks sensors, an arming status and an alarm status, and derives the alarm
status from sensor, camera (cat detection) and arming events.

Example:
    >>> from pycatpoint import (
    ...     ArmingStatus, FakeImageAnalyzer, InMemorySecurityRepository,
    ...     SecurityService, Sensor, SensorType,
    ... )
    >>>
    >>> service = SecurityService(InMemorySecurityRepository(), FakeImageAnalyzer(seed=1))
    >>> door = Sensor("Front Door", SensorType.DOOR)
    >>> service.add_sensor(door)
    >>> service.set_arming_status(ArmingStatus.ARMED_AWAY)
    >>> service.change_sensor_activation_status(door, True)
    >>> service.get_alarm_status()
    <AlarmStatus.PENDING_ALARM: 'PENDING_ALARM'>
"""

from . import const, exceptions
from .const.states import AlarmStatus, ArmingStatus, SensorType
from .image import FakeImageAnalyzer, ImageAnalyzer, RekognitionImageAnalyzer
from .listener import LoggingStatusListener, StatusListener
from .repository import InMemorySecurityRepository, SecurityRepository
from .rules import (
    ArmingChanged,
    ImageProcessed,
    SecurityEvent,
    SensorActivationChanged,
    resolve_alarm_status,
)
from .sensor import Sensor
from .service import SecurityService
from .yaml_repository import YamlSecurityRepository

__version__ = "0.1.0"

__all__ = [
    # High-level API (recommended)
    "SecurityService",
    # Entities and states
    "Sensor",
    "SensorType",
    "AlarmStatus",
    "ArmingStatus",
    # Collaborators
    "SecurityRepository",
    "InMemorySecurityRepository",
    "YamlSecurityRepository",
    "ImageAnalyzer",
    "FakeImageAnalyzer",
    "RekognitionImageAnalyzer",
    "StatusListener",
    "LoggingStatusListener",
    # Rules (advanced use)
    "SecurityEvent",
    "SensorActivationChanged",
    "ImageProcessed",
    "ArmingChanged",
    "resolve_alarm_status",
    # Submodules
    "const",
    "exceptions",
    # Version
    "__version__",
]
