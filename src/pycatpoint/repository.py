"""Security state repository abstraction."""

import logging
from abc import ABC, abstractmethod

from .const.states import AlarmStatus, ArmingStatus
from .sensor import Sensor

_LOGGER = logging.getLogger(__name__)


class SecurityRepository(ABC):
    """Store for arming status, alarm status and the sensor set.

    Implementations hold no business rules; they only get and set.
    """

    @abstractmethod
    def get_alarm_status(self) -> AlarmStatus:
        """Get current alarm status."""

    @abstractmethod
    def set_alarm_status(self, alarm_status: AlarmStatus) -> None:
        """Store alarm status."""

    @abstractmethod
    def get_arming_status(self) -> ArmingStatus:
        """Get current arming status."""

    @abstractmethod
    def set_arming_status(self, arming_status: ArmingStatus) -> None:
        """Store arming status."""

    @abstractmethod
    def add_sensor(self, sensor: Sensor) -> None:
        """Add a sensor to the set."""

    @abstractmethod
    def remove_sensor(self, sensor: Sensor) -> None:
        """Remove a sensor from the set."""

    @abstractmethod
    def update_sensor(self, sensor: Sensor) -> None:
        """Store the current state of a sensor.

        Raises:
            SensorNotFoundError: If the implementation refuses unknown sensors
        """

    @abstractmethod
    def get_sensors(self) -> set[Sensor]:
        """Get all sensors."""

    @abstractmethod
    def get_cat_detected(self) -> bool:
        """Get the result of the last processed image."""

    @abstractmethod
    def set_cat_detected(self, detected: bool) -> None:
        """Store the result of the last processed image."""


class InMemorySecurityRepository(SecurityRepository):
    """Repository that keeps state in process memory."""

    def __init__(
        self,
        alarm_status: AlarmStatus = AlarmStatus.NO_ALARM,
        arming_status: ArmingStatus = ArmingStatus.DISARMED,
        sensors: set[Sensor] | None = None,
    ):
        """Initialize repository.

        Args:
            alarm_status: Initial alarm status
            arming_status: Initial arming status
            sensors: Initial sensor set
        """
        self._alarm_status = alarm_status
        self._arming_status = arming_status
        self._sensors: dict[Sensor, Sensor] = {s: s for s in sensors or ()}
        self._cat_detected = False

    def get_alarm_status(self) -> AlarmStatus:
        return self._alarm_status

    def set_alarm_status(self, alarm_status: AlarmStatus) -> None:
        self._alarm_status = AlarmStatus(alarm_status)

    def get_arming_status(self) -> ArmingStatus:
        return self._arming_status

    def set_arming_status(self, arming_status: ArmingStatus) -> None:
        self._arming_status = ArmingStatus(arming_status)

    def add_sensor(self, sensor: Sensor) -> None:
        self._sensors[sensor] = sensor

    def remove_sensor(self, sensor: Sensor) -> None:
        self._sensors.pop(sensor, None)

    def update_sensor(self, sensor: Sensor) -> None:
        # Unknown sensors are stored rather than rejected
        if sensor not in self._sensors:
            _LOGGER.debug(f"Storing previously unknown sensor {sensor.name}")
        self._sensors.pop(sensor, None)
        self._sensors[sensor] = sensor

    def get_sensors(self) -> set[Sensor]:
        return set(self._sensors.values())

    def get_cat_detected(self) -> bool:
        return self._cat_detected

    def set_cat_detected(self, detected: bool) -> None:
        self._cat_detected = bool(detected)

    def __repr__(self) -> str:
        """String representation."""
        return (
            f"<InMemorySecurityRepository {self._arming_status.value}/"
            f"{self._alarm_status.value}, {len(self._sensors)} sensors>"
        )
