"""Security service: applies the alarm rules to sensor, image and arming events."""

import logging
import threading
from typing import Any

from .const.defaults import DEFAULT_CONFIDENCE_THRESHOLD
from .const.states import AlarmStatus, ArmingStatus
from .image import ImageAnalyzer
from .listener import StatusListener
from .repository import SecurityRepository
from .rules import (
    ArmingChanged,
    ImageProcessed,
    SecurityEvent,
    SensorActivationChanged,
    resolve_alarm_status,
)
from .sensor import Sensor

_LOGGER = logging.getLogger(__name__)


class SecurityService:
    """Coordinates the repository, image analyzer and status listeners.

    The repository is the only source of truth for statuses and sensors; it is
    queried afresh for every decision. All public operations are serialized
    by a re-entrant lock, so the service can be shared between threads.
    """

    def __init__(
        self,
        repository: SecurityRepository,
        image_analyzer: ImageAnalyzer,
        confidence_threshold: float = DEFAULT_CONFIDENCE_THRESHOLD,
    ):
        """Initialize service.

        Args:
            repository: Store for statuses and sensors
            image_analyzer: Cat detector for camera images
            confidence_threshold: Minimum confidence passed to the analyzer
        """
        self._repository = repository
        self._image_analyzer = image_analyzer
        self.confidence_threshold = float(confidence_threshold)

        self._status_listeners: set[StatusListener] = set()
        self._lock = threading.RLock()

        _LOGGER.debug(f"Security service initialized (threshold={self.confidence_threshold})")

    # Listeners

    def add_status_listener(self, listener: StatusListener) -> None:
        """Register a listener (no-op if already registered)."""
        with self._lock:
            self._status_listeners.add(listener)

    def remove_status_listener(self, listener: StatusListener) -> None:
        """Unregister a listener (no-op if not registered)."""
        with self._lock:
            self._status_listeners.discard(listener)

    @property
    def status_listeners(self) -> frozenset[StatusListener]:
        """Snapshot of registered listeners."""
        with self._lock:
            return frozenset(self._status_listeners)

    def _notify_listeners(self, callback: str, *args: Any) -> None:
        for listener in list(self._status_listeners):
            try:
                getattr(listener, callback)(*args)
            except Exception as e:
                _LOGGER.error(
                    f"Error in status listener {listener!r} during {callback}: {e}",
                    exc_info=True,
                )

    # Alarm status

    def get_alarm_status(self) -> AlarmStatus:
        """Get current alarm status from the repository."""
        return self._repository.get_alarm_status()

    def _set_alarm_status(self, alarm_status: AlarmStatus) -> None:
        self._repository.set_alarm_status(alarm_status)
        _LOGGER.info(f"Alarm status set to {alarm_status.value}")
        self._notify_listeners("notify", alarm_status)

    def _apply(self, event: SecurityEvent) -> None:
        new_status = resolve_alarm_status(
            event,
            self._repository.get_alarm_status(),
            self._repository.get_arming_status(),
        )
        if new_status is not None:
            self._set_alarm_status(new_status)

    # Arming status

    def get_arming_status(self) -> ArmingStatus:
        """Get current arming status from the repository."""
        return self._repository.get_arming_status()

    def set_arming_status(self, arming_status: ArmingStatus) -> None:
        """Arm or disarm the system.

        Disarming always clears the alarm. Arming deactivates every sensor
        first, and raises the alarm if the last processed image showed a cat.

        The new arming status is stored last. If the repository fails while
        sensors are being reset, sensors already reset (and any alarm change
        they caused) stay written, the arming status keeps its old value and
        the error propagates; repeating the call completes the reset.

        Args:
            arming_status: New arming status

        Raises:
            RepositoryError: If a sensor or status cannot be stored
        """
        arming_status = ArmingStatus(arming_status)
        with self._lock:
            _LOGGER.info(f"Setting arming status to {arming_status.value}")
            if arming_status.is_armed:
                for sensor in sorted(self._repository.get_sensors()):
                    self._change_sensor_activation(sensor, False)

            self._apply(
                ArmingChanged(arming_status=arming_status, cat_detected=self.is_cat_detected)
            )
            self._repository.set_arming_status(arming_status)

    # Sensors

    def get_sensors(self) -> set[Sensor]:
        """Get all sensors from the repository."""
        return self._repository.get_sensors()

    def add_sensor(self, sensor: Sensor) -> None:
        """Add a sensor to the repository."""
        with self._lock:
            self._repository.add_sensor(sensor)
            _LOGGER.info(f"Sensor added: {sensor.name} ({sensor.sensor_type.value})")

    def remove_sensor(self, sensor: Sensor) -> None:
        """Remove a sensor from the repository."""
        with self._lock:
            self._repository.remove_sensor(sensor)
            _LOGGER.info(f"Sensor removed: {sensor.name} ({sensor.sensor_type.value})")

    def change_sensor_activation_status(self, sensor: Sensor, active: bool) -> None:
        """Record a sensor activation change and update the alarm status.

        Args:
            sensor: Sensor that changed
            active: New activation state

        Raises:
            SensorNotFoundError: If the repository does not know the sensor
        """
        with self._lock:
            self._change_sensor_activation(sensor, bool(active))

    def _stored_sensor(self, sensor: Sensor) -> Sensor | None:
        for stored in self._repository.get_sensors():
            if stored == sensor:
                return stored
        return None

    def _change_sensor_activation(self, sensor: Sensor, active: bool) -> None:
        # The stored flag decides; the caller's object may be stale
        stored = self._stored_sensor(sensor)
        was_active = stored.active if stored is not None else sensor.active
        previous = sensor.active
        event = SensorActivationChanged(active=active, was_active=was_active)
        new_status = resolve_alarm_status(
            event,
            self._repository.get_alarm_status(),
            self._repository.get_arming_status(),
        )

        sensor.set_active(active)
        try:
            self._repository.update_sensor(sensor)
        except Exception:
            sensor.set_active(previous)
            raise

        if new_status is not None:
            self._set_alarm_status(new_status)
        self._notify_listeners("sensor_status_changed")

    def reset_all_sensors_inactive(self) -> None:
        """Clear every sensor's active flag without evaluating alarm rules."""
        with self._lock:
            for sensor in sorted(self._repository.get_sensors()):
                sensor.set_active(False)
                self._repository.update_sensor(sensor)
            _LOGGER.info("All sensors reset to inactive")
            self._notify_listeners("sensor_status_changed")

    # Images

    @property
    def is_cat_detected(self) -> bool:
        """Result of the most recently processed image, as stored."""
        return bool(self._repository.get_cat_detected())

    def process_image(self, image: bytes) -> bool:
        """Classify a camera image and update the alarm status.

        Args:
            image: Encoded image data

        Returns:
            Whether a cat was detected

        Raises:
            ImageAnalysisError: If the analyzer fails
        """
        with self._lock:
            detected = bool(
                self._image_analyzer.image_contains_cat(image, self.confidence_threshold)
            )
            self._repository.set_cat_detected(detected)
            _LOGGER.info(f"Image processed: cat detected={detected}")

            any_active = any(sensor.active for sensor in self._repository.get_sensors())
            self._apply(ImageProcessed(cat_detected=detected, any_sensor_active=any_active))
            self._notify_listeners("cat_detected", detected)
            return detected

    def __repr__(self) -> str:
        """String representation."""
        return f"<SecurityService {self._repository!r}, {len(self._status_listeners)} listeners>"
