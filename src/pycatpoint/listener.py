"""Status listener interface."""

import logging
from abc import ABC, abstractmethod

from .const.states import AlarmStatus
from .const.strings import ALARM_STATUS

_LOGGER = logging.getLogger(__name__)


class StatusListener(ABC):
    """Receives alarm, cat detection and sensor change notifications.

    Callbacks are invoked synchronously by the security service. An exception
    raised here is logged by the service and does not affect alarm state.
    """

    @abstractmethod
    def notify(self, alarm_status: AlarmStatus) -> None:
        """Called after the alarm status has been stored."""

    @abstractmethod
    def cat_detected(self, detected: bool) -> None:
        """Called after every processed image."""

    def sensor_status_changed(self) -> None:
        """Called after a sensor's activation was changed."""


class LoggingStatusListener(StatusListener):
    """Listener that writes every notification to a logger."""

    def __init__(self, logger: logging.Logger | None = None):
        self._logger = logger or _LOGGER

    def notify(self, alarm_status: AlarmStatus) -> None:
        self._logger.info(
            f"Alarm status: {alarm_status.value} ({ALARM_STATUS.get(alarm_status, '')})"
        )

    def cat_detected(self, detected: bool) -> None:
        self._logger.info("Cat detected" if detected else "No cat detected")

    def sensor_status_changed(self) -> None:
        self._logger.debug("Sensor status changed")
