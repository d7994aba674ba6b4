"""Sensor entity."""

import logging
import uuid
from dataclasses import dataclass, field
from typing import Any

from .const.states import SensorType
from .const.strings import SENSOR_ACTIVE, SENSOR_INACTIVE

_LOGGER = logging.getLogger(__name__)


def _new_sensor_id() -> str:
    return str(uuid.uuid4())


@dataclass(order=True, unsafe_hash=True)
class Sensor:
    """A named door, window or motion sensor.

    Identity is ``(name, sensor_type, sensor_id)``; the ``active`` flag is
    mutable state and takes no part in equality, hashing or ordering, so a
    sensor stays findable in a set while it is toggled.
    """

    name: str
    sensor_type: SensorType
    sensor_id: str = field(default_factory=_new_sensor_id)
    active: bool = field(default=False, compare=False, hash=False)

    def __post_init__(self) -> None:
        self.sensor_type = SensorType(self.sensor_type)

    def set_active(self, active: bool) -> None:
        """Update activation flag.

        Args:
            active: New activation state
        """
        if self.active != active:
            _LOGGER.debug(f"Sensor {self.name} active: {self.active} -> {active}")
        self.active = active

    @property
    def state_text(self) -> str:
        """Display text for the activation flag."""
        return SENSOR_ACTIVE if self.active else SENSOR_INACTIVE

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON/YAML-friendly representation."""
        return {
            "id": self.sensor_id,
            "name": self.name,
            "type": self.sensor_type.value,
            "active": self.active,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Sensor":
        """Build a sensor from :meth:`to_dict` output.

        Raises:
            KeyError: If name or type is missing
            ValueError: If type is not a known sensor type
        """
        kwargs: dict[str, Any] = {
            "name": str(data["name"]),
            "sensor_type": SensorType(str(data["type"]).upper()),
            "active": bool(data.get("active", False)),
        }
        if data.get("id"):
            kwargs["sensor_id"] = str(data["id"])
        return cls(**kwargs)
