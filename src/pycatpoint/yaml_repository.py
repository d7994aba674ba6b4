"""YAML file backed security repository."""

import logging
import os
import tempfile
from pathlib import Path
from typing import Any

import yaml

from .const.states import AlarmStatus, ArmingStatus
from .exceptions import RepositoryError
from .repository import SecurityRepository
from .sensor import Sensor

_LOGGER = logging.getLogger(__name__)


class YamlSecurityRepository(SecurityRepository):
    """Repository that persists state to a YAML document.

    The file is re-read on every access and rewritten on every change, so
    several processes (for example successive CLI invocations) see the same
    state. A missing file means a disarmed system with no sensors.

    Document shape::

        alarm_status: NO_ALARM
        arming_status: DISARMED
        cat_detected: false
        sensors:
          - {id: ..., name: Front Door, type: DOOR, active: false}
    """

    def __init__(self, path: str | Path):
        """Initialize repository.

        Args:
            path: State file location
        """
        self.path = Path(path)
        _LOGGER.debug(f"YAML repository at {self.path}")

    def _load(self) -> dict[str, Any]:
        if not self.path.exists():
            return {
                "alarm_status": AlarmStatus.NO_ALARM,
                "arming_status": ArmingStatus.DISARMED,
                "cat_detected": False,
                "sensors": {},
            }

        try:
            with open(self.path) as f:
                raw = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise RepositoryError(f"Failed to read state file {self.path}: {e}") from e

        if not isinstance(raw, dict):
            raise RepositoryError(f"State file {self.path} must contain a mapping")

        try:
            sensors = [Sensor.from_dict(item) for item in raw.get("sensors") or []]
            return {
                "alarm_status": AlarmStatus(raw.get("alarm_status", AlarmStatus.NO_ALARM)),
                "arming_status": ArmingStatus(
                    raw.get("arming_status", ArmingStatus.DISARMED)
                ),
                "cat_detected": bool(raw.get("cat_detected", False)),
                "sensors": {s: s for s in sensors},
            }
        except (KeyError, TypeError, ValueError) as e:
            raise RepositoryError(f"Invalid state file {self.path}: {e}") from e

    def _save(self, state: dict[str, Any]) -> None:
        document = {
            "alarm_status": AlarmStatus(state["alarm_status"]).value,
            "arming_status": ArmingStatus(state["arming_status"]).value,
            "cat_detected": bool(state["cat_detected"]),
            "sensors": [s.to_dict() for s in sorted(state["sensors"].values())],
        }
        tmp_name: str | None = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            # Write-then-rename keeps the previous state if the write fails
            fd, tmp_name = tempfile.mkstemp(
                dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
            )
            with os.fdopen(fd, "w") as f:
                yaml.safe_dump(document, f, sort_keys=False)
            os.replace(tmp_name, self.path)
        except (OSError, yaml.YAMLError) as e:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise RepositoryError(f"Failed to write state file {self.path}: {e}") from e

    def get_alarm_status(self) -> AlarmStatus:
        return self._load()["alarm_status"]

    def set_alarm_status(self, alarm_status: AlarmStatus) -> None:
        state = self._load()
        state["alarm_status"] = AlarmStatus(alarm_status)
        self._save(state)

    def get_arming_status(self) -> ArmingStatus:
        return self._load()["arming_status"]

    def set_arming_status(self, arming_status: ArmingStatus) -> None:
        state = self._load()
        state["arming_status"] = ArmingStatus(arming_status)
        self._save(state)

    def add_sensor(self, sensor: Sensor) -> None:
        state = self._load()
        state["sensors"][sensor] = sensor
        self._save(state)

    def remove_sensor(self, sensor: Sensor) -> None:
        state = self._load()
        state["sensors"].pop(sensor, None)
        self._save(state)

    def update_sensor(self, sensor: Sensor) -> None:
        state = self._load()
        state["sensors"].pop(sensor, None)
        state["sensors"][sensor] = sensor
        self._save(state)

    def get_sensors(self) -> set[Sensor]:
        return set(self._load()["sensors"].values())

    def get_cat_detected(self) -> bool:
        return self._load()["cat_detected"]

    def set_cat_detected(self, detected: bool) -> None:
        state = self._load()
        state["cat_detected"] = bool(detected)
        self._save(state)

    def __repr__(self) -> str:
        """String representation."""
        return f"<YamlSecurityRepository {self.path}>"
