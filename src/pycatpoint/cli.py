"""Command-line interface for PyCatpoint."""

import json
import logging
import sys
from pathlib import Path
from typing import Any, Callable

try:
    import click
    import yaml
    from rich.console import Console
    from rich.table import Table
except ImportError:
    print("CLI dependencies not installed. Install with: pip install pycatpoint[cli]")
    sys.exit(1)

from . import __version__
from .const.defaults import (
    DEFAULT_AWS_REGION,
    DEFAULT_CONFIDENCE_THRESHOLD,
    DEFAULT_CONFIG_FILE,
    DEFAULT_STATE_FILE,
)
from .const.states import AlarmStatus, ArmingStatus, SensorType
from .const.strings import (
    ALARM_STATUS,
    ALARM_STATUS_COLOR,
    ARMING_STATUS,
    ARMING_STATUS_COLOR,
)
from .exceptions import ConfigError, SensorNotFoundError
from .image import FakeImageAnalyzer, ImageAnalyzer, RekognitionImageAnalyzer
from .listener import LoggingStatusListener
from .sensor import Sensor
from .service import SecurityService
from .yaml_repository import YamlSecurityRepository

console = Console()

ANALYZERS = ("fake", "rekognition")


def load_config(config_path: Path) -> dict:
    """Load configuration from YAML file.

    Args:
        config_path: Path to config file

    Returns:
        Configuration dictionary with a 'catpoint' mapping

    Raises:
        ConfigError: If the file cannot be read or has an unknown shape
    """
    try:
        with open(config_path) as f:
            raw = yaml.safe_load(f)
    except FileNotFoundError as e:
        raise ConfigError(f"Config file not found: {config_path}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Error parsing config: {e}") from e

    cfg = _normalize_config(raw)
    if cfg is None:
        raise ConfigError(
            "Invalid config. Expected mapping with 'catpoint' section, e.g.\n"
            "catpoint:\n  state_file: catpoint-state.yaml\n  analyzer: fake"
        )
    return cfg


def _normalize_config(raw: Any) -> dict | None:
    """Normalize YAML into a dict with a 'catpoint' mapping.

    Accepts these shapes:
    - None (empty file)
    - {catpoint: {...}}
    - {...} (settings at top level)
    Returns None if unknown.
    """
    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        return None
    data = raw.get("catpoint", raw)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        return None

    try:
        analyzer = str(data.get("analyzer", "fake")).lower()
        seed = data.get("seed")
        c = {
            "state_file": str(data.get("state_file") or DEFAULT_STATE_FILE),
            "confidence_threshold": float(
                data.get("confidence_threshold", DEFAULT_CONFIDENCE_THRESHOLD)
            ),
            "analyzer": analyzer,
            "seed": int(seed) if seed is not None else None,
            "region": str(data.get("region") or DEFAULT_AWS_REGION),
        }
    except (TypeError, ValueError):
        return None
    if analyzer not in ANALYZERS:
        return None
    return {"catpoint": c}


def build_service(config: dict) -> SecurityService:
    """Create a security service from normalized configuration."""
    c = config.get("catpoint") or _normalize_config({})["catpoint"]  # type: ignore[index]

    analyzer: ImageAnalyzer
    if c["analyzer"] == "rekognition":
        analyzer = RekognitionImageAnalyzer(region=c["region"])
    else:
        analyzer = FakeImageAnalyzer(seed=c["seed"])

    service = SecurityService(
        YamlSecurityRepository(c["state_file"]),
        analyzer,
        confidence_threshold=c["confidence_threshold"],
    )
    service.add_status_listener(LoggingStatusListener())
    return service


def _find_sensor(service: SecurityService, name: str) -> Sensor:
    for sensor in service.get_sensors():
        if sensor.name == name:
            return sensor
    raise SensorNotFoundError(f"Sensor '{name}' not found")


def _run(ctx: click.Context, action: Callable[[SecurityService], dict], as_json: bool) -> None:
    """Run an action against the configured service and report the result."""
    try:
        service = build_service(ctx.obj["config"])
        result = action(service)
    except Exception as e:
        if as_json:
            click.echo(json.dumps({"ok": False, "error": str(e)}))
        else:
            console.print(f"[red]Error: {e}[/red]")
        raise SystemExit(1)

    if as_json:
        click.echo(json.dumps({"ok": True, **result}))
    elif result.get("message"):
        console.print(f"[green]{result['message']}[/green]")


@click.group()
@click.version_option(version=__version__)
@click.option(
    "--config",
    "-c",
    type=click.Path(path_type=Path),
    default=DEFAULT_CONFIG_FILE,
    help="Configuration file path",
)
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, config: Path, debug: bool) -> None:
    """PyCatpoint - home security status from the command line."""
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    ctx.ensure_object(dict)
    try:
        ctx.obj["config"] = load_config(config) if config.exists() else _normalize_config({})
    except ConfigError as e:
        console.print(f"[red]{e}[/red]")
        sys.exit(1)
    ctx.obj["debug"] = debug


@cli.command()
@click.option("--json", "as_json", is_flag=True, help="Output status as JSON")
@click.pass_context
def status(ctx: click.Context, as_json: bool) -> None:
    """Show arming status, alarm status and sensors."""

    def action(service: SecurityService) -> dict:
        arming = service.get_arming_status()
        alarm = service.get_alarm_status()
        sensors = sorted(service.get_sensors())
        if not as_json:
            _print_status(arming, alarm, sensors)
        return {
            "arming_status": arming.value,
            "alarm_status": alarm.value,
            "sensors": [s.to_dict() for s in sensors],
        }

    _run(ctx, action, as_json)


def _print_status(arming: ArmingStatus, alarm: AlarmStatus, sensors: list[Sensor]) -> None:
    arming_style = ARMING_STATUS_COLOR.get(arming, "white")
    alarm_style = ALARM_STATUS_COLOR.get(alarm, "white")
    console.print(
        f"System: [{arming_style}]{ARMING_STATUS.get(arming, arming.value)}[/{arming_style}]"
    )
    console.print(f"Alarm:  [{alarm_style}]{ALARM_STATUS.get(alarm, alarm.value)}[/{alarm_style}]")
    console.print()

    if sensors:
        table = Table(title="Sensors")
        table.add_column("Name", style="magenta")
        table.add_column("Type", style="cyan")
        table.add_column("State", style="yellow")

        for sensor in sensors:
            state_style = "red" if sensor.active else "green"
            table.add_row(
                sensor.name,
                sensor.sensor_type.value.title(),
                f"[{state_style}]{sensor.state_text}[/{state_style}]",
            )

        console.print(table)
    else:
        console.print("[yellow]No sensors configured[/yellow]")


@cli.command()
@click.argument("mode", type=click.Choice(["home", "away"], case_sensitive=False))
@click.option("--json", "as_json", is_flag=True, help="Output JSON instead of text")
@click.pass_context
def arm(ctx: click.Context, mode: str, as_json: bool) -> None:
    """Arm the system in home or away mode."""
    arming = ArmingStatus.ARMED_HOME if mode.lower() == "home" else ArmingStatus.ARMED_AWAY

    def action(service: SecurityService) -> dict:
        service.set_arming_status(arming)
        return {
            "action": "arm",
            "arming_status": arming.value,
            "alarm_status": service.get_alarm_status().value,
            "message": f"System {ARMING_STATUS[arming].lower()}",
        }

    _run(ctx, action, as_json)


@cli.command()
@click.option("--json", "as_json", is_flag=True, help="Output JSON instead of text")
@click.pass_context
def disarm(ctx: click.Context, as_json: bool) -> None:
    """Disarm the system and clear any alarm."""

    def action(service: SecurityService) -> dict:
        service.set_arming_status(ArmingStatus.DISARMED)
        return {
            "action": "disarm",
            "arming_status": ArmingStatus.DISARMED.value,
            "alarm_status": service.get_alarm_status().value,
            "message": "System disarmed",
        }

    _run(ctx, action, as_json)


@cli.group()
def sensor() -> None:
    """Manage sensors."""


@sensor.command("add")
@click.argument("name")
@click.argument(
    "sensor_type",
    metavar="TYPE",
    type=click.Choice([t.value.lower() for t in SensorType], case_sensitive=False),
)
@click.option("--json", "as_json", is_flag=True, help="Output JSON instead of text")
@click.pass_context
def sensor_add(ctx: click.Context, name: str, sensor_type: str, as_json: bool) -> None:
    """Add a sensor named NAME of the given TYPE."""

    def action(service: SecurityService) -> dict:
        if any(s.name == name for s in service.get_sensors()):
            raise ValueError(f"Sensor '{name}' already exists")
        new_sensor = Sensor(name, SensorType(sensor_type.upper()))
        service.add_sensor(new_sensor)
        return {"action": "add", "sensor": new_sensor.to_dict(), "message": f"Sensor {name} added"}

    _run(ctx, action, as_json)


@sensor.command("remove")
@click.argument("name")
@click.option("--json", "as_json", is_flag=True, help="Output JSON instead of text")
@click.pass_context
def sensor_remove(ctx: click.Context, name: str, as_json: bool) -> None:
    """Remove the sensor named NAME."""

    def action(service: SecurityService) -> dict:
        service.remove_sensor(_find_sensor(service, name))
        return {"action": "remove", "name": name, "message": f"Sensor {name} removed"}

    _run(ctx, action, as_json)


def _set_sensor_active(ctx: click.Context, name: str, active: bool, as_json: bool) -> None:
    def action(service: SecurityService) -> dict:
        target = _find_sensor(service, name)
        service.change_sensor_activation_status(target, active)
        return {
            "action": "activate" if active else "deactivate",
            "sensor": target.to_dict(),
            "alarm_status": service.get_alarm_status().value,
            "message": f"Sensor {name} {target.state_text.lower()}",
        }

    _run(ctx, action, as_json)


@sensor.command("activate")
@click.argument("name")
@click.option("--json", "as_json", is_flag=True, help="Output JSON instead of text")
@click.pass_context
def sensor_activate(ctx: click.Context, name: str, as_json: bool) -> None:
    """Report the sensor named NAME as active."""
    _set_sensor_active(ctx, name, True, as_json)


@sensor.command("deactivate")
@click.argument("name")
@click.option("--json", "as_json", is_flag=True, help="Output JSON instead of text")
@click.pass_context
def sensor_deactivate(ctx: click.Context, name: str, as_json: bool) -> None:
    """Report the sensor named NAME as inactive."""
    _set_sensor_active(ctx, name, False, as_json)


@sensor.command("reset")
@click.option("--json", "as_json", is_flag=True, help="Output JSON instead of text")
@click.pass_context
def sensor_reset(ctx: click.Context, as_json: bool) -> None:
    """Mark every sensor inactive without changing the alarm."""

    def action(service: SecurityService) -> dict:
        service.reset_all_sensors_inactive()
        return {"action": "reset", "message": "All sensors reset to inactive"}

    _run(ctx, action, as_json)


@cli.command()
@click.argument("image", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--json", "as_json", is_flag=True, help="Output JSON instead of text")
@click.pass_context
def scan(ctx: click.Context, image: Path, as_json: bool) -> None:
    """Run cat detection on an IMAGE file."""

    def action(service: SecurityService) -> dict:
        detected = service.process_image(image.read_bytes())
        return {
            "action": "scan",
            "image": str(image),
            "cat_detected": detected,
            "alarm_status": service.get_alarm_status().value,
            "message": "Cat detected!" if detected else "No cat detected",
        }

    _run(ctx, action, as_json)


if __name__ == "__main__":
    cli()
