"""Human-readable output for each rovercli operation.

Every result starts with a one-line header (``OK  op`` or
``ERROR  op — message``), followed by an op-specific body: motor and battery
tables for ``rover_config``, the solved command table for ``fixed_distance``.
Under ``--verbose`` the request timings from ``meta["telemetry"]`` follow.

Drawing happens on a Console backed by a StringIO buffer, so callers always
get a ``str``. Rich leaves out color codes when stdout is not a terminal
(CliRunner, pipes).
"""

from __future__ import annotations

import json
from collections.abc import Callable
from io import StringIO
from typing import TYPE_CHECKING, Any

from rich.console import Console
from rich.table import Table
from rich.text import Text
from rich.theme import Theme

if TYPE_CHECKING:
    from rovercli.services.result import ServiceResult

RENDER_WIDTH = 120

ROVER_THEME = Theme(
    {
        "rover.ok": "bold green",
        "rover.error": "bold red",
        "rover.op": "bold cyan",
        "rover.key": "dim",
        "rover.name": "bold blue",
        "rover.number": "magenta",
        "rover.bottleneck": "bold yellow",
    }
)

# Spans slower than these (ms) are highlighted in the timing tree.
_SLOW_MS = 100.0
_VERY_SLOW_MS = 1000.0


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render *result* for a terminal; plain text when not attached to one."""
    buf = StringIO()
    console = Console(file=buf, theme=ROVER_THEME, highlight=False, width=RENDER_WIDTH)

    _header(console, result)
    if result.ok:
        _BODIES.get(result.op, _plain_body)(console, result.data)
    elif result.error is not None:
        if "field" in result.error.detail:
            _kv(console, "field", result.error.detail["field"])
        if verbose:
            _kv(console, "code", result.error.code)
    if verbose and result.meta and "telemetry" in result.meta:
        console.print(Text("\n  timings:", style="rover.key"))
        _span_lines(console, result.meta["telemetry"], depth=2)

    return buf.getvalue().rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """One line per result for ``--quiet``; a submitted move prints the API reply."""
    if not result.ok:
        message = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {message}"
    if result.op == "fixed_distance" and "response" in result.data:
        return str(result.data["response"])
    return f"OK: {result.op}"


def _header(console: Console, result: ServiceResult) -> None:
    op = Text(f"  {result.op}", style="rover.op")
    if result.ok:
        console.print(Text.assemble(("OK", "rover.ok"), op))
        return
    message = result.error.message if result.error else "Unknown error"
    console.print(Text.assemble(("ERROR", "rover.error"), op, " — ", message))


def _fmt(value: Any) -> str:
    """Four decimals for numbers (bools excluded), ``str()`` for the rest."""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return f"{value:.4f}"
    return str(value)


def _kv(console: Console, key: str, value: Any) -> None:
    if isinstance(value, float):
        shown = (_fmt(value), "rover.number")
    elif isinstance(value, (dict, list)):
        shown = (json.dumps(value, separators=(",", ":")), "")
    else:
        shown = (str(value), "")
    console.print(Text.assemble((f"  {key}: ", "rover.key"), shown))


def _span_lines(console: Console, span: dict[str, Any], *, depth: int) -> None:
    ms = span.get("duration_ms", 0.0)
    style = "bold red" if ms > _VERY_SLOW_MS else "yellow" if ms > _SLOW_MS else "dim"
    line = Text.assemble("  " * depth, (f"{ms:>8.2f}ms", style), f"  {span.get('name', '?')}")
    notes = span.get("annotations")
    if notes:
        line.append("  (" + ", ".join(f"{k}={v}" for k, v in notes.items()) + ")")
    console.print(line)
    for child in span.get("children", []):
        _span_lines(console, child, depth=depth + 2)


def _health_body(console: Console, data: dict[str, Any]) -> None:
    _kv(console, "status", f"{data.get('status_code')} {data.get('reason', '')}".rstrip())


def _rover_config_body(console: Console, data: dict[str, Any]) -> None:
    motors = Table(title="Motors", pad_edge=False)
    motors.add_column("Name", style="rover.name", no_wrap=True)
    motors.add_column("KV (rpm/V)", justify="right")
    motors.add_column("Wheel diameter", justify="right")
    motors.add_column("Gear ratio", justify="right")
    for motor in data.get("motors", []):
        wheel = motor.get("wheel", {})
        motors.add_row(
            str(motor.get("name", "")),
            _fmt(motor.get("kv_rating")),
            _fmt(wheel.get("diameter")),
            _fmt(wheel.get("gear_ratio")),
        )
    console.print(motors)

    batteries = data.get("batteries", [])
    if not batteries:
        _kv(console, "batteries", "none")
        return
    table = Table(title="Batteries", pad_edge=False)
    table.add_column("#", justify="right")
    table.add_column("Max voltage", justify="right")
    for i, battery in enumerate(batteries):
        table.add_row(str(i), _fmt(battery.get("max_voltage")))
    console.print(table)


def _exercise_body(console: Console, data: dict[str, Any]) -> None:
    value = (data.get("fixed_distance") or {}).get("value")
    _kv(console, "fixed_distance", "(not set)" if value is None else value)


def _fixed_distance_body(console: Console, data: dict[str, Any]) -> None:
    command = data.get("command", {})
    for key in ("fixed_distance", "battery_max_voltage", "final_max_wheel_speed"):
        _kv(console, key, data.get(key))
    _kv(console, "duration", command.get("duration"))

    # Motor names need not be unique, so rows pair up with wheel speeds and
    # the bottleneck by position.
    speeds = [entry.get("max_speed") for entry in data.get("wheel_speeds", [])]
    table = Table(pad_edge=False)
    table.add_column("Motor", style="rover.name", no_wrap=True)
    table.add_column("Max speed", justify="right")
    table.add_column("Voltage", style="rover.number", justify="right")
    table.add_column("", style="rover.bottleneck")
    for i, motor in enumerate(command.get("motor_commands", [])):
        table.add_row(
            str(motor.get("name", "")),
            _fmt(speeds[i] if i < len(speeds) else None),
            _fmt(motor.get("voltage")),
            "bottleneck" if i == data.get("bottleneck_index") else "",
        )
    console.print(table)

    if data.get("submitted"):
        _kv(console, "response_status", data.get("response_status"))
        _kv(console, "response", data.get("response", ""))
    else:
        _kv(console, "submitted", "no (dry run)")


def _plain_body(console: Console, data: dict[str, Any]) -> None:
    for key, value in data.items():
        _kv(console, key, value)


_BODIES: dict[str, Callable[[Console, dict[str, Any]], None]] = {
    "health": _health_body,
    "rover_config": _rover_config_body,
    "exercise": _exercise_body,
    "fixed_distance": _fixed_distance_body,
}
