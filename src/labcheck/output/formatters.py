"""Rich/JSON output helpers.

The CLI renders ServiceResult for humans (Rich output, colors) or
machines (--json). The formatter layer adapts ServiceResult to the
requested output mode.
"""

from __future__ import annotations

import json as _json
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from rich.text import Text

from labcheck.output.console import create_console, get_output, style_for_value

if TYPE_CHECKING:
    from labcheck.services.result import ServiceResult

# Key printed on its own in --quiet mode, per operation.
PRIMARY_KEYS: dict[str, str] = {
    "check_email": "valid",
    "require_text": "text",
    "check_palindrome": "palindrome",
    "compute_tax": "total",
    "calculate": "result",
}


@dataclass(frozen=True)
class OutputSettings:
    """How a ServiceResult should be rendered."""

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    decimals: int = 2


def format_value(value: Any, *, decimals: int = 2) -> str:
    """Render a single data value; floats are rounded for display only."""
    if isinstance(value, bool):
        return str(value)
    if isinstance(value, float):
        return f"{value:.{decimals}f}"
    if isinstance(value, (dict, list)):
        return _json.dumps(value, separators=(",", ":"))
    if value is None:
        return "null"
    return str(value)


def _format_quiet(result: ServiceResult, settings: OutputSettings) -> str:
    if not result.ok:
        return result.error.message if result.error else "Unknown error"
    key = PRIMARY_KEYS.get(result.op)
    if key is None or key not in result.data:
        return ""
    return format_value(result.data[key], decimals=settings.decimals)


def _format_human(result: ServiceResult, settings: OutputSettings) -> str:
    console = create_console()
    if not result.ok:
        line = Text()
        line.append("ERROR", style="lab.error")
        line.append(": ")
        line.append(result.op, style="lab.op")
        error_msg = result.error.message if result.error else "Unknown error"
        line.append(f" - {error_msg}")
        console.print(line)
        if settings.verbose and result.error and result.error.detail:
            for key, value in result.error.detail.items():
                console.print(Text(f"  {key}: {format_value(value)}", style="lab.key"))
        return get_output(console).rstrip("\n")

    header = Text()
    header.append("OK", style="lab.ok")
    header.append(": ")
    header.append(result.op, style="lab.op")
    console.print(header)
    for key, value in result.data.items():
        line = Text(f"  {key}: ", style="lab.key")
        line.append(format_value(value, decimals=settings.decimals), style=style_for_value(value))
        console.print(line)
    if settings.verbose and result.meta:
        console.print(Text(f"  meta: {format_value(result.meta)}", style="lab.key"))
    return get_output(console).rstrip("\n")


def format_result(
    result: ServiceResult,
    *,
    settings: OutputSettings | None = None,
    json_output: bool = False,
) -> str:
    """Format a ServiceResult for display.

    Args:
        result: The service result to format.
        settings: Output mode. When given, *json_output* is ignored.
        json_output: Shortcut for ``OutputSettings(json_output=True)``.
    """
    if settings is None:
        settings = OutputSettings(json_output=json_output)
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return _format_quiet(result, settings)
    return _format_human(result, settings)
