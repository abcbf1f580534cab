"""CLI argument parsers and validators."""

from __future__ import annotations

from typing import Any

import typer
from pydantic import ValidationError

from ..settings import BuildSettings


def parse_file_mode(value: str) -> int:
    """Parse octal file mode string."""
    try:
        return int(value, 8)
    except ValueError as e:
        raise typer.BadParameter(f"Invalid octal mode: {value!r}") from e


def build_settings(**overrides: Any) -> BuildSettings:
    """Create settings, letting non-empty CLI values override the environment."""
    values = {key: value for key, value in overrides.items() if value not in (None, "")}
    try:
        return BuildSettings(**values)
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(map(str, err['loc']))}: {err['msg']}" for err in e.errors()
        )
        raise typer.BadParameter(problems) from e
