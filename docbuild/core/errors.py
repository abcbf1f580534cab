"""Build errors. Every error is fatal for the whole run."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence


class BuildError(Exception):
    """Base class for errors that abort a build."""


class MissingSourceError(BuildError):
    """Raised when the source root or the asset directory does not exist."""

    def __init__(self, path: Path, what: str = "Source") -> None:
        self.path = path
        super().__init__(f"{what} not found: {path}")


class SourceReadError(BuildError):
    """Raised when a source file cannot be read or decoded."""

    def __init__(self, path: Path | str, reason: str) -> None:
        self.path = path
        super().__init__(f"Cannot read {path}: {reason}")


class OutputWriteError(BuildError):
    """Raised when the output directory cannot be written."""

    def __init__(self, path: Path | str, reason: str) -> None:
        self.path = path
        super().__init__(f"Cannot write {path}: {reason}")


class DirectiveError(BuildError):
    """Base class for errors found while evaluating template directives."""

    def __init__(self, filename: str | None, message: str) -> None:
        self.filename = filename
        self.message = message
        super().__init__(f"{filename or '<unknown>'}: {message}")


class DirectiveSyntaxError(DirectiveError):
    """Raised for malformed template syntax or a malformed partial call."""

    def __init__(
        self, filename: str | None, message: str, lineno: int | None = None
    ) -> None:
        self.lineno = lineno
        location = filename if lineno is None else f"{filename}:{lineno}"
        super().__init__(location, f"syntax error: {message}")
        self.filename = filename


class UnresolvedPartialError(DirectiveError):
    """Raised when a directive names a partial that was not discovered."""

    def __init__(self, filename: str | None, name: str, expected: Path) -> None:
        self.name = name
        self.expected = expected
        super().__init__(filename, f"partial {name!r} not found (expected {expected})")


class CircularPartialError(DirectiveError):
    """Raised when a partial includes itself, directly or transitively."""

    def __init__(self, filename: str | None, chain: Sequence[str]) -> None:
        self.chain = list(chain)
        super().__init__(filename, "circular partial inclusion: " + " -> ".join(chain))


class RenderError(DirectiveError):
    """Raised for any other failure while evaluating a template."""


class OutputCollisionError(BuildError):
    """Raised when two source entries would publish to the same output path."""

    def __init__(self, output_name: str, first: Path, second: Path) -> None:
        self.output_name = output_name
        self.sources = (first, second)
        super().__init__(f"{first} and {second} both publish to {output_name!r}")
