"""Domain models for source discovery and build results."""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field

RenderContext = Mapping[str, Any]

EMPTY_CONTEXT: RenderContext = MappingProxyType({})


def freeze_context(context: Mapping[str, Any] | None) -> RenderContext:
    """Return a read-only copy of a rendering context."""
    if not context:
        return EMPTY_CONTEXT
    return MappingProxyType(dict(context))


class EntryKind(str, Enum):
    """Classification of a direct child of the source root."""

    ASSET_DIRECTORY = "asset_directory"
    PARTIAL = "partial"
    TEMPLATE = "template"
    PLAIN = "plain"


class SourceEntry(BaseModel):
    """A classified source path with its derived names."""

    model_config = ConfigDict(frozen=True)

    path: Path = Field(..., description="Absolute or source-relative path")
    kind: EntryKind = Field(..., description="Classification computed at discovery")
    logical_name: str = Field(
        ..., description="Name used to reference the entry from directives"
    )
    output_name: str = Field(..., description="File name under the output root")

    @property
    def name(self) -> str:
        return self.path.name


class BuildResult(BaseModel):
    """Paths produced by a single publish run."""

    rendered: list[Path] = Field(default_factory=list, description="Rendered templates")
    copied: list[Path] = Field(default_factory=list, description="Copied plain entries")
    assets: Path | None = Field(default=None, description="Published asset subtree")
    skipped_partials: list[str] = Field(
        default_factory=list, description="Partials not published directly"
    )

    @property
    def total(self) -> int:
        return len(self.rendered) + len(self.copied)
