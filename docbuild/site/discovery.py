"""Classification of source entries."""

from __future__ import annotations

import logging
from pathlib import Path

from ..core.errors import MissingSourceError, OutputCollisionError, SourceReadError
from ..core.models import EntryKind, SourceEntry
from ..settings import BuildSettings

logger = logging.getLogger(__name__)


def _strip_suffix(name: str, suffix: str) -> str:
    return name[: -len(suffix)] if name.endswith(suffix) else name


def _strip_prefix(name: str, prefix: str) -> str:
    return name[len(prefix) :] if name.startswith(prefix) else name


def classify(path: Path, settings: BuildSettings) -> SourceEntry:
    """Classify a single direct child of the source root.

    Args:
        path: Path of the entry
        settings: Naming conventions to apply

    Returns:
        Source entry with its kind and derived names
    """
    name = path.name

    if name == settings.asset_dir_name and path.is_dir():
        kind = EntryKind.ASSET_DIRECTORY
    elif name.startswith(settings.partial_prefix):
        kind = EntryKind.PARTIAL
    elif name.endswith(settings.template_suffix) and path.is_file():
        kind = EntryKind.TEMPLATE
    else:
        kind = EntryKind.PLAIN

    output_name = name
    if kind in (EntryKind.TEMPLATE, EntryKind.PARTIAL):
        output_name = _strip_suffix(name, settings.template_suffix)

    logical_name = output_name
    if kind is EntryKind.PARTIAL:
        logical_name = _strip_prefix(output_name, settings.partial_prefix)

    return SourceEntry(
        path=path, kind=kind, logical_name=logical_name, output_name=output_name
    )


def discover_entries(source_dir: Path, settings: BuildSettings) -> list[SourceEntry]:
    """List classified entries directly under the source root.

    The asset directory is left out; it is published by ``copy_assets``.

    Args:
        source_dir: Source root
        settings: Naming conventions to apply

    Returns:
        Entries sorted by name
    """
    if not source_dir.is_dir():
        raise MissingSourceError(source_dir, "Source directory")

    try:
        children = sorted(source_dir.iterdir(), key=lambda p: p.name)
    except OSError as exc:
        raise SourceReadError(source_dir, exc.strerror or str(exc)) from exc

    entries: list[SourceEntry] = []
    for child in children:
        if child.name.startswith(".") and not settings.include_hidden:
            logger.debug(f"Ignoring hidden entry: {child}")
            continue
        entry = classify(child, settings)
        if entry.kind is EntryKind.ASSET_DIRECTORY:
            continue
        entries.append(entry)

    logger.debug(f"Discovered {len(entries)} source entries in {source_dir}")
    return entries


def partial_index(
    entries: list[SourceEntry], settings: BuildSettings
) -> dict[str, SourceEntry]:
    """Map logical names to the partials that are includable by name."""
    return {
        entry.logical_name: entry
        for entry in entries
        if entry.kind is EntryKind.PARTIAL
        and entry.name.endswith(settings.template_suffix)
        and entry.path.is_file()
    }


def check_output_names(entries: list[SourceEntry], settings: BuildSettings) -> None:
    """Fail when two publishable entries map to the same output name.

    The asset directory's name is reserved as well.
    """
    claimed: dict[str, Path] = {}
    if settings.asset_source.is_dir():
        claimed[settings.asset_dir_name] = settings.asset_source

    for entry in entries:
        if entry.kind not in (EntryKind.TEMPLATE, EntryKind.PLAIN):
            continue
        previous = claimed.get(entry.output_name)
        if previous is not None:
            raise OutputCollisionError(entry.output_name, previous, entry.path)
        claimed[entry.output_name] = entry.path
