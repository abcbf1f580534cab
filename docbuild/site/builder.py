"""Publishing of the output directory."""

from __future__ import annotations

import logging
from pathlib import Path

from ..core.errors import MissingSourceError, OutputWriteError
from ..core.models import BuildResult, EntryKind, SourceEntry
from ..rendering import engine
from ..settings import BuildSettings
from .discovery import check_output_names, discover_entries, partial_index
from .io import atomic_write_text, copy_verbatim, empty_directory

logger = logging.getLogger(__name__)


def clean(output_dir: Path) -> None:
    """Delete every entry under the output directory, keeping the directory.

    Args:
        output_dir: Output root; created when missing
    """
    for removed in empty_directory(output_dir):
        logger.debug(f"Removed stale output: {removed}")


def copy_assets(source_assets_dir: Path, output_dir: Path) -> Path:
    """Copy the asset subtree verbatim into the output directory.

    Args:
        source_assets_dir: Asset directory in the source root
        output_dir: Output root

    Returns:
        Path of the published asset directory
    """
    if not source_assets_dir.is_dir():
        raise MissingSourceError(source_assets_dir, "Asset directory")

    destination = copy_verbatim(
        source_assets_dir, output_dir / source_assets_dir.name
    )
    logger.info(f"Copied assets {source_assets_dir} → {destination}")
    return destination


def check(settings: BuildSettings) -> list[SourceEntry]:
    """Render every template in memory without touching the output directory.

    Args:
        settings: Build settings

    Returns:
        The template entries that rendered successfully
    """
    entries = discover_entries(settings.source_dir, settings)
    check_output_names(entries, settings)
    env = engine.create_environment(settings, partial_index(entries, settings))

    templates = [entry for entry in entries if entry.kind is EntryKind.TEMPLATE]
    for entry in templates:
        engine.render(env, entry)
        logger.info(f"OK {entry.path}")

    return templates


def publish(settings: BuildSettings) -> BuildResult:
    """Rebuild the output directory from the source root.

    Cleans the output, copies the assets, renders every template and copies
    every plain entry. The first error aborts the run; whatever was written
    before it is left in place.

    Args:
        settings: Build settings

    Returns:
        Summary of what was written
    """
    source_dir = settings.source_dir
    output_dir = settings.output_dir
    logger.info(f"Building {source_dir} → {output_dir}")

    # Cleaning an output root that holds the sources would delete them
    resolved_source = source_dir.resolve()
    if resolved_source.is_relative_to(output_dir.resolve()):
        raise OutputWriteError(
            output_dir, f"refusing to clean a directory containing {source_dir}"
        )

    entries = [
        entry
        for entry in discover_entries(source_dir, settings)
        if entry.path.resolve() != output_dir.resolve()
    ]
    check_output_names(entries, settings)

    clean(output_dir)
    result = BuildResult(assets=copy_assets(settings.asset_source, output_dir))

    env = engine.create_environment(settings, partial_index(entries, settings))

    for entry in entries:
        if entry.kind is EntryKind.TEMPLATE:
            logger.debug(f"Parsing as template: {entry.path}")
            text = engine.render(env, entry)
            destination = output_dir / entry.output_name
            atomic_write_text(destination, text, mode=settings.file_mode)
            logger.info(f"Rendered {entry.path} → {destination}")
            result.rendered.append(destination)
        elif entry.kind is EntryKind.PLAIN:
            result.copied.append(
                copy_verbatim(entry.path, output_dir / entry.output_name)
            )
            logger.info(f"Copied file {entry.path}")
        else:
            logger.debug(f"Skipping partial: {entry.path}")
            result.skipped_partials.append(entry.logical_name)

    logger.info(f"Successfully published {result.total} file(s) to {output_dir}")
    return result
