"""Filesystem operations used while publishing.

Every helper turns ``OSError`` into a ``BuildError`` that names the path
involved, so the CLI can report it and stop.
"""

from __future__ import annotations

import os
import shutil
import tempfile
from pathlib import Path
from shutil import copy2, copytree

from ..core.errors import OutputWriteError, SourceReadError


def _reason(exc: OSError) -> str:
    return exc.strerror or str(exc)


def empty_directory(path: Path) -> list[Path]:
    """Remove every child of ``path``, creating ``path`` if needed.

    Returns:
        The removed entries
    """
    removed: list[Path] = []
    try:
        path.mkdir(parents=True, exist_ok=True)
        for child in sorted(path.iterdir()):
            if child.is_dir() and not child.is_symlink():
                shutil.rmtree(child)
            else:
                child.unlink()
            removed.append(child)
    except OSError as exc:
        raise OutputWriteError(path, _reason(exc)) from exc
    return removed


def atomic_write_text(path: Path, text: str, mode: int = 0o644) -> None:
    """Write text to a file atomically using a temporary file.

    Args:
        path: Destination file path
        text: Text content to write
        mode: File permissions (octal)
    """
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", dir=str(path.parent))
    except OSError as exc:
        raise OutputWriteError(path, _reason(exc)) from exc

    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as tmp:
            tmp.write(text)
            tmp.flush()
            os.fsync(tmp.fileno())
        os.replace(tmp_name, path)
        os.chmod(path, mode)
    except OSError as exc:
        raise OutputWriteError(path, _reason(exc)) from exc
    finally:
        Path(tmp_name).unlink(missing_ok=True)


def copy_verbatim(source: Path, destination: Path) -> Path:
    """Copy a file or a whole directory tree byte for byte.

    Existing directories at ``destination`` are merged into.

    Returns:
        ``destination``
    """
    try:
        if source.is_dir():
            copytree(source, destination, dirs_exist_ok=True)
        else:
            copy2(source, destination)
    except shutil.Error as exc:
        # copytree collects per-file failures as (src, dst, reason) tuples
        failed_src, failed_dst, reason = exc.args[0][0]
        if not os.access(failed_src, os.R_OK):
            raise SourceReadError(failed_src, reason) from exc
        raise OutputWriteError(failed_dst, reason) from exc
    except OSError as exc:
        if str(exc.filename) == str(source):
            raise SourceReadError(source, _reason(exc)) from exc
        raise OutputWriteError(destination, _reason(exc)) from exc
    return destination
