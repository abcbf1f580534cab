from __future__ import annotations

import os
from pathlib import Path

import pytest

from docbuild.settings import BuildSettings
from tests.helpers import (
    FOOTNOTE_PARTIAL,
    HAS_MANY_PARTIAL,
    PLAIN_NOTES,
    PNG_BYTES,
    README_TEMPLATE,
    write,
)


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in list(os.environ):
        if key.upper().startswith("DOCBUILD_"):
            monkeypatch.delenv(key)


@pytest.fixture
def source_dir(tmp_path: Path) -> Path:
    source = tmp_path / "source"
    write(source / "assets" / "images" / "diagram.png", PNG_BYTES)
    write(source / "assets" / "style.css", "body { margin: 0; }\n")
    write(source / "README.md.j2", README_TEMPLATE)
    write(source / "_has_many.j2", HAS_MANY_PARTIAL)
    write(source / "_footnote.j2", FOOTNOTE_PARTIAL)
    write(source / "notes.md", PLAIN_NOTES)
    return source


@pytest.fixture
def settings(tmp_path: Path, source_dir: Path) -> BuildSettings:
    return BuildSettings(source_dir=source_dir, output_dir=tmp_path / "dist")
