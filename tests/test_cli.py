from __future__ import annotations

from pathlib import Path

import pytest
from typer.testing import CliRunner

from docbuild.cli import app
from docbuild.settings import BuildSettings
from tests.helpers import write

runner = CliRunner()


def _args(settings: BuildSettings) -> list[str]:
    return ["--source", str(settings.source_dir), "--output", str(settings.output_dir)]


def test_build_succeeds(settings: BuildSettings) -> None:
    result = runner.invoke(app, ["build", *_args(settings)])

    assert result.exit_code == 0, result.output
    assert (settings.output_dir / "README.md").exists()
    assert (settings.output_dir / "assets" / "style.css").exists()


def test_build_uses_environment(
    settings: BuildSettings, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("DOCBUILD_SOURCE_DIR", str(settings.source_dir))
    monkeypatch.setenv("DOCBUILD_OUTPUT_DIR", str(settings.output_dir))

    result = runner.invoke(app, ["build"])

    assert result.exit_code == 0, result.output
    assert (settings.output_dir / "notes.md").exists()


def test_build_fails_on_missing_partial(settings: BuildSettings) -> None:
    write(settings.source_dir / "broken.md.j2", '{{ partial("absent") }}')

    result = runner.invoke(app, ["build", *_args(settings)])

    assert result.exit_code == 1
    assert not (settings.output_dir / "broken.md").exists()


def test_build_fails_on_missing_source(tmp_path: Path) -> None:
    result = runner.invoke(
        app,
        ["build", "--source", str(tmp_path / "nope"), "--output", str(tmp_path / "o")],
    )

    assert result.exit_code == 1


def test_build_rejects_bad_mode(settings: BuildSettings) -> None:
    result = runner.invoke(app, ["build", *_args(settings), "--mode", "9x"])

    assert result.exit_code == 2


def test_build_rejects_bad_suffix(settings: BuildSettings) -> None:
    result = runner.invoke(
        app, ["build", *_args(settings), "--template-suffix", "j2"]
    )

    assert result.exit_code == 2


def test_build_with_custom_conventions(tmp_path: Path) -> None:
    source = tmp_path / "src"
    write(source / "static" / "logo.svg", "<svg/>")
    write(source / "index.md.erb", '{{ partial("intro") }}\n')
    write(source / "~intro.erb", "Welcome")

    result = runner.invoke(
        app,
        [
            "build",
            "--source",
            str(source),
            "--output",
            str(tmp_path / "site"),
            "--asset-dir",
            "static",
            "--partial-prefix",
            "~",
            "--template-suffix",
            ".erb",
        ],
    )

    assert result.exit_code == 0, result.output
    assert (tmp_path / "site" / "index.md").read_text() == "Welcome\n"
    assert (tmp_path / "site" / "static" / "logo.svg").exists()


def test_check_command(settings: BuildSettings) -> None:
    result = runner.invoke(app, ["check", "--source", str(settings.source_dir)])

    assert result.exit_code == 0, result.output
    assert not settings.output_dir.exists()


def test_check_command_fails_on_syntax_error(settings: BuildSettings) -> None:
    write(settings.source_dir / "bad.md.j2", "{{ partial(")

    result = runner.invoke(app, ["check", "--source", str(settings.source_dir)])

    assert result.exit_code == 1
