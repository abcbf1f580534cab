"""Main CLI application."""

from __future__ import annotations

import logging

import typer
from typing_extensions import Annotated

from ..core.errors import BuildError
from ..site import builder
from .parsers import build_settings, parse_file_mode

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="docbuild",
    help="Render templated Markdown documents and publish them with their assets.",
)

SourceOption = Annotated[
    str,
    typer.Option(
        "--source",
        help="Source directory (default: source, or DOCBUILD_SOURCE_DIR).",
        metavar="DIR",
    ),
]
AssetDirOption = Annotated[
    str,
    typer.Option(
        "--asset-dir",
        help="Name of the asset subdirectory copied verbatim (default: assets).",
        metavar="NAME",
    ),
]
PartialPrefixOption = Annotated[
    str,
    typer.Option(
        "--partial-prefix",
        help="Leading prefix marking partial documents (default: _).",
        metavar="PREFIX",
    ),
]
TemplateSuffixOption = Annotated[
    str,
    typer.Option(
        "--template-suffix",
        help="Suffix marking template documents, stripped on output (default: .j2).",
        metavar="SUFFIX",
    ),
]
VerboseOption = Annotated[
    bool,
    typer.Option(
        "--verbose",
        "-v",
        help="Enable verbose logging.",
    ),
]


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="[%(levelname)s] %(message)s",
    )


@app.command()
def build(
    source: SourceOption = "",
    output: Annotated[
        str,
        typer.Option(
            "--output",
            help="Output directory, rebuilt on every run (default: dist).",
            metavar="DIR",
        ),
    ] = "",
    asset_dir: AssetDirOption = "",
    partial_prefix: PartialPrefixOption = "",
    template_suffix: TemplateSuffixOption = "",
    file_mode: Annotated[
        str,
        typer.Option(
            "--mode",
            help="Permissions of rendered files in octal (default: 0644).",
            metavar="OCTAL",
        ),
    ] = "",
    verbose: VerboseOption = False,
) -> None:
    """Rebuild the output directory from the source directory."""
    _configure_logging(verbose)

    settings = build_settings(
        source_dir=source,
        output_dir=output,
        asset_dir_name=asset_dir,
        partial_prefix=partial_prefix,
        template_suffix=template_suffix,
        file_mode=parse_file_mode(file_mode) if file_mode else None,
    )
    logger.debug(f"Settings: {settings.model_dump()}")

    try:
        result = builder.publish(settings)
    except BuildError as exc:
        logger.error(str(exc))
        raise typer.Exit(code=1) from exc

    logger.debug(
        f"Completed: {len(result.rendered)} rendered, {len(result.copied)} copied"
    )


@app.command()
def check(
    source: SourceOption = "",
    asset_dir: AssetDirOption = "",
    partial_prefix: PartialPrefixOption = "",
    template_suffix: TemplateSuffixOption = "",
    verbose: VerboseOption = False,
) -> None:
    """Render every template in memory and report directive errors."""
    _configure_logging(verbose)

    settings = build_settings(
        source_dir=source,
        asset_dir_name=asset_dir,
        partial_prefix=partial_prefix,
        template_suffix=template_suffix,
    )

    try:
        templates = builder.check(settings)
    except BuildError as exc:
        logger.error(str(exc))
        raise typer.Exit(code=1) from exc

    logger.info(f"{len(templates)} template(s) render cleanly")


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
