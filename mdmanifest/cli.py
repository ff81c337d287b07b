"""CLI entrypoint for merging markdown manifests."""

from pathlib import Path
from typing import Annotated

import typer
import yaml
from rich.console import Console
from rich.markup import escape

from . import __version__
from .config import MergeConfig, load_config
from .ingest import LoadedDocument, LoadFailure, merge_manifest_directory
from .manifests import write_merged_manifest

USAGE = "Usage: mdmanifest <manifest-dir> <output-file>"

console = Console(soft_wrap=True, emoji=False, highlight=False)
err_console = Console(stderr=True, soft_wrap=True, emoji=False, highlight=False)
app = typer.Typer(help="Merge markdown file manifests into a single JSON manifest.")


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"mdmanifest {__version__}")
        raise typer.Exit()


ManifestDirArgument = Annotated[
    Path | None,
    typer.Argument(help="Directory containing markdown manifest documents.", show_default=False),
]
OutputFileArgument = Annotated[
    Path | None,
    typer.Argument(help="Destination of the merged JSON manifest.", show_default=False),
]
ConfigPathOption = Annotated[
    str | None,
    typer.Option("--config", "-c", help="Path to an mdmanifest.yml configuration file."),
]
VersionFlag = Annotated[
    bool,
    typer.Option(
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Print the version and exit.",
    ),
]


@app.command()
def merge(
    manifest_dir: ManifestDirArgument = None,
    output_file: OutputFileArgument = None,
    config_path: ConfigPathOption = None,
    version: VersionFlag = False,
) -> None:
    """Merge every manifest document in MANIFEST_DIR into OUTPUT_FILE."""
    if manifest_dir is None or output_file is None:
        err_console.print(USAGE)
        raise typer.Exit(code=1)

    config = _load(config_path)

    try:
        result = merge_manifest_directory(
            manifest_dir,
            config,
            on_loaded=_print_loaded,
            on_failed=_print_failure,
        )
    except (FileNotFoundError, NotADirectoryError) as exc:
        err_console.print(f"[bold red]Manifest directory not found[/]: {escape(str(manifest_dir))}")
        raise typer.Exit(code=1) from exc

    write_merged_manifest(
        result.items,
        output_file,
        indent=config.indent,
        ensure_ascii=config.ensure_ascii,
    )
    console.print(
        f"[bold green]Merged[/] {result.file_count} manifest files → {result.item_count} total items"
    )


def _print_loaded(document: LoadedDocument) -> None:
    console.print(f"  • [green]Loaded[/] {escape(document.name)} ({len(document.items)} items)")


def _print_failure(failure: LoadFailure) -> None:
    err_console.print(
        f"[bold yellow]Warning[/]: Could not load {escape(failure.name)}: {escape(failure.message)}"
    )


def _load(path: str | None) -> MergeConfig:
    if path is None:
        return MergeConfig()
    try:
        return load_config(path)
    except FileNotFoundError as exc:
        raise typer.BadParameter(f"Config file not found: {path}") from exc
    except (ValueError, yaml.YAMLError) as exc:
        raise typer.BadParameter(str(exc)) from exc
