#!/usr/bin/env python3
"""
model_batch_converter.cli.cli

Typer-based CLI that converts every FBX file in a directory to GLB.

Run without arguments to convert ``./assets/fbx_files/*.fbx`` into
``./assets/alt_models/*.glb`` using ``FBX2glTF --khr-materials-unlit``:

    convert-models

Every setting can be overridden on the command line or via environment:

    convert-models --input-dir models/ --output-dir out/ --flag --khr-materials-unlit
    BATCH_INPUT_DIR=models/ convert-models --dry-run
"""

from __future__ import annotations

import logging
import sys
import traceback
from pathlib import Path

import typer

from model_batch_converter.errors import BatchConverterError

app = typer.Typer(
    name="convert-models",
    help="Batch-convert 3D model files (FBX -> GLB by default) with FBX2glTF.",
)

_LOG_HANDLER_NAME = "model-batch-converter-cli"


def _configure_logging(verbose: bool) -> None:
    """Route package log records to the console, one line per record.

    Records below WARNING go to stdout; warnings and errors go to stderr.
    """
    package_logger = logging.getLogger("model_batch_converter")
    for handler in list(package_logger.handlers):
        if handler.get_name() == _LOG_HANDLER_NAME:
            package_logger.removeHandler(handler)

    formatter = logging.Formatter("%(message)s")
    out_handler = logging.StreamHandler(sys.stdout)
    out_handler.addFilter(lambda record: record.levelno < logging.WARNING)
    err_handler = logging.StreamHandler(sys.stderr)
    err_handler.setLevel(logging.WARNING)
    for handler in (out_handler, err_handler):
        handler.set_name(_LOG_HANDLER_NAME)
        handler.setFormatter(formatter)
        package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG if verbose else logging.INFO)


def _print_batch_error(exc: Exception, debug: bool) -> int:
    """Print a user-friendly batch error.

    Parameters
    ----------
    exc : Exception
        Exception raised before or while starting the batch.
    debug : bool
        Whether to include traceback details.

    Returns
    -------
    int
        Process exit code.
    """
    typer.secho(f"✗ {type(exc).__name__}: {exc}", fg=typer.colors.RED, err=True)
    if debug:
        typer.echo("\nTraceback:", err=True)
        typer.echo("".join(traceback.format_exception(type(exc), exc, exc.__traceback__)), err=True)
    code = getattr(exc, "exit_code", None)
    if isinstance(code, int) and code > 0:
        return code
    return 1


@app.callback(invoke_without_command=True)
def _main(
    ctx: typer.Context,
    input_dir: Path | None = typer.Option(
        None,
        "--input-dir",
        envvar="BATCH_INPUT_DIR",
        help="Directory scanned for source models. [default: ./assets/fbx_files/]",
    ),
    output_dir: Path | None = typer.Option(
        None,
        "--output-dir",
        envvar="BATCH_OUTPUT_DIR",
        help="Existing directory for converted models. [default: ./assets/alt_models/]",
    ),
    source_ext: str | None = typer.Option(
        None, "--source-ext", help="Source extension, case-sensitive. [default: .fbx]"
    ),
    target_ext: str | None = typer.Option(
        None, "--target-ext", help="Target extension (.glb or .gltf). [default: .glb]"
    ),
    flags: list[str] | None = typer.Option(
        None,
        "--flag",
        help="Converter flag (repeatable). Replaces the default --khr-materials-unlit.",
    ),
    converter_bin: Path | None = typer.Option(
        None,
        "--converter-bin",
        envvar="FBX2GLTF_BIN",
        help="Path to the FBX2glTF executable. [default: looked up on PATH]",
    ),
    dry_run: bool = typer.Option(
        False, "--dry-run", help="List planned conversions without running them."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging."),
    debug: bool = typer.Option(False, "--debug", help="Show full tracebacks on error."),
) -> None:
    """Convert every matching file in the input directory.

    Exits 0 once processing has started, even if individual conversions
    fail; exits 1 if the input directory cannot be listed.
    """
    ctx.obj = {"debug": debug}
    if ctx.invoked_subcommand is not None:
        return

    _configure_logging(verbose)

    try:
        if dry_run:
            from model_batch_converter.api import list_planned_conversions

            jobs = list_planned_conversions(
                input_dir=input_dir,
                output_dir=output_dir,
                target_extension=target_ext,
                source_extension=source_ext,
            )
            for job in jobs:
                typer.echo(f"{job.input_path} -> {job.output_path}")
            typer.echo(f"{len(jobs)} conversion(s) planned.")
            return

        from model_batch_converter.adapters.converters import Fbx2GltfConverter
        from model_batch_converter.api import convert_models

        report = convert_models(
            input_dir=input_dir,
            output_dir=output_dir,
            target_extension=target_ext,
            source_extension=source_ext,
            converter_flags=flags or None,
            converter=Fbx2GltfConverter(binary=converter_bin),
        )
    except BatchConverterError as exc:
        raise typer.Exit(code=_print_batch_error(exc, debug))

    if report.total:
        typer.echo(f"✓ {len(report.succeeded)} of {report.total} file(s) converted.")


@app.command("doctor")
def doctor_cmd() -> None:
    """Print installed toolchain versions and the FBX2glTF location."""
    import importlib.metadata as metadata

    from model_batch_converter.adapters.converters import resolve_fbx2gltf_binary
    from model_batch_converter.errors import ConverterNotFoundError

    typer.echo(f"Python: {sys.version.split()[0]}")
    for module in ("model-batch-converter", "pydantic", "typer"):
        try:
            version = metadata.version(module)
            typer.echo(f"{module}: {version}")
        except metadata.PackageNotFoundError:
            typer.echo(f"{module}: <not installed>")

    try:
        typer.echo(f"FBX2glTF: {resolve_fbx2gltf_binary()}")
    except ConverterNotFoundError:
        typer.echo("FBX2glTF: <not found>")


if __name__ == "__main__":
    app()
