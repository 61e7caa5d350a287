"""Application use-cases orchestrating batch conversion."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence
from pathlib import Path

from pydantic import ValidationError

from model_batch_converter.application.ports import ModelConverter
from model_batch_converter.application.results import (
    BatchReport,
    ConversionJob,
    ConversionOutcome,
)
from model_batch_converter.errors import (
    ConfigurationError,
    ConversionError,
    DirectoryListError,
)
from model_batch_converter.schemas import BatchConversionConfig

logger = logging.getLogger(__name__)


def build_batch_config(
    *,
    input_dir: Path | None = None,
    output_dir: Path | None = None,
    source_extension: str | None = None,
    target_extension: str | None = None,
    converter_flags: Sequence[str] | None = None,
) -> BatchConversionConfig:
    """Build validated batch settings, falling back to defaults for omitted fields."""
    fields: dict[str, object] = {}
    if input_dir is not None:
        fields["input_dir"] = input_dir
    if output_dir is not None:
        fields["output_dir"] = output_dir
    if source_extension is not None:
        fields["source_extension"] = source_extension
    if target_extension is not None:
        fields["target_extension"] = target_extension
    if converter_flags is not None:
        fields["converter_flags"] = tuple(converter_flags)
    try:
        return BatchConversionConfig(**fields)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid batch settings: {exc}") from exc


def output_path_for(source: Path, config: BatchConversionConfig) -> Path:
    """Derive the output path: output dir + source base name + target extension."""
    return config.output_dir / f"{source.stem}{config.target_extension}"


def plan_conversions(config: BatchConversionConfig) -> list[ConversionJob]:
    """List the input directory and plan one job per matching entry.

    The listing is not recursive and the extension match is case-sensitive.

    Raises
    ------
    DirectoryListError
        If the input directory cannot be listed.
    """
    try:
        entries = sorted(config.input_dir.iterdir())
    except OSError as exc:
        raise DirectoryListError(config.input_dir, exc.strerror or str(exc)) from exc

    jobs: list[ConversionJob] = []
    for entry in entries:
        if entry.suffix != config.source_extension:
            logger.debug("skipping %s", entry)
            continue
        jobs.append(
            ConversionJob(input_path=entry, output_path=output_path_for(entry, config))
        )
    return jobs


def _single_line(exc: BaseException) -> str:
    return " | ".join(line.strip() for line in str(exc).splitlines() if line.strip())


async def _convert_one(
    job: ConversionJob,
    converter: ModelConverter,
    flags: Sequence[str],
) -> ConversionOutcome:
    try:
        dest = await converter.convert(job.input_path, job.output_path, list(flags))
    except ConversionError as exc:
        logger.error("Conversion failed: %s: %s", job.input_path, _single_line(exc))
        return ConversionOutcome(job=job, error=exc)
    except Exception as exc:
        logger.error(
            "Conversion failed: %s: %s: %s",
            job.input_path,
            type(exc).__name__,
            _single_line(exc),
        )
        logger.debug("traceback for %s", job.input_path, exc_info=exc)
        return ConversionOutcome(job=job, error=exc)
    logger.info("Conversion successful! Output file: %s", dest)
    return ConversionOutcome(job=job, output_path=dest)


async def run_batch(
    config: BatchConversionConfig,
    converter: ModelConverter,
) -> BatchReport:
    """Use-case: convert every matching file in the input directory.

    All conversions are launched before any of them is awaited, and the
    coroutine returns only once every one of them has settled. A failed
    conversion is logged and recorded without affecting the others.
    """
    jobs = plan_conversions(config)
    if not jobs:
        logger.info(
            "No %s files found in %s", config.source_extension, config.input_dir
        )
        return BatchReport()

    tasks = [
        asyncio.create_task(_convert_one(job, converter, config.converter_flags))
        for job in jobs
    ]
    outcomes = await asyncio.gather(*tasks)
    report = BatchReport(outcomes=tuple(outcomes))
    logger.debug(
        "batch finished: %d succeeded, %d failed",
        len(report.succeeded),
        len(report.failed),
    )
    return report


def convert_directory(
    config: BatchConversionConfig | None = None,
    converter: ModelConverter | None = None,
) -> BatchReport:
    """Run a batch to completion from synchronous code."""
    if converter is None:
        from model_batch_converter.adapters.converters import Fbx2GltfConverter

        converter = Fbx2GltfConverter()
    return asyncio.run(run_batch(config or BatchConversionConfig(), converter))
