"""Public batch conversion API (delegates to application use-cases)."""

from __future__ import annotations

from pathlib import Path
from typing import Optional
from typing import Sequence

from model_batch_converter.application.ports import ModelConverter
from model_batch_converter.application.results import BatchReport
from model_batch_converter.application.results import ConversionJob
from model_batch_converter.application.use_cases import build_batch_config
from model_batch_converter.application.use_cases import convert_directory
from model_batch_converter.application.use_cases import plan_conversions


def convert_models(
    input_dir: Optional[Path] = None,
    output_dir: Optional[Path] = None,
    target_extension: Optional[str] = None,
    source_extension: Optional[str] = None,
    converter_flags: Optional[Sequence[str]] = None,
    converter: Optional[ModelConverter] = None,
) -> BatchReport:
    """Convert every matching file in ``input_dir`` and wait for all results."""
    config = build_batch_config(
        input_dir=input_dir,
        output_dir=output_dir,
        source_extension=source_extension,
        target_extension=target_extension,
        converter_flags=converter_flags,
    )
    return convert_directory(config, converter)


def list_planned_conversions(
    input_dir: Optional[Path] = None,
    output_dir: Optional[Path] = None,
    target_extension: Optional[str] = None,
    source_extension: Optional[str] = None,
) -> list[ConversionJob]:
    """Return the conversions a batch would issue, without running any."""
    config = build_batch_config(
        input_dir=input_dir,
        output_dir=output_dir,
        source_extension=source_extension,
        target_extension=target_extension,
    )
    return plan_conversions(config)
