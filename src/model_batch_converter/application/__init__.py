"""Application-layer use-cases and result objects."""

from __future__ import annotations

from model_batch_converter.application.ports import ModelConverter
from model_batch_converter.application.results import (
    BatchReport,
    ConversionJob,
    ConversionOutcome,
)
from model_batch_converter.application.use_cases import (
    build_batch_config,
    convert_directory,
    plan_conversions,
    run_batch,
)

__all__ = [
    "ModelConverter",
    "BatchReport",
    "ConversionJob",
    "ConversionOutcome",
    "build_batch_config",
    "convert_directory",
    "plan_conversions",
    "run_batch",
]
