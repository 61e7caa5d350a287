"""Pydantic schemas for runtime validation of batch settings."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, field_validator

DEFAULT_INPUT_DIR = Path("./assets/fbx_files/")
DEFAULT_OUTPUT_DIR = Path("./assets/alt_models/")
DEFAULT_SOURCE_EXTENSION = ".fbx"
DEFAULT_TARGET_EXTENSION = ".glb"
DEFAULT_CONVERTER_FLAGS: tuple[str, ...] = ("--khr-materials-unlit",)


class BatchConversionConfig(BaseModel):
    """Validated settings for one batch run.

    Parameters
    ----------
    input_dir : Path
        Directory whose direct entries are scanned for source files.
    output_dir : Path
        Directory receiving converted files. Assumed to exist.
    source_extension : str
        Suffix selecting input files, matched case-sensitively.
    target_extension : str
        Suffix of the converted output files.
    converter_flags : tuple[str, ...]
        Flags passed verbatim to the external converter.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    input_dir: Path = DEFAULT_INPUT_DIR
    output_dir: Path = DEFAULT_OUTPUT_DIR
    source_extension: str = DEFAULT_SOURCE_EXTENSION
    target_extension: str = DEFAULT_TARGET_EXTENSION
    converter_flags: tuple[str, ...] = DEFAULT_CONVERTER_FLAGS

    @field_validator("source_extension", "target_extension")
    @classmethod
    def _validate_extension(cls, value: str) -> str:
        if not value.startswith("."):
            raise ValueError("extensions must start with '.'.")
        if len(value) < 2:
            raise ValueError("extensions cannot be empty.")
        if "." in value[1:] or "/" in value or "\\" in value:
            raise ValueError("extensions must be a single suffix such as '.fbx'.")
        return value

    @field_validator("converter_flags")
    @classmethod
    def _validate_flags(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        if any(not item.strip() for item in value):
            raise ValueError("converter flags cannot contain empty entries.")
        return value
