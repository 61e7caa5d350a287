"""Domain errors raised by the batch converter."""

from __future__ import annotations

from pathlib import Path


class BatchConverterError(Exception):
    """Base class for batch converter failures."""

    exit_code: int = 1


class DirectoryListError(BatchConverterError):
    """Input directory could not be listed."""

    exit_code = 1

    def __init__(self, directory: Path, reason: str) -> None:
        super().__init__(f"Could not list the directory {directory}: {reason}")
        self.directory = directory
        self.reason = reason


class ConversionError(BatchConverterError):
    """A single file conversion failed inside the external converter."""

    def __init__(
        self,
        message: str,
        *,
        input_path: Path | None = None,
        output_path: Path | None = None,
    ) -> None:
        super().__init__(message)
        self.input_path = input_path
        self.output_path = output_path


class ConverterNotFoundError(ConversionError):
    """External converter executable could not be located."""


class ConfigurationError(BatchConverterError):
    """Batch settings failed validation."""

    exit_code = 2
