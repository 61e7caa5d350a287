"""Application ports for clean architecture boundaries."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from model_batch_converter.types import ConverterFlags


class ModelConverter(Protocol):
    """Convert one model file into another binary format."""

    async def convert(
        self,
        input_path: Path,
        output_path: Path,
        options: ConverterFlags,
    ) -> Path:
        """Convert ``input_path`` into ``output_path`` and return the written path.

        Raises ``ConversionError`` on failure.
        """
