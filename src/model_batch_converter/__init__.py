"""Top-level API for batch 3D model conversion."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from model_batch_converter.application.ports import ModelConverter
from model_batch_converter.application.results import BatchReport

__version__ = "0.1.0"


def convert_models(
    input_dir: Path | None = None,
    output_dir: Path | None = None,
    target_extension: str | None = None,
    source_extension: str | None = None,
    converter_flags: Sequence[str] | None = None,
    converter: ModelConverter | None = None,
) -> BatchReport:
    """Convert every matching model file in a directory.

    Parameters
    ----------
    input_dir : Path, optional
        Directory scanned (non-recursively) for source files.
        Defaults to ``./assets/fbx_files/``.
    output_dir : Path, optional
        Existing directory receiving the converted files.
        Defaults to ``./assets/alt_models/``.
    target_extension : str, optional
        Output suffix. Defaults to ``.glb``.
    source_extension : str, optional
        Input suffix, matched case-sensitively. Defaults to ``.fbx``.
    converter_flags : Sequence[str], optional
        Flags passed verbatim to the converter.
        Defaults to ``["--khr-materials-unlit"]``.
    converter : ModelConverter, optional
        Converter implementation. Defaults to the ``FBX2glTF`` adapter.

    Returns
    -------
    BatchReport
        Per-file outcomes, available once every conversion has settled.

    Raises
    ------
    DirectoryListError
        If the input directory cannot be listed. No conversion is attempted.
    ConfigurationError
        If the settings are invalid.
    """
    from .api import convert_models as _impl

    return _impl(
        input_dir=input_dir,
        output_dir=output_dir,
        target_extension=target_extension,
        source_extension=source_extension,
        converter_flags=converter_flags,
        converter=converter,
    )


__all__ = [
    "BatchReport",
    "ModelConverter",
    "convert_models",
]
