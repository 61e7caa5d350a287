"""External converter adapters implementing the ``ModelConverter`` port."""

from __future__ import annotations

import asyncio
import logging
import os
import shutil
from collections.abc import Sequence
from pathlib import Path
from tempfile import TemporaryDirectory

from model_batch_converter.errors import ConversionError, ConverterNotFoundError
from model_batch_converter.types import PathLike, TargetExtension

logger = logging.getLogger(__name__)

FBX2GLTF_ENV_VAR = "FBX2GLTF_BIN"
FBX2GLTF_EXECUTABLES = ("FBX2glTF", "fbx2gltf")
SUPPORTED_TARGETS: tuple[TargetExtension, ...] = (".glb", ".gltf")


def resolve_fbx2gltf_binary(explicit: PathLike | None = None) -> Path:
    """Locate the ``FBX2glTF`` executable.

    Parameters
    ----------
    explicit : str | Path | None, default=None
        Path given by the caller. Takes precedence over the environment.

    Returns
    -------
    Path
        Path to an executable file.

    Raises
    ------
    ConverterNotFoundError
        If no executable can be found.
    """
    candidate = explicit or os.getenv(FBX2GLTF_ENV_VAR)
    if candidate:
        path = Path(candidate)
        if path.is_file() and os.access(path, os.X_OK):
            return path
        found = shutil.which(str(candidate))
        if found:
            return Path(found)
        raise ConverterNotFoundError(f"FBX2glTF executable not found: {candidate}")

    for name in FBX2GLTF_EXECUTABLES:
        found = shutil.which(name)
        if found:
            return Path(found)
    raise ConverterNotFoundError(
        "FBX2glTF executable not found on PATH. "
        f"Install it or set {FBX2GLTF_ENV_VAR}."
    )


def _collect_gltf_output(
    out_dir: Path, dest_dir: Path, stem: str, output_name: str
) -> Path | None:
    """Move a text glTF and its sidecar files out of the tool's ``_out`` folder.

    The ``.gltf`` document is renamed to ``output_name``; sidecars keep the
    names the document refers to them by.
    """
    produced = out_dir / f"{stem}.gltf"
    if not produced.is_file():
        return None
    for item in out_dir.iterdir():
        target = dest_dir / (output_name if item == produced else item.name)
        if target.is_dir():
            shutil.rmtree(target)
        shutil.move(str(item), str(target))
    return dest_dir / output_name


def _summarize_output(output: str) -> str:
    """Collapse converter output to a single line for per-file reporting."""
    lines = [line.strip() for line in output.splitlines() if line.strip()]
    if not lines:
        return "<no output>"
    return " | ".join(lines)


class Fbx2GltfConverter:
    """Convert FBX files to glTF/GLB by spawning the ``FBX2glTF`` tool.

    The executable is resolved lazily on each conversion so that a missing
    tool is reported per file like any other conversion failure.
    """

    def __init__(self, binary: PathLike | None = None) -> None:
        self.binary = binary

    def _build_args(
        self,
        input_path: Path,
        dest_base: Path,
        target: str,
        options: Sequence[str],
    ) -> list[str]:
        args = list(options)
        if target == ".glb" and "--binary" not in args:
            args.append("--binary")
        args.extend(["--input", str(input_path), "--output", str(dest_base)])
        return args

    async def convert(
        self,
        input_path: Path,
        output_path: Path,
        options: Sequence[str],
    ) -> Path:
        """Run ``FBX2glTF`` for one file.

        The tool writes into a private temporary directory next to the
        output; only files produced by this run are moved onto
        ``output_path``.

        Parameters
        ----------
        input_path : Path
            Source model file.
        output_path : Path
            Requested output; its suffix selects binary (``.glb``) or text
            (``.gltf``) output.
        options : Sequence[str]
            Flags passed verbatim ahead of the input/output arguments.

        Returns
        -------
        Path
            ``output_path``, once written.
        """
        target = output_path.suffix.lower()
        if target not in SUPPORTED_TARGETS:
            raise ConversionError(
                f"Unsupported target extension '{output_path.suffix}'; "
                f"expected one of {', '.join(SUPPORTED_TARGETS)}.",
                input_path=input_path,
                output_path=output_path,
            )

        try:
            binary = resolve_fbx2gltf_binary(self.binary)
        except ConverterNotFoundError as exc:
            raise ConverterNotFoundError(
                str(exc), input_path=input_path, output_path=output_path
            ) from exc
        try:
            src = input_path.resolve(strict=True)
            dest_dir = output_path.parent.resolve(strict=True)
        except OSError as exc:
            raise ConversionError(
                str(exc), input_path=input_path, output_path=output_path
            ) from exc

        stem = output_path.stem
        with TemporaryDirectory(prefix=".fbx2gltf-", dir=dest_dir) as tmp:
            work_dir = Path(tmp)
            args = self._build_args(src, work_dir / stem, target, options)
            logger.debug("running %s %s", binary, " ".join(args))

            try:
                proc = await asyncio.create_subprocess_exec(
                    str(binary),
                    *args,
                    stdout=asyncio.subprocess.PIPE,
                    stderr=asyncio.subprocess.STDOUT,
                )
            except OSError as exc:
                raise ConversionError(
                    f"Could not start {binary}: {exc}",
                    input_path=input_path,
                    output_path=output_path,
                ) from exc
            stdout, _ = await proc.communicate()

            if proc.returncode != 0:
                output = stdout.decode("utf-8", errors="replace")
                logger.debug("converter output for %s:\n%s", input_path, output)
                raise ConversionError(
                    f"Converter exited with code {proc.returncode}: "
                    f"{_summarize_output(output)}",
                    input_path=input_path,
                    output_path=output_path,
                )

            if target == ".gltf":
                produced = _collect_gltf_output(
                    work_dir / f"{stem}_out", dest_dir, stem, output_path.name
                )
            else:
                produced = work_dir / f"{stem}.glb"
                if produced.is_file():
                    produced.replace(dest_dir / output_path.name)
                else:
                    produced = None

            if produced is None:
                raise ConversionError(
                    "FBX2glTF exited successfully but produced no output",
                    input_path=input_path,
                    output_path=output_path,
                )
        return output_path
