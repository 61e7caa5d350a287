"""Shared type aliases for converter modules."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Literal, TypeAlias

TargetExtension: TypeAlias = Literal[".glb", ".gltf"]
ConverterFlags: TypeAlias = Sequence[str]
PathLike: TypeAlias = str | Path
