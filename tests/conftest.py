"""Shared pytest configuration, marker assignment and converter fakes."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Iterable, Iterator, Sequence
from pathlib import Path

import pytest

from model_batch_converter.errors import ConversionError


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Attach suite markers based on test file path."""
    del config
    for item in items:
        path = Path(str(item.fspath))
        parts = set(path.parts)
        if "e2e_tests" in parts:
            item.add_marker(pytest.mark.e2e)
        elif "integration_tests" in parts:
            item.add_marker(pytest.mark.integration)
        elif "unit_tests" in parts:
            item.add_marker(pytest.mark.unit)


class FakeConverter:
    """In-memory ``ModelConverter`` recording every invocation."""

    def __init__(
        self,
        fail_on: Iterable[str] = (),
        crash_on: Iterable[str] = (),
    ) -> None:
        self.fail_on = set(fail_on)
        self.crash_on = set(crash_on)
        self.calls: list[tuple[Path, Path, list[str]]] = []
        self.in_flight = 0
        self.max_in_flight = 0

    async def convert(
        self,
        input_path: Path,
        output_path: Path,
        options: Sequence[str],
    ) -> Path:
        self.calls.append((input_path, output_path, list(options)))
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            await asyncio.sleep(0)
            if input_path.name in self.crash_on:
                raise RuntimeError(f"converter crashed on {input_path.name}")
            if input_path.name in self.fail_on:
                raise ConversionError(
                    "Converter output:\nbad fbx",
                    input_path=input_path,
                    output_path=output_path,
                )
            output_path.write_bytes(b"glTF")
            return output_path
        finally:
            self.in_flight -= 1


@pytest.fixture(autouse=True)
def _reset_package_logger() -> Iterator[None]:
    """Drop console handlers the CLI attaches to the package logger."""
    yield
    package_logger = logging.getLogger("model_batch_converter")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
    package_logger.setLevel(logging.NOTSET)


@pytest.fixture
def make_converter() -> Callable[..., FakeConverter]:
    """Factory for recording fake converters."""
    return FakeConverter


@pytest.fixture
def asset_dirs(tmp_path: Path) -> tuple[Path, Path]:
    """Create ``assets/fbx_files`` and ``assets/alt_models`` under ``tmp_path``."""
    input_dir = tmp_path / "assets" / "fbx_files"
    output_dir = tmp_path / "assets" / "alt_models"
    input_dir.mkdir(parents=True)
    output_dir.mkdir(parents=True)
    return input_dir, output_dir
