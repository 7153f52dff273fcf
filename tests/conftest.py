"""Pytest configuration and fixtures for debugprint tests."""

from collections.abc import Iterator
from dataclasses import dataclass
from io import StringIO

import pytest

from debugprint.core.printer import DebugPrinter, NullPrinter
from debugprint.utils import debug as debug_module


@dataclass
class Point:
    """Renderable sample object."""

    x: int
    y: int

    def render(self) -> str:
        return f"({self.x}, {self.y})"


class Opaque:
    """Object with no render() method."""

    def __str__(self) -> str:
        return "opaque"


@pytest.fixture
def sink() -> StringIO:
    """In-memory text sink."""
    return StringIO()


@pytest.fixture
def printer(sink: StringIO) -> DebugPrinter:
    """Enabled printer writing to the in-memory sink."""
    return DebugPrinter(stream=sink)


@pytest.fixture
def null_printer(sink: StringIO) -> NullPrinter:
    """Disabled printer attached to the in-memory sink."""
    return NullPrinter(stream=sink)


@pytest.fixture
def points() -> list[Point]:
    return [Point(1, 2), Point(3, 4)]


@pytest.fixture(autouse=True)
def restore_default_printer() -> Iterator[None]:
    """Put back the process-wide default printer after each test."""
    saved = debug_module.get_printer()
    yield
    debug_module._state.printer = saved


@pytest.fixture
def opaque() -> Opaque:
    return Opaque()
