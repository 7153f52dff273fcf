"""Dual-mode debug printers.

:class:`DebugPrinter` renders values, pairs, ranges and containers as text on
a sink. :class:`NullPrinter` offers the same operations with the same
signatures, each of which returns immediately, so switching modes never
touches call sites. :func:`build_printer` picks one from
:class:`~debugprint.config.PrinterSettings`.

Every operation formats its whole output first and writes it with a single
``write`` call. The sink is shared and not locked; output from concurrent
callers may interleave.
"""

from __future__ import annotations

import sys
from collections.abc import Collection, Iterable, Sequence
from itertools import islice
from typing import TYPE_CHECKING, Any, TextIO

from debugprint.core import callsite
from debugprint.core.constants import (
    DEFAULT_SEPARATOR,
    ELEMENT_SEPARATOR,
    EQUALS,
    MAPPING_ARROW,
    SPLIT_LINE_LEFT,
    SPLIT_LINE_RIGHT,
    UNKNOWN_EXPRESSION,
    VERSUS,
)
from debugprint.core.errors import InvalidRangeError
from debugprint.core.renderable import Renderable, render, to_text

if TYPE_CHECKING:  # pragma: no cover - typing only
    from debugprint.config import PrinterSettings

__all__ = ["DebugPrinter", "NullPrinter", "build_printer"]


def _window(items: Iterable[Any], start: int, stop: int | None) -> Iterable[Any]:
    if start == 0 and stop is None:
        return items
    return islice(items, start, stop)


class DebugPrinter:
    """Writes human-readable debug text to a stream.

    Args:
        stream: Text sink. None means ``sys.stdout`` as it is at write time.
        separator: Separator used by print_separated when none is passed.
    """

    #: Names of every public print operation, shared with NullPrinter.
    OPERATIONS: tuple[str, ...] = (
        "print_value",
        "print_line",
        "print_pair",
        "print_pair_line",
        "print_separated",
        "print_separated_line",
        "print_equation",
        "print_equation_line",
        "print_comparison",
        "print_comparison_line",
        "print_element",
        "print_range",
        "print_container",
        "print_labeled_render",
        "print_render",
        "print_range_rendered",
        "print_container_rendered",
        "print_owned_vector_rendered",
        "print_vector_mapping",
        "print_vector_range",
        "print_expr",
        "print_expr_line",
        "print_function_name",
        "print_function_split_line",
        "print_container_expr",
        "print_container_rendered_expr",
        "print_owned_vector_rendered_expr",
        "print_vector_mapping_expr",
    )

    #: Operations that take a ``stacklevel`` and inspect their caller.
    CALLSITE_OPERATIONS: frozenset[str] = frozenset(
        name
        for name in OPERATIONS
        if name.endswith("_expr")
        or name.endswith("_expr_line")
        or name.startswith("print_function_")
    )

    def __init__(
        self, stream: TextIO | None = None, separator: str = DEFAULT_SEPARATOR
    ) -> None:
        self._stream = stream
        self.separator = separator

    @property
    def enabled(self) -> bool:
        """Whether operations on this printer produce output."""
        return True

    @property
    def stream(self) -> TextIO:
        """The sink the next write goes to."""
        return self._stream if self._stream is not None else sys.stdout

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(stream={self._stream!r}, "
            f"separator={self.separator!r})"
        )

    def _write(self, text: str) -> None:
        stream = self.stream
        stream.write(text)
        if text.endswith("\n"):
            stream.flush()

    # ------------------------------------------------------------------
    # Values and pairs
    # ------------------------------------------------------------------

    def print_value(self, value: Any) -> None:
        """Write the text form of value."""
        self._write(to_text(value))

    def print_line(self, value: Any) -> None:
        """Write the text form of value and a newline."""
        self._write(to_text(value) + "\n")

    def print_pair(self, a: Any, b: Any) -> None:
        """Write a and b back to back."""
        self._write(to_text(a) + to_text(b))

    def print_pair_line(self, a: Any, b: Any) -> None:
        """Write a and b back to back, then a newline."""
        self._write(to_text(a) + to_text(b) + "\n")

    def print_separated(self, a: Any, b: Any, sep: str | None = None) -> None:
        """Write ``a<sep>b``; sep defaults to the printer's separator."""
        if sep is None:
            sep = self.separator
        self._write(to_text(a) + sep + to_text(b))

    def print_separated_line(self, a: Any, b: Any, sep: str | None = None) -> None:
        """Write ``a<sep>b`` and a newline."""
        if sep is None:
            sep = self.separator
        self._write(to_text(a) + sep + to_text(b) + "\n")

    def print_equation(self, a: Any, b: Any) -> None:
        """Write ``a = b``."""
        self._write(to_text(a) + EQUALS + to_text(b))

    def print_equation_line(self, a: Any, b: Any) -> None:
        """Write ``a = b`` and a newline."""
        self._write(to_text(a) + EQUALS + to_text(b) + "\n")

    def print_comparison(self, a: Any, b: Any) -> None:
        """Write ``a vs b``."""
        self._write(to_text(a) + VERSUS + to_text(b))

    def print_comparison_line(self, a: Any, b: Any) -> None:
        """Write ``a vs b`` and a newline."""
        self._write(to_text(a) + VERSUS + to_text(b) + "\n")

    def print_element(self, element: Any, first: bool = False) -> None:
        """Write one list element, prefixed with ``, `` unless it is first."""
        if first:
            self._write(to_text(element))
        else:
            self._write(ELEMENT_SEPARATOR + to_text(element))

    # ------------------------------------------------------------------
    # Ranges and containers
    # ------------------------------------------------------------------

    def print_range(
        self, items: Iterable[Any], start: int = 0, stop: int | None = None
    ) -> None:
        """Write ``{ e1 e2 ... }`` and a newline.

        Args:
            items: Values to print.
            start: Index of the first item to print.
            stop: Index one past the last item to print; None for the end.
        """
        body = "".join(to_text(item) + " " for item in _window(items, start, stop))
        self._write("{ " + body + "}\n")

    def print_container(self, container: Collection[Any], name: str = "") -> None:
        """Write the optional name, the size and the contents of a container.

        An empty list named ``X`` prints as ``X size = 0 { }``.
        """
        head = f"{name} " if name else ""
        body = "".join(to_text(item) + " " for item in container)
        self._write(f"{head}size = {len(container)} {{ {body}}}\n")

    def print_labeled_render(self, label: Any, obj: Renderable) -> None:
        """Write ``label = obj.render()`` and a newline."""
        self._write(to_text(label) + EQUALS + render(obj) + "\n")

    def print_render(self, obj: Renderable, prefix: str = "") -> None:
        """Write ``obj.render()`` and a newline, after ``prefix: `` if given."""
        head = f"{prefix}{DEFAULT_SEPARATOR}" if prefix else ""
        self._write(head + render(obj) + "\n")

    def _rendered_range(
        self, items: Iterable[Renderable], start: int = 0, stop: int | None = None
    ) -> str:
        rendered = [render(item) for item in _window(items, start, stop)]
        if not rendered:
            return "{}"
        return "{ " + " ".join(rendered) + " }"

    def print_range_rendered(
        self, items: Iterable[Renderable], start: int = 0, stop: int | None = None
    ) -> None:
        """Write ``{ r1 r2 ... }`` with no trailing newline.

        Each ri is the render() of one item. An empty range prints ``{}``.
        """
        self._write(self._rendered_range(items, start, stop))

    def print_container_rendered(
        self, container: Collection[Renderable], name: str = ""
    ) -> None:
        """Write the optional name and size on one line, then the rendered range."""
        head = f"{name} " if name else ""
        self._write(
            f"{head}size = {len(container)}\n" + self._rendered_range(container)
        )

    def print_owned_vector_rendered(
        self, container: Iterable[Renderable], name: str = ""
    ) -> None:
        """Write ``name = { r1 r2 ... }`` and a newline.

        The name and ``=`` are always written, even when name is empty.
        """
        body = "".join(" " + render(item) for item in container)
        self._write(f"{name} = {{{body} }}\n")

    def print_vector_mapping(self, vector: Sequence[Any], name: str = "") -> None:
        """Write every ``index -> value`` pair on its own tab-indented line.

        The pairs are wrapped in braces, each on its own line, and preceded
        by a line holding the name when one is given.
        """
        head = f"{name}\n" if name else ""
        body = "".join(
            f"\t{index}{MAPPING_ARROW}{to_text(vector[index])}\n"
            for index in range(len(vector))
        )
        self._write(head + "{\n" + body + "}\n")

    def print_vector_range(self, vector: Sequence[Any], start: int, stop: int) -> None:
        """Write ``{v[start], ..., v[stop - 1]}`` and a newline.

        Raises:
            InvalidRangeError: If the window is not within the vector.
        """
        length = len(vector)
        if start < 0 or start > stop or stop > length:
            raise InvalidRangeError(start, stop, length)
        body = ELEMENT_SEPARATOR.join(
            to_text(vector[index]) for index in range(start, stop)
        )
        self._write("{" + body + "}\n")

    # ------------------------------------------------------------------
    # Call-site forms
    # ------------------------------------------------------------------

    def _expression_label(self, stacklevel: int) -> str:
        # +1 for this helper
        text = callsite.call_argument_text(stacklevel + 1)
        return text if text is not None else UNKNOWN_EXPRESSION

    def print_expr(
        self, value: Any, label: str | None = None, *, stacklevel: int = 1
    ) -> None:
        """Write ``<expression>: value``, the expression as written by the caller."""
        if label is None:
            label = self._expression_label(stacklevel)
        self.print_separated(label, value)

    def print_expr_line(
        self, value: Any, label: str | None = None, *, stacklevel: int = 1
    ) -> None:
        """Write ``<expression>: value`` and a newline."""
        if label is None:
            label = self._expression_label(stacklevel)
        self.print_separated_line(label, value)

    def print_function_name(self, *, stacklevel: int = 1) -> None:
        """Write the calling function's name and a newline."""
        self._write(callsite.caller_function_name(stacklevel) + "\n")

    def print_function_split_line(self, *, stacklevel: int = 1) -> None:
        """Write a ``===== name ======`` banner for the calling function."""
        name = callsite.caller_function_name(stacklevel)
        self._write(f"{SPLIT_LINE_LEFT} {name} {SPLIT_LINE_RIGHT}\n")

    def print_container_expr(
        self, container: Collection[Any], *, stacklevel: int = 1
    ) -> None:
        """Print a container labeled with its expression text."""
        self.print_container(container, self._expression_label(stacklevel))

    def print_container_rendered_expr(
        self, container: Collection[Renderable], *, stacklevel: int = 1
    ) -> None:
        """Print a rendered container labeled with its expression text."""
        self.print_container_rendered(
            container, self._expression_label(stacklevel)
        )

    def print_owned_vector_rendered_expr(
        self, container: Iterable[Renderable], *, stacklevel: int = 1
    ) -> None:
        """Print ``<expression> = { r1 r2 ... }`` for a vector of renderables."""
        self.print_owned_vector_rendered(
            container, self._expression_label(stacklevel)
        )

    def print_vector_mapping_expr(
        self, vector: Sequence[Any], *, stacklevel: int = 1
    ) -> None:
        """Print an index mapping labeled with its expression text."""
        self.print_vector_mapping(vector, self._expression_label(stacklevel))


class NullPrinter(DebugPrinter):
    """A printer whose every operation is a no-op.

    Signatures match :class:`DebugPrinter`, so call sites do not change
    when debug output is switched off. Arguments are never inspected.
    """

    @property
    def enabled(self) -> bool:
        return False

    def print_value(self, value: Any) -> None:
        pass

    def print_line(self, value: Any) -> None:
        pass

    def print_pair(self, a: Any, b: Any) -> None:
        pass

    def print_pair_line(self, a: Any, b: Any) -> None:
        pass

    def print_separated(self, a: Any, b: Any, sep: str | None = None) -> None:
        pass

    def print_separated_line(self, a: Any, b: Any, sep: str | None = None) -> None:
        pass

    def print_equation(self, a: Any, b: Any) -> None:
        pass

    def print_equation_line(self, a: Any, b: Any) -> None:
        pass

    def print_comparison(self, a: Any, b: Any) -> None:
        pass

    def print_comparison_line(self, a: Any, b: Any) -> None:
        pass

    def print_element(self, element: Any, first: bool = False) -> None:
        pass

    def print_range(
        self, items: Iterable[Any], start: int = 0, stop: int | None = None
    ) -> None:
        pass

    def print_container(self, container: Collection[Any], name: str = "") -> None:
        pass

    def print_labeled_render(self, label: Any, obj: Renderable) -> None:
        pass

    def print_render(self, obj: Renderable, prefix: str = "") -> None:
        pass

    def print_range_rendered(
        self, items: Iterable[Renderable], start: int = 0, stop: int | None = None
    ) -> None:
        pass

    def print_container_rendered(
        self, container: Collection[Renderable], name: str = ""
    ) -> None:
        pass

    def print_owned_vector_rendered(
        self, container: Iterable[Renderable], name: str = ""
    ) -> None:
        pass

    def print_vector_mapping(self, vector: Sequence[Any], name: str = "") -> None:
        pass

    def print_vector_range(self, vector: Sequence[Any], start: int, stop: int) -> None:
        pass

    def print_expr(
        self, value: Any, label: str | None = None, *, stacklevel: int = 1
    ) -> None:
        pass

    def print_expr_line(
        self, value: Any, label: str | None = None, *, stacklevel: int = 1
    ) -> None:
        pass

    def print_function_name(self, *, stacklevel: int = 1) -> None:
        pass

    def print_function_split_line(self, *, stacklevel: int = 1) -> None:
        pass

    def print_container_expr(
        self, container: Collection[Any], *, stacklevel: int = 1
    ) -> None:
        pass

    def print_container_rendered_expr(
        self, container: Collection[Renderable], *, stacklevel: int = 1
    ) -> None:
        pass

    def print_owned_vector_rendered_expr(
        self, container: Iterable[Renderable], *, stacklevel: int = 1
    ) -> None:
        pass

    def print_vector_mapping_expr(
        self, vector: Sequence[Any], *, stacklevel: int = 1
    ) -> None:
        pass


def build_printer(
    settings: PrinterSettings, stream: TextIO | None = None
) -> DebugPrinter:
    """Return a DebugPrinter if settings enable output, else a NullPrinter."""
    printer_cls = DebugPrinter if settings.enabled else NullPrinter
    return printer_cls(stream=stream, separator=settings.separator)
