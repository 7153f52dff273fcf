"""Tests for call-site introspection and the expression-label forms.

Results are captured before asserting so that the inspected calls are plain
statements in this file.
"""

from io import StringIO
from typing import Any

from debugprint.core.callsite import call_argument_text, caller_function_name
from debugprint.core.printer import DebugPrinter


def _argument_text_of(*args: Any) -> str | None:
    return call_argument_text()


def _second_argument_text_of(*args: Any) -> str | None:
    return call_argument_text(index=1)


def _name_of_caller() -> str:
    return caller_function_name()


def test_call_argument_text_returns_expression() -> None:
    total = 3
    text = _argument_text_of(total + 1)

    assert text == "total + 1"


def test_call_argument_text_by_index() -> None:
    left, right = 1, 2
    text = _second_argument_text_of(left, right + 1)

    assert text == "right + 1"


def test_call_argument_text_missing_argument() -> None:
    text = _second_argument_text_of(1)

    assert text is None


def test_call_argument_text_multiline_call() -> None:
    values = {"a": 1}
    text = _argument_text_of(
        values["a"],
    )

    assert text == 'values["a"]'


def test_call_argument_text_without_source() -> None:
    namespace: dict[str, Any] = {"argument_text_of": _argument_text_of}
    exec("result = argument_text_of(1 + 2)", namespace)

    assert namespace["result"] is None


def test_caller_function_name() -> None:
    name = _name_of_caller()

    assert name == "test_caller_function_name"


class TestExpressionForms:
    """Printer forms that label output with the caller's expression."""

    def test_print_expr_line(self, printer: DebugPrinter, sink: StringIO) -> None:
        answer = 42
        printer.print_expr_line(answer)

        assert sink.getvalue() == "answer: 42\n"

    def test_print_expr_attribute(self, printer: DebugPrinter, sink: StringIO) -> None:
        item = {"size": 7}
        printer.print_expr(item["size"])

        assert sink.getvalue() == 'item["size"]: 7'

    def test_print_expr_explicit_label(
        self, printer: DebugPrinter, sink: StringIO
    ) -> None:
        printer.print_expr_line(5, "five")

        assert sink.getvalue() == "five: 5\n"

    def test_print_expr_uses_printer_separator(self, sink: StringIO) -> None:
        printer = DebugPrinter(stream=sink, separator=" := ")
        count = 2
        printer.print_expr_line(count)

        assert sink.getvalue() == "count := 2\n"

    def test_print_expr_without_source(
        self, printer: DebugPrinter, sink: StringIO
    ) -> None:
        exec("printer.print_expr_line(7)", {"printer": printer})

        assert sink.getvalue() == "<expr>: 7\n"

    def test_print_function_name(self, printer: DebugPrinter, sink: StringIO) -> None:
        printer.print_function_name()

        assert sink.getvalue() == "test_print_function_name\n"

    def test_print_function_split_line(
        self, printer: DebugPrinter, sink: StringIO
    ) -> None:
        printer.print_function_split_line()

        assert sink.getvalue() == "===== test_print_function_split_line ======\n"

    def test_stacklevel_reports_outer_caller(
        self, printer: DebugPrinter, sink: StringIO
    ) -> None:
        def trace(value: Any) -> None:
            printer.print_function_name(stacklevel=2)
            printer.print_expr_line(value, stacklevel=2)

        limit = 10
        trace(limit)

        assert sink.getvalue() == (
            "test_stacklevel_reports_outer_caller\nlimit: 10\n"
        )

    def test_print_container_expr(self, printer: DebugPrinter, sink: StringIO) -> None:
        batch_ids = [1, 2, 3]
        printer.print_container_expr(batch_ids)

        assert sink.getvalue() == "batch_ids size = 3 { 1 2 3 }\n"

    def test_print_container_rendered_expr(
        self, printer: DebugPrinter, sink: StringIO, points: list[Any]
    ) -> None:
        printer.print_container_rendered_expr(points)

        assert sink.getvalue() == "points size = 2\n{ (1, 2) (3, 4) }"

    def test_print_owned_vector_rendered_expr(
        self, printer: DebugPrinter, sink: StringIO, points: list[Any]
    ) -> None:
        printer.print_owned_vector_rendered_expr(points[:1])

        assert sink.getvalue() == "points[:1] = { (1, 2) }\n"

    def test_print_vector_mapping_expr(
        self, printer: DebugPrinter, sink: StringIO
    ) -> None:
        weights = [0.5]
        printer.print_vector_mapping_expr(weights)

        assert sink.getvalue() == "weights\n{\n\t0 -> 0.5\n}\n"
