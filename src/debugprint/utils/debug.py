"""Process-wide default printer for debugprint.

Provides module-level print functions that forward to one shared printer,
so code can print without passing a printer around.

Usage:
    from debugprint.utils.debug import print_equation_line, print_expr_line

    print_equation_line("rows", len(rows))
    print_expr_line(batch.size)              # "batch.size: 128"

Environment:
    The default printer is built from DEBUGPRINT_ENABLED and
    DEBUGPRINT_SEPARATOR when this module is imported. Changing the
    environment afterwards has no effect until configure() is called or the
    module is reloaded.
"""

import functools
import inspect
import logging
from collections.abc import Callable
from typing import Any, TextIO

import structlog

from debugprint.config import PrinterSettings
from debugprint.core.printer import DebugPrinter, build_printer

# Events go through the logging module, never onto the debug sink.
logger = structlog.wrap_logger(
    logging.getLogger(__name__),
    wrapper_class=structlog.stdlib.BoundLogger,
    processors=[structlog.processors.KeyValueRenderer(key_order=["event"])],
)

__all__ = [
    "configure",
    "get_printer",
    "is_enabled",
    "set_printer",
    *DebugPrinter.OPERATIONS,
]


class _PrinterState:
    """Container for the default printer to avoid global statement."""

    printer: DebugPrinter = build_printer(PrinterSettings.from_env())


_state = _PrinterState()


def get_printer() -> DebugPrinter:
    """Return the current default printer."""
    return _state.printer


def is_enabled() -> bool:
    """Return whether the default printer produces output."""
    return _state.printer.enabled


def set_printer(printer: DebugPrinter) -> DebugPrinter:
    """Replace the default printer and return the previous one."""
    previous = _state.printer
    _state.printer = printer
    logger.debug(
        "debugprint.printer_replaced",
        previous=type(previous).__name__,
        current=type(printer).__name__,
    )
    return previous


def configure(
    enabled: bool | None = None,
    *,
    separator: str | None = None,
    stream: TextIO | None = None,
) -> DebugPrinter:
    """Rebuild the default printer.

    Args:
        enabled: Switch debug output on or off; None reads DEBUGPRINT_ENABLED
        separator: Default separator; None reads DEBUGPRINT_SEPARATOR
        stream: Sink to write to; None means sys.stdout at write time

    Returns:
        The new default printer
    """
    overrides: dict[str, Any] = {}
    if enabled is not None:
        overrides["enabled"] = enabled
    if separator is not None:
        overrides["separator"] = separator
    settings = PrinterSettings.from_env()
    if overrides:
        settings = PrinterSettings(**(settings.model_dump() | overrides))

    _state.printer = build_printer(settings, stream=stream)
    logger.debug(
        "debugprint.configured",
        enabled=settings.enabled,
        separator=settings.separator,
        printer=type(_state.printer).__name__,
    )
    return _state.printer


def _delegate(name: str) -> Callable[..., None]:
    method = getattr(DebugPrinter, name)
    callsite = name in DebugPrinter.CALLSITE_OPERATIONS

    @functools.wraps(method)
    def forward(*args: Any, **kwargs: Any) -> None:
        if callsite:
            # Attribute the call to our caller, not to this wrapper.
            kwargs["stacklevel"] = kwargs.get("stacklevel", 1) + 1
        getattr(_state.printer, name)(*args, **kwargs)

    # Module-level functions take no self.
    signature = inspect.signature(method)
    forward.__signature__ = signature.replace(  # type: ignore[attr-defined]
        parameters=list(signature.parameters.values())[1:]
    )
    return forward


print_value = _delegate("print_value")
print_line = _delegate("print_line")
print_pair = _delegate("print_pair")
print_pair_line = _delegate("print_pair_line")
print_separated = _delegate("print_separated")
print_separated_line = _delegate("print_separated_line")
print_equation = _delegate("print_equation")
print_equation_line = _delegate("print_equation_line")
print_comparison = _delegate("print_comparison")
print_comparison_line = _delegate("print_comparison_line")
print_element = _delegate("print_element")
print_range = _delegate("print_range")
print_container = _delegate("print_container")
print_labeled_render = _delegate("print_labeled_render")
print_render = _delegate("print_render")
print_range_rendered = _delegate("print_range_rendered")
print_container_rendered = _delegate("print_container_rendered")
print_owned_vector_rendered = _delegate("print_owned_vector_rendered")
print_vector_mapping = _delegate("print_vector_mapping")
print_vector_range = _delegate("print_vector_range")
print_expr = _delegate("print_expr")
print_expr_line = _delegate("print_expr_line")
print_function_name = _delegate("print_function_name")
print_function_split_line = _delegate("print_function_split_line")
print_container_expr = _delegate("print_container_expr")
print_container_rendered_expr = _delegate("print_container_rendered_expr")
print_owned_vector_rendered_expr = _delegate("print_owned_vector_rendered_expr")
print_vector_mapping_expr = _delegate("print_vector_mapping_expr")
