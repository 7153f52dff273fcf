"""Printers, text conversion and call-site introspection.

This package holds the formatting logic. Configuration lives in
debugprint.config and the process-wide default printer in
debugprint.utils.debug.
"""

from debugprint.core.errors import (
    DebugPrintError,
    InvalidRangeError,
    NotRenderableError,
)
from debugprint.core.printer import DebugPrinter, NullPrinter, build_printer
from debugprint.core.renderable import Renderable, render, to_text

__all__ = [
    "DebugPrintError",
    "DebugPrinter",
    "InvalidRangeError",
    "NotRenderableError",
    "NullPrinter",
    "Renderable",
    "build_printer",
    "render",
    "to_text",
]
