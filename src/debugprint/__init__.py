"""debugprint: switchable debug printing for values and collections.

Usage:
    import debugprint

    debugprint.print_equation_line("rows", 42)      # rows = 42
    debugprint.print_container_expr(batch_ids)      # batch_ids size = 3 { 1 2 3 }

Output only appears when DEBUGPRINT_ENABLED is set (see debugprint.config)
or after debugprint.configure(enabled=True).
"""

from debugprint.config import PrinterSettings
from debugprint.core import (
    DebugPrinter,
    DebugPrintError,
    InvalidRangeError,
    NotRenderableError,
    NullPrinter,
    Renderable,
    build_printer,
)
from debugprint.utils.debug import (
    configure,
    get_printer,
    is_enabled,
    print_comparison,
    print_comparison_line,
    print_container,
    print_container_expr,
    print_container_rendered,
    print_container_rendered_expr,
    print_element,
    print_equation,
    print_equation_line,
    print_expr,
    print_expr_line,
    print_function_name,
    print_function_split_line,
    print_labeled_render,
    print_line,
    print_owned_vector_rendered,
    print_owned_vector_rendered_expr,
    print_pair,
    print_pair_line,
    print_range,
    print_range_rendered,
    print_render,
    print_separated,
    print_separated_line,
    print_value,
    print_vector_mapping,
    print_vector_mapping_expr,
    print_vector_range,
    set_printer,
)

__version__ = "0.1.0"

__all__ = [
    "DebugPrintError",
    "DebugPrinter",
    "InvalidRangeError",
    "NotRenderableError",
    "NullPrinter",
    "PrinterSettings",
    "Renderable",
    "build_printer",
    "configure",
    "get_printer",
    "is_enabled",
    "print_comparison",
    "print_comparison_line",
    "print_container",
    "print_container_expr",
    "print_container_rendered",
    "print_container_rendered_expr",
    "print_element",
    "print_equation",
    "print_equation_line",
    "print_expr",
    "print_expr_line",
    "print_function_name",
    "print_function_split_line",
    "print_labeled_render",
    "print_line",
    "print_owned_vector_rendered",
    "print_owned_vector_rendered_expr",
    "print_pair",
    "print_pair_line",
    "print_range",
    "print_range_rendered",
    "print_render",
    "print_separated",
    "print_separated_line",
    "print_value",
    "print_vector_mapping",
    "print_vector_mapping_expr",
    "print_vector_range",
    "set_printer",
]
