"""Core constants for debugprint.

This module defines constants used throughout the package:
- Environment variables that configure the default printer
- Separators and markers that make up the printed text
"""

# ============================================================================
# Environment
# ============================================================================

#: Environment variable that enables the default printer
ENABLED_ENV_VAR: str = "DEBUGPRINT_ENABLED"

#: Environment variable overriding the default separator
SEPARATOR_ENV_VAR: str = "DEBUGPRINT_SEPARATOR"

#: Lowercased values of ENABLED_ENV_VAR that enable debug output
TRUTHY_VALUES: frozenset[str] = frozenset({"1", "true", "yes", "on"})

# ============================================================================
# Output Formatting
# ============================================================================

#: Separator used by print_separated when none is given
DEFAULT_SEPARATOR: str = ": "

#: Infix written by print_equation
EQUALS: str = " = "

#: Infix written by print_comparison
VERSUS: str = " vs "

#: Prefix written before every non-first element of a list
ELEMENT_SEPARATOR: str = ", "

#: Separator between index and value in print_vector_mapping
MAPPING_ARROW: str = " -> "

#: Left and right markers around the function name in a split line
SPLIT_LINE_LEFT: str = "====="
SPLIT_LINE_RIGHT: str = "======"

#: Label used when the expression text of a call cannot be recovered
UNKNOWN_EXPRESSION: str = "<expr>"
