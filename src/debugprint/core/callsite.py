"""Call-site introspection for the expression-label print forms.

The label of ``print_expr(total)`` is the text ``total`` as written at the
call site. It is recovered from the caller's frame: the position of the
calling instruction selects the call expression in the source file, which is
parsed with :mod:`ast` to pull out the argument's source segment.

``stacklevel`` follows the :mod:`logging` convention: 1 means the frame that
called the function asking for introspection (the print operation), 2 the
frame above that, and so on.
"""

from __future__ import annotations

import ast
import inspect
import linecache
from types import FrameType

__all__ = ["call_argument_text", "caller_function_name"]


def _outer_frame(stacklevel: int) -> FrameType | None:
    # _outer_frame -> public helper -> print operation -> caller
    frame = inspect.currentframe()
    for _ in range(stacklevel + 2):
        if frame is None:
            return None
        frame = frame.f_back
    return frame


def caller_function_name(stacklevel: int = 1) -> str:
    """Return the name of the function at the given stack level.

    Module-level code is reported as ``<module>``.
    """
    frame = _outer_frame(stacklevel)
    if frame is None:
        return "<unknown>"
    try:
        return frame.f_code.co_name
    finally:
        del frame


def _slice_source(
    lines: list[str], lineno: int, end_lineno: int, col: int, end_col: int
) -> str:
    # Column offsets are UTF-8 byte offsets.
    chunk = [line.encode("utf-8") for line in lines[lineno - 1 : end_lineno]]
    if len(chunk) == 1:
        chunk[0] = chunk[0][col:end_col]
    else:
        chunk[-1] = chunk[-1][:end_col]
        chunk[0] = chunk[0][col:]
    return b"".join(chunk).decode("utf-8")


def call_argument_text(stacklevel: int = 1, index: int = 0) -> str | None:
    """Return the source text of a positional argument of the current call.

    Args:
        stacklevel: Frame whose in-flight call is inspected.
        index: Position of the argument within that call.

    Returns:
        The argument exactly as written, or None when the source of the
        call cannot be found or does not have that many positional arguments.
    """
    frame = _outer_frame(stacklevel)
    if frame is None:
        return None
    try:
        info = inspect.getframeinfo(frame, context=0)
    finally:
        del frame

    positions = info.positions
    if positions is None:
        return None
    lineno, end_lineno = positions.lineno, positions.end_lineno
    col, end_col = positions.col_offset, positions.end_col_offset
    if lineno is None or end_lineno is None or col is None or end_col is None:
        return None

    lines = linecache.getlines(info.filename)
    if len(lines) < end_lineno:
        return None

    # Parenthesized so continuation lines may keep their indentation.
    source = "(\n" + _slice_source(lines, lineno, end_lineno, col, end_col) + "\n)"
    try:
        tree = ast.parse(source, mode="eval")
    except SyntaxError:
        return None

    call = tree.body
    if not isinstance(call, ast.Call) or len(call.args) <= index:
        return None
    argument = call.args[index]
    if isinstance(argument, ast.Starred):
        return None
    return ast.get_source_segment(source, argument)
