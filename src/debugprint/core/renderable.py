"""Text conversion for printable values.

Plain values are printed through ``str()``. Objects that know how to describe
themselves implement the :class:`Renderable` protocol, a single ``render()``
method, and are printed by the ``*_rendered`` operations.
"""

from typing import Any, Protocol, runtime_checkable

from debugprint.core.errors import NotRenderableError

__all__ = ["Renderable", "render", "to_text"]


@runtime_checkable
class Renderable(Protocol):
    """An object that can describe itself as text."""

    def render(self) -> str: ...


def to_text(value: Any) -> str:
    """Return the built-in text form of a value."""
    return str(value)


def render(obj: Any) -> str:
    """Return ``obj.render()``.

    Raises:
        NotRenderableError: If obj has no callable render() method.
    """
    method = getattr(obj, "render", None)
    if not callable(method):
        raise NotRenderableError(obj)
    return str(method())
