"""Custom exceptions for debugprint.

Print operations are total over well-typed input. These exceptions cover
the two ways a caller can misuse them: handing a non-renderable object to a
rendered operation, and asking for an index window outside a vector.
"""


class DebugPrintError(Exception):
    """Base exception for all debugprint errors.

    All custom exceptions should inherit from this base class to allow
    for broad exception handling when needed.
    """

    pass


class NotRenderableError(DebugPrintError, TypeError):
    """Raised when a rendered operation receives an object without render().

    Attributes:
        value_type: Name of the offending object's type
    """

    def __init__(self, value: object) -> None:
        """Initialize NotRenderableError.

        Args:
            value: The object that lacks a callable render() method
        """
        self.value_type = type(value).__name__
        super().__init__(
            f"Object of type '{self.value_type}' has no render() method"
        )

    def __repr__(self) -> str:
        """Return repr string for debugging."""
        return f"NotRenderableError(value_type={self.value_type!r})"


class InvalidRangeError(DebugPrintError, IndexError):
    """Raised when an index window does not fit the vector it selects from.

    Attributes:
        start: First index of the requested window
        stop: One past the last index of the requested window
        length: Length of the vector
    """

    def __init__(self, start: int, stop: int, length: int) -> None:
        """Initialize InvalidRangeError.

        Args:
            start: Requested start index
            stop: Requested stop index (exclusive)
            length: Length of the vector being printed
        """
        self.start = start
        self.stop = stop
        self.length = length

        message = f"Invalid range [{start}, {stop})"
        if start > stop:
            message += ": start is past stop"
        else:
            message += f" for vector of length {length}"

        super().__init__(message)

    def __repr__(self) -> str:
        """Return repr string for debugging."""
        return (
            f"InvalidRangeError(start={self.start}, "
            f"stop={self.stop}, "
            f"length={self.length})"
        )
