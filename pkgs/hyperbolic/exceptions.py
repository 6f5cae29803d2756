"""
Exception hierarchy for the hyperbolic structure package.

Invariant violations inside the traversal loop are checked with ``assert``;
the classes below cover conditions a caller can reasonably recover from.
"""


class HyperbolicError(Exception):
    """Base class for all errors raised by the hyperbolic package."""


class DimensionError(HyperbolicError, ValueError):
    """Raised for N < 1 or when collaborating objects disagree on N."""


class AccessorMismatch(HyperbolicError, TypeError):
    """Raised when layers with different common representations are composed."""


class DegenerateSpace(HyperbolicError, ValueError):
    """Raised when a space has no positive, finite Heisenberg measure."""


class IndexOutOfRange(HyperbolicError, IndexError):
    """Raised by the bounds-checked slot, zeta and vertex accessors."""

    def __init__(self, what: str, loc: int, size: int):
        self.what, self.loc, self.size = what, loc, size
        super().__init__(f"{what} index {loc} out of range [0, {size})")


class ParseError(HyperbolicError, ValueError):
    """Malformed bracketed input.

    ``position`` is 1-based; ``str()`` renders the input with a caret under
    the offending character::

        [1,2,[3,4,5,[6,7],]]
        ------------------^
    """

    def __init__(self, position: int, text: str, reason: str = "Malformed input vector"):
        self.position, self.text, self.reason = position, text, reason
        super().__init__(self._render())

    def _render(self) -> str:
        indicator = "-" * max(self.position - 1, 0) + "^"
        return f"{self.reason}:\n{self.text}\n{indicator}"
