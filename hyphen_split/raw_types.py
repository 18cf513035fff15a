"""
Lightweight data structures for pattern weights and break points.

A weight is either a plain score or a score carrying exception data
(a non-standard break that substitutes text). Both expose ``value`` so the
position scan can compare them without caring which one it holds.
"""

from typing import NamedTuple, Optional, Tuple, Union


class Alternative(NamedTuple):
    """
    Exception data for a non-standard break.

    Attributes:
        change: Replacement text, ``left=right`` (e.g. "ff=f")
        index: Where the replacement starts, relative to the break
        cut: How many characters of the word the replacement removes
    """
    change: str
    index: int
    cut: int


class Plain(NamedTuple):
    """A plain weight at one inter-letter boundary."""
    value: int

    @property
    def alternative(self) -> Optional[Alternative]:
        return None


class WithException(NamedTuple):
    """An odd weight tagged with exception data."""
    value: int
    alternative: Alternative


Weight = Union[Plain, WithException]

ZERO = Plain(0)


class PatternEntry(NamedTuple):
    """
    A stored pattern value.

    ``start`` is the number of zero weights trimmed off the left of the
    pattern, so ``weights[k]`` applies at boundary ``start + k``.
    """
    start: int
    weights: Tuple[Weight, ...]


class BreakPoint(NamedTuple):
    """A permissible break inside a word, before ``word[offset]``."""
    offset: int
    alternative: Optional[Alternative] = None

    @property
    def is_plain(self) -> bool:
        """True if the break needs no text substitution."""
        return self.alternative is None
