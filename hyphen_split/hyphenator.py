"""
Word-level hyphenation helpers.

HyphDict answers "where may this word break"; Hyphenator adds the minimum
number of letters kept on each side of a break and applies the text
substitutions of non-standard breaks.
"""

from pathlib import Path
from typing import Iterator, List, Optional, Tuple, Union

from hyphen_split.dictionary import HyphDict
from hyphen_split.raw_types import BreakPoint
from hyphen_split.resources import DictionaryRegistry, default_registry

DEFAULT_LEFT = 2
DEFAULT_RIGHT = 2


class Hyphenator:
    """
    Hyphenation for one language.

    Exactly one of ``lang``, ``filename`` or ``dictionary`` selects the
    patterns. ``left`` and ``right`` default to the dictionary's
    LEFTHYPHENMIN / RIGHTHYPHENMIN, or 2.

    Example:
        >>> hyphenator = Hyphenator(lang="en_US")
        >>> hyphenator.inserted("hyphenation")
        'hy-phen-ation'
    """

    def __init__(
        self,
        lang: Optional[str] = None,
        filename: Optional[Union[str, Path]] = None,
        dictionary: Optional[HyphDict] = None,
        left: Optional[int] = None,
        right: Optional[int] = None,
        registry: Optional[DictionaryRegistry] = None,
    ):
        if dictionary is not None:
            self.hd = dictionary
        else:
            if registry is None:
                registry = default_registry()
            if filename is not None:
                self.hd = registry.get(filename)
            elif lang is not None:
                self.hd = registry.for_language(lang)
            else:
                raise ValueError("one of lang, filename or dictionary is required")

        self.left = left if left is not None else self.hd.parameters.get('LEFTHYPHENMIN', DEFAULT_LEFT)
        self.right = right if right is not None else self.hd.parameters.get('RIGHTHYPHENMIN', DEFAULT_RIGHT)

    def __repr__(self) -> str:
        return f"Hyphenator({self.hd!r}, left={self.left}, right={self.right})"

    def positions(self, word: str) -> List[BreakPoint]:
        """Break points leaving at least ``left`` and ``right`` letters around them."""
        right = len(word) - self.right
        return [point for point in self.hd.positions(word) if self.left <= point.offset <= right]

    def _split(self, word: str, point: BreakPoint) -> Tuple[str, str]:
        if point.alternative is None:
            return word[:point.offset], word[point.offset:]

        change, index, cut = point.alternative
        index = max(index + point.offset, 0)
        if word.isupper():
            change = change.upper()
        head, _, tail = change.partition('=')
        return word[:index] + head, tail + word[index + cut:]

    def iterate(self, word: str) -> Iterator[Tuple[str, str]]:
        """
        Iterate over all (head, tail) splits of a word, longest head first.

        Example:
            >>> list(Hyphenator(lang="en").iterate("hyphenation"))
            [('hyphen', 'ation'), ('hy', 'phenation')]
        """
        for point in reversed(self.positions(word)):
            yield self._split(word, point)

    def inserted(self, word: str, hyphen: str = '-') -> str:
        """Get the word with ``hyphen`` inserted at every break point."""
        letters = list(word)
        for point in reversed(self.positions(word)):
            if point.alternative is None:
                letters.insert(point.offset, hyphen)
                continue
            change, index, cut = point.alternative
            index = max(index + point.offset, 0)
            if word.isupper():
                change = change.upper()
            letters[index:index + cut] = change.replace('=', hyphen)
        return ''.join(letters)
