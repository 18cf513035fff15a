"""
Hyphenation pattern dictionary for hyphen-split.

This module turns the text of a ``hyph_*.dic`` file into an immutable
pattern store and computes break points with Liang's algorithm.

The pattern keys are stored in a marisa_trie.Trie. The trie never changes
after construction, and its common-prefix search gives every pattern that
starts at a given position of the word in one call, shortest first.
"""

import logging
import re
import threading
from typing import Callable, Dict, Iterable, List, Optional, Tuple

import marisa_trie

from hyphen_split.alternatives import AlternativeParser, plain_weight
from hyphen_split.raw_types import BreakPoint, PatternEntry, Weight, ZERO

logger = logging.getLogger(__name__)


# ============================================================================
# Source Format
# ============================================================================
# Line 1 declares the encoding, every other line holds one pattern such as
# "a1b", ".ach4" or "c1k/k=k,1,2". Lines starting with one of IGNORED are
# comments or numeric parameters.

PARAMETERS = (
    'LEFTHYPHENMIN',
    'RIGHTHYPHENMIN',
    'COMPOUNDLEFTHYPHENMIN',
    'COMPOUNDRIGHTHYPHENMIN',
)
IGNORED = ('%', '#') + PARAMETERS

HEX_ESCAPE = re.compile(r'\^{2}([0-9a-fA-F]{2})')

DIGITS = frozenset('0123456789')

# Word boundary marker, added on both sides of a word before matching
BOUNDARY = '.'


class DictionaryLoadError(Exception):
    """Raised when a dictionary source cannot be read or is truncated."""
    pass


class MalformedPatternError(ValueError):
    """Raised for a pattern line that cannot be scanned; never leaves the loader."""
    pass


def lower_word(word: str) -> str:
    """
    Lowercase a word one character at a time, keeping its length.

    Characters whose lowercase form is longer (such as "İ") are kept as
    they are, so offsets into the result are offsets into the word.
    """
    return ''.join(c if len(c.lower()) != 1 else c.lower() for c in word)


def is_encodable(word: str) -> bool:
    """False for strings holding lone surrogates, which are not valid Unicode."""
    try:
        word.encode('utf-8')
    except UnicodeEncodeError:
        return False
    return True


def unescape(pattern: str) -> str:
    """Replace ``^^hh`` escapes by the character with code point 0xhh."""
    return HEX_ESCAPE.sub(lambda match: chr(int(match.group(1), 16)), pattern)


def scan_pattern(
    pattern: str,
    factory: Callable[[int], Weight] = plain_weight,
) -> Tuple[str, List[Weight]]:
    """
    Split a pattern into its letters and its weights.

    Weight slots and letter slots alternate, starting and ending with a
    weight slot, so there is one weight more than there are letters:

        >>> key, weights = scan_pattern('a1b')
        >>> key, [w.value for w in weights]
        ('ab', [0, 1, 0])

    Raises:
        MalformedPatternError: If the pattern has no letters or two digits
            in a row
    """
    letters = []
    weights = []
    pos, end = 0, len(pattern)

    while True:
        value = 0
        if pos < end and pattern[pos] in DIGITS:
            value = int(pattern[pos])
            pos += 1
        weights.append(factory(value))

        if pos >= end:
            break
        if pattern[pos] in DIGITS:
            raise MalformedPatternError(f"consecutive digits in {pattern!r}")
        letters.append(pattern[pos])
        pos += 1

    if not letters:
        raise MalformedPatternError(f"no letters in {pattern!r}")

    return ''.join(letters), weights


def parse_parameter(line: str) -> Optional[Tuple[str, int]]:
    """Parse a ``LEFTHYPHENMIN 2`` style line, None if it is not one."""
    fields = line.split()
    if len(fields) != 2 or fields[0] not in PARAMETERS:
        return None
    try:
        return fields[0], int(fields[1])
    except ValueError:
        return None


def parse_line(line: str) -> Optional[Tuple[str, PatternEntry]]:
    """
    Parse one stripped, non-ignored source line.

    Returns:
        (key, entry), or None if the pattern carries no hyphenation signal

    Raises:
        MalformedPatternError: If the pattern cannot be scanned
    """
    pattern = unescape(line)

    factory: Callable[[int], Weight] = plain_weight
    if '/' in pattern and '=' in pattern:
        pattern, alternative = pattern.split('/', 1)
        factory = AlternativeParser(pattern, alternative)

    key, weights = scan_pattern(pattern, factory)

    if not any(weight.value for weight in weights):
        return None

    start, stop = 0, len(weights)
    while weights[start].value == 0:
        start += 1
    while weights[stop - 1].value == 0:
        stop -= 1

    return key, PatternEntry(start, tuple(weights[start:stop]))


# ============================================================================
# Pattern Dictionary
# ============================================================================

class HyphDict:
    """
    Hyphenation patterns of one language.

    The pattern store is read-only once built and can be shared between
    threads. The per-word result cache is the only mutable state and is
    guarded by a lock.

    Attributes:
        name: Free-form label, usually the source file name
        max_length: Length of the longest pattern key
        parameters: Numeric header parameters (LEFTHYPHENMIN, ...)
    """

    def __init__(
        self,
        patterns: Dict[str, PatternEntry],
        parameters: Optional[Dict[str, int]] = None,
        name: Optional[str] = None,
    ):
        self.name = name
        self.parameters = dict(parameters or {})
        self.max_length = max((len(key) for key in patterns), default=0)

        self._trie = marisa_trie.Trie(list(patterns))
        entries: List[Optional[PatternEntry]] = [None] * len(self._trie)
        for key, entry in patterns.items():
            entries[self._trie[key]] = entry
        self._entries: Tuple[PatternEntry, ...] = tuple(entries)

        self._cache: Dict[str, Tuple[BreakPoint, ...]] = {}
        self._cache_lock = threading.Lock()

    @classmethod
    def from_text(cls, text: str, name: Optional[str] = None) -> 'HyphDict':
        """
        Build a dictionary from the Unicode text of a ``.dic`` file.

        Malformed lines are skipped. When a key appears twice, the last
        occurrence wins.

        Raises:
            DictionaryLoadError: If the text has no line after the header
        """
        lines = text.split('\n')
        if len(lines) < 2:
            raise DictionaryLoadError(
                f"Dictionary {name or '<text>'} has no patterns after the encoding line"
            )
        return cls.from_lines(lines[1:], name=name)

    @classmethod
    def from_lines(cls, lines: Iterable[str], name: Optional[str] = None) -> 'HyphDict':
        """Build a dictionary from pattern lines (header already removed)."""
        patterns: Dict[str, PatternEntry] = {}
        parameters: Dict[str, int] = {}
        skipped = 0

        for line in lines:
            line = line.strip()
            if not line:
                continue
            if line.startswith(IGNORED):
                parameter = parse_parameter(line)
                if parameter is not None:
                    parameters[parameter[0]] = parameter[1]
                continue

            try:
                parsed = parse_line(line)
            except MalformedPatternError as e:
                logger.debug("Skipping pattern line: %s", e)
                skipped += 1
                continue

            if parsed is not None:
                key, entry = parsed
                patterns[key] = entry

        hyph_dict = cls(patterns, parameters=parameters, name=name)
        logger.info(
            "Loaded %s: %d patterns, longest %d, %d malformed lines skipped",
            name or '<text>', len(hyph_dict), hyph_dict.max_length, skipped,
        )
        return hyph_dict

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: str) -> bool:
        return key in self._trie

    def __repr__(self) -> str:
        return f"HyphDict({self.name!r}, patterns={len(self)}, max_length={self.max_length})"

    def lookup(self, key: str) -> Optional[PatternEntry]:
        """
        Look up a pattern by its letters.

        Args:
            key: Pattern letters without digits (e.g. ".ach")

        Returns:
            The stored entry, or None
        """
        if key not in self._trie:
            return None
        return self._entries[self._trie[key]]

    def keys(self) -> List[str]:
        """All pattern keys, in trie order."""
        return self._trie.keys()

    # ------------------------------------------------------------------------
    # Break points
    # ------------------------------------------------------------------------

    def positions(self, word: str) -> Tuple[BreakPoint, ...]:
        """
        Get the break points of a word, computing them on first use.

        Matching is case-insensitive; results are cached per lowercased word
        for the lifetime of the dictionary. Strings that are not valid
        Unicode (lone surrogates) have no break points.

        Args:
            word: The word to hyphenate

        Returns:
            Break points in ascending offset order
        """
        word = lower_word(word)
        if not is_encodable(word):
            logger.debug("No break points for non-Unicode word %r", word)
            return ()

        with self._cache_lock:
            points = self._cache.get(word)
        if points is not None:
            return points

        # Two threads may compute the same word; both get the same result.
        points = self.compute_positions(word)
        with self._cache_lock:
            return self._cache.setdefault(word, points)

    def compute_positions(self, word: str) -> Tuple[BreakPoint, ...]:
        """Run the pattern scan on an already lowercased word, bypassing the cache."""
        if not self._entries:
            return ()

        pointed = BOUNDARY + word + BOUNDARY
        references: List[Weight] = [ZERO] * (len(pointed) + 1)

        for i in range(len(pointed) - 1):
            for key in self._trie.prefixes(pointed[i:i + self.max_length]):
                entry = self._entries[self._trie[key]]
                for index, weight in enumerate(entry.weights, i + entry.start):
                    if weight.value > references[index].value:
                        references[index] = weight

        # references[i] sits between pointed[i - 1] and pointed[i], which is
        # just before word[i - 1]
        return tuple(
            BreakPoint(i - 1, weight.alternative)
            for i, weight in enumerate(references)
            if weight.value & 1 and 1 <= i <= len(word)
        )

    def cache_size(self) -> int:
        """Number of words with cached break points."""
        with self._cache_lock:
            return len(self._cache)

    def clear_cache(self):
        """Drop all cached break points."""
        with self._cache_lock:
            self._cache.clear()
