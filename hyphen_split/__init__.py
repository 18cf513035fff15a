"""
hyphen-split: Pattern-based hyphenation

Finds where a word may be broken across lines, using the TeX-style
hyphenation patterns of LibreOffice/Hunspell ``hyph_*.dic`` files
(Liang's algorithm, including non-standard breaks such as Hungarian
"ssz" -> "sz-sz").

Basic Usage:
    import hyphen_split

    hyphenator = hyphen_split.Hyphenator(lang="en_US")
    print(hyphenator.inserted("hyphenation"))      # hy-phen-ation

    for point in hyphen_split.positions("hyphenation", lang="en_US"):
        print(point.offset, point.alternative)
"""

import time
from pathlib import Path
from typing import List, Optional, Tuple, Union

from hyphen_split.dictionary import DictionaryLoadError, HyphDict
from hyphen_split.hyphenator import Hyphenator
from hyphen_split.raw_types import Alternative, BreakPoint, PatternEntry, Plain, WithException
from hyphen_split.resources import (
    DictionaryRegistry,
    DictionarySource,
    default_registry,
    load_dictionary,
)

__version__ = "0.1.0"


# =============================================================================
# Main API
# =============================================================================

def positions(
    word: str,
    lang: Optional[str] = None,
    filename: Optional[Union[str, Path]] = None,
    registry: Optional[DictionaryRegistry] = None,
) -> Tuple[BreakPoint, ...]:
    """
    Get all pattern break points of a word.

    Unlike Hyphenator.positions, no minimum is applied on either side of the
    break.

    Args:
        word: The word to hyphenate
        lang: Language or locale tag ("de", "en-GB", ...)
        filename: Path of a ``.dic`` file, instead of ``lang``
        registry: Registry holding loaded dictionaries (default registry if None)

    Returns:
        Break points in ascending offset order

    Raises:
        KeyError: If no dictionary matches ``lang``
        DictionaryLoadError: If the dictionary cannot be loaded

    Example:
        >>> [p.offset for p in hyphen_split.positions("hyphenation", lang="en")]
        [2, 6]
    """
    if registry is None:
        registry = default_registry()
    if filename is not None:
        hyph_dict = registry.get(filename)
    elif lang is not None:
        hyph_dict = registry.for_language(lang)
    else:
        raise ValueError("lang or filename is required")
    return hyph_dict.positions(word)


def languages(registry: Optional[DictionaryRegistry] = None) -> List[str]:
    """Get the names of all available languages."""
    if registry is None:
        registry = default_registry()
    return registry.source.list_languages()


def language_fallback(language: str, registry: Optional[DictionaryRegistry] = None) -> Optional[str]:
    """
    Get the available language closest to a locale tag.

    Example:
        >>> hyphen_split.language_fallback("en-US-variant")
        'en_US'
    """
    if registry is None:
        registry = default_registry()
    return registry.source.language_fallback(language)


def warm_up(lang: str, verbose: bool = False, registry: Optional[DictionaryRegistry] = None) -> Tuple[float, dict]:
    """
    Pre-load the dictionary of a language.

    Args:
        lang: Language or locale tag
        verbose: If True, print timing information
        registry: Registry to load into (default registry if None)

    Returns:
        Tuple of (total_time_seconds, timing_details_dict)
    """
    if registry is None:
        registry = default_registry()

    timings = {}
    total_start = time.perf_counter()

    if verbose:
        print(f"Loading hyphenation dictionary for {lang}...")

    hyph_dict = registry.for_language(lang)
    timings['dictionary'] = (time.perf_counter() - total_start) * 1000

    if verbose:
        print(f"  Dictionary:     {timings['dictionary']:>7.1f}ms ({len(hyph_dict):,} patterns)")

    total_time = time.perf_counter() - total_start
    timings['total'] = total_time * 1000

    return total_time, timings


def get_version() -> str:
    """Get the library version."""
    return __version__


# =============================================================================
# Module-level exports
# =============================================================================

__all__ = [
    # Data classes
    "Alternative",
    "BreakPoint",
    "PatternEntry",
    "Plain",
    "WithException",
    # Dictionaries
    "HyphDict",
    "DictionaryRegistry",
    "DictionarySource",
    "default_registry",
    "load_dictionary",
    # API
    "Hyphenator",
    "positions",
    "languages",
    "language_fallback",
    "warm_up",
    "get_version",
    # Exceptions
    "DictionaryLoadError",
    # Version
    "__version__",
]
