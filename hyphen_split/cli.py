"""
CLI interface for hyphen-split.

Usage:
    hyphen-split --lang en_US hyphenation
    hyphen-split --dict hyph_de_DE.dic --hyphen = Silbentrennung
    hyphen-split --lang hu --json asszonnyal
    echo "word another" | hyphen-split --lang en --positions
"""

import argparse
import json
import logging
import sys
from typing import List

from hyphen_split import __version__
from hyphen_split.hyphenator import Hyphenator
from hyphen_split.resources import DictionaryRegistry, DictionarySource


# ============================================================================
# Output Formatting
# ============================================================================

def format_default(hyphenator: Hyphenator, words: List[str], hyphen: str) -> str:
    """Default output: one hyphenated word per line."""
    return "\n".join(hyphenator.inserted(word, hyphen) for word in words)


def format_positions(hyphenator: Hyphenator, words: List[str]) -> str:
    """Tab-separated word and break offsets, non-standard breaks marked with '*'."""
    lines = []
    for word in words:
        offsets = []
        for point in hyphenator.positions(word):
            offsets.append(f"{point.offset}*" if point.alternative else str(point.offset))
        lines.append(f"{word}\t{' '.join(offsets)}")
    return "\n".join(lines)


def format_json(hyphenator: Hyphenator, words: List[str], hyphen: str) -> str:
    """Format break points as JSON with full details."""
    data = []
    for word in words:
        points = []
        for point in hyphenator.positions(word):
            entry = {"offset": point.offset}
            if point.alternative is not None:
                entry["change"] = point.alternative.change
                entry["index"] = point.alternative.index
                entry["cut"] = point.alternative.cut
            points.append(entry)

        data.append({
            "word": word,
            "hyphenated": hyphenator.inserted(word, hyphen),
            "positions": points,
        })

    return json.dumps(data, ensure_ascii=False, indent=2)


# ============================================================================
# Main
# ============================================================================

def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="hyphen-split",
        description="Pattern-based word hyphenation",
    )
    parser.add_argument(
        "words",
        nargs="*",
        help="Words to hyphenate (read from stdin if omitted)",
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--lang", "-l",
        help="Language or locale tag (e.g. en, de-DE)",
    )
    source.add_argument(
        "--dict",
        dest="dictionary",
        help="Path of a hyph_*.dic file",
    )
    parser.add_argument(
        "--dictionaries",
        help="Folder with hyph_*.dic files (default: $HYPHEN_SPLIT_DICTIONARIES or packaged)",
    )
    parser.add_argument(
        "--hyphen",
        default="-",
        help="Text inserted at break points (default: '-')",
    )
    parser.add_argument(
        "--left",
        type=int,
        help="Minimum letters before a break",
    )
    parser.add_argument(
        "--right",
        type=int,
        help="Minimum letters after a break",
    )
    parser.add_argument(
        "--positions", "-p",
        action="store_true",
        help="Print break offsets instead of hyphenated words",
    )
    parser.add_argument(
        "--json", "-j",
        action="store_true",
        help="Output as JSON",
    )
    parser.add_argument(
        "--list-languages",
        action="store_true",
        help="List available languages and exit",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log dictionary loading",
    )
    parser.add_argument(
        "--version", "-v",
        action="version",
        version=f"hyphen-split {__version__}",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format='%(asctime)s - %(levelname)s - %(message)s',
    )

    registry = DictionaryRegistry(DictionarySource(args.dictionaries))

    if args.list_languages:
        for name in registry.source.list_languages():
            print(name)
        return 0

    if args.lang is None and args.dictionary is None:
        parser.error("one of --lang or --dict is required")

    words = args.words or sys.stdin.read().split()
    if not words:
        parser.print_help()
        return 1

    try:
        hyphenator = Hyphenator(
            lang=args.lang,
            filename=args.dictionary,
            left=args.left,
            right=args.right,
            registry=registry,
        )

        if args.json:
            print(format_json(hyphenator, words, args.hyphen))
        elif args.positions:
            print(format_positions(hyphenator, words))
        else:
            print(format_default(hyphenator, words, args.hyphen))

    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
