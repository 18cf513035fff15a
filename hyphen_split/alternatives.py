"""
Parser for non-standard hyphenation alternatives.

Some patterns carry a trailing clause such as ``c1k/k=k,1,2``: when the odd
weight of the pattern wins, the break also replaces text around it. The
clause holds three comma-separated fields:

    change  replacement text, the hyphen goes where ``=`` is
    index   position of the replacement inside the pattern
    cut     number of characters of the word the replacement removes
"""

from typing import List

from hyphen_split.raw_types import Alternative, Plain, Weight, WithException


def _to_int(field: str) -> int:
    """Parse a clause field, treating missing or garbage values as 0."""
    try:
        return int(field.strip())
    except ValueError:
        return 0


class AlternativeParser:
    """
    Weight factory bound to one pattern and its exception clause.

    The factory is called once per weight slot while the pattern is scanned
    left to right, so the index it reports moves with the scan.
    """

    def __init__(self, pattern: str, alternative: str):
        fields: List[str] = alternative.split(',')
        fields += [''] * (3 - len(fields))
        self.change = fields[0]
        self.index = _to_int(fields[1])
        self.cut = _to_int(fields[2])
        if pattern.startswith('.'):
            self.index += 1

    def __call__(self, value: int) -> Weight:
        self.index -= 1
        if value & 1:
            return WithException(value, Alternative(self.change, self.index, self.cut))
        return Plain(value)


def plain_weight(value: int) -> Weight:
    """Identity factory used for patterns without an exception clause."""
    return Plain(value)
