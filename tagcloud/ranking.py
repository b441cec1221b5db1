"""
ranking.py - Top-N Rank Selector

Picks the N most frequent words from a frequency table and orders them
alphabetically (case-insensitive) for display.

Ordering rules:
    - by count, highest first
    - equal counts: word ascending by code point ("Zebra" < "apple")
    - the chosen N are then stably re-sorted by word.lower(), so words
      differing only in case keep their count order
"""

from collections import namedtuple

from tagcloud.errors import InvalidArgument, EmptyInput
from tagcloud.fonts import font_class


RankedEntry = namedtuple("RankedEntry", ["word", "count"])
CloudItem = namedtuple("CloudItem", ["word", "count", "font_class"])


def by_count(entry):
    return (-entry.count, entry.word)


def by_word(entry):
    return entry.word.lower()


class Ranking(object):
    """
    The selected entries in display order plus the count used for font scaling.

    Attributes:
        entries: tuple of RankedEntry, alphabetical (case-insensitive)
        max_count: count of the most frequent word in the table
    """

    def __init__(self, entries, max_count):
        self.entries = tuple(entries)
        self.max_count = max_count

    @property
    def size(self):
        return len(self.entries)

    def cloud_items(self):
        """Yield CloudItem(word, count, font_class) in display order."""
        for entry in self.entries:
            yield CloudItem(entry.word, entry.count, font_class(entry.count, self.max_count))

    def __iter__(self):
        return iter(self.entries)

    def __len__(self):
        return len(self.entries)

    def __eq__(self, other):
        if not isinstance(other, Ranking):
            return NotImplemented
        return self.entries == other.entries and self.max_count == other.max_count

    def __repr__(self):
        return f"Ranking(entries={list(self.entries)!r}, max_count={self.max_count})"


def validate_size(n):
    """
    Raises:
        InvalidArgument: If n is not a positive integer
    """
    if isinstance(n, bool) or not isinstance(n, int):
        raise InvalidArgument(f"cloud size must be an integer, got {n!r}")
    if n < 1:
        raise InvalidArgument(f"cloud size must be at least 1, got {n}")


def select_top_n(table, n):
    """
    Select the n highest-count words of table, returned alphabetically.

    Runtime Complexity: O(W log W) where W is the number of distinct words.
    Sorting all pairs by count dominates; the second sort is O(n log n).

    The table is read, never modified.

    Raises:
        InvalidArgument: If n < 1 or n exceeds the number of distinct words
        EmptyInput: If the table holds no words
    """
    validate_size(n)
    if not table:
        raise EmptyInput("no words found in input")
    if n > len(table):
        raise InvalidArgument(
            f"cloud size {n} exceeds the {len(table)} distinct words in input")

    by_frequency = sorted(
        (RankedEntry(word, count) for word, count in table.items()),
        key=by_count)

    # The anchor is the most frequent word; its count scales every font
    max_count = by_frequency[0].count
    selected = sorted(by_frequency[:n], key=by_word)
    return Ranking(selected, max_count)
