"""
frequency.py - Word Frequency Counter

Drives the scanner over every line of a line source and counts the
word runs. Counting is case-sensitive: "The" and "the" are distinct.
"""

from collections import Counter

from tagcloud.tokenizer import iter_tokens, is_separator_token


def count_words(lines, separators):
    """
    Runtime Complexity: O(N) where N is the total number of characters.
    Each line is scanned once and dictionary updates are O(1).

    Lines are scanned independently, so a word never spans a line break.
    Errors raised by the line source propagate unchanged.

    Returns:
        dict mapping word -> number of occurrences (empty for no input)
    """
    counts = Counter()
    for line in lines:
        for token in iter_tokens(line, separators):
            if not is_separator_token(token, separators):
                counts[token] += 1
    return dict(counts)
