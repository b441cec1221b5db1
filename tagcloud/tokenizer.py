"""
tokenizer.py - Separator-Aware Lexical Scanner

Splits a line into maximal runs of word characters and maximal runs
of separator characters. Concatenating the runs gives back the line.
"""

from tagcloud.errors import InvalidArgument


DEFAULT_SEPARATORS = " \t\n\r,-.!?[]';:/()\"*`"


def build_separators(chars=DEFAULT_SEPARATORS):
    """
    Runtime Complexity: O(n) where n is len(chars).
    Duplicates collapse; an empty string gives an empty set.
    """
    return frozenset(chars)


def next_token(text, position, separators):
    """
    Return the maximal word or separator run of text starting at position.

    Runtime Complexity: O(k) where k is the length of the returned token.
    Each character is tested against the separator set once.

    Raises:
        InvalidArgument: If position is not a valid index into text
    """
    if not 0 <= position < len(text):
        raise InvalidArgument(
            f"position {position} outside text of length {len(text)}")

    is_separator = text[position] in separators
    end = position + 1
    while end < len(text) and (text[end] in separators) == is_separator:
        end += 1
    return text[position:end]


def is_separator_token(token, separators):
    # All characters of a token share a kind, so the first one decides
    return token[0] in separators


def iter_tokens(line, separators):
    """
    Yield successive tokens of line from offset 0 until it is exhausted.

    Runtime Complexity: O(n) where n is len(line).
    """
    position = 0
    while position < len(line):
        token = next_token(line, position, separators)
        yield token
        position += len(token)
