"""
source.py - Line Source

Lazily yields the lines of an input file with line endings stripped.
"""


def read_lines(file_path, encoding="utf-8", errors="ignore"):
    """
    Runtime Complexity: O(n) where n is the number of characters in the file.

    The file is opened on the first next() and closed once the generator
    is exhausted or closed. File-level exceptions will propagate.
    """
    with open(file_path, "r", encoding=encoding, errors=errors) as file:
        for line in file:
            yield line.rstrip("\r\n")
