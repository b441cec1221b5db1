"""Errors raised by the tag cloud pipeline."""


class InvalidArgument(ValueError):
    """A requested value is outside what the input can satisfy (cloud size, scan offset, count)."""


class EmptyInput(InvalidArgument):
    """The input held no words, so no cloud of any size can be built."""
