"""
config.py - Configuration Wrapper

Turns a ConfigParser loaded from config.ini into typed attributes
used by the launcher and the TagCloud pipeline.
"""

import codecs

from tagcloud.tokenizer import DEFAULT_SEPARATORS


DEFAULT_STYLESHEETS = [
    "http://www.cse.ohio-state.edu/software/2231/web-sw2/assignments/"
    "projects/tag-cloud-generator/data/tagcloud.css",
    "tagcloud.css",
]


def decode_separators(raw):
    """Decode backslash escapes (\\x20, \\t, ...) written in the INI file."""
    # Latin-1 maps characters to bytes one to one; anything wider is
    # turned into a \\u escape so unicode_escape restores it unchanged
    return codecs.decode(raw.encode("latin-1", "backslashreplace"), "unicode_escape")


class Config(object):
    """
    Typed view of the [TOKENIZER], [CLOUD], [INPUT] and [OUTPUT] sections.

    Missing sections or keys fall back to the built-in defaults.
    """

    def __init__(self, config):
        """
        Args:
            config: ConfigParser with config.ini already read

        Raises:
            ValueError: If [CLOUD] SIZE is present but not an integer
        """
        raw_separators = config.get("TOKENIZER", "SEPARATORS", fallback=None)
        if raw_separators:
            self.separators = decode_separators(raw_separators)
        else:
            self.separators = DEFAULT_SEPARATORS

        # None means "ask the user"
        raw_size = config.get("CLOUD", "SIZE", fallback="").strip()
        self.size = int(raw_size) if raw_size else None

        self.input_encoding = config.get("INPUT", "ENCODING", fallback="utf-8").strip()
        self.output_encoding = config.get("OUTPUT", "ENCODING", fallback="utf-8").strip()

        raw_stylesheets = config.get("OUTPUT", "STYLESHEETS", fallback=None)
        if raw_stylesheets is None:
            self.stylesheets = list(DEFAULT_STYLESHEETS)
        else:
            self.stylesheets = [href.strip() for href in raw_stylesheets.split(",") if href.strip()]
