"""
fonts.py - Font Class Mapping

Maps a word's count, relative to the largest count in the cloud, onto
one of 38 font classes f11..f48 defined in tagcloud.css.
"""

from tagcloud.errors import InvalidArgument


BASE_FONT_CLASS = 10
FONT_STEPS = 37  # 48 - 11


def font_class(count, max_count):
    """
    Bucket count / max_count into [11, 48] with steps of 1/37.

    Counts every multiple of 1/37 in [0, ratio], so any positive ratio takes
    at least one step. Done in integer arithmetic so bucket edges do not
    drift with float rounding. Monotonic in count; count == max_count
    always gives 48.

    Raises:
        InvalidArgument: Unless 1 <= count <= max_count
    """
    if not 1 <= count <= max_count:
        raise InvalidArgument(
            f"count {count} must be between 1 and max count {max_count}")
    steps = (count * FONT_STEPS) // max_count + 1
    return BASE_FONT_CLASS + steps


def font_class_name(count, max_count):
    """CSS class name for the bucket, e.g. 'f48'."""
    return f"f{font_class(count, max_count)}"
