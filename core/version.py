"""
Dotted-numeric version ordering.

Versions such as "1.021.01.00" are compared segment by segment as integers,
so "1.10" sorts above "1.9" and "1.2" equals "1.2.0".
"""
import functools
import re
from enum import IntEnum
from itertools import zip_longest
from typing import List, Optional

_NUMERIC_SEGMENT = re.compile(r"\s*\d+\s*")


class Ordering(IntEnum):
    LESS = -1
    EQUAL = 0
    GREATER = 1


def _segment_value(segment: str) -> int:
    if not _NUMERIC_SEGMENT.fullmatch(segment):
        return 0
    try:
        return int(segment)
    except ValueError:
        # int() refuses digit strings past sys.get_int_max_str_digits()
        return 0


def parse_version(version: str) -> List[int]:
    """
    Split a version string into integer segments.

    Empty segments (leading, trailing or doubled dots) are dropped and any
    segment that is not a plain non-negative integer counts as 0.
    """
    return [_segment_value(segment) for segment in version.split(".") if segment]


def compare_versions(a: Optional[str], b: Optional[str]) -> Ordering:
    """
    Compare two optional version strings.

    A missing version sorts below any present one, and missing trailing
    segments are treated as 0.
    """
    if a == b:
        return Ordering.EQUAL
    if a is None:
        return Ordering.LESS
    if b is None:
        return Ordering.GREATER

    for left, right in zip_longest(parse_version(a), parse_version(b), fillvalue=0):
        if left != right:
            return Ordering.GREATER if left > right else Ordering.LESS
    return Ordering.EQUAL


version_sort_key = functools.cmp_to_key(compare_versions)
