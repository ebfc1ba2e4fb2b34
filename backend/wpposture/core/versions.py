from itertools import zip_longest
from typing import List


def _segments(version: str) -> List[int]:
    # non-numeric segments count as 0
    return [int(p) if p.isascii() and p.isdigit() else 0 for p in (version or "").strip().split(".")]


def compare_versions(left: str, right: str) -> int:
    """
    Compare two dotted version strings numerically, segment by segment.
    Missing trailing segments are treated as 0, so "6.4" == "6.4.0".
    Returns -1, 0 or 1.
    """
    for a, b in zip_longest(_segments(left), _segments(right), fillvalue=0):
        if a < b:
            return -1
        if a > b:
            return 1
    return 0
