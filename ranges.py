"""
Ordering and overlap over canonical article tokens.

Tokens are ``N``, ``N-M`` (sub-numbered, recursively) or ``A,B`` (a range).
A sub-numbered token sorts after the bare token with the same leading
number (``12 < 12-3 < 13``).
"""

from __future__ import annotations

import re

from config import RANGE_SEP, SUB_SEP

_RE_LEAD = re.compile(r"^[0-9]+")


def _lead(token: str) -> int:
    m = _RE_LEAD.match(token)
    if m is None:
        raise ValueError(f"article token must start with a number: {token!r}")
    return int(m.group(0))


def is_resolved(token: str) -> bool:
    """False for the sentinel and for ranges with an unresolved bound."""
    return all(_RE_LEAD.match(bound) for bound in token.split(RANGE_SEP))


def _is_sub_article(parent: str, child: str) -> bool:
    # "12-3" is numbered under "12"
    return child.startswith(parent + SUB_SEP)


def compare_article_num(a: str, b: str) -> int:
    """Return -1, 0 or 1 as *a* sorts before, equal to or after *b*."""
    lead_a, lead_b = _lead(a), _lead(b)
    if lead_a < lead_b:
        return -1
    if lead_a > lead_b:
        return 1
    if a == b:
        return 0

    parts_a = a.split(SUB_SEP)
    parts_b = b.split(SUB_SEP)
    if len(parts_a) > 1 and len(parts_b) > 1:
        return compare_article_num(
            SUB_SEP.join(parts_a[1:]), SUB_SEP.join(parts_b[1:])
        )
    if len(parts_a) > 1:
        return 1
    if len(parts_b) > 1:
        return -1
    return 0


def is_included(bounds: list[str] | tuple[str, str], num: str) -> bool:
    """True if *num* equals a bound or lies between the two bounds."""
    lo = compare_article_num(bounds[0], num)
    hi = compare_article_num(bounds[1], num)
    return lo == 0 or hi == 0 or lo != hi


def has_intersection(a: str, b: str) -> bool:
    """True if two tokens (points or ranges) overlap.

    Two points overlap when equal or when one is numbered under the other
    (``12`` and ``12-3``).  Two ranges overlap when a bound of either lies
    inside the other.
    """
    a_range = RANGE_SEP in a
    b_range = RANGE_SEP in b
    if a_range and b_range:
        bounds_a = a.split(RANGE_SEP)
        bounds_b = b.split(RANGE_SEP)
        return (
            is_included(bounds_a, bounds_b[0])
            or is_included(bounds_a, bounds_b[1])
            or is_included(bounds_b, bounds_a[0])
            or is_included(bounds_b, bounds_a[1])
        )
    if a_range:
        return is_included(a.split(RANGE_SEP), b)
    if b_range:
        return is_included(b.split(RANGE_SEP), a)
    return a == b or _is_sub_article(a, b) or _is_sub_article(b, a)
