# SPDX-License-Identifier: MIT
"""Ordering of parsed version parts and versions.

Everything here derives from ``part_greater_than``:

- integers compare numerically
- a release number outranks a tag that starts with the same or a lower
  number (``3`` > ``3-RC1``), but not one whose leading number is higher
- literals compare case-insensitively
- a composite (``RC1``) outranks a plain literal (``RC``)
- composites with the same number of runs compare run by run; with
  different counts the longer one wins if it is ahead at any shared run or
  all shared runs tie

Versions compare major, then minor, then patch. Parts after patch are
ignored.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .parse import Part, Version


def _number_outranks(number: Part, other: Part) -> bool:
    """Compare an integer part against a non-integer one."""
    if other.sub_parts and other.sub_parts[0].is_int:
        return number.int_value >= other.sub_parts[0].int_value
    return True


def _non_int_greater_than(a: Part, b: Part) -> bool:
    if not a.sub_parts and not b.sub_parts:
        return a.raw.lower() > b.raw.lower()

    # Plain literal loses against anything split into runs
    if not a.sub_parts:
        return False
    if not b.sub_parts:
        return True

    if len(a.sub_parts) == len(b.sub_parts):
        for mine, theirs in zip(a.sub_parts, b.sub_parts):
            if part_greater_than(mine, theirs):
                return True
            if part_greater_than(theirs, mine):
                return False
        return False

    # Unequal run counts: the longer one wins if it is ahead at any shared
    # position, the shorter one only if it is ahead somewhere and never behind
    longer, shorter = (a, b) if len(a.sub_parts) > len(b.sub_parts) else (b, a)
    pairs = list(zip(longer.sub_parts, shorter.sub_parts))
    if any(part_greater_than(mine, theirs) for mine, theirs in pairs):
        longer_wins = True
    elif any(part_greater_than(theirs, mine) for mine, theirs in pairs):
        longer_wins = False
    else:
        longer_wins = True

    return longer_wins == (longer is a)


def part_greater_than(a: Part, b: Part) -> bool:
    """Return True if part ``a`` ranks strictly above part ``b``."""
    if a.is_int and b.is_int:
        return a.int_value > b.int_value
    if a.is_int:
        return _number_outranks(a, b)
    if b.is_int:
        # An integer and a non-integer never tie, so this is not (b >= a)
        return not _number_outranks(b, a)
    return _non_int_greater_than(a, b)


def part_greater_or_equal(a: Part, b: Part) -> bool:
    return part_greater_than(a, b) or not part_greater_than(b, a)


def part_semantically_equal(a: Part, b: Part) -> bool:
    """Return True if neither part ranks above the other."""
    return not part_greater_than(a, b) and not part_greater_than(b, a)


def part_less_than(a: Part, b: Part) -> bool:
    return not part_greater_or_equal(a, b)


def part_fully_identical(a: Part, b: Part) -> bool:
    """Return True if both parts have the same text and the same parsed shape."""
    return (
        a.raw == b.raw
        and a.int_value == b.int_value
        and a.is_int == b.is_int
        and len(a.sub_parts) == len(b.sub_parts)
        and all(part_fully_identical(x, y) for x, y in zip(a.sub_parts, b.sub_parts))
    )


def version_greater_than(v1: Version, v2: Version) -> bool:
    """Return True if ``v1`` is newer than ``v2``.

    Only major, minor and patch are consulted, so ``1.2.3.4`` and
    ``1.2.3.5`` compare as equal.
    """
    for mine, theirs in ((v1.major, v2.major), (v1.minor, v2.minor)):
        if part_greater_than(mine, theirs):
            return True
        if part_less_than(mine, theirs):
            return False

    return part_greater_than(v1.patch, v2.patch)


def version_semantically_equal(v1: Version, v2: Version) -> bool:
    return not version_greater_than(v1, v2) and not version_greater_than(v2, v1)


def version_greater_or_equal(v1: Version, v2: Version) -> bool:
    return version_greater_than(v1, v2) or version_semantically_equal(v1, v2)


def version_less_than(v1: Version, v2: Version) -> bool:
    return not version_greater_or_equal(v1, v2)


def version_fully_identical(v1: Version, v2: Version) -> bool:
    """Return True if major, minor and patch are exactly identical."""
    return (
        part_fully_identical(v1.major, v2.major)
        and part_fully_identical(v1.minor, v2.minor)
        and part_fully_identical(v1.patch, v2.patch)
    )
