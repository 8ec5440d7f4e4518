# SPDX-License-Identifier: MIT
"""Free-form version parsing.

Version strings are split on dots into segments. Each segment becomes a
``Part``: an integer (``3``), a literal (``alpha``), or a composite of
alternating digit and non-digit runs (``3-RC11`` -> ``3``, ``-RC``, ``11``).
Parsing is total: any string yields a ``Version``, however degenerate.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from itertools import groupby
from typing import Optional

from .compare import (
    part_greater_or_equal,
    part_greater_than,
    part_less_than,
    version_fully_identical,
    version_greater_or_equal,
    version_greater_than,
    version_less_than,
    version_semantically_equal,
)

logger = logging.getLogger(__name__)

# Integer literal, optionally signed, ASCII digits only
_INTEGER_LITERAL = re.compile(r"[+-]?[0-9]+")


class VersionTypeError(TypeError):
    """Raised when something other than a version string is given to the parser."""

    def __init__(self, value: object, message: str = ""):
        self.value = value
        self.message = message or (
            f"Version must be a string, got {type(value).__name__}"
        )
        super().__init__(self.message)


@dataclass(frozen=True, slots=True)
class Part:
    """One dot-delimited segment of a version, or a run inside one.

    Attributes:
        raw: The exact source text
        is_int: True if the text is a pure integer literal
        int_value: Integer value, only meaningful when ``is_int`` is set
        sub_parts: Child runs for segments mixing digits and non-digits
    """

    raw: str
    is_int: bool = False
    int_value: int = 0
    sub_parts: tuple[Part, ...] = ()

    def __post_init__(self) -> None:
        if self.is_int and self.sub_parts:
            raise ValueError("An integer part cannot have sub-parts")

    @property
    def is_leaf(self) -> bool:
        return not self.sub_parts

    @property
    def is_composite(self) -> bool:
        return bool(self.sub_parts)

    @property
    def is_literal(self) -> bool:
        """Return True for a non-integer part with no sub-parts."""
        return not self.is_int and not self.sub_parts

    def __str__(self) -> str:
        return self.raw

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Part):
            return NotImplemented
        return part_greater_than(self, other)

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Part):
            return NotImplemented
        return part_greater_or_equal(self, other)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Part):
            return NotImplemented
        return part_less_than(self, other)

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Part):
            return NotImplemented
        return part_greater_or_equal(other, self)


# Stands in for a missing major, minor or patch segment and compares as zero
ZERO_PART = Part(raw="", is_int=True, int_value=0)


@dataclass(frozen=True, slots=True)
class Version:
    """A parsed free-form version.

    ``major``, ``minor`` and ``patch`` are the first three parts, or
    ``ZERO_PART`` where the source had fewer segments. Ordering only looks at
    those three; later parts are kept in ``parts`` and ``raw`` but do not
    affect comparisons.

    ``>``, ``>=``, ``<`` and ``<=`` are semantic (``1.2.3-rc1`` and
    ``1.2.3-RC1`` tie). ``==`` is exact identity of major, minor and patch.
    """

    parts: tuple[Part, ...] = ()

    def _part_at(self, index: int) -> Part:
        if index < len(self.parts):
            return self.parts[index]
        return ZERO_PART

    @property
    def major(self) -> Part:
        return self._part_at(0)

    @property
    def minor(self) -> Part:
        return self._part_at(1)

    @property
    def patch(self) -> Part:
        return self._part_at(2)

    @property
    def raw(self) -> str:
        """Return every part joined with dots, including those past patch."""
        return ".".join(part.raw for part in self.parts)

    def __str__(self) -> str:
        return f"{self.major.raw}.{self.minor.raw}.{self.patch.raw}"

    def is_non_empty(self) -> bool:
        return len(self.parts) > 0

    def is_semver_release(self) -> bool:
        """Return True if every part is a plain integer."""
        return self.is_non_empty() and all(part.is_int for part in self.parts)

    def is_valid(self) -> bool:
        """Return True if non-empty with an integer, non-negative major."""
        return self.is_non_empty() and self.major.is_int and self.major.int_value >= 0

    def greater_than(self, other: Version) -> bool:
        return version_greater_than(self, other)

    def greater_or_equal(self, other: Version) -> bool:
        return version_greater_or_equal(self, other)

    def less_than(self, other: Version) -> bool:
        return version_less_than(self, other)

    def is_semantically_equal(self, other: Version) -> bool:
        return version_semantically_equal(self, other)

    def is_fully_identical(self, other: Version) -> bool:
        return version_fully_identical(self, other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return version_fully_identical(self, other)

    def __hash__(self) -> int:
        return hash((self.major, self.minor, self.patch))

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return version_greater_than(self, other)

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return version_greater_or_equal(self, other)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return version_less_than(self, other)

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return version_greater_or_equal(other, self)


def _read_int(text: str) -> Optional[int]:
    if not _INTEGER_LITERAL.fullmatch(text):
        # Non-ASCII digits such as "٣" or "²"
        return None
    try:
        return int(text)
    except ValueError:
        # More digits than int() accepts
        return None


def _run_to_part(run: str, is_digit_run: bool) -> Part:
    if is_digit_run:
        value = _read_int(run)
        if value is not None:
            return Part(raw=run, is_int=True, int_value=value)
        logger.warning(
            "Could not read %.40r as an integer, keeping it as a literal", run
        )
    return Part(raw=run)


def parse_part(segment: str) -> Part:
    """Parse a single dot-delimited segment into a Part.

    Args:
        segment: One segment of a version string, possibly empty

    Returns:
        An integer leaf, a literal leaf, or a composite whose sub-parts are
        the maximal digit and non-digit runs of the segment

    Raises:
        VersionTypeError: If ``segment`` is not a string

    Examples:
        >>> parse_part("11").int_value
        11
        >>> [p.raw for p in parse_part("RC11").sub_parts]
        ['RC', '11']
    """
    if not isinstance(segment, str):
        raise VersionTypeError(segment)

    if _INTEGER_LITERAL.fullmatch(segment):
        return _run_to_part(segment, is_digit_run=True)

    runs = [
        ("".join(chars), is_digit) for is_digit, chars in groupby(segment, key=str.isdigit)
    ]
    if len(runs) < 2:
        return Part(raw=segment)

    return Part(
        raw=segment,
        sub_parts=tuple(_run_to_part(run, is_digit) for run, is_digit in runs),
    )


def parse_version(version_string: str) -> Version:
    """Parse a free-form version string into a Version object.

    A single leading ``v`` or ``V`` is dropped, then the rest is split on
    dots. Empty segments are kept as empty literal parts.

    Args:
        version_string: Any version-like string ("1.2.3", "v2.0-RC1", "1.2")

    Returns:
        A Version holding every parsed segment

    Raises:
        VersionTypeError: If ``version_string`` is not a string

    Examples:
        >>> str(parse_version("v1.2.3-RC1"))
        '1.2.3-RC1'
        >>> parse_version("1.2").patch.int_value
        0
    """
    if not isinstance(version_string, str):
        raise VersionTypeError(version_string)

    if version_string[:1] in ("v", "V"):
        version_string = version_string[1:]

    return Version(parts=tuple(parse_part(segment) for segment in version_string.split(".")))


def new_version(major: int, minor: int, patch: int) -> Version:
    """Build a plain ``major.minor.patch`` release version."""
    return Version(
        parts=tuple(
            Part(raw=str(number), is_int=True, int_value=number)
            for number in (major, minor, patch)
        )
    )
