# SPDX-License-Identifier: MIT
"""Sorting and latest-version selection over arbitrary items.

Items only need a way to derive a version: a key function returning either
a ``Version`` or a version string.
"""

from __future__ import annotations

from functools import cmp_to_key
from typing import Callable, Iterable, Optional, TypeVar, Union

from .compare import version_greater_than
from .parse import Version, VersionTypeError, parse_version

T = TypeVar("T")

VersionLike = Union[str, Version]


def _as_version(version: VersionLike) -> Version:
    if isinstance(version, Version):
        return version
    if isinstance(version, str):
        return parse_version(version)
    raise VersionTypeError(
        version, f"Expected a version string or Version, got {type(version).__name__}"
    )


def compare_versions(version1: VersionLike, version2: VersionLike) -> int:
    """Compare two versions.

    Args:
        version1: First version (string or Version object)
        version2: Second version (string or Version object)

    Returns:
        -1 if version1 < version2
        0 if version1 and version2 are semantically equal
        1 if version1 > version2

    Raises:
        VersionTypeError: If either argument is neither a string nor a Version

    Examples:
        >>> compare_versions("1.2.3-RC1", "1.2.3")
        -1
        >>> compare_versions("1.2.3-rc1", "1.2.3-RC1")
        0
        >>> compare_versions("v2", "1.9.9")
        1
    """
    v1 = _as_version(version1)
    v2 = _as_version(version2)

    if version_greater_than(v1, v2):
        return 1
    if version_greater_than(v2, v1):
        return -1
    return 0


# Sort key for versions, e.g. sorted(["1.2.3", "1.2.3-RC1"], key=version_key)
version_key = cmp_to_key(compare_versions)


def sort_by_version(
    items: Iterable[T],
    key: Optional[Callable[[T], VersionLike]] = None,
) -> list[T]:
    """Return the items in ascending version order.

    The sort is stable, so items with semantically equal versions keep
    their input order. The input is not modified.

    Args:
        items: Items to sort
        key: Derives a version (or version string) from an item. Defaults to
            treating the items themselves as versions.

    Examples:
        >>> sort_by_version(["1.2.3", "1.2.3-beta1", "1.2.3-alpha2"])
        ['1.2.3-alpha2', '1.2.3-beta1', '1.2.3']
    """
    derive = key if key is not None else (lambda item: item)
    return sorted(items, key=lambda item: version_key(_as_version(derive(item))))


def find_latest_by(
    items: Iterable[T],
    key: Optional[Callable[[T], VersionLike]] = None,
) -> Optional[T]:
    """Return the item with the greatest version, or None if there are none.

    When several items tie for the greatest version the first one wins.

    Examples:
        >>> find_latest_by(["1.2.3-RC11", "1.2.3", "1.2.3-RC1"])
        '1.2.3'
        >>> find_latest_by([]) is None
        True
    """
    derive = key if key is not None else (lambda item: item)

    latest: Optional[T] = None
    latest_version: Optional[Version] = None
    for item in items:
        item_version = _as_version(derive(item))
        if latest_version is None or version_greater_than(item_version, latest_version):
            latest = item
            latest_version = item_version

    return latest
