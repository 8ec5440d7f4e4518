# SPDX-License-Identifier: MIT
"""Free-form version parsing and ordering.

Versions do not need to follow SemVer: any dotted string is accepted, and
segments may mix numbers and text such as pre-release tags.

Example:
    >>> from freeform_version import parse_version, sort_by_version, find_latest_by
    >>>
    >>> version = parse_version("v1.2.3-RC11")
    >>> version.major.int_value
    1
    >>> [part.raw for part in version.patch.sub_parts]
    ['3', '-RC', '11']
    >>>
    >>> parse_version("1.2.3") > version
    True
    >>>
    >>> sort_by_version(["1.2.3", "1.2.3-RC1", "1.2.3-alpha2"])
    ['1.2.3-alpha2', '1.2.3-RC1', '1.2.3']
"""

import logging

__version__ = "0.1.0"

from .parse import (
    Part,
    Version,
    ZERO_PART,
    parse_part,
    parse_version,
    new_version,
    VersionTypeError,
)
from .compare import (
    part_greater_than,
    part_greater_or_equal,
    part_less_than,
    part_semantically_equal,
    part_fully_identical,
    version_greater_than,
    version_greater_or_equal,
    version_less_than,
    version_semantically_equal,
    version_fully_identical,
)
from .select import (
    compare_versions,
    version_key,
    sort_by_version,
    find_latest_by,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Parsing
    "Part",
    "Version",
    "ZERO_PART",
    "parse_part",
    "parse_version",
    "new_version",
    "VersionTypeError",
    # Part ordering
    "part_greater_than",
    "part_greater_or_equal",
    "part_less_than",
    "part_semantically_equal",
    "part_fully_identical",
    # Version ordering
    "version_greater_than",
    "version_greater_or_equal",
    "version_less_than",
    "version_semantically_equal",
    "version_fully_identical",
    # Sorting and selection
    "compare_versions",
    "version_key",
    "sort_by_version",
    "find_latest_by",
]
