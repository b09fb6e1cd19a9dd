"""
Version Normalization
=====================

Turns installed WordPress component versions into Composer constraints.

WordPress reports versions like ``6.4.2``; the synced composer.json pins
components to their major.minor line:

- standard components get a caret constraint: ``6.4.2`` -> ``^6.4``
- must-use plugins get the bare major.minor: ``1.2.9`` -> ``1.2``

Also provides a small numeric Version type used by the constraint checker.
"""

import re
from dataclasses import dataclass
from typing import Tuple

_NUMERIC_VERSION = re.compile(r"^(\d+)(?:\.(\d+))?(?:\.(\d+))?(?:\.(\d+))?$")


def to_minor(version: str) -> str:
    """
    Reduce a dotted version to major.minor.

    No validation is performed; unexpected strings pass through.

    Examples:
        >>> to_minor("6.4.2")
        '6.4'
        >>> to_minor("7")
        '7'
    """
    parts = version.split(".")
    if len(parts) > 1:
        return f"{parts[0]}.{parts[1]}"
    return parts[0]


def constraint_for(version: str, is_exact_category: bool = False) -> str:
    """
    Build the Composer constraint for an installed version.

    Args:
        version: Installed version string
        is_exact_category: True for must-use plugins, which are pinned
            to major.minor without a caret

    Returns:
        ``"^X.Y"`` or ``"X.Y"``
    """
    minor = to_minor(version)
    if is_exact_category:
        return minor
    return f"^{minor}"


@dataclass(frozen=True)
class Version:
    """
    Purely numeric version with up to four segments.

    Missing segments count as zero, so ``5.3`` == ``5.3.0``.
    """

    major: int
    minor: int = 0
    patch: int = 0
    build: int = 0

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"

    def as_tuple(self) -> Tuple[int, int, int, int]:
        return (self.major, self.minor, self.patch, self.build)

    def __lt__(self, other: "Version") -> bool:
        return self.as_tuple() < other.as_tuple()

    def __le__(self, other: "Version") -> bool:
        return self.as_tuple() <= other.as_tuple()

    def __gt__(self, other: "Version") -> bool:
        return self.as_tuple() > other.as_tuple()

    def __ge__(self, other: "Version") -> bool:
        return self.as_tuple() >= other.as_tuple()


def parse_version(version_str: str) -> Version:
    """
    Parse a dotted numeric version.

    Args:
        version_str: Version like "5", "5.3" or "5.3.1"

    Returns:
        Version object

    Raises:
        ValueError: If the string is not purely numeric
    """
    match = _NUMERIC_VERSION.match(version_str.strip())
    if not match:
        raise ValueError(f"Invalid version string: '{version_str}'")

    groups = [int(g) if g else 0 for g in match.groups()]
    return Version(*groups)


def is_numeric_version(version_str: str) -> bool:
    """True when version_str parses as a dotted numeric version."""
    return bool(_NUMERIC_VERSION.match(version_str.strip()))
