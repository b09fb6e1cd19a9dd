"""
Constraint Satisfaction
=======================

Decides whether a constraint already declared in composer.json covers a
newly observed installed version, so routine minor/patch bumps do not
rewrite the manifest.

This is a heuristic, not a resolver. Constraints it cannot classify
(wildcards, ``||`` lists, space or comma separated ranges, stability flags)
are treated as satisfied: a constraint we do not understand is never
overwritten.

Rules by form of the existing constraint:

============  ==================================================
``^X.Y``      same major (never lowers the declared floor)
``~X.Y[.Z]``  same major and X's minor >= target minor
``>=X.Y``     always; a lower target never lowers the floor
``>X.Y``      X.Y < target
``X.Y.Z``     X.Y.Z >= target
other         satisfied
============  ==================================================
"""

import re
from enum import Enum
from typing import Optional, Tuple

from .version import Version, is_numeric_version, parse_version

_COMPLEX_MARKERS = (" ", "|", ",", "*", "@")
_LEADING_NON_DIGITS = re.compile(r"^[^0-9]*")


class ConstraintKind(str, Enum):
    """Syntactic form of a Composer constraint."""

    CARET = "^"
    TILDE = "~"
    GE = ">="
    GT = ">"
    EXACT = "exact"
    COMPLEX = "complex"


# Longer operators first so ">=" is not read as ">"
_PREFIXES = [
    (">=", ConstraintKind.GE),
    (">", ConstraintKind.GT),
    ("^", ConstraintKind.CARET),
    ("~", ConstraintKind.TILDE),
]


def classify_constraint(constraint: str) -> Tuple[ConstraintKind, Optional[Version]]:
    """
    Classify a constraint and parse its version operand.

    Returns:
        (kind, version); version is None exactly when kind is COMPLEX
    """
    constraint = constraint.strip()
    if not constraint or any(marker in constraint for marker in _COMPLEX_MARKERS):
        return ConstraintKind.COMPLEX, None

    for prefix, kind in _PREFIXES:
        if constraint.startswith(prefix):
            operand = constraint[len(prefix) :]
            if is_numeric_version(operand):
                return kind, parse_version(operand)
            return ConstraintKind.COMPLEX, None

    if is_numeric_version(constraint):
        return ConstraintKind.EXACT, parse_version(constraint)

    return ConstraintKind.COMPLEX, None


def target_version(candidate: str) -> Optional[Version]:
    """
    Extract the version a new constraint asks for.

    ``"^5.5"`` -> 5.5, ``"1.2"`` -> 1.2. Returns None when nothing numeric
    remains after stripping the operator.
    """
    stripped = _LEADING_NON_DIGITS.sub("", candidate.strip())
    if not is_numeric_version(stripped):
        return None
    return parse_version(stripped)


def satisfies(existing: str, candidate: str) -> bool:
    """
    Check whether ``existing`` already covers ``candidate``.

    Args:
        existing: Constraint currently in composer.json (e.g. "^5.3")
        candidate: Newly computed constraint or bare version (e.g. "^5.5", "6.0")

    Returns:
        True if existing should be kept as is
    """
    kind, declared = classify_constraint(existing)
    if kind == ConstraintKind.COMPLEX:
        return True

    target = target_version(candidate)
    if target is None:
        return True

    if kind == ConstraintKind.CARET:
        return declared.major == target.major
    if kind == ConstraintKind.TILDE:
        return declared.major == target.major and declared.minor >= target.minor
    if kind == ConstraintKind.GE:
        # Open upward, and an install below the floor never lowers the floor
        return True
    if kind == ConstraintKind.GT:
        return declared < target
    # EXACT
    return declared >= target
