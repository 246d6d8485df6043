# Copyright (c) 2026 Mark Ferrell. MIT License.
"""Version change magnitudes and the ordering between them.

A version change is one of none, patch, minor or major, matching the
increments defined by SemVer 2.0.0. ``VersionChange.INVALID`` marks a value
that must never be combined or applied to a version.

References:
    - Semantic Versioning 2.0.0: https://semver.org/
"""

from __future__ import annotations

from enum import IntEnum

from prversion.errors import ContractViolation


class VersionChange(IntEnum):
    """How much a release increments the previous version."""

    NONE = 0
    PATCH = 1
    MINOR = 2
    MAJOR = 3
    INVALID = 4

    def __str__(self) -> str:
        return change_name(self)


VALID_CHANGES: tuple[VersionChange, ...] = (
    VersionChange.NONE,
    VersionChange.PATCH,
    VersionChange.MINOR,
    VersionChange.MAJOR,
)

_CHANGE_NAMES = {
    VersionChange.NONE: "None",
    VersionChange.PATCH: "Patch",
    VersionChange.MINOR: "Minor",
    VersionChange.MAJOR: "Major",
}

INVALID_NAME = "Invalid"


def is_valid(change: object) -> bool:
    """Check whether a value is a usable version change.

    Args:
        change: The value to check.

    Returns:
        True for NONE, PATCH, MINOR and MAJOR. False for the INVALID sentinel
        and anything that is not a VersionChange member.

    Examples:
        >>> is_valid(VersionChange.MAJOR)
        True
        >>> is_valid(VersionChange.INVALID)
        False
        >>> is_valid(3)
        False
    """
    return isinstance(change, VersionChange) and change in _CHANGE_NAMES


def must_be_valid(change: object) -> VersionChange:
    """Return ``change`` unchanged, or raise ContractViolation if it is not valid."""
    if not is_valid(change):
        raise ContractViolation(f"{change!r} is not a valid VersionChange")
    return change  # type: ignore[return-value]


def greater(a: VersionChange, b: VersionChange) -> VersionChange:
    """Return whichever of two version changes is larger.

    Args:
        a: A valid version change.
        b: A valid version change.

    Returns:
        The larger of ``a`` and ``b``.

    Raises:
        ContractViolation: If either argument is INVALID or not a VersionChange.

    Examples:
        >>> greater(VersionChange.MINOR, VersionChange.MAJOR)
        <VersionChange.MAJOR: 3>
        >>> greater(VersionChange.PATCH, VersionChange.NONE)
        <VersionChange.PATCH: 1>
    """
    must_be_valid(a)
    must_be_valid(b)
    if b > a:
        return b
    return a


def change_name(change: object) -> str:
    """Return a human readable name, or "Invalid" for anything unusable.

    Never raises, so it is safe to call while formatting diagnostics.

    Examples:
        >>> change_name(VersionChange.MINOR)
        'Minor'
        >>> change_name(VersionChange.INVALID)
        'Invalid'
        >>> change_name(-1)
        'Invalid'
    """
    if not is_valid(change):
        return INVALID_NAME
    return _CHANGE_NAMES[change]  # type: ignore[index]


def parse_change(text: str) -> VersionChange:
    """Parse a version change from its name, ignoring case and surrounding space.

    Args:
        text: One of 'none', 'patch', 'minor' or 'major'.

    Returns:
        The matching VersionChange.

    Raises:
        ValueError: If ``text`` does not name a valid version change.

    Examples:
        >>> parse_change("Major")
        <VersionChange.MAJOR: 3>
        >>> parse_change(" patch ")
        <VersionChange.PATCH: 1>
    """
    wanted = text.strip().lower()
    for change, name in _CHANGE_NAMES.items():
        if name.lower() == wanted:
            return change
    choices = ", ".join(name.lower() for name in _CHANGE_NAMES.values())
    raise ValueError(f"Unknown version change '{text}': expected one of {choices}")
