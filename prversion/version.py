# Copyright (c) 2026 Mark Ferrell. MIT License.
"""Apply a version change to a previous release version.

Parsing and incrementing is delegated to the ``semver`` package. Versions may
carry a leading 'v' (e.g. 'v1.2.3') and may omit minor and patch ('v1'); the
prefix is preserved on the result.

References:
    - Semantic Versioning 2.0.0: https://semver.org/
    - python-semver: https://python-semver.readthedocs.io/
"""

from __future__ import annotations

import logging

import semver

from prversion.errors import MalformedVersionError
from prversion.severity import VersionChange, must_be_valid

logger = logging.getLogger(__name__)

VERSION_PREFIX = "v"


def split_prefix(version: str) -> tuple[str, str]:
    """Split an optional leading 'v' from a version string.

    Examples:
        >>> split_prefix("v1.2.3")
        ('v', '1.2.3')
        >>> split_prefix("1.2.3")
        ('', '1.2.3')
    """
    if version.startswith(VERSION_PREFIX):
        return VERSION_PREFIX, version[len(VERSION_PREFIX) :]
    return "", version


def parse_version(version: str) -> tuple[str, semver.Version]:
    """Parse a version string into its prefix and semver.Version.

    Args:
        version: Version string such as 'v1.2.3', '1.2.3-rc1' or 'v1'.

    Returns:
        Tuple of (prefix, parsed version).

    Raises:
        MalformedVersionError: If ``version`` is not a semantic version.
    """
    prefix, text = split_prefix(version)
    try:
        parsed = semver.Version.parse(text, optional_minor_and_patch=True)
    except (TypeError, ValueError) as e:
        raise MalformedVersionError(version) from e
    return prefix, parsed


def increment(version: semver.Version, change: VersionChange) -> semver.Version:
    """Return ``version`` incremented by ``change``.

    A PATCH change on a pre-release finalizes it (1.2.3-rc1 becomes 1.2.3)
    rather than incrementing the patch number. Pre-release and build
    metadata are dropped by every increment.
    """
    must_be_valid(change)
    if change == VersionChange.MAJOR:
        return version.bump_major()
    if change == VersionChange.MINOR:
        return version.bump_minor()
    if change == VersionChange.PATCH:
        if version.prerelease:
            return version.replace(prerelease=None, build=None)
        return version.bump_patch()
    return version


def next_version(previous_version: str, change: VersionChange) -> str:
    """Compute the next version string for a release.

    Args:
        previous_version: The previous release version (e.g., 'v1.2.3').
        change: The version change to apply.

    Returns:
        The next version, keeping the previous version's 'v' prefix. A NONE
        change returns ``previous_version`` exactly as given.

    Raises:
        MalformedVersionError: If ``previous_version`` cannot be parsed.
        ContractViolation: If ``change`` is not a valid VersionChange.

    Examples:
        >>> next_version("v1.2.3", VersionChange.PATCH)
        'v1.2.4'
        >>> next_version("v1.2.3", VersionChange.MINOR)
        'v1.3.0'
        >>> next_version("v1.2.3", VersionChange.MAJOR)
        'v2.0.0'
        >>> next_version("v1", VersionChange.MINOR)
        'v1.1.0'
        >>> next_version("v1.2.3", VersionChange.NONE)
        'v1.2.3'
    """
    must_be_valid(change)
    prefix, parsed = parse_version(previous_version)
    if change == VersionChange.NONE:
        return previous_version

    result = f"{prefix}{increment(parsed, change)}"
    logger.debug("Applying %s change to %s gives %s", change, previous_version, result)
    return result
