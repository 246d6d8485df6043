# Copyright (c) 2026 Mark Ferrell. MIT License.
"""Exceptions raised while computing a release version.

Recoverable failures derive from VersionChangeError. ContractViolation marks
wiring or logic bugs and deliberately sits outside that hierarchy so that
``except VersionChangeError`` never hides it.
"""

from __future__ import annotations

from collections.abc import Iterable


class VersionChangeError(Exception):
    """Base class for errors returned to callers of the version calculator."""


class LabelFetchError(VersionChangeError):
    """Fetching the labels of a pull request failed.

    The underlying exception is available as ``__cause__``.
    """

    def __init__(self, pr_id: int) -> None:
        super().__init__(f"error fetching labels for pull request #{pr_id}")
        self.pr_id = pr_id


class MissingLabelsError(VersionChangeError):
    """One or more pull requests have no configured label.

    Attributes:
        ids: Every offending pull request id, in ascending order.
    """

    def __init__(self, ids: Iterable[int]) -> None:
        self.ids = tuple(sorted(ids))
        listed = ", ".join(f"#{pr_id}" for pr_id in self.ids)
        super().__init__(f"one or more PRs have no configured labels: {listed}")


class MalformedVersionError(VersionChangeError):
    """The previous version is not a semantic version."""

    def __init__(self, version: str) -> None:
        super().__init__(f"could not parse semver from {version!r}")
        self.version = version


class ContractViolation(AssertionError):
    """A programming error: missing collaborator or an invalid VersionChange."""
