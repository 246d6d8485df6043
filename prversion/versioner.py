# Copyright (c) 2026 Mark Ferrell. MIT License.
"""Compute release version changes from pull request labels.

The change for a batch of pull requests is the largest change configured for
any label on any of them. Labels are fetched through a LabelFetcher, for
example prversion.github_api.GitHubAPI.

Examples:
    >>> config = Config(label_fetcher=GitHubAPI(), require_labels=True)
    >>> config.next_version("v1.2.3", 101, 102, 105)
    'v1.3.0'
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from functools import reduce
from typing import Protocol

from prversion.errors import ContractViolation, LabelFetchError, MissingLabelsError
from prversion.labels import LabelTable, normalize_labels
from prversion.severity import VersionChange, greater
from prversion.version import next_version

logger = logging.getLogger(__name__)


class LabelFetcher(Protocol):
    """Anything that can list the labels of a pull request by number."""

    def fetch_pr_labels(self, pr_id: int) -> list[str]: ...


def fetch_batch_labels(fetcher: LabelFetcher | None, pr_ids: Iterable[int]) -> dict[int, list[str]]:
    """Fetch and lower-case the labels of every requested pull request.

    Pull requests are fetched one at a time in the given order. The first
    failure stops the batch; nothing fetched so far is returned.

    Args:
        fetcher: The label source.
        pr_ids: Pull request numbers.

    Returns:
        Dict of pull request number to its lower-cased labels.

    Raises:
        LabelFetchError: If the fetcher raises for any pull request. The
            fetcher's exception is chained as ``__cause__``.
        ContractViolation: If ``fetcher`` is None.
    """
    if fetcher is None:
        raise ContractViolation("label_fetcher must not be None")

    result: dict[int, list[str]] = {}
    for pr_id in pr_ids:
        try:
            labels = fetcher.fetch_pr_labels(pr_id)
        except Exception as e:
            logger.debug("Fetching labels for #%d failed: %s", pr_id, e)
            raise LabelFetchError(pr_id) from e
        result[pr_id] = normalize_labels(labels)
        logger.debug("PR #%d labels: %s", pr_id, result[pr_id])
    return result


def require_labels(batch: Mapping[int, list[str]], table: LabelTable, required: bool = True) -> None:
    """Ensure every pull request carries at least one configured label.

    All pull requests are checked, in ascending order, before failing so the
    error lists every offender at once.

    Args:
        batch: Pull request number to labels.
        table: The configured labels.
        required: When False, this check is skipped.

    Raises:
        MissingLabelsError: If any pull request has no configured label.
    """
    if not required:
        return

    missing = []
    for pr_id in sorted(batch):
        if not table.contains_any(batch[pr_id]):
            logger.warning("PR #%d has none of the configured labels", pr_id)
            missing.append(pr_id)

    if missing:
        raise MissingLabelsError(missing)


def aggregate(batch: Mapping[int, list[str]], table: LabelTable) -> VersionChange:
    """Return the largest version change across all pull requests in a batch.

    Pull requests without any configured label contribute NONE. The result
    does not depend on iteration order.
    """
    return reduce(
        greater,
        (table.max_change(labels) for labels in batch.values()),
        VersionChange.NONE,
    )


@dataclass(frozen=True)
class Config:
    """Version calculator configuration.

    Attributes:
        label_fetcher: Source of pull request labels. Required.
        label_values: Label name to version change. Replaces the default
            labels when given.
        require_labels: Fail when a pull request has no configured label.
    """

    label_fetcher: LabelFetcher | None = None
    label_values: Mapping[str, VersionChange] | None = None
    require_labels: bool = False

    def label_table(self) -> LabelTable:
        """Return the effective label table."""
        return LabelTable.from_mapping(self.label_values)

    def pr_version_change(self, *pr_ids: int) -> VersionChange:
        """Return the version change required for the given pull requests.

        Raises:
            LabelFetchError: If fetching labels fails.
            MissingLabelsError: If labels are required and some are missing.
        """
        table = self.label_table()
        batch = fetch_batch_labels(self.label_fetcher, pr_ids)
        require_labels(batch, table, self.require_labels)
        change = aggregate(batch, table)
        logger.info("Version change for %d pull request(s): %s", len(batch), change)
        return change

    def next_version(self, previous_version: str, *pr_ids: int) -> str:
        """Return the next version for a release including the given pull requests.

        Raises:
            LabelFetchError: If fetching labels fails.
            MissingLabelsError: If labels are required and some are missing.
            MalformedVersionError: If ``previous_version`` cannot be parsed.
        """
        change = self.pr_version_change(*pr_ids)
        result = next_version(previous_version, change)
        logger.info("Next version after %s: %s", previous_version, result)
        return result
