# Copyright (c) 2026 Mark Ferrell. MIT License.
"""Main entry point for computing the next release version from PR labels.

Inputs come from CLI arguments or, when run as a GitHub Action, from
``INPUT_*`` environment variables. Results are written to GITHUB_OUTPUT.

References:
    - GitHub Actions Environment Variables:
      https://docs.github.com/en/actions/writing-workflows/choosing-what-your-workflow-does/store-information-in-variables#default-environment-variables
    - GitHub Actions Outputs:
      https://docs.github.com/en/actions/writing-workflows/choosing-what-your-workflow-does/passing-information-between-jobs#setting-an-output-parameter
"""

from __future__ import annotations

import argparse
import logging
import os
import re
import sys
from dataclasses import dataclass, field

from github.GithubException import GithubException

from prversion.errors import VersionChangeError
from prversion.github_api import GitHubAPI
from prversion.severity import VersionChange, change_name, parse_change
from prversion.version import next_version
from prversion.versioner import Config, LabelFetcher

logger = logging.getLogger(__name__)

PULL_ID_SEPARATOR = re.compile(r"[\s,]+")


@dataclass
class ActionInputs:
    """Parsed action inputs from CLI arguments or environment variables."""

    token: str
    repository: str
    debug: bool
    previous_version: str
    pull_ids: list[int] = field(default_factory=list)
    require_labels: bool = False
    label_values: dict[str, VersionChange] | None = None


@dataclass
class ActionOutputs:
    """Action outputs to be written to GITHUB_OUTPUT."""

    next_version: str = ""
    version_change: str = ""


def _env_flag(name: str) -> bool:
    return os.environ.get(name, "false").lower() == "true"


def parse_pull_ids(text: str) -> list[int]:
    """Parse pull request numbers separated by commas and/or whitespace.

    Args:
        text: e.g. '12, 15 19'. A leading '#' on a number is allowed.

    Returns:
        The pull request numbers in input order.

    Raises:
        ValueError: If an entry is not a positive integer.

    Examples:
        >>> parse_pull_ids("12, 15 #19")
        [12, 15, 19]
        >>> parse_pull_ids("")
        []
    """
    ids = []
    for entry in PULL_ID_SEPARATOR.split(text.strip()):
        if not entry:
            continue
        number = entry.removeprefix("#")
        if not number.isdigit() or int(number) == 0:
            raise ValueError(f"Invalid pull request number '{entry}'")
        ids.append(int(number))
    return ids


def parse_label_values(entries: list[str]) -> dict[str, VersionChange] | None:
    """Parse 'LABEL=CHANGE' entries into a label table.

    Blank entries are ignored. The label may contain spaces and '='; the
    change name follows the last '='.

    Args:
        entries: Entries such as 'Breaking Change=major'.

    Returns:
        Label name to version change, or None when there are no entries so
        the default labels apply.

    Raises:
        ValueError: If an entry has no '=', an empty label, or an unknown change.

    Examples:
        >>> parse_label_values(["feature=minor", "bug = patch"])
        {'feature': <VersionChange.MINOR: 2>, 'bug': <VersionChange.PATCH: 1>}
        >>> parse_label_values([]) is None
        True
    """
    values: dict[str, VersionChange] = {}
    for entry in entries:
        if not entry.strip():
            continue
        label, sep, change = entry.rpartition("=")
        label = label.strip()
        if not sep or not label:
            raise ValueError(f"Invalid label entry '{entry}': expected LABEL=CHANGE")
        values[label] = parse_change(change)
    return values or None


def parse_inputs(args: list[str] | None = None) -> ActionInputs:
    """Parse action inputs from CLI arguments or environment variables.

    CLI arguments take precedence over environment variables.
    When run as a GitHub Action, environment variables are used.
    When run from CLI, arguments can be provided directly.

    Args:
        args: Optional list of CLI arguments. If None, uses environment
              variables only (GitHub Actions mode). Pass sys.argv[1:] for
              CLI mode.

    Returns:
        ActionInputs with parsed values.
    """
    parser = argparse.ArgumentParser(
        description="Compute the next release version from pull request labels",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Environment Variables (used as defaults when CLI args not provided):
  INPUT_TOKEN, GITHUB_TOKEN              GitHub token for authentication
  INPUT_REPOSITORY, GITHUB_REPOSITORY    Repository in owner/repo format
  INPUT_DEBUG                            Enable debug logging (true/false)
  INPUT_PREVIOUS_VERSION                 Version of the previous release
  INPUT_PULLS                            Pull request numbers in the release
  INPUT_REQUIRE_LABELS                   Fail on unlabeled pull requests (true/false)
  INPUT_LABELS                           One LABEL=CHANGE entry per line

Examples:
  # Run with environment variables (GitHub Actions mode)
  python -m prversion.main

  # Run with CLI arguments (local testing)
  python -m prversion.main --token ghp_xxx --previous-version v1.2.3 --pulls 12,15

  # Custom labels
  python -m prversion.main --previous-version v1.2.3 --pulls 12 \\
      --label "feature=minor" --label "bug=patch" --require-labels
        """,
    )

    parser.add_argument(
        "--token",
        default=os.environ.get("INPUT_TOKEN", os.environ.get("GITHUB_TOKEN", "")),
        help="GitHub token for authentication (default: from INPUT_TOKEN or GITHUB_TOKEN env)",
    )
    parser.add_argument(
        "--repository",
        default=os.environ.get("INPUT_REPOSITORY", os.environ.get("GITHUB_REPOSITORY", "")),
        help="Repository in owner/repo format (default: from INPUT_REPOSITORY or GITHUB_REPOSITORY env)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        default=_env_flag("INPUT_DEBUG"),
        help="Enable debug logging",
    )
    parser.add_argument(
        "--previous-version",
        default=os.environ.get("INPUT_PREVIOUS_VERSION", ""),
        help="Version of the previous release (e.g., v1.2.3)",
    )
    parser.add_argument(
        "--pulls",
        default=os.environ.get("INPUT_PULLS", ""),
        help="Pull request numbers included in the release, comma or space separated",
    )
    parser.add_argument(
        "--require-labels",
        action="store_true",
        default=_env_flag("INPUT_REQUIRE_LABELS"),
        help="Fail if any pull request has none of the configured labels",
    )
    parser.add_argument(
        "--label",
        action="append",
        dest="labels",
        metavar="LABEL=CHANGE",
        help="Map a label to none, patch, minor or major. Repeatable; replaces the default labels",
    )

    parsed = parser.parse_args(args if args is not None else [])

    label_entries = parsed.labels
    if label_entries is None:
        label_entries = os.environ.get("INPUT_LABELS", "").splitlines()

    try:
        pull_ids = parse_pull_ids(parsed.pulls)
    except ValueError as e:
        logger.error("Invalid pulls '%s': %s", parsed.pulls, e)
        sys.exit(1)

    try:
        label_values = parse_label_values(label_entries)
    except ValueError as e:
        logger.error("Invalid labels: %s", e)
        sys.exit(1)

    return ActionInputs(
        token=parsed.token,
        repository=parsed.repository,
        debug=parsed.debug,
        previous_version=parsed.previous_version,
        pull_ids=pull_ids,
        require_labels=parsed.require_labels,
        label_values=label_values,
    )


def set_outputs(outputs: ActionOutputs) -> None:
    """Write action outputs to GITHUB_OUTPUT file.

    Args:
        outputs: ActionOutputs to write.

    References:
        - https://docs.github.com/en/actions/writing-workflows/choosing-what-your-workflow-does/passing-information-between-jobs#setting-an-output-parameter
    """
    output_file = os.environ.get("GITHUB_OUTPUT", "")
    if not output_file:
        logger.warning("GITHUB_OUTPUT not set, outputs will not be written")
        return

    with open(output_file, "a") as f:
        f.write(f"next-version={outputs.next_version}\n")
        f.write(f"version-change={outputs.version_change}\n")

    logger.info(
        "Set outputs: next-version=%s, version-change=%s",
        outputs.next_version,
        outputs.version_change,
    )


def configure_logging(debug: bool) -> None:
    """Configure logging based on debug flag.

    Args:
        debug: If True, enable DEBUG level logging.
    """
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
    )


def compute_outputs(fetcher: LabelFetcher, inputs: ActionInputs) -> ActionOutputs:
    """Compute the version change and next version for the given inputs.

    Args:
        fetcher: Source of pull request labels.
        inputs: Action inputs.

    Returns:
        ActionOutputs with the next version and the lower-cased change name.

    Raises:
        VersionChangeError: If labels cannot be fetched, are missing, or the
            previous version is malformed.
    """
    config = Config(
        label_fetcher=fetcher,
        label_values=inputs.label_values,
        require_labels=inputs.require_labels,
    )
    change = config.pr_version_change(*inputs.pull_ids)
    return ActionOutputs(
        next_version=next_version(inputs.previous_version, change),
        version_change=change_name(change).lower(),
    )


def main() -> None:
    """Main entry point for the action."""
    inputs = parse_inputs(sys.argv[1:])
    configure_logging(inputs.debug)

    if not inputs.previous_version:
        logger.error("previous-version is required. Set INPUT_PREVIOUS_VERSION or pass --previous-version.")
        sys.exit(1)

    if not inputs.token:
        logger.error("GitHub token is required. Set INPUT_TOKEN or GITHUB_TOKEN.")
        sys.exit(1)

    try:
        api = GitHubAPI(token=inputs.token, repository=inputs.repository)
    except (ValueError, GithubException) as e:
        logger.error("Failed to initialize GitHub API: %s", e)
        sys.exit(1)

    logger.debug("Repository: %s, pulls: %s", api.repository, inputs.pull_ids)

    try:
        outputs = compute_outputs(api, inputs)
    except VersionChangeError as e:
        if e.__cause__ is not None:
            logger.error("%s: %s", e, e.__cause__)
        else:
            logger.error("%s", e)
        sys.exit(1)

    set_outputs(outputs)


if __name__ == "__main__":  # pragma: no cover
    main()
