# Copyright (c) 2026 Mark Ferrell. MIT License.
"""GitHub API wrapper for reading pull request labels.

References:
    - GitHub REST API: https://docs.github.com/en/rest
    - PyGithub Documentation: https://pygithub.readthedocs.io/
"""

from __future__ import annotations

import logging
import os

from github import Auth, Github

logger = logging.getLogger(__name__)


class GitHubAPI:
    """Wrapper around PyGithub that fetches pull request labels.

    Handles authentication via token input, defaulting to GITHUB_TOKEN
    environment variable if not provided.

    References:
        - Authentication: https://docs.github.com/en/rest/authentication
        - GITHUB_TOKEN: https://docs.github.com/en/actions/security-for-github-actions/security-guides/automatic-token-authentication
    """

    def __init__(self, token: str | None = None, repository: str | None = None) -> None:
        """Initialize the GitHub API client.

        Args:
            token: GitHub token for authentication. Defaults to GITHUB_TOKEN env var.
            repository: Repository in 'owner/repo' format. Defaults to GITHUB_REPOSITORY env var.

        Raises:
            ValueError: If no token or repository is available.
            GithubException: If the repository cannot be loaded.

        References:
            - Get a repository: https://docs.github.com/en/rest/repos/repos#get-a-repository
        """
        self._token = token or os.environ.get("GITHUB_TOKEN", "")
        self._repository = repository or os.environ.get("GITHUB_REPOSITORY", "")

        if not self._token:
            raise ValueError("GitHub token is required. Set GITHUB_TOKEN or pass token parameter.")
        if not self._repository:
            raise ValueError("Repository is required. Set GITHUB_REPOSITORY or pass repository parameter.")

        self._github = Github(auth=Auth.Token(self._token))
        self._repo = self._github.get_repo(self._repository)

    @property
    def repository(self) -> str:
        """The repository in 'owner/repo' format."""
        return self._repository

    def fetch_pr_labels(self, pr_id: int) -> list[str]:
        """List the label names of a pull request.

        Args:
            pr_id: Pull request number.

        Returns:
            Label names in the order GitHub returns them. Empty if the pull
            request has no labels.

        Raises:
            GithubException: If the pull request doesn't exist or access fails.

        References:
            - Get a pull request: https://docs.github.com/en/rest/pulls/pulls#get-a-pull-request
        """
        pull = self._repo.get_pull(pr_id)
        labels = [label.name for label in pull.labels]
        logger.debug("Fetched %d label(s) for %s#%d", len(labels), self._repository, pr_id)
        return labels
