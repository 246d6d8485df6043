"""Shared pytest fixtures for the test suite."""

from collections.abc import Callable, Generator
from typing import Any
from unittest.mock import MagicMock, patch

import pytest


def make_label(name: str) -> MagicMock:
    """Create a mock PyGithub label object with the given name.

    MagicMock(name=...) sets the mock's repr name, so the attribute is
    assigned after construction.
    """
    label = MagicMock()
    label.name = name
    return label


def make_fetcher(labels_by_pr: dict[int, Any]) -> MagicMock:
    """Create a mock label fetcher backed by a dict.

    A value that is an exception instance is raised instead of returned.
    """
    fetcher = MagicMock()

    def fetch(pr_id: int) -> Any:
        value = labels_by_pr[pr_id]
        if isinstance(value, BaseException):
            raise value
        return value

    fetcher.fetch_pr_labels.side_effect = fetch
    return fetcher


@pytest.fixture
def fetcher_factory() -> Callable[[dict[int, Any]], MagicMock]:
    """Factory for mock label fetchers."""
    return make_fetcher


@pytest.fixture
def labelled_pulls() -> dict[int, list[str]]:
    """Sample pull request labels, two of them without configured labels."""
    return {
        1: ["foo", "bar", "minor change"],
        2: ["Baz", "QUX", "Patch"],
        3: [],
        4: ["a"],
    }


@pytest.fixture
def mock_github_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Any) -> dict[str, str]:
    """Set up mock GitHub Actions environment variables."""
    env_vars = {
        "GITHUB_TOKEN": "env-token",
        "GITHUB_REPOSITORY": "owner/repo",
        "GITHUB_OUTPUT": str(tmp_path / "github_output"),
    }
    for key, value in env_vars.items():
        monkeypatch.setenv(key, value)
    for key in (
        "INPUT_TOKEN",
        "INPUT_REPOSITORY",
        "INPUT_DEBUG",
        "INPUT_PREVIOUS_VERSION",
        "INPUT_PULLS",
        "INPUT_REQUIRE_LABELS",
        "INPUT_LABELS",
    ):
        monkeypatch.delenv(key, raising=False)
    return env_vars


@pytest.fixture
def mock_pygithub() -> Generator[dict[str, Any], None, None]:
    """Patch PyGithub for unit tests."""
    with patch("prversion.github_api.Github") as mock_github:
        mock_repo = MagicMock()
        mock_github.return_value.get_repo.return_value = mock_repo
        yield {"github": mock_github, "repo": mock_repo}
