# Copyright (c) 2026 Mark Ferrell. MIT License.
"""Next release version from pull request labels - Core modules."""

from prversion.errors import (
    ContractViolation,
    LabelFetchError,
    MalformedVersionError,
    MissingLabelsError,
    VersionChangeError,
)
from prversion.labels import DEFAULT_LABEL_VALUES, LabelTable
from prversion.severity import VersionChange
from prversion.version import next_version
from prversion.versioner import Config, LabelFetcher

__all__ = [
    "Config",
    "ContractViolation",
    "DEFAULT_LABEL_VALUES",
    "LabelFetchError",
    "LabelFetcher",
    "LabelTable",
    "MalformedVersionError",
    "MissingLabelsError",
    "VersionChange",
    "VersionChangeError",
    "next_version",
]
