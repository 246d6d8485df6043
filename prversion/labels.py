# Copyright (c) 2026 Mark Ferrell. MIT License.
"""Mapping of pull request labels to version changes.

Label lookups are case-insensitive: both the configured names and the labels
found on pull requests are lower-cased before comparison.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from prversion.severity import VersionChange, greater

DEFAULT_LABEL_VALUES: Mapping[str, VersionChange] = MappingProxyType(
    {
        "Non-Production Change": VersionChange.NONE,
        "Patch": VersionChange.PATCH,
        "Minor Change": VersionChange.MINOR,
        "Breaking Change": VersionChange.MAJOR,
    }
)


def normalize_label(label: str) -> str:
    """Return the lookup form of a label."""
    return label.lower()


def normalize_labels(labels: Iterable[str] | None) -> list[str]:
    """Lower-case a pull request's labels, keeping order and duplicates.

    Examples:
        >>> normalize_labels(["Baz", "QUX", "Patch"])
        ['baz', 'qux', 'patch']
        >>> normalize_labels(None)
        []
    """
    if labels is None:
        return []
    return [normalize_label(label) for label in labels]


def label_values(values: Mapping[str, VersionChange] | None = None) -> dict[str, VersionChange]:
    """Return the effective label table with lower-cased keys.

    A caller-supplied mapping replaces the defaults entirely; it is not merged
    with them.

    Args:
        values: Label name to version change, or None for the defaults.

    Returns:
        A new dict keyed by lower-cased label name.

    Examples:
        >>> label_values()["breaking change"]
        <VersionChange.MAJOR: 3>
        >>> label_values({"Feature": VersionChange.MINOR})
        {'feature': <VersionChange.MINOR: 2>}
    """
    source = DEFAULT_LABEL_VALUES if values is None else values
    return {normalize_label(name): change for name, change in source.items()}


@dataclass(frozen=True)
class LabelTable:
    """Case-insensitive label to version change lookup."""

    values: Mapping[str, VersionChange] = field(default_factory=label_values)

    @classmethod
    def from_mapping(cls, values: Mapping[str, VersionChange] | None = None) -> LabelTable:
        """Build a table from a caller mapping, or the defaults when None."""
        return cls(values=MappingProxyType(label_values(values)))

    def resolve(self, label: str) -> VersionChange:
        """Return the change configured for ``label``, or NONE if it is unknown."""
        return self.values.get(normalize_label(label), VersionChange.NONE)

    def contains_any(self, labels: Iterable[str]) -> bool:
        """Check whether any of ``labels`` is configured.

        Presence is what counts: a label configured as NONE is still
        recognized.
        """
        return any(normalize_label(label) in self.values for label in labels)

    def max_change(self, labels: Iterable[str]) -> VersionChange:
        """Return the largest change configured for any of ``labels``.

        Returns NONE when no label is configured.
        """
        change = VersionChange.NONE
        for label in labels:
            change = greater(change, self.resolve(label))
        return change
