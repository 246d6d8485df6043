# Copyright (c) 2026 Mark Ferrell. MIT License.
"""Unit tests for applying version changes in prversion/version.py."""

from __future__ import annotations

import pytest

from prversion.errors import ContractViolation, MalformedVersionError
from prversion.severity import VersionChange
from prversion.version import next_version, parse_version, split_prefix


class TestNextVersion:
    """Tests for next_version() function."""

    @pytest.mark.parametrize(
        ("previous", "change", "expected"),
        [
            ("v1.2.3", VersionChange.NONE, "v1.2.3"),
            ("v1.2.3", VersionChange.PATCH, "v1.2.4"),
            ("v1.2.3", VersionChange.MINOR, "v1.3.0"),
            ("v1.2.3", VersionChange.MAJOR, "v2.0.0"),
            ("v1", VersionChange.MINOR, "v1.1.0"),
            ("v0", VersionChange.MINOR, "v0.1.0"),
            ("1.2.3", VersionChange.PATCH, "1.2.4"),
            ("0.9.9", VersionChange.MAJOR, "1.0.0"),
            ("v1.2", VersionChange.PATCH, "v1.2.1"),
        ],
    )
    def test_increments(self, previous: str, change: VersionChange, expected: str) -> None:
        """Test each change against a previous version."""
        assert next_version(previous, change) == expected

    @pytest.mark.parametrize("previous", ["v1", "v1.2.3-rc1", "1.2.3+build.5", "v0"])
    def test_none_returns_input_unchanged(self, previous: str) -> None:
        """Test that a NONE change keeps the exact original text."""
        assert next_version(previous, VersionChange.NONE) == previous

    def test_patch_finalizes_prerelease(self) -> None:
        """Test that a patch change on a pre-release drops the pre-release."""
        assert next_version("v1.2.3-rc1", VersionChange.PATCH) == "v1.2.3"

    def test_minor_drops_prerelease_and_build(self) -> None:
        """Test that a minor change discards pre-release and build metadata."""
        assert next_version("v1.2.3-rc1+build.7", VersionChange.MINOR) == "v1.3.0"

    def test_major_drops_build(self) -> None:
        """Test that a major change discards build metadata."""
        assert next_version("1.2.3+build.7", VersionChange.MAJOR) == "2.0.0"

    @pytest.mark.parametrize("previous", ["limabeans", "", "v", "1.2.3.4", "vv1.2.3"])
    def test_malformed_version(self, previous: str) -> None:
        """Test that unparsable versions raise MalformedVersionError."""
        with pytest.raises(MalformedVersionError) as excinfo:
            next_version(previous, VersionChange.PATCH)

        assert excinfo.value.version == previous
        assert repr(previous) in str(excinfo.value)
        assert excinfo.value.__cause__ is not None

    def test_malformed_version_with_none_change(self) -> None:
        """Test that even a NONE change requires a parsable version."""
        with pytest.raises(MalformedVersionError):
            next_version("limabeans", VersionChange.NONE)

    def test_invalid_change_raises(self) -> None:
        """Test that the INVALID sentinel never reaches the version library."""
        with pytest.raises(ContractViolation):
            next_version("v1.2.3", VersionChange.INVALID)


class TestParseVersion:
    """Tests for parse_version() and split_prefix()."""

    def test_split_prefix(self) -> None:
        """Test that only a leading 'v' is treated as a prefix."""
        assert split_prefix("v1.2.3") == ("v", "1.2.3")
        assert split_prefix("1.2.3") == ("", "1.2.3")

    def test_parse_components(self) -> None:
        """Test that missing minor and patch default to zero."""
        prefix, version = parse_version("v4")
        assert prefix == "v"
        assert (version.major, version.minor, version.patch) == (4, 0, 0)
