"""
Unit tests for semantic version parsing and ordering.

Tests:
- Version string parsing (SemVer 2.0)
- Precedence, including pre-release identifiers
- Minimum-version compatibility
"""

import pytest

from toast.core.version import (
    MIN_NODE_VERSION,
    VERSION,
    SemanticVersion,
    compare_versions,
    is_version_compatible,
    parse_version,
)


class TestParseVersion:
    """Tests for SemanticVersion.parse / parse_version."""

    def test_parse_full_version(self):
        """Parse standard three-part version."""
        v = parse_version("1.2.3")
        assert (v.major, v.minor, v.patch) == (1, 2, 3)
        assert v.prerelease == ()

    def test_parse_prerelease_and_build(self):
        v = parse_version("14.0.0-rc.1+build.5")
        assert v.prerelease == ("rc", "1")
        assert v.build == ("build", "5")
        assert v.is_prerelease

    def test_str_round_trips_canonical_form(self):
        assert str(parse_version("14.0.0-rc.1+sha.abc")) == "14.0.0-rc.1+sha.abc"

    def test_parse_invalid_non_numeric(self):
        with pytest.raises(ValueError, match="Invalid version string"):
            parse_version("abc")

    def test_parse_invalid_two_parts(self):
        """SemVer requires all three components."""
        with pytest.raises(ValueError):
            parse_version("14.0")

    def test_parse_invalid_leading_zero(self):
        with pytest.raises(ValueError):
            parse_version("01.0.0")

    def test_parse_invalid_v_prefix(self):
        """The v prefix is the caller's job to strip."""
        with pytest.raises(ValueError):
            parse_version("v14.0.0")

    def test_parse_invalid_trailing_newline(self):
        with pytest.raises(ValueError):
            parse_version("14.0.0\n")

    def test_parse_invalid_non_ascii_digit(self):
        """Only ASCII digits count, not other Unicode decimals."""
        with pytest.raises(ValueError):
            parse_version("1\u0664.0.0")

    def test_parse_invalid_none(self):
        with pytest.raises(ValueError, match="Invalid version string"):
            parse_version(None)

    def test_semantic_version_passes_through(self):
        v = SemanticVersion(1, 2, 3)
        assert parse_version(v) is v


class TestCompareVersions:
    """Tests for compare_versions / ordering."""

    def test_compare_equal(self):
        assert compare_versions("1.0.0", "1.0.0") == 0

    def test_compare_major_greater(self):
        assert compare_versions("2.0.0", "1.9.9") == 1

    def test_compare_minor_lesser(self):
        assert compare_versions("1.1.9", "1.2.0") == -1

    def test_compare_numeric_not_lexical(self):
        assert compare_versions("1.10.0", "1.9.0") == 1

    def test_prerelease_below_release(self):
        assert parse_version("14.0.0-rc.1") < parse_version("14.0.0")

    def test_prerelease_identifier_ordering(self):
        """Precedence example chain from SemVer 2.0."""
        chain = [
            "1.0.0-alpha",
            "1.0.0-alpha.1",
            "1.0.0-alpha.beta",
            "1.0.0-beta",
            "1.0.0-beta.2",
            "1.0.0-beta.11",
            "1.0.0-rc.1",
            "1.0.0",
        ]
        parsed = [parse_version(v) for v in chain]
        assert sorted(reversed(parsed)) == parsed

    def test_build_metadata_ignored(self):
        assert parse_version("1.0.0+a") == parse_version("1.0.0+b")
        assert hash(parse_version("1.0.0+a")) == hash(parse_version("1.0.0"))


class TestIsVersionCompatible:
    def test_minimum_is_compatible(self):
        assert is_version_compatible(MIN_NODE_VERSION)

    def test_newer_is_compatible(self):
        assert is_version_compatible("16.3.0")

    def test_older_is_incompatible(self):
        assert not is_version_compatible("13.9.9")

    def test_prerelease_of_minimum_is_incompatible(self):
        assert not is_version_compatible("14.0.0-rc.1")

    def test_tool_version_is_valid_semver(self):
        parse_version(VERSION)
