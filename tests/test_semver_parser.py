"""Tests for semantic version helpers and feed token extraction."""

import pytest

from constants import Constants, Platform
from versioning.parser import extract_platform, extract_version, is_schedule_key, release_channel
from versioning.semver import compare_semver, is_greater, is_valid_semver


class TestIsValidSemver:
    """Strict and lenient validation."""

    @pytest.mark.parametrize("value", ["0.0.0", "1.2.3", "20.11.1", "1.2.3-beta.1", "1.2.3+build.5"])
    def test_valid(self, value):
        assert is_valid_semver(value) is True

    @pytest.mark.parametrize("value", ["v1.2.3", "1.2", "1.2.3.4", "01.2.3", "1.2.3\n", "1.2.3 ", "", "foo", None, 123])
    def test_invalid_strict(self, value):
        assert is_valid_semver(value) is False

    def test_lenient_accepts_prefix(self):
        assert is_valid_semver("v1.2.3", strict=False) is True
        assert is_valid_semver("v1.2", strict=False) is False


class TestCompareSemver:
    """Numeric comparison."""

    def test_numeric_not_lexical(self):
        assert compare_semver("1.10.0", "1.9.0") == 1
        assert compare_semver("1.9.0", "1.10.0") == -1

    def test_equal(self):
        assert compare_semver("2.0.0", "2.0.0") == 0

    def test_prerelease_sorts_first(self):
        assert compare_semver("2.0.0-rc.1", "2.0.0") == -1

    def test_prefix_tolerated(self):
        assert compare_semver("v2.0.0", "1.0.0") == 1

    def test_build_metadata_ignored(self):
        assert compare_semver("1.0.0+b", "1.0.0+a") == 0
        assert compare_semver("1.0.1+a", "1.0.0+b") == 1
        assert is_greater("1.0.0+b", "1.0.0+a") is False

    def test_invalid_raises(self):
        with pytest.raises(ValueError):
            compare_semver("foo", "1.0.0")

    def test_is_greater(self):
        assert is_greater("1.0.0", None) is True
        assert is_greater("1.0.1", "1.0.0") is True
        assert is_greater("1.0.0", "1.0.0") is False
        assert is_greater("0.9.0", "1.0.0") is False


class TestExtractPlatform:
    """Platform tokens in asset names."""

    @pytest.mark.parametrize("name,expected", [
        ("es6-darwin-x64-20.1.0", Platform.DARWIN),
        ("linux-1.0.0", Platform.LINUX),
        ("es6-windows-x64-20.1.0.exe", Platform.WINDOWS),
    ])
    def test_matches(self, name, expected):
        assert extract_platform(name) is expected

    @pytest.mark.parametrize("name", ["freebsd-1.0.0", "", None, 42])
    def test_no_match(self, name):
        assert extract_platform(name) is None


class TestExtractVersion:
    """Embedded version tokens."""

    @pytest.mark.parametrize("text,expected", [
        ("darwin-1.2.3", "1.2.3"),
        ("windows-1.2.3-x64", "1.2.3"),
        ("es6-linux-x64-20.11.1", "20.11.1"),
        ("v18.19.0", "18.19.0"),
        ("linux-10.20.30", "10.20.30"),
        ("linux-1.2.3\n", "1.2.3"),
    ])
    def test_matches(self, text, expected):
        assert extract_version(text) == expected

    @pytest.mark.parametrize("text", ["darwin", "1.2.3", "linux-1.2", "linux-01.2.3", None, 1])
    def test_no_match(self, text):
        assert extract_version(text) is None


class TestScheduleKey:
    """Release line keys."""

    @pytest.mark.parametrize("key", ["v0.10", "v0.12", "v0.0", "v4", "v20"])
    def test_valid(self, key):
        assert is_schedule_key(key) is True

    @pytest.mark.parametrize("key", ["v00", "v01", "20", "v0.01", "v1.2", "foo", None])
    def test_invalid(self, key):
        assert is_schedule_key(key) is False


class TestReleaseChannel:
    """Channel selection for release index items."""

    def test_lts_codename(self):
        assert release_channel("Iron", False) == "Iron"
        assert release_channel("Iron", True) == "Iron"

    def test_non_lts_without_current(self):
        assert release_channel(False, False) is None
        assert release_channel(None, False) is None

    def test_non_lts_with_current(self):
        assert release_channel(False, True) == Constants.CURRENT_CHANNEL
