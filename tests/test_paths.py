"""Tests for the separator-aware containment predicate."""

import pytest

from xfercheck import contains
from xfercheck._paths import ensure_trailing_separator


class TestEnsureTrailingSeparator:
    def test_adds_separator(self):
        assert ensure_trailing_separator("/a/b") == "/a/b/"

    def test_keeps_single_separator(self):
        assert ensure_trailing_separator("/a/b/") == "/a/b/"

    def test_collapses_repeated_separators(self):
        assert ensure_trailing_separator("/a/b///") == "/a/b/"

    def test_root(self):
        assert ensure_trailing_separator("/") == "/"

    def test_custom_separator(self):
        assert ensure_trailing_separator("C:\\data", "\\") == "C:\\data\\"

    def test_empty_separator_rejected(self):
        with pytest.raises(ValueError):
            ensure_trailing_separator("/a", "")


class TestContains:
    def test_identical_paths(self):
        assert contains("/a/b", "/a/b", "/") is True

    def test_identical_with_trailing_separator(self):
        assert contains("/a/b/", "/a/b", "/") is True
        assert contains("/a/b", "/a/b/", "/") is True

    def test_child(self):
        assert contains("/a/b", "/a/b/c", "/") is True

    def test_deep_descendant(self):
        assert contains("/a", "/a/b/c/d", "/") is True

    def test_sibling_with_common_prefix(self):
        assert contains("/a/bc", "/a/b", "/") is False
        assert contains("/a/b", "/a/bc", "/") is False

    def test_parent_is_not_contained(self):
        assert contains("/a/b/c", "/a/b", "/") is False

    def test_root_contains_everything(self):
        assert contains("/", "/anything/below", "/") is True

    def test_windows_separator(self):
        assert contains("C:\\data", "C:\\data\\logs", "\\") is True
        assert contains("C:\\data", "C:\\database", "\\") is False

    def test_default_separator_is_slash(self):
        assert contains("bucket/dir", "bucket/dir/sub")

    def test_urls(self):
        assert contains("https://host/bucket/dir", "https://host/bucket/dir/x", "/")
        assert not contains("https://host/bucket/dir", "https://host/bucket/dir2", "/")
