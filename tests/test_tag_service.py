"""Tests for version tag lookup."""

from unittest.mock import MagicMock

import pytest
from packaging.version import Version

from docgit.domain.tag import TagRef
from docgit.infra.repository import RepositoryHandle
from docgit.services.tag_service import find_exact, resolve_version, tag_names, version_tags


def make_handle(*names):
    handle = MagicMock(spec=RepositoryHandle)
    handle.list_tags.return_value = [
        TagRef(full_name=f"refs/tags/{name}", object_id=f"sha-{name}") for name in names
    ]
    return handle


class TestFindExact:
    """Tests for find_exact()."""

    def test_match(self):
        handle = make_handle("1.0.0", "1.2.0")
        assert find_exact(handle, "1.2.0").object_id == "sha-1.2.0"

    def test_no_partial_match(self):
        handle = make_handle("1.2.0-rc1", "v1.2.0")
        assert find_exact(handle, "1.2.0") is None


class TestResolveVersion:
    """Tests for resolve_version()."""

    def test_exact_beats_prefixed(self):
        handle = make_handle("1.2.0", "v1.2.0")
        assert resolve_version(handle, "1.2.0").full_name == "refs/tags/1.2.0"

    def test_exact_beats_prefixed_regardless_of_order(self):
        handle = make_handle("v1.2.0", "1.2.0")
        assert resolve_version(handle, "1.2.0").full_name == "refs/tags/1.2.0"

    def test_prefixed_fallback(self):
        handle = make_handle("v2.0.0")
        assert resolve_version(handle, "2.0.0").full_name == "refs/tags/v2.0.0"

    def test_absent(self):
        handle = make_handle("v2.0.0")
        assert resolve_version(handle, "9.9.9") is None

    def test_empty_prefix_disables_fallback(self):
        handle = make_handle("v2.0.0")
        assert resolve_version(handle, "2.0.0", prefix="") is None

    def test_custom_prefix(self):
        handle = make_handle("release-2.0.0")
        assert resolve_version(handle, "2.0.0", prefix="release-").name == "release-2.0.0"


class TestTagListing:
    """Tests for tag_names() and version_tags()."""

    def test_tag_names(self):
        handle = make_handle("0.1.6", "v1.0.0", "nightly")
        assert tag_names(handle) == ["0.1.6", "v1.0.0", "nightly"]

    def test_version_tags_sorted_and_filtered(self):
        handle = make_handle("v1.10.0", "1.2.0", "nightly", "0.1.7-alpha5", "v1.9.0")
        result = version_tags(handle)
        assert [name for name, _ in result] == ["0.1.7-alpha5", "1.2.0", "v1.9.0", "v1.10.0"]
        assert result[0][1] == Version("0.1.7a5")

    @pytest.mark.parametrize("names", [(), ("nightly", "latest")])
    def test_version_tags_empty(self, names):
        assert version_tags(make_handle(*names)) == []
