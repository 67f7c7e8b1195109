"""Tests for metadata assembly (mocked repository)."""

import logging
from unittest.mock import MagicMock

import pytest

from docgit.domain.metadata import RepoMetadata
from docgit.domain.tag import TagRef
from docgit.errors import InvalidOriginScheme, UnsupportedRefKind
from docgit.infra.repository import RepositoryHandle
from docgit.services.metadata_service import assemble, read_repo_meta


@pytest.fixture
def handle():
    handle = MagicMock(spec=RepositoryHandle)
    handle.path = "/src/widgets"
    handle.remote_uris.return_value = ["git@github.com:acme/widgets.git"]
    handle.list_tags.return_value = [
        TagRef(full_name="refs/tags/0.1.6", object_id="abc123", object_type="commit"),
        TagRef(
            full_name="refs/tags/1.0.0",
            object_id="t1",
            object_type="tag",
            peeled_id="c1",
            peeled_type="commit",
        ),
        TagRef(full_name="refs/tags/v2.0.0", object_id="c2", object_type="commit"),
        TagRef(full_name="refs/tags/3.0.0", object_id="tree1", object_type="tree"),
    ]
    return handle


class TestAssemble:
    """Tests for assemble()."""

    def test_lightweight_tag(self, handle):
        meta = assemble(handle, "0.1.6")
        assert meta.to_dict() == {
            'url': "https://github.com/acme/widgets.git",
            'commit': "abc123",
            'tag': {'name': "0.1.6", 'sha': "abc123"},
        }

    def test_annotated_tag(self, handle):
        meta = assemble(handle, "1.0.0")
        assert meta.to_dict() == {
            'url': "https://github.com/acme/widgets.git",
            'commit': "c1",
            'tag': {'name': "1.0.0", 'sha': "t1"},
        }
        assert meta.commit != meta.tag.sha

    def test_prefixed_tag_name_kept(self, handle):
        meta = assemble(handle, "2.0.0")
        assert meta.tag.name == "v2.0.0"
        assert meta.commit == "c2"

    def test_missing_tag_warns(self, handle, caplog):
        with caplog.at_level(logging.WARNING):
            meta = assemble(handle, "9.9.9")
        assert meta == RepoMetadata(url="https://github.com/acme/widgets.git")
        assert meta.to_dict() == {'url': "https://github.com/acme/widgets.git"}
        assert "Could not find Git tag for version 9.9.9" in caplog.text
        assert "https://github.com/acme/widgets.git" in caplog.text

    def test_bad_origin_is_hard_failure(self, handle):
        handle.remote_uris.return_value = ["ftp://example.com/widgets"]
        with pytest.raises(InvalidOriginScheme):
            assemble(handle, "0.1.6")

    def test_unsupported_ref_is_hard_failure(self, handle):
        with pytest.raises(UnsupportedRefKind):
            assemble(handle, "3.0.0")

    def test_read_repo_meta_alias(self, handle):
        assert read_repo_meta(handle, "0.1.6") == assemble(handle, "0.1.6")
