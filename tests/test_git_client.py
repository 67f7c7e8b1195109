"""Unit tests for GitClient with subprocess mocked out."""

import subprocess
from unittest.mock import MagicMock, patch

import pytest

from docgit.infra.git_client import GitClient, GitCommandError


def completed(stdout=b"", stderr=b"", returncode=0):
    proc = MagicMock()
    proc.stdout = stdout
    proc.stderr = stderr
    proc.returncode = returncode
    return proc


class TestRun:
    """Tests for GitClient.run()."""

    @patch("docgit.infra.git_client.subprocess.run")
    def test_decodes_text(self, mock_run):
        mock_run.return_value = completed(stdout=b"abc\n")
        result = GitClient().run(["rev-parse", "HEAD"], cwd="/repo")
        assert result.ok
        assert result.stdout == "abc\n"
        args, kwargs = mock_run.call_args
        assert args[0] == ["git", "rev-parse", "HEAD"]
        assert kwargs["cwd"] == "/repo"
        assert kwargs["timeout"] is None
        assert kwargs["env"] is None

    @patch("docgit.infra.git_client.subprocess.run")
    def test_binary_output(self, mock_run):
        mock_run.return_value = completed(stdout=b"\x00\x01")
        assert GitClient().run(["cat-file", "blob", "x"], binary=True).stdout == b"\x00\x01"

    @patch("docgit.infra.git_client.subprocess.run")
    def test_check_raises(self, mock_run):
        mock_run.return_value = completed(stderr=b"fatal: bad revision\n", returncode=128)
        with pytest.raises(GitCommandError) as exc_info:
            GitClient().run(["log", "nope"], check=True)
        assert exc_info.value.returncode == 128
        assert exc_info.value.stderr == "fatal: bad revision"

    @patch("docgit.infra.git_client.subprocess.run")
    def test_timeout(self, mock_run):
        mock_run.side_effect = subprocess.TimeoutExpired(cmd="git clone", timeout=5)
        with pytest.raises(GitCommandError) as exc_info:
            GitClient(timeout=5).run(["clone", "x", "y"])
        assert exc_info.value.returncode == -1
        assert "timed out" in str(exc_info.value)

    @patch("docgit.infra.git_client.subprocess.run")
    def test_missing_executable(self, mock_run):
        mock_run.side_effect = FileNotFoundError("no git")
        with pytest.raises(GitCommandError):
            GitClient(executable="/nope/git").run(["status"])

    @patch("docgit.infra.git_client.subprocess.run")
    def test_extra_env_layered(self, mock_run, monkeypatch):
        monkeypatch.setenv("KEEP_ME", "1")
        mock_run.return_value = completed()
        GitClient().run(["clone", "a", "b"], env={"GIT_TERMINAL_PROMPT": "0"})
        env = mock_run.call_args.kwargs["env"]
        assert env["GIT_TERMINAL_PROMPT"] == "0"
        assert env["KEEP_ME"] == "1"


class TestParsing:
    """Tests for output parsing."""

    @patch("docgit.infra.git_client.subprocess.run")
    def test_tag_refs(self, mock_run):
        mock_run.return_value = completed(stdout=(
            b"refs/tags/0.1.6\x00abc\x00commit\x00\x00\n"
            b"refs/tags/1.0.0\x00t1\x00tag\x00c1\x00commit\n"
        ))
        refs = GitClient().tag_refs("/repo")
        assert [ref.name for ref in refs] == ["0.1.6", "1.0.0"]
        assert refs[0].peeled_id is None
        assert refs[0].object_type == "commit"
        assert refs[1].object_id == "t1"
        assert refs[1].peeled_id == "c1"
        assert refs[1].peeled_type == "commit"

    @patch("docgit.infra.git_client.subprocess.run")
    def test_tag_refs_peels_nested_tags(self, mock_run):
        mock_run.side_effect = [
            completed(stdout=b"refs/tags/2.0.0\x00t2\x00tag\x00t1\x00tag\n"),
            completed(stdout=b"c1\n"),
            completed(stdout=b"commit\n"),
        ]
        refs = GitClient().tag_refs("/repo")
        assert refs[0].object_id == "t2"
        assert refs[0].peeled_id == "c1"
        assert refs[0].peeled_type == "commit"
        peel_args = mock_run.call_args_list[1].args[0]
        assert peel_args[-1] == "refs/tags/2.0.0^{}"

    @patch("docgit.infra.git_client.subprocess.run")
    def test_remote_urls_missing(self, mock_run):
        mock_run.return_value = completed(returncode=1)
        assert GitClient().remote_urls("/repo") == []

    @patch("docgit.infra.git_client.subprocess.run")
    def test_remote_urls_multiple(self, mock_run):
        mock_run.return_value = completed(stdout=b"git@github.com:a/b.git\nhttps://mirror/a/b.git\n")
        assert GitClient().remote_urls("/repo") == ["git@github.com:a/b.git", "https://mirror/a/b.git"]

    @patch("docgit.infra.git_client.subprocess.run")
    def test_rev_parse_commit_unknown(self, mock_run):
        mock_run.return_value = completed(returncode=1)
        assert GitClient().rev_parse_commit("/repo", "nope") is None

    @patch("docgit.infra.git_client.subprocess.run")
    def test_rev_parse_commit_rejects_options(self, mock_run):
        assert GitClient().rev_parse_commit("/repo", "--all") is None
        mock_run.assert_not_called()

    @patch("docgit.infra.git_client.subprocess.run")
    def test_ls_tree(self, mock_run):
        mock_run.return_value = completed(
            stdout=b"100644 blob b1\tdoc/cljdoc.edn\x00160000 commit s1\tdoc/sub module\x00"
        )
        entries = GitClient().ls_tree("/repo", "c1", "doc")
        assert entries == [
            ("100644", "blob", "b1", "doc/cljdoc.edn"),
            ("160000", "commit", "s1", "doc/sub module"),
        ]
