"""
Shared fixtures: throwaway git repositories built with the git binary.
"""

import logging
import os
import shutil
import subprocess

import pytest

GIT = shutil.which("git")

requires_git = pytest.mark.skipif(GIT is None, reason="git executable not available")

COMMIT_ENV = {
    "GIT_AUTHOR_NAME": "Doc Tester",
    "GIT_AUTHOR_EMAIL": "tester@example.com",
    "GIT_COMMITTER_NAME": "Doc Tester",
    "GIT_COMMITTER_EMAIL": "tester@example.com",
    "GIT_CONFIG_NOSYSTEM": "1",
}


class RepoBuilder:
    """Builds a repository commit by commit."""

    def __init__(self, path):
        self.path = str(path)
        os.makedirs(self.path, exist_ok=True)
        self.git("init", "--quiet")
        self.git("symbolic-ref", "HEAD", "refs/heads/master")
        self.git("config", "commit.gpgsign", "false")
        self.git("config", "tag.gpgsign", "false")

    def git(self, *args):
        env = os.environ.copy()
        env.update(COMMIT_ENV)
        result = subprocess.run(
            [GIT, *args],
            cwd=self.path,
            env=env,
            capture_output=True,
            text=True,
            check=True,
        )
        return result.stdout.strip()

    def commit(self, files=None, message="commit"):
        """Write files (path -> content, None deletes) and commit them."""
        for rel_path, content in (files or {}).items():
            full_path = os.path.join(self.path, rel_path)
            if content is None:
                self.git("rm", "--quiet", rel_path)
                continue
            os.makedirs(os.path.dirname(full_path), exist_ok=True)
            with open(full_path, "w") as f:
                f.write(content)
            self.git("add", rel_path)
        self.git("commit", "--quiet", "--allow-empty", "-m", message)
        return self.rev_parse("HEAD")

    def tag(self, name, target="HEAD", annotated=False):
        if annotated:
            self.git("tag", "-a", "-m", f"Release {name}", name, target)
        else:
            self.git("tag", name, target)
        return self.rev_parse(f"refs/tags/{name}")

    def branch(self, name, target="HEAD"):
        self.git("branch", name, target)

    def add_remote(self, url, name="origin"):
        self.git("remote", "add", name, url)

    def rev_parse(self, revision):
        return self.git("rev-parse", revision)


@pytest.fixture
def repo_builder(tmp_path):
    """A fresh repository on master with no commits."""
    if GIT is None:
        pytest.skip("git executable not available")
    return RepoBuilder(tmp_path / "repo")


@pytest.fixture
def release_repo(repo_builder):
    """
    Repository with a small release history:

    - 0.1.6: lightweight tag, no doc config
    - v1.0.0: annotated tag, doc config present
    - master: doc config changed after the release
    """
    b = repo_builder
    b.add_remote("git@github.com:acme/widgets.git")
    b.commit({"README.md": "widgets\n"}, "initial")
    b.tag("0.1.6")
    b.commit({"doc/cljdoc.edn": "{:cljdoc/languages [\"clj\"]}\n"}, "add docs")
    b.tag("v1.0.0", annotated=True)
    b.commit({"doc/cljdoc.edn": "{:cljdoc.doc/tree []}\n"}, "update docs")
    return b


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Keep user config and stray DOCGIT_* variables out of tests."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    for key in list(os.environ):
        if key.startswith("DOCGIT_") or key in ("GIT_DIR", "GIT_WORK_TREE"):
            monkeypatch.delenv(key, raising=False)
    yield
    # CLI runs attach a handler bound to a captured stream
    logging.getLogger("docgit").handlers.clear()
    logging.getLogger("docgit").setLevel(logging.NOTSET)
