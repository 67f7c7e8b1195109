"""
Handle on a repository that already exists on disk.

The handle owns the resolved paths and a GitClient. It performs no
locking: the working tree is shared mutable state, so callers must not
run checkouts on one handle from several threads at once. Reads by
commit (tags, trees, blobs, remotes) never touch the working tree.
"""

import logging
import os
from pathlib import Path
from typing import List, Optional, Union

from ..domain.tag import TagRef
from ..errors import (
    CheckoutFailure,
    CloneFailure,
    RepositoryNotFound,
    RevisionResolutionFailure,
)
from .git_client import GitClient, GitCommandError
from .transport import AnonymousTransport, TransportProvider

logger = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike]


class RepositoryHandle:
    """
    An opened git repository.

    Example:
        repo = RepositoryHandle.open("/path/to/checkout")
        for ref in repo.list_tags():
            print(ref.name)
    """

    def __init__(self, path: str, git_dir: str, client: Optional[GitClient] = None):
        """
        Args:
            path: Work tree root (the git dir itself for bare repositories)
            git_dir: Absolute path of the repository metadata directory
            client: GitClient used for every command
        """
        self.path = path
        self.git_dir = git_dir
        self.client = client or GitClient()

    def __repr__(self) -> str:
        return f"RepositoryHandle({self.path!r})"

    @property
    def is_bare(self) -> bool:
        return Path(self.path) == Path(self.git_dir)

    @classmethod
    def open(cls, directory: PathLike, client: Optional[GitClient] = None) -> 'RepositoryHandle':
        """
        Open the repository at (or above) directory.

        Raises:
            RepositoryNotFound: directory is missing or not inside a repository
        """
        client = client or GitClient()
        directory = os.path.abspath(os.path.expanduser(os.fspath(directory)))
        if not os.path.isdir(directory):
            raise RepositoryNotFound(directory, "not a directory")

        try:
            git_dir, work_tree = client.discover(directory)
        except GitCommandError as e:
            raise RepositoryNotFound(directory, e.stderr or None) from e

        return cls(work_tree or git_dir, git_dir, client)

    @classmethod
    def clone(
        cls,
        uri: str,
        target_directory: PathLike,
        transport: Optional[TransportProvider] = None,
        client: Optional[GitClient] = None,
    ) -> 'RepositoryHandle':
        """
        Clone uri into target_directory and open the result.

        Blocks until git finishes; there is no timeout unless the client
        was built with one.

        Raises:
            CloneFailure: transport, authentication or target directory error
        """
        client = client or GitClient()
        transport = transport or AnonymousTransport()
        target = os.path.abspath(os.path.expanduser(os.fspath(target_directory)))

        logger.info(f"Cloning repo {uri}")
        try:
            client.clone(uri, target, env=transport.environment())
        except GitCommandError as e:
            raise CloneFailure(uri, e.stderr or None) from e

        try:
            return cls.open(target, client)
        except RepositoryNotFound as e:
            raise CloneFailure(uri, str(e)) from e

    def checkout(self, revision: str) -> None:
        """
        Switch the working tree to revision.

        Raises:
            CheckoutFailure: revision does not resolve or the checkout fails
        """
        logger.info(f"Checking out revision {revision}")
        if not revision or revision.startswith("-"):
            raise CheckoutFailure(revision, "not a revision")
        if self.is_bare:
            raise CheckoutFailure(revision, "repository has no working tree")
        try:
            self.client.checkout(self.path, revision)
        except GitCommandError as e:
            raise CheckoutFailure(revision, e.stderr or None) from e

    def list_tags(self) -> List[TagRef]:
        """All tag references, ordered by ref name."""
        return self.client.tag_refs(self.path)

    def remote_uris(self, name: str = "origin") -> List[str]:
        """Configured URLs of a remote; empty if there is no such remote."""
        return self.client.remote_urls(self.path, name)

    def resolve_commit(self, revision: str) -> str:
        """
        Resolve a branch, tag or sha to a commit id.

        Raises:
            RevisionResolutionFailure: revision names no commit
        """
        commit = self.client.rev_parse_commit(self.path, revision)
        if commit is None:
            raise RevisionResolutionFailure(revision)
        return commit

    def find_blob(self, commit: str, path: str) -> Optional[str]:
        """
        Walk the tree of commit for path.

        Returns:
            Blob id of the first file matching path, or None
        """
        path = path.strip("/")
        if path.startswith("./"):
            path = path[2:]
        if not path:
            return None

        for _mode, obj_type, obj_id, _entry_path in self.client.ls_tree(self.path, commit, path):
            if obj_type == "blob":
                return obj_id
        return None

    def read_blob(self, object_id: str) -> bytes:
        """Raw content of a blob."""
        return self.client.cat_blob(self.path, object_id)
