"""
Reading files at a revision.

Files are read from the commit's tree, never from the working tree, so a
read does not depend on what is currently checked out.
"""

import logging
from typing import Optional

from ..infra.repository import RepositoryHandle

logger = logging.getLogger(__name__)

DOC_CONFIG_PATH = "doc/cljdoc.edn"
DEFAULT_BRANCH = "master"


def read_file_at(handle: RepositoryHandle, revision: str, path: str) -> Optional[str]:
    """
    Read a file in the repository at revision.

    Args:
        handle: Repository to read from
        revision: Branch, tag or commit sha
        path: Path relative to the repository root

    Returns:
        File content decoded as UTF-8, or None if the file does not exist
        at that revision

    Raises:
        RevisionResolutionFailure: revision names no commit
    """
    commit = handle.resolve_commit(revision)
    blob_id = handle.find_blob(commit, path)
    if blob_id is None:
        logger.debug(f"{path} not found at {revision} ({commit})")
        return None
    return handle.read_blob(blob_id).decode("utf-8", errors="replace")


def read_config(
    handle: RepositoryHandle,
    revision: Optional[str] = None,
    path: str = DOC_CONFIG_PATH,
    default_branch: str = DEFAULT_BRANCH,
) -> Optional[str]:
    """
    Read the documentation config, falling back to the default branch.

    The default branch is consulted when no revision is given, or when the
    file at revision is missing or empty. An empty file is treated the same
    as a missing one.

    A revision that does not resolve at all is not a fallback case:
    RevisionResolutionFailure propagates.
    """
    if revision:
        content = read_file_at(handle, revision, path)
        if content is None:
            logger.debug(f"{path} missing at {revision}, falling back to {default_branch}")
        elif content == "":
            logger.debug(f"{path} empty at {revision}, falling back to {default_branch}")
        else:
            return content

    return read_file_at(handle, default_branch, path)
