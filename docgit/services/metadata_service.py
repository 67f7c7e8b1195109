"""
Metadata assembly: origin URL, version tag and commit for one version.
"""

import logging

from ..domain.metadata import RepoMetadata
from ..domain.tag import peel
from ..infra.repository import RepositoryHandle
from .origin_service import read_origin
from .tag_service import DEFAULT_VERSION_PREFIX, resolve_version

logger = logging.getLogger(__name__)


def assemble(
    handle: RepositoryHandle,
    version_str: str,
    remote: str = "origin",
    prefix: str = DEFAULT_VERSION_PREFIX,
) -> RepoMetadata:
    """
    Build the metadata record for a version.

    A version without a tag is not an error: a warning is logged and the
    record carries only the URL.

    Raises:
        InvalidOriginScheme: origin cannot be normalized to https://
        UnsupportedRefKind: the matched tag does not point at a commit
    """
    url = read_origin(handle, remote)
    tag_ref = resolve_version(handle, version_str, prefix=prefix)

    if tag_ref is None:
        logger.warning(f"Could not find Git tag for version {version_str} in Git repo {url}")
        return RepoMetadata(url=url)

    return RepoMetadata.from_tag(url, peel(tag_ref))


read_repo_meta = assemble
