"""
Tag lookup for docgit.

Projects are inconsistent about tag names: some tag release 1.2.0 as
"1.2.0", others as "v1.2.0". Version lookup tries the exact name first
and only then the prefixed one.
"""

import logging
from typing import List, Optional, Tuple

from packaging.version import InvalidVersion, Version

from ..domain.tag import TAG_REF_PREFIX, TagRef
from ..infra.repository import RepositoryHandle

logger = logging.getLogger(__name__)

DEFAULT_VERSION_PREFIX = "v"


def find_exact(handle: RepositoryHandle, name: str) -> Optional[TagRef]:
    """Return the tag whose full name is refs/tags/{name}, if any."""
    full_name = f"{TAG_REF_PREFIX}{name}"
    for tag_ref in handle.list_tags():
        if tag_ref.full_name == full_name:
            return tag_ref
    return None


def resolve_version(
    handle: RepositoryHandle,
    version_str: str,
    prefix: str = DEFAULT_VERSION_PREFIX,
) -> Optional[TagRef]:
    """
    Find the tag for a version.

    The exact tag name always wins over the prefixed fallback, so with
    both "1.2.0" and "v1.2.0" present, "1.2.0" is returned.

    Args:
        handle: Repository to search
        version_str: Version as published (e.g., "1.2.0")
        prefix: Prefix tried when no exact tag exists

    Returns:
        Matching TagRef or None
    """
    tag_ref = find_exact(handle, version_str)
    if tag_ref is not None:
        return tag_ref

    if prefix:
        tag_ref = find_exact(handle, f"{prefix}{version_str}")
        if tag_ref is not None:
            logger.debug(f"Version {version_str} matched prefixed tag {tag_ref.name}")
    return tag_ref


def tag_names(handle: RepositoryHandle) -> List[str]:
    """Names of all tags with refs/tags/ removed."""
    return [tag_ref.name for tag_ref in handle.list_tags()]


def version_tags(
    handle: RepositoryHandle,
    prefix: str = DEFAULT_VERSION_PREFIX,
) -> List[Tuple[str, Version]]:
    """
    Tags that parse as versions, oldest first.

    A leading prefix is ignored when parsing, so "v1.0.0" and "1.0.0" both
    parse as 1.0.0. Tags that are not versions are left out.
    """
    versions = []
    for name in tag_names(handle):
        candidate = name[len(prefix):] if prefix and name.startswith(prefix) else name
        try:
            versions.append((name, Version(candidate)))
        except InvalidVersion:
            logger.debug(f"Tag {name} is not a version, skipping")
    return sorted(versions, key=lambda item: (item[1], item[0]))
