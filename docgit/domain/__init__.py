"""
Domain layer for docgit.

Contains pure domain objects with no I/O or side effects:
- TagRef: A tag reference as listed from the repository
- PeeledTag: A tag resolved to the commit it points at
- RepoMetadata: The record handed to the documentation pipeline
"""

from .tag import TagRef, TagKind, PeeledTag, peel, strip_tag_prefix
from .metadata import RepoMetadata, TagInfo

__all__ = [
    'TagRef',
    'TagKind',
    'PeeledTag',
    'peel',
    'strip_tag_prefix',
    'RepoMetadata',
    'TagInfo',
]
