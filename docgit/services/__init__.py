"""
Service layer for docgit.

Services work on an opened RepositoryHandle:
- tag_service: find the tag for a version
- origin_service: read and normalize the origin URL
- file_service: read files at a revision
- metadata_service: assemble the record for the documentation pipeline
"""

from .tag_service import find_exact, resolve_version, tag_names, version_tags
from .origin_service import get_origin, normalize, read_origin
from .file_service import read_file_at, read_config
from .metadata_service import assemble, read_repo_meta

__all__ = [
    'find_exact',
    'resolve_version',
    'tag_names',
    'version_tags',
    'get_origin',
    'normalize',
    'read_origin',
    'read_file_at',
    'read_config',
    'assemble',
    'read_repo_meta',
]
