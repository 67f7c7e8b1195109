"""
docgit - Versioned build metadata from git repositories.

Built for documentation pipelines that need, for a published version,
the tag it was released from, the commit behind that tag, a canonical
origin URL and the documentation config as of that revision.

Quick Start:
    import docgit

    repo = docgit.RepositoryHandle.open("~/src/yada")

    # URL, tag and commit for a version ("1.2.10" or "v1.2.10")
    meta = docgit.assemble(repo, "1.2.10")
    print(meta.to_dict())

    # Config file at the tag, falling back to master
    edn = docgit.read_config(repo, "1.2.10")

Domain Objects:
    TagRef - A tag reference as listed
    PeeledTag - A tag resolved to its commit (annotated or lightweight)
    RepoMetadata - The record handed to the pipeline

Errors:
    RepositoryNotFound, CloneFailure, CheckoutFailure,
    RevisionResolutionFailure, InvalidOriginScheme, UnsupportedRefKind
"""

__version__ = "0.3.0"

# Domain objects
from .domain import (
    TagRef,
    TagKind,
    PeeledTag,
    peel,
    RepoMetadata,
    TagInfo,
)

# Errors
from .errors import (
    DocgitError,
    RepositoryNotFound,
    CloneFailure,
    CheckoutFailure,
    RevisionResolutionFailure,
    InvalidOriginScheme,
    UnsupportedRefKind,
)

# Repository access
from .infra import (
    GitClient,
    RepositoryHandle,
    AnonymousTransport,
    SshAgentTransport,
)

# Services
from .services import (
    find_exact,
    resolve_version,
    tag_names,
    version_tags,
    get_origin,
    normalize,
    read_origin,
    read_file_at,
    read_config,
    assemble,
    read_repo_meta,
)

# Configuration
from .config import load_config, save_config

__all__ = [
    "__version__",
    # Domain objects
    "TagRef",
    "TagKind",
    "PeeledTag",
    "peel",
    "RepoMetadata",
    "TagInfo",
    # Errors
    "DocgitError",
    "RepositoryNotFound",
    "CloneFailure",
    "CheckoutFailure",
    "RevisionResolutionFailure",
    "InvalidOriginScheme",
    "UnsupportedRefKind",
    # Repository access
    "GitClient",
    "RepositoryHandle",
    "AnonymousTransport",
    "SshAgentTransport",
    # Services
    "find_exact",
    "resolve_version",
    "tag_names",
    "version_tags",
    "get_origin",
    "normalize",
    "read_origin",
    "read_file_at",
    "read_config",
    "assemble",
    "read_repo_meta",
    # Configuration
    "load_config",
    "save_config",
]
