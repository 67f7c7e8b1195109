"""
Origin URL lookup and normalization.

Clones made over SSH report origin as "git@github.com:org/repo.git" or
"ssh://git@host/org/repo.git". Downstream consumers need one comparable
https:// form, and anything that cannot be rewritten into it is an error.
"""

import logging
import re
from typing import List, Tuple

from ..errors import InvalidOriginScheme
from ..infra.repository import RepositoryHandle

logger = logging.getLogger(__name__)

CANONICAL_SCHEME = "https://"

# Applied in order
REWRITE_RULES: List[Tuple[re.Pattern, str]] = [
    (re.compile(r"^git@github\.com:"), "https://github.com/"),
    (re.compile(r"^ssh://git@"), "https://"),
]


def get_origin(handle: RepositoryHandle, remote: str = "origin") -> str:
    """
    First configured URL of the remote.

    Raises:
        InvalidOriginScheme: the remote does not exist or has no URL
    """
    uris = handle.remote_uris(remote)
    if not uris:
        raise InvalidOriginScheme(
            None, f"Repository {handle.path} has no URL for remote {remote!r}"
        )
    return uris[0]


def normalize(raw_url: str) -> str:
    """
    Rewrite SSH remote forms into https://.

    Raises:
        InvalidOriginScheme: the rewritten URL does not start with https://
    """
    url = raw_url
    for pattern, replacement in REWRITE_RULES:
        url = pattern.sub(replacement, url, count=1)

    if not url.startswith(CANONICAL_SCHEME):
        raise InvalidOriginScheme(raw_url)

    if url != raw_url:
        logger.debug(f"Normalized origin {raw_url} -> {url}")
    return url


def read_origin(handle: RepositoryHandle, remote: str = "origin") -> str:
    """The repository's origin URL in https:// form."""
    return normalize(get_origin(handle, remote))
