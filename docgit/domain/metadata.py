"""
Repository metadata record handed to the documentation pipeline.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from .tag import PeeledTag


@dataclass(frozen=True)
class TagInfo:
    """Name and sha of the tag a version resolved to."""
    name: str
    sha: str

    def to_dict(self) -> Dict[str, str]:
        return {'name': self.name, 'sha': self.sha}


@dataclass(frozen=True)
class RepoMetadata:
    """
    Versioned build metadata for one repository.

    ``commit`` and ``tag`` are either both set or both None. A record
    without them means documentation metadata is unavailable for that
    version, not that the pipeline failed.
    """

    url: str
    commit: Optional[str] = None
    tag: Optional[TagInfo] = None

    def __post_init__(self):
        if (self.commit is None) != (self.tag is None):
            raise ValueError("commit and tag must be given together")

    @classmethod
    def from_tag(cls, url: str, peeled: PeeledTag) -> 'RepoMetadata':
        return cls(
            url=url,
            commit=peeled.commit_id,
            tag=TagInfo(name=peeled.name, sha=peeled.tag_sha),
        )

    @property
    def has_tag(self) -> bool:
        return self.tag is not None

    def to_dict(self) -> Dict[str, Any]:
        """Output record; absent fields are omitted."""
        data: Dict[str, Any] = {'url': self.url}
        if self.tag is not None:
            data['commit'] = self.commit
            data['tag'] = self.tag.to_dict()
        return data
