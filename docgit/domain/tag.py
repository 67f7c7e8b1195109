"""
Tag domain objects for docgit.

A tag reference comes in exactly two shapes:
- Annotated: refs/tags/X names a tag object, which names a commit
- Lightweight: refs/tags/X names a commit directly

``peel`` turns a listed reference into a PeeledTag carrying the commit it
ultimately points at. Anything else is rejected.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..errors import UnsupportedRefKind

TAG_REF_PREFIX = "refs/tags/"


class TagKind(Enum):
    """Which of the two tag shapes a reference has."""
    ANNOTATED = "annotated"
    LIGHTWEIGHT = "lightweight"


@dataclass(frozen=True)
class TagRef:
    """
    A tag reference as listed from the repository.

    Attributes:
        full_name: Full ref name (e.g., "refs/tags/1.2.0")
        object_id: Id of the object the ref names directly
        object_type: Git type of that object ("tag", "commit", ...)
        peeled_id: For tag objects, the id of the object they point at
        peeled_type: Git type of the peeled object
    """

    full_name: str
    object_id: str
    object_type: str = "commit"
    peeled_id: Optional[str] = None
    peeled_type: Optional[str] = None

    @property
    def name(self) -> str:
        """Tag name without the refs/tags/ prefix."""
        return strip_tag_prefix(self.full_name)


@dataclass(frozen=True)
class PeeledTag:
    """
    A tag resolved to its commit.

    For ANNOTATED tags ``object_id`` is the tag object and differs from
    ``commit_id``; for LIGHTWEIGHT tags the two are equal.
    """

    name: str
    kind: TagKind
    object_id: str
    commit_id: str

    @property
    def tag_sha(self) -> str:
        """Sha reported for the tag itself."""
        if self.kind is TagKind.ANNOTATED:
            return self.object_id
        return self.commit_id

    def to_dict(self) -> dict:
        return {
            'name': self.name,
            'kind': self.kind.value,
            'sha': self.tag_sha,
            'commit': self.commit_id,
        }


def peel(tag_ref: TagRef) -> PeeledTag:
    """
    Classify a tag reference and find the commit it points at.

    Raises:
        UnsupportedRefKind: the ref is neither an annotated tag of a commit
            nor a lightweight tag of a commit
    """
    if not tag_ref.object_id:
        raise UnsupportedRefKind(tag_ref.full_name, "reference has no object id")

    if tag_ref.peeled_id and tag_ref.peeled_id != tag_ref.object_id:
        if tag_ref.object_type != "tag":
            raise UnsupportedRefKind(
                tag_ref.full_name,
                f"peeled id present on a {tag_ref.object_type} object",
            )
        if tag_ref.peeled_type != "commit":
            raise UnsupportedRefKind(
                tag_ref.full_name,
                f"annotated tag points at a {tag_ref.peeled_type}, not a commit",
            )
        return PeeledTag(
            name=tag_ref.name,
            kind=TagKind.ANNOTATED,
            object_id=tag_ref.object_id,
            commit_id=tag_ref.peeled_id,
        )

    if tag_ref.object_type != "commit":
        raise UnsupportedRefKind(
            tag_ref.full_name,
            f"lightweight tag points at a {tag_ref.object_type}, not a commit",
        )
    return PeeledTag(
        name=tag_ref.name,
        kind=TagKind.LIGHTWEIGHT,
        object_id=tag_ref.object_id,
        commit_id=tag_ref.object_id,
    )


def strip_tag_prefix(ref_name: str) -> str:
    """Remove a leading refs/tags/ from a ref name."""
    if ref_name.startswith(TAG_REF_PREFIX):
        return ref_name[len(TAG_REF_PREFIX):]
    return ref_name
