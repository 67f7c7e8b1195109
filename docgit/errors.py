"""
Error taxonomy for docgit.

These are hard failures: they abort the enclosing operation and propagate
to the caller unchanged. Soft outcomes (no tag for a version, file absent
at a valid revision) are represented as ``None`` instead.
"""

from typing import Optional


class DocgitError(Exception):
    """Base class for all docgit failures."""


class RepositoryNotFound(DocgitError):
    """No git repository could be located at the given directory."""

    def __init__(self, path: str, detail: Optional[str] = None):
        message = f"No git repository found at {path}"
        if detail:
            message += f": {detail}"
        super().__init__(message)
        self.path = path


class CloneFailure(DocgitError):
    """Cloning failed (network, authentication or target directory)."""

    def __init__(self, uri: str, detail: Optional[str] = None):
        message = f"Failed to clone {uri}"
        if detail:
            message += f": {detail}"
        super().__init__(message)
        self.uri = uri


class CheckoutFailure(DocgitError):
    """The working tree could not be switched to a revision."""

    def __init__(self, revision: str, detail: Optional[str] = None):
        message = f"Failed to check out revision {revision}"
        if detail:
            message += f": {detail}"
        super().__init__(message)
        self.revision = revision


class RevisionResolutionFailure(DocgitError):
    """A revision string did not resolve to any commit."""

    def __init__(self, revision: str):
        super().__init__(f"Could not resolve revision {revision!r} to a commit")
        self.revision = revision


class InvalidOriginScheme(DocgitError):
    """The normalized origin URL does not use https://."""

    def __init__(self, url: Optional[str], detail: Optional[str] = None):
        if detail:
            message = detail
        else:
            message = f"Origin URL {url!r} does not use the https:// scheme"
        super().__init__(message)
        self.url = url


class UnsupportedRefKind(DocgitError):
    """A tag reference is neither an annotated nor a lightweight commit tag."""

    def __init__(self, ref_name: str, detail: Optional[str] = None):
        message = f"Unsupported tag reference {ref_name}"
        if detail:
            message += f": {detail}"
        super().__init__(message)
        self.ref_name = ref_name
