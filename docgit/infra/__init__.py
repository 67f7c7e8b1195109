"""
Infrastructure layer for docgit.

Contains abstractions for external systems:
- GitClient: git command execution
- RepositoryHandle: an opened repository on disk
- Transport providers: environment for clone transports

These provide clean interfaces that can be mocked for testing.
"""

from .git_client import GitClient, GitCommandError, GitResult
from .repository import RepositoryHandle
from .transport import TransportProvider, AnonymousTransport, SshAgentTransport

__all__ = [
    'GitClient',
    'GitCommandError',
    'GitResult',
    'RepositoryHandle',
    'TransportProvider',
    'AnonymousTransport',
    'SshAgentTransport',
]
