"""
Transport providers for clone.

A provider is a plain value handed to ``RepositoryHandle.clone``; it
contributes environment variables to the git subprocess. Nothing here is
global, so tests and production can pass different providers.
"""

import os
import shlex
from dataclasses import dataclass, field
from typing import Dict, Optional, Protocol


class TransportProvider(Protocol):
    """Anything that can describe the environment for a git transport."""

    def environment(self) -> Dict[str, str]:
        ...


@dataclass(frozen=True)
class AnonymousTransport:
    """
    Anonymous or pre-configured transport.

    Disables interactive credential prompts so an authentication problem
    fails the clone instead of waiting on a terminal.
    """

    def environment(self) -> Dict[str, str]:
        return {"GIT_TERMINAL_PROMPT": "0"}


@dataclass(frozen=True)
class SshAgentTransport:
    """
    SSH transport authenticating with keys held by a running ssh-agent.

    Args:
        auth_sock: Agent socket; defaults to SSH_AUTH_SOCK at call time
        ssh_command: ssh binary
        options: Extra ``-o`` options passed to ssh
    """
    auth_sock: Optional[str] = None
    ssh_command: str = "ssh"
    options: Dict[str, str] = field(default_factory=dict)

    def environment(self) -> Dict[str, str]:
        options = {"PreferredAuthentications": "publickey", "BatchMode": "yes"}
        options.update(self.options)

        parts = [self.ssh_command]
        for key, value in options.items():
            parts.extend(["-o", f"{key}={value}"])
        command = " ".join(shlex.quote(part) for part in parts)

        env = {"GIT_SSH_COMMAND": command, "GIT_TERMINAL_PROMPT": "0"}
        sock = self.auth_sock or os.environ.get("SSH_AUTH_SOCK")
        if sock:
            env["SSH_AUTH_SOCK"] = sock
        return env
