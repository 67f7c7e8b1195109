"""
Git client infrastructure for docgit.

Provides a clean abstraction over git command execution.
All git operations go through this client, making them:
- Easy to mock for testing
- Consistent in error handling
- Isolated from business logic
"""

import os
import subprocess
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple, Union
import logging

from ..domain.tag import TagRef

logger = logging.getLogger(__name__)

# NUL-separated so ref names and ids never collide with the separator
TAG_REF_FORMAT = (
    '%(refname)%00%(objectname)%00%(objecttype)'
    '%00%(*objectname)%00%(*objecttype)'
)


@dataclass
class GitResult:
    """Result of a git invocation."""
    args: List[str]
    returncode: int
    stdout: Union[str, bytes]
    stderr: str

    @property
    def ok(self) -> bool:
        return self.returncode == 0


class GitCommandError(Exception):
    """A git command exited non-zero, timed out or could not be started."""

    def __init__(self, args: Sequence[str], returncode: int, stderr: str = ""):
        self.args_list = list(args)
        self.returncode = returncode
        self.stderr = (stderr or "").strip()
        message = f"git {' '.join(self.args_list)} failed ({returncode})"
        if self.stderr:
            message += f": {self.stderr}"
        super().__init__(message)


class GitClient:
    """
    Abstraction over git commands.

    Every method runs synchronously. Nothing is retried; failures surface
    as GitCommandError (or a None/empty result where absence is normal).

    Example:
        client = GitClient()
        commit = client.rev_parse_commit("/path/to/repo", "master")
    """

    def __init__(self, executable: str = "git", timeout: Optional[float] = None):
        """
        Initialize GitClient.

        Args:
            executable: git binary to invoke
            timeout: Per-command timeout in seconds (None waits indefinitely)
        """
        self.executable = executable
        self.timeout = timeout

    def run(
        self,
        args: Sequence[str],
        cwd: Optional[str] = None,
        env: Optional[Dict[str, str]] = None,
        check: bool = False,
        binary: bool = False,
    ) -> GitResult:
        """
        Run a git command.

        Args:
            args: Arguments after the git executable
            cwd: Working directory
            env: Extra environment variables layered over os.environ
            check: Raise GitCommandError on non-zero exit
            binary: Return stdout as bytes instead of text

        Returns:
            GitResult with stdout, stderr and returncode
        """
        full_command = [self.executable] + list(args)
        run_env = None
        if env:
            run_env = os.environ.copy()
            run_env.update(env)

        logger.debug(f"Running {' '.join(full_command)} (cwd={cwd})")
        try:
            proc = subprocess.run(
                full_command,
                cwd=cwd,
                env=run_env,
                capture_output=True,
                timeout=self.timeout,
            )
        except subprocess.TimeoutExpired as e:
            raise GitCommandError(args, -1, f"timed out after {self.timeout}s") from e
        except OSError as e:
            raise GitCommandError(args, -1, str(e)) from e

        stdout = proc.stdout if binary else proc.stdout.decode("utf-8", errors="replace")
        result = GitResult(
            args=list(args),
            returncode=proc.returncode,
            stdout=stdout,
            stderr=proc.stderr.decode("utf-8", errors="replace"),
        )

        if check and not result.ok:
            raise GitCommandError(args, result.returncode, result.stderr)
        return result

    def discover(self, path: str) -> Tuple[str, Optional[str]]:
        """
        Locate the repository containing path.

        Discovery is git's own, so GIT_DIR, GIT_CEILING_DIRECTORIES and the
        upward directory search all apply.

        Returns:
            Tuple of (absolute git dir, work tree root or None when bare)
        """
        git_dir = self.run(["rev-parse", "--absolute-git-dir"], cwd=path, check=True)
        bare = self.run(["rev-parse", "--is-bare-repository"], cwd=path, check=True)
        if bare.stdout.strip() == "true":
            return git_dir.stdout.strip(), None

        toplevel = self.run(["rev-parse", "--show-toplevel"], cwd=path, check=True)
        return git_dir.stdout.strip(), toplevel.stdout.strip()

    def clone(self, uri: str, target_dir: str, env: Optional[Dict[str, str]] = None) -> None:
        """Full (non-shallow) clone of uri into target_dir."""
        self.run(["clone", "--quiet", "--", uri, target_dir], env=env, check=True)

    def checkout(self, path: str, revision: str) -> None:
        """Switch the working tree at path to revision."""
        self.run(["checkout", "--quiet", revision, "--"], cwd=path, check=True)

    def tag_refs(self, path: str) -> List[TagRef]:
        """
        List tag references, sorted by ref name.

        Annotated tags report the object they ultimately point at in the
        peeled fields, following chains of tag objects; lightweight tags
        leave them empty.
        """
        result = self.run(
            ["for-each-ref", "--sort=refname", f"--format={TAG_REF_FORMAT}", "refs/tags"],
            cwd=path,
            check=True,
        )

        refs = []
        for line in result.stdout.splitlines():
            if not line:
                continue
            parts = line.split("\0")
            if len(parts) != 5:
                logger.warning(f"Skipping unparseable tag ref line: {line!r}")
                continue
            name, object_id, object_type, peeled_id, peeled_type = parts
            if peeled_type == "tag":
                # %(*objectname) peels one level only
                peeled_id, peeled_type = self.peel_object(path, name)
            refs.append(TagRef(
                full_name=name,
                object_id=object_id,
                object_type=object_type,
                peeled_id=peeled_id or None,
                peeled_type=peeled_type or None,
            ))
        return refs

    def remote_urls(self, path: str, remote: str = "origin") -> List[str]:
        """
        Get all configured URLs for a remote.

        Returns:
            URLs in configuration order, empty when the remote is missing
        """
        result = self.run(["config", "--get-all", f"remote.{remote}.url"], cwd=path)
        # git config exits 1 when the key is unset
        if result.returncode == 1:
            return []
        if not result.ok:
            raise GitCommandError(result.args, result.returncode, result.stderr)
        return [line.strip() for line in result.stdout.splitlines() if line.strip()]

    def rev_parse_commit(self, path: str, revision: str) -> Optional[str]:
        """Resolve revision to a commit id, or None if it names no commit."""
        if not revision or revision.startswith("-"):
            return None
        result = self.run(
            ["rev-parse", "--verify", "--quiet", f"{revision}^{{commit}}"],
            cwd=path,
        )
        if not result.ok:
            return None
        return result.stdout.strip() or None

    def ls_tree(self, path: str, commit: str, file_path: str) -> List[Tuple[str, str, str, str]]:
        """
        Recursively list tree entries of commit under file_path.

        Returns:
            List of (mode, type, object id, path) tuples
        """
        result = self.run(
            ["ls-tree", "-r", "-z", "--full-tree", commit, "--", file_path],
            cwd=path,
            check=True,
        )
        entries = []
        for record in result.stdout.split("\0"):
            if not record or "\t" not in record:
                continue
            meta, entry_path = record.split("\t", 1)
            mode, obj_type, obj_id = meta.split(" ", 2)
            entries.append((mode, obj_type, obj_id, entry_path))
        return entries

    def cat_blob(self, path: str, object_id: str) -> bytes:
        """Read the raw content of a blob."""
        return self.run(["cat-file", "blob", object_id], cwd=path, check=True, binary=True).stdout

    def peel_object(self, path: str, revision: str) -> Tuple[str, str]:
        """
        Follow tag objects from revision until a non-tag object.

        Returns:
            Tuple of (object id, object type) of the final target
        """
        peeled = self.run(["rev-parse", "--verify", "--quiet", f"{revision}^{{}}"], cwd=path, check=True)
        object_id = peeled.stdout.strip()
        object_type = self.run(["cat-file", "-t", object_id], cwd=path, check=True)
        return object_id, object_type.stdout.strip()
