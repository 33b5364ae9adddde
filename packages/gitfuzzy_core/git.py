"""Git executable access for git-fuzzy.

Lists local and remote-tracking branch refs and performs checkouts by
running the git executable. Failures are raised as GitError subclasses
carrying git's own output.

Execution Context:
    Library module - imported by the resolver and the CLI

Dependencies:
    - subprocess: Running git
    - gitfuzzy_core.errors: Collaborator failures

Metadata:
    Version: 0.1.0
    Author: git-fuzzy Team
"""
from __future__ import annotations

import logging
import os
import subprocess
from dataclasses import dataclass
from dataclasses import field
from pathlib import Path

from gitfuzzy_core.errors import CheckoutError
from gitfuzzy_core.errors import GitCommandError
from gitfuzzy_core.errors import GitNotFoundError
from gitfuzzy_core.models import BranchRef

logger = logging.getLogger(__name__)


# ---- Constants ----------------------------------------------------------------------------------------------


GIT_DIR = ".git"
GIT_ENV_VAR = "GITFUZZY_GIT"
DEFAULT_GIT = "git"
SHORT_REFNAME_FORMAT = "--format=%(refname:short)"
HEADS_PREFIX = "refs/heads/"
REMOTES_PREFIX = "refs/remotes/"


# ---- Data Classes -------------------------------------------------------------------------------------------


@dataclass
class RefListing:
    """Raw branch names captured from a repository.

    Attributes:
        locals: Local branch names.
        remotes: Remote-tracking short refs (e.g. 'origin/dev').
        known_remotes: Configured remote names, in `git remote` order.
    """

    locals: list[str] = field(default_factory=list)
    remotes: list[str] = field(default_factory=list)
    known_remotes: list[str] = field(default_factory=list)


# ---- Git Class ----------------------------------------------------------------------------------------------


class Git:
    """Runs git commands against one working tree.

    Attributes:
        root: Directory git runs in (None for the current directory).
        executable: Path or name of the git executable.
    """

    def __init__(
            self,
            root: Path | str | None = None,
            executable: str | None = None,
    ) -> None:
        """Initialize the git runner.

        Args:
            root: Working directory for git commands.
            executable: Git executable; defaults to $GITFUZZY_GIT, then 'git'.
        """
        self.root = Path(root) if root is not None else None
        self.executable = executable or get_git_executable()

    def _cwd(self) -> str | None:
        return str(self.root) if self.root is not None else None

    def run(
            self,
            *args: str,
    ) -> str:
        """Run a git command and capture its output.

        Args:
            *args: Arguments after the executable.

        Returns:
            Standard output of the command.

        Raises:
            GitNotFoundError: If the executable cannot be started.
            GitCommandError: If git exits non-zero.
        """
        logger.debug("Running %s %s", self.executable, " ".join(args))
        try:
            completed = subprocess.run(
                [self.executable, *args],
                cwd=self._cwd(),
                capture_output=True,
                text=True,
                check=False,
            )
        except FileNotFoundError as not_found:
            raise GitNotFoundError(self.executable) from not_found

        if completed.returncode != 0:
            raise GitCommandError(args, completed.returncode, completed.stderr)
        return completed.stdout

    def _lines(
            self,
            *args: str,
    ) -> list[str]:
        return [line.strip() for line in self.run(*args).splitlines() if line.strip()]

    # ---- Ref Listing ----------------------------------------------------------------------------------------

    def list_remotes(
            self,
    ) -> list[str]:
        """List configured remote names."""
        return self._lines("remote")

    def list_local_branches(
            self,
    ) -> list[str]:
        """List local branch names."""
        return self._lines("for-each-ref", SHORT_REFNAME_FORMAT, HEADS_PREFIX)

    def list_remote_branches(
            self,
            remote: str,
    ) -> list[str]:
        """List remote-tracking short refs for one remote.

        Args:
            remote: Remote name (e.g. 'origin').

        Returns:
            Short refs such as 'origin/feature-x'.
        """
        return self._lines("for-each-ref", SHORT_REFNAME_FORMAT, f"{REMOTES_PREFIX}{remote}/")

    def list_all_remote_branches(
            self,
            remotes: list[str] | None = None,
    ) -> list[str]:
        """List remote-tracking short refs for every remote, remote by remote."""
        if remotes is None:
            remotes = self.list_remotes()
        refs: list[str] = []
        for remote in remotes:
            refs.extend(self.list_remote_branches(remote))
        return refs

    def list_refs(
            self,
    ) -> RefListing:
        """Capture local branches, remote branches and remote names at once."""
        known_remotes = self.list_remotes()
        listing = RefListing(
            locals=self.list_local_branches(),
            remotes=self.list_all_remote_branches(known_remotes),
            known_remotes=known_remotes,
        )
        logger.debug(
            "Listed %d local and %d remote refs across %d remotes",
            len(listing.locals),
            len(listing.remotes),
            len(listing.known_remotes),
        )
        return listing

    # ---- Checkout -------------------------------------------------------------------------------------------

    def _checkout(
            self,
            args: list[str],
            target: str,
            kind: str,
    ) -> None:
        # trailing "--" keeps git from reading the target as a path
        command = [self.executable, "checkout", *args, "--"]
        logger.debug("Checking out %s %s: %s", kind, target, " ".join(command))
        try:
            # output is not captured: git's own messages go to the terminal
            completed = subprocess.run(
                command,
                cwd=self._cwd(),
                check=False,
            )
        except FileNotFoundError as not_found:
            raise GitNotFoundError(self.executable) from not_found

        if completed.returncode != 0:
            raise CheckoutError(target, kind, completed.returncode)

    def checkout_branch(
            self,
            ref: BranchRef,
    ) -> None:
        """Check out a candidate branch.

        Local branches are checked out by name. A remote-only branch gets a
        new local branch tracking the remote it was found under, so git
        never has to guess between remotes.

        Args:
            ref: Resolved candidate.

        Raises:
            CheckoutError: If git checkout fails.
        """
        if ref.is_local or not ref.remote:
            self._checkout([ref.name], ref.name, "branch")
        else:
            self._checkout(["--track", f"{ref.remote}/{ref.name}"], ref.name, "branch")

    def checkout_commit(
            self,
            rev: str,
    ) -> None:
        """Check out a commit (detached HEAD).

        Raises:
            CheckoutError: If git checkout fails.
        """
        self._checkout([rev], rev, "commit")


# ---- Module Functions ---------------------------------------------------------------------------------------


def get_git_executable() -> str:
    """Get the git executable from the environment, defaulting to 'git'."""
    return os.getenv(GIT_ENV_VAR) or DEFAULT_GIT


def find_git_directory(
        start_path: Path | str | None = None,
) -> Path | None:
    """Find the enclosing git working tree.

    Walks up from start_path looking for a `.git` entry. Both directories
    and `.git` files (linked worktrees, submodules) count.

    Args:
        start_path: Directory to start searching from (defaults to cwd).

    Returns:
        Working tree root if found, None otherwise.
    """
    current = Path(start_path or Path.cwd()).resolve()

    while True:
        if (current / GIT_DIR).exists():
            return current
        if current == current.parent:
            return None
        current = current.parent
