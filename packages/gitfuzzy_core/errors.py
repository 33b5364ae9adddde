"""Exceptions raised by git-fuzzy.

Execution Context:
    Library module - imported by gitfuzzy_core modules and the CLI

Metadata:
    Version: 0.1.0
    Author: git-fuzzy Team
"""
from __future__ import annotations

from collections.abc import Sequence


class GitFuzzyError(Exception):
    """Base class for all git-fuzzy errors."""


class EmptyQueryError(GitFuzzyError, ValueError):
    """Raised when the branch pattern is empty or whitespace only."""

    def __init__(
            self,
            query: str = "",
    ) -> None:
        self.query = query
        super().__init__("Branch pattern must not be empty")


class NotARepositoryError(GitFuzzyError):
    """Raised when no git repository encloses the working directory."""

    def __init__(
            self,
            path: str | None = None,
    ) -> None:
        self.path = path
        super().__init__("Not in a git repository")


# ---- Collaborator Failures ----------------------------------------------------------------------------------


class GitError(GitFuzzyError):
    """Base class for failures of the git executable."""


class GitNotFoundError(GitError):
    """Raised when the git executable cannot be started."""

    def __init__(
            self,
            executable: str,
    ) -> None:
        self.executable = executable
        super().__init__(f"Failed to execute {executable}: executable not found")


class GitCommandError(GitError):
    """Raised when a git command exits non-zero.

    Attributes:
        args: Arguments passed to git.
        returncode: Exit status of the process.
        stderr: Error output of the process, verbatim.
    """

    def __init__(
            self,
            args: Sequence[str],
            returncode: int,
            stderr: str = "",
    ) -> None:
        self.command = tuple(args)
        self.returncode = returncode
        self.stderr = stderr
        detail = stderr.strip() or f"exit status {returncode}"
        super().__init__(f"git {' '.join(self.command)} failed: {detail}")


class CheckoutError(GitError):
    """Raised when `git checkout` fails for a branch or commit.

    Attributes:
        target: Branch name or commit passed to checkout.
        kind: 'branch' or 'commit'.
        returncode: Exit status of git checkout.
    """

    def __init__(
            self,
            target: str,
            kind: str,
            returncode: int,
    ) -> None:
        self.target = target
        self.kind = kind
        self.returncode = returncode
        super().__init__(f"git checkout failed for {kind}: {target}")
