"""Shared test configuration and fixtures for gitfuzzy_core tests.

Provides:
- FakeGit: an in-memory stand-in for the git collaborator that records
  checkout requests instead of running git.
- Candidate set fixtures reused across test modules.
"""
from __future__ import annotations

import pytest

from gitfuzzy_core.errors import CheckoutError
from gitfuzzy_core.git import RefListing
from gitfuzzy_core.models import BranchOrigin
from gitfuzzy_core.models import BranchRef
from gitfuzzy_core.models import CandidateSet


# ---------------------------------------------------------------------------
# Fake git collaborator
# ---------------------------------------------------------------------------

class FakeGit:
    """Records calls the resolver makes to its git collaborator."""

    def __init__(
            self,
            local_branches: list[str] | None = None,
            remote_branches: list[str] | None = None,
            remotes: list[str] | None = None,
            fail_checkout: bool = False,
    ) -> None:
        self.listing = RefListing(
            locals=list(local_branches or []),
            remotes=list(remote_branches or []),
            known_remotes=list(remotes or ["origin"]),
        )
        self.fail_checkout = fail_checkout
        self.list_calls = 0
        self.checkouts: list[tuple[str, str]] = []
        self.branch_refs: list[BranchRef] = []

    def list_refs(self) -> RefListing:
        self.list_calls += 1
        return self.listing

    def _checkout(self, target: str, kind: str) -> None:
        self.checkouts.append((kind, target))
        if self.fail_checkout:
            raise CheckoutError(target, kind, 1)

    def checkout_branch(self, ref: BranchRef) -> None:
        self.branch_refs.append(ref)
        self._checkout(ref.name, "branch")

    def checkout_commit(self, rev: str) -> None:
        self._checkout(rev, "commit")


@pytest.fixture
def fake_git_factory():
    """Build FakeGit instances with custom refs."""
    return FakeGit


# ---------------------------------------------------------------------------
# Candidate sets
# ---------------------------------------------------------------------------

def make_candidates(*names: str) -> CandidateSet:
    """Build a candidate set of local branches in the given order."""
    return CandidateSet(BranchRef(name=name, origin=BranchOrigin.LOCAL) for name in names)


@pytest.fixture
def feature_candidates() -> CandidateSet:
    """Two feature branches sharing the 'feat' prefix."""
    return make_candidates("feature/another-feature", "feature/really-long-branch-name")


@pytest.fixture
def mixed_candidates() -> CandidateSet:
    """Local and remote-only candidates."""
    return CandidateSet([
        BranchRef(name="main", origin=BranchOrigin.LOCAL),
        BranchRef(name="develop", origin=BranchOrigin.LOCAL),
        BranchRef(name="release/1.0", origin=BranchOrigin.REMOTE_ONLY, remote="origin"),
        BranchRef(name="hotfix/login", origin=BranchOrigin.REMOTE_ONLY, remote="upstream"),
    ])


@pytest.fixture
def candidates_factory():
    """Build local-only candidate sets from branch names."""
    return make_candidates
