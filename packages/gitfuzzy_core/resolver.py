"""Branch resolution driver for git-fuzzy.

Runs one resolution: list refs, deduplicate, match, then either check out
the single branch, report the ambiguity, or fall back to checking the
query out as a commit.

Execution Context:
    Library module - imported by the CLI

Dependencies:
    - gitfuzzy_core.branches: Deduplication
    - gitfuzzy_core.matcher: Matching
    - gitfuzzy_core.report: Ambiguity reports

Metadata:
    Version: 0.1.0
    Author: git-fuzzy Team
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Protocol

from gitfuzzy_core.branches import deduplicate
from gitfuzzy_core.errors import EmptyQueryError
from gitfuzzy_core.git import RefListing
from gitfuzzy_core.matcher import match
from gitfuzzy_core.models import BranchRef
from gitfuzzy_core.models import CandidateSet
from gitfuzzy_core.models import MatchResult
from gitfuzzy_core.report import AmbiguityReport
from gitfuzzy_core.report import render

logger = logging.getLogger(__name__)


# ---- Collaborator Protocols ---------------------------------------------------------------------------------


class RefLister(Protocol):
    def list_refs(self) -> RefListing: ...


class CheckoutDispatcher(Protocol):
    def checkout_branch(self, ref: BranchRef) -> None: ...

    def checkout_commit(self, rev: str) -> None: ...


class GitBackend(RefLister, CheckoutDispatcher, Protocol):
    """Anything that can both list refs and check them out."""


# ---- Resolution State ---------------------------------------------------------------------------------------


class ResolutionState(Enum):
    """States of a single resolution run."""

    START = "start"
    LISTED = "listed"
    DEDUPLICATED = "deduplicated"
    MATCHED = "matched"
    RESOLVED = "resolved"
    AMBIGUOUS = "ambiguous"
    FALLBACK = "fallback"


TERMINAL_STATES = frozenset({
    ResolutionState.RESOLVED,
    ResolutionState.AMBIGUOUS,
    ResolutionState.FALLBACK,
})


@dataclass(frozen=True)
class Resolution:
    """Outcome of resolving a query.

    Attributes:
        query: The literal query.
        state: Terminal state reached (RESOLVED, AMBIGUOUS or FALLBACK).
        candidates: Deduplicated candidate set the query was matched against.
        result: Match result.
        report: Ambiguity report (AMBIGUOUS only).
        target: Branch name (RESOLVED) or raw query (FALLBACK) to check out.
        branch: Resolved candidate with its origin and remote (RESOLVED only).
    """

    query: str
    state: ResolutionState
    candidates: CandidateSet
    result: MatchResult
    report: AmbiguityReport | None = None
    target: str | None = None
    branch: BranchRef | None = None

    @property
    def is_ambiguous(self) -> bool:
        return self.state is ResolutionState.AMBIGUOUS

    @property
    def is_fallback(self) -> bool:
        return self.state is ResolutionState.FALLBACK


# ---- Resolver Class -----------------------------------------------------------------------------------------


def validate_query(
        query: str,
) -> str:
    """Reject empty or whitespace-only queries.

    Raises:
        EmptyQueryError: If the query has no non-whitespace characters.
    """
    if not query or not query.strip():
        raise EmptyQueryError(query)
    return query


class Resolver:
    """Resolves partial branch names against a repository.

    Attributes:
        git: Collaborator that lists refs and performs checkouts.
    """

    def __init__(
            self,
            git: GitBackend,
    ) -> None:
        self.git = git

    def _transition(
            self,
            state: ResolutionState,
            detail: str = "",
    ) -> ResolutionState:
        logger.debug("-> %s %s", state.name, detail)
        return state

    def candidates(
            self,
    ) -> CandidateSet:
        """List refs and deduplicate them into a candidate set."""
        listing = self.git.list_refs()
        self._transition(ResolutionState.LISTED, f"({len(listing.locals)} local, {len(listing.remotes)} remote)")
        candidates = deduplicate(listing.locals, listing.remotes, listing.known_remotes)
        self._transition(ResolutionState.DEDUPLICATED, f"({len(candidates)} candidates)")
        return candidates

    def resolve(
            self,
            query: str,
    ) -> Resolution:
        """Resolve a query without checking anything out.

        Args:
            query: Raw user input.

        Returns:
            Resolution in a terminal state.

        Raises:
            EmptyQueryError: If the query is empty or whitespace only.
        """
        validate_query(query)
        self._transition(ResolutionState.START, repr(query))

        candidates = self.candidates()
        result = match(candidates, query)
        self._transition(ResolutionState.MATCHED, result.kind.name)

        if result.is_single:
            state = self._transition(ResolutionState.RESOLVED, result.name)
            branch = result.matches[0].branch
            return Resolution(query, state, candidates, result, target=branch.name, branch=branch)

        if result.is_ambiguous:
            state = self._transition(ResolutionState.AMBIGUOUS, str(result.names()))
            return Resolution(query, state, candidates, result, report=render(query, result))

        state = self._transition(ResolutionState.FALLBACK, repr(query))
        return Resolution(query, state, candidates, result, target=query)

    def checkout(
            self,
            resolution: Resolution,
    ) -> None:
        """Perform the checkout a resolution calls for.

        Ambiguous resolutions check nothing out. Checkout failures from the
        collaborator propagate unchanged.
        """
        if resolution.state is ResolutionState.RESOLVED:
            self.git.checkout_branch(resolution.branch)
        elif resolution.state is ResolutionState.FALLBACK:
            self.git.checkout_commit(resolution.target)

    def run(
            self,
            query: str,
    ) -> Resolution:
        """Resolve a query and check out the result."""
        resolution = self.resolve(query)
        self.checkout(resolution)
        return resolution
