"""Data models for git-fuzzy branch resolution.

Defines the candidate branch references, match spans and match results
passed between the deduplicator, the matcher and the reporter.

Execution Context:
    Library module - imported by other gitfuzzy_core modules

Dependencies:
    - dataclasses: Data class decorators
    - enum: Origin and match-kind tags

Metadata:
    Version: 0.1.0
    Author: git-fuzzy Team
"""
from __future__ import annotations

from collections.abc import Iterable
from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum


# ---- Enumerations -------------------------------------------------------------------------------------------


class BranchOrigin(Enum):
    """Where a candidate branch name was discovered."""

    LOCAL = "local"
    REMOTE_ONLY = "remote-only"


class MatchKind(Enum):
    """Shape of a match result."""

    NONE = "none"
    SINGLE = "single"
    AMBIGUOUS = "ambiguous"


# ---- Data Model Classes -------------------------------------------------------------------------------------


@dataclass(frozen=True)
class BranchRef:
    """A candidate branch name.

    Attributes:
        name: Bare branch name (e.g., 'develop', 'feature/new-layer').
        origin: Whether a local branch exists for the name.
        remote: First remote the name was seen under (None for locals).
    """

    name: str
    origin: BranchOrigin = BranchOrigin.LOCAL
    remote: str | None = None

    @property
    def is_local(
            self,
    ) -> bool:
        """True when a local branch with this name exists."""
        return self.origin is BranchOrigin.LOCAL


@dataclass(frozen=True)
class MatchSpan:
    """Offset of the matched query inside a branch name.

    Attributes:
        start: Index of the first matched character.
        length: Number of matched characters.
    """

    start: int
    length: int

    @property
    def end(
            self,
    ) -> int:
        """Index one past the last matched character."""
        return self.start + self.length

    def slice(
            self,
            name: str,
    ) -> tuple[str, str, str]:
        """Split a name around the span.

        Args:
            name: Branch name the span refers to.

        Returns:
            Tuple of (before, matched, after) text.
        """
        return name[:self.start], name[self.start:self.end], name[self.end:]


@dataclass(frozen=True)
class BranchMatch:
    """A candidate paired with the span that matched the query."""

    branch: BranchRef
    span: MatchSpan

    @property
    def name(
            self,
    ) -> str:
        return self.branch.name


class CandidateSet:
    """Ordered, immutable collection of branch refs unique by bare name.

    Order is discovery order: local branches first, then remote-only
    branches in the order they were first seen.
    """

    __slots__ = ("_refs", "_index")

    def __init__(
            self,
            refs: Iterable[BranchRef] = (),
    ) -> None:
        """Build a candidate set.

        Args:
            refs: Branch refs in discovery order.

        Raises:
            ValueError: If two refs share the same bare name.
        """
        ordered = tuple(refs)
        index: dict[str, BranchRef] = {}
        for ref in ordered:
            if ref.name in index:
                msg = f"Duplicate candidate branch '{ref.name}'"
                raise ValueError(msg)
            index[ref.name] = ref
        self._refs = ordered
        self._index = index

    def __iter__(self) -> Iterator[BranchRef]:
        return iter(self._refs)

    def __len__(self) -> int:
        return len(self._refs)

    def __getitem__(self, position: int) -> BranchRef:
        return self._refs[position]

    def __contains__(self, name: object) -> bool:
        return name in self._index

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CandidateSet):
            return NotImplemented
        return self._refs == other._refs

    def __hash__(self) -> int:
        return hash(self._refs)

    def __repr__(self) -> str:
        return f"CandidateSet({list(self._refs)!r})"

    def names(
            self,
    ) -> list[str]:
        """List candidate names in discovery order."""
        return [ref.name for ref in self._refs]

    def get(
            self,
            name: str,
    ) -> BranchRef | None:
        """Look up a candidate by bare name.

        Args:
            name: Bare branch name.

        Returns:
            The BranchRef, or None if absent.
        """
        return self._index.get(name)


class MatchResult:
    """Outcome of matching a query against a candidate set.

    Use the ``no_match``, ``single`` and ``ambiguous`` constructors rather
    than instantiating directly.

    Attributes:
        kind: NONE, SINGLE or AMBIGUOUS.
        matches: Matched candidates with their spans, in candidate order.
        tier: 'exact' or 'substring' for the tier that produced the
            matches, None when nothing matched.
    """

    __slots__ = ("kind", "matches", "tier")

    def __init__(
            self,
            kind: MatchKind,
            matches: tuple[BranchMatch, ...] = (),
            tier: str | None = None,
    ) -> None:
        expected = {MatchKind.NONE: 0, MatchKind.SINGLE: 1}
        if kind in expected and len(matches) != expected[kind]:
            msg = f"{kind.name} result cannot hold {len(matches)} matches"
            raise ValueError(msg)
        if kind is MatchKind.AMBIGUOUS and len(matches) < 2:
            msg = "AMBIGUOUS result needs at least two matches"
            raise ValueError(msg)
        self.kind = kind
        self.matches = matches
        self.tier = tier

    @classmethod
    def no_match(
            cls,
    ) -> MatchResult:
        return cls(MatchKind.NONE)

    @classmethod
    def single(
            cls,
            match: BranchMatch,
            tier: str,
    ) -> MatchResult:
        return cls(MatchKind.SINGLE, (match,), tier)

    @classmethod
    def ambiguous(
            cls,
            matches: Iterable[BranchMatch],
            tier: str,
    ) -> MatchResult:
        return cls(MatchKind.AMBIGUOUS, tuple(matches), tier)

    @property
    def is_none(self) -> bool:
        return self.kind is MatchKind.NONE

    @property
    def is_single(self) -> bool:
        return self.kind is MatchKind.SINGLE

    @property
    def is_ambiguous(self) -> bool:
        return self.kind is MatchKind.AMBIGUOUS

    @property
    def name(
            self,
    ) -> str:
        """Name of the single matched branch.

        Raises:
            ValueError: If the result is not a single match.
        """
        if not self.is_single:
            msg = f"No single branch in a {self.kind.name} result"
            raise ValueError(msg)
        return self.matches[0].name

    def names(
            self,
    ) -> list[str]:
        """Matched branch names in resolution order."""
        return [match.name for match in self.matches]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MatchResult):
            return NotImplemented
        return (self.kind, self.matches, self.tier) == (other.kind, other.matches, other.tier)

    def __hash__(self) -> int:
        return hash((self.kind, self.matches, self.tier))

    def __repr__(self) -> str:
        return f"MatchResult({self.kind.name}, {self.names()!r}, tier={self.tier!r})"
