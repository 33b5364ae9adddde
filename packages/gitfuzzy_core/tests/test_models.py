"""Tests for data models module.

Tests BranchRef, MatchSpan, CandidateSet and MatchResult, including the
uniqueness invariant of candidate sets and the shape checks of results.

Execution Context:
    Test module - run via pytest

Dependencies:
    - pytest: Test framework
    - gitfuzzy_core.models: Module under test
"""
from __future__ import annotations

import pytest

from gitfuzzy_core.models import BranchMatch
from gitfuzzy_core.models import BranchOrigin
from gitfuzzy_core.models import BranchRef
from gitfuzzy_core.models import CandidateSet
from gitfuzzy_core.models import MatchKind
from gitfuzzy_core.models import MatchResult
from gitfuzzy_core.models import MatchSpan


# ---- Fixtures ------------------------------------------------------------------------------------------------


@pytest.fixture
def develop_match() -> BranchMatch:
    """A substring match of 'dev' in 'develop'."""
    return BranchMatch(branch=BranchRef(name="develop"), span=MatchSpan(start=0, length=3))


# ---- BranchRef Tests -----------------------------------------------------------------------------------------


class TestBranchRef:
    """Tests for the BranchRef dataclass."""

    def test_defaults_to_local(self) -> None:
        """Test that a bare BranchRef is local with no remote."""
        ref = BranchRef(name="main")
        assert ref.origin is BranchOrigin.LOCAL
        assert ref.remote is None
        assert ref.is_local

    def test_remote_only(self) -> None:
        """Test remote-only refs are not local."""
        ref = BranchRef(name="feature-x", origin=BranchOrigin.REMOTE_ONLY, remote="origin")
        assert not ref.is_local
        assert ref.remote == "origin"

    def test_is_frozen(self) -> None:
        """Test that BranchRef cannot be mutated."""
        ref = BranchRef(name="main")
        with pytest.raises(AttributeError):
            ref.name = "other"  # type: ignore[misc]


# ---- MatchSpan Tests -----------------------------------------------------------------------------------------


class TestMatchSpan:
    """Tests for the MatchSpan dataclass."""

    def test_end(self) -> None:
        """Test end is start plus length."""
        assert MatchSpan(start=8, length=4).end == 12

    def test_slice(self) -> None:
        """Test slicing a name around the span."""
        span = MatchSpan(start=8, length=4)
        assert span.slice("feature/really-long-branch-name") == (
            "feature/",
            "real",
            "ly-long-branch-name",
        )

    def test_slice_whole_name(self) -> None:
        """Test a span covering the whole name."""
        assert MatchSpan(start=0, length=4).slice("main") == ("", "main", "")


# ---- CandidateSet Tests --------------------------------------------------------------------------------------


class TestCandidateSet:
    """Tests for the CandidateSet collection."""

    def test_empty(self) -> None:
        """Test an empty candidate set."""
        candidates = CandidateSet()
        assert len(candidates) == 0
        assert candidates.names() == []

    def test_preserves_order(self) -> None:
        """Test that discovery order is kept."""
        candidates = CandidateSet([BranchRef(name="b"), BranchRef(name="a")])
        assert candidates.names() == ["b", "a"]
        assert candidates[0].name == "b"
        assert [ref.name for ref in candidates] == ["b", "a"]

    def test_rejects_duplicate_names(self) -> None:
        """Test that two refs with the same bare name are refused."""
        with pytest.raises(ValueError, match="Duplicate candidate branch 'dev'"):
            CandidateSet([
                BranchRef(name="dev"),
                BranchRef(name="dev", origin=BranchOrigin.REMOTE_ONLY, remote="origin"),
            ])

    def test_contains_and_get(self, mixed_candidates: CandidateSet) -> None:
        """Test membership and lookup by name."""
        assert "develop" in mixed_candidates
        assert "missing" not in mixed_candidates
        assert mixed_candidates.get("release/1.0").remote == "origin"
        assert mixed_candidates.get("missing") is None

    def test_equality(self) -> None:
        """Test candidate sets compare by content and order."""
        first = CandidateSet([BranchRef(name="a"), BranchRef(name="b")])
        same = CandidateSet([BranchRef(name="a"), BranchRef(name="b")])
        reordered = CandidateSet([BranchRef(name="b"), BranchRef(name="a")])
        assert first == same
        assert first != reordered


# ---- MatchResult Tests ---------------------------------------------------------------------------------------


class TestMatchResult:
    """Tests for the MatchResult variant."""

    def test_no_match(self) -> None:
        """Test the NONE variant."""
        result = MatchResult.no_match()
        assert result.kind is MatchKind.NONE
        assert result.is_none
        assert result.matches == ()
        assert result.tier is None
        assert result.names() == []

    def test_single(self, develop_match: BranchMatch) -> None:
        """Test the SINGLE variant."""
        result = MatchResult.single(develop_match, "substring")
        assert result.is_single
        assert result.name == "develop"
        assert result.tier == "substring"

    def test_ambiguous(self, develop_match: BranchMatch) -> None:
        """Test the AMBIGUOUS variant keeps order."""
        other = BranchMatch(branch=BranchRef(name="dev2"), span=MatchSpan(start=0, length=3))
        result = MatchResult.ambiguous([other, develop_match], "substring")
        assert result.is_ambiguous
        assert result.names() == ["dev2", "develop"]

    def test_name_requires_single(self) -> None:
        """Test that name is only defined for single matches."""
        with pytest.raises(ValueError):
            _ = MatchResult.no_match().name

    def test_single_rejects_wrong_count(self, develop_match: BranchMatch) -> None:
        """Test SINGLE must hold exactly one match."""
        with pytest.raises(ValueError):
            MatchResult(MatchKind.SINGLE, (develop_match, develop_match), "exact")

    def test_ambiguous_needs_two(self, develop_match: BranchMatch) -> None:
        """Test AMBIGUOUS must hold at least two matches."""
        with pytest.raises(ValueError):
            MatchResult.ambiguous([develop_match], "substring")

    def test_equality(self, develop_match: BranchMatch) -> None:
        """Test results compare by kind, matches and tier."""
        assert MatchResult.single(develop_match, "substring") == MatchResult.single(develop_match, "substring")
        assert MatchResult.single(develop_match, "substring") != MatchResult.single(develop_match, "exact")
        assert MatchResult.no_match() == MatchResult.no_match()
