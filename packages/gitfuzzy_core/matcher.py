"""Branch name matching for git-fuzzy.

Applies a two-tier policy to a candidate set: an exact pass, then a
substring pass. Ties are never ranked; candidate order decides.

Execution Context:
    Library module - imported by the resolver

Dependencies:
    - gitfuzzy_core.models: Data models

Metadata:
    Version: 0.1.0
    Author: git-fuzzy Team
"""
from __future__ import annotations

import logging

from gitfuzzy_core.models import BranchMatch
from gitfuzzy_core.models import CandidateSet
from gitfuzzy_core.models import MatchResult
from gitfuzzy_core.models import MatchSpan

logger = logging.getLogger(__name__)


# ---- Constants ----------------------------------------------------------------------------------------------


EXACT_TIER = "exact"
SUBSTRING_TIER = "substring"


# ---- Matching Functions -------------------------------------------------------------------------------------


def find_span(
        name: str,
        query: str,
) -> MatchSpan | None:
    """Locate the first occurrence of a query inside a branch name.

    Args:
        name: Branch name to search.
        query: Literal, case-sensitive text to find.

    Returns:
        Span of the first occurrence, or None if absent or query is empty.
    """
    if not query:
        return None
    start = name.find(query)
    if start < 0:
        return None
    return MatchSpan(start=start, length=len(query))


def _collect(
        matches: list[BranchMatch],
        tier: str,
) -> MatchResult:
    if not matches:
        return MatchResult.no_match()
    if len(matches) == 1:
        return MatchResult.single(matches[0], tier)
    return MatchResult.ambiguous(matches, tier)


def match_exact(
        candidates: CandidateSet,
        query: str,
) -> MatchResult:
    """Match candidates whose name equals the query."""
    if not query:
        return MatchResult.no_match()
    matches = [
        BranchMatch(branch=ref, span=MatchSpan(start=0, length=len(ref.name)))
        for ref in candidates
        if ref.name == query
    ]
    return _collect(matches, EXACT_TIER)


def match_substring(
        candidates: CandidateSet,
        query: str,
) -> MatchResult:
    """Match candidates whose name contains the query.

    Each match records the span of the first occurrence of the query.
    """
    matches = []
    for ref in candidates:
        span = find_span(ref.name, query)
        if span is not None:
            matches.append(BranchMatch(branch=ref, span=span))
    return _collect(matches, SUBSTRING_TIER)


def match(
        candidates: CandidateSet,
        query: str,
) -> MatchResult:
    """Resolve a query against a candidate set.

    The exact pass runs first and takes strict precedence; the substring
    pass only runs when no name equals the query. An empty query never
    matches anything.

    Args:
        candidates: Deduplicated candidates in discovery order.
        query: Raw user input, compared literally and case-sensitively.

    Returns:
        MatchResult with matches in candidate order.
    """
    if not query:
        return MatchResult.no_match()

    result = match_exact(candidates, query)
    if result.is_none:
        result = match_substring(candidates, query)

    logger.debug("Query %r matched %s via %s tier", query, result.names(), result.tier)
    return result
