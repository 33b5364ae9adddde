"""git-fuzzy Core Library.

Resolves a partial branch name into a single git branch, or a commit when
no branch matches, and reports ambiguous matches.

Execution Context:
    Library package - imported by the CLI

Dependencies:
    - git: Executable used to list refs and check out

Metadata:
    Version: 0.1.0
    Author: git-fuzzy Team
"""
from __future__ import annotations

from gitfuzzy_core.branches import deduplicate
from gitfuzzy_core.matcher import match
from gitfuzzy_core.models import BranchMatch
from gitfuzzy_core.models import BranchOrigin
from gitfuzzy_core.models import BranchRef
from gitfuzzy_core.models import CandidateSet
from gitfuzzy_core.models import MatchKind
from gitfuzzy_core.models import MatchResult
from gitfuzzy_core.models import MatchSpan
from gitfuzzy_core.report import AmbiguityReport
from gitfuzzy_core.report import render
from gitfuzzy_core.resolver import Resolution
from gitfuzzy_core.resolver import ResolutionState
from gitfuzzy_core.resolver import Resolver

__version__ = "0.1.0"

__all__ = [
    "AmbiguityReport",
    "BranchMatch",
    "BranchOrigin",
    "BranchRef",
    "CandidateSet",
    "MatchKind",
    "MatchResult",
    "MatchSpan",
    "Resolution",
    "ResolutionState",
    "Resolver",
    "__version__",
    "deduplicate",
    "match",
    "render",
]
