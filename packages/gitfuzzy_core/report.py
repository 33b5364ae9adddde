"""Ambiguity reports for git-fuzzy.

Turns an ambiguous match result into a structured report: a summary line
naming the query, then one line per candidate with the matched span
marked. Color is left to the caller.

Execution Context:
    Library module - imported by the resolver and the CLI

Dependencies:
    - gitfuzzy_core.models: Data models

Metadata:
    Version: 0.1.0
    Author: git-fuzzy Team
"""
from __future__ import annotations

from dataclasses import dataclass

from gitfuzzy_core.models import BranchOrigin
from gitfuzzy_core.models import MatchResult
from gitfuzzy_core.models import MatchSpan


# ---- Constants ----------------------------------------------------------------------------------------------


LINE_INDENT = "  "


# ---- Report Classes -----------------------------------------------------------------------------------------


@dataclass(frozen=True)
class ReportLine:
    """One candidate in an ambiguity report.

    Attributes:
        name: Candidate branch name.
        span: Region of the name that matched the query.
        origin: Whether the branch exists locally.
        remote: Remote the name was found under, for remote-only branches.
    """

    name: str
    span: MatchSpan
    origin: BranchOrigin = BranchOrigin.LOCAL
    remote: str | None = None

    @property
    def before(self) -> str:
        return self.span.slice(self.name)[0]

    @property
    def matched(self) -> str:
        return self.span.slice(self.name)[1]

    @property
    def after(self) -> str:
        return self.span.slice(self.name)[2]


@dataclass(frozen=True)
class AmbiguityReport:
    """Report listing every branch an ambiguous query matched.

    Attributes:
        query: The literal query the user typed.
        lines: Candidate lines in resolution order.
    """

    query: str
    lines: tuple[ReportLine, ...]

    @property
    def summary(
            self,
    ) -> str:
        """Summary line including the literal query."""
        return f"Ambiguous branch name '{self.query}'. Multiple matches:"

    def to_plain(
            self,
            marker: tuple[str, str] = ("[", "]"),
    ) -> str:
        """Render the report as plain text.

        Args:
            marker: Opening and closing text placed around each span.

        Returns:
            Multi-line string: summary, then one indented line per branch.
        """
        opening, closing = marker
        rendered = [self.summary]
        for line in self.lines:
            rendered.append(f"{LINE_INDENT}{line.before}{opening}{line.matched}{closing}{line.after}")
        return "\n".join(rendered)


# ---- Rendering ----------------------------------------------------------------------------------------------


def render(
        query: str,
        result: MatchResult,
) -> AmbiguityReport:
    """Build an ambiguity report from an ambiguous match result.

    Args:
        query: The query that produced the result.
        result: An AMBIGUOUS match result.

    Returns:
        AmbiguityReport with one line per match, in result order.

    Raises:
        ValueError: If the result is not ambiguous.
    """
    if not result.is_ambiguous:
        msg = f"Cannot report on a {result.kind.name} result"
        raise ValueError(msg)

    lines = tuple(
        ReportLine(
            name=match.name,
            span=match.span,
            origin=match.branch.origin,
            remote=match.branch.remote,
        )
        for match in result.matches
    )
    return AmbiguityReport(query=query, lines=lines)
