"""Utility functions for git-fuzzy CLI commands.

Execution Context:
    CLI command utilities - imported by command modules

Dependencies:
    - os: Environment variable access
    - rich: Terminal rendering and log handler
    - gitfuzzy_core: Report and candidate models

Metadata:
    Version: 0.1.0
    Author: git-fuzzy Team
"""
from __future__ import annotations

import logging
import os

from rich.console import Console
from rich.console import Group
from rich.logging import RichHandler
from rich.text import Text

from gitfuzzy_core.models import BranchOrigin
from gitfuzzy_core.models import BranchRef
from gitfuzzy_core.models import CandidateSet
from gitfuzzy_core.report import LINE_INDENT
from gitfuzzy_core.report import AmbiguityReport
from gitfuzzy_core.report import ReportLine


# ---- Constants ----------------------------------------------------------------------------------------------


LOG_LEVEL_ENV_VAR = "GITFUZZY_LOG_LEVEL"
MATCH_STYLE = "bold green"
REMOTE_STYLE = "dim"


# ---- Logging ------------------------------------------------------------------------------------------------


def get_log_level(
        verbose: bool = False,
) -> int:
    """Get the logging level from the --verbose flag or environment.

    --verbose always means DEBUG. Otherwise GITFUZZY_LOG_LEVEL is used when
    it names a known level, and WARNING when it is unset or unknown.

    Args:
        verbose: Whether --verbose was given.

    Returns:
        Logging level number.
    """
    if verbose:
        return logging.DEBUG

    level_name = os.getenv(LOG_LEVEL_ENV_VAR, "").strip().upper()
    level = logging.getLevelName(level_name) if level_name else None
    if isinstance(level, int):
        return level
    return logging.WARNING


def configure_logging(
        verbose: bool = False,
) -> None:
    """Send log records to stderr through rich."""
    logging.basicConfig(
        level=get_log_level(verbose),
        format="%(name)s: %(message)s",
        handlers=[
            RichHandler(
                console=Console(stderr=True),
                show_time=False,
                show_path=False,
            ),
        ],
        force=True,
    )


# ---- Rendering ----------------------------------------------------------------------------------------------


def _remote_note(
        remote: str | None,
) -> Text:
    return Text(f" (remote: {remote})", style=REMOTE_STYLE) if remote else Text()


def render_report_line(
        line: ReportLine,
) -> Text:
    """Render one candidate with its matched span highlighted."""
    text = Text(f"{LINE_INDENT}{line.name}")
    offset = len(LINE_INDENT)
    text.stylize(MATCH_STYLE, offset + line.span.start, offset + line.span.end)
    if line.origin is BranchOrigin.REMOTE_ONLY:
        text.append_text(_remote_note(line.remote))
    return text


def render_report(
        report: AmbiguityReport,
) -> Group:
    """Render an ambiguity report for a rich console.

    Returns:
        Renderable group: the summary, then one line per candidate.
    """
    return Group(
        Text(report.summary),
        *(render_report_line(line) for line in report.lines),
    )


def render_candidate(
        ref: BranchRef,
) -> Text:
    """Render a candidate branch for --list output."""
    text = Text(f"{LINE_INDENT}{ref.name}")
    if not ref.is_local:
        text.append_text(_remote_note(ref.remote))
    return text


def render_candidates(
        candidates: CandidateSet,
) -> Group:
    """Render every candidate in discovery order."""
    return Group(*(render_candidate(ref) for ref in candidates))
