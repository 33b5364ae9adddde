"""git-fuzzy checkout command.

Checks out the branch a partial name resolves to, reports ambiguous
names, and falls back to a commit checkout when no branch matches.

Execution Context:
    CLI command - invoked via `git-fuzzy <pattern>` or `git fuzzy <pattern>`

Dependencies:
    - click: CLI framework
    - rich: Terminal output
    - gitfuzzy_core: Branch resolution and git access

Metadata:
    Version: 0.1.0
    Author: git-fuzzy Team
"""
from __future__ import annotations

import click
from rich.console import Console
from rich.markup import escape

from gitfuzzy_cli.commands.utils import configure_logging
from gitfuzzy_cli.commands.utils import render_candidates
from gitfuzzy_cli.commands.utils import render_report
from gitfuzzy_core.errors import EmptyQueryError
from gitfuzzy_core.errors import GitError
from gitfuzzy_core.git import Git
from gitfuzzy_core.git import find_git_directory
from gitfuzzy_core.resolver import Resolver

console = Console()
err_console = Console(stderr=True)


# ---- Checkout Command ---------------------------------------------------------------------------------------


@click.command()
@click.argument(
    "pattern",
    required=False,
)
@click.option(
    "--dry-run",
    "-n",
    is_flag=True,
    help="Print what would be checked out without checking it out.",
)
@click.option(
    "--list",
    "-l",
    "list_candidates",
    is_flag=True,
    help="List candidate branches (local first, then remote-only).",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Log each resolution step to stderr.",
)
def checkout(
        pattern: str | None,
        dry_run: bool,
        list_candidates: bool,
        verbose: bool,
) -> None:
    """Check out a branch by partial name.

    PATTERN is matched against local branches and remote branches that
    have no local counterpart. An exact name wins; otherwise any branch
    containing PATTERN matches. One match is checked out. Several matches
    are listed and nothing is checked out. No match checks PATTERN out as
    a commit.

    Examples:
        git fuzzy dev              # checks out 'develop'
        git fuzzy real             # checks out 'feature/really-long-branch-name'
        git fuzzy 620a729          # no branch matches, checks out the commit
        git fuzzy --list           # show candidate branches
    """
    configure_logging(verbose)

    if list_candidates:
        if pattern is not None:
            raise click.UsageError("--list does not take a PATTERN.")
    else:
        if pattern is None:
            raise click.UsageError("Missing argument 'PATTERN'.")
        if not pattern.strip():
            raise click.BadParameter(str(EmptyQueryError(pattern)), param_hint="'PATTERN'")

    root = find_git_directory()
    if root is None:
        raise click.ClickException("Not in a git repository")

    resolver = Resolver(Git(root))

    try:
        if list_candidates:
            console.print(render_candidates(resolver.candidates()), soft_wrap=True)
            return

        resolution = resolver.resolve(pattern)

        if resolution.is_ambiguous:
            err_console.print(render_report(resolution.report), soft_wrap=True)
            raise click.exceptions.Exit(1)

        if resolution.is_fallback:
            console.print(
                f"No branches match '{escape(pattern)}', trying as commit...",
                soft_wrap=True,
                highlight=False,
            )

        if dry_run:
            kind = "commit" if resolution.is_fallback else "branch"
            console.print(f"Would check out {kind} '{escape(resolution.target)}'", soft_wrap=True, highlight=False)
            return

        resolver.checkout(resolution)

    except GitError as git_error:
        raise click.ClickException(str(git_error)) from git_error
