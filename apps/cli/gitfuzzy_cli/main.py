"""git-fuzzy CLI entry point.

Wraps the checkout command with version information and provides the
console-script entry point.

Execution Context:
    CLI application - run via `git-fuzzy`, `git fuzzy` or `python -m gitfuzzy_cli.main`

Dependencies:
    - click: CLI framework
    - gitfuzzy_core: Core library

Metadata:
    Version: 0.1.0
    Author: git-fuzzy Team
"""
from __future__ import annotations

import sys

import click

from gitfuzzy_cli import __version__
from gitfuzzy_cli.commands.checkout import checkout


# ---- CLI Command --------------------------------------------------------------------------------------------


cli = click.version_option(version=__version__, prog_name="git-fuzzy")(checkout)


# ---- Main Function ------------------------------------------------------------------------------------------


def main() -> int:
    """Main entry point for git-fuzzy.

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    try:
        cli(prog_name="git-fuzzy")
        return 0
    except Exception as cli_error:
        click.echo(f"Error: {cli_error}", err=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
