"""git-fuzzy CLI Application.

Command-line interface for checking out git branches by partial name.

Execution Context:
    CLI application - invoked from terminal

Dependencies:
    - click: CLI framework
    - rich: Terminal formatting
    - gitfuzzy_core: Core library

Metadata:
    Version: 0.1.0
    Author: git-fuzzy Team
"""
from __future__ import annotations

__version__ = "0.1.0"
