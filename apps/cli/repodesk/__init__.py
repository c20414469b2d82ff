"""RepoDesk CLI Application.

Command-line interface for the interactive RepoDesk git workflow menu.

Execution Context:
    CLI application - invoked from terminal

Dependencies:
    - click: CLI framework
    - rich: Terminal formatting
    - repodesk_core: Core library

Metadata:
    Version: 0.1.0
    Author: RepoDesk Team
"""
from __future__ import annotations

__version__ = "0.1.0"
