# topmark:header:start
#
#   project      : TypeSchema
#   file         : __init__.py
#   file_relpath : src/typeschema/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TypeSchema CLI package.

The console script entry point is defined in ``pyproject.toml``::

    [project.scripts]
    typeschema = "typeschema.cli.main:cli"

All subcommands live in [`typeschema.cli.commands`][typeschema.cli.commands].
"""

from __future__ import annotations

__all__: list[str] = []
# Do NOT import .main or commands at module import time
