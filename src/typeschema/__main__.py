# topmark:header:start
#
#   project      : TypeSchema
#   file         : __main__.py
#   file_relpath : src/typeschema/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running TypeSchema via ``python -m typeschema``.

Delegates to [`typeschema.cli.main.cli`][typeschema.cli.main.cli], the single
CLI entry point.

Examples:
    Generate the RAML types of a class::

        python -m typeschema raml myapp.models:Owner
"""

from __future__ import annotations

from typeschema.cli.main import cli

if __name__ == "__main__":
    cli()
