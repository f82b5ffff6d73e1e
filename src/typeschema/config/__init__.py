# topmark:header:start
#
#   project      : TypeSchema
#   file         : __init__.py
#   file_relpath : src/typeschema/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration and logging.

Modules:

- ``logging``: the TRACE level, `TypeschemaLogger` and `setup_logging`.
- ``keys``: canonical TOML section and key names.
- ``io``: tomlkit loaders, renderers and checked getters.
- ``model``: `Config` (immutable) and `MutableConfig` (discovery and merging).

Nothing is imported here: every module of the package imports
``typeschema.config.logging``, so this package must stay import-light.
"""

from __future__ import annotations
