# topmark:header:start
#
#   project      : TypeSchema
#   file         : __init__.py
#   file_relpath : src/typeschema/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core, UI-agnostic building blocks shared by both builders.

Included modules:

- ``primitives``: primitive descriptor name -> schema keyword lookup.
- ``shapes``: the type classifier.
- ``constraints``: validation annotations -> constraint sets.
- ``nodes``: in-memory schema nodes of the RAML registry.
- ``serializers``: payload normalization and JSON serialization.
- ``diagnostics``, ``errors``, ``formats``: shared support types.
"""

from __future__ import annotations
