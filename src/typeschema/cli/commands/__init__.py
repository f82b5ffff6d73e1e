# topmark:header:start
#
#   project      : TypeSchema
#   file         : __init__.py
#   file_relpath : src/typeschema/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TypeSchema CLI subcommands."""
