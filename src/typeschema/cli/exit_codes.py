# topmark:header:start
#
#   project      : TypeSchema
#   file         : exit_codes.py
#   file_relpath : src/typeschema/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the TypeSchema CLI.

Values follow the BSD `sysexits` convention so other tooling can interpret
failures consistently.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the TypeSchema CLI.

    Attributes:
        SUCCESS: The document was generated.
        FAILURE: Generic failure.
        USAGE_ERROR: Invalid flags or arguments. Mirrors ``EX_USAGE (64)``.
        TARGET_NOT_FOUND: The target module or class cannot be imported.
            Mirrors ``EX_NOINPUT (66)``.
        UNSUPPORTED_TYPE: The target has no representable shape, so no
            output can be produced. Mirrors ``EX_UNAVAILABLE (69)``.
        NAME_EXHAUSTED: No unique registry name could be found for a type.
            Mirrors ``EX_SOFTWARE (70)``.
        CONFIG_ERROR: Missing, invalid or malformed configuration. Mirrors
            ``EX_CONFIG (78)``.
        UNEXPECTED_ERROR: Unhandled error (last resort).
    """

    SUCCESS = 0
    FAILURE = 1

    USAGE_ERROR = 64  # EX_USAGE
    TARGET_NOT_FOUND = 66  # EX_NOINPUT
    UNSUPPORTED_TYPE = 69  # EX_UNAVAILABLE
    NAME_EXHAUSTED = 70  # EX_SOFTWARE
    CONFIG_ERROR = 78  # EX_CONFIG

    UNEXPECTED_ERROR = 255
