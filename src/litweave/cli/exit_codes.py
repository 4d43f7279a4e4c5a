# topmark:header:start
#
#   project      : LitWeave
#   file         : exit_codes.py
#   file_relpath : src/litweave/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the LitWeave CLI.

LitWeave aligns with the BSD `sysexits` convention so that other tooling can
interpret failures consistently.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the LitWeave CLI.

    Attributes:
        SUCCESS: Every file was woven.
        FAILURE: Generic failure (non-specific error). Prefer a more specific
            code if available.
        USAGE_ERROR: Command-line invocation error (invalid flags/args). Mirrors
            BSD ``EX_USAGE (64)``.
        ENCODING_ERROR: A source file is not valid UTF-8. Mirrors BSD
            ``EX_DATAERR (65)``.
        FILE_NOT_FOUND: A source file cannot be read. Mirrors BSD ``EX_NOINPUT (66)``.
        PIPELINE_ERROR: Markdown rendering, highlighting or the page template
            failed. Mirrors BSD ``EX_SOFTWARE (70)``.
        IO_ERROR: A document or the stylesheet cannot be written. Mirrors BSD
            ``EX_IOERR (74)``.
        CONFIG_ERROR: Configuration or resource error (missing/invalid config,
            template or stylesheet). Mirrors BSD ``EX_CONFIG (78)``.
        UNEXPECTED_ERROR: Unhandled/unknown error (last-resort).
    """

    SUCCESS = 0
    FAILURE = 1

    # sysexits-aligned values
    USAGE_ERROR = 64  # EX_USAGE
    ENCODING_ERROR = 65  # EX_DATAERR
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    PIPELINE_ERROR = 70  # EX_SOFTWARE
    IO_ERROR = 74  # EX_IOERR
    CONFIG_ERROR = 78  # EX_CONFIG

    UNEXPECTED_ERROR = 255
