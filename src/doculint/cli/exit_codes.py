# topmark:header:start
#
#   project      : Doculint
#   file         : exit_codes.py
#   file_relpath : src/doculint/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for Doculint CLI.

Doculint aligns with the BSD `sysexits` convention where practical, so that
other tooling can interpret failures consistently. A run that completes but
reports lint diagnostics exits with ``FINDINGS = 3``, the value Go analysis
checkers use for the same outcome.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for Doculint CLI.

    Attributes:
        SUCCESS: Lint completed and no rule reported a violation.
        FAILURE: Generic failure (non-specific error).
        FINDINGS: Lint completed and at least one violation was reported.
        USAGE_ERROR: Command-line invocation error. Mirrors BSD ``EX_USAGE (64)``.
        PARSE_ERROR: A Go source file does not parse. Mirrors BSD ``EX_DATAERR (65)``.
        FILE_NOT_FOUND: Input path does not exist. Mirrors BSD ``EX_NOINPUT (66)``.
        INTERNAL_ERROR: Rule engine contract violation. Mirrors BSD ``EX_SOFTWARE (70)``.
        IO_ERROR: I/O error reading a file. Mirrors BSD ``EX_IOERR (74)``.
        CONFIG_ERROR: Missing/invalid/malformed config. Mirrors BSD ``EX_CONFIG (78)``.
        UNEXPECTED_ERROR: Unhandled/unknown error (last-resort).
    """

    SUCCESS = 0
    FAILURE = 1
    FINDINGS = 3

    # sysexits-aligned values for better interoperability
    USAGE_ERROR = 64  # EX_USAGE
    PARSE_ERROR = 65  # EX_DATAERR
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    INTERNAL_ERROR = 70  # EX_SOFTWARE
    IO_ERROR = 74  # EX_IOERR
    CONFIG_ERROR = 78  # EX_CONFIG

    UNEXPECTED_ERROR = 255
