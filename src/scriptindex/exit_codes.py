"""Exit codes for the scriptindex CLI.

Per-file extraction failures never change the exit code; only fatal
errors that abort the run do.
"""

# Success
SUCCESS = 0

# Errors
GENERAL_ERROR = 1
INVALID_ARGS = 2
DIRECTORY_ERROR = 3
CONFIG_INVALID = 4
WALK_ERROR = 5
OUTPUT_ERROR = 6
