"""Output formatting utilities for the consoler CLI.

Consistent status lines across all commands. These are the CLI's own
messages; gated application messages go through Consoler instead.

Also re-exports the log_lib public API for convenience imports.
"""

import sys

# Re-export log_lib public API — one-stop import for commands
from consoler.lib.log_lib import (                   # noqa: F401
    Consoler, Tag, TagColorError, FlowState,
    ConsoleSink, TerminalPrompter, JsonFileStore, VerbosityStore,
    get_trigger, verbose,
)


def print_ok(msg):
    """Print a success message."""
    print(f"  [OK] {msg}")


def print_warn(msg):
    """Print a warning message."""
    print(f"  [WARN] {msg}")


def print_skip(msg):
    """Print a skip message."""
    print(f"  [SKIP] {msg}")


def print_error(msg):
    """Print an error message to stderr."""
    print(f"  ERROR: {msg}", file=sys.stderr)
