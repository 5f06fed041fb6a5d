"""
Collaborators at the edge of the facade: where output goes and where
operator input comes from.

DisplaySink and Prompter are the interfaces the core consumes.
ConsoleSink and TerminalPrompter are the terminal implementations used
by default; hosts with their own console or dialog primitives pass their
own objects instead.
"""

import os
import sys
from typing import Any, Optional, Protocol, Sequence, TextIO


class DisplaySink(Protocol):
    """Renders accepted messages and diagnostic notes."""

    def group(self, label: str, color: str, values: Sequence[Any], trace: str) -> None:
        """Render one collapsed group: colored label, values, trace marker."""

    def log(self, text: str) -> None:
        """Render a plain diagnostic line."""


class Prompter(Protocol):
    """Blocking operator input."""

    def prompt(self, message: str) -> Optional[str]: ...

    def alert(self, message: str) -> None: ...


# ---------------------------------------------------------------------------
# Terminal implementations
# ---------------------------------------------------------------------------
RESET = '\033[0m'


def hex_to_rgb(color: str):
    """'#0af' / '00aaff' -> (0, 170, 255)."""
    digits = color.lstrip('#')
    if len(digits) == 3:
        digits = ''.join(d * 2 for d in digits)
    return tuple(int(digits[i:i + 2], 16) for i in (0, 2, 4))


def ansi_label(label: str, color: str) -> str:
    """White text on the given background, the terminal twin of a CSS badge."""
    r, g, b = hex_to_rgb(color)
    return f"\033[97;48;2;{r};{g};{b}m {label} {RESET}"


def _render(value: Any) -> str:
    return value if isinstance(value, str) else repr(value)


class ConsoleSink:
    """Writes groups and notes to a text stream (default: stderr).

    Output for an accepted message::

        ▸ [consoler:WARN] disk almost full 93
            Trace
                at main (app.py:12)

    Args:
        file: Destination stream
        color: True/False to force ANSI colors; None decides from the
            NO_COLOR environment variable and whether file is a TTY
        show_trace: False drops the trace marker lines
    """

    def __init__(self, file: TextIO = None, color: Optional[bool] = None,
                 show_trace: bool = True):
        self.file = file if file is not None else sys.stderr
        if color is None:
            isatty = getattr(self.file, 'isatty', None)
            color = 'NO_COLOR' not in os.environ and bool(isatty and isatty())
        self.color = color
        self.show_trace = show_trace

    def group(self, label: str, color: str, values: Sequence[Any], trace: str) -> None:
        head = ansi_label(f"[{label}]", color) if self.color else f"[{label}]"
        body = ' '.join(_render(v) for v in values)
        print(f"▸ {head} {body}".rstrip(), file=self.file)
        if self.show_trace and trace:
            for line in trace.splitlines():
                print(f"    {line}", file=self.file)

    def log(self, text: str) -> None:
        print(text, file=self.file)


class TerminalPrompter:
    """Reads operator input with input(); alerts go to the given stream.

    End of input (Ctrl-D, closed stdin) is answered as None, the same as a
    dismissed prompt.
    """

    def __init__(self, file: TextIO = None):
        self.file = file if file is not None else sys.stderr

    def prompt(self, message: str) -> Optional[str]:
        try:
            return input(message)
        except EOFError:
            return None

    def alert(self, message: str) -> None:
        print(f"  [!] {message}", file=self.file)
