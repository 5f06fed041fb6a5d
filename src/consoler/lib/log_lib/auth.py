"""
Authorization gate for changing verbosity.

A convenience gate, not a trust boundary: one prompt, one exact string
comparison, no retries. In a development environment it always passes.
"""

from typing import Callable


PASSWORD_PROMPT = "Enter Your Development Password? "


class AuthGate:
    """Decides whether the operator may reconfigure verbosity.

    Args:
        password: Expected password (compared exactly)
        development: True skips the prompt entirely
        prompt: Callable(message) -> str | None asking the operator
        note: Callable(text) for diagnostics; receives the raw entered value
    """

    def __init__(self, password: str, development: bool,
                 prompt: Callable, note: Callable):
        self.password = password
        self.development = development
        self._prompt = prompt
        self._note = note

    def authorize(self) -> bool:
        if self.development:
            return True
        entered = self._prompt(PASSWORD_PROMPT)
        self._note(str(entered))
        return entered == self.password
