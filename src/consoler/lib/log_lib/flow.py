"""
Interactive verbosity configuration.

State machine::

    IDLE -> AUTHORIZING -> UNAUTHORIZED                       (no change)
                        -> PROMPTING -> INVALID               (alert, no change)
                                     -> COMMITTED             (persist + reload)

The flow is only ever started by the operator through the trigger handle;
it is never reached from the dispatch path. Prompt and alert calls block
until the operator answers.
"""

from enum import Enum
from typing import Callable, Iterable, List, Optional

from .auth import AuthGate
from .categories import extract_categories, format_prompt
from .store import VerbosityStore


WRONG_MODE_ALERT = "Wrong Verbose Mode!"


class FlowState(Enum):
    IDLE = 'idle'
    AUTHORIZING = 'authorizing'
    UNAUTHORIZED = 'unauthorized'
    PROMPTING = 'prompting'
    INVALID = 'invalid'
    COMMITTED = 'committed'


class ConfigurationFlow:
    """One run of the authorize / select / commit sequence.

    Args:
        gate: AuthGate consulted first
        store: VerbosityStore written on commit (full replace)
        prompter: Object with prompt(message) and alert(message)
        note: Callable(text) for diagnostics
        reload: Called after a commit; the new state takes effect through it
        tag_names: Registered tag names, offered alongside the built-ins
    """

    def __init__(self, gate: AuthGate, store: VerbosityStore, prompter,
                 note: Callable, reload: Callable,
                 tag_names: Iterable[str] = ()):
        self.gate = gate
        self.store = store
        self.prompter = prompter
        self.note = note
        self.reload = reload
        self.tag_names = list(tag_names)
        self.state = FlowState.IDLE
        self.selected: Optional[List[str]] = None

    def run(self) -> FlowState:
        """Drive the flow to a terminal state and return it."""
        self.state = FlowState.AUTHORIZING
        if not self.gate.authorize():
            self.note("Not Authorized")
            self.state = FlowState.UNAUTHORIZED
            return self.state
        self.note("Authorized")

        self.state = FlowState.PROMPTING
        answer = self.prompter.prompt(format_prompt(self.tag_names))
        selected = extract_categories(answer, self.tag_names)
        if not selected:
            self.prompter.alert(WRONG_MODE_ALERT)
            self.state = FlowState.INVALID
            return self.state

        self.selected = selected
        self.store.set(selected)
        self.state = FlowState.COMMITTED
        self.reload()
        return self.state
