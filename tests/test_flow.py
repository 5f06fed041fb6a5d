"""Tests for log_lib.auth and log_lib.flow — authorization and the
interactive configuration state machine."""

from unittest.mock import Mock

import pytest

from consoler.lib.log_lib import (
    AuthGate, ConfigurationFlow, FlowState, MemoryStore, VerbosityStore,
)
from consoler.lib.log_lib.auth import PASSWORD_PROMPT
from consoler.lib.log_lib.flow import WRONG_MODE_ALERT


# =============================================================================
# AuthGate
# =============================================================================

class TestAuthGate:

    def test_development_skips_prompt(self, scripted):
        prompter = scripted()
        notes = []
        gate = AuthGate("pw", True, prompt=prompter.prompt, note=notes.append)
        assert gate.authorize() is True
        assert prompter.prompts == []
        assert notes == []

    def test_correct_password(self, scripted):
        prompter = scripted("pw")
        gate = AuthGate("pw", False, prompt=prompter.prompt, note=lambda t: None)
        assert gate.authorize() is True
        assert prompter.prompts == [PASSWORD_PROMPT]

    def test_wrong_password(self, scripted):
        prompter = scripted("PW")
        gate = AuthGate("pw", False, prompt=prompter.prompt, note=lambda t: None)
        assert gate.authorize() is False

    def test_exact_comparison(self, scripted):
        """No trimming: surrounding whitespace makes it a different string."""
        prompter = scripted(" pw ")
        gate = AuthGate("pw", False, prompt=prompter.prompt, note=lambda t: None)
        assert gate.authorize() is False

    def test_dismissed_prompt_fails(self, scripted):
        prompter = scripted()  # answers None
        gate = AuthGate("pw", False, prompt=prompter.prompt, note=lambda t: None)
        assert gate.authorize() is False

    def test_entered_value_echoed_either_way(self, scripted):
        """The raw answer reaches the diagnostic sink, right or wrong."""
        notes = []
        prompter = scripted("guess", "pw")
        gate = AuthGate("pw", False, prompt=prompter.prompt, note=notes.append)
        gate.authorize()
        gate.authorize()
        assert notes == ["guess", "pw"]

    def test_single_attempt(self, scripted):
        prompter = scripted("nope", "pw")
        gate = AuthGate("pw", False, prompt=prompter.prompt, note=lambda t: None)
        assert gate.authorize() is False
        assert len(prompter.prompts) == 1


# =============================================================================
# ConfigurationFlow
# =============================================================================

@pytest.fixture
def backend():
    return MemoryStore()


@pytest.fixture
def make_flow(backend):
    """Build a flow: make_flow(prompter, development=False, tag_names=())."""
    def _make(prompter, development=False, tag_names=(), password="pw"):
        notes = []
        reload = Mock()
        gate = AuthGate(password, development, prompt=prompter.prompt, note=notes.append)
        flow = ConfigurationFlow(gate, VerbosityStore(backend), prompter,
                                 note=notes.append, reload=reload,
                                 tag_names=tag_names)
        return flow, notes, reload
    return _make


class TestConfigurationFlow:

    def test_starts_idle(self, make_flow, scripted):
        flow, _, _ = make_flow(scripted())
        assert flow.state is FlowState.IDLE

    def test_commit(self, make_flow, scripted, backend):
        """'warn, info' persists WARN and INFO and reloads."""
        flow, notes, reload = make_flow(scripted("pw", "warn, info"))
        assert flow.run() is FlowState.COMMITTED
        assert backend.get("verbose") == "WARN,INFO"
        assert flow.selected == ["WARN", "INFO"]
        reload.assert_called_once_with()
        assert "Authorized" in notes

    def test_invalid_input(self, make_flow, scripted, backend):
        """'banana' alerts, leaves state untouched, no reload."""
        prompter = scripted("pw", "banana")
        flow, _, reload = make_flow(prompter)
        assert flow.run() is FlowState.INVALID
        assert backend.get("verbose") is None
        assert prompter.alerts == [WRONG_MODE_ALERT]
        reload.assert_not_called()

    def test_invalid_keeps_previous_state(self, make_flow, scripted, backend):
        backend.set("verbose", "ERROR")
        flow, _, _ = make_flow(scripted("pw", "nothing useful"))
        assert flow.run() is FlowState.INVALID
        assert backend.get("verbose") == "ERROR"

    def test_dismissed_category_prompt_is_invalid(self, make_flow, scripted):
        prompter = scripted("pw")  # second prompt answers None
        flow, _, _ = make_flow(prompter)
        assert flow.run() is FlowState.INVALID
        assert prompter.alerts == [WRONG_MODE_ALERT]

    def test_unauthorized(self, make_flow, scripted, backend):
        prompter = scripted("wrong", "warn")
        flow, notes, reload = make_flow(prompter)
        assert flow.run() is FlowState.UNAUTHORIZED
        assert notes == ["wrong", "Not Authorized"]
        assert len(prompter.prompts) == 1
        assert prompter.alerts == []
        assert backend.get("verbose") is None
        reload.assert_not_called()

    def test_development_goes_straight_to_prompt(self, make_flow, scripted, backend):
        prompter = scripted("error")
        flow, _, _ = make_flow(prompter, development=True)
        assert flow.run() is FlowState.COMMITTED
        assert len(prompter.prompts) == 1
        assert backend.get("verbose") == "ERROR"

    def test_replaces_not_merges(self, make_flow, scripted, backend):
        backend.set("verbose", "INFO,WARN")
        flow, _, _ = make_flow(scripted("success"), development=True)
        flow.run()
        assert backend.get("verbose") == "SUCCESS"

    def test_tags_selectable(self, make_flow, scripted, backend):
        prompter = scripted("network")
        flow, _, _ = make_flow(prompter, development=True, tag_names=["Network"])
        assert flow.run() is FlowState.COMMITTED
        assert backend.get("verbose") == "NETWORK"
        assert "NETWORK" in prompter.prompts[0]

    def test_rerun_after_invalid(self, make_flow, scripted, backend):
        """Recovery is simply running the flow again."""
        flow, _, _ = make_flow(scripted("banana", "info"), development=True)
        assert flow.run() is FlowState.INVALID
        assert flow.run() is FlowState.COMMITTED
        assert backend.get("verbose") == "INFO"
