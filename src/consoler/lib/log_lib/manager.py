"""
Consoler — the verbosity-gated logging facade.

Every call names a category. The message is shown only when that
category is part of the persisted verbose set:

    consoler.log("...")      INFO
    consoler.warn("...")     WARN
    consoler.error("...")    ERROR
    consoler.success("...")  SUCCESS
    consoler.tags['Net']()   caller-declared tag

A gated-off call has no side effects. An accepted call renders one group
on the display sink and, when configured, notifies the message callback
with (CATEGORY, message). Extra positional values go to the sink only.

The operator changes the verbose set through the trigger (see flow.py).
One trigger is active per process; constructing a Consoler installs its
own, replacing any previous one. There is no teardown.
"""

from typing import Any, Callable, Dict, Iterable, List, Optional

from .auth import AuthGate
from .categories import ERROR, INFO, LABEL_PREFIX, SUCCESS, WARN, normalize
from .environment import is_development
from .flow import ConfigurationFlow, FlowState
from .sinks import ConsoleSink, DisplaySink, Prompter, TerminalPrompter
from .store import JsonFileStore, KeyValueStore, VerbosityStore
from .tags import Tag, TagFunction, build_tag_functions
from .trace import capture_trace


MessageCallback = Callable[[str, Any], None]


class Consoler:
    """Gated dispatch for built-in categories and registered tags.

    Usage::

        consoler = Consoler(password="s3cret",
                            default_developer_mode=["INFO", "WARN"],
                            tags=[Tag("Network", "#8e44ad")])
        consoler.warn("cache miss", key)
        consoler.tags["Network"]("connected")
        consoler.trigger()        # operator: pick categories

    Args:
        password: Compared exactly when authorizing outside development
        default_developer_mode: Categories seeded on first run in development
        tags: Custom categories; an invalid color raises TagColorError and
            nothing is installed
        on_message_callback: Called as (CATEGORY, message) per accepted dispatch
        store: Key-value substrate (default: JsonFileStore at ~/.consoler/state.json)
        sink: Display sink (default: ConsoleSink on stderr)
        prompter: Operator input (default: TerminalPrompter)
        development: Environment flag; None reads is_development() once
        reload: Run after the flow commits; default re-reads persisted state
    """

    def __init__(
        self,
        password: str,
        default_developer_mode: Iterable[str],
        tags: Optional[Iterable[Tag]] = None,
        on_message_callback: Optional[MessageCallback] = None,
        store: KeyValueStore = None,
        sink: DisplaySink = None,
        prompter: Prompter = None,
        development: Optional[bool] = None,
        reload: Optional[Callable[[], None]] = None,
    ):
        self.password = password
        self.verbose_mode: List[str] = [normalize(c) for c in default_developer_mode]
        self.on_message_callback = on_message_callback
        self.development = is_development() if development is None else bool(development)
        self.sink = sink if sink is not None else ConsoleSink()
        self.prompter = prompter if prompter is not None else TerminalPrompter()
        self.store = VerbosityStore(store if store is not None else JsonFileStore())
        self._reload = reload if reload is not None else self.load_state

        # Fails before anything is installed
        self.tags: Dict[str, TagFunction] = build_tag_functions(tags or [], self._dispatch)

        self.trigger = install_trigger(self.verbose, self)
        self.sink.log("verbose now accessible!")
        if not self.store.debug_enabled and self.development:
            self.store.set(self.verbose_mode)
        self.load_state()

    @property
    def debug_enabled(self) -> bool:
        return self.store.debug_enabled

    def load_state(self) -> None:
        """Pick up the persisted verbose set, as a fresh start would."""
        if not self.store.debug_enabled:
            return
        self.verbose_mode = self.store.get() or []
        self.success("Now you can see : (", ','.join(self.verbose_mode), ") logs.")

    # -- dispatch -----------------------------------------------------------

    def _dispatch(self, category: str, color: str,
                  message: Any = None, *params: Any) -> None:
        if not self.store.contains(category):
            return
        self.sink.group(LABEL_PREFIX + category, color,
                        (message,) + params, capture_trace())
        if self.on_message_callback is not None:
            self.on_message_callback(normalize(category), message)

    def log(self, message: Any = None, *params: Any) -> None:
        """Dispatch under INFO."""
        self._dispatch(INFO.name, INFO.color, message, *params)

    def warn(self, message: Any = None, *params: Any) -> None:
        """Dispatch under WARN."""
        self._dispatch(WARN.name, WARN.color, message, *params)

    def error(self, message: Any = None, *params: Any) -> None:
        """Dispatch under ERROR."""
        self._dispatch(ERROR.name, ERROR.color, message, *params)

    def success(self, message: Any = None, *params: Any) -> None:
        """Dispatch under SUCCESS."""
        self._dispatch(SUCCESS.name, SUCCESS.color, message, *params)

    # -- configuration ------------------------------------------------------

    def verbose(self) -> FlowState:
        """Run the interactive configuration flow once.

        Returns:
            The terminal FlowState (UNAUTHORIZED, INVALID or COMMITTED)
        """
        gate = AuthGate(self.password, self.development,
                        prompt=self.prompter.prompt, note=self.sink.log)
        flow = ConfigurationFlow(gate, self.store, self.prompter,
                                 note=self.sink.log, reload=self._reload,
                                 tag_names=self.tags.keys())
        return flow.run()


# =============================================================================
# Process-wide trigger
# =============================================================================

_trigger: Optional[Callable[[], FlowState]] = None
_consoler: Optional[Consoler] = None


def install_trigger(trigger: Callable[[], FlowState],
                    owner: Optional[Consoler] = None) -> Callable[[], FlowState]:
    """Make trigger the active one for this process and return it.

    Re-installing replaces the previous trigger.
    """
    global _trigger, _consoler
    _trigger = trigger
    _consoler = owner
    return trigger


def get_trigger() -> Optional[Callable[[], FlowState]]:
    """The active trigger, or None before any Consoler was constructed."""
    return _trigger


def get_consoler() -> Optional[Consoler]:
    """The Consoler that installed the active trigger, if any."""
    return _consoler


def verbose() -> FlowState:
    """Run the active trigger.

    Raises:
        RuntimeError: If no Consoler has been constructed yet
    """
    if _trigger is None:
        raise RuntimeError("No consoler has been constructed in this process")
    return _trigger()
