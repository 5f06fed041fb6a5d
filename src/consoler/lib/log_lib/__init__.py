"""
log_lib — verbosity-gated logging with named categories and tags.

A reusable facade providing:
- Built-in INFO/WARN/ERROR/SUCCESS categories plus caller-declared tags
- A persisted verbose set that survives restarts
- An operator flow (authorize, select, commit) behind one trigger
- Call-site trace markers on every emitted group

Public API:
    Consoler           — the facade
    install_trigger    — make a trigger the process-wide one
    get_trigger        — access the active trigger
    get_consoler       — access the Consoler that owns it
    verbose            — run the active trigger
    Tag                — custom category
    TagColorError      — raised for non-hex tag colors
    VerbosityStore     — persisted verbose set
    MemoryStore        — in-process substrate
    JsonFileStore      — JSON file substrate
    ConsoleSink        — terminal display sink
    TerminalPrompter   — terminal operator input
    FlowState          — configuration flow outcome
    is_development     — environment probe
"""

from .manager import (
    Consoler, install_trigger, get_trigger, get_consoler, verbose,
)
from .tags import Tag, TagColorError, is_hex, build_tag_functions
from .store import (
    VerbosityStore, MemoryStore, JsonFileStore, VERBOSE_KEY,
    get_default_state_path,
)
from .categories import (
    BUILTIN_CATEGORIES, extract_categories, format_prompt, format_category_list,
)
from .auth import AuthGate
from .flow import ConfigurationFlow, FlowState
from .sinks import ConsoleSink, TerminalPrompter
from .environment import is_development
from .trace import capture_trace

__all__ = [
    'Consoler', 'install_trigger', 'get_trigger', 'get_consoler', 'verbose',
    'Tag', 'TagColorError', 'is_hex', 'build_tag_functions',
    'VerbosityStore', 'MemoryStore', 'JsonFileStore', 'VERBOSE_KEY',
    'get_default_state_path',
    'BUILTIN_CATEGORIES', 'extract_categories', 'format_prompt',
    'format_category_list',
    'AuthGate', 'ConfigurationFlow', 'FlowState',
    'ConsoleSink', 'TerminalPrompter', 'is_development', 'capture_trace',
]
