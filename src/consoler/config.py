"""Configuration management for the consoler CLI.

Three-layer config resolution (highest priority wins):
  1. CLI flags — explicit on the command line
  2. Project config — .consoler.json in the working directory or a parent
  3. Global config — ~/.consoler/config.json

Example .consoler.json::

    {
      "password": "s3cret",
      "default_developer_mode": ["INFO", "WARN", "ERROR"],
      "tags": [{"display_name": "Network", "color": "#8e44ad"}],
      "state_path": ".consoler-state.json"
    }

A relative state_path is resolved against the directory of the config
file that declared it.
"""

import json
import os
from pathlib import Path

from consoler.lib.log_lib import Consoler, JsonFileStore, Tag, VerbosityStore


CONFIG_KEYS = ["password", "default_developer_mode", "tags", "state_path"]

DEFAULTS = {
    "password": "",
    "default_developer_mode": ["INFO", "WARN", "ERROR", "SUCCESS"],
    "tags": [],
    "state_path": None,
}


# ---------------------------------------------------------------------------
# Config file locations
# ---------------------------------------------------------------------------
def get_global_config_dir():
    """Return the global config directory (~/.consoler/)."""
    return Path.home() / ".consoler"


def get_global_config_path():
    """Return path to the global config file."""
    return get_global_config_dir() / "config.json"


def find_project_config(start_dir=None):
    """Walk up from start_dir looking for .consoler.json.

    Returns the path if found, None otherwise.
    """
    current = Path(start_dir or os.getcwd()).resolve()
    for _ in range(20):  # safety limit
        candidate = current / ".consoler.json"
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break
        current = parent
    return None


# ---------------------------------------------------------------------------
# Config loading
# ---------------------------------------------------------------------------
def load_json(path):
    """Load a JSON file, returning empty dict on error."""
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (FileNotFoundError, json.JSONDecodeError):
        return {}
    return data if isinstance(data, dict) else {}


def load_global_config(path=None):
    """Load the global config file (or an explicit --config path)."""
    path = Path(path) if path else get_global_config_path()
    return load_json(path), path


def load_project_config(start_dir=None):
    """Load the nearest .consoler.json walking upward from start_dir."""
    path = find_project_config(start_dir)
    if path:
        return load_json(path), path
    return {}, None


# ---------------------------------------------------------------------------
# Config resolution
# ---------------------------------------------------------------------------
def _relative_to(value, config_path):
    if value is None or config_path is None:
        return value
    path = Path(value).expanduser()
    if not path.is_absolute():
        path = config_path.parent / path
    return str(path)


def resolve_config(args, keys=None):
    """Resolve config values using three-layer precedence.

    For each key in `keys`, checks (in order):
      1. CLI args (from argparse namespace)
      2. Project .consoler.json
      3. Global ~/.consoler/config.json (or --config PATH)

    Keys found nowhere fall back to DEFAULTS.

    Returns a dict with resolved values.
    """
    if keys is None:
        keys = CONFIG_KEYS

    project_cfg, project_path = load_project_config()
    global_cfg, global_path = load_global_config(getattr(args, "config", None))

    resolved = {}
    for key in keys:
        cli_val = getattr(args, key, None)
        if cli_val is not None:
            resolved[key] = cli_val
            continue

        if project_cfg.get(key) is not None:
            val = project_cfg[key]
            if key == "state_path":
                val = _relative_to(val, project_path)
            resolved[key] = val
            continue

        if global_cfg.get(key) is not None:
            val = global_cfg[key]
            if key == "state_path":
                val = _relative_to(val, global_path)
            resolved[key] = val
            continue

        resolved[key] = DEFAULTS.get(key)

    return resolved


def parse_tags(entries):
    """Turn config tag entries into Tag objects.

    Raises:
        ValueError: If an entry lacks display_name or color
    """
    tags = []
    for entry in entries or []:
        try:
            tags.append(Tag.from_dict(entry))
        except (KeyError, TypeError) as e:
            raise ValueError(f"Invalid tag entry {entry!r}: expected "
                             f"{{\"display_name\": ..., \"color\": ...}}") from e
    return tags


# ---------------------------------------------------------------------------
# Facade construction
# ---------------------------------------------------------------------------
def build_consoler(args, **collaborators):
    """Construct a Consoler from resolved CLI/project/global settings.

    Args:
        args: argparse namespace (global flags merged in)
        **collaborators: sink, prompter, reload overrides passed through

    Raises:
        TagColorError: If a configured tag has a non-hex color
        ValueError: If a configured tag entry is malformed
    """
    settings = resolve_config(args)
    return Consoler(
        password=settings["password"],
        default_developer_mode=settings["default_developer_mode"],
        tags=parse_tags(settings["tags"]),
        store=JsonFileStore(settings["state_path"]),
        development=True if getattr(args, "dev", False) else None,
        **collaborators,
    )


def open_state(args):
    """Open the persisted verbose set without constructing a Consoler."""
    settings = resolve_config(args, ["state_path"])
    return VerbosityStore(JsonFileStore(settings["state_path"]))
