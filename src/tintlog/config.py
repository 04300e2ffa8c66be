"""Configuration files for tintlog.

Three-layer config resolution (highest priority wins):
  1. Explicit arguments: passed to init_logger()
  2. Project config: .tintlog.json in the working tree
  3. Global config: ~/.tintlog/config.json

Either file may carry a "level" and any LoggerOptions field:

    {"level": "debug", "show_level": true, "tag": "api"}
"""

import json
import os
from pathlib import Path

from .options import OPTION_TYPES


PROJECT_CONFIG_NAME = ".tintlog.json"


# ---------------------------------------------------------------------------
# Config file locations
# ---------------------------------------------------------------------------
def get_global_config_dir():
    """Return the global config directory (~/.tintlog/)."""
    return Path.home() / ".tintlog"


def get_global_config_path():
    """Return path to the global config file."""
    return get_global_config_dir() / "config.json"


def find_project_config(start_dir=None):
    """Walk up from start_dir looking for .tintlog.json.

    Returns the path if found, None otherwise.
    """
    current = Path(start_dir or os.getcwd()).resolve()
    for _ in range(20):  # safety limit
        candidate = current / PROJECT_CONFIG_NAME
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
    """Load a JSON object file, returning empty dict on error."""
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (FileNotFoundError, IsADirectoryError, json.JSONDecodeError):
        return {}
    return data if isinstance(data, dict) else {}


def load_global_config():
    """Load the global config file."""
    return load_json(get_global_config_path())


def load_project_config(start_dir=None):
    """Load the nearest .tintlog.json walking upward from start_dir."""
    path = find_project_config(start_dir)
    if path:
        return load_json(path), path
    return {}, None


# ---------------------------------------------------------------------------
# Config resolution
# ---------------------------------------------------------------------------
def resolve_logger_config(level=None, options=None, start_dir=None):
    """Resolve the threshold and options using three-layer precedence.

    Args:
        level: Explicit level name, or None
        options: Explicit options mapping, or None
        start_dir: Where to start looking for .tintlog.json

    Returns:
        (level, options): level may be None when nothing sets it;
        options holds only recognized, correctly typed fields.
    """
    project_cfg, _ = load_project_config(start_dir)
    global_cfg = load_global_config()

    resolved_options = {}
    for layer in (global_cfg, project_cfg, options or {}):
        for key, expected in OPTION_TYPES.items():
            if isinstance(layer.get(key), expected):
                resolved_options[key] = layer[key]

    resolved_level = level
    if resolved_level is None:
        resolved_level = project_cfg.get("level", global_cfg.get("level"))

    return resolved_level, resolved_options


# ---------------------------------------------------------------------------
# Config writing
# ---------------------------------------------------------------------------
def save_project_config(data, project_dir=None):
    """Write .tintlog.json to the project directory."""
    target = Path(project_dir or os.getcwd()) / PROJECT_CONFIG_NAME
    with open(target, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)
        f.write("\n")
    return target


def save_global_config(data):
    """Write the global config file."""
    config_dir = get_global_config_dir()
    config_dir.mkdir(parents=True, exist_ok=True)
    config_path = get_global_config_path()
    with open(config_path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)
        f.write("\n")
    return config_path
