"""Path helpers for nodetext.

Graph nodes carry forward-slash separated paths regardless of the host
platform, so these helpers work on plain strings rather than ``pathlib``
objects.

The configuration file (.nodetextrc.toml) lives at the project root
or in the user's home directory.
"""

from __future__ import annotations

from pathlib import Path

# Config file name (user-editable)
CONFIG_FILE = ".nodetextrc.toml"

PATH_SEPARATOR = "/"


def extract_filename(path: str) -> str:
    """Get the last segment of a forward-slash path.

    Args:
        path: Full path as stored on the node

    Returns:
        Text after the last ``/``, or the whole input if there is none
    """
    idx = path.rfind(PATH_SEPARATOR)
    return path[idx + 1 :] if idx >= 0 else path


def extract_parent_dir(path: str) -> str:
    """Get everything before the last ``/`` of a path.

    Args:
        path: Full path as stored on the node

    Returns:
        Parent directory, or an empty string for a bare file name
    """
    idx = path.rfind(PATH_SEPARATOR)
    return path[:idx] if idx >= 0 else ""


def get_config_locations(root: Path | str = ".") -> list[Path]:
    """Get the config files to try, in priority order.

    Args:
        root: Project root directory (default: current directory)

    Returns:
        Project config path followed by the home directory config path
    """
    return [Path(root).resolve() / CONFIG_FILE, Path.home() / CONFIG_FILE]


__all__ = [
    "CONFIG_FILE",
    "PATH_SEPARATOR",
    "extract_filename",
    "extract_parent_dir",
    "get_config_locations",
]
