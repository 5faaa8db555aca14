"""Config file discovery.

Walk-up finder locates graphreach.toml, similar to how git finds .git/.
The GRAPHREACH_CONFIG env var and the --config flag override discovery.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "graphreach.toml"
CONFIG_ENV_VAR = "GRAPHREACH_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Walk up from *start* (default: cwd) looking for graphreach.toml.

    Returns the path to the config file, or None if not found.
    Checks GRAPHREACH_CONFIG env var first.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        return p if p.is_file() else None

    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None