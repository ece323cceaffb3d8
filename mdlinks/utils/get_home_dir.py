"""Utility to discover the mdlinks home directory."""

import os
from pathlib import Path


def get_home_dir() -> Path:
    """Get mdlinks home directory based on MDLINKS_HOME or default to ~/.mdlinks."""
    home_env = os.environ.get("MDLINKS_HOME")
    if home_env:
        return Path(home_env).expanduser().resolve()
    return Path.home() / ".mdlinks"
