from __future__ import annotations

import os
import sys
from pathlib import Path


def is_frozen() -> bool:
    return bool(getattr(sys, "frozen", False))


def project_root() -> Path:
    # src/vidnotes/utils/paths.py -> src/vidnotes/utils -> src/vidnotes -> src -> root
    return Path(__file__).resolve().parents[3]


def user_data_dir(app_name: str = "VidNotes") -> Path:
    home = Path(os.path.expanduser("~"))
    return home / "Documents" / app_name


def resource_path(*parts: str) -> Path:
    # When frozen, resources live under sys._MEIPASS.
    base = Path(getattr(sys, "_MEIPASS", "")) if is_frozen() else project_root()
    return base.joinpath(*parts)


def config_path() -> Path:
    # Dev: keep repo-root config.json for convenience.
    # Frozen: store config under a writable per-user directory.
    if is_frozen():
        return user_data_dir() / "config.json"
    return project_root() / "config.json"


def storage_path() -> Path:
    """Default location of the key-value file that holds saved videos."""
    return user_data_dir() / "storage.json"
