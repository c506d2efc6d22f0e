from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from ..utils.logger import logger
from ..utils.paths import config_path, storage_path


class ConfigManager:
    """Configuration singleton (JSON persisted)."""

    _instance: "ConfigManager | None" = None

    DEFAULT_CONFIG: dict[str, Any] = {
        # Key-value file holding the saved videos. Empty means the default
        # location under the user data directory.
        "storage_file": "",
        # Key inside the storage file under which the whole list lives
        "storage_key": "my-video-notes",
        # UI
        "theme": "dark",  # dark / light / auto
        "window_width": 960,
        "window_height": 760,
    }

    THEMES = {"dark", "light", "auto"}

    def __new__(cls) -> "ConfigManager":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._init()
        return cls._instance

    def _init(self, config_file: Path | None = None) -> None:
        self.config_file = config_file or config_path()
        self.config: dict[str, Any] = self._load_config()

    def _load_config(self) -> dict[str, Any]:
        if not self.config_file.exists():
            return self.DEFAULT_CONFIG.copy()

        try:
            data = json.loads(self.config_file.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning(f"[Config] Unreadable config file, using defaults: {e}")
            return self.DEFAULT_CONFIG.copy()

        if not isinstance(data, dict):
            return self.DEFAULT_CONFIG.copy()

        # Merge over defaults so older files pick up new keys
        merged = {**self.DEFAULT_CONFIG, **data}

        theme = str(merged.get("theme") or "dark").lower().strip()
        if theme not in self.THEMES:
            theme = "dark"
        merged["theme"] = theme

        key = str(merged.get("storage_key") or "").strip()
        merged["storage_key"] = key or self.DEFAULT_CONFIG["storage_key"]

        for size_key in ("window_width", "window_height"):
            try:
                merged[size_key] = max(320, int(merged[size_key]))
            except (TypeError, ValueError):
                merged[size_key] = self.DEFAULT_CONFIG[size_key]

        return merged

    def save(self) -> None:
        try:
            self.config_file.parent.mkdir(parents=True, exist_ok=True)
            self.config_file.write_text(
                json.dumps(self.config, indent=4, ensure_ascii=False),
                encoding="utf-8",
            )
        except OSError as e:
            # Read-only disk or permissions: keep running with in-memory config
            logger.error(f"[Config] Failed to save config: {e}")

    def get(self, key: str, default: Any = None) -> Any:
        return self.config.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self.config[key] = value
        self.save()

    def storage_file(self) -> Path:
        raw = str(self.get("storage_file") or "").strip()
        return Path(raw).expanduser() if raw else storage_path()


config_manager = ConfigManager()
