"""
Простой загрузчик/сохранитель настроек загрузчика в формате JSON.
Если файл не задан или не найден – используются настройки по‑умолчанию.

Каждый OBJLoader держит свой экземпляр Config: независимые документы
не делят общее состояние.
"""

import json
from pathlib import Path
from wavemesh.utils.logger import logger

DEFAULT_CONFIG = {
    "triangulate": True,
    "load_textures": True,
    "flip_textures": True,
    "encoding": "utf-8",
    "check_extensions": True,
}


class Config:
    """Настройки одного загрузчика (JSON‑файл + явные переопределения)."""

    def __init__(self, path=None, **overrides):
        self.path = Path(path) if path is not None else None
        self.data = DEFAULT_CONFIG.copy()
        if self.path is not None:
            self._load()
        for key, value in overrides.items():
            self[key] = value

    def _load(self):
        if not self.path.is_file():
            logger.info(f"[Config] No config file at {self.path} – using defaults.")
            return
        try:
            with self.path.open("r", encoding="utf-8") as f:
                loaded = json.load(f)
            for key, value in loaded.items():
                if key not in DEFAULT_CONFIG:
                    logger.warning(f"[Config] Ignoring unknown option '{key}'")
                    continue
                self.data[key] = value
            logger.info("[Config] Loaded configuration.")
        except (OSError, ValueError) as exc:
            logger.error(f"[Config] Failed to read config: {exc}")

    def save(self, path=None):
        target = Path(path) if path is not None else self.path
        if target is None:
            raise ValueError("[Config] No path to save configuration to")
        with target.open("w", encoding="utf-8") as f:
            json.dump(self.data, f, indent=4)
        logger.info("[Config] Configuration saved.")

    def __getitem__(self, key):
        return self.data.get(key, DEFAULT_CONFIG.get(key))

    def __setitem__(self, key, value):
        if key not in DEFAULT_CONFIG:
            raise KeyError(f"Unknown config option: {key}")
        self.data[key] = value

    def get(self, key, default=None):
        return self.data.get(key, default)
