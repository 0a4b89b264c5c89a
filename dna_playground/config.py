"""Editor settings loaded from an optional JSON file."""
from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).with_name("dna_playground_config.json")


@dataclass
class EditorConfig:
    window_width: int = 1200
    window_height: int = 800
    canvas_width: int = 800
    canvas_height: int = 600
    background: str = "#0a0a0a"
    text_color: str = "#ededed"
    export_filename: str = "dna-structure.png"
    history_limit: Optional[int] = None
    log_level: str = "WARNING"
    show_instructions: bool = True

    def asdict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "EditorConfig":
        config = cls()
        for spec in fields(cls):
            if spec.name not in data:
                continue
            default = getattr(config, spec.name)
            value = data[spec.name]
            try:
                setattr(config, spec.name, _coerce(value, default, spec.name))
            except (TypeError, ValueError):
                logger.warning("Ignoring invalid config value %s=%r", spec.name, value)
        return config


def _coerce(value: Any, default: Any, name: str) -> Any:
    if name == "history_limit":
        if value is None:
            return None
        limit = int(value)
        if limit < 1:
            raise ValueError(name)
        return limit
    if isinstance(default, bool):
        if not isinstance(value, bool):
            raise TypeError(name)
        return value
    if isinstance(default, int):
        number = int(value)
        if number <= 0:
            raise ValueError(name)
        return number
    if isinstance(default, str):
        if not isinstance(value, str) or not value.strip():
            raise TypeError(name)
        return value.strip()
    return value


def load_config(path: Optional[Path | str] = None) -> EditorConfig:
    """Read settings from ``path`` (or the bundled default); fall back to defaults on error."""
    config_path = Path(path) if path is not None else DEFAULT_CONFIG_PATH
    if not config_path.exists():
        if path is not None:
            logger.warning("Config file %s not found, using defaults", config_path)
        return EditorConfig()
    try:
        with config_path.open("r", encoding="utf-8") as handle:
            data = json.load(handle)
    except (OSError, json.JSONDecodeError) as exc:
        logger.warning("Could not read config %s: %s", config_path, exc)
        return EditorConfig()
    if not isinstance(data, dict):
        logger.warning("Config %s must contain a JSON object", config_path)
        return EditorConfig()
    return EditorConfig.from_dict(data)
