from typing import Any, List, Optional
import json
import os
from pydantic import BaseModel, Field
from loguru import logger
from .events import Signal

# --- Settings Models ---
class GeneralSettings(BaseModel):
    debug_mode: bool = False
    log_dir: Optional[str] = None

class DispatchSettings(BaseModel):
    # Channels created up front; any other channel name is still accepted.
    channels: List[str] = Field(default_factory=lambda: ["menu", "toolbar"])
    log_misses: bool = True

class DemoSettings(BaseModel):
    menu_file: str = "myfile.txt"
    toolbar_file: str = "myfile2.txt"

class AppConfig(BaseModel):
    general: GeneralSettings = Field(default_factory=GeneralSettings)
    dispatch: DispatchSettings = Field(default_factory=DispatchSettings)
    demo: DemoSettings = Field(default_factory=DemoSettings)

# --- Manager ---
class ConfigManager:
    """
    Manages application configuration with optional persistence and reactivity.

    With no filepath the configuration lives in memory only.
    """
    def __init__(self, filepath: Optional[str] = None):
        self.filepath = filepath
        self._data = AppConfig()
        self.on_changed = Signal("ConfigChanged")
        self._load()

    @property
    def data(self) -> AppConfig:
        return self._data

    def update(self, section: str, key: str, value: Any):
        """Update a setting, validate via Pydantic, autosave, and emit change event."""
        if not hasattr(self._data, section):
            raise ValueError(f"Invalid section: {section}")

        section_obj = getattr(self._data, section)
        if key not in type(section_obj).model_fields:
            raise ValueError(f"Invalid key: {key} in section {section}")

        raw = section_obj.model_dump()
        raw[key] = value
        validated = type(section_obj).model_validate(raw)
        setattr(self._data, section, validated)

        self._save()
        self.on_changed.emit(section, key, getattr(validated, key))

    def get(self, section: str, key: str) -> Any:
        if not hasattr(self._data, section):
            raise ValueError(f"Invalid section: {section}")
        section_obj = getattr(self._data, section)
        if key not in type(section_obj).model_fields:
            raise ValueError(f"Invalid key: {key} in section {section}")
        return getattr(section_obj, key)

    def _load(self):
        """Load settings from JSON or TOML file if present; otherwise keep defaults."""
        if not self.filepath:
            return
        if os.path.isfile(self.filepath):
            try:
                if self.filepath.endswith('.toml'):
                    import tomllib
                    with open(self.filepath, "rb") as f:
                        raw = tomllib.load(f)
                else:
                    with open(self.filepath, "r", encoding="utf-8") as f:
                        raw = json.load(f)
                self._data = AppConfig.model_validate(raw)
                logger.debug(f"Loaded config from {self.filepath}")
            except Exception as e:
                logger.error(f"Failed to load config from {self.filepath}: {e}")
        else:
            self._save()

    def _save(self):
        """Persist current config to JSON file."""
        if not self.filepath or self.filepath.endswith('.toml'):
            return
        try:
            dirname = os.path.dirname(self.filepath)
            if dirname:
                os.makedirs(dirname, exist_ok=True)
            with open(self.filepath, "w", encoding="utf-8") as f:
                json.dump(self._data.model_dump(), f, indent=4)
        except Exception as e:
            logger.error(f"Failed to save config to {self.filepath}: {e}")
