from typing import Optional
from loguru import logger

from .config import ConfigManager
from .commands.dispatcher import EventDispatcher


class ServiceLocator:
    """
    Process-wide access to the configuration and the event dispatcher.

    Usage:
        from patternkit.core.locator import sl

        sl.init("settings.json")
        sl.dispatcher.register(MENU, "open", cmd)
    """
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(ServiceLocator, cls).__new__(cls)
            cls._instance.is_ready = False
        return cls._instance

    def init(self, config_path: Optional[str] = None):
        if self.is_ready:
            return

        self.config = ConfigManager(config_path)
        self.dispatcher = EventDispatcher(self.config.data.dispatch)

        # Reactive binding: Config -> Dispatcher
        self.config.on_changed.connect(self._on_config_change)

        self.is_ready = True
        logger.debug("ServiceLocator initialized.")

    def reset(self):
        """Drop config and dispatcher so init() can run again."""
        if self.is_ready:
            self.config.on_changed.disconnect(self._on_config_change)
            self.dispatcher.clear()
            del self.config
            del self.dispatcher
        self.is_ready = False

    def _on_config_change(self, section, key, value):
        if section == "dispatch":
            self.dispatcher.apply_settings(self.config.data.dispatch)

# Global access
sl = ServiceLocator()
