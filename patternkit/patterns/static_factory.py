"""
Static Factory - modules looked up by key.

ProviderFramework reads the key -> class table from Metadata once, on first
use. Unknown keys fall back to DefaultModule instead of failing.
"""
from typing import Dict, Optional, Type
from loguru import logger


class DefaultModule:
    pass


class ModuleA:
    pass


class ModuleB:
    pass


class Metadata:
    def get_modules(self) -> Dict[str, Type]:
        # A real system would read these from a metadata file.
        return {
            "moduleA": ModuleA,
            "moduleB": ModuleB,
        }


class ProviderFramework:
    _modules: Optional[Dict[str, Type]] = None

    @classmethod
    def _init_metadata(cls) -> None:
        if cls._modules is None:
            cls._modules = Metadata().get_modules()

    @classmethod
    def get_instance(cls, key: str):
        """Instantiate the module registered under key, or DefaultModule."""
        cls._init_metadata()
        klass = cls._modules.get(key)
        if klass is None:
            logger.debug(f"No module registered for {key!r}, using DefaultModule")
            return DefaultModule()
        return klass()
