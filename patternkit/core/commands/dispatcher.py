import threading
from typing import Dict, List, Optional, Tuple
from loguru import logger

from .base import ICommand
from ..config import DispatchSettings
from ..events import Signal

MENU = "menu"
TOOLBAR = "toolbar"

EXECUTE = "execute"
UNDO = "undo"


class EventDispatcher:
    """
    Dispatches UI events to bound commands.

    Bindings live in one table keyed by (channel, key). Channels are
    independent namespaces: binding "open" on MENU leaves TOOLBAR untouched.
    Dispatching a key with no binding does nothing.

    Example:
        dispatcher = EventDispatcher()
        dispatcher.register(MENU, "open", OpenCommand(docs, "a.txt"))

        dispatcher.dispatch(MENU, "open")       # docs.open("a.txt")
        dispatcher.dispatch(TOOLBAR, "open")    # ignored
    """

    def __init__(self, settings: Optional[DispatchSettings] = None):
        """
        Initialize EventDispatcher.

        Args:
            settings: DispatchSettings (defaults if None)
        """
        self.settings = settings if settings is not None else DispatchSettings()
        self._bindings: Dict[Tuple[str, str], ICommand] = {}
        self._lock = threading.RLock()
        self.dispatched = Signal("Dispatched")

    def apply_settings(self, settings: DispatchSettings) -> None:
        """Swap settings; existing bindings are kept."""
        with self._lock:
            self.settings = settings

    def register(self, channel: str, key: str, command: ICommand) -> None:
        """
        Bind a command to a key within a channel.

        A previous binding for the same (channel, key) is replaced.

        Args:
            channel: Channel name (e.g. MENU, TOOLBAR)
            key: Event key within the channel
            command: Command to invoke

        Raises:
            ValueError: If channel or key is empty
            TypeError: If command is not an ICommand
        """
        if not channel or not key:
            raise ValueError(f"Channel and key must be non-empty, got ({channel!r}, {key!r})")
        if not isinstance(command, ICommand):
            raise TypeError(f"Expected ICommand, got {type(command).__name__}")

        with self._lock:
            previous = self._bindings.get((channel, key))
            self._bindings[(channel, key)] = command

        if previous is not None and previous is not command:
            logger.debug(f"Rebound {channel}/{key}: {previous.description} -> {command.description}")
        else:
            logger.debug(f"Registered {command.description} for {channel}/{key}")

    def unregister(self, channel: str, key: str) -> bool:
        """
        Remove a binding.

        Returns:
            True if a binding was removed, False if none existed
        """
        with self._lock:
            command = self._bindings.pop((channel, key), None)
        if command is None:
            return False
        logger.debug(f"Unregistered {command.description} from {channel}/{key}")
        return True

    def get(self, channel: str, key: str) -> Optional[ICommand]:
        with self._lock:
            return self._bindings.get((channel, key))

    def is_registered(self, channel: str, key: str) -> bool:
        return self.get(channel, key) is not None

    def channels(self) -> List[str]:
        """
        Configured channels first, then any other channel that currently
        has at least one binding.
        """
        with self._lock:
            result = list(self.settings.channels)
            for (channel, _key) in self._bindings:
                if channel not in result:
                    result.append(channel)
            return result

    def keys(self, channel: str) -> List[str]:
        with self._lock:
            return [k for (c, k) in self._bindings if c == channel]

    def clear(self) -> None:
        with self._lock:
            self._bindings.clear()
        logger.debug("All bindings cleared")

    def __len__(self) -> int:
        with self._lock:
            return len(self._bindings)

    def dispatch(self, channel: str, key: str) -> bool:
        """
        Execute the command bound to (channel, key).

        Returns:
            True if a command ran, False if the key is unbound
        """
        return self._invoke(channel, key, EXECUTE)

    def dispatch_undo(self, channel: str, key: str) -> bool:
        """
        Undo the command bound to (channel, key).

        Returns:
            True if a command was found, False if the key is unbound
        """
        return self._invoke(channel, key, UNDO)

    def _invoke(self, channel: str, key: str, action: str) -> bool:
        # The command runs outside the lock so it may re-register bindings.
        command = self.get(channel, key)
        if command is None:
            if self.settings.log_misses:
                logger.debug(f"No command bound to {channel}/{key}, ignoring {action}")
            return False

        try:
            if action == UNDO:
                command.undo()
            else:
                command.execute()
        except Exception as e:
            logger.error(f"Error during {action} of {command.description} ({channel}/{key}): {e}")
            raise

        logger.debug(f"{action.capitalize()} {command.description} via {channel}/{key}")
        self.dispatched.emit(channel, key, action)
        return True
