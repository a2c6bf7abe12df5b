from loguru import logger
from typing import Callable, List


class Signal:
    """
    Synchronous observer used for dispatch and config notifications.

    EventDispatcher.dispatched emits (channel, key, action) after a bound
    command ran; ConfigManager.on_changed emits (section, key, value).
    A subscriber that raises is logged and skipped, so a faulty listener can
    never turn a handled UI event into a failed one.

    Example:
        dispatcher.dispatched.connect(lambda channel, key, action: ...)
    """
    def __init__(self, name: str = "Signal"):
        self.name = name
        self._subscribers: List[Callable] = []

    def connect(self, callback: Callable):
        """Connect a callback; connecting the same callback twice is a no-op."""
        if callback not in self._subscribers:
            self._subscribers.append(callback)

    def disconnect(self, callback: Callable):
        if callback in self._subscribers:
            self._subscribers.remove(callback)

    def emit(self, *args, **kwargs):
        """Call subscribers in connection order with the given arguments."""
        # Snapshot: subscribers may disconnect themselves while handling.
        for sub in list(self._subscribers):
            try:
                sub(*args, **kwargs)
            except Exception as e:
                logger.error(f"Signal '{self.name}' subscriber {getattr(sub, '__name__', sub)!r} failed on {args}: {e}")

    def __len__(self) -> int:
        return len(self._subscribers)
