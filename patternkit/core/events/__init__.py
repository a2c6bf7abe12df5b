"""
Event System.

Provides:
- Signal: Simple observer for sync notifications (config changes, dispatch trace)

Usage:
    from patternkit.core.events import Signal

    changed = Signal("ConfigChanged")
    changed.connect(on_changed)
    changed.emit("dispatch", "log_misses", False)
"""
from .observer import Signal


__all__ = ["Signal"]
