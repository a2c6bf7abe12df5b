"""
Command System.

Provides Command pattern infrastructure:
- ICommand: execute() plus a no-op undo()
- UndoableCommand: Commands whose undo() reverses execute()
- Document commands: Open, Close, Cut, Paste
- Generic commands: ActionCommand, CallableCommand
- EventDispatcher: (channel, key) -> command table
- Invoker / UIEventsManager: front ends over commands and the dispatcher
"""
from .base import ICommand, UndoableCommand
from .document import OpenCommand, CloseCommand, CutCommand, PasteCommand
from .actions import ActionCommand, CallableCommand
from .dispatcher import EventDispatcher, MENU, TOOLBAR
from .invoker import Invoker, UIEventsManager

__all__ = [
    # Base interfaces
    "ICommand",
    "UndoableCommand",
    # Variants
    "OpenCommand",
    "CloseCommand",
    "CutCommand",
    "PasteCommand",
    "ActionCommand",
    "CallableCommand",
    # Dispatch
    "EventDispatcher",
    "MENU",
    "TOOLBAR",
    "Invoker",
    "UIEventsManager",
]
