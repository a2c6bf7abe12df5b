"""
patternkit - Design pattern demonstrations

Command pattern dispatch for menu/toolbar style UI events, plus small
Decorator, Template Method and Singleton examples.
"""

# Core systems
from patternkit.core.locator import ServiceLocator, sl
from patternkit.core.config import (
    ConfigManager,
    AppConfig,
    GeneralSettings,
    DispatchSettings,
    DemoSettings,
)
from patternkit.core.events import Signal
from patternkit.core.logging import setup_logging, trace_dispatches

# Commands
from patternkit.core.commands import (
    ICommand,
    UndoableCommand,
    OpenCommand,
    CloseCommand,
    CutCommand,
    PasteCommand,
    ActionCommand,
    CallableCommand,
    EventDispatcher,
    MENU,
    TOOLBAR,
    Invoker,
    UIEventsManager,
)

# Receivers
from patternkit.receivers import IDocumentOperations, DocumentOperations, IReceiver, Receiver

__version__ = "0.1.0"

__all__ = [
    # Core
    "ServiceLocator",
    "sl",
    "ConfigManager",
    "AppConfig",
    "GeneralSettings",
    "DispatchSettings",
    "DemoSettings",
    "Signal",
    "setup_logging",
    "trace_dispatches",
    # Commands
    "ICommand",
    "UndoableCommand",
    "OpenCommand",
    "CloseCommand",
    "CutCommand",
    "PasteCommand",
    "ActionCommand",
    "CallableCommand",
    "EventDispatcher",
    "MENU",
    "TOOLBAR",
    "Invoker",
    "UIEventsManager",
    # Receivers
    "IDocumentOperations",
    "DocumentOperations",
    "IReceiver",
    "Receiver",
]
