"""
Invokers - front ends that trigger commands.

- Invoker: holds a single command
- UIEventsManager: menu and toolbar press events over an EventDispatcher
"""
from typing import Optional

from .base import ICommand
from .dispatcher import EventDispatcher, MENU, TOOLBAR


class Invoker:
    """
    Holds one command and triggers it on demand.

    Example:
        invoker = Invoker()
        invoker.set_command(ActionCommand(receiver))
        invoker.action()
        invoker.undo()
    """

    def __init__(self, command: Optional[ICommand] = None):
        self.command = command

    def set_command(self, command: Optional[ICommand]) -> None:
        self.command = command

    def action(self) -> None:
        if self.command is not None:
            self.command.execute()

    def undo(self) -> None:
        if self.command is not None:
            self.command.undo()


class UIEventsManager:
    """
    Routes menu and toolbar press events to their commands.

    Each press handler is a thin wrapper around the dispatcher, so unbound
    keys are ignored exactly as in EventDispatcher.dispatch().
    """

    def __init__(self, dispatcher: Optional[EventDispatcher] = None):
        self.dispatcher = dispatcher if dispatcher is not None else EventDispatcher()

    def add_menu_command(self, key: str, command: ICommand) -> None:
        self.dispatcher.register(MENU, key, command)

    def add_toolbar_command(self, key: str, command: ICommand) -> None:
        self.dispatcher.register(TOOLBAR, key, command)

    def handle_menu_press_event(self, key: str) -> None:
        self.dispatcher.dispatch(MENU, key)

    def handle_undo_menu_press_event(self, key: str) -> None:
        self.dispatcher.dispatch_undo(MENU, key)

    def handle_toolbar_press_event(self, key: str) -> None:
        self.dispatcher.dispatch(TOOLBAR, key)

    def handle_undo_toolbar_press_event(self, key: str) -> None:
        self.dispatcher.dispatch_undo(TOOLBAR, key)
