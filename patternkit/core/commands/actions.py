"""
Generic Action Commands - reusable command implementations.

- ActionCommand: binds an IReceiver's do_something/undo_something pair
- CallableCommand: wraps plain callables, with an optional reverse action
"""
from typing import Callable, Optional, TYPE_CHECKING

from .base import ICommand, UndoableCommand

if TYPE_CHECKING:
    from ...receivers import IReceiver


class ActionCommand(UndoableCommand):
    """
    Generic command delegating to a receiver's action pair.

    Example:
        cmd = ActionCommand(receiver)
        invoker.set_command(cmd)
        invoker.action()   # receiver.do_something()
        invoker.undo()     # receiver.undo_something()
    """

    def __init__(self, receiver: 'IReceiver'):
        self.receiver = receiver

    def execute(self) -> None:
        self.receiver.do_something()

    def undo(self) -> None:
        self.receiver.undo_something()


class CallableCommand(ICommand):
    """
    Command built from callables instead of a receiver object.

    Without a reverse callable, undo() keeps the ICommand no-op.

    Example:
        cmd = CallableCommand(editor.save, description="Save")
        dispatcher.register(MENU, "save", cmd)
    """

    def __init__(self, action: Callable[[], None],
                 reverse: Optional[Callable[[], None]] = None,
                 description: Optional[str] = None):
        """
        Initialize callable command.

        Args:
            action: Called on execute()
            reverse: Called on undo() (optional)
            description: Description for logs (default: action name)
        """
        if not callable(action):
            raise TypeError(f"action must be callable, got {type(action).__name__}")
        if reverse is not None and not callable(reverse):
            raise TypeError(f"reverse must be callable, got {type(reverse).__name__}")
        self._action = action
        self._reverse = reverse
        self._description = description or getattr(action, "__name__", "CallableCommand")

    @property
    def description(self) -> str:
        return self._description

    @property
    def can_undo(self) -> bool:
        return self._reverse is not None

    def execute(self) -> None:
        self._action()

    def undo(self) -> None:
        if self._reverse is not None:
            self._reverse()
