"""
Command Pattern - Base Interfaces.

Provides:
- ICommand: Capability with execute() and a no-op undo()
- UndoableCommand: Command whose undo() reverses execute()
"""
from abc import ABC, abstractmethod


class ICommand(ABC):
    """
    Command invoked by an EventDispatcher or Invoker.

    Subclasses capture everything they need (receiver, file name, ...) in
    __init__ and keep no per-invocation state, so one instance can be bound
    under several channels and keys.

    Example:
        class OpenCommand(ICommand):
            def __init__(self, receiver, file_name):
                self.receiver = receiver
                self.file_name = file_name

            def execute(self):
                self.receiver.open(self.file_name)
    """

    @property
    def description(self) -> str:
        """
        Human-readable description for logs and UI display.

        Returns:
            Description string (default: class name)
        """
        return self.__class__.__name__

    @abstractmethod
    def execute(self) -> None:
        """Run the forward operation against the bound receiver."""
        pass

    def undo(self) -> None:
        """
        Reverse the command.

        The default is an intentional no-op: commands that cannot be undone
        simply ignore the request so invokers can call undo() uniformly.
        Safe to call even if execute() never ran.
        """
        pass

    def __repr__(self) -> str:
        return f"<{self.description}>"


class UndoableCommand(ICommand, ABC):
    """
    Command that supports undo.

    Example:
        class PasteCommand(UndoableCommand):
            def execute(self):
                self.receiver.paste()

            def undo(self):
                self.receiver.undo_paste()
    """

    @abstractmethod
    def undo(self) -> None:
        """Reverse the command."""
        pass
