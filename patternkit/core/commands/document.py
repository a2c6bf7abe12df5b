"""
Document Commands - concrete commands bound to an IDocumentOperations receiver.

- OpenCommand / CloseCommand: carry a file name, undo is a no-op
- CutCommand: undo is a no-op
- PasteCommand: undo calls receiver.undo_paste()
"""
from typing import TYPE_CHECKING

from .base import ICommand, UndoableCommand

if TYPE_CHECKING:
    from ...receivers import IDocumentOperations


class OpenCommand(ICommand):
    """Open a file on the receiver."""

    def __init__(self, receiver: 'IDocumentOperations', file_name: str):
        self.receiver = receiver
        self.file_name = file_name

    @property
    def description(self) -> str:
        return f"Open {self.file_name}"

    def execute(self) -> None:
        self.receiver.open(self.file_name)


class CloseCommand(ICommand):
    """Close a file on the receiver."""

    def __init__(self, receiver: 'IDocumentOperations', file_name: str):
        self.receiver = receiver
        self.file_name = file_name

    @property
    def description(self) -> str:
        return f"Close {self.file_name}"

    def execute(self) -> None:
        self.receiver.close(self.file_name)


class CutCommand(ICommand):

    def __init__(self, receiver: 'IDocumentOperations'):
        self.receiver = receiver

    @property
    def description(self) -> str:
        return "Cut"

    def execute(self) -> None:
        self.receiver.cut()


class PasteCommand(UndoableCommand):
    """Paste into the document; undo reverts the last paste."""

    def __init__(self, receiver: 'IDocumentOperations'):
        self.receiver = receiver

    @property
    def description(self) -> str:
        return "Paste"

    def execute(self) -> None:
        self.receiver.paste()

    def undo(self) -> None:
        self.receiver.undo_paste()
