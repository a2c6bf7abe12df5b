"""
Receivers - objects that perform the real work commands delegate to.

The stubs here only log what they would do.
"""
from abc import ABC, abstractmethod
from loguru import logger


class IDocumentOperations(ABC):
    """Receiver interface for document commands."""

    @abstractmethod
    def open(self, file_name: str) -> None:
        pass

    @abstractmethod
    def close(self, file_name: str) -> None:
        pass

    @abstractmethod
    def cut(self) -> None:
        pass

    @abstractmethod
    def paste(self) -> None:
        pass

    @abstractmethod
    def undo_paste(self) -> None:
        pass


class DocumentOperations(IDocumentOperations):
    def open(self, file_name: str) -> None:
        logger.info(f"Opening {file_name}...")

    def close(self, file_name: str) -> None:
        logger.info(f"Closing {file_name}...")

    def cut(self) -> None:
        logger.info("Cutting some text...")

    def paste(self) -> None:
        logger.info("Pasting some text...")

    def undo_paste(self) -> None:
        logger.info("Undoing last paste operation...")


class IReceiver(ABC):
    """Receiver interface for ActionCommand."""

    @abstractmethod
    def do_something(self) -> None:
        pass

    @abstractmethod
    def undo_something(self) -> None:
        pass


class Receiver(IReceiver):
    def do_something(self) -> None:
        logger.info("Doing something...")

    def undo_something(self) -> None:
        logger.info("Undoing something...")
