"""
Template Method Pattern.

- AbstractClass: fixed hook1 -> operation1 -> operation2 -> hook2 sequence
- AudioDecoder: fixed load -> before_decode -> decode -> after_decode sequence,
  with the actual decoding delegated to an injected native decoder
"""
from abc import ABC, abstractmethod
from typing import Optional
from loguru import logger


class AbstractClass(ABC):
    @abstractmethod
    def operation1(self) -> None:
        pass

    @abstractmethod
    def operation2(self) -> None:
        pass

    # Hooks: optional steps, empty unless overridden.
    def hook1(self) -> None:
        pass

    def hook2(self) -> None:
        pass

    def template_method(self) -> None:
        """Run the algorithm. Subclasses override steps, not this method."""
        self.hook1()
        self.operation1()
        self.operation2()
        self.hook2()


class ConcreteClass(AbstractClass):
    def operation1(self) -> None:
        logger.info(f"{type(self).__name__}: operation1 called...")

    def operation2(self) -> None:
        logger.info(f"{type(self).__name__}: operation2 called...")

    def hook1(self) -> None:
        logger.info(f"{type(self).__name__}: hook1 called...")


class ConcreteClass2(AbstractClass):
    def operation1(self) -> None:
        logger.info(f"{type(self).__name__}: operation1 called...")

    def operation2(self) -> None:
        logger.info(f"{type(self).__name__}: operation2 called...")

    def hook2(self) -> None:
        logger.info(f"{type(self).__name__}: hook2 called...")


class AudioInputStream:
    """Placeholder for a loaded audio stream."""

    def __init__(self, path: str):
        self.path = path


class INativeDecoder(ABC):
    @abstractmethod
    def decode(self, stream: Optional[AudioInputStream]) -> None:
        pass


class NativeAACDecoder(INativeDecoder):
    def decode(self, stream: Optional[AudioInputStream]) -> None:
        logger.info("NativeAACDecoder decoding audio stream...")


class NativeMP3Decoder(INativeDecoder):
    def decode(self, stream: Optional[AudioInputStream]) -> None:
        logger.info("NativeMP3Decoder decoding audio stream...")


class AudioDecoder(ABC):
    """
    Plays an audio file with a fixed sequence of steps.

    Args:
        decoder: Native decoder doing the actual work
        path: Path to the audio file
    """

    def __init__(self, decoder: INativeDecoder, path: str):
        self.decoder = decoder
        self.file_path = path

    @abstractmethod
    def load_stream(self) -> Optional[AudioInputStream]:
        pass

    @abstractmethod
    def decode(self, stream: Optional[AudioInputStream]) -> None:
        pass

    def before_decode(self) -> None:
        pass

    def after_decode(self) -> None:
        pass

    def play(self) -> None:
        stream = self.load_stream()
        self.before_decode()
        self.decode(stream)
        self.after_decode()


class AACDecoder(AudioDecoder):
    def load_stream(self) -> Optional[AudioInputStream]:
        return AudioInputStream(self.file_path)

    def decode(self, stream: Optional[AudioInputStream]) -> None:
        self.decoder.decode(stream)

    def before_decode(self) -> None:
        logger.info("AAC starting...")

    def after_decode(self) -> None:
        logger.info("AAC stopped...")


class MP3Decoder(AudioDecoder):
    def load_stream(self) -> Optional[AudioInputStream]:
        return AudioInputStream(self.file_path)

    def decode(self, stream: Optional[AudioInputStream]) -> None:
        self.decoder.decode(stream)

    def before_decode(self) -> None:
        logger.info("MP3 starting...")

    def after_decode(self) -> None:
        logger.info("MP3 stopped...")
