"""
Strategy Pattern - interchangeable playback backends.

MediaPlayer holds one IStrategy and delegates to it; swapping the strategy
swaps the backend without touching the player.
"""
from abc import ABC, abstractmethod
from loguru import logger


class IStrategy(ABC):
    @abstractmethod
    def play(self) -> None:
        pass

    @abstractmethod
    def pause(self) -> None:
        pass


class HTML5AudioPlayer(IStrategy):
    def play(self) -> None:
        logger.info("Playing HTML5 audio...")

    def pause(self) -> None:
        logger.info("Pausing HTML5 audio...")


class SWFAudioPlayer(IStrategy):
    def play(self) -> None:
        logger.info("Playing SWF audio...")

    def pause(self) -> None:
        logger.info("Pausing SWF audio...")


class MediaPlayer:
    def __init__(self, player: IStrategy):
        self.player = player

    def play_audio(self) -> None:
        self.player.play()

    def pause_audio(self) -> None:
        self.player.pause()
