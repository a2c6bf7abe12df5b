"""
State Pattern - audio player.

AudioPlayer forwards play/pause/stop to its current state object; the state
decides whether to touch the AudioLib and which state comes next.

| state   | play            | pause          | stop           |
|---------|-----------------|----------------|----------------|
| playing | nothing         | -> paused      | -> stopped     |
| paused  | -> playing      | nothing        | -> stopped     |
| stopped | -> playing      | nothing        | nothing        |
"""
from abc import ABC, abstractmethod
from typing import Dict
from loguru import logger

PLAYING = "playing"
PAUSED = "paused"
STOPPED = "stopped"


class AudioLib:
    """Stand-in for a third-party audio library."""

    def play(self) -> None:
        logger.info("Playing audio...")

    def pause(self) -> None:
        logger.info("Pausing audio...")

    def stop(self) -> None:
        logger.info("Stopping audio...")


class IState(ABC):
    def __init__(self, name: str, audio_lib: AudioLib):
        self.name = name
        self.audio_lib = audio_lib

    @abstractmethod
    def play(self, context: "AudioPlayer") -> None:
        pass

    @abstractmethod
    def pause(self, context: "AudioPlayer") -> None:
        pass

    @abstractmethod
    def stop(self, context: "AudioPlayer") -> None:
        pass


class Playing(IState):
    def play(self, context: "AudioPlayer") -> None:
        logger.info("Already playing ... nothing to do...")

    def pause(self, context: "AudioPlayer") -> None:
        self.audio_lib.pause()
        context.set_state(PAUSED)

    def stop(self, context: "AudioPlayer") -> None:
        self.audio_lib.stop()
        context.set_state(STOPPED)


class Paused(IState):
    def play(self, context: "AudioPlayer") -> None:
        self.audio_lib.play()
        context.set_state(PLAYING)

    def pause(self, context: "AudioPlayer") -> None:
        logger.info("Already paused ... nothing to do")

    def stop(self, context: "AudioPlayer") -> None:
        self.audio_lib.stop()
        context.set_state(STOPPED)


class Stopped(IState):
    def play(self, context: "AudioPlayer") -> None:
        self.audio_lib.play()
        context.set_state(PLAYING)

    def pause(self, context: "AudioPlayer") -> None:
        logger.info("Can't pause when stopped...")

    def stop(self, context: "AudioPlayer") -> None:
        logger.info("Already stopped... nothing to do")


class AudioPlayer:
    def __init__(self, states: Dict[str, IState], initial_state: str):
        """
        Args:
            states: State objects keyed by PLAYING / PAUSED / STOPPED
            initial_state: Key of the starting state

        Raises:
            KeyError: If initial_state is not in states
        """
        self.states = states
        self.current_state = states[initial_state]

    def play_audio(self) -> None:
        self.current_state.play(self)

    def pause_audio(self) -> None:
        self.current_state.pause(self)

    def stop_audio(self) -> None:
        self.current_state.stop(self)

    def get_state(self) -> IState:
        return self.current_state

    def set_state(self, new_state: str) -> None:
        self.current_state = self.states[new_state]
