"""
Observer Pattern - subject pushing its state to observers.

Compare patternkit.core.events.Signal, the callback-based variant used by
the dispatcher and config manager.
"""
import uuid
from abc import ABC, abstractmethod
from typing import Any, List


class IObserver(ABC):
    @abstractmethod
    def update(self, subject: "Subject") -> None:
        pass


class Subject(ABC):
    def __init__(self):
        self._observers: List[IObserver] = []
        self._state: Any = None

    @abstractmethod
    def register(self, observer: IObserver) -> None:
        pass

    @abstractmethod
    def unregister(self, observer: IObserver) -> bool:
        pass

    @abstractmethod
    def notify(self) -> None:
        pass

    def get_number_of_observers(self) -> int:
        return len(self._observers)


class ConcreteSubject(Subject):
    def register(self, observer: IObserver) -> None:
        """Register an observer; the same instance is only kept once."""
        if observer not in self._observers:
            self._observers.append(observer)

    def unregister(self, observer: IObserver) -> bool:
        if observer in self._observers:
            self._observers.remove(observer)
            return True
        return False

    def notify(self) -> None:
        for observer in list(self._observers):
            observer.update(self)

    def set_state(self, state: Any) -> None:
        self._state = state

    def get_state(self) -> Any:
        return self._state


class ConcreteObserver(IObserver):
    def __init__(self):
        self._state: Any = None
        self._id = uuid.uuid4().hex

    def get_id(self) -> str:
        return self._id

    def update(self, subject: Subject) -> None:
        self._state = subject.get_state()

    def get_state(self) -> Any:
        return self._state

    def __str__(self) -> str:
        return f"id: {self._id}"
