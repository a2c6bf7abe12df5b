import pytest
from unittest.mock import MagicMock
from patternkit.patterns import ConcreteSubject, ConcreteObserver, IObserver

@pytest.fixture
def subject():
    return ConcreteSubject()

def register_many(subject, n):
    observers = [ConcreteObserver() for _ in range(n)]
    for observer in observers:
        subject.register(observer)
    return observers

def test_subscribing(subject):
    register_many(subject, 1)
    assert subject.get_number_of_observers() == 1

def test_unsubscribing(subject):
    observers = register_many(subject, 5)
    assert subject.get_number_of_observers() == 5

    assert subject.unregister(observers[0]) is True
    assert subject.get_number_of_observers() == 4

def test_unsubscribing_when_none(subject):
    assert subject.unregister(ConcreteObserver()) is False

def test_subject_holds_state(subject):
    state = {"foo": "foo val"}
    subject.set_state(state)
    assert subject.get_state() is state

def test_observer_gets_notified(subject):
    observer = ConcreteObserver()
    subject.register(observer)

    subject.set_state("yogabbagabba")
    subject.notify()

    assert observer.get_state() == "yogabbagabba"

def test_notify_passes_subject(subject):
    observer = MagicMock(spec=IObserver)
    subject.register(observer)
    subject.notify()
    observer.update.assert_called_once_with(subject)

def test_observers_have_unique_ids():
    a, b = ConcreteObserver(), ConcreteObserver()
    assert a.get_id()
    assert a.get_id() != b.get_id()
    assert str(a) == f"id: {a.get_id()}"

def test_adding_duplicates(subject):
    observer = ConcreteObserver()
    subject.register(observer)
    subject.register(observer)
    assert subject.get_number_of_observers() == 1
