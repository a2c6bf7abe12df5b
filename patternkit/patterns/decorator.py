"""
Decorator Pattern - racket pricing.

A ConcreteRacket has a base price; each decorator wraps another racket and
adds its own increment. Decorators nest in any order, any number of times:

    racket = WilsonProOvergripDecorator(VSGutStringDecorator(ConcreteRacket()))
    racket.get_price()  # 100 + 40 + 3 = 143.0
"""
from abc import ABC, abstractmethod


class Racket(ABC):
    @abstractmethod
    def get_price(self) -> float:
        pass


class ConcreteRacket(Racket):
    def __init__(self, price: float = 100.0):
        self.price = price

    def get_price(self) -> float:
        return self.price


class RacketDecorator(Racket):
    """Adds `price` on top of the wrapped racket."""
    price: float = 0.0

    def __init__(self, racket: Racket):
        self.racket = racket

    def get_price(self) -> float:
        return self.racket.get_price() + self.price


class PrinceSyntheticGutStringDecorator(RacketDecorator):
    price = 5.0


class VSGutStringDecorator(RacketDecorator):
    price = 40.0


class WilsonProOvergripDecorator(RacketDecorator):
    price = 3.0
