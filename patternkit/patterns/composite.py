"""
Composite Pattern - computer pricing.

A Computer costs its own price plus every component it holds; components
can be parts or further computers, nested to any depth.
"""
from abc import ABC, abstractmethod
from typing import List


class IComponent(ABC):
    @abstractmethod
    def get_price(self) -> float:
        pass

    @abstractmethod
    def add(self, component: "IComponent") -> None:
        pass

    @abstractmethod
    def remove(self, component: "IComponent") -> None:
        pass


class Computer(IComponent):
    def __init__(self, price: float):
        self.price = price
        self.components: List[IComponent] = []

    def get_price(self) -> float:
        return self.price + sum(c.get_price() for c in self.components)

    def add(self, component: IComponent) -> None:
        self.components.append(component)

    def remove(self, component: IComponent) -> None:
        # By identity: an equal-priced twin stays.
        self.components = [c for c in self.components if c is not component]


class ComputerPart(IComponent):
    """Leaf: add/remove are no-ops."""

    def __init__(self, price: float):
        self.price = price

    def get_price(self) -> float:
        return self.price

    def add(self, component: IComponent) -> None:
        pass

    def remove(self, component: IComponent) -> None:
        pass
