"""
Builder Pattern - bar orders.

The Waitress directs, the Bartender builds: each menu entry names a
Bartender step, and orders_up() returns everything prepared so far.

    waitress = Waitress(Bartender(), DrinkMenu)
    waitress.take_order([DrinkMenu.MOJITO, DrinkMenu.BEER])  # ["Mojito", "Beer"]
"""
from typing import List, Optional, Sequence


class DrinkMenu:
    BEER = "prepare_beer"
    MOJITO = "prepare_mojito"
    KAMIKAZE = "prepare_kamikaze"
    MARGARITA = "prepare_margarita"
    MAI_TAI = "prepare_mai_tai"
    PINA_COLADA = "prepare_pina_colada"

    @classmethod
    def items(cls) -> List[str]:
        return [cls.BEER, cls.MOJITO, cls.KAMIKAZE, cls.MARGARITA, cls.MAI_TAI, cls.PINA_COLADA]


class Bartender:
    def __init__(self):
        self.drinks: List[str] = []

    def prepare_beer(self) -> None:
        self.drinks.append("Beer")

    def prepare_mojito(self) -> None:
        self.drinks.append("Mojito")

    def prepare_kamikaze(self) -> None:
        self.drinks.append("Kamikaze")

    def prepare_margarita(self) -> None:
        self.drinks.append("Margarita")

    def prepare_mai_tai(self) -> None:
        self.drinks.append("Mai Tai")

    def prepare_pina_colada(self) -> None:
        self.drinks.append("Pina Colada")

    def orders_up(self) -> List[str]:
        return self.drinks


class Waitress:
    def __init__(self, bartender: Bartender, menu=DrinkMenu):
        self.bartender = bartender
        self.menu = menu

    def take_order(self, drinks: Optional[Sequence[str]]) -> Optional[List[str]]:
        """
        Have the bartender prepare each drink in order.

        Returns:
            The bartender's drinks, or None when drinks is not a list/tuple,
            is empty, or names anything not on the menu. Nothing is
            prepared for a rejected order.
        """
        if not isinstance(drinks, (list, tuple)) or not drinks:
            return None
        valid = self.menu.items()
        if any(drink not in valid for drink in drinks):
            return None

        for drink in drinks:
            getattr(self.bartender, drink)()
        return self.bartender.orders_up()
