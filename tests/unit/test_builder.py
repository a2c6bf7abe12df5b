import pytest
from unittest.mock import patch
from patternkit.patterns import Bartender, Waitress, DrinkMenu

@pytest.fixture
def bartender():
    return Bartender()

@pytest.fixture
def waitress(bartender):
    return Waitress(bartender, DrinkMenu)

def test_take_order_for_mojito(bartender, waitress):
    with patch.object(bartender, "prepare_mojito", wraps=bartender.prepare_mojito) as spy:
        waitress.take_order([DrinkMenu.MOJITO])
    spy.assert_called_once()

def test_take_order_for_all_drinks(waitress):
    served = waitress.take_order(DrinkMenu.items())
    assert served == ["Beer", "Mojito", "Kamikaze", "Margarita", "Mai Tai", "Pina Colada"]

@pytest.mark.parametrize("order", [
    "invalid type",
    ["not_a_drink!"],
    [DrinkMenu.MAI_TAI, "not_a_drink!", DrinkMenu.PINA_COLADA],
    ["orders_up"],
    [],
    None,
])
def test_only_valid_orders_accepted(bartender, waitress, order):
    assert waitress.take_order(order) is None
    assert bartender.drinks == []

def test_correct_number_of_drinks(waitress):
    assert len(waitress.take_order([DrinkMenu.MOJITO, DrinkMenu.MAI_TAI])) == 2

def test_duplicate_drinks(waitress):
    served = waitress.take_order([
        DrinkMenu.MOJITO, DrinkMenu.MAI_TAI, DrinkMenu.MAI_TAI, DrinkMenu.MARGARITA, DrinkMenu.MAI_TAI,
    ])
    assert len(served) == 5
    assert served.count("Mai Tai") == 3
