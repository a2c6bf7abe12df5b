import pytest
from unittest.mock import MagicMock
from patternkit.patterns import (
    Car,
    StandardCarPartsFactory,
    MuscleCarPartsFactory,
    HybridCarPartsFactory,
    CombustionEngine,
    V8Engine,
    HybridEngine,
    StandardPassengerCompartment,
    MusclePassengerCompartment,
    HybridPassengerCompartment,
)

@pytest.mark.parametrize("factory_cls,engine_cls,compartment_cls", [
    (StandardCarPartsFactory, CombustionEngine, StandardPassengerCompartment),
    (MuscleCarPartsFactory, V8Engine, MusclePassengerCompartment),
    (HybridCarPartsFactory, HybridEngine, HybridPassengerCompartment),
])
def test_factory_builds_matching_family(factory_cls, engine_cls, compartment_cls):
    factory = factory_cls()
    assert isinstance(factory.create_engine(), engine_cls)
    assert isinstance(factory.create_passenger_compartment(), compartment_cls)

def test_all_parts_built_when_car_started():
    car = Car(MuscleCarPartsFactory())
    car.start()

    assert isinstance(car.engine, V8Engine)
    assert isinstance(car.passenger_compartment, MusclePassengerCompartment)

def test_car_asks_factory_for_engine_once():
    engine = MagicMock(spec=HybridEngine)
    factory = MagicMock(spec=HybridCarPartsFactory)
    factory.create_engine.return_value = engine

    car = Car(factory)
    car.start()
    car.accelerate()
    car.stop()

    factory.create_engine.assert_called_once_with()
    factory.create_passenger_compartment.assert_called_once_with()
    engine.start.assert_called_once()
    engine.accelerate.assert_called_once()
    engine.stop.assert_called_once()

def test_engine_trace(log_messages):
    Car(HybridCarPartsFactory()).start()
    Car(StandardCarPartsFactory()).stop()

    assert log_messages == ["Starting hybrid engine", "Stopping Combustion engine"]
