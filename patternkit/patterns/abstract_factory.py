"""
Abstract Factory Pattern - car parts.

A Car asks its CarPartsFactory for a matching family of parts (engine and
passenger compartment) and never names a concrete part class itself.

    car = Car(MuscleCarPartsFactory())
    car.start()  # "Starting V8 engine"
"""
from abc import ABC, abstractmethod
from loguru import logger


class Engine(ABC):
    label = "abstract"

    def start(self) -> None:
        logger.info(f"Starting {self.label} engine")

    def stop(self) -> None:
        logger.info(f"Stopping {self.label} engine")

    def accelerate(self) -> None:
        logger.info(f"Accelerating {self.label} engine")


class CombustionEngine(Engine):
    label = "Combustion"


class V8Engine(Engine):
    label = "V8"


class HybridEngine(Engine):
    label = "hybrid"


class PassengerCompartment(ABC):
    pass


class StandardPassengerCompartment(PassengerCompartment):
    pass


class MusclePassengerCompartment(PassengerCompartment):
    pass


class HybridPassengerCompartment(PassengerCompartment):
    pass


class CarPartsFactory(ABC):
    @abstractmethod
    def create_engine(self) -> Engine:
        pass

    @abstractmethod
    def create_passenger_compartment(self) -> PassengerCompartment:
        pass


class StandardCarPartsFactory(CarPartsFactory):
    def create_engine(self) -> Engine:
        return CombustionEngine()

    def create_passenger_compartment(self) -> PassengerCompartment:
        return StandardPassengerCompartment()


class MuscleCarPartsFactory(CarPartsFactory):
    def create_engine(self) -> Engine:
        return V8Engine()

    def create_passenger_compartment(self) -> PassengerCompartment:
        return MusclePassengerCompartment()


class HybridCarPartsFactory(CarPartsFactory):
    def create_engine(self) -> Engine:
        return HybridEngine()

    def create_passenger_compartment(self) -> PassengerCompartment:
        return HybridPassengerCompartment()


class Car:
    """Built entirely from the parts its factory hands back."""

    def __init__(self, parts_factory: CarPartsFactory):
        self.engine = parts_factory.create_engine()
        self.passenger_compartment = parts_factory.create_passenger_compartment()

    def start(self) -> None:
        self.engine.start()

    def stop(self) -> None:
        self.engine.stop()

    def accelerate(self) -> None:
        self.engine.accelerate()
