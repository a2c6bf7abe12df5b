"""
Factory Method Pattern - parcel senders.

Each factory decides which Sender it creates; callers only see Factory.
"""
from abc import ABC, abstractmethod
from enum import IntEnum
from typing import Any
from loguru import logger


class SenderTypes(IntEnum):
    SNAIL_MAIL = 0
    FEDEX = 1
    ARAMEX = 2


class Sender(ABC):
    @abstractmethod
    def send(self, destination: str, package: Any) -> None:
        pass

    @abstractmethod
    def get_type(self) -> SenderTypes:
        pass


class FedexSender(Sender):
    def send(self, destination: str, package: Any) -> None:
        logger.info("Fedex sending...")

    def get_type(self) -> SenderTypes:
        return SenderTypes.FEDEX


class SnailMailSender(Sender):
    def send(self, destination: str, package: Any) -> None:
        logger.info("Snail mail sending...")

    def get_type(self) -> SenderTypes:
        return SenderTypes.SNAIL_MAIL


class AramexSender(Sender):
    def send(self, destination: str, package: Any) -> None:
        logger.info("Aramex sending international...")

    def get_type(self) -> SenderTypes:
        return SenderTypes.ARAMEX


class Factory(ABC):
    @abstractmethod
    def create_sender(self) -> Sender:
        pass


class FedexFactory(Factory):
    def create_sender(self) -> Sender:
        return FedexSender()


class SnailMailFactory(Factory):
    def create_sender(self) -> Sender:
        return SnailMailSender()


class AramexFactory(Factory):
    def create_sender(self) -> Sender:
        return AramexSender()
