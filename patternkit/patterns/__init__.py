"""
Peripheral patterns.

Creational: Abstract Factory, Factory Method, Static Factory, Builder, Singleton
Structural: Decorator, Composite
Behavioral: Template Method, Observer, State, Strategy

The Command pattern lives in patternkit.core.commands.
"""
from .decorator import (
    Racket,
    ConcreteRacket,
    RacketDecorator,
    PrinceSyntheticGutStringDecorator,
    VSGutStringDecorator,
    WilsonProOvergripDecorator,
)
from .template import (
    AbstractClass,
    ConcreteClass,
    ConcreteClass2,
    AudioDecoder,
    AudioInputStream,
    INativeDecoder,
    NativeAACDecoder,
    NativeMP3Decoder,
    AACDecoder,
    MP3Decoder,
)
from .singleton import Singleton
from .abstract_factory import (
    Car,
    CarPartsFactory,
    StandardCarPartsFactory,
    MuscleCarPartsFactory,
    HybridCarPartsFactory,
    Engine,
    CombustionEngine,
    V8Engine,
    HybridEngine,
    PassengerCompartment,
    StandardPassengerCompartment,
    MusclePassengerCompartment,
    HybridPassengerCompartment,
)
from .factory_method import (
    Factory,
    FedexFactory,
    SnailMailFactory,
    AramexFactory,
    Sender,
    SenderTypes,
    FedexSender,
    SnailMailSender,
    AramexSender,
)
from .static_factory import ProviderFramework, Metadata, DefaultModule, ModuleA, ModuleB
from .observer import IObserver, Subject, ConcreteSubject, ConcreteObserver
from .builder import DrinkMenu, Bartender, Waitress
from .composite import IComponent, Computer, ComputerPart
from .state import AudioLib, AudioPlayer, IState, Playing, Paused, Stopped, PLAYING, PAUSED, STOPPED
from .strategy import IStrategy, HTML5AudioPlayer, SWFAudioPlayer, MediaPlayer

__all__ = [
    # Decorator
    "Racket",
    "ConcreteRacket",
    "RacketDecorator",
    "PrinceSyntheticGutStringDecorator",
    "VSGutStringDecorator",
    "WilsonProOvergripDecorator",
    # Template Method
    "AbstractClass",
    "ConcreteClass",
    "ConcreteClass2",
    "AudioDecoder",
    "AudioInputStream",
    "INativeDecoder",
    "NativeAACDecoder",
    "NativeMP3Decoder",
    "AACDecoder",
    "MP3Decoder",
    # Singleton
    "Singleton",
    # Abstract Factory
    "Car",
    "CarPartsFactory",
    "StandardCarPartsFactory",
    "MuscleCarPartsFactory",
    "HybridCarPartsFactory",
    "Engine",
    "CombustionEngine",
    "V8Engine",
    "HybridEngine",
    "PassengerCompartment",
    "StandardPassengerCompartment",
    "MusclePassengerCompartment",
    "HybridPassengerCompartment",
    # Factory Method
    "Factory",
    "FedexFactory",
    "SnailMailFactory",
    "AramexFactory",
    "Sender",
    "SenderTypes",
    "FedexSender",
    "SnailMailSender",
    "AramexSender",
    # Static Factory
    "ProviderFramework",
    "Metadata",
    "DefaultModule",
    "ModuleA",
    "ModuleB",
    # Observer
    "IObserver",
    "Subject",
    "ConcreteSubject",
    "ConcreteObserver",
    # Builder
    "DrinkMenu",
    "Bartender",
    "Waitress",
    # Composite
    "IComponent",
    "Computer",
    "ComputerPart",
    # State
    "AudioLib",
    "AudioPlayer",
    "IState",
    "Playing",
    "Paused",
    "Stopped",
    "PLAYING",
    "PAUSED",
    "STOPPED",
    # Strategy
    "IStrategy",
    "HTML5AudioPlayer",
    "SWFAudioPlayer",
    "MediaPlayer",
]
