"""
Manual walkthrough of every pattern in the package.

Wires menu and toolbar bindings to a DocumentOperations receiver, fires a
few press events on each channel, then runs the remaining pattern examples.
"""
from typing import Optional

from .core.locator import sl
from .core.logging import setup_logging, trace_dispatches
from .core.commands import (
    OpenCommand,
    CloseCommand,
    CutCommand,
    PasteCommand,
    UIEventsManager,
)
from .receivers import DocumentOperations
from .patterns import (
    ConcreteRacket,
    PrinceSyntheticGutStringDecorator,
    VSGutStringDecorator,
    WilsonProOvergripDecorator,
    ConcreteClass,
    ConcreteClass2,
    MP3Decoder,
    AACDecoder,
    NativeMP3Decoder,
    NativeAACDecoder,
    Singleton,
    Car,
    StandardCarPartsFactory,
    MuscleCarPartsFactory,
    HybridCarPartsFactory,
    FedexFactory,
    SnailMailFactory,
    AramexFactory,
    ProviderFramework,
    Waitress,
    Bartender,
    DrinkMenu,
    Computer,
    ComputerPart,
    ConcreteSubject,
    ConcreteObserver,
    AudioLib,
    AudioPlayer,
    Playing,
    Paused,
    Stopped,
    PLAYING,
    PAUSED,
    STOPPED,
    MediaPlayer,
    HTML5AudioPlayer,
    SWFAudioPlayer,
)


def build_events_manager(docs: DocumentOperations, menu_file: str, toolbar_file: str) -> UIEventsManager:
    """Bind open/close/cut/paste on both channels of the global dispatcher."""
    manager = UIEventsManager(sl.dispatcher)

    manager.add_menu_command("open", OpenCommand(docs, menu_file))
    manager.add_menu_command("close", CloseCommand(docs, menu_file))
    manager.add_menu_command("cut", CutCommand(docs))
    manager.add_menu_command("paste", PasteCommand(docs))

    manager.add_toolbar_command("open", OpenCommand(docs, toolbar_file))
    manager.add_toolbar_command("close", CloseCommand(docs, toolbar_file))
    manager.add_toolbar_command("cut", CutCommand(docs))
    manager.add_toolbar_command("paste", PasteCommand(docs))
    return manager


def run_commands(manager: UIEventsManager):
    print("--- 1. Menu commands ---")
    manager.handle_menu_press_event("open")
    manager.handle_menu_press_event("cut")
    manager.handle_menu_press_event("paste")
    manager.handle_undo_menu_press_event("paste")
    manager.handle_menu_press_event("close")

    print("--- 2. Toolbar commands ---")
    manager.handle_toolbar_press_event("open")
    manager.handle_toolbar_press_event("cut")
    manager.handle_toolbar_press_event("paste")
    manager.handle_undo_toolbar_press_event("paste")
    manager.handle_toolbar_press_event("close")


def run_decorators():
    print("--- 3. Decorator ---")
    racket = ConcreteRacket()
    for decorated in (
        PrinceSyntheticGutStringDecorator(racket),
        VSGutStringDecorator(racket),
        WilsonProOvergripDecorator(VSGutStringDecorator(racket)),
        WilsonProOvergripDecorator(WilsonProOvergripDecorator(VSGutStringDecorator(racket))),
    ):
        print(f"{decorated.__class__.__name__}: {decorated.get_price():.2f}")


def run_templates():
    print("--- 4. Template Method ---")
    ConcreteClass().template_method()
    ConcreteClass2().template_method()
    MP3Decoder(NativeMP3Decoder(), "my_song.mp3").play()
    AACDecoder(NativeAACDecoder(), "my_song.aac").play()


def run_singleton():
    print("--- 5. Singleton ---")
    print(f"Same instance: {Singleton.get_instance() is Singleton()}")


def run_creational():
    print("--- 6. Factories and Builder ---")
    for factory in (StandardCarPartsFactory(), MuscleCarPartsFactory(), HybridCarPartsFactory()):
        car = Car(factory)
        car.start()
        car.accelerate()
        car.stop()

    for factory in (SnailMailFactory(), FedexFactory(), AramexFactory()):
        sender = factory.create_sender()
        sender.send("Berlin", "parcel")
        print(f"{factory.__class__.__name__} -> {sender.get_type().name}")

    for key in ("moduleA", "moduleB", "bogus"):
        print(f"{key} -> {ProviderFramework.get_instance(key).__class__.__name__}")

    waitress = Waitress(Bartender(), DrinkMenu)
    print(f"Order: {waitress.take_order([DrinkMenu.MOJITO, DrinkMenu.MAI_TAI, DrinkMenu.BEER])}")


def run_structural_and_behavioral():
    print("--- 7. Composite, Observer, State, Strategy ---")
    tower = Computer(500)
    tower.add(ComputerPart(120))
    tower.add(ComputerPart(80))
    print(f"Computer: {tower.get_price():.2f}")

    subject = ConcreteSubject()
    observer = ConcreteObserver()
    subject.register(observer)
    subject.set_state("saved")
    subject.notify()
    print(f"Observer {observer} state: {observer.get_state()}")

    lib = AudioLib()
    states = {
        PLAYING: Playing("Playing", lib),
        PAUSED: Paused("Paused", lib),
        STOPPED: Stopped("Stopped", lib),
    }
    player = AudioPlayer(states, STOPPED)
    player.play_audio()
    player.pause_audio()
    player.stop_audio()
    print(f"Player state: {player.get_state().name}")

    for backend in (HTML5AudioPlayer(), SWFAudioPlayer()):
        media = MediaPlayer(backend)
        media.play_audio()
        media.pause_audio()


def run_demo(config_path: Optional[str] = None):
    sl.init(config_path)
    setup_logging(sl.config.data.general)
    trace_dispatches(sl.dispatcher)

    demo = sl.config.data.demo
    manager = build_events_manager(DocumentOperations(), demo.menu_file, demo.toolbar_file)

    run_commands(manager)
    run_decorators()
    run_templates()
    run_singleton()
    run_creational()
    run_structural_and_behavioral()
