from unittest.mock import MagicMock, call
from patternkit.patterns import (
    AbstractClass,
    ConcreteClass,
    ConcreteClass2,
    MP3Decoder,
    AACDecoder,
    NativeMP3Decoder,
    NativeAACDecoder,
    AudioInputStream,
)

def test_plays_mp3s():
    native = MagicMock(spec=NativeMP3Decoder)
    MP3Decoder(native, "my_song.mp3").play()

    native.decode.assert_called_once()
    stream = native.decode.call_args[0][0]
    assert isinstance(stream, AudioInputStream)
    assert stream.path == "my_song.mp3"

def test_plays_aacs():
    native = MagicMock(spec=NativeAACDecoder)
    AACDecoder(native, "my_song.aac").play()

    native.decode.assert_called_once()

def test_play_step_order():
    decoder = MP3Decoder(MagicMock(spec=NativeMP3Decoder), "x.mp3")
    tracker = MagicMock()
    decoder.load_stream = tracker.load_stream
    decoder.before_decode = tracker.before_decode
    decoder.decode = tracker.decode
    decoder.after_decode = tracker.after_decode

    decoder.play()

    assert [c[0] for c in tracker.method_calls] == [
        "load_stream", "before_decode", "decode", "after_decode",
    ]
    tracker.decode.assert_called_once_with(tracker.load_stream.return_value)

def test_template_method_order():
    calls = []

    class Recorder(AbstractClass):
        def operation1(self):
            calls.append("operation1")

        def operation2(self):
            calls.append("operation2")

        def hook2(self):
            calls.append("hook2")

    Recorder().template_method()

    # hook1 keeps its empty default
    assert calls == ["operation1", "operation2", "hook2"]

def test_concrete_classes_log_steps(log_messages):
    ConcreteClass().template_method()
    ConcreteClass2().template_method()

    assert log_messages == [
        "ConcreteClass: hook1 called...",
        "ConcreteClass: operation1 called...",
        "ConcreteClass: operation2 called...",
        "ConcreteClass2: operation1 called...",
        "ConcreteClass2: operation2 called...",
        "ConcreteClass2: hook2 called...",
    ]
