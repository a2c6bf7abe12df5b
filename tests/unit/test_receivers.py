import pytest
from patternkit.receivers import DocumentOperations, IDocumentOperations, Receiver

def test_document_operations_trace(log_messages):
    docs = DocumentOperations()
    docs.open("myfile.txt")
    docs.cut()
    docs.paste()
    docs.undo_paste()
    docs.close("myfile.txt")

    assert log_messages == [
        "Opening myfile.txt...",
        "Cutting some text...",
        "Pasting some text...",
        "Undoing last paste operation...",
        "Closing myfile.txt...",
    ]

def test_receiver_trace(log_messages):
    receiver = Receiver()
    receiver.do_something()
    receiver.undo_something()

    assert log_messages == ["Doing something...", "Undoing something..."]

def test_interface_is_abstract():
    with pytest.raises(TypeError):
        IDocumentOperations()
