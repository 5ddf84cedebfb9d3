import io
import dataclasses
import pytest
from lansim import BROADCAST, Node, Packet

def test_broadcast_packet():
    p = Packet.broadcast("Filip")
    assert p.payload == BROADCAST
    assert p.origin == p.destination == "Filip"

def test_packet_is_immutable():
    p = Packet("doc", "Filip", "Andy")
    with pytest.raises(dataclasses.FrozenInstanceError):
        p.destination = "Hans"

def test_ascii_short_document():
    assert Packet("hello", "Filip", "Andy").accounting() == ("ASCII Print", "Unknown", "ASCII DOCUMENT")

def test_ascii_long_document_author_slice():
    kind, author, title = Packet("0123456789ABCDEFGH", "Filip", "Andy").accounting()
    assert author == "89ABCDEF"
    assert title == "ASCII DOCUMENT"

def test_postscript_fields():
    p = Packet("!PS author:Bart.title:Report.", "Filip", "Andy")
    assert p.accounting() == ("Postscript", "Bart", "Report")

def test_postscript_defaults_and_open_field():
    assert Packet("!PS nothing here", "a", "b").accounting() == ("Postscript", "Unknown", "Untitled")
    assert Packet("!PS title:Open ended", "a", "b").accounting()[2] == "Open ended"

def test_print_on_printer():
    buf = io.StringIO()
    assert Packet("hello", "Filip", "Andy").print(Node.printer("Andy"), buf)
    assert buf.getvalue() == (
        "\tAccounting -- author = 'Unknown' -- title = 'ASCII DOCUMENT'\n"
        ">>> ASCII Print job delivered.\n\n"
    )

def test_print_postscript_job():
    buf = io.StringIO()
    assert Packet("!PS author:Serge.title:LAN.", "Filip", "Andy").print(Node.printer("Andy"), buf)
    assert buf.getvalue().endswith(">>> Postscript job delivered.\n\n")
    assert "author = 'Serge' -- title = 'LAN'" in buf.getvalue()

def test_print_on_non_printer_fails():
    buf = io.StringIO()
    assert not Packet("hello", "Hans", "Filip").print(Node.workstation("Filip"), buf)
    assert buf.getvalue() == ">>> Destinition is not a printer, print job cancelled.\n\n"

def test_print_on_other_printer_fails():
    assert not Packet("hello", "Filip", "Andy").print(Node.printer("Bob"), io.StringIO())
