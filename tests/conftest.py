import io, os
import pytest

os.environ.setdefault("MPLBACKEND", "Agg")

from lansim import Network, Node

class BrokenSink(io.StringIO):
    """A sink whose writes always fail."""
    def write(self, s):
        raise OSError("sink is gone")

@pytest.fixture
def net():
    return Network.default_example()

@pytest.fixture
def sink():
    return io.StringIO()

@pytest.fixture
def broken_sink():
    return BrokenSink()

@pytest.fixture
def closed_sink():
    buf = io.StringIO()
    buf.close()
    return buf

@pytest.fixture
def default_text():
    return ("Workstation Filip [Workstation] -> Node n1 [Node] -> "
            "Workstation Hans [Workstation] -> Printer Andy [Printer] ->  ... ")

@pytest.fixture
def default_ring():
    return {
        "first": "Filip",
        "nodes": [
            {"name": "Filip", "kind": "workstation"},
            {"name": "n1", "kind": "node"},
            {"name": "Hans", "kind": "workstation"},
            {"name": "Andy", "kind": "printer"},
        ],
    }

@pytest.fixture
def make_ring():
    """'wnp' -> workstation, node, printer ring named w0, n1, p2 ..."""
    kinds = {"w": Node.workstation, "p": Node.printer, "n": Node}
    def build(spec):
        nodes = [kinds[c](f"{c}{i}") for i, c in enumerate(spec)]
        return Network.build(nodes), nodes
    return build
