from .network import Network
from .nodes import LabelFormat, Node, NodeKind
from .simulator.messages import BROADCAST, Packet
from .utils import PreconditionError

__all__ = ["Network", "Node", "NodeKind", "LabelFormat", "Packet", "BROADCAST", "PreconditionError"]
