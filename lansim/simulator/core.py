from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import TextIO

from ..nodes import Node
from ..utils import SINK_ERRORS
from .messages import Packet

log = logging.getLogger(__name__)

@dataclass
class Traversal:
    stopped_at: Node
    hops: int
    delivered: bool      # False when the packet came back to its origin

def send(start: Node, packet: Packet, sink: TextIO, broadcast: bool = False) -> Traversal:
    """Walk `packet` around the ring beginning at `start`.

    Every visited node logs a pass-through (broadcasts are accepted first).
    A broadcast stops once the walker is back at `start`. A unicast packet
    stops at the first node named like its destination, or at the node named
    like its origin, whichever comes first; reaching the origin means the
    whole ring was travelled without delivery.
    """
    node = start
    hops = 0
    while True:
        try:
            if broadcast:
                node.accept_broadcast(sink)
            node.log_pass_through(sink)
        except SINK_ERRORS as exc:
            log.debug("sink failed at %s: %s", node.name, exc)
        node = node.next
        hops += 1

        if broadcast:
            if node is start:
                return Traversal(node, hops, delivered=True)
        elif node.matches_name(packet.origin):
            return Traversal(node, hops, delivered=False)
        elif node.matches_name(packet.destination):
            return Traversal(node, hops, delivered=True)
