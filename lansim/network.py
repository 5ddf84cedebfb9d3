from __future__ import annotations
import logging
from typing import Any, Dict, List, Optional, Sequence, TextIO

from .nodes import Node
from .serializers import to_text
from .simulator.core import send
from .simulator.messages import Packet
from .topology import link_ring
from .utils import SINK_ERRORS, require, safe_write
from .validators import validate_all

log = logging.getLogger(__name__)

class Network:
    """A token ring LAN.

    Packets are passed from one node to the next until they reach their
    destination or have travelled the whole ring. A fresh network is
    initialized but empty; wire the ring, register the workstations and set
    `first_node` to make it consistent.
    """

    def __init__(self, size: int):
        require(size > 0, f"network size must be positive, got {size}")
        self.size_hint = size
        self.first_node: Optional[Node] = None
        self.workstations: Dict[str, Node] = {}
        self._initialized = True
        require(self.is_initialized() and not self.is_consistent(),
                "a new network must be initialized and not yet consistent")

    @classmethod
    def build(cls, nodes: Sequence[Node], first: Optional[Node] = None) -> "Network":
        """Link `nodes` into a ring in list order and register its workstations."""
        require(first is None or any(n is first for n in nodes), "first node must be one of the ring nodes")
        network = cls(max(1, len(nodes)))
        link_ring(nodes)
        for n in nodes:
            if n.is_workstation:
                network.register(n)
        network.first_node = first if first is not None else nodes[0]
        log.debug("assembled ring of %d nodes starting at %s", len(nodes), network.first_node.name)
        return network

    @classmethod
    def default_example(cls) -> "Network":
        """Filip (workstation) -> n1 -> Hans (workstation) -> Andy (printer) -> Filip"""
        network = cls(2)
        filip = Node.workstation("Filip")
        n1 = Node("n1")
        hans = Node.workstation("Hans")
        andy = Node.printer("Andy")
        filip.next = n1
        n1.next = hans
        hans.next = andy
        andy.next = filip

        network.workstations[filip.name] = filip
        network.workstations[hans.name] = hans
        network.first_node = filip

        require(network.is_initialized() and network.is_consistent(),
                "default example must be consistent")
        return network

    def is_initialized(self) -> bool:
        return getattr(self, "_initialized", False)

    def register(self, node: Node):
        require(self.is_initialized(), "network is not initialized")
        self.workstations[node.name] = node

    def has_workstation(self, name: str) -> bool:
        require(self.is_initialized(), "network is not initialized")
        node = self.workstations.get(name)
        return node is not None and node.is_workstation

    def consistency_issues(self) -> List[Dict[str, Any]]:
        require(self.is_initialized(), "network is not initialized")
        issues = validate_all(self)
        if issues:
            log.debug("consistency findings: %s", issues)
        return issues

    def is_consistent(self) -> bool:
        return not self.consistency_issues()

    def request_broadcast(self, sink: TextIO) -> bool:
        require(self.is_consistent(), "broadcast on an inconsistent network")

        safe_write(sink, "Broadcast Request\n")
        packet = Packet.broadcast(self.first_node.name)
        trip = send(self.first_node, packet, sink, broadcast=True)
        log.debug("broadcast from %s took %d hops", packet.origin, trip.hops)
        safe_write(sink, ">>> Broadcast travelled whole token ring.\n\n")
        return True

    def request_print(self, workstation: str, document: str, printer: str, sink: TextIO) -> bool:
        require(self.is_consistent(), "print request on an inconsistent network")
        require(self.has_workstation(workstation), f"unknown workstation {workstation!r}")

        safe_write(sink, f"'{workstation}' requests printing of '{document}' on '{printer}' ...\n")
        packet = Packet(payload=document, origin=workstation, destination=printer)
        trip = send(self.workstations[workstation], packet, sink)

        if not trip.delivered:
            log.debug("%s not found on the ring after %d hops", printer, trip.hops)
            safe_write(sink, ">>> Destinition not found, print job cancelled.\n\n", flush=True)
            return False
        try:
            return packet.print(trip.stopped_at, sink)
        except SINK_ERRORS as exc:
            log.debug("ignoring sink failure while printing: %s", exc)
            return packet.deliverable(trip.stopped_at)

    def __str__(self) -> str:
        require(self.is_initialized(), "network is not initialized")
        if self.first_node is None:
            return ""
        return to_text(self.first_node)
