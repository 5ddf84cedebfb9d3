from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, TextIO, Tuple

class NodeKind(Enum):
    NODE = "node"
    WORKSTATION = "workstation"
    PRINTER = "printer"

class LabelFormat(Enum):
    TEXT = "text"
    HTML = "html"
    XML = "xml"

# kind -> (text prefix, text suffix, element tag)
_LABELS: Dict[NodeKind, Tuple[str, str, str]] = {
    NodeKind.NODE: ("Node ", " [Node]", "node"),
    NodeKind.WORKSTATION: ("Workstation ", " [Workstation]", "workstation"),
    NodeKind.PRINTER: ("Printer ", " [Printer]", "printer"),
}

@dataclass(eq=False)
class Node:
    """A single element of the token ring.

    Nodes compare by identity; two nodes with the same name are still
    different ring members.
    """
    name: str
    kind: Any = NodeKind.NODE
    next: Optional["Node"] = field(default=None, repr=False)

    @classmethod
    def workstation(cls, name: str) -> "Node":
        return cls(name, NodeKind.WORKSTATION)

    @classmethod
    def printer(cls, name: str) -> "Node":
        return cls(name, NodeKind.PRINTER)

    @property
    def is_workstation(self) -> bool:
        return self.kind is NodeKind.WORKSTATION

    @property
    def is_printer(self) -> bool:
        return self.kind is NodeKind.PRINTER

    def matches_name(self, s: str) -> bool:
        return s == self.name

    def log_pass_through(self, sink: TextIO):
        sink.write(f"\tNode '{self.name}' passes packet on.\n")
        sink.flush()

    def accept_broadcast(self, sink: TextIO):
        # "broadcase" is part of the trace format
        sink.write(f"\tNode '{self.name}' accepts broadcase packet.\n")

    def label(self, fmt: LabelFormat = LabelFormat.TEXT) -> str:
        entry = _LABELS.get(self.kind)
        if entry is None:
            return "(Unexpected)" if fmt is LabelFormat.HTML else "<unknown></unknown>"
        prefix, suffix, tag = entry
        if fmt is LabelFormat.TEXT:
            return f"{prefix}{self.name}{suffix}"
        return f"<{tag}>{self.name}</{tag}>"

    def render_label(self, sink: TextIO, fmt: LabelFormat = LabelFormat.TEXT):
        sink.write(self.label(fmt))
