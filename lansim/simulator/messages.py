from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, TextIO, Tuple

from ..nodes import Node

BROADCAST = "BROADCAST"
POSTSCRIPT_MAGIC = "!PS"

@dataclass(frozen=True)
class Packet:
    payload: str         # document text, or BROADCAST
    origin: str
    destination: str     # printer name, or the origin itself for broadcasts

    @classmethod
    def broadcast(cls, origin: str) -> "Packet":
        return cls(payload=BROADCAST, origin=origin, destination=origin)

    def deliverable(self, at_node: Node) -> bool:
        return at_node.is_printer and at_node.matches_name(self.destination)

    def accounting(self) -> Tuple[str, str, str]:
        """Return (job kind, author, title) for the document carried by this packet.

        PostScript documents announce themselves with a leading "!PS" and carry
        "author:" / "title:" fields terminated by a dot. Anything else is
        treated as plain ASCII.
        """
        doc = self.payload
        author, title = "Unknown", "Untitled"
        if doc.startswith(POSTSCRIPT_MAGIC):
            found = _field(doc, "author:")
            if found is not None:
                author = found
            found = _field(doc, "title:")
            if found is not None:
                title = found
            return "Postscript", author, title
        title = "ASCII DOCUMENT"
        if len(doc) >= 16:
            author = doc[8:16]
        return "ASCII Print", author, title

    def print(self, at_node: Node, sink: TextIO) -> bool:
        if not self.deliverable(at_node):
            sink.write(">>> Destinition is not a printer, print job cancelled.\n\n")
            sink.flush()
            return False
        kind, author, title = self.accounting()
        sink.write(f"\tAccounting -- author = '{author}' -- title = '{title}'\n")
        sink.write(f">>> {kind} job delivered.\n\n")
        sink.flush()
        return True

def _field(doc: str, key: str) -> Optional[str]:
    start = doc.find(key)
    if start < 0:
        return None
    start += len(key)
    end = doc.find(".", start)
    if end < 0:
        end = len(doc)
    return doc[start:end]
