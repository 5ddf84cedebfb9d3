from __future__ import annotations
import json
from typing import Any, Dict, List

from .network import Network
from .nodes import Node, NodeKind
from .topology import walk_ring

class RingFileError(ValueError):
    pass

def parse_node(entry: Dict[str, Any]) -> Node:
    if not isinstance(entry, dict) or not entry.get("name"):
        raise RingFileError(f"node entry needs a name: {entry!r}")
    kind = str(entry.get("kind", "node")).lower()
    try:
        return Node(str(entry["name"]), NodeKind(kind))
    except ValueError:
        raise RingFileError(f"unknown node kind {kind!r} for {entry['name']!r}") from None

def parse_ring(data: Dict[str, Any]) -> Network:
    """Build a network from a ring description.

    Nodes are linked in list order, the last one back to the first.
    """
    entries = data.get("nodes") or []
    if not entries:
        raise RingFileError("ring description has no nodes")
    nodes: List[Node] = [parse_node(e) for e in entries]

    names = [n.name for n in nodes]
    dupes = sorted({n for n in names if names.count(n) > 1})
    if dupes:
        raise RingFileError(f"duplicate node names: {', '.join(dupes)}")

    first = nodes[0]
    if data.get("first"):
        matches = [n for n in nodes if n.name == data["first"]]
        if not matches:
            raise RingFileError(f"first node {data['first']!r} is not on the ring")
        first = matches[0]
    return Network.build(nodes, first=first)

def load_ring(path: str) -> Network:
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as exc:
            raise RingFileError(f"{path}: {exc}") from exc
    if not isinstance(data, dict):
        raise RingFileError(f"{path}: expected a JSON object")
    return parse_ring(data)

def dump_ring(network: Network) -> Dict[str, Any]:
    return {
        "first": network.first_node.name,
        "nodes": [{"name": n.name, "kind": n.kind.value} for n in walk_ring(network.first_node)],
    }
