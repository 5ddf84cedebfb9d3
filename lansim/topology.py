from __future__ import annotations
import networkx as nx
from typing import Iterator, Sequence

from .nodes import Node

def walk_ring(start: Node) -> Iterator[Node]:
    # start once, then successors until the walk would repeat a node
    seen = set()
    node = start
    while node is not None and id(node) not in seen:
        seen.add(id(node))
        yield node
        node = node.next

def link_ring(nodes: Sequence[Node]) -> Node:
    """Wire `next` links so that `nodes` form one cycle in list order."""
    if not nodes:
        raise ValueError("cannot link an empty ring")
    for a, b in zip(nodes, list(nodes[1:]) + [nodes[0]]):
        a.next = b
    return nodes[0]

def ring_graph(start: Node) -> nx.DiGraph:
    G = nx.DiGraph()
    for n in walk_ring(start):
        G.add_node(n.name, kind=getattr(n.kind, "value", "unknown"))
        if n.next is not None:
            G.add_edge(n.name, n.next.name)
    return G

def is_single_cycle(G: nx.DiGraph) -> bool:
    if G.number_of_nodes() == 0:
        return False
    if any(d != 1 for _, d in G.out_degree()) or any(d != 1 for _, d in G.in_degree()):
        return False
    return nx.is_strongly_connected(G)

def hop_distance(G: nx.DiGraph, src: str, dst: str) -> int:
    """Number of hops a packet needs from `src` to `dst` following the ring."""
    if src == dst:
        return G.number_of_nodes()
    try:
        return nx.shortest_path_length(G, src, dst)
    except (nx.NetworkXNoPath, nx.NodeNotFound):
        return -1
