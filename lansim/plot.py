from __future__ import annotations
import networkx as nx
import matplotlib.pyplot as plt

from .nodes import Node
from .topology import ring_graph

COLORS = {"workstation": "lightgreen", "printer": "orange", "node": "lightblue"}

def draw_ring(start: Node, out: str, title: str = "Token Ring LAN") -> nx.DiGraph:
    G = ring_graph(start)
    pos = nx.circular_layout(G)
    colors = [COLORS.get(G.nodes[n]["kind"], "lightgray") for n in G.nodes()]

    fig, ax = plt.subplots(figsize=(6, 6))
    nx.draw(G, pos, ax=ax, with_labels=True, node_color=colors, node_size=2000,
            font_size=12, font_weight="bold", arrows=True, connectionstyle="arc3,rad=0.1")
    ax.set_title(title, fontsize=14)
    fig.savefig(out)
    plt.close(fig)
    return G
