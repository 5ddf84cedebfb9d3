from __future__ import annotations
from typing import Any, Dict, List, Set

from .nodes import Node
from .topology import walk_ring

def registered_non_workstations(workstations: Dict[str, Node]) -> List[Dict[str, Any]]:
    issues = []
    for key, node in workstations.items():
        if not node.is_workstation:
            issues.append({"type": "registered_non_workstation", "name": key})
    return issues

def ring_walk(first: Node) -> List[Dict[str, Any]]:
    # Walks by name and stops on the first revisit, so a broken ring still terminates.
    issues = []
    encountered: Dict[str, Node] = {}
    node = first
    printers = workstations = 0
    while node is not None and node.name not in encountered:
        encountered[node.name] = node
        if node.is_workstation:
            workstations += 1
        if node.is_printer:
            printers += 1
        node = node.next
    if node is None:
        issues.append({"type": "open_ring", "after": list(encountered)[-1]})
    elif node is not first:
        issues.append({"type": "not_circular", "revisited": node.name})
    if printers == 0:
        issues.append({"type": "missing_printer"})
    if workstations == 0:
        issues.append({"type": "missing_workstation"})
    return issues

def registration_mismatches(first: Node, workstations: Dict[str, Node]) -> List[Dict[str, Any]]:
    issues = []
    on_ring: Set[int] = set()
    for node in walk_ring(first):
        on_ring.add(id(node))
        if node.is_workstation and workstations.get(node.name) is not node:
            issues.append({"type": "unregistered_workstation", "name": node.name})
    for key, ws in workstations.items():
        if id(ws) not in on_ring:
            issues.append({"type": "registered_not_on_ring", "name": key})
    return issues

def validate_all(network) -> List[Dict[str, Any]]:
    first = network.first_node
    if first is None:
        return [{"type": "empty_ring"}]
    issues = []
    if not network.workstations:
        issues.append({"type": "no_registered_workstations"})
    issues += registered_non_workstations(network.workstations)
    issues += ring_walk(first)
    issues += registration_mismatches(first, network.workstations)
    return issues
