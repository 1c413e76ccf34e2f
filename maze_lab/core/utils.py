# maze_lab/core/utils.py
# Helpers for walking a goal node back to the root of its search tree.
from __future__ import annotations
from typing import List, Tuple
from .node import Node


def reconstruct_path(node: Node) -> Tuple[List, int]:
    actions = []
    cost = node.path_cost
    cur = node
    while cur.parent is not None:
        actions.append(cur.action)
        cur = cur.parent
    actions.reverse()
    return actions, cost


def path_states(node: Node) -> List:
    states = []
    cur = node
    while cur is not None:
        states.append(cur.state)
        cur = cur.parent
    states.reverse()
    return states
