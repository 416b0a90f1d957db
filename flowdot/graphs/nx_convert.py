# -*- coding: utf-8 -*-
"""
FlowGraph -> networkx.MultiDiGraph, plus a small structural summary.

Outputs:
  - nx.MultiDiGraph where:
      node attrs: attributes of the node's last declaration
                  (label, shape, and color/penwidth for terminals)
      edge attrs: label (None for plain sequencing)
  - GraphSummary: counts used by the CLI (--stats) and tests; loops are
    the targets of DFS back-edges

MultiDiGraph keeps parallel edges, e.g. the True and False edges of an
`if` with an empty body that land on the same node.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

import networkx as nx

from .model import FlowGraph


@dataclass
class GraphSummary:
    nodes: int
    connections: int
    terminals: int
    loops: int
    unreachable: List[str] = field(default_factory=list)


def to_networkx(graph: FlowGraph) -> nx.MultiDiGraph:
    g = nx.MultiDiGraph()
    for node in graph.nodes:
        if node.id in g:
            # later declaration wins, as in DOT
            g.nodes[node.id].update(node.attrs.as_dict())
        else:
            g.add_node(node.id, **node.attrs.as_dict())
    for conn in graph.connections:
        g.add_edge(conn.source_id, conn.target_id, label=conn.label)
    return g


def unreachable_nodes(g: nx.MultiDiGraph) -> List[str]:
    """
    Nodes not reachable from the first declared node (e.g. statements after `exit;`).
    """
    if g.number_of_nodes() == 0:
        return []
    entry = next(iter(g.nodes))
    reached = nx.descendants(g, entry) | {entry}
    return [n for n in g.nodes if n not in reached]


def loop_headers(g: nx.MultiDiGraph) -> List[str]:
    """
    Targets of DFS back-edges (edges into a node still on the DFS stack).
    In a structured flow graph these are exactly the `while` conditions
    whose body loops back; linear in the graph size.
    """
    on_stack = set()
    headers = {}
    for u, v, kind in nx.dfs_labeled_edges(g):
        if kind == "forward":
            on_stack.add(v)
        elif kind == "reverse":
            on_stack.discard(v)
        elif kind == "nontree" and v in on_stack:
            headers.setdefault(v, None)
    return list(headers)


def summarize(graph: FlowGraph) -> GraphSummary:
    g = to_networkx(graph)
    terminals = sum(1 for _, attrs in g.nodes(data=True) if "color" in attrs)
    loops = len(loop_headers(g))
    return GraphSummary(
        nodes=g.number_of_nodes(),
        connections=g.number_of_edges(),
        terminals=terminals,
        loops=loops,
        unreachable=unreachable_nodes(g),
    )
