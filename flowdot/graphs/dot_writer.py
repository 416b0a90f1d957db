# -*- coding: utf-8 -*-
"""
Render a FlowGraph as Graphviz DOT text.

Output shape:

    strict digraph flow {
    n0 [label="read input", shape=rectangle];
    n1 [label="valid?", shape=diamond];
    n0 -> n1;
    n1 -> n2 [label="True"];
    ...
    }

Records are written in emission order, without merging: a node declared a
second time (terminal restyle) is left to DOT's last-declaration-wins rule.
"""

from __future__ import annotations

import re
from typing import List

from .attrs import escape_dot_string
from .model import Connection, FlowGraph, Node

_DOT_ID = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")
_DOT_KEYWORDS = {"node", "edge", "graph", "digraph", "subgraph", "strict"}


def dot_id(name: str) -> str:
    """Plain DOT identifier as-is, anything else quoted."""
    if _DOT_ID.match(name) and name.lower() not in _DOT_KEYWORDS:
        return name
    return f'"{escape_dot_string(name)}"'


class DotWriter:
    def __init__(self):
        self._lines: List[str] = []

    def write_node(self, node: Node) -> None:
        attrs = ", ".join(a.as_dot() for a in node.attrs)
        if attrs:
            self.write_line(f"{dot_id(node.id)} [{attrs}];")
        else:
            self.write_line(f"{dot_id(node.id)};")

    def write_edge(self, conn: Connection) -> None:
        line = f"{dot_id(conn.source_id)} -> {dot_id(conn.target_id)}"
        if conn.label is not None:
            line += f' [label="{escape_dot_string(conn.label)}"]'
        self.write_line(line + ";")

    def write_line(self, line: str) -> None:
        self._lines.append(line.strip())

    def consume(self) -> str:
        text = "".join(f"{line}\n" for line in self._lines)
        self._lines = []
        return text


def render_dot(graph: FlowGraph, name: str = "flow", strict: bool = True) -> str:
    dot = DotWriter()
    header = "strict digraph" if strict else "digraph"
    if name:
        header = f"{header} {dot_id(name)}"
    dot.write_line(f"{header} {{")
    for record in graph.records:
        if isinstance(record, Node):
            dot.write_node(record)
        else:
            dot.write_edge(record)
    dot.write_line("}")
    return dot.consume()
