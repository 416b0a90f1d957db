# -*- coding: utf-8 -*-
"""
Graph model built by the lowering pass.

  Node        id + AttrSet, declared once on creation (and again when restyled)
  Edge        dangling edge: source node + optional label, no destination yet
  Connection  landed edge record: source id -> target id (+ label)
  FlowGraph   append-only list of Node declarations and Connections, in
              emission order; owns the IdGenerator of one compilation

A node declared twice (see FlowGraph.restyle) relies on DOT semantics:
the later declaration's attributes take precedence.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Union

from .attrs import Attr, AttrSet


class IdGenerator:
    """
    Lazy, infinite stream of node identifiers: n0, n1, n2, ...
    """

    def __init__(self, prefix: str = "n"):
        self.prefix = prefix
        self._next = 0

    def next_id(self) -> str:
        nid = f"{self.prefix}{self._next}"
        self._next += 1
        return nid

    def __iter__(self) -> Iterator[str]:
        return self

    def __next__(self) -> str:
        return self.next_id()


@dataclass(frozen=True)
class Node:
    id: str
    attrs: AttrSet = field(default_factory=AttrSet, compare=False)

    def with_attrs(self, *attrs: Attr) -> "Node":
        return Node(self.id, self.attrs.layered(*attrs))


@dataclass(frozen=True)
class Edge:
    source: Node
    label: Optional[str] = None

    def labelled(self, label: str) -> "Edge":
        return Edge(self.source, label)

    @property
    def source_id(self) -> str:
        return self.source.id


@dataclass(frozen=True)
class Connection:
    source_id: str
    target_id: str
    label: Optional[str] = None


Record = Union[Node, Connection]


class FlowGraph:
    def __init__(self, id_generator: Optional[IdGenerator] = None):
        self.ids = id_generator if id_generator is not None else IdGenerator()
        self._records: List[Record] = []

    # ---------------------------
    # Construction
    # ---------------------------
    def create_node(self, *attrs: Attr) -> Node:
        node = Node(self.ids.next_id(), AttrSet(attrs))
        self._records.append(node)
        return node

    def connect(self, edge: Edge, target: Node) -> Connection:
        conn = Connection(edge.source_id, target.id, edge.label)
        self._records.append(conn)
        return conn

    def restyle(self, node: Node, *attrs: Attr) -> Node:
        styled = node.with_attrs(*attrs)
        self._records.append(styled)
        return styled

    # ---------------------------
    # Read access
    # ---------------------------
    @property
    def records(self) -> List[Record]:
        return list(self._records)

    @property
    def nodes(self) -> List[Node]:
        """Node declarations in emission order (restyles included)."""
        return [r for r in self._records if isinstance(r, Node)]

    @property
    def connections(self) -> List[Connection]:
        return [r for r in self._records if isinstance(r, Connection)]

    @property
    def node_ids(self) -> List[str]:
        """Distinct node ids in first-declaration order."""
        seen = {}
        for n in self.nodes:
            seen.setdefault(n.id, None)
        return list(seen)

    def final_declaration(self, node_id: str) -> Optional[Node]:
        found = None
        for n in self.nodes:
            if n.id == node_id:
                found = n
        return found
