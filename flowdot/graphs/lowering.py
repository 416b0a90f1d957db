# -*- coding: utf-8 -*-
"""
Lower a flow syntax tree into a FlowGraph.

Every statement builder has the shape

    frontier_out = lower(stmt, frontier_in)

where a frontier is the list of dangling edges (paths that have executed so
far and wait to enter the next statement). A statement creates its entry
node, lands every incoming edge on it and returns the edges leaving it.

  Step   rectangle node; exits: [node]
  Exit   rectangle "Exit" node; exits: [] (path ends here)
  If     diamond node; exits: then-exits + (else-exits | [False edge])
  While  diamond node; body exits land back on it; exits: [False edge]

Whatever is left in the program's final frontier fell off the end without an
explicit exit; those source nodes are restyled as terminal markers.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from flowdot.config import CompileConfig
from flowdot.syntax.tree import Block, Exit, If, Statement, Step, While
from .attrs import Color, Label, PenWidth, Shape, ShapeKind
from .model import Edge, FlowGraph, Node

logger = logging.getLogger(__name__)

Frontier = List[Edge]


@dataclass
class LoweringResult:
    """
    graph: every node declaration and connection, in emission order
    exits: final frontier of the program (paths without an explicit exit)
    terminals: restyled terminal declarations, one per distinct exit source
    """
    graph: FlowGraph
    exits: Frontier = field(default_factory=list)
    terminals: List[Node] = field(default_factory=list)


class FlowLowering:
    def __init__(self, graph: Optional[FlowGraph] = None, config: Optional[CompileConfig] = None):
        self.graph = graph if graph is not None else FlowGraph()
        self.config = config if config is not None else CompileConfig()

    # ---------------------------
    # Public API
    # ---------------------------
    def lower_program(self, program: Block) -> LoweringResult:
        if not isinstance(program, Block):
            raise TypeError(f"Expected Block at program root, got {type(program).__name__}")

        exits = self.lower_block(program, [])
        terminals = self._mark_terminals(exits)
        logger.debug(
            "lowered program: %d declarations, %d connections, %d terminal(s)",
            len(self.graph.nodes), len(self.graph.connections), len(terminals),
        )
        return LoweringResult(graph=self.graph, exits=exits, terminals=terminals)

    def lower(self, stmt: Statement, frontier: Frontier) -> Frontier:
        if isinstance(stmt, Block):
            return self.lower_block(stmt, frontier)
        if isinstance(stmt, Step):
            return self.lower_step(stmt, frontier)
        if isinstance(stmt, Exit):
            return self.lower_exit(stmt, frontier)
        if isinstance(stmt, If):
            return self.lower_if(stmt, frontier)
        if isinstance(stmt, While):
            return self.lower_while(stmt, frontier)
        raise TypeError(f"Unsupported statement: {type(stmt).__name__}")

    # ---------------------------
    # Statement builders
    # ---------------------------
    def lower_block(self, block: Block, frontier: Frontier) -> Frontier:
        for stmt in block.statements:
            frontier = self.lower(stmt, frontier)
        return frontier

    def lower_step(self, stmt: Step, frontier: Frontier) -> Frontier:
        node = self._enter(frontier, Label(stmt.text), Shape(ShapeKind.RECTANGLE))
        logger.debug("step %s: %r", node.id, stmt.text)
        return [Edge(node)]

    def lower_exit(self, stmt: Exit, frontier: Frontier) -> Frontier:
        node = self._enter(frontier, Label(self.config.exit_label), Shape(ShapeKind.RECTANGLE))
        logger.debug("exit %s", node.id)
        return []

    def lower_if(self, stmt: If, frontier: Frontier) -> Frontier:
        cond = self._condition(stmt.condition, frontier)
        taken = Edge(cond, self.config.true_label)
        untaken = Edge(cond, self.config.false_label)

        exits = self.lower_block(stmt.then_block, [taken])
        if stmt.else_block is not None:
            exits = exits + self.lower_block(stmt.else_block, [untaken])
        else:
            # no else: the False edge falls through to whatever comes next
            exits = exits + [untaken]
        logger.debug("if %s: %d exit(s)", cond.id, len(exits))
        return exits

    def lower_while(self, stmt: While, frontier: Frontier) -> Frontier:
        cond = self._condition(stmt.condition, frontier)

        body_exits = self.lower_block(stmt.body, [Edge(cond, self.config.true_label)])
        for edge in body_exits:
            self.graph.connect(edge, cond)  # back-edge
        logger.debug("while %s: %d back-edge(s)", cond.id, len(body_exits))
        return [Edge(cond, self.config.false_label)]

    # ---------------------------
    # Helpers
    # ---------------------------
    def _enter(self, frontier: Frontier, *attrs) -> Node:
        node = self.graph.create_node(*attrs)
        for edge in frontier:
            self.graph.connect(edge, node)
        return node

    def _condition(self, text: str, frontier: Frontier) -> Node:
        return self._enter(frontier, Label(text), Shape(ShapeKind.DIAMOND))

    def _mark_terminals(self, exits: Frontier) -> List[Node]:
        terminals: List[Node] = []
        seen = set()
        for edge in exits:
            if edge.source_id in seen:
                continue
            seen.add(edge.source_id)
            terminals.append(
                self.graph.restyle(
                    edge.source,
                    Color(self.config.terminal_color),
                    PenWidth(self.config.terminal_penwidth),
                )
            )
        return terminals


if __name__ == "__main__":
    from flowdot.syntax.parser import parse_flow

    sample = """
read order;
if in stock {
    pack order;
} else {
    notify customer;
    exit;
}
while labels missing {
    print label;
}
ship order;
"""
    res = FlowLowering().lower_program(parse_flow(sample))
    print("nodes:", len(res.graph.node_ids), "connections:", len(res.graph.connections))
    for c in res.graph.connections:
        print(c.source_id, "->", c.target_id, c.label or "")
    print("terminals:", [t.id for t in res.terminals])
