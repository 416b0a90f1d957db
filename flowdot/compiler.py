# -*- coding: utf-8 -*-
"""
Pipeline: source text -> syntax tree -> FlowGraph -> DOT text.

Usage:
  from flowdot.compiler import compile_source
  dot = compile_source("read input; if ok { store it; }")
"""

from __future__ import annotations

import logging
from typing import Optional

from flowdot.config import CompileConfig
from flowdot.graphs.dot_writer import render_dot
from flowdot.graphs.lowering import FlowLowering, LoweringResult
from flowdot.graphs.model import FlowGraph
from flowdot.syntax.parser import parse_flow
from flowdot.syntax.tree import Block

logger = logging.getLogger(__name__)


def lower_tree(program: Block, config: Optional[CompileConfig] = None) -> LoweringResult:
    return FlowLowering(FlowGraph(), config or CompileConfig()).lower_program(program)


def render_result(result: LoweringResult, config: Optional[CompileConfig] = None) -> str:
    cfg = config or CompileConfig()
    return render_dot(result.graph, name=cfg.graph_name, strict=cfg.strict)


def compile_source(text: str, config: Optional[CompileConfig] = None) -> str:
    """
    Compile flow source to DOT. Raises FlowSyntaxError on malformed input;
    nothing is produced in that case.
    """
    cfg = config or CompileConfig()
    program = parse_flow(text)
    logger.debug("parsed %d top-level statement(s)", len(program.statements))
    result = lower_tree(program, cfg)
    return render_result(result, cfg)
