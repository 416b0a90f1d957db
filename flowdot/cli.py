# -*- coding: utf-8 -*-
"""
Command line driver.

  flowdot -f process.flow -o process.dot
  cat process.flow | flowdot --print-ast > process.dot

Reads flow source (file or stdin), writes DOT (file or stdout).
Log lines go to stderr. Exit status:
  0 ok, 1 unexpected failure, 2 malformed input, 3 I/O failure
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from flowdot.common.io import read_source, write_output
from flowdot.common.logger import get_logger
from flowdot.compiler import lower_tree, render_result
from flowdot.config import CompileConfig
from flowdot.graphs.nx_convert import summarize
from flowdot.syntax.parser import FlowSyntaxError, format_tree, parse_flow

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_SYNTAX = 2
EXIT_IO = 3


def build_arg_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser("flowdot", description="Compile flow pseudocode into a Graphviz DOT flowchart")
    ap.add_argument("-a", "--print-ast", action="store_true", help="Print abstract syntax tree")
    ap.add_argument("-f", "--input-file", type=str, default=None,
                    help="The input .flow file, reads from STDIN by default")
    ap.add_argument("-o", "--output-file", type=str, default=None,
                    help="The output .dot file, writes to STDOUT by default")
    ap.add_argument("--name", type=str, default=CompileConfig.graph_name, help="Graph name in the DOT output")
    ap.add_argument("--no-strict", action="store_true", help="Write `digraph` instead of `strict digraph`")
    ap.add_argument("--stats", action="store_true", help="Log node/edge/terminal/loop counts")
    ap.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    ap.add_argument("--log-file", type=str, default=None, help="Also append log lines to this file")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)
    level = logging.DEBUG if args.verbose else logging.INFO
    try:
        logger = get_logger("flowdot", log_file=args.log_file, level=level)
    except OSError as e:
        # console logging still works without the file
        logger = get_logger("flowdot", level=level)
        logger.error("cannot open log file %s: %s", args.log_file, e)
        return EXIT_IO
    cfg = CompileConfig(graph_name=args.name, strict=not args.no_strict)

    try:
        source = read_source(args.input_file)
    except OSError as e:
        logger.error("cannot read %s: %s", args.input_file or "STDIN", e)
        return EXIT_IO

    try:
        program = parse_flow(source)
    except FlowSyntaxError as e:
        logger.error("%s", e)
        return EXIT_SYNTAX

    if args.print_ast:
        sys.stdout.write(format_tree(program))

    try:
        result = lower_tree(program, cfg)
        dot = render_result(result, cfg)
    except Exception:
        logger.exception("compilation failed")
        return EXIT_FAILURE

    if args.stats:
        s = summarize(result.graph)
        logger.info(
            "nodes=%d connections=%d terminals=%d loops=%d",
            s.nodes, s.connections, s.terminals, s.loops,
        )
        if s.unreachable:
            logger.warning("unreachable node(s): %s", ", ".join(s.unreachable))

    logger.info("writing to %s", args.output_file or "stdout")
    try:
        write_output(args.output_file, dot)
    except OSError as e:
        logger.error("cannot write %s: %s", args.output_file or "STDOUT", e)
        return EXIT_IO
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
