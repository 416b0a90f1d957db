# -*- coding: utf-8 -*-
"""
Compile a .flow file (or STDIN) into a Graphviz DOT flowchart.

Usage:
  python scripts/compile_flow.py -f samples/login.flow -o outputs/login.dot
  dot -Tsvg outputs/login.dot -o outputs/login.svg
"""

from __future__ import annotations

from flowdot.cli import main


if __name__ == "__main__":
    raise SystemExit(main())
