# -*- coding: utf-8 -*-
"""
Compilation settings. The CLI overrides fields from its options.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class CompileConfig:
    # DOT output
    graph_name: str = "flow"
    strict: bool = True

    # lowering
    exit_label: str = "Exit"
    true_label: str = "True"
    false_label: str = "False"

    # implicit end-of-program marker
    terminal_color: str = "red"
    terminal_penwidth: int = 3
