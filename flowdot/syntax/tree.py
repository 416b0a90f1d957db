# -*- coding: utf-8 -*-
"""
Syntax tree of the flow language.

  Step(text)                      a plain action, e.g. `open the door;`
  Exit()                          `exit;` terminates the flow
  If(condition, then_block, else_block=None)
  While(condition, body)
  Block(statements)               ordered statements, also the program root

Nodes are frozen; the lowering pass only reads them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple, Union


@dataclass(frozen=True)
class Step:
    text: str


@dataclass(frozen=True)
class Exit:
    pass


@dataclass(frozen=True)
class If:
    condition: str
    then_block: "Block"
    else_block: Optional["Block"] = None


@dataclass(frozen=True)
class While:
    condition: str
    body: "Block"


@dataclass(frozen=True)
class Block:
    statements: Tuple["Statement", ...] = ()

    def __iter__(self):
        return iter(self.statements)


Statement = Union[Step, Exit, If, While, Block]
