# -*- coding: utf-8 -*-
"""
Flow language parser (lark, LALR).

Source example:

    read input;
    if input is valid {
        store it;
    } else {
        report error;
        exit;
    }
    while queue not empty {
        process next item;
    }

Output: flowdot.syntax.tree.Block (program root).
Malformed input raises FlowSyntaxError; there is no error recovery.
"""

from __future__ import annotations

from typing import List, Optional

from lark import Lark, Transformer
from lark.exceptions import UnexpectedInput

from .tree import Block, Exit, If, Statement, Step, While


FLOW_GRAMMAR = r"""
start: statement*

?statement: step
          | if_branch
          | while_loop

step: _EXIT ";"      -> exit_step
    | TEXT ";"       -> text_step

if_branch: _IF TEXT "{" block "}" else_branch?
else_branch: _ELSE "{" block "}"
while_loop: _WHILE TEXT "{" block "}"
block: statement*

// keywords are whole words; `exit` only when it is the entire step
_IF.2: /if\b/
_ELSE.2: /else\b/
_WHILE.2: /while\b/
_EXIT.2: /exit(?=\s*;)/
TEXT: /[^{};\s][^{};]*/

%import common.WS
%ignore WS
"""


class FlowSyntaxError(ValueError):
    """Raised when flow source text does not match the grammar."""

    def __init__(self, message: str, line: Optional[int] = None, column: Optional[int] = None) -> None:
        super().__init__(message)
        self.line = line
        self.column = column


def _clean(text: str) -> str:
    # collapse line breaks and indentation inside multi-line text
    return " ".join(str(text).split())


class _FlowTransformer(Transformer):
    def start(self, items: List[Statement]) -> Block:
        return Block(tuple(items))

    def block(self, items: List[Statement]) -> Block:
        return Block(tuple(items))

    def text_step(self, items) -> Step:
        return Step(_clean(items[0]))

    def exit_step(self, items) -> Exit:
        return Exit()

    def if_branch(self, items) -> If:
        condition, then_block = items[0], items[1]
        else_block = items[2] if len(items) > 2 else None
        return If(_clean(condition), then_block, else_block)

    def else_branch(self, items) -> Block:
        return items[0]

    def while_loop(self, items) -> While:
        return While(_clean(items[0]), items[1])


_PARSER: Optional[Lark] = None


def _get_parser() -> Lark:
    global _PARSER
    if _PARSER is None:
        _PARSER = Lark(FLOW_GRAMMAR, parser="lalr", start="start")
    return _PARSER


def parse_flow(text: str) -> Block:
    """
    Parse flow source text into a Block.

    Raises:
      FlowSyntaxError: on any lexical or syntactic error (line/column are 1-based,
        None when the error is at end of input).
    """
    try:
        parse_tree = _get_parser().parse(text)
    except UnexpectedInput as e:
        line = e.line if isinstance(e.line, int) and e.line > 0 else None
        column = e.column if isinstance(e.column, int) and e.column > 0 else None
        where = f" at line {line}, column {column}" if line is not None else " at end of input"
        raise FlowSyntaxError(f"Malformed flow source{where}: {str(e).strip().splitlines()[0]}", line, column) from e
    return _FlowTransformer().transform(parse_tree)


# ---------------------------
# Diagnostic dump
# ---------------------------

def _dump(stmt: Statement, depth: int, out: List[str]) -> None:
    indent = " " * depth
    if isinstance(stmt, Block):
        out.append(f"{indent}process:")
        for s in stmt.statements:
            _dump(s, depth + 2, out)
    elif isinstance(stmt, Step):
        out.append(f"{indent}step:")
        out.append(f'{indent}  expression: "{stmt.text}"')
    elif isinstance(stmt, Exit):
        out.append(f"{indent}step:")
        out.append(f"{indent}  EXIT")
    elif isinstance(stmt, If):
        out.append(f"{indent}if_branch:")
        out.append(f'{indent}  condition: "{stmt.condition}"')
        _dump(stmt.then_block, depth + 2, out)
        if stmt.else_block is not None:
            out.append(f"{indent}  else_branch:")
            _dump(stmt.else_block, depth + 4, out)
    elif isinstance(stmt, While):
        out.append(f"{indent}while_loop:")
        out.append(f'{indent}  condition: "{stmt.condition}"')
        _dump(stmt.body, depth + 2, out)
    else:
        raise TypeError(f"Unsupported statement: {type(stmt).__name__}")


def format_tree(program: Block) -> str:
    """
    Indented tree dump, e.g. for `test;`:

        all:
          process:
            step:
              expression: "test"
    """
    out: List[str] = ["all:"]
    _dump(program, 2, out)
    return "\n".join(out) + "\n"
