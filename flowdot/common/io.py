# -*- coding: utf-8 -*-
"""
I/O utilities (source files, stdin/stdout, DOT output files).

All failures surface as OSError; callers decide how to report them.
"""

from __future__ import annotations

import os
import sys
from typing import Optional, TextIO


def ensure_dir(path: str) -> None:
    if path:
        os.makedirs(path, exist_ok=True)


def read_text(path: str, encoding: str = "utf-8") -> str:
    with open(path, "r", encoding=encoding) as f:
        return f.read()


def write_text(path: str, text: str, encoding: str = "utf-8") -> None:
    ensure_dir(os.path.dirname(path))
    with open(path, "w", encoding=encoding) as f:
        f.write(text)


def read_source(path: Optional[str], stdin: Optional[TextIO] = None) -> str:
    """
    Read flow source from `path`, or from stdin when no path is given.
    """
    if path is not None:
        return read_text(path)
    stream = stdin if stdin is not None else sys.stdin
    return stream.read()


def write_output(path: Optional[str], text: str, stdout: Optional[TextIO] = None) -> None:
    """
    Write `text` to `path`, or to stdout when no path is given.
    """
    if path is not None:
        write_text(path, text)
        return
    stream = stdout if stdout is not None else sys.stdout
    stream.write(text)
    stream.flush()
