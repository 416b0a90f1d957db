# -*- coding: utf-8 -*-
"""
Logging utilities for console (stderr) + optional file.
"""

from __future__ import annotations

import logging
import os
from typing import Optional

_FORMAT = "[%(asctime)s] %(levelname)s - %(message)s"
_DATEFMT = "%Y-%m-%d %H:%M:%S"


def get_logger(
    name: str = "flowdot",
    *,
    log_file: Optional[str] = None,
    level: int = logging.INFO,
) -> logging.Logger:
    logger = logging.getLogger(name)
    logger.setLevel(level)
    logger.propagate = False  # avoid duplicate logs

    fmt = logging.Formatter(_FORMAT, datefmt=_DATEFMT)

    if logger.handlers:
        # already configured: only refresh levels
        for h in logger.handlers:
            h.setLevel(level)
    else:
        # StreamHandler writes to stderr, stdout is reserved for DOT output
        ch = logging.StreamHandler()
        ch.setLevel(level)
        ch.setFormatter(fmt)
        logger.addHandler(ch)

    if log_file is not None:
        path = os.path.abspath(log_file)
        # one FileHandler per file, even across repeated calls
        if not any(getattr(h, "baseFilename", None) == path for h in logger.handlers):
            log_dir = os.path.dirname(path)
            if log_dir:
                os.makedirs(log_dir, exist_ok=True)
            fh = logging.FileHandler(path, encoding="utf-8")
            fh.setLevel(level)
            fh.setFormatter(fmt)
            logger.addHandler(fh)

    return logger
