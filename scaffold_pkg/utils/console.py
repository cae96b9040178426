#!/usr/bin/env python3
"""
Console and Logging Setup

Author: Ken Brill
Version: 1.0
Date: October 2026
License: MIT License
"""
import logging

from rich.console import Console
from rich.logging import RichHandler

console = Console()


def setup_logging(verbose=False):
    """
    Route the standard logging module through rich so diagnostic lines
    share the console with the emoji progress output.
    """
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )
