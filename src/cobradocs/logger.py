#!/usr/bin/env python3
"""
logger - Logging for cobradocs runs.

Messages go to log files (best effort) and are echoed to stderr, since stdout
carries the navigation fragment.
"""

import os
import sys
import logging
from pathlib import Path
from datetime import datetime


class DocsLogger:
    """Simple logger for cobradocs operations."""

    def __init__(self, name: str = "cobradocs", quiet: bool = False):
        self.quiet = quiet
        self.logger = logging.getLogger(name)
        self.logger.setLevel(logging.INFO)

        if self.logger.handlers:
            return

        # Try /var/log first, fall back to /tmp
        log_dir = Path("/var/log")
        if not log_dir.exists() or not os.access(log_dir, os.W_OK):
            log_dir = Path("/tmp")

        log_file = log_dir / f"{name}.log"
        error_file = log_dir / f"{name}_errors.log"

        formatter = logging.Formatter('%(asctime)s - %(message)s',
                                      datefmt='%Y-%m-%d %H:%M:%S')

        # File handlers, each one best effort
        for path, level in ((log_file, logging.INFO), (error_file, logging.ERROR)):
            try:
                handler = logging.FileHandler(path)
            except OSError:
                continue
            handler.setLevel(level)
            handler.setFormatter(formatter)
            self.logger.addHandler(handler)

        if not self.logger.handlers:
            # No writable log location; console echo still works
            self.logger.addHandler(logging.NullHandler())

    def _echo(self, message: str):
        print(f"{datetime.now().strftime('%Y-%m-%d %H:%M:%S')} - {message}",
              file=sys.stderr)

    def info(self, message: str):
        """Log info message."""
        self.logger.info(message)
        if not self.quiet:
            self._echo(message)

    def warning(self, message: str):
        """Log warning message."""
        self.logger.warning(message)
        self._echo(f"WARNING: {message}")

    def error(self, message: str):
        """Log error message."""
        self.logger.error(message)
        self._echo(f"ERROR: {message}")
