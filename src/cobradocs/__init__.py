"""
cobradocs - Post-processing for cobra-generated command reference docs.

Tools included:
- titles: Display titles for command path tokens
- documents: Input discovery and per-file naming
- rewrite: House-style rewriting of generated markdown
- navigation: Navigation fragment for the site menu
- pipeline: Directory-level processing
- config: Configuration management
- logger: Logging for runs
- errors: Exceptions that abort a run
"""

__version__ = "0.1.0"
__author__ = "1minds3t"
__email__ = "1minds3t@proton.me"
__all__ = ["titles", "documents", "rewrite", "navigation", "pipeline", "config", "logger", "errors"]
