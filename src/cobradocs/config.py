#!/usr/bin/env python3
"""
config - Configuration management for cobradocs.

Handles user preferences like the tool prefix, the canonical frontmatter of the
root document and files to spare when cleaning the target directory.
"""

import json
import sys
from pathlib import Path
from typing import Dict, Any


DEFAULT_PREFIX = "oasisctl"


def get_config_dir() -> Path:
    """Get the cobradocs configuration directory."""
    config_dir = Path.home() / ".cobradocs"
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir


def get_config_file() -> Path:
    """Get the path to the configuration file."""
    return get_config_dir() / "config.json"


def default_config() -> Dict[str, Any]:
    return {
        "prefix": DEFAULT_PREFIX,
        "description": "Command-line client tool for managing ArangoDB Oasis",
        "title": "ArangoDB Oasis Shell oasisctl",
        "keep_files": ["oasisctl-getting-started.md"],
        "nav_indent": "    ",
        "title_overrides": {},  # Format: {"token": "Display Title"}
    }


def load_config() -> Dict[str, Any]:
    """Load configuration from file, filling in defaults for missing keys."""
    config_file = get_config_file()
    config = default_config()

    if not config_file.exists():
        return config

    try:
        with open(config_file, 'r', encoding='utf-8') as f:
            stored = json.load(f)
    except (OSError, ValueError) as e:
        print(f"ℹ Ignoring unreadable config {config_file}: {e}", file=sys.stderr)
        return config

    if isinstance(stored, dict):
        config.update(stored)
    return config


def save_config(config: Dict[str, Any]):
    """Save configuration to file."""
    config_file = get_config_file()

    try:
        with open(config_file, 'w', encoding='utf-8') as f:
            json.dump(config, f, indent=2)
    except OSError as e:
        print(f"Error saving configuration: {e}", file=sys.stderr)


def set_prefix(prefix: str):
    """Set the default tool prefix."""
    config = load_config()
    config['prefix'] = prefix
    save_config(config)
    print(f"Prefix set to: {prefix}")


def add_title_override(token: str, title: str):
    """Add a display title for a token whose capitalization comes out wrong."""
    config = load_config()
    overrides = dict(config.get('title_overrides') or {})
    overrides[token.lower()] = title
    config['title_overrides'] = overrides
    save_config(config)
    print(f"Title for '{token.lower()}' set to: {title}")


def show_config(config: Dict[str, Any] = None):
    """Display current configuration."""
    if config is None:
        config = load_config()

    print("\n" + "=" * 60)
    print("COBRADOCS CONFIGURATION")
    print("=" * 60)
    print(f"Config file: {get_config_file()}")
    print()
    print("Settings:")
    print(f"  Prefix:             {config.get('prefix', DEFAULT_PREFIX)}")
    print(f"  Root title:         {config.get('title')}")
    print(f"  Root description:   {config.get('description')}")
    print(f"  Nav indent:         {len(config.get('nav_indent', ''))} spaces")

    keep = config.get('keep_files') or []
    print(f"  Keep on clean:      {', '.join(keep) if keep else '(none)'}")

    overrides = config.get('title_overrides') or {}
    if overrides:
        print("\n  Title overrides:")
        for token, title in sorted(overrides.items()):
            print(f"    {token}: {title}")
    else:
        print("  Title overrides:    (built-in only)")

    print()
    print("To modify settings:")
    print("  cobradocs --set-prefix NAME")
    print(f"  Or edit: {get_config_file()}")
    print()
