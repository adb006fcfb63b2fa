#!/usr/bin/env python3
"""
navigation - Navigation fragment for the documentation site's menu file.

The output is meant to be pasted into the site's navigation definition
(e.g. ``_data/x.x-oasis.yml``) by hand; this module never touches that file.

Tree structure is inferred from the sorted file list: a subcommand's stem is
its parent's stem plus a suffix, so it sorts right after the parent and only
the previous entry's top-level token is needed to decide whether an entry
starts a new group or is a child of the current one.
"""

from dataclasses import dataclass
from typing import Iterable, Iterator, List

import yaml

from cobradocs.documents import DocumentRecord
from cobradocs.errors import NavigationError


DEFAULT_INDENT = "    "


@dataclass(frozen=True)
class NavigationEntry:
    text: str
    href: str
    is_child: bool = False

    def lines(self) -> List[str]:
        return [
            f"- text: {self.text}",
            f"  href: {self.href}",
        ]


def iter_navigation(records: Iterable[DocumentRecord],
                    indent: str = DEFAULT_INDENT) -> Iterator[str]:
    """
    Yield one printable block per record, in the order given.

    The generator is single-pass: it consumes ``records`` lazily, so blocks
    can be printed while the files are still being rewritten.
    """
    prev_command = None
    first_child = False

    for record in records:
        command = record.top_level_token
        if command != prev_command:
            entry = NavigationEntry(record.title, record.href)
            yield "\n".join(indent + line for line in entry.lines())
            first_child = True
        else:
            entry = NavigationEntry(record.title, record.href, is_child=True)
            block = [indent * 2 + line for line in entry.lines()]
            if first_child:
                block.insert(0, indent + "  children:")
                first_child = False
            yield "\n".join(block)
        prev_command = command


def render_navigation(records: Iterable[DocumentRecord],
                      indent: str = DEFAULT_INDENT) -> str:
    """Whole fragment as one string (newline terminated)."""
    blocks = list(iter_navigation(records, indent))
    return "\n".join(blocks) + "\n" if blocks else ""


def _check_entry(item, where: str):
    if not isinstance(item, dict):
        raise NavigationError(f"{where}: expected a mapping, got {item!r}")
    for key in ("text", "href"):
        if key not in item:
            raise NavigationError(f"{where}: missing '{key}'")
        if not isinstance(item[key], str):
            # e.g. a command titled "On" or "No" loads as a boolean
            raise NavigationError(f"{where}: '{key}' is not a string: {item[key]!r}")
    unknown = set(item) - {"text", "href", "children"}
    if unknown:
        raise NavigationError(f"{where}: unexpected keys {sorted(unknown)}")


def validate_fragment(text: str) -> list:
    """
    Parse a fragment with PyYAML and check its shape.

    Returns the parsed list of entries. Titles containing YAML syntax
    (a leading "&" or "*", a ": " inside) would break the pasted menu file,
    which is what this catches.
    """
    if not text.strip():
        return []

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise NavigationError(f"Navigation fragment is not valid YAML: {e}") from e

    if not isinstance(data, list):
        raise NavigationError("Navigation fragment must be a YAML list")

    for i, item in enumerate(data):
        _check_entry(item, f"entry {i}")
        children = item.get("children")
        if children is None:
            continue
        if not isinstance(children, list):
            raise NavigationError(f"entry {i}: 'children' must be a list")
        for j, child in enumerate(children):
            _check_entry(child, f"entry {i} child {j}")
            if "children" in child:
                raise NavigationError(f"entry {i} child {j}: nesting deeper than two levels")
    return data
