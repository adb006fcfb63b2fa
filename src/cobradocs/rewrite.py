#!/usr/bin/env python3
"""
rewrite - House-style rewriting of cobra-generated markdown.

Adjustments, applied line by line:

- Remove "###### Auto generated by spf13/cobra on dd-mmm-yyyy"
- Fix headline levels (start at <h1>)
- Title case for main headline
- No all upper-case headlines ("### SEE ALSO")
- Canonical frontmatter for the root document
- Links to the root document point at its renamed file
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, Optional

from cobradocs.config import DEFAULT_PREFIX
from cobradocs.titles import capitalize_words


AUTO_GENERATED_MARKER = "###### Auto generated"
SEE_ALSO = "### SEE ALSO"


@dataclass(frozen=True)
class RewriteSettings:
    prefix: str = DEFAULT_PREFIX
    description: str = "Command-line client tool for managing ArangoDB Oasis"
    title: str = "ArangoDB Oasis Shell oasisctl"

    @property
    def root_link(self) -> str:
        return f"[{self.prefix}]({self.prefix}.html)"

    @property
    def options_link(self) -> str:
        return f"[{self.prefix}]({self.prefix}-options.html)"


def _line_ending(line: str) -> str:
    if line.endswith("\r\n"):
        return "\r\n"
    if line.endswith("\n"):
        return "\n"
    return ""


def rewrite_line(line: str, is_root: bool, settings: RewriteSettings) -> Optional[str]:
    """
    Rewrite a single line. Returns None when the line is to be dropped.

    Rules are checked in order, the first match wins.
    """
    if line.startswith(AUTO_GENERATED_MARKER):
        return None

    ending = _line_ending(line)
    content = line[:len(line) - len(ending)]

    if line.startswith("## "):
        # Main headline: one level up, every word capitalized
        return capitalize_words(content[1:]) + ending
    if content == SEE_ALSO:
        return "## See also" + ending
    if line.startswith("### "):
        return line[1:]
    if is_root and line.startswith("description: "):
        return f"description: {settings.description}" + (ending or "\n")
    if is_root and line.startswith("title: "):
        return f"title: {settings.title}" + (ending or "\n")

    return line.replace(settings.root_link, settings.options_link)


def rewrite_lines(lines: Iterable[str], is_root: bool,
                  settings: RewriteSettings = RewriteSettings()) -> Iterator[str]:
    """Forward-only transform over the lines of one document."""
    for line in lines:
        rewritten = rewrite_line(line, is_root, settings)
        if rewritten is not None:
            yield rewritten


def rewrite_content(infile: Path, outfile: Path, is_root: bool,
                    settings: RewriteSettings = RewriteSettings()):
    """
    Write the rewritten copy of ``infile`` to ``outfile``.

    OSError from either file propagates; an output already written for an
    earlier file is left in place.
    """
    with open(infile, 'r', encoding='utf-8', newline='') as src, \
            open(outfile, 'w', encoding='utf-8', newline='') as dst:
        for line in rewrite_lines(src, is_root, settings):
            dst.write(line)
