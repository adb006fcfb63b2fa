#!/usr/bin/env python3
"""
documents - Input discovery and per-file naming for cobradocs.

Cobra writes one markdown file per command: ``<prefix>.md`` for the root
command and ``<prefix>_<command>[_<subcommand>...].md`` below it (``-`` is
accepted as separator too). Each file becomes a DocumentRecord holding
everything the rewriter and the navigation builder need.
"""

import re
from dataclasses import dataclass
from pathlib import Path
from typing import List, Mapping, Tuple

from cobradocs.titles import TITLE_OVERRIDES, command_title


SEPARATORS = re.compile(r"[_-]")

# Title and group token for the root document
OPTIONS = "Options"


@dataclass(frozen=True)
class DocumentRecord:
    input_path: Path
    output_path: Path
    is_root: bool
    top_level_token: str
    title: str

    @property
    def href(self) -> str:
        return self.output_path.with_suffix(".html").name


def split_stem(stem: str) -> List[str]:
    """Split a file stem into its command path tokens."""
    return SEPARATORS.split(stem)


def belongs_to(stem: str, prefix: str) -> bool:
    """True if the stem is the root document or one of its subcommands."""
    if stem == prefix:
        return True
    return stem.startswith(prefix) and SEPARATORS.match(stem, len(prefix)) is not None


def output_name(input_name: str, prefix: str) -> str:
    """Target basename: underscores become hyphens, root becomes <prefix>-options.md."""
    if input_name == f"{prefix}.md":
        return f"{prefix}-options.md"
    return input_name.replace("_", "-")


def make_record(input_path: Path, target_dir: Path, prefix: str,
                overrides: Mapping[str, str] = TITLE_OVERRIDES) -> DocumentRecord:
    """Derive the record for one input file."""
    tokens = split_stem(input_path.stem)
    # The prefix itself may contain separators ("my-tool")
    path_tokens = tokens[len(split_stem(prefix)):]

    if path_tokens:
        top_level_token = path_tokens[0]
        title = command_title(path_tokens, overrides)
    else:
        top_level_token = title = OPTIONS

    return DocumentRecord(
        input_path=input_path,
        output_path=target_dir / output_name(input_path.name, prefix),
        is_root=input_path.name == f"{prefix}.md",
        top_level_token=top_level_token,
        title=title,
    )


def discover(source_dir: Path, prefix: str) -> Tuple[List[Path], List[Path]]:
    """
    Find the generated files for ``prefix`` directly in ``source_dir``.

    Returns (inputs, skipped). Inputs are sorted by stem, not by file name:
    "-" sorts before "." so sorting names with their extension would put
    ``tool-a-b.md`` ahead of ``tool-a.md``. Skipped are files matching the
    glob whose stem does not continue the prefix with a separator
    (``toolbox.md`` for prefix ``tool``).
    """
    inputs = []
    skipped = []
    for path in source_dir.glob(f"{prefix}*.md"):
        if not path.is_file():
            continue
        if belongs_to(path.stem, prefix):
            inputs.append(path)
        else:
            skipped.append(path)

    inputs.sort(key=lambda p: p.stem)
    skipped.sort()
    return inputs, skipped


def find_collisions(records: List[DocumentRecord]) -> List[Tuple[Path, Path, Path]]:
    """Return (first_input, second_input, output) for inputs sharing an output file."""
    seen = {}
    collisions = []
    for record in records:
        first = seen.get(record.output_path)
        if first is not None:
            collisions.append((first, record.input_path, record.output_path))
        else:
            seen[record.output_path] = record.input_path
    return collisions
