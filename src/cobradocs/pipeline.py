#!/usr/bin/env python3
"""
pipeline - Directory-level processing for cobradocs.

Validates the source and target directories, plans the output file for every
generated input, optionally removes stale output from an earlier run, then
rewrites the files one by one while yielding navigation blocks.

Typical workflow:

1. Generate the documentation into a temporary folder
   > oasisctl generate-docs --link-file-ext .html --replace-underscore-with -
2. Run cobradocs on it
   > cobradocs /path/to/generated/docs /path/to/x.x/oasis --clean
3. Paste the printed navigation entries into _data/x.x-oasis.yml
4. Verify the changes and commit added and removed files
"""

import os
from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple

from cobradocs.documents import DocumentRecord, discover, find_collisions, make_record
from cobradocs.errors import ConfigurationError
from cobradocs.logger import DocsLogger
from cobradocs.navigation import DEFAULT_INDENT, iter_navigation
from cobradocs.rewrite import RewriteSettings, rewrite_content
from cobradocs.titles import build_overrides


def check_directories(source: Path, target: Path) -> Tuple[Path, Path]:
    """Normalise both paths and make sure they are distinct existing directories."""
    inpath = Path(os.path.normpath(source))
    outpath = Path(os.path.normpath(target))

    if inpath == outpath:
        raise ConfigurationError("The supplied directories are the same")

    for directory in (inpath, outpath):
        if not directory.is_dir():
            raise ConfigurationError(f"Directory does not exist: {directory}")

    return inpath, outpath


def plan_documents(source: Path, target: Path, prefix: str,
                   overrides=None, logger: Optional[DocsLogger] = None) -> List[DocumentRecord]:
    """Build the sorted list of records, refusing inputs that share an output file."""
    inputs, skipped = discover(source, prefix)
    for path in skipped:
        if logger:
            logger.warning(f"Skipping {path.name}: not a '{prefix}' command file")

    if overrides is None:
        overrides = build_overrides()
    records = [make_record(path, target, prefix, overrides) for path in inputs]

    collisions = find_collisions(records)
    if collisions:
        details = "; ".join(
            f"{first.name} and {second.name} -> {output.name}"
            for first, second, output in collisions
        )
        raise ConfigurationError(f"Multiple inputs map to the same output file: {details}")

    return records


def clean_target(target: Path, prefix: str, keep: Iterable[str] = (),
                 dry_run: bool = False, logger: Optional[DocsLogger] = None) -> List[Path]:
    """
    Remove output of a previous run (``<prefix>-*.md``) from ``target``.

    Hand-written pages sharing the prefix (e.g. ``oasisctl-getting-started.md``)
    must be listed in ``keep``. Returns the files removed (or that would be).
    """
    keep = set(keep)
    stale = sorted(
        path for path in target.glob(f"{prefix}-*.md")
        if path.is_file() and path.name not in keep
    )
    for path in stale:
        if dry_run:
            if logger:
                logger.info(f"[DRY-RUN] Would remove {path}")
            continue
        path.unlink()
        if logger:
            logger.info(f"Removed {path}")
    return stale


def _rewrite_all(records: Iterable[DocumentRecord], settings: RewriteSettings,
                 dry_run: bool, logger: Optional[DocsLogger]) -> Iterator[DocumentRecord]:
    for record in records:
        if dry_run:
            if logger:
                logger.info(f"[DRY-RUN] Would write {record.output_path}")
        else:
            rewrite_content(record.input_path, record.output_path, record.is_root, settings)
            if logger:
                logger.info(f"Wrote {record.output_path}")
        yield record


def process(records: Iterable[DocumentRecord], settings: RewriteSettings,
            indent: str = DEFAULT_INDENT, dry_run: bool = False,
            logger: Optional[DocsLogger] = None) -> Iterator[str]:
    """
    Rewrite each record's file and yield its navigation block right after.

    Nothing happens until the result is iterated.
    """
    return iter_navigation(_rewrite_all(records, settings, dry_run, logger), indent)


CONFIG_TYPES = {
    "prefix": str,
    "description": str,
    "title": str,
    "nav_indent": str,
    "keep_files": list,
    "title_overrides": dict,
}


def check_config(config: Dict[str, Any]):
    """Reject hand-edited config values of the wrong type."""
    for key, expected in CONFIG_TYPES.items():
        value = config.get(key)
        if not isinstance(value, expected):
            raise ConfigurationError(
                f"Config key '{key}' must be a {expected.__name__}, got {value!r}"
            )
    if not config["prefix"]:
        raise ConfigurationError("Config key 'prefix' must not be empty")
    for name in config["keep_files"]:
        if not isinstance(name, str):
            raise ConfigurationError(f"Config key 'keep_files' holds a non-string: {name!r}")
    for token, title in config["title_overrides"].items():
        if not isinstance(title, str):
            raise ConfigurationError(
                f"Config key 'title_overrides' maps '{token}' to a non-string: {title!r}"
            )


def settings_from_config(config: Dict[str, Any]) -> RewriteSettings:
    return RewriteSettings(
        prefix=config["prefix"],
        description=config["description"],
        title=config["title"],
    )


def run(source: Path, target: Path, config: Dict[str, Any], dry_run: bool = False,
        clean: bool = False, logger: Optional[DocsLogger] = None) -> Iterator[str]:
    """
    Validate, plan and (optionally) clean eagerly, then return the lazy
    navigation stream that performs the rewriting.

    Configuration errors are raised before any file is touched.
    """
    check_config(config)
    source, target = check_directories(source, target)
    prefix = config["prefix"]
    overrides = build_overrides(config.get("title_overrides"))

    records = plan_documents(source, target, prefix, overrides, logger)
    if not records and logger:
        logger.warning(f"No '{prefix}' files found in {source}")

    if clean:
        clean_target(target, prefix, config.get("keep_files") or (), dry_run, logger)

    return process(
        records,
        settings_from_config(config),
        indent=config.get("nav_indent", DEFAULT_INDENT),
        dry_run=dry_run,
        logger=logger,
    )
