#!/usr/bin/env python3
"""
cobradocs - Post-process cobra-generated command reference docs

Rewrites the generated markdown into the target directory and prints the
navigation entries for the site's menu file on stdout.
"""

import argparse
import sys
from pathlib import Path

from cobradocs import __version__
from cobradocs.config import add_title_override, load_config, set_prefix, show_config
from cobradocs.errors import CobraDocsError
from cobradocs.logger import DocsLogger
from cobradocs.navigation import validate_fragment
from cobradocs.pipeline import run


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cobradocs",
        description="cobradocs - Post-process cobra-generated command reference docs",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  cobradocs ./docs ../site/3.x/oasis                 # Rewrite and print nav entries
  cobradocs ./docs ../site/3.x/oasis --clean         # Remove stale oasisctl-*.md first
  cobradocs ./docs ../site/3.x/oasis --dry-run       # Show what would be written
  cobradocs ./docs ../site/3.x/oasis --nav-output nav.yml --validate-nav
  cobradocs --show-config                            # View configuration settings

The navigation entries are meant to be pasted into the site's navigation
definition (e.g. _data/3.x-oasis.yml); cobradocs never edits that file.
        """
    )

    parser.add_argument('source', nargs='?', help='Directory with the generated docs')
    parser.add_argument('target', nargs='?', help='Documentation directory to write to')

    parser.add_argument(
        '-p', '--prefix',
        type=str,
        default=None,
        help='Tool name prefix of the generated files (default: from config, oasisctl)'
    )
    parser.add_argument(
        '--dry-run',
        action='store_true',
        help='Do not write or delete any files, only print navigation entries'
    )
    parser.add_argument(
        '--clean',
        action='store_true',
        help='Remove <prefix>-*.md from the target first (except keep_files from config)'
    )
    parser.add_argument(
        '--nav-output',
        type=str,
        default=None,
        help='Also write the navigation entries to this file'
    )
    parser.add_argument(
        '--validate-nav',
        action='store_true',
        help='Fail if the navigation entries do not parse as YAML'
    )
    parser.add_argument(
        '-q', '--quiet',
        action='store_true',
        help='Only report warnings and errors'
    )
    parser.add_argument(
        '--show-config',
        action='store_true',
        help='Show current configuration and exit'
    )
    parser.add_argument(
        '--set-prefix',
        type=str,
        metavar='NAME',
        help='Save the default prefix and exit'
    )
    parser.add_argument(
        '--add-title',
        type=str,
        metavar='TOKEN=TITLE',
        help='Save a display title for a command token and exit'
    )
    parser.add_argument(
        '-v', '--version',
        action='version',
        version=f'cobradocs {__version__}'
    )
    return parser


def main(argv=None):
    """Main entry point for cobradocs CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    # Configuration commands
    if args.set_prefix:
        set_prefix(args.set_prefix)
        return
    if args.add_title:
        token, sep, title = args.add_title.partition('=')
        if not sep or not token or not title:
            print(f"Error: expected TOKEN=TITLE, got: {args.add_title}", file=sys.stderr)
            sys.exit(1)
        add_title_override(token, title)
        return

    config = load_config()
    if args.prefix:
        config['prefix'] = args.prefix

    if args.show_config:
        show_config(config)
        return

    if not args.source or not args.target:
        parser.print_usage(sys.stdout)
        print("cobradocs: error: both <source-dir> and <target-dir> are required")
        sys.exit(1)

    logger = DocsLogger("cobradocs", quiet=args.quiet)
    if args.dry_run:
        logger.info("DRY-RUN MODE: No files will be modified")

    blocks = []
    try:
        for block in run(Path(args.source), Path(args.target), config,
                         dry_run=args.dry_run, clean=args.clean, logger=logger):
            print(block, flush=True)
            blocks.append(block)

        fragment = "\n".join(blocks) + "\n" if blocks else ""
        if args.validate_nav:
            validate_fragment(fragment)
            logger.info("Navigation entries parse as valid YAML")
    except CobraDocsError as e:
        logger.error(str(e))
        sys.exit(1)

    if args.nav_output:
        Path(args.nav_output).write_text(fragment, encoding='utf-8')
        logger.info(f"Navigation entries written to {args.nav_output}")

    logger.info(f"Processed {len(blocks)} file(s)")


if __name__ == "__main__":
    main()
