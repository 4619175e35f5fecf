"""Command-line interface for compact-path-tree.

This module provides the cpt command, which builds a compact path tree of a
directory and then replays the stored paths. It handles argument parsing, logging
setup, output and the mapping of failures to exit codes.

Exit Codes:
    0: Successful completion
    1: Runtime error during execution, or a failed --verify
    2: Command-line syntax error
    126: Permission denied
    130: Interrupted by SIGINT (Ctrl+C)
    141: Broken pipe

Example:
    # Print every path below a directory
    $ cpt /path/to/dir

    # Statistics only, with a round-trip check
    $ cpt -q -s stderr --verify /path/to/dir
"""

import logging
import os
import sys
import time
from collections.abc import Mapping
from typing import List, Optional, Union

from humanfriendly import format_size, format_timespan

from compact_path_tree.cli.argparser import create_parser, validate_args
from compact_path_tree.cli.render import stream_tree_representation
from compact_path_tree.cli.safe_writer import SafeWriter
from compact_path_tree.exclusion_rules.base_rules import BaseExclusionRules
from compact_path_tree.exclusion_rules.composite_rules import CompositeExclusionRules
from compact_path_tree.exclusion_rules.git_rules import GitIgnoreExclusionRules
from compact_path_tree.exclusion_rules.size_rules import SizeExclusionRules
from compact_path_tree.path_tree.compact_path_tree import CompactPathTree
from compact_path_tree.types import PathType
from compact_path_tree.visitors.permission_action import PermissionAction
from compact_path_tree.visitors.stats_visitor import StatsVisitor

logger = logging.getLogger(__name__)


def format_counts(counts: Mapping[str, Union[int, float]]) -> str:
    """Format the counts into a human-readable string.

    Args:
        counts: Mapping containing the statistics of a build.

    Returns:
        A formatted string showing all counts with appropriate labels.
    """
    return "\n".join(
        [
            f"Directories: {counts['directories']}",
            f"Files: {counts['files']}",
            f"Symlinks: {counts['symlinks']}",
            f"Items: {counts['items']}",
            f"Total size: {format_size(counts['bytes'])}",
            f"Encoded length: {counts['encoded_length']}",
            f"Constructed in: {format_timespan(counts['seconds'], detailed=True)}",
        ]
    )


def verify_tree(tree: CompactPathTree, expected_items: int) -> List[str]:
    """Check every stored path against the filesystem without following symlinks.

    Args:
        tree: The tree to check.
        expected_items: Number of entries the visitor saw while building.

    Returns:
        Descriptions of every problem found; empty when the tree is consistent.
    """
    problems = []
    seen = 0
    for path in tree:
        seen += 1
        try:
            os.lstat(path)
        except OSError as e:
            problems.append(f"path stored in tree but missing from filesystem: {path} ({e.strerror})")
    if seen != expected_items:
        problems.append(f"decoded {seen} paths but {expected_items} entries were visited")
    return problems


def configure_logging(verbose: bool, quiet: bool) -> None:
    level = logging.DEBUG if verbose else logging.ERROR if quiet else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s", stream=sys.stderr)


def build_exclusion_rules(
    git_rules: GitIgnoreExclusionRules, max_size: Optional[int], root: Optional[PathType] = None
) -> Optional[BaseExclusionRules]:
    """Combine the rules gathered from the command line, or None if there are none."""
    rules: List[BaseExclusionRules] = []
    if git_rules.has_rules():
        rules.append(git_rules)
    if max_size is not None:
        rules.append(SizeExclusionRules(max_size, root))
    if not rules:
        return None
    return CompositeExclusionRules(rules)


def main() -> None:
    """Main entry point for the cpt command-line interface."""
    git_rules = GitIgnoreExclusionRules()
    parser = create_parser(git_rules)
    args = parser.parse_args()

    try:
        validate_args(args)
    except ValueError as e:
        parser.error(str(e))

    configure_logging(args.verbose, args.quiet)

    perm_action = {
        "ignore": PermissionAction.IGNORE,
        "warn": PermissionAction.WARN,
        "fail": PermissionAction.RAISE,
    }[args.permission_action]

    try:
        rules = build_exclusion_rules(git_rules, args.max_size, args.directory)
        visitor = StatsVisitor(rules, permission_action=perm_action)

        start = time.monotonic()
        tree = CompactPathTree.build(args.directory, visitor)
        elapsed = time.monotonic() - start
        logger.debug("Constructed %r in %.3fs", tree, elapsed)

        output_file = args.output if args.output else sys.stdout.fileno()
        with SafeWriter(output_file) as writer:
            if args.raw:
                writer.writeline(tree.raw)
            elif args.tree:
                for line in stream_tree_representation(tree):
                    writer.writeline(line)
            elif not args.quiet:
                for path in tree:
                    writer.writeline(str(path))

            if args.summary:
                counts = {
                    "directories": visitor.stats.directories,
                    "files": visitor.stats.files,
                    "symlinks": visitor.stats.symlinks,
                    "items": visitor.stats.items,
                    "bytes": visitor.stats.bytes,
                    "encoded_length": len(tree.raw),
                    "seconds": elapsed,
                }
                if args.summary == "stdout":
                    writer.writeline(format_counts(counts))
                else:
                    print(format_counts(counts), file=sys.stderr)

        if args.verify:
            problems = verify_tree(tree, visitor.stats.items)
            for problem in problems:
                print(f"Error: {problem}", file=sys.stderr)
            if problems:
                sys.exit(1)

    except BrokenPipeError:
        # Python flushes stdout at exit; point it somewhere harmless first
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
        sys.exit(141)
    except KeyboardInterrupt:
        sys.exit(130)
    except PermissionError as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(126)
    except Exception as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
