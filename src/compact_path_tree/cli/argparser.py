"""Command-line argument parsing for cpt.

This module defines the command-line interface for cpt,
handling argument parsing and validation.
"""

import argparse
from pathlib import Path
from typing import Any, List, Optional, Sequence, Type, Union

from compact_path_tree import __version__
from compact_path_tree.exclusion_rules.base_rules import BaseExclusionRules
from compact_path_tree.exclusion_rules.size_rules import parse_file_size


def create_exclusion_action(exclusion_rules: BaseExclusionRules) -> Type[argparse.Action]:
    """Create a custom action class that feeds exclusion options into a rules object.

    Rules are added as the options are parsed, so -e and -i patterns keep the order
    they have on the command line.

    Args:
        exclusion_rules: The exclusion rules object to update during parsing.

    Returns:
        A custom action class for use with argparse.
    """

    class ExclusionRulesAction(argparse.Action):
        def __init__(self, option_strings: List[str], dest: str, **kwargs: Any) -> None:
            super().__init__(option_strings, dest, **kwargs)

        def __call__(
            self,
            parser: argparse.ArgumentParser,
            namespace: argparse.Namespace,
            values: Union[str, Sequence[Any], None],
            option_string: Optional[str] = None,
        ) -> None:
            if values is None:
                return
            try:
                if option_string in ("-e", "--exclude"):
                    exclusion_rules.load_rules(Path(str(values)))
                else:  # -i/--ignore
                    exclusion_rules.add_rule(str(values))
            except FileNotFoundError as e:
                parser.error(str(e))

            recorded = getattr(namespace, self.dest, None) or []
            setattr(namespace, self.dest, recorded + [values])

    return ExclusionRulesAction


def size_type(value: str) -> int:
    """Argparse type converting a human-readable size to bytes."""
    try:
        return parse_file_size(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))


def create_parser(exclusion_rules: BaseExclusionRules) -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Args:
        exclusion_rules: The exclusion rules object to update during parsing.

    Returns:
        An ArgumentParser instance configured with cpt's options.
    """
    description = """
    cpt: Build a compact path tree of a directory and replay its paths.

    The directory is walked once, depth first, without following symbolic links.
    Every name found is stored in a single flat buffer, which is then decoded back
    into absolute paths without touching the filesystem again.
    """

    epilog = """
    Examples:
      # Print every path below the home directory
      cpt

      # Print the paths of a project, skipping what its .gitignore skips
      cpt -e .gitignore /path/to/project

      # Skip cache directories at any depth, and files over 10 MB
      cpt -i ".cache/" -m 10MB /path/to/project

      # Show statistics on stderr and check every stored path against the filesystem
      cpt -q -s stderr --verify /path/to/project

      # Render as a tree, or dump the encoded buffer
      cpt --tree /path/to/project
      cpt --raw /path/to/project

      # Stop on the first permission error
      cpt -P fail /path/to/project
    """

    parser = argparse.ArgumentParser(
        prog="cpt",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-V", "--version", action="version", version=f"cpt {__version__}", help="Show the version and exit"
    )

    ExclusionAction = create_exclusion_action(exclusion_rules)

    parser.add_argument(
        "directory",
        type=Path,
        nargs="?",
        default=Path.home(),
        help="The directory to walk (default: your home directory).",
    )
    parser.add_argument(
        "-e",
        "--exclude",
        type=Path,
        metavar="FILE",
        action=ExclusionAction,
        help="Path to a gitignore-style exclusion file (can be specified multiple times).",
    )
    parser.add_argument(
        "-i",
        "--ignore",
        type=str,
        metavar="PATTERN",
        action=ExclusionAction,
        help=(
            "Individual gitignore-style pattern to exclude entries (can be specified multiple times). "
            "Patterns are processed in the order they appear, mixed with -e/--exclude options."
        ),
    )
    parser.add_argument(
        "-m",
        "--max-size",
        type=size_type,
        metavar="SIZE",
        help="Exclude regular files larger than SIZE (e.g. 500K, 10MB, 1GiB).",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        metavar="FILE",
        help="Output file path. If not specified, output is written to stdout.",
    )
    display = parser.add_mutually_exclusive_group()
    display.add_argument(
        "--tree",
        action="store_true",
        help="Render the stored paths as an indented tree instead of one absolute path per line.",
    )
    display.add_argument(
        "--raw",
        action="store_true",
        help="Print the encoded buffer instead of the decoded paths.",
    )
    display.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Don't print paths, and only log errors.",
    )
    parser.add_argument(
        "-s",
        "--summary",
        metavar="DEST",
        choices=["stderr", "stdout"],
        help="Print a statistics summary. Valid destinations: stderr, stdout",
    )
    parser.add_argument(
        "--verify",
        action="store_true",
        help="Check that every stored path still exists and that nothing was lost while encoding.",
    )
    parser.add_argument(
        "-P",
        "--permission-action",
        choices=["ignore", "warn", "fail"],
        default="warn",
        help="How to handle permission errors (default: warn).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debugging information.",
    )

    return parser


def validate_args(args: argparse.Namespace) -> None:
    """Validate command-line arguments beyond what argparse checks.

    Raises:
        ValueError: If any arguments fail validation.
    """
    if args.verbose and args.quiet:
        raise ValueError("-v/--verbose and -q/--quiet cannot be combined")
