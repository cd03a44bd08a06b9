"""Command-line argument parsing for labelpath.

This module defines the command-line interface for labelpath,
handling argument parsing and validation.
"""

import argparse
import os
from pathlib import Path
from typing import Any, List, Optional, Sequence, Type, Union

from labelpath import __version__
from labelpath.matchers.label_matcher_group import LabelMatcherGroupBuilder


def create_filter_action(builder: LabelMatcherGroupBuilder) -> Type[argparse.Action]:
    """Create a custom action class for feeding label filters to a builder.

    This factory function creates an action class that will update the provided
    builder as arguments are processed. This preserves the exact order of filter
    specifications as they appear on the command line.

    Args:
        builder: The builder to update during parsing.

    Returns:
        A custom action class for use with argparse.
    """

    class LabelFilterAction(argparse.Action):
        """Action to add label filters to the builder as arguments are processed."""

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

            if option_string in ("-F", "--filter-file"):
                if isinstance(values, (str, os.PathLike)):
                    builder.load_filters(values)
                else:
                    builder.load_filters(Path(str(values)))
            else:  # -l/--label-filter
                builder.add_labels(str(values))

            # Keep the raw values on the namespace as well
            if getattr(namespace, self.dest, None) is None:
                setattr(namespace, self.dest, [])
            getattr(namespace, self.dest).append(values)

    return LabelFilterAction


def create_parser(builder: LabelMatcherGroupBuilder) -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Args:
        builder: The label matcher group builder to update during parsing.

    Returns:
        An ArgumentParser instance configured with labelpath's options.
    """
    description = """
    labelpath: Try out label filters for graph path expansion.

    A label filter decides, for every node a path walk visits, whether the node is
    part of the results and whether the walk continues past it. Filters are
    pipe-delimited lists of labels, each optionally prefixed with an operator:

      -Label   denylist: exclude the node and prune the branch
      +Label   allowlist: traverse the node (a bare Label means the same)
      >Label   end node: include the node, keep walking past it
      /Label   terminator: include the node, stop walking past it

    With no allowlist labels every label is allowed. Using any end node or terminator
    label restricts results to end node and terminator matches.
    """

    epilog = """
    Examples:
      # Evaluate a single node
      labelpath --label-filter="-Secret|>Person" -n Person,Actor

      # Evaluate several nodes at depth 2 with a minimum path length of 3
      labelpath -l "/Company|Person" -n Person -n Company -d 2 -m 3

      # Combine filter files and inline filters, in command-line order
      labelpath -F filters.txt --label-filter=-Archived -N nodes.jsonl

      # Show how a filter was parsed
      labelpath -l "Person|-Secret|>Movie" -x

      # A filter starting with "-" must be attached to its option
      labelpath --label-filter=-Secret -n Person

      # Emit JSON lines
      labelpath -l ">Person" -n Person -f json

      # Display version information and exit
      labelpath -V
    """

    parser = argparse.ArgumentParser(
        prog="labelpath",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    # Version information
    parser.add_argument(
        "-V", "--version", action="version", version=f"labelpath {__version__}", help="Show the version and exit"
    )

    # Create the filter action class
    FilterAction = create_filter_action(builder)

    parser.add_argument(
        "-l",
        "--label-filter",
        type=str,
        metavar="FILTER",
        action=FilterAction,
        help=(
            "Pipe-delimited label filter such as '-Secret|>Person'. Can be specified multiple times; "
            "filters are processed in the order they appear, mixed with -F/--filter-file options."
        ),
    )
    parser.add_argument(
        "-F",
        "--filter-file",
        type=Path,
        metavar="FILE",
        action=FilterAction,
        help="File with one label filter per line ('#' starts a comment). Can be specified multiple times.",
    )
    parser.add_argument(
        "-E",
        "--end-nodes-only",
        action="store_true",
        help="Only include end node and terminator matches, even without '>' or '/' filters.",
    )
    parser.add_argument(
        "-n",
        "--node",
        dest="nodes",
        metavar="LABELS",
        action="append",
        default=[],
        help="Comma-separated labels of a node to evaluate. Can be specified multiple times.",
    )
    parser.add_argument(
        "-N",
        "--nodes-file",
        type=Path,
        metavar="FILE",
        help='JSON-lines file of nodes to evaluate, e.g. {"labels": ["Person"], "depth": 2} per line.',
    )
    parser.add_argument(
        "-d",
        "--depth",
        type=int,
        default=0,
        help="Depth of nodes given with -n/--node, and default depth for -N/--nodes-file (default: 0).",
    )
    parser.add_argument(
        "-m",
        "--min-level",
        type=int,
        default=0,
        help="Minimum path length; nodes at a smaller depth are never included (default: 0).",
    )
    parser.add_argument(
        "-f",
        "--format",
        choices=["text", "json"],
        default="text",
        help="Output format (default: text).",
    )
    parser.add_argument(
        "-x",
        "--explain",
        action="store_true",
        help="Print how the label filters were parsed.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log label matcher details to stderr.",
    )

    return parser


def wants_verbose(argv: Optional[Sequence[str]] = None) -> bool:
    """Check whether -v/--verbose was given, without running the filter actions.

    Label filters are fed to the builder while the full parser runs, so logging has
    to be configured from a separate pass over the arguments first.

    Args:
        argv: Arguments to scan. Defaults to sys.argv[1:].

    Returns:
        True if verbose logging was requested.

    Example:
        >>> wants_verbose(["-l", ">Person", "-v"])
        True
        >>> wants_verbose(["--label-filter=-v", "-n", "Person"])
        False
    """
    verbosity_parser = argparse.ArgumentParser(add_help=False)
    verbosity_parser.add_argument("-v", "--verbose", action="store_true")
    known, _ = verbosity_parser.parse_known_args(argv)
    return bool(known.verbose)


def validate_args(args: argparse.Namespace) -> None:
    """Validate command-line arguments.

    Performs additional validation beyond what argparse can handle.

    Args:
        args: Parsed command-line arguments.

    Raises:
        ValueError: If any arguments fail validation.
    """
    if not args.nodes and args.nodes_file is None and not args.explain:
        raise ValueError("Nothing to do: specify nodes with -n/--node or -N/--nodes-file, or use -x/--explain")

    if args.depth < 0:
        raise ValueError("--depth cannot be negative")
