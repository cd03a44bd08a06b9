"""Command-line interface for labelpath.

This module provides the command-line interface for labelpath, allowing users to see
how a label filter treats nodes with given labels at given depths before using the
filter in a path expansion.

Exit Codes:
    0: Successful completion
    1: Runtime error during execution
    2: Command-line syntax error
    141: Broken pipe (SIGPIPE) while writing the report

Example:
    # Evaluate a node against a filter
    $ labelpath --label-filter="-Secret|>Person" -n Person,Actor

    # Describe a filter
    $ labelpath -l "Person|/Company" -x
"""

import logging
import os
import sys
from typing import List

from labelpath.cli.argparser import create_parser, validate_args, wants_verbose
from labelpath.matchers.label_matcher_group import LabelMatcherGroupBuilder
from labelpath.node_samples import NodeSample, evaluate_samples, load_node_samples, parse_label_list
from labelpath.output_strategies.base_strategy import OutputStrategy
from labelpath.output_strategies.json_strategy import JSONOutputStrategy
from labelpath.output_strategies.text_strategy import TextOutputStrategy

logger = logging.getLogger(__name__)


def create_output_strategy(output_format: str) -> OutputStrategy:
    """Create the output strategy for a format name.

    Args:
        output_format: Either "text" or "json".

    Returns:
        The matching output strategy.

    Raises:
        ValueError: If the format is not supported.
    """
    if output_format == "text":
        return TextOutputStrategy()
    if output_format == "json":
        return JSONOutputStrategy()
    raise ValueError(f"Unsupported output format: {output_format}")


def main() -> None:
    """Main entry point for the labelpath command-line interface.

    Exit codes:
        0: Successful completion
        1: Runtime error during execution
        2: Command-line syntax error
        141: Broken pipe (SIGPIPE) while writing the report
    """
    try:
        # Filter actions log while parsing, so configure logging before the real parse
        if wants_verbose(sys.argv[1:]):
            logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s", stream=sys.stderr)

        # Create the builder that will be populated during parsing
        builder = LabelMatcherGroupBuilder()

        parser = create_parser(builder)
        args = parser.parse_args()

        validate_args(args)

        if args.end_nodes_only:
            builder.set_end_nodes_only(True)
        group = builder.build()

        samples: List[NodeSample] = [NodeSample(parse_label_list(labels), args.depth) for labels in args.nodes]
        if args.nodes_file is not None:
            samples.extend(load_node_samples(args.nodes_file, default_depth=args.depth))
        logger.debug("Evaluating %d node(s) with minimum level %d", len(samples), args.min_level)

        strategy = create_output_strategy(args.format)
        output = ""
        if args.explain:
            output += strategy.format_filter(group)
        output += strategy.format_evaluations(list(evaluate_samples(group, samples, args.min_level)))

        try:
            sys.stdout.write(output)
            sys.stdout.flush()
        except BrokenPipeError:
            # Python flushes stdout again at exit; point it at devnull so that flush is silent
            devnull = os.open(os.devnull, os.O_WRONLY)
            os.dup2(devnull, sys.stdout.fileno())
            sys.exit(141)

    except Exception as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
