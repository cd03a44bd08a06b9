"""Node samples for trying out label filters outside of a graph walk.

A NodeSample is the minimal view of a visited node that a LabelMatcherGroup needs:
its labels and its depth in the walk. Samples can be written inline as comma
separated label lists or read from JSON-lines files.
"""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import FrozenSet, Iterable, Iterator, List, Optional

from labelpath.exceptions import NodeListError
from labelpath.matchers.label_matcher_group import LabelMatcherGroup, is_below_min_level
from labelpath.types import Decision, PathType

LABEL_SEPARATOR = ","


@dataclass(frozen=True)
class NodeSample:
    """Labels and depth of a node to evaluate.

    Attributes:
        labels (FrozenSet[str]): The node's labels.
        depth (int): Length of the path leading to the node.
    """

    labels: FrozenSet[str]
    depth: int = 0


@dataclass(frozen=True)
class Evaluation:
    """Outcome of evaluating one NodeSample against a group."""

    sample: NodeSample
    below_min_level: bool
    decision: Decision


def parse_label_list(text: str) -> FrozenSet[str]:
    """Parse a comma-separated label list.

    Whitespace around labels is stripped and empty entries are dropped, so an empty
    string describes a node without labels.

    Example:
        >>> sorted(parse_label_list("Person, Actor,"))
        ['Actor', 'Person']
        >>> parse_label_list("")
        frozenset()
    """
    return frozenset(label.strip() for label in text.split(LABEL_SEPARATOR) if label.strip())


def _parse_node_line(line: str, source: str, line_number: int, default_depth: int) -> NodeSample:
    try:
        entry = json.loads(line)
    except json.JSONDecodeError as e:
        raise NodeListError(source, line_number, f"invalid JSON: {e.msg}") from e

    if not isinstance(entry, dict):
        raise NodeListError(source, line_number, "expected a JSON object")

    labels = entry.get("labels", [])
    if not isinstance(labels, list) or not all(isinstance(label, str) for label in labels):
        raise NodeListError(source, line_number, "'labels' must be a list of strings")

    depth = entry.get("depth", default_depth)
    # bool is an int subclass but never a meaningful depth
    if not isinstance(depth, int) or isinstance(depth, bool) or depth < 0:
        raise NodeListError(source, line_number, "'depth' must be a non-negative integer")

    return NodeSample(frozenset(labels), depth)


def read_node_samples(lines: Iterable[str], source: str = "<input>", default_depth: int = 0) -> Iterator[NodeSample]:
    """Read node samples from JSON lines.

    Each non-blank line holds an object such as ``{"labels": ["Person"], "depth": 2}``.
    ``labels`` defaults to an empty list and ``depth`` to default_depth.

    Args:
        lines: The lines to read.
        source: Name of the input, used in error messages.
        default_depth: Depth for entries that do not specify one.

    Yields:
        One NodeSample per non-blank line.

    Raises:
        NodeListError: If a line is not a valid node entry.

    Example:
        >>> samples = list(read_node_samples(['{"labels": ["Person"], "depth": 2}', "", "{}"]))
        >>> [(sorted(s.labels), s.depth) for s in samples]
        [(['Person'], 2), ([], 0)]
    """
    for line_number, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        yield _parse_node_line(line, source, line_number, default_depth)


def load_node_samples(nodes_file: PathType, default_depth: int = 0) -> List[NodeSample]:
    """Load node samples from a JSON-lines file.

    Args:
        nodes_file: Path to the file.
        default_depth: Depth for entries that do not specify one.

    Returns:
        The samples in file order.

    Raises:
        FileNotFoundError: If the file does not exist.
        NodeListError: If a line is not a valid node entry.
    """
    path = Path(nodes_file)
    if not path.exists():
        raise FileNotFoundError(f"Nodes file not found: {path}")

    with open(path, "r") as f:
        return list(read_node_samples(f.read().splitlines(), source=str(path), default_depth=default_depth))


def evaluate_samples(
    group: LabelMatcherGroup, samples: Iterable[NodeSample], min_level: Optional[int] = None
) -> Iterator[Evaluation]:
    """Evaluate node samples against a label matcher group.

    Args:
        group: The group to evaluate with.
        samples: The samples to evaluate.
        min_level: Minimum path length of a result. None means no minimum.

    Yields:
        One Evaluation per sample, in order.
    """
    for sample in samples:
        below = min_level is not None and is_below_min_level(sample.depth, min_level)
        yield Evaluation(sample, below, group.evaluate(sample.labels, below))
