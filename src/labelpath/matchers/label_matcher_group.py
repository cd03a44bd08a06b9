"""Composition of label matchers into a per-node path filter decision.

A label filter such as ``"-Secret|>Person|/Company|Movie"`` is parsed into four
matchers (denylist, allowlist, end node and terminator). For every node a graph walk
visits, the resulting LabelMatcherGroup decides whether the node is included in the
results and whether the walk continues past it.
"""

import logging
from dataclasses import dataclass, field
from os import PathLike
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Union

from labelpath.matchers.filter_operator import FilterOperator, parse_filter_token
from labelpath.matchers.label_matcher import LabelMatcher
from labelpath.types import Decision, LabelSet, LabelSource, PathType

logger = logging.getLogger(__name__)

FILTER_SEPARATOR = "|"
COMMENT_PREFIX = "#"


def is_below_min_level(depth: int, min_level: int) -> bool:
    """Check whether a node's depth is short of the configured minimum path length.

    Args:
        depth: Length of the path from the start node to the node being evaluated.
        min_level: Minimum path length a result must have.

    Returns:
        True if the node is too shallow to be emitted as a result.

    Example:
        >>> is_below_min_level(1, 2)
        True
        >>> is_below_min_level(2, 2)
        False
    """
    return depth < min_level


def _frozen_matcher() -> LabelMatcher:
    return LabelMatcher().freeze()


@dataclass(frozen=True)
class LabelMatcherGroup:
    """Immutable group of label matchers deciding how a path walk treats each node.

    Matchers are consulted in a fixed order and the first one that applies decides:

    1. Denylist hit: the node is excluded and its branch pruned, whatever else is
       configured and however deep the node is.
    2. Terminator hit: the node ends a valid path. It is included and the walk stops
       extending past it, unless the node is below the minimum level, in which case it
       is excluded and the walk continues in search of a longer path.
    3. End node hit: like a terminator, except the walk always continues past it.
    4. Allowlist empty or hit: the node is traversed. It is included only when the
       group is not restricted to end nodes and the node is not below the minimum level.
    5. Anything else is excluded and pruned, exactly like a denylist hit.

    Groups are created with LabelMatcherGroupBuilder (or from_filter()) and cannot be
    changed afterwards, so a single group can be shared by concurrently running walks.

    Attributes:
        denylist (LabelMatcher): Labels that reject a node and prune its branch.
        allowlist (LabelMatcher): Labels a node may carry to be traversed. Empty means
            every label is allowed.
        end_nodes (LabelMatcher): Labels marking candidate results.
        terminators (LabelMatcher): Labels marking results past which the walk stops.
        end_nodes_only (bool): Whether only end and terminator nodes are emitted.

    Example:
        >>> group = LabelMatcherGroup.from_filter("-Secret|>Person|/Company")
        >>> group.evaluate({"Person"}, below_min_level=False).name
        'INCLUDE_CONTINUE'
        >>> group.evaluate({"Company"}, below_min_level=False).name
        'INCLUDE_PRUNE'
        >>> group.evaluate({"Movie"}, below_min_level=False).name
        'EXCLUDE_CONTINUE'
        >>> group.evaluate({"Person", "Secret"}, below_min_level=False).name
        'EXCLUDE_PRUNE'
    """

    denylist: LabelMatcher = field(default_factory=_frozen_matcher)
    allowlist: LabelMatcher = field(default_factory=_frozen_matcher)
    end_nodes: LabelMatcher = field(default_factory=_frozen_matcher)
    terminators: LabelMatcher = field(default_factory=_frozen_matcher)
    end_nodes_only: bool = False

    def __post_init__(self) -> None:
        # Callers constructing a group directly may hand over mutable matchers
        for name in ("denylist", "allowlist", "end_nodes", "terminators"):
            matcher: LabelMatcher = getattr(self, name)
            if not matcher.is_frozen:
                object.__setattr__(self, name, matcher.freeze())

    @classmethod
    def from_filter(cls, label_filter: Optional[str]) -> "LabelMatcherGroup":
        """Build a group from a pipe-delimited label filter string.

        Args:
            label_filter: Filter spec such as ``"-Secret|>Person"``. None or empty
                yields a group that includes and continues through every node.

        Returns:
            The built group.
        """
        return LabelMatcherGroupBuilder().add_labels(label_filter).build()

    def evaluate(self, labels: LabelSource, below_min_level: bool) -> Decision:
        """Decide how the walk should treat a node carrying the given labels.

        Args:
            labels: The labels of the visited node.
            below_min_level: Whether the node's depth is less than the minimum path
                length required of a result (see is_below_min_level()).

        Returns:
            The include/continue decision for the node.
        """
        node_labels: LabelSet = labels if isinstance(labels, (set, frozenset)) else frozenset(labels)

        if self.denylist.matches(node_labels):
            return Decision.EXCLUDE_PRUNE

        if self.terminators.matches(node_labels):
            return Decision.EXCLUDE_CONTINUE if below_min_level else Decision.INCLUDE_PRUNE

        if self.end_nodes.matches(node_labels):
            return Decision.EXCLUDE_CONTINUE if below_min_level else Decision.INCLUDE_CONTINUE

        if self.allowlist.is_empty() or self.allowlist.matches(node_labels):
            if self.end_nodes_only or below_min_level:
                return Decision.EXCLUDE_CONTINUE
            return Decision.INCLUDE_CONTINUE

        return Decision.EXCLUDE_PRUNE

    def to_dict(self) -> Dict[str, Union[bool, List[str]]]:
        """Describe the configured matchers.

        Returns:
            A mapping of matcher name to its sorted label patterns, plus the
            end_nodes_only flag.

        Example:
            >>> LabelMatcherGroup.from_filter("B|A|>C").to_dict()
            {'denylist': [], 'allowlist': ['A', 'B'], 'end_nodes': ['C'], 'terminators': [], 'end_nodes_only': True}
        """
        return {
            "denylist": list(self.denylist),
            "allowlist": list(self.allowlist),
            "end_nodes": list(self.end_nodes),
            "terminators": list(self.terminators),
            "end_nodes_only": self.end_nodes_only,
        }


class LabelMatcherGroupBuilder:
    """Accumulates label filter tokens and builds immutable LabelMatcherGroups.

    Each token's first character selects its matcher:

    - ``>`` adds an end node label and restricts results to end nodes.
    - ``/`` adds a terminator label and restricts results to end nodes.
    - ``-`` adds a denylist label.
    - ``+`` adds an allowlist label.
    - Anything else adds the whole token, first character included, to the allowlist.

    Parsing never fails. Empty tokens, and tokens that are only an operator, are
    dropped without error.

    Example:
        >>> builder = LabelMatcherGroupBuilder()
        >>> _ = builder.add_labels("Person|-Secret").add_label(">Movie")
        >>> builder.end_nodes_only
        True
        >>> group = builder.build()
        >>> sorted(group.allowlist.labels), sorted(group.denylist.labels), sorted(group.end_nodes.labels)
        (['Person'], ['Secret'], ['Movie'])
    """

    def __init__(self, label_filter: Optional[str] = None) -> None:
        """Initialize the builder.

        Args:
            label_filter: Optional pipe-delimited filter spec to start from.
        """
        self._denylist = LabelMatcher()
        self._allowlist = LabelMatcher()
        self._end_nodes = LabelMatcher()
        self._terminators = LabelMatcher()
        self._end_nodes_only = False

        self.add_labels(label_filter)

    def add_labels(self, label_filter: Optional[str]) -> "LabelMatcherGroupBuilder":
        """Add every token of a pipe-delimited filter spec, in order.

        Args:
            label_filter: Filter spec such as ``"Person|-Secret|>Movie"``. None or an
                empty string is a no-op.

        Returns:
            This builder, to allow chained calls.
        """
        if label_filter:
            for token in label_filter.split(FILTER_SEPARATOR):
                self.add_label(token)
        return self

    def add_label(self, token: Optional[str]) -> "LabelMatcherGroupBuilder":
        """Add a single filter token.

        Args:
            token: A token optionally prefixed with one of ``>``, ``/``, ``-`` or ``+``.
                None or an empty string is a no-op.

        Returns:
            This builder, to allow chained calls.
        """
        parsed = parse_filter_token(token)
        if parsed is None:
            return self

        if parsed.operator.restricts_to_end_nodes:
            self._end_nodes_only = True

        if not parsed.label:
            logger.debug("Discarding filter token %r with no label", token)
            return self

        logger.debug("Adding label %r to the %s matcher", parsed.label, parsed.operator.name.lower())
        self._matcher_for(parsed.operator).add_label(parsed.label)
        return self

    def load_filters(self, filter_files: Union[PathType, Sequence[PathType]]) -> "LabelMatcherGroupBuilder":
        """Load filter specs from one or more files.

        Each non-blank line is a pipe-delimited filter spec. Lines starting with ``#``
        are comments. Files are processed in order, lines top to bottom.

        Args:
            filter_files: Path to a filter file or a sequence of paths.

        Returns:
            This builder, to allow chained calls.

        Raises:
            FileNotFoundError: If any filter file does not exist.
        """
        # Convert to list if it's a single path
        if isinstance(filter_files, (str, PathLike)):
            filter_files = [filter_files]

        for filter_file in filter_files:
            path = Path(filter_file)
            if not path.exists():
                raise FileNotFoundError(f"Filter file not found: {path}")

            logger.debug("Loading label filters from %s", path)
            with open(path, "r") as f:
                for line in f.read().splitlines():
                    line = line.strip()
                    if not line or line.startswith(COMMENT_PREFIX):
                        continue
                    self.add_labels(line)

        return self

    def set_end_nodes_only(self, end_nodes_only: bool) -> "LabelMatcherGroupBuilder":
        """Force or lift the restriction of results to end and terminator nodes.

        Args:
            end_nodes_only: The new value of the flag.

        Returns:
            This builder, to allow chained calls.
        """
        self._end_nodes_only = end_nodes_only
        return self

    @property
    def end_nodes_only(self) -> bool:
        return self._end_nodes_only

    def build(self) -> LabelMatcherGroup:
        """Snapshot the accumulated configuration into an immutable group.

        The builder remains usable; groups already built are not affected by later
        additions.

        Returns:
            A new LabelMatcherGroup.
        """
        group = LabelMatcherGroup(
            denylist=self._denylist.freeze(),
            allowlist=self._allowlist.freeze(),
            end_nodes=self._end_nodes.freeze(),
            terminators=self._terminators.freeze(),
            end_nodes_only=self._end_nodes_only,
        )
        logger.debug("Built label matcher group %s", group.to_dict())
        return group

    def _matcher_for(self, operator: FilterOperator) -> LabelMatcher:
        return {
            FilterOperator.END_NODE: self._end_nodes,
            FilterOperator.TERMINATOR: self._terminators,
            FilterOperator.DENY: self._denylist,
            FilterOperator.ALLOW: self._allowlist,
        }[operator]
