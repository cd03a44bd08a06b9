"""JSON output strategy for evaluation reports.

This module provides a strategy for rendering reports as JSON lines: one JSON object
for the filter description and one per evaluated node.
"""

import json
from typing import Sequence

from labelpath.matchers.label_matcher_group import LabelMatcherGroup
from labelpath.node_samples import Evaluation

from .base_strategy import OutputStrategy


class JSONOutputStrategy(OutputStrategy):
    """Output strategy that renders reports as JSON lines.

    The filter is formatted as:
    {
        "type": "filter",
        "denylist": [...],
        "allowlist": [...],
        "end_nodes": [...],
        "terminators": [...],
        "end_nodes_only": false
    }

    Each evaluation is formatted as:
    {
        "type": "node",
        "labels": ["Person"],
        "depth": 1,
        "below_min_level": false,
        "decision": "include_continue",
        "include": true,
        "continue": true
    }

    Labels are sorted so that output is stable regardless of set ordering.

    Example:
        >>> strategy = JSONOutputStrategy()
        >>> strategy.format_filter(LabelMatcherGroup.from_filter("-Secret"))
        '{"type": "filter", "denylist": ["Secret"], "allowlist": [], "end_nodes": [], "terminators": [], "end_nodes_only": false}\\n'
    """

    def format_filter(self, group: LabelMatcherGroup) -> str:
        return json.dumps({"type": "filter", **group.to_dict()}) + "\n"

    def format_evaluations(self, evaluations: Sequence[Evaluation]) -> str:
        return "".join(json.dumps(self._evaluation_to_dict(evaluation)) + "\n" for evaluation in evaluations)

    @staticmethod
    def _evaluation_to_dict(evaluation: Evaluation) -> dict:
        return {
            "type": "node",
            "labels": sorted(evaluation.sample.labels),
            "depth": evaluation.sample.depth,
            "below_min_level": evaluation.below_min_level,
            "decision": evaluation.decision.value,
            "include": evaluation.decision.includes,
            "continue": evaluation.decision.continues,
        }
