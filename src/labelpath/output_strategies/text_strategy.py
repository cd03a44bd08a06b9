"""Plain text output strategy rendering evaluations as tables."""

from typing import Sequence

from humanfriendly.tables import format_pretty_table
from humanfriendly.text import pluralize

from labelpath.matchers.label_matcher_group import LabelMatcherGroup
from labelpath.node_samples import Evaluation

from .base_strategy import OutputStrategy

NO_LABELS = "(none)"


def _join_labels(labels: Sequence[str]) -> str:
    return ", ".join(labels) if labels else NO_LABELS


class TextOutputStrategy(OutputStrategy):
    """Output strategy that renders reports as human-readable tables.

    The filter description lists each matcher with its label patterns, and the
    evaluation report has one row per node with its labels, depth, whether it is below
    the minimum level, whether it is included and whether the walk continues past it.
    Tables are drawn with humanfriendly so that column widths follow the content.
    """

    def format_filter(self, group: LabelMatcherGroup) -> str:
        rows = [
            ["Denylist", _join_labels(list(group.denylist))],
            ["Allowlist", _join_labels(list(group.allowlist)) if not group.allowlist.is_empty() else "(all labels)"],
            ["End nodes", _join_labels(list(group.end_nodes))],
            ["Terminators", _join_labels(list(group.terminators))],
            ["End nodes only", "yes" if group.end_nodes_only else "no"],
        ]
        return format_pretty_table(rows, column_names=["Matcher", "Labels"]) + "\n"

    def format_evaluations(self, evaluations: Sequence[Evaluation]) -> str:
        if not evaluations:
            return ""

        rows = [
            [
                _join_labels(sorted(evaluation.sample.labels)),
                str(evaluation.sample.depth),
                "yes" if evaluation.below_min_level else "no",
                "include" if evaluation.decision.includes else "exclude",
                "continue" if evaluation.decision.continues else "prune",
            ]
            for evaluation in evaluations
        ]
        table = format_pretty_table(rows, column_names=["Labels", "Depth", "Below min level", "Result", "Walk"])
        included = sum(1 for evaluation in evaluations if evaluation.decision.includes)
        return f"{table}\n{pluralize(len(evaluations), 'node')} evaluated, {included} included\n"
