"""Output strategy base class defining the interface for evaluation reports.

This module provides the abstract base class that defines how a label matcher group
and the decisions it produced should be rendered for output.
"""

from abc import ABC, abstractmethod
from typing import Sequence

from labelpath.matchers.label_matcher_group import LabelMatcherGroup
from labelpath.node_samples import Evaluation


class OutputStrategy(ABC):
    """Abstract base class defining the interface for evaluation report strategies.

    This class implements the Strategy pattern for rendering the results of a label
    filter in different formats (e.g., plain text tables, JSON). A report consists of
    two independent parts, either of which may be omitted by the caller:

    1. Filter - a description of the parsed matchers
    2. Evaluations - the decision reached for each node sample

    Example:
        >>> class CountingStrategy(OutputStrategy):
        ...     def format_filter(self, group: LabelMatcherGroup) -> str:
        ...         return f"{len(group.allowlist)} allowed\\n"
        ...
        ...     def format_evaluations(self, evaluations: Sequence[Evaluation]) -> str:
        ...         return f"{len(evaluations)} evaluated\\n"
        >>> CountingStrategy().format_filter(LabelMatcherGroup.from_filter("A|B"))
        '2 allowed\\n'
    """

    @abstractmethod
    def format_filter(self, group: LabelMatcherGroup) -> str:
        """Format a description of a label matcher group.

        Args:
            group: The group to describe.

        Returns:
            The formatted description, ending with a newline.
        """
        pass

    @abstractmethod
    def format_evaluations(self, evaluations: Sequence[Evaluation]) -> str:
        """Format the decisions reached for a sequence of node samples.

        Args:
            evaluations: The evaluations to report, in order.

        Returns:
            The formatted report, ending with a newline. Empty if there are no evaluations.
        """
        pass
