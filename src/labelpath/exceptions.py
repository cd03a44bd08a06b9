class FrozenMatcherError(Exception):
    """
    Exception raised when a pattern is added to a frozen label matcher.

    Matchers owned by a built LabelMatcherGroup are frozen so the group can be shared
    across concurrently running walks. Further configuration has to go through a
    LabelMatcherGroupBuilder, which produces a new group.

    Example:
        >>> error = FrozenMatcherError("Person")
        >>> str(error)
        "Cannot add label 'Person' to a frozen LabelMatcher"
    """

    def __init__(self, label: str) -> None:
        """
        Initialize the exception with the label that was rejected.

        Args:
            label (str): The label pattern that could not be added.
        """
        self.label = label
        super().__init__(f"Cannot add label {label!r} to a frozen LabelMatcher")


class NodeListError(Exception):
    """
    Exception raised when a node list cannot be read.

    Node lists are JSON-lines sources where every non-blank line describes one node to
    evaluate. This exception identifies the offending source and line so the caller
    can point the user at it.

    Attributes:
        source (str): Name of the file (or other source) being read.
        line_number (int): 1-based line number of the malformed entry.
        reason (str): Description of what is wrong with the entry.

    Example:
        >>> error = NodeListError("nodes.jsonl", 3, "expected a JSON object")
        >>> str(error)
        'nodes.jsonl:3: expected a JSON object'
    """

    def __init__(self, source: str, line_number: int, reason: str) -> None:
        self.source = source
        self.line_number = line_number
        self.reason = reason
        super().__init__(f"{source}:{line_number}: {reason}")
