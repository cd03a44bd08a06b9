"""Operator prefixes recognized in label filter tokens."""

from enum import Enum
from typing import NamedTuple, Optional


class FilterOperator(str, Enum):
    """Role a label filter token plays, selected by its first character.

    Values:
        END_NODE: ``>`` - the node is a candidate result; the walk may continue past it.
        TERMINATOR: ``/`` - the node is a result and the walk stops extending past it.
        DENY: ``-`` - the node is rejected and its branch pruned.
        ALLOW: ``+`` - the node may be traversed (and emitted unless end-nodes-only).
    """

    END_NODE = ">"
    TERMINATOR = "/"
    DENY = "-"
    ALLOW = "+"

    @property
    def restricts_to_end_nodes(self) -> bool:
        """True if configuring this operator limits results to end and terminator nodes."""
        return self in (FilterOperator.END_NODE, FilterOperator.TERMINATOR)


class FilterToken(NamedTuple):
    """A filter token split into its operator and the label it applies to."""

    operator: FilterOperator
    label: str


def parse_filter_token(token: Optional[str]) -> Optional[FilterToken]:
    """Split a single filter token into operator and label.

    Only the first character is inspected. A recognized operator character is
    stripped; any other first character is kept as part of the label and the token
    defaults to the allowlist. The label may come back empty (for the token ``"+"``),
    which matchers ignore.

    Args:
        token: One pipe-free token from a filter spec.

    Returns:
        The parsed token, or None if the token is None or empty.

    Example:
        >>> parse_filter_token(">Person")
        FilterToken(operator=<FilterOperator.END_NODE: '>'>, label='Person')
        >>> parse_filter_token("Movie").operator.name
        'ALLOW'
        >>> parse_filter_token("*Movie").label
        '*Movie'
        >>> parse_filter_token("-").label
        ''
        >>> parse_filter_token("") is None
        True
    """
    if not token:
        return None

    prefix = token[0]
    for operator in FilterOperator:
        if operator.value == prefix:
            return FilterToken(operator, token[1:])

    return FilterToken(FilterOperator.ALLOW, token)
