from enum import Enum
from os import PathLike
from typing import AbstractSet, Iterable, Union

# Complete path type including strings and any path-like object
PathType = Union[str, PathLike[str]]

# Labels attached to a single node
LabelSet = AbstractSet[str]

# Anything a matcher will accept as the labels of a node
LabelSource = Union[LabelSet, Iterable[str]]


class Decision(str, Enum):
    """Joint include/continue decision for a node visited during a path walk.

    Each value combines two independent answers: whether the node is included in
    the emitted results, and whether the walk continues past it.

    Attributes:
        INCLUDE_CONTINUE: Emit the node and keep expanding its neighbors.
        INCLUDE_PRUNE: Emit the node but do not expand past it.
        EXCLUDE_CONTINUE: Do not emit the node, but keep expanding past it.
        EXCLUDE_PRUNE: Neither emit the node nor expand past it.

    Example:
        >>> Decision.of(include=True, proceed=False).name
        'INCLUDE_PRUNE'
        >>> Decision.EXCLUDE_CONTINUE.includes, Decision.EXCLUDE_CONTINUE.continues
        (False, True)
    """

    INCLUDE_CONTINUE = "include_continue"
    INCLUDE_PRUNE = "include_prune"
    EXCLUDE_CONTINUE = "exclude_continue"
    EXCLUDE_PRUNE = "exclude_prune"

    @property
    def includes(self) -> bool:
        """True if the node should be emitted as part of a result path."""
        return self in (Decision.INCLUDE_CONTINUE, Decision.INCLUDE_PRUNE)

    @property
    def continues(self) -> bool:
        """True if the walk should expand the node's neighbors."""
        return self in (Decision.INCLUDE_CONTINUE, Decision.EXCLUDE_CONTINUE)

    @classmethod
    def of(cls, include: bool, proceed: bool) -> "Decision":
        """Build the decision matching a pair of include/continue answers."""
        if include:
            return cls.INCLUDE_CONTINUE if proceed else cls.INCLUDE_PRUNE
        return cls.EXCLUDE_CONTINUE if proceed else cls.EXCLUDE_PRUNE
