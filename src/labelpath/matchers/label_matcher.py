"""Set-membership matcher over node labels."""

from typing import FrozenSet, Iterable, Iterator, Optional, Set, Union

from labelpath.exceptions import FrozenMatcherError
from labelpath.types import LabelSource


class LabelMatcher:
    """Matcher that accepts a node when it carries at least one configured label.

    Patterns are plain label names. There is no wildcard syntax: a matcher with no
    patterns matches nothing, and it is up to the owning LabelMatcherGroup to treat
    an empty allowlist as "everything passes" (see is_empty()).

    Duplicate patterns collapse and insertion order is irrelevant. Empty or None
    patterns are silently ignored so that lenient filter parsing never fails.

    A matcher can be frozen with freeze(), which returns a copy whose pattern set can
    no longer change. Frozen matchers are safe to share between threads.

    Example:
        >>> matcher = LabelMatcher()
        >>> matcher.add_label("Person").add_label("Movie")  # doctest: +ELLIPSIS
        <LabelMatcher ...>
        >>> matcher.matches({"Person", "Actor"})
        True
        >>> matcher.matches({"Company"})
        False
        >>> LabelMatcher().matches({"Person"})
        False
    """

    def __init__(self, labels: Optional[Iterable[str]] = None) -> None:
        """Initialize a LabelMatcher.

        Args:
            labels: Initial label patterns. Empty strings and None entries are skipped.
        """
        self._labels: Union[Set[str], FrozenSet[str]] = set()
        self._frozen = False

        if labels is not None:
            for label in labels:
                self.add_label(label)

    def add_label(self, label: Optional[str]) -> "LabelMatcher":
        """Add a label pattern to this matcher.

        Args:
            label: The label name to match. None or an empty string is a no-op.

        Returns:
            This matcher, to allow chained calls.

        Raises:
            FrozenMatcherError: If the matcher has been frozen.
        """
        if not label:
            return self

        if self._frozen:
            raise FrozenMatcherError(label)

        # Frozen matchers hold a frozenset, so _labels is a plain set here
        self._labels.add(label)  # type: ignore[union-attr]
        return self

    def matches(self, labels: LabelSource) -> bool:
        """Check whether a node's labels intersect this matcher's patterns.

        Args:
            labels: The labels of the node being checked.

        Returns:
            True if at least one of the node's labels is a configured pattern.
        """
        return not self._labels.isdisjoint(labels)

    def is_empty(self) -> bool:
        """Check whether no patterns have been configured.

        An empty matcher never matches, but the group gives emptiness its own meaning,
        which is why it is exposed separately from matches().
        """
        return not self._labels

    def freeze(self) -> "LabelMatcher":
        """Return a frozen copy of this matcher.

        The copy shares no state with this matcher; later additions here do not affect it.

        Example:
            >>> frozen = LabelMatcher(["Person"]).freeze()
            >>> frozen.is_frozen
            True
            >>> frozen.add_label("Movie")
            Traceback (most recent call last):
                ...
            labelpath.exceptions.FrozenMatcherError: Cannot add label 'Movie' to a frozen LabelMatcher
        """
        frozen = LabelMatcher()
        frozen._labels = frozenset(self._labels)
        frozen._frozen = True
        return frozen

    @property
    def is_frozen(self) -> bool:
        return self._frozen

    @property
    def labels(self) -> FrozenSet[str]:
        """A snapshot of the configured label patterns."""
        return frozenset(self._labels)

    def __contains__(self, label: object) -> bool:
        return label in self._labels

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._labels))

    def __len__(self) -> int:
        return len(self._labels)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LabelMatcher):
            return NotImplemented
        return self._labels == other._labels

    def __hash__(self) -> int:
        if not self._frozen:
            raise TypeError("unhashable type: 'LabelMatcher' (freeze() it first)")
        return hash(self._labels)

    def __repr__(self) -> str:
        state = " frozen" if self._frozen else ""
        return f"<LabelMatcher{state} labels={sorted(self._labels)!r}>"
