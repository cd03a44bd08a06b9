"""Tests for the Decision enum."""

import pytest

from labelpath.types import Decision


@pytest.mark.parametrize(
    "decision, includes, continues",
    [
        (Decision.INCLUDE_CONTINUE, True, True),
        (Decision.INCLUDE_PRUNE, True, False),
        (Decision.EXCLUDE_CONTINUE, False, True),
        (Decision.EXCLUDE_PRUNE, False, False),
    ],
)
def test_decision_bits(decision, includes, continues):
    assert decision.includes == includes
    assert decision.continues == continues
    assert Decision.of(include=includes, proceed=continues) is decision


def test_decision_values():
    assert Decision("include_prune") is Decision.INCLUDE_PRUNE
    assert Decision.EXCLUDE_CONTINUE == "exclude_continue"
    assert len(Decision) == 4
