"""Unit tests for parsing label filters with LabelMatcherGroupBuilder."""

import logging

import pytest

from labelpath.matchers.label_matcher_group import LabelMatcherGroupBuilder
from labelpath.types import Decision


@pytest.fixture
def temp_filter_file(tmp_path):
    filter_file = tmp_path / "filters.txt"
    filter_file.write_text("# People we care about\nPerson|>Actor\n\n  -Secret  \n/Company\n")
    return filter_file


@pytest.fixture
def temp_extra_filter_file(tmp_path):
    filter_file = tmp_path / "extra.txt"
    filter_file.write_text("+Movie\n")
    return filter_file


@pytest.mark.parametrize(
    "token, matcher_name, label, end_nodes_only",
    [
        (">Bar", "end_nodes", "Bar", True),
        ("/Baz", "terminators", "Baz", True),
        ("-Foo", "denylist", "Foo", False),
        ("+Qux", "allowlist", "Qux", False),
        ("Qux", "allowlist", "Qux", False),
        ("*Qux", "allowlist", "*Qux", False),
        ("?", "allowlist", "?", False),
    ],
)
def test_add_label_routes_token(token, matcher_name, label, end_nodes_only):
    group = LabelMatcherGroupBuilder().add_label(token).build()

    target = getattr(group, matcher_name)
    assert target.labels == frozenset({label})
    assert group.end_nodes_only == end_nodes_only

    for other in {"denylist", "allowlist", "end_nodes", "terminators"} - {matcher_name}:
        assert getattr(group, other).is_empty(), f"{other} should be empty for token {token!r}"


@pytest.mark.parametrize("token", [None, "", "+", "-"])
def test_tokens_without_label_are_discarded(token):
    group = LabelMatcherGroupBuilder().add_label(token).build()

    assert group == LabelMatcherGroupBuilder().build()
    assert group.evaluate({"Anything"}, below_min_level=False) is Decision.INCLUDE_CONTINUE


@pytest.mark.parametrize("token", [">", "/"])
def test_end_node_operator_without_label_still_restricts_results(token):
    group = LabelMatcherGroupBuilder().add_label(token).build()

    assert group.end_nodes.is_empty()
    assert group.terminators.is_empty()
    assert group.end_nodes_only
    assert group.evaluate({"Anything"}, below_min_level=False) is Decision.EXCLUDE_CONTINUE


def test_add_labels_is_equivalent_to_add_label_per_token():
    split = LabelMatcherGroupBuilder().add_labels("A|B").build()
    single = LabelMatcherGroupBuilder().add_label("A").add_label("B").build()

    assert split == single
    assert split.allowlist.labels == frozenset({"A", "B"})


@pytest.mark.parametrize("label_filter", [None, ""])
def test_add_labels_empty_is_noop(label_filter):
    builder = LabelMatcherGroupBuilder().add_labels(label_filter)
    assert builder.build() == LabelMatcherGroupBuilder().build()


def test_add_labels_skips_empty_tokens():
    group = LabelMatcherGroupBuilder().add_labels("|A||-B|").build()
    assert group.allowlist.labels == frozenset({"A"})
    assert group.denylist.labels == frozenset({"B"})


def test_add_labels_mixed_filter():
    group = LabelMatcherGroupBuilder().add_labels("Person|+Movie|-Secret|>Actor|/Company").build()

    assert group.allowlist.labels == frozenset({"Person", "Movie"})
    assert group.denylist.labels == frozenset({"Secret"})
    assert group.end_nodes.labels == frozenset({"Actor"})
    assert group.terminators.labels == frozenset({"Company"})
    assert group.end_nodes_only


def test_whitespace_is_part_of_label():
    group = LabelMatcherGroupBuilder().add_labels("A | B").build()
    assert group.allowlist.labels == frozenset({"A ", " B"})


def test_adding_same_token_twice_is_idempotent():
    once = LabelMatcherGroupBuilder().add_label("-Foo").add_label("Bar").build()
    twice = LabelMatcherGroupBuilder().add_labels("-Foo|Bar|-Foo|Bar").build()
    assert once == twice
    assert len(twice.denylist) == 1
    assert len(twice.allowlist) == 1


def test_constructor_accepts_filter():
    assert LabelMatcherGroupBuilder("A|-B").build() == LabelMatcherGroupBuilder().add_labels("A|-B").build()


def test_set_end_nodes_only():
    builder = LabelMatcherGroupBuilder("Person")
    assert not builder.end_nodes_only

    group = builder.set_end_nodes_only(True).build()
    assert group.end_nodes_only
    assert group.evaluate({"Person"}, below_min_level=False) is Decision.EXCLUDE_CONTINUE


def test_set_end_nodes_only_can_lift_restriction():
    group = LabelMatcherGroupBuilder(">Person").set_end_nodes_only(False).build()
    assert not group.end_nodes_only
    assert group.evaluate({"Other"}, below_min_level=False) is Decision.INCLUDE_CONTINUE


def test_later_tokens_restore_end_nodes_only():
    builder = LabelMatcherGroupBuilder().set_end_nodes_only(False).add_label("/Company")
    assert builder.end_nodes_only


def test_built_group_unaffected_by_later_additions():
    builder = LabelMatcherGroupBuilder("Person")
    first = builder.build()

    builder.add_labels("-Person|>Movie")
    second = builder.build()

    assert first.evaluate({"Person"}, below_min_level=False) is Decision.INCLUDE_CONTINUE
    assert not first.end_nodes_only
    assert second.evaluate({"Person"}, below_min_level=False) is Decision.EXCLUDE_PRUNE
    assert second.end_nodes_only


def test_load_filters(temp_filter_file):
    group = LabelMatcherGroupBuilder().load_filters(temp_filter_file).build()

    assert group.allowlist.labels == frozenset({"Person"})
    assert group.end_nodes.labels == frozenset({"Actor"})
    assert group.denylist.labels == frozenset({"Secret"})
    assert group.terminators.labels == frozenset({"Company"})


def test_load_filters_multiple_files(temp_filter_file, temp_extra_filter_file):
    group = LabelMatcherGroupBuilder().load_filters([str(temp_filter_file), temp_extra_filter_file]).build()
    assert group.allowlist.labels == frozenset({"Person", "Movie"})


def test_load_filters_combines_with_inline_filters(temp_filter_file):
    builder = LabelMatcherGroupBuilder("-Archived")
    group = builder.load_filters(str(temp_filter_file)).add_labels("Movie").build()

    assert group.denylist.labels == frozenset({"Archived", "Secret"})
    assert group.allowlist.labels == frozenset({"Person", "Movie"})


def test_load_filters_nonexistent_file(tmp_path):
    with pytest.raises(FileNotFoundError, match="Filter file not found"):
        LabelMatcherGroupBuilder().load_filters(tmp_path / "missing.txt")


def test_load_filters_empty_file(tmp_path):
    empty = tmp_path / "empty.txt"
    empty.write_text("")
    group = LabelMatcherGroupBuilder().load_filters(empty).build()
    assert group == LabelMatcherGroupBuilder().build()


def test_discarded_tokens_are_logged(caplog):
    with caplog.at_level(logging.DEBUG, logger="labelpath.matchers.label_matcher_group"):
        LabelMatcherGroupBuilder().add_label("+")

    assert "Discarding filter token '+'" in caplog.text


def test_build_is_logged(caplog):
    with caplog.at_level(logging.DEBUG, logger="labelpath.matchers.label_matcher_group"):
        LabelMatcherGroupBuilder(">Person").build()

    assert "Built label matcher group" in caplog.text
    assert "'end_nodes': ['Person']" in caplog.text
