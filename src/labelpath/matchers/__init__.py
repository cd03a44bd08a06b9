"""Label matchers for filtering the nodes of a path walk."""

from .filter_operator import FilterOperator, FilterToken, parse_filter_token
from .label_matcher import LabelMatcher
from .label_matcher_group import LabelMatcherGroup, LabelMatcherGroupBuilder, is_below_min_level

__all__ = [
    "FilterOperator",
    "FilterToken",
    "LabelMatcher",
    "LabelMatcherGroup",
    "LabelMatcherGroupBuilder",
    "is_below_min_level",
    "parse_filter_token",
]
