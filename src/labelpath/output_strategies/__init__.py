"""Report formats for label filter evaluations."""

from .base_strategy import OutputStrategy
from .json_strategy import JSONOutputStrategy
from .text_strategy import TextOutputStrategy

__all__ = ["OutputStrategy", "JSONOutputStrategy", "TextOutputStrategy"]
