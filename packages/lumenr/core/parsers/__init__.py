"""Parsers for description markup and the light-source grammar."""

from lumenr.core.parsers.descriptor import parse_item, parse_light_profile
from lumenr.core.parsers.markup import to_plain_text

__all__ = [
    "parse_item",
    "parse_light_profile",
    "to_plain_text",
]
