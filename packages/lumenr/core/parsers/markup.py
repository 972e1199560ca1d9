"""Markup normalization for item descriptions.

Descriptions are authored in a rich-text editor and arrive as HTML
fragments. The descriptor grammar is line-oriented, so line breaks and
paragraph ends become newlines and every other tag is dropped.
"""

from __future__ import annotations

import logging
import re

logger = logging.getLogger(__name__)

_BR_RE = re.compile(r"<\s*br\s*/?>", re.IGNORECASE)
_P_CLOSE_RE = re.compile(r"<\s*/p\s*>", re.IGNORECASE)
_P_OPEN_RE = re.compile(r"<\s*p\s*>", re.IGNORECASE)
_NBSP_RE = re.compile(r"&nbsp;", re.IGNORECASE)
_TAG_RE = re.compile(r"<[^>]+>")
_NEWLINES_RE = re.compile(r"\n+")


def _strip_tags(markup: object) -> str:
    text = "" if markup is None else str(markup)
    return _NBSP_RE.sub(" ", _TAG_RE.sub(" ", text)).strip()


def to_plain_text(markup: object) -> str:
    """Convert description markup to trimmed, non-empty lines.

    Never raises; if conversion fails the input is tag-stripped as a best
    effort.

    Args:
        markup: Description HTML (None is treated as empty)

    Returns:
        Plain text, one logical line per line

    Example:
        >>> to_plain_text("<p>Source of light<br>Dim: 30</p>")
        'Source of light\\nDim: 30'
    """
    try:
        text = "" if markup is None else str(markup)
        text = _BR_RE.sub("\n", text)
        text = _P_CLOSE_RE.sub("\n", text)
        text = _P_OPEN_RE.sub("", text)
        # Tags before entities: a tag inside "&nbsp;" must not leave one behind
        text = _TAG_RE.sub("", text)
        text = _NBSP_RE.sub(" ", text)
        lines = (line.strip() for line in _NEWLINES_RE.split(text))
        return "\n".join(line for line in lines if line)
    except Exception:
        logger.debug("Markup normalization failed, falling back to tag strip", exc_info=True)
        try:
            return _strip_tags(markup)
        except Exception:
            return ""


__all__ = [
    "to_plain_text",
]
