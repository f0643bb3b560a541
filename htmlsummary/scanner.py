# htmlsummary/scanner.py
"""
Ordered tag/text scans over a parsed HTML document.

The document is parsed once; every scan then walks the same tree from the
start, so looking for ``h1``, ``h2`` and ``p`` are independent passes.
"""

import logging
from typing import Optional

from bs4 import BeautifulSoup, FeatureNotFound
from bs4.element import NavigableString, PreformattedString, Tag

from .config import settings
from .errors import ParseError

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())

# Tags rendered inline as their alt text instead of ending a text run.
TEXTIFY = {"img": "alt", "applet": "alt"}


def parse_document(text: str, features: Optional[str] = None) -> BeautifulSoup:
    features = features or settings.parser
    try:
        return BeautifulSoup(text, features)
    except FeatureNotFound as e:
        raise ParseError(f"HTML parser {features!r} could not initiate: {e}") from e
    except Exception as e:
        raise ParseError(f"HTML parser {features!r} failed: {e}") from e


def trim(text: str) -> str:
    """Collapse whitespace runs to one space and strip the edges."""
    return " ".join(text.split())


def _text_run(tag: Tag) -> str:
    parts = []
    for child in tag.children:
        if isinstance(child, Tag):
            attr = TEXTIFY.get(child.name)
            if attr is None:
                break
            parts.append(child.get(attr) or f"[{child.name.upper()}]")
        elif isinstance(child, PreformattedString):
            # comments, declarations and PIs are skipped
            continue
        elif isinstance(child, NavigableString):
            parts.append(str(child))
    return trim("".join(parts))


def first_tag_text(soup: BeautifulSoup, name: str) -> Optional[str]:
    """
    Find the first ``name`` element in document order and return the trimmed
    text that directly follows its start tag, up to the next tag.

    Returns None when the document has no such element.
    """
    tag = soup.find(name)
    if tag is None:
        return None
    return _text_run(tag)
