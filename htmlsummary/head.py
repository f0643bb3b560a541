# htmlsummary/head.py
"""
Head-region metadata as a header-style mapping.

``<title>`` becomes ``title``, ``<meta name="author">`` becomes
``X-Meta-Author`` and ``<meta http-equiv="Last-Modified">`` becomes
``Last-Modified``. Lookups ignore case and treat ``_`` as ``-``.
"""

import logging

from bs4 import BeautifulSoup
from bs4.element import NavigableString, PreformattedString, Tag
from requests.structures import CaseInsensitiveDict

from .scanner import trim

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())

META_PREFIX = "X-Meta-"

HEAD_ELEMENTS = {"title", "base", "link", "meta", "isindex", "script", "style", "object", "bgsound"}
# text inside these is content of a head element, not the start of the body
TEXT_HOLDERS = {"title", "script", "style", "object"}


def _field(name: str) -> str:
    return name.replace("_", "-")


class HeadFields(CaseInsensitiveDict):
    def __setitem__(self, key, value):
        super().__setitem__(_field(key), value)

    def __getitem__(self, key):
        return super().__getitem__(_field(key))

    def __delitem__(self, key):
        super().__delitem__(_field(key))

    def push(self, name: str, value: str):
        """Add a value, joining repeats of the same field with ', '."""
        existing = self.get(name)
        self[name] = value if existing is None else f"{existing}, {value}"

    def meta(self, name: str):
        return self.get(META_PREFIX + name)


def _head_elements(soup: BeautifulSoup):
    root = soup.head if soup.head is not None else soup
    for el in root.descendants:
        if isinstance(el, Tag):
            if el.name in ("html", "head"):
                continue
            if el.name not in HEAD_ELEMENTS:
                return
            yield el
        elif isinstance(el, NavigableString) and not isinstance(el, PreformattedString):
            if el.strip() and el.parent.name not in TEXT_HOLDERS:
                return


def parse_head(soup: BeautifulSoup) -> HeadFields:
    fields = HeadFields()
    for el in _head_elements(soup):
        if el.name == "title":
            title = trim(el.get_text())
            if title:
                fields.push("title", title)
        elif el.name == "meta":
            content = (el.get("content") or "").strip()
            if not content:
                continue
            name = (el.get("name") or "").strip()
            equiv = (el.get("http-equiv") or "").strip()
            if name:
                fields.push(META_PREFIX + name, content)
            if equiv:
                fields.push(equiv, content)
    logger.debug("Head fields: %s", list(fields.keys()))
    return fields
