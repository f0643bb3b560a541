# htmlsummary/summarizer.py
"""
Build a summary record for one HTML document.

Fixed fields:
- TITLE, AUTHOR, DESCRIPTION: from <title> and the author/description metas
- HEADLINE: first h1, failing that the first h2
- FIRST_PARA: first p
- LAST_MODIFIED_FILE, CREATED_FILE: from the file system
- LAST_MODIFIED_META, CREATED_META: from the last-modified meta, falling back
  to the matching file time

Anything that can't be resolved holds the placeholder.
"""

import logging
import os
import re
import time
from collections.abc import Iterable as IterableABC
from typing import Dict, Iterable, Optional, Tuple

from .config import settings
from .errors import ConfigError
from .head import parse_head
from .scanner import first_tag_text, parse_document

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())

FIXED_FIELDS = (
    "TITLE",
    "AUTHOR",
    "DESCRIPTION",
    "HEADLINE",
    "FIRST_PARA",
    "LAST_MODIFIED_META",
    "LAST_MODIFIED_FILE",
    "CREATED_META",
    "CREATED_FILE",
)


def format_time(ts: Optional[float]) -> Optional[str]:
    if ts is None:
        return None
    return re.sub(r'\s+', ' ', time.ctime(ts))


def file_times(path) -> Tuple[Optional[str], Optional[str]]:
    """Return (modified, changed) for ``path`` as readable local times, or (None, None)."""
    try:
        st = os.stat(path)
    except (OSError, ValueError) as e:
        logger.debug("stat failed for %s: %s", path, e)
        return None, None
    return format_time(st.st_mtime), format_time(st.st_ctime)


def _first(*values, default):
    for v in values:
        if v:
            return v
    return default


def normalize_fields(fields) -> Tuple[str, ...]:
    """Accept any iterable of names (a mapping's keys count); drop duplicates, keep order."""
    if not fields:
        return ()
    if isinstance(fields, str):
        fields = [fields]
    elif not isinstance(fields, IterableABC):
        raise ConfigError(f"FIELDS must be a collection of names, got {fields!r}")
    names = []
    for name in fields:
        if not isinstance(name, str) or not name.strip():
            raise ConfigError(f"Extra field names must be non-empty strings, got {name!r}")
        if name not in names:
            names.append(name)
    return tuple(names)


def summarize(
    text: str,
    path,
    placeholder: Optional[str] = None,
    extra_fields: Iterable[str] = (),
    features: Optional[str] = None,
) -> Dict[str, str]:
    na = placeholder or settings.not_available
    extra = normalize_fields(extra_fields)

    # parse errors propagate: no partial record
    soup = parse_document(text, features)

    summary = {}
    summary["HEADLINE"] = _first(first_tag_text(soup, "h1"), first_tag_text(soup, "h2"), default=na)
    summary["FIRST_PARA"] = _first(first_tag_text(soup, "p"), default=na)

    head = parse_head(soup)
    summary["TITLE"] = _first(head.get("title"), default=na)
    summary["AUTHOR"] = _first(head.meta("author"), default=na)
    summary["DESCRIPTION"] = _first(head.meta("description"), default=na)

    modified, changed = file_times(path)
    summary["LAST_MODIFIED_FILE"] = _first(modified, default=na)
    summary["CREATED_FILE"] = _first(changed, default=na)

    # both *_META fields read the last-modified meta
    last_modified = head.meta("last-modified")
    summary["LAST_MODIFIED_META"] = _first(last_modified, summary["LAST_MODIFIED_FILE"], default=na)
    summary["CREATED_META"] = _first(last_modified, summary["CREATED_FILE"], default=na)

    for name in extra:
        if summary.get(name, na) != na:
            continue
        summary[name] = _first(head.meta(name), default=na)

    logger.debug("Summarized %s: %d fields", path, len(summary))
    return summary
