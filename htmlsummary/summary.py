# htmlsummary/summary.py
"""
Summary info from an HTML file's meta tags, first heading and first paragraph.

    s = HtmlSummary({"PATH": "essays/ai.html", "NOT_AVAILABLE": "n/a"})
    if s.ok:
        for k, v in s.summary.items():
            print(k, v)
"""

import logging
from typing import Dict, Optional

from .config import settings
from .errors import ConfigError, SummaryError
from .loader import load
from .summarizer import normalize_fields, summarize

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())


class HtmlSummary:
    """
    Options (keys are case-insensitive):
        PATH           file to summarize, required
        NOT_AVAILABLE  replaces the process-wide placeholder default
        FIELDS         extra meta names to copy into the summary

    The summary is built on construction; check ``ok`` and ``error``.
    """

    def __init__(self, options: Optional[dict] = None, **kwargs):
        args = {}
        for key, value in {**(options or {}), **kwargs}.items():
            args[str(key).upper()] = value

        self.path = args.get("PATH")
        if not self.path:
            raise ConfigError("Required parameter field missing : PATH")

        if args.get("NOT_AVAILABLE"):
            settings.set_not_available(args["NOT_AVAILABLE"])

        self.fields = normalize_fields(args.get("FIELDS"))
        self.summary: Dict[str, str] = {}
        self.error: Optional[str] = None
        self.ok = self.get_summary()

    def _use_path(self, path, caller):
        if path is not None:
            self.path = path
        elif not self.path:
            self.error = f"{caller} requires a path argument, or that the PATH field be set."
            return None
        return self.path

    def get_summary(self, path=None) -> bool:
        """Summarize ``path`` (or the stored PATH) into ``self.summary``.

        Returns True on success. On failure returns False, leaves a message
        in ``self.error`` and empties ``self.summary``.
        """
        if self._use_path(path, "get_summary") is None:
            self.summary = {}
            return False
        try:
            html = load(self.path)
            summary = summarize(html, self.path, settings.not_available, self.fields)
        except SummaryError as e:
            self.error = str(e)
            self.summary = {}
            logger.warning("get_summary failed for %s: %s", self.path, e)
            return False
        self.summary = summary
        self.error = None
        return True

    def load_file(self, path=None) -> Optional[str]:
        """Return the file's text, or None with ``self.error`` set."""
        if self._use_path(path, "load_file") is None:
            return None
        try:
            return load(self.path)
        except SummaryError as e:
            self.error = str(e)
            logger.warning("load_file failed for %s: %s", self.path, e)
            return None
