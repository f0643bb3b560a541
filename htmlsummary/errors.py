class SummaryError(Exception):
    """Base class for everything this package raises."""


class ConfigError(SummaryError):
    """A required parameter is missing or unusable."""


class LoadError(SummaryError, OSError):
    """The document could not be opened or read."""


class ParseError(SummaryError):
    """The HTML parser could not be set up for the document."""
