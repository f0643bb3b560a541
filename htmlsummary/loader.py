# htmlsummary/loader.py
import logging
from pathlib import Path

from .errors import ConfigError, LoadError

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())


def load(path) -> str:
    """Read the whole file at ``path`` and return it as text.

    Bytes that are not valid UTF-8 are replaced rather than rejected.
    Raises LoadError (an OSError) naming the path if it can't be read.
    """
    if not path:
        raise ConfigError("load_file requires a path argument, or that the PATH field be set.")
    p = Path(path)
    try:
        with p.open('rb') as f:
            raw = f.read()
    except OSError as e:
        raise LoadError(f"load_file could not open {path}: {e.strerror or e}") from e
    logger.debug("Loaded %d bytes from %s", len(raw), path)
    return raw.decode('utf-8', errors='replace')
