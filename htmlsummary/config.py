from pathlib import Path
from dotenv import load_dotenv
import os

from .errors import ConfigError

BASE_DIR = Path(__file__).resolve().parents[1]
load_dotenv(BASE_DIR / '.env')

DEFAULT_NOT_AVAILABLE = '[Not available]'

NOT_AVAILABLE = os.getenv('HTMLSUMMARY_NOT_AVAILABLE') or DEFAULT_NOT_AVAILABLE
PARSER = os.getenv('HTMLSUMMARY_PARSER', 'html.parser')


class Settings:
    """Process-wide defaults shared by every summary call.

    Calls that don't pass their own placeholder read ``not_available`` at
    call time, so an override applies to every later call (last write wins).
    """

    def __init__(self, not_available: str = NOT_AVAILABLE, parser: str = PARSER):
        self.not_available = not_available
        self.parser = parser

    def set_not_available(self, value: str) -> str:
        if not value:
            raise ConfigError("NOT_AVAILABLE must be a non-empty string")
        self.not_available = value
        return value


settings = Settings()
