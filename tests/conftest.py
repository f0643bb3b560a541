import pytest

from htmlsummary.config import settings


@pytest.fixture(autouse=True)
def restore_placeholder():
    saved = settings.not_available
    yield
    settings.not_available = saved


@pytest.fixture
def write_html(tmp_path):
    """Write ``body`` to an .html file under tmp_path and return its path as a string."""
    def _write(body, name="page.html"):
        p = tmp_path / name
        p.write_text(body, encoding="utf-8")
        return str(p)
    return _write
