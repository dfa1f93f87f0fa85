import pytest
import sys
from pathlib import Path

# Add the repository root to sys.path so we can import core
ROOT_PATH = Path(__file__).resolve().parent.parent
if ROOT_PATH.as_posix() not in sys.path:
    sys.path.insert(0, ROOT_PATH.as_posix())

from core.settings import load_settings
from core.year_types import build_default_catalog


@pytest.fixture
def catalog():
    """A freshly built default catalog."""
    return build_default_catalog()


@pytest.fixture
def settings_file(tmp_path: Path):
    """Write a minimal settings.yaml and return its path."""
    path = tmp_path / "settings.yaml"
    path.write_text(
        "app:\n"
        "  name: Test Reports\n"
        "  environment: test\n"
        "calendar:\n"
        "  batch_year_min: 2000\n"
        "  batch_year_max: 2100\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture
def settings(settings_file: Path):
    return load_settings(settings_file)
