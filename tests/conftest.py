import os
import sys
from pathlib import Path

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from mediatype import MediaType, RegistrationTree  # noqa: E402
from mediatype.config import get_settings  # noqa: E402


def pytest_configure(config):
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test"
    )


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Isolate tests from MEDIATYPE_* variables, .env files and cached settings."""
    for key in [k for k in os.environ if k.upper().startswith("MEDIATYPE_")]:
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def example_json():
    """Standards-tree media type with a suffix and two parameters."""
    media_type = MediaType(
        "application", "com.example", "json",
        registration_tree=RegistrationTree.STANDARDS,
    )
    media_type.put_parameter("version", "1")
    media_type.put_parameter("charset", "UTF-8")
    return media_type
