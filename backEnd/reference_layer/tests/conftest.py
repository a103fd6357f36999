"""Shared fixtures for reference layer tests."""

import io

import pytest

from reference_layer.config.settings import get_settings


VALID_CONFIG = (
    "config reference: one http://www.one.com\n"
    "config reference: two http://www.two.com\n"
    "config reference: three http://www.three.com\n"
    "config reference: one http://www.one.com\n"
    "config reference: three http://www.three.com\n"
)

MIXED_CONFIG = (
    "config reference: one http://www.one.com\n"
    "config_ reference: two http://www.two.com\n"
    "config reference_: three http://www.three.com\n"
    "config reference: four\n"
    "config reference five http://www.five.com\n"
)

INVALID_CONFIG = (
    "config reference one http://www.one.com\n"
    "config_ reference: two http://www.two.com\n"
    "config reference_: three http://www.three.com\n"
    "config reference: four\n"
)


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Settings are cached; make every test see its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def valid_stream():
    return io.StringIO(VALID_CONFIG)


@pytest.fixture
def mixed_stream():
    return io.StringIO(MIXED_CONFIG)


@pytest.fixture
def invalid_stream():
    return io.StringIO(INVALID_CONFIG)


@pytest.fixture
def config_file(tmp_path):
    """A reference.config on disk with valid, duplicate and invalid lines."""
    path = tmp_path / "reference.config"
    path.write_text(
        "# reference systems\n"
        "\n"
        "config reference: cve http://cve.mitre.org/cgi-bin/cvename.cgi?name=\n"
        "config reference: Bugtraq http://www.securityfocus.com/bid/\n"
        "config reference: BUGTRAQ http://example.com/other/\n"
        "config reference: broken\n",
        encoding="utf-8",
    )
    return path
