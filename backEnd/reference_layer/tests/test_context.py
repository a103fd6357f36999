"""Tests for the reference context and lookup API."""

import io
import os
from unittest.mock import patch

import pytest

from reference_layer.config.settings import DEFAULT_REFERENCE_CONFIG_PATH, Settings
from reference_layer.src.context import (
    ReferenceContext,
    get_reference,
    load_reference_config,
)
from reference_layer.src.errors import ReferenceConfigLoadError


@pytest.fixture
def context():
    with patch.dict(os.environ, {}, clear=True):
        return ReferenceContext(settings=Settings())


class TestLoadReferenceConfig:
    """Tests for load_reference_config."""

    def test_load_stream(self, context, valid_stream):
        result = load_reference_config(context, stream=valid_stream)

        assert context.store.count() == 3
        assert result.references_added == 3

    def test_case_insensitive_get(self, context, valid_stream):
        load_reference_config(context, stream=valid_stream)

        assert get_reference(context, "ONE") is get_reference(context, "one")
        assert get_reference(context, "one").url == "http://www.one.com"

    def test_get_unknown(self, context, valid_stream):
        load_reference_config(context, stream=valid_stream)
        assert get_reference(context, "four") is None

    def test_get_before_load(self, context):
        assert get_reference(context, "one") is None

    def test_mixed_stream(self, context, mixed_stream):
        result = load_reference_config(context, stream=mixed_stream)

        assert context.store.count() == 1
        assert get_reference(context, "one") is not None
        assert get_reference(context, "two") is None
        assert get_reference(context, "three") is None
        assert get_reference(context, "four") is None
        assert result.num_invalid == 4

    def test_all_invalid_stream(self, context, invalid_stream):
        load_reference_config(context, stream=invalid_stream)
        assert context.store.count() == 0

    def test_explicit_path(self, context, config_file):
        result = load_reference_config(context, path=config_file)
        assert result.source == str(config_file)
        assert get_reference(context, "BugTraq").url == "http://www.securityfocus.com/bid/"

    def test_path_from_settings(self, config_file):
        with patch.dict(os.environ, {"REFERENCE_CONFIG_FILE": str(config_file)}, clear=True):
            context = ReferenceContext(settings=Settings())

        load_reference_config(context)
        assert context.store.count() == 2

    def test_packaged_default(self, context):
        """Without an override, the packaged reference.config is loaded."""
        result = load_reference_config(context)

        assert result.source == str(DEFAULT_REFERENCE_CONFIG_PATH)
        assert not result.has_errors()
        assert get_reference(context, "cve") is not None
        assert get_reference(context, "arachnids") is not None
        assert get_reference(context, "mcafee") is not None

    def test_stream_and_path_rejected(self, context, valid_stream, config_file):
        with pytest.raises(ValueError):
            load_reference_config(context, stream=valid_stream, path=config_file)

    def test_reload_replaces_table(self, context, valid_stream):
        load_reference_config(context, stream=valid_stream)
        load_reference_config(
            context, stream=io.StringIO("config reference: cve http://cve\n")
        )

        assert context.store.count() == 1
        assert get_reference(context, "one") is None
        assert get_reference(context, "cve") is not None

    def test_failed_load_keeps_previous_table(self, context, valid_stream, tmp_path):
        load_reference_config(context, stream=valid_stream)

        with pytest.raises(ReferenceConfigLoadError):
            load_reference_config(context, path=tmp_path / "missing.config")

        assert context.store.count() == 3

    def test_repeated_loads_are_independent(self, valid_stream):
        """Two contexts loading the same input share no state."""
        first = ReferenceContext(settings=Settings())
        second = ReferenceContext(settings=Settings())

        load_reference_config(first, stream=valid_stream)
        load_reference_config(second, stream=io.StringIO(""))

        assert first.store.count() == 3
        assert second.store.count() == 0


class TestReferenceContext:
    """Tests for ReferenceContext lifecycle."""

    def test_reset(self, context, valid_stream):
        load_reference_config(context, stream=valid_stream)
        context.reset()

        assert context.store.count() == 0
        assert get_reference(context, "one") is None

    def test_repr(self, context):
        assert repr(context) == "ReferenceContext(references=0)"

    def test_default_settings(self):
        with patch.dict(os.environ, {}, clear=True):
            context = ReferenceContext()
        assert context.settings.get_reference_config_path() == DEFAULT_REFERENCE_CONFIG_PATH
