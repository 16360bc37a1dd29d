"""Unit tests for the verbosity configuration view."""

import pytest
from pydantic import ValidationError

from llm_verbosity.errors import InvalidConfigValue
from llm_verbosity.models.config import VerbosityConfig
from llm_verbosity.models.verbosity import Verbosity

pytestmark = pytest.mark.unit


class TestVerbosityConfig:
    """Test building the config from loader output."""

    def test_from_mapping(self):
        """Test model and verbosity are read from the raw mapping."""
        config = VerbosityConfig.from_mapping({"model": "gpt-5", "model_verbosity": "HIGH"})
        assert config.model == "gpt-5"
        assert config.model_verbosity is Verbosity.HIGH

    def test_absent_key_is_none(self):
        """Test an absent key stays distinct from any value."""
        config = VerbosityConfig.from_mapping({"model": "gpt-5"})
        assert config.model_verbosity is None

    def test_explicit_none(self):
        """Test an explicit None is treated as absent."""
        config = VerbosityConfig(model="gpt-5", model_verbosity=None)
        assert config.model_verbosity is None

    @pytest.mark.parametrize("token", ["LOUD", "", "medium "])
    def test_invalid_value_fails_load(self, token):
        """Test an invalid token fails the config load with InvalidConfigValue."""
        with pytest.raises(InvalidConfigValue) as exc_info:
            VerbosityConfig.from_mapping({"model": "gpt-5", "model_verbosity": token})
        assert exc_info.value.field == "model_verbosity"

    def test_invalid_value_fails_even_for_unsupported_model(self):
        """Test validation happens before any model check."""
        with pytest.raises(InvalidConfigValue):
            VerbosityConfig(model="gpt-4o", model_verbosity="loud")

    def test_model_required(self):
        """Test the model key is required and non-empty."""
        with pytest.raises(ValidationError):
            VerbosityConfig.from_mapping({"model_verbosity": "low"})
        with pytest.raises(ValidationError):
            VerbosityConfig(model="")

    def test_unrelated_keys_ignored(self):
        """Test keys owned by the loader do not break the view."""
        config = VerbosityConfig.from_mapping({
            "model": "gpt-5",
            "model_provider": "openai",
            "approval_policy": "on-request",
        })
        assert config.model == "gpt-5"

    def test_materialize_default_on_by_default(self):
        """Test the default policy sends the default verbosity."""
        assert VerbosityConfig(model="gpt-5").materialize_default_verbosity is True


class TestEffectiveVerbosity:
    """Test the effective verbosity a request would carry."""

    def test_supported_configured(self):
        """Test the configured value is effective for GPT-5."""
        config = VerbosityConfig(model="gpt-5", model_verbosity="low")
        assert config.effective_verbosity is Verbosity.LOW

    def test_supported_default(self):
        """Test the default is effective when unset."""
        assert VerbosityConfig(model="gpt-5-mini").effective_verbosity is Verbosity.MEDIUM

    def test_supported_default_disabled(self):
        """Test nothing is effective when unset and materialization is off."""
        config = VerbosityConfig(model="gpt-5", materialize_default_verbosity=False)
        assert config.effective_verbosity is None

    def test_unsupported(self):
        """Test nothing is effective for non GPT-5 models."""
        config = VerbosityConfig(model="gpt-4o", model_verbosity="high")
        assert config.effective_verbosity is None
