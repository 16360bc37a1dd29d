"""Shared pytest fixtures for LLM Verbosity tests."""

import logging

import pytest

from llm_verbosity.models.config import VerbosityConfig
from llm_verbosity.models.verbosity import Verbosity


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests of a single module")
    config.addinivalue_line("markers", "integration: config-to-serialized-request tests")


@pytest.fixture
def sample_request_skeleton():
    """A Responses API request skeleton without a text field."""
    return {
        "model": "gpt-5",
        "input": [{"role": "user", "content": "Summarize the release notes."}],
        "instructions": "You are a concise assistant.",
        "max_output_tokens": 512,
    }


@pytest.fixture
def structured_output_text_config():
    """A text config carrying a JSON schema format block."""
    return {
        "format": {
            "type": "json_schema",
            "name": "result",
            "schema": {
                "type": "object",
                "properties": {"summary": {"type": "string"}},
                "required": ["summary"],
                "additionalProperties": False,
            },
            "strict": True,
        }
    }


@pytest.fixture
def gpt5_config():
    """Config for a GPT-5 model with low verbosity."""
    return VerbosityConfig(model="gpt-5", model_verbosity=Verbosity.LOW)


@pytest.fixture
def gpt4o_config():
    """Config for a GPT-4o model with low verbosity."""
    return VerbosityConfig(model="gpt-4o", model_verbosity=Verbosity.LOW)


@pytest.fixture
def verbosity_log(caplog):
    """Capture llm_verbosity log records at DEBUG and above."""
    caplog.set_level(logging.DEBUG, logger="llm_verbosity")
    return caplog
