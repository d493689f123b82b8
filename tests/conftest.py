"""
Global pytest fixtures and configuration for test suite.

This module provides reusable fixtures for:
- Label histories and in-memory label sources
- Engine construction
- Mock settings/configuration
- Temporary history files
"""

import json
import os

import pytest
import structlog
from structlog.testing import capture_logs

from label_suggestions.config import Settings
from label_suggestions.engine import SuggestionLabels
from label_suggestions.models.labels import Intent, LabelHistory
from label_suggestions.sources.static import StaticLabelSource


@pytest.fixture
def mock_settings() -> Settings:
    """
    Create mock settings for testing with safe defaults.

    Returns:
        Settings instance with test configuration
    """
    return Settings(
        log_level="INFO",
        log_json=False,  # Easier to read in tests
        default_top_suggestions_count=3,
        default_intent="send",
    )


@pytest.fixture
def wallet_history() -> LabelHistory:
    """
    Label history of a small wallet, oldest groups first.

    Returns:
        LabelHistory with all four sources populated
    """
    return LabelHistory(
        receive_key_labels=[["rent"], ["salary", "employer"], ["coffee"]],
        receive_address_labels=[["salary"], ["friends"]],
        change_address_labels=[["change"], ["Change of (1qv8)"]],
        transaction_labels=[["exchange"], ["coffee", "test"], ["groceries"]],
    )


@pytest.fixture
def wallet_source(wallet_history) -> StaticLabelSource:
    """In-memory label source over wallet_history."""
    return StaticLabelSource(wallet_history)


@pytest.fixture
def make_engine(wallet_source):
    """
    Factory building engines over wallet_source.

    Returns:
        Callable(intent, top_suggestions_count, labels) -> SuggestionLabels
    """

    def _make(intent=Intent.SEND, top_suggestions_count=3, labels=None, source=None):
        return SuggestionLabels(source or wallet_source, intent, top_suggestions_count, labels)

    return _make


@pytest.fixture
def history_file(tmp_path, wallet_history):
    """
    Write wallet_history to a temporary JSON file.

    Returns:
        Path to the JSON file
    """
    path = tmp_path / "history.json"
    path.write_text(json.dumps(wallet_history.model_dump()), encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def reset_env_vars():
    """
    Reset environment variables before each test.

    This prevents test pollution from env var changes.
    """
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)


def pytest_configure(config):
    """
    Configure pytest with custom markers and settings.
    """
    config.addinivalue_line(
        "markers", "unit: Unit tests (fast, no external dependencies)"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests (end-to-end)"
    )


@pytest.fixture(autouse=True)
def captured_logs():
    """
    Capture structlog events instead of printing them.

    Yields:
        List of captured event dicts
    """
    structlog.reset_defaults()
    with capture_logs() as logs:
        yield logs
    structlog.reset_defaults()
