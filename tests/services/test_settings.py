"""AppSettings - tests for configuration validation.

Tests cover:
    - log_level accepts level names in any case
    - log_level rejects unknown names
"""

import pytest
from pydantic import ValidationError

from core.config import AppSettings


def test_log_level_is_normalized_to_upper_case():
    assert AppSettings(log_level=" debug ").log_level == "DEBUG"


def test_log_level_from_env(monkeypatch):
    monkeypatch.setenv("GH_SEARCH_LOG_LEVEL", "info")
    assert AppSettings().log_level == "INFO"


def test_unknown_log_level_is_rejected():
    with pytest.raises(ValidationError):
        AppSettings(log_level="verbose")
