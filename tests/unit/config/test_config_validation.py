"""
Unit tests for config cross-field validation.

Verifies that validate_config_dependencies() catches misconfiguration
before it causes silent runtime failures.
"""

import importlib
import os
from pathlib import Path
from unittest.mock import patch

import pytest
from dotenv import dotenv_values

import juzk.config.settings as settings_mod


@pytest.fixture(autouse=True)
def _restore_settings():
    """Reload settings after each test so patched env/config does not leak."""
    yield
    importlib.reload(settings_mod)


def _run_validation(**overrides):
    """Run validate_config_dependencies with specific config attribute overrides."""
    # Reload settings to pick up env changes
    importlib.reload(settings_mod)

    # Patch individual config attributes for the test
    for attr, value in overrides.items():
        setattr(settings_mod.config, attr, value)

    return settings_mod.validate_config_dependencies()


class TestConditionalApiKeys:
    def test_no_errors_with_valid_defaults(self):
        env = {
            "OPENAI_API_KEY": "sk-test",
            "SUPABASE_URL": "http://localhost:54321",
            "SUPABASE_KEY": "test-key",
            "AI_ENABLED": "true",
        }
        with patch.dict(os.environ, env, clear=False):
            errors = _run_validation()
        assert errors == [], f"Expected no errors, got: {errors}"

    def test_ai_requires_openai_key(self):
        with patch.dict(os.environ, {"OPENAI_API_KEY": ""}, clear=False):
            errors = _run_validation(AI_ENABLED=True)
        assert any("OPENAI_API_KEY" in e for e in errors)

    def test_ai_disabled_does_not_require_openai_key(self):
        with patch.dict(os.environ, {"OPENAI_API_KEY": ""}, clear=False):
            errors = _run_validation(AI_ENABLED=False)
        assert [e for e in errors if "OPENAI_API_KEY" in e] == []


class TestSupabaseSettings:
    def test_url_must_be_http(self):
        errors = _run_validation(SUPABASE_URL="localhost:54321", SUPABASE_KEY="k")
        assert any("SUPABASE_URL" in e for e in errors)

    def test_url_without_key(self):
        errors = _run_validation(SUPABASE_URL="https://x.supabase.co", SUPABASE_KEY="")
        assert any("SUPABASE_KEY" in e for e in errors)

    def test_empty_settings_mean_local_store(self):
        _run_validation(SUPABASE_URL="", SUPABASE_KEY="")
        assert settings_mod.is_supabase_configured() is False

    def test_configured(self):
        _run_validation(SUPABASE_URL="https://x.supabase.co", SUPABASE_KEY="k")
        assert settings_mod.is_supabase_configured() is True


class TestNumericRanges:
    def test_temperature_range(self):
        errors = _run_validation(AI_TEMPERATURE=2.5)
        assert any("AI_TEMPERATURE" in e for e in errors)

    def test_max_tokens_must_be_positive(self):
        errors = _run_validation(AI_MAX_TOKENS=0)
        assert any("AI_MAX_TOKENS" in e for e in errors)

    def test_page_size_must_be_positive(self):
        errors = _run_validation(CLIENTS_PAGE_SIZE=0)
        assert any("CLIENTS_PAGE_SIZE" in e for e in errors)

    def test_chart_months_range(self):
        errors = _run_validation(FINANCE_CHART_MONTHS=36)
        assert any("FINANCE_CHART_MONTHS" in e for e in errors)

    def test_input_limit_must_be_positive(self):
        errors = _run_validation(MAX_AI_INPUT_LENGTH=-1)
        assert any("MAX_AI_INPUT_LENGTH" in e for e in errors)


class TestModelNameChecks:
    def test_empty_fast_model_is_an_error(self):
        errors = _run_validation(AI_FAST_MODEL="")
        assert any("AI_FAST_MODEL" in e for e in errors)

    def test_empty_pro_model_is_an_error(self):
        errors = _run_validation(AI_PRO_MODEL="")
        assert any("AI_PRO_MODEL" in e for e in errors)


def test_validate_env_for_app_exits_on_errors():
    importlib.reload(settings_mod)
    settings_mod.config.AI_MAX_TOKENS = 0
    with pytest.raises(SystemExit):
        settings_mod.validate_env_for_app()


def test_env_example_starts_without_errors():
    """A copy of .env.example with nothing filled in must pass validation."""
    example = Path(__file__).resolve().parents[3] / ".env.example"
    values = {k: v for k, v in dotenv_values(example).items() if v is not None}
    with patch.dict(os.environ, values, clear=False):
        errors = _run_validation()
    assert errors == [], f"Expected no errors, got: {errors}"
