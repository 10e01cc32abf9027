# tests/test_config_validator.py

from unittest.mock import patch

import pytest

from core.config_validator import validate_config_on_startup, validate_required_config


def test_missing_credentials_reported():
    with patch("core.config_validator.settings") as mock_settings:
        mock_settings.SUPABASE_URL = None
        mock_settings.SUPABASE_SERVICE_ROLE_KEY = "key"
        assert validate_required_config() == ["SUPABASE_URL"]


def test_production_refuses_to_start_without_credentials():
    with patch("core.config_validator.settings") as mock_settings:
        mock_settings.SUPABASE_URL = None
        mock_settings.SUPABASE_SERVICE_ROLE_KEY = None
        mock_settings.is_production = True

        with pytest.raises(RuntimeError):
            validate_config_on_startup()


def test_development_only_warns():
    with patch("core.config_validator.settings") as mock_settings:
        mock_settings.SUPABASE_URL = None
        mock_settings.SUPABASE_SERVICE_ROLE_KEY = None
        mock_settings.SUPABASE_ANON_KEY = None
        mock_settings.is_production = False

        validate_config_on_startup()
