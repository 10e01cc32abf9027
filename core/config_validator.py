# core/config_validator.py

from typing import List
from core.config import settings
from core.logging_config import logger


def validate_required_config() -> List[str]:
    """Return the names of required settings that are unset."""
    missing = []

    if not settings.SUPABASE_URL:
        missing.append("SUPABASE_URL")
    if not settings.SUPABASE_SERVICE_ROLE_KEY:
        missing.append("SUPABASE_SERVICE_ROLE_KEY")

    return missing


def validate_optional_config() -> List[str]:
    warnings = []

    if not settings.SUPABASE_ANON_KEY:
        warnings.append("SUPABASE_ANON_KEY (optional but recommended)")
    if settings.is_production and not settings.FRONTEND_DOMAIN:
        warnings.append("FRONTEND_DOMAIN (CORS falls back to Eduvium domains)")

    return warnings


def validate_config_on_startup():
    """
    Production refuses to start without Supabase credentials.
    Other environments only log, so tests and local runs boot without a database.
    """
    missing_required = validate_required_config()

    if missing_required:
        error_msg = f"Missing required environment variables: {', '.join(missing_required)}"
        if settings.is_production:
            logger.error(error_msg)
            raise RuntimeError(error_msg)
        logger.warning(error_msg)

    for warning in validate_optional_config():
        logger.warning(f"Optional configuration missing: {warning}")

    logger.info("Configuration validation passed")
