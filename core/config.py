from typing import List, Optional
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
    # -------------------------------------------------
    # General
    # -------------------------------------------------
    PROJECT_NAME: str = "Eduvium API"
    ENV: str = "development"
    LOG_LEVEL: str = "INFO"

    # -------------------------------------------------
    # Frontend Domains
    # -------------------------------------------------
    FRONTEND_DOMAIN: Optional[str] = Field(None)

    EDUVIUM_DOMAINS: List[str] = [
        "https://eduvium.nl",
        "https://www.eduvium.nl",
        "https://app.eduvium.nl",
    ]

    # -------------------------------------------------
    # CORS (auto-built below)
    # -------------------------------------------------
    BACKEND_CORS_ORIGINS: List[str] = []

    # -------------------------------------------------
    # Supabase (Primary DB & Auth)
    # -------------------------------------------------
    SUPABASE_URL: Optional[str] = Field(None)
    SUPABASE_ANON_KEY: Optional[str] = Field(None)
    SUPABASE_SERVICE_ROLE_KEY: Optional[str] = Field(None)
    SUPABASE_JWT_SECRET: Optional[str] = Field(None)

    # -------------------------------------------------
    # Login throttling
    # -------------------------------------------------
    LOGIN_RATE_LIMIT: int = Field(10, description="Login attempts per window per email, from any IP")
    LOGIN_IP_RATE_LIMIT: int = Field(50, description="Login attempts per window per client IP")
    LOGIN_RATE_WINDOW_SECONDS: int = Field(900, description="Sliding window length (default: 15 minutes)")

    # Only honour X-Forwarded-For when a trusted proxy sets it
    TRUST_PROXY_HEADERS: bool = False

    # -------------------------------------------------
    # Model Config
    # -------------------------------------------------
    # No env_file: deployments inject real environment variables.
    model_config = SettingsConfigDict(case_sensitive=True)

    @property
    def is_production(self) -> bool:
        return self.ENV.lower() == "production"


# Instantiate settings
settings = Settings()

# -------------------------------------------------
# Build CORS list dynamically after loading settings
# -------------------------------------------------
cors_origins = []

# 1) custom frontend domain (bare host allowed)
if settings.FRONTEND_DOMAIN:
    domain = settings.FRONTEND_DOMAIN
    if not domain.startswith("http"):
        domain = f"https://{domain}"
    cors_origins.append(domain.rstrip("/"))

# 2) Eduvium domains
cors_origins.extend([d.rstrip("/") for d in settings.EDUVIUM_DOMAINS])

# 3) local dev server
if not settings.is_production:
    cors_origins.append("http://localhost:5173")

# 4) remove duplicates
settings.BACKEND_CORS_ORIGINS = sorted(list(set(cors_origins)))
