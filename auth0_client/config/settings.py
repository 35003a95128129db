from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="AUTH0_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    domain: str = Field(default="", description="Tenant domain, e.g. my-tenant.auth0.com")
    client_id: str = Field(default="", description="Default client (application) ID for authorization URLs")
    management_api_token: str = Field(default="", description="Management API v2 bearer token")
    api_key: str = Field(default="", description="Default aud (API key) for the token blacklist")

    timeout_seconds: float = Field(default=10.0, gt=0, description="Transport timeout per request")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(default="INFO")

    @property
    def base_domain(self) -> str:
        domain = self.domain.strip().rstrip("/")
        for scheme in ("https://", "http://"):
            if domain.startswith(scheme):
                return domain[len(scheme):]
        return domain

    @property
    def authentication_api_url(self) -> str:
        return f"https://{self.base_domain}"

    @property
    def management_api_url(self) -> str:
        return f"https://{self.base_domain}/api/v2"


_settings_instance: Optional[Settings] = None


def get_settings() -> Settings:
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance


def reset_settings() -> None:
    """Drop the cached settings so the next ``get_settings()`` re-reads the environment."""
    global _settings_instance
    _settings_instance = None
