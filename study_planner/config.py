"""Application configuration loaded from environment variables."""

from pydantic_settings import BaseSettings


class ConfigError(RuntimeError):
    """Raised when a required setting is missing."""


class Settings(BaseSettings):
    """Type-safe configuration sourced from .env / environment."""

    # AI gateway
    lovable_api_key: str = ""
    gateway_url: str = "https://ai.gateway.lovable.dev/v1/chat/completions"
    gateway_model: str = "google/gemini-3-flash-preview"
    gateway_timeout_seconds: int = 60

    # Endpoint
    service_public_key: str = ""  # empty disables the bearer check
    strict_startup: bool = False

    # Client
    planner_base_url: str = "http://127.0.0.1:8000"
    planner_public_key: str = ""
    planner_timeout_seconds: int = 90

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}

    def require_gateway_key(self) -> str:
        if not self.lovable_api_key:
            raise ConfigError("LOVABLE_API_KEY is not configured")
        return self.lovable_api_key


settings = Settings()
