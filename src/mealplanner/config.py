"""Application configuration using pydantic-settings."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application
    environment: str = "development"
    log_level: str = "INFO"
    log_format: str = ""  # "json" or "text"; empty auto-detects
    allowed_origins: str = "http://localhost:3000,http://localhost:8000"

    # Grocery list API access (empty disables the key check)
    grocery_list_api_key: str = ""

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.environment.lower() == "development"

    @property
    def json_logs(self) -> bool | None:
        """JSON log output flag, or None to let logging auto-detect."""
        if not self.log_format:
            return None
        return self.log_format.strip().lower() == "json"

    @property
    def origins(self) -> list[str]:
        """Allowed CORS origins as a list."""
        return [origin.strip() for origin in self.allowed_origins.split(",") if origin.strip()]


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
