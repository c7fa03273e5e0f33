"""
Application configuration management.
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Refactoring
    indent_width: int = 4
    max_source_chars: int = 2_000_000
    default_language: str = "typescript"

    # Server
    host: str = "0.0.0.0"
    port: int = 8000

    # Application
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        case_sensitive = False


# Global settings instance
settings = Settings()
