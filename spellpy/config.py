"""Configuration du service de correction orthographique."""
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Configuration de l'application."""

    # Distance d'édition
    DEFAULT_MAX_DISTANCE: int = 2
    MAX_SUGGESTIONS: int = 10

    # Logs
    LOG_LEVEL: str = "INFO"
    LOG_DIR: str = "logs"
    LOG_TO_FILE: bool = True

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"


settings = Settings()
