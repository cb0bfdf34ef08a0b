from pydantic_settings import BaseSettings

from .models import DisplayMode


class Settings(BaseSettings):
    APP_NAME: str = "Crater Energy Calculator"
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: list[str] = ["*"]

    # Session defaults — display mode and material survive a reset
    DEFAULT_DISPLAY_MODE: DisplayMode = DisplayMode.AUTO
    DEFAULT_MATERIAL: str = "wood"

    # In-memory session store cap; oldest sessions are dropped first
    MAX_SESSIONS: int = 1000

    class Config:
        env_file = ".env"


settings = Settings()
