# milkcentre/config.py
"""
Application settings.

Values come from environment variables prefixed with ``MILK_CENTRE_`` and
from a local ``.env`` file. Use get_settings() for the cached instance.
"""

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    APP_NAME: str = Field(default="Milk Centre Data API")
    LOG_LEVEL: str = Field(default="INFO", description="DEBUG, INFO, WARNING or ERROR")

    # Per-user application data path; the database lives in a subdirectory
    DATA_DIR: Path = Field(default=Path.home() / ".milk-centre")
    DB_DIRNAME: str = Field(default="database")
    DB_FILENAME: str = Field(default="milk-centre.db")
    DB_ECHO: bool = Field(default=False, description="Echo SQL statements to the log")

    model_config = SettingsConfigDict(
        env_prefix="MILK_CENTRE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def db_dir(self) -> Path:
        return Path(self.DATA_DIR).expanduser() / self.DB_DIRNAME

    @property
    def db_path(self) -> Path:
        return self.db_dir / self.DB_FILENAME

    @property
    def db_url(self) -> str:
        return f"sqlite:///{self.db_path}"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached Settings instance."""
    return Settings()
