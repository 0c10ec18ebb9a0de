from pathlib import Path
from dotenv import dotenv_values
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

import os

# Load .env for local runs, without overriding values already in the environment
BASE_DIR = Path(__file__).resolve().parent.parent.parent
env_file = BASE_DIR / ".env"

if env_file.exists():
    file_env = dotenv_values(env_file)
    missing_keys = {k: v for k, v in file_env.items() if k not in os.environ and v is not None}
    for k, v in missing_keys.items():
        os.environ[k] = v


class Settings(BaseSettings):
    """Logging settings pulled from EMPYRE_* environment variables."""

    model_config = SettingsConfigDict(env_prefix="EMPYRE_")

    log_level: str = Field(default="WARNING", description="Logging level")
    log_format: str = Field(default="console", description="Logging format (console or json)")


settings = Settings()
