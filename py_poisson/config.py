"""Configuration management."""

import os
from pathlib import Path

from dotenv import dotenv_values
from pydantic import Field
from pydantic_settings import BaseSettings

# Load .env for local/dev environments only if values are missing from the environment
BASE_DIR = Path(__file__).resolve().parent.parent
env_file = BASE_DIR / ".env"

if env_file.exists():
    file_env = dotenv_values(env_file)
    missing_keys = {k: v for k, v in file_env.items() if k not in os.environ and v is not None}
    for k, v in missing_keys.items():
        os.environ[k] = v


class Settings(BaseSettings):
    """Sampler settings pulled from POISSON_* environment variables."""

    # Sampling defaults
    attempts_per_point: int = Field(default=30, description="Candidates spawned per active point (k)")
    domain_shape: str = Field(default="disk", description="Sampling domain: square or disk")
    max_seed_attempts: int = Field(
        default=10000, gt=0, description="Rejection draws allowed when placing the first point"
    )
    progress_log_every: int = Field(
        default=1000, gt=0, description="Active-list pops between progress log events"
    )

    # Logging Configuration
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(default="json", description="Logging format (plain or json)")

    class Config:
        env_prefix = "POISSON_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


settings = Settings()
