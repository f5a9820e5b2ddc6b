"""Settings loaded from the environment (``CUBEPOS_`` prefix).

- ``CUBEPOS_DATA_DIR``  directory holding the JSON files
- ``CUBEPOS_TIMEZONE``  IANA zone used for "today" (lease status)
"""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from cubepos.infrastructure.clock import DEFAULT_TIMEZONE

# When installed in editable mode the project root is the repo root.
DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


class Settings(BaseSettings):

    model_config = SettingsConfigDict(
        env_prefix="CUBEPOS_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",
    )

    data_dir: Path = Field(default=DEFAULT_DATA_DIR, description="JSON data directory")
    timezone: str = Field(default=DEFAULT_TIMEZONE, description="Business time zone")
