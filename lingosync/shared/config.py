# lingosync\shared\config.py
import os
from pydantic_settings import BaseSettings, SettingsConfigDict
from enum import Enum
from typing import Optional

class AppEnv(str, Enum):
    DEVELOPMENT = "development"
    PRODUCTION = "production"
    TESTING = "testing"

class Settings(BaseSettings):
    """
    Central Configuration Registry.
    Strictly typed and validated via Pydantic.
    Every field can be overridden with a 'LINGOSYNC_' prefixed env var.
    """

    # --- Application Meta ---
    APP_NAME: str = "lingosync"
    APP_ENV: AppEnv = AppEnv.DEVELOPMENT
    DEBUG: bool = False

    # --- Logging & Observability ---
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "console"
    OTEL_SERVICE_NAME: str = "lingosync-client"
    OTEL_EXPORTER_OTLP_ENDPOINT: Optional[str] = None

    # --- Remote Service ---
    API_BASE_URL: str = "https://zeeguu.unibe.ch/"
    HTTP_TIMEOUT: float = 10.0

    # Content extraction is slow on the server side: long timeout, one retry.
    CONTENT_FETCH_TIMEOUT: float = 50.0
    CONTENT_FETCH_RETRIES: int = 1
    CONTENT_EXTRACTION_TIMEOUT: int = 12

    # Sent along with difficulty scoring requests
    DIFFICULTY_RANK_BOUNDARY: int = 10000
    DIFFICULTY_PERSONALIZED: bool = True

    # --- Connectivity ---
    NETWORK_PROBE_URL: Optional[str] = None
    NETWORK_PROBE_TIMEOUT: float = 3.0

    # --- Persistence ---
    STORAGE_PATH: str = "~/.lingosync"

    # --- Background Processing ---
    BACKGROUND_WORKERS: int = 2

    # --- Dynamic Path Resolution ---

    @property
    def STORAGE_DIR(self) -> str:
        """Absolute directory of the local account store."""
        return os.path.abspath(os.path.expanduser(self.STORAGE_PATH))

    @property
    def PROBE_URL(self) -> str:
        """Host probed by the network monitor (defaults to the API host)."""
        return self.NETWORK_PROBE_URL or self.API_BASE_URL

    model_config = SettingsConfigDict(
        env_prefix="LINGOSYNC_",
        env_file=".env",
        extra="ignore"
    )

settings = Settings()
