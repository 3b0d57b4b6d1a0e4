from dataclasses import dataclass
from pathlib import Path
import os

from dotenv import load_dotenv

# Load environment variables from the repo root .env (if present).
REPO_ROOT = Path(__file__).resolve().parents[1]
load_dotenv(REPO_ROOT / ".env")


@dataclass(frozen=True)
class ApiConfig:
    """Location of the remote task API.

    base_url is just the host (e.g. 'http://localhost:4000'), base_path the
    prefix the API is mounted under (e.g. '/api').
    """
    base_url: str
    base_path: str

    def url_for(self, endpoint: str) -> str:
        """Build the full URL for an endpoint such as 'tasks' or 'tasks/123'.

        Endpoints are expected without leading or trailing slashes.
        """
        return f"{self.base_url}{self.base_path}/{endpoint}"


@dataclass(frozen=True)
class Settings:
    api: ApiConfig
    app_env: str = "development"
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 3100

    @property
    def development_mode(self) -> bool:
        return self.app_env == "development"


def get_settings() -> Settings:
    """Read settings from the environment."""
    api = ApiConfig(
        base_url=os.getenv("TASK_API_BASE_URL", "http://localhost:4000").rstrip("/"),
        base_path=os.getenv("TASK_API_BASE_PATH", "/api").rstrip("/"),
    )
    return Settings(
        api=api,
        app_env=os.getenv("APP_ENV", "development"),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "3100")),
    )
