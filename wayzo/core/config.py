from pathlib import Path
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


"""Configuration settings using pydantic BaseSettings. - config"""

# Package directory: wayzo/core/config.py -> wayzo/core -> wayzo
_PACKAGE_DIR = Path(__file__).resolve().parents[1]

DEFAULT_PORT = 10000


class Settings(BaseSettings):
    """Application settings.

    - Reads configuration from environment variables and a local .env file
    - Fields: host, port, frontend_dir, index_file, local_api_base_url,
      version, environment, log_level, cors_origins
    """
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Bind address for uvicorn
    host: str = "0.0.0.0"

    # Fixed listening port; PORT in the environment overrides it
    port: int = DEFAULT_PORT

    # Directory served verbatim under /frontend; the assets ship inside the package
    frontend_dir: Path = _PACKAGE_DIR / "frontend"

    # HTML entry point returned for "/", relative to frontend_dir
    index_file: str = "index.backend.html"

    # API base URL handed to browsers loading the page from localhost
    local_api_base_url: str = "http://localhost:3000"

    # Build label reported by /version, /healthz and the X-Wayzo-Version header
    version: str = "staging-v25"

    # Deploy environment reported by /healthz (not the hostname-derived one)
    environment: str = "development"

    log_level: str = "INFO"

    # CORS: the localhost API base URL is a different origin during development
    cors_origins: List[str] = ["*"]

    @property
    def index_path(self) -> Path:
        """Absolute path of the HTML entry file. - index_path"""
        return Path(self.frontend_dir) / self.index_file


def get_settings() -> Settings:
    """Return a Settings instance for dependency injection. - get_settings"""
    return Settings()
