"""Client configuration loaded from environment and .env file."""

from __future__ import annotations

from pathlib import Path

from pydantic_settings import BaseSettings

try:
    from dotenv import load_dotenv
except Exception:
    load_dotenv = None


def find_project_root() -> Path:
    """Return the nearest ancestor directory that contains a .env file.

    Starts at the directory of this file and walks up to the filesystem root.
    Falls back to two levels above this file if no .env is found.
    """
    current_dir = Path(__file__).parent
    while current_dir != current_dir.parent:
        if (current_dir / ".env").exists():
            return current_dir
        current_dir = current_dir.parent
    return Path(__file__).parent.parent.parent


PROJECT_ROOT: Path = find_project_root()
if load_dotenv is not None:
    load_dotenv(PROJECT_ROOT / ".env")


class Settings(BaseSettings):
    """Strongly-typed client settings loaded from environment and .env."""

    # Remote API
    API_BASE_URL: str = "http://localhost:3000"
    GRAPHQL_PATH: str = "/graphql"
    VERIFY_EMAIL_PATH: str = "/auth/verify-email"

    # None disables the timeout: a hung call keeps the flow pending
    REQUEST_TIMEOUT_SECONDS: float | None = None

    # Session token persistence
    AUTH_TOKEN_NAME: str = "Meatier.token"
    TOKEN_STORE_PATH: str = str(Path.home() / ".authstate" / "session.json")

    # Streamlit front ends: route path -> page script
    STREAMLIT_ROUTES: dict[str, str] = {}

    class Config:
        env_file = str(PROJECT_ROOT / ".env")
        env_file_encoding = "utf-8"


# Singleton settings instance
settings = Settings()
