"""Environment-variable helpers for optional Spotify credentials."""

import os
from pathlib import Path

from .config import ENV_FILE_PATH

SPOTIFY_CREDENTIAL_VARS = ("SPOTIPY_CLIENT_ID", "SPOTIPY_CLIENT_SECRET")


def load_env_file(path: Path = ENV_FILE_PATH) -> None:
    """Load simple KEY=VALUE pairs from a .env file into process env."""
    if not path.exists():
        return

    with path.open("r", encoding="utf-8") as env_file:
        for raw_line in env_file:
            line = raw_line.strip()
            # Skip comments, blank lines, and malformed rows.
            if not line or line.startswith("#") or "=" not in line:
                continue

            key, value = line.split("=", 1)
            os.environ[key.strip()] = value.strip().strip("'\"")


def get_required_env(name: str) -> str:
    """Fetch a required environment variable or raise a clear error."""
    value = os.getenv(name)
    if not value:
        raise RuntimeError(f"Missing required environment variable: {name}")
    return value


def has_spotify_credentials() -> bool:
    return all(os.getenv(name) for name in SPOTIFY_CREDENTIAL_VARS)
