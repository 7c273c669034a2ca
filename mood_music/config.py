"""Shared configuration constants used across the application."""

from pathlib import Path

# Favorites live in the user's home folder under a fixed name.
FAVORITES_PATH = Path.home() / ".moodmusic_favs.txt"

# Local env file read at startup for optional Spotify credentials.
ENV_FILE_PATH = Path(".env")

# Web search link used for catalog songs and ad hoc searches.
SEARCH_URL_PREFIX = "https://www.youtube.com/results?search_query="

# Runtime tuning constants.
RECOMMENDATION_SIZE = 5
MAX_TERMINAL_WIDTH = 110
SPOTIFY_REQUEST_TIMEOUT = 10
SPOTIFY_RETRIES = 3
