"""Spotipy client setup, track link lookup, and cleanup helpers."""

import logging

import spotipy
from requests.exceptions import RequestException
from spotipy.exceptions import SpotifyException
from spotipy.oauth2 import SpotifyClientCredentials, SpotifyOauthError

from .catalog import Song
from .config import SPOTIFY_REQUEST_TIMEOUT, SPOTIFY_RETRIES
from .env import get_required_env
from .errors import LinkOpenError

logger = logging.getLogger(__name__)


def configure_spotipy_logging() -> None:
    """Reduce Spotipy logger noise so shell output stays readable."""
    for logger_name in ("spotipy", "spotipy.client", "spotipy.oauth2"):
        spotipy_logger = logging.getLogger(logger_name)
        spotipy_logger.setLevel(logging.CRITICAL)
        spotipy_logger.propagate = False


configure_spotipy_logging()


def create_spotify_client() -> spotipy.Spotify:
    """Create an app-authenticated Spotipy client for public catalog search."""
    # Client credentials cover search without any user login.
    auth_manager = SpotifyClientCredentials(
        client_id=get_required_env("SPOTIPY_CLIENT_ID"),
        client_secret=get_required_env("SPOTIPY_CLIENT_SECRET"),
    )

    return spotipy.Spotify(
        auth_manager=auth_manager,
        requests_timeout=SPOTIFY_REQUEST_TIMEOUT,
        retries=SPOTIFY_RETRIES,
        status_retries=SPOTIFY_RETRIES,
    )


def find_spotify_link(sp: spotipy.Spotify, song: Song) -> str | None:
    """Return the Spotify web link of the best track match for a song title."""
    try:
        results = sp.search(q=song.title, type="track", limit=1)
    except (SpotifyException, SpotifyOauthError, RequestException) as exc:
        # API, token and network failures all end the lookup the same way.
        raise LinkOpenError(f"Spotify search failed: {exc}") from exc

    items = (results or {}).get("tracks", {}).get("items", [])
    if not items:
        logger.debug("No Spotify match for %r", song.title)
        return None

    return items[0].get("external_urls", {}).get("spotify") or None


def close_sessions(sp: spotipy.Spotify) -> None:
    """Close HTTP sessions held by Spotipy objects."""
    for obj in (sp, sp.auth_manager):
        # Spotipy exposes sessions on private attributes.
        session = getattr(obj, "_session", None)
        close_fn = getattr(session, "close", None)
        if callable(close_fn):
            close_fn()
