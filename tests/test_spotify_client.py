import logging
from unittest.mock import MagicMock

import pytest
import requests
from spotipy.exceptions import SpotifyException
from spotipy.oauth2 import SpotifyOauthError

from mood_music.catalog import Song
from mood_music.errors import LinkOpenError
from mood_music.spotify_client import close_sessions, create_spotify_client, find_spotify_link

SONG = Song("Levitating – Dua Lipa (2020)", "")


def test_find_spotify_link_returns_first_match():
    sp = MagicMock()
    sp.search.return_value = {
        "tracks": {"items": [{"external_urls": {"spotify": "https://open.spotify.com/track/1"}}]}
    }
    assert find_spotify_link(sp, SONG) == "https://open.spotify.com/track/1"
    sp.search.assert_called_once_with(q=SONG.title, type="track", limit=1)


def test_find_spotify_link_without_match():
    sp = MagicMock()
    sp.search.return_value = {"tracks": {"items": []}}
    assert find_spotify_link(sp, SONG) is None


def test_find_spotify_link_wraps_api_errors():
    sp = MagicMock()
    sp.search.side_effect = SpotifyException(401, -1, "invalid client")
    with pytest.raises(LinkOpenError, match="Spotify search failed"):
        find_spotify_link(sp, SONG)


def test_create_spotify_client_requires_credentials(monkeypatch):
    monkeypatch.delenv("SPOTIPY_CLIENT_ID", raising=False)
    monkeypatch.delenv("SPOTIPY_CLIENT_SECRET", raising=False)
    with pytest.raises(RuntimeError, match="SPOTIPY_CLIENT_ID"):
        create_spotify_client()


def test_close_sessions_closes_both_sessions():
    sp = MagicMock()
    close_sessions(sp)
    sp._session.close.assert_called_once_with()
    sp.auth_manager._session.close.assert_called_once_with()


def test_spotipy_loggers_silenced():
    assert logging.getLogger("spotipy").level == logging.CRITICAL
    assert logging.getLogger("spotipy").propagate is False


@pytest.mark.parametrize(
    "error",
    [
        SpotifyOauthError("invalid_client"),
        requests.exceptions.ConnectionError("offline"),
        requests.exceptions.ReadTimeout("timed out"),
    ],
)
def test_find_spotify_link_wraps_auth_and_network_errors(error):
    sp = MagicMock()
    sp.search.side_effect = error
    with pytest.raises(LinkOpenError, match="Spotify search failed"):
        find_spotify_link(sp, SONG)
