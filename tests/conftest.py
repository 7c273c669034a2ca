"""Test configuration and fixtures."""

import sys
from pathlib import Path

import pytest

# Add repo root to path for imports
sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from mood_music.catalog import Song, build_catalog
from mood_music.favorites import FavoritesStore

A, B, C, D, E, F = (Song(title, f"https://example.com/{title.lower()}") for title in "ABCDEF")


@pytest.fixture()
def small_catalog():
    return build_catalog({"Happy": [A, B, C], "Chill": [D, E, F]})


@pytest.fixture()
def store(tmp_path):
    return FavoritesStore(tmp_path / "favs.txt")
