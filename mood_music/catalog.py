"""Song model and the fixed mood catalog."""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from urllib.parse import quote_plus

from .config import SEARCH_URL_PREFIX


@dataclass(frozen=True)
class Song:
    title: str
    url: str = ""

    def __str__(self) -> str:
        return self.title


Catalog = Mapping[str, tuple[Song, ...]]


def search_url(terms: str) -> str:
    """Build the web search link for free-text terms."""
    return SEARCH_URL_PREFIX + quote_plus(terms)


def build_catalog(entries: Mapping[str, Iterable[Song]]) -> Catalog:
    """Freeze a mood -> songs mapping, validating every mood has titled songs."""
    frozen: dict[str, tuple[Song, ...]] = {}
    for mood, songs in entries.items():
        if not mood:
            raise ValueError("Catalog moods must be non-empty strings.")

        songs = tuple(songs)
        if not songs:
            raise ValueError(f"Mood {mood!r} has no songs.")
        for song in songs:
            if not song.title:
                raise ValueError(f"Mood {mood!r} contains a song without a title.")

        frozen[mood] = songs

    # Read-only view keeps insertion order, which drives backfill order.
    return MappingProxyType(frozen)


def list_moods(catalog: Catalog) -> list[str]:
    return list(catalog.keys())


def _song(title: str, terms: str) -> Song:
    return Song(title=title, url=search_url(terms))


DEFAULT_CATALOG: Catalog = build_catalog(
    {
        "Happy": [
            _song("Golden – HUNTR/X", "HUNTRX Golden"),
            _song("Ordinary – Alex Warren", "Ordinary Alex Warren"),
            _song("Flowers – Miley Cyrus (2023)", "Flowers Miley Cyrus"),
        ],
        "Energetic": [
            _song("Just Keep Watching – Tate McRae", "Just Keep Watching Tate McRae"),
            _song("Born Again – Lisa ft. Doja Cat & Raye", "Born Again Lisa Doja Cat Raye"),
            _song("Levitating – Dua Lipa (2020)", "Levitating Dua Lipa"),
        ],
        "Chill": [
            _song("Weightless – Marconi Union", "Weightless Marconi Union"),
            _song("Blinding Lights – The Weeknd (2020)", "Blinding Lights The Weeknd"),
            _song("As It Was – Harry Styles (2022)", "As It Was Harry Styles"),
        ],
        "Romantic": [
            _song("Manchild – Sabrina Carpenter", "Manchild Sabrina Carpenter"),
            _song("What I Want – Morgan Wallen ft. Tate McRae", "What I Want Morgan Wallen Tate McRae"),
            _song("Save Your Tears – The Weeknd (2021)", "Save Your Tears The Weeknd"),
        ],
        "Hit Singles": [
            _song("Vampire – Olivia Rodrigo (2023)", "Vampire Olivia Rodrigo"),
            _song("Espresso – Sabrina Carpenter (2024)", "Espresso Sabrina Carpenter"),
            _song("Ordinary – Alex Warren", "Ordinary Alex Warren"),
        ],
    }
)
