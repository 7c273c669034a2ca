"""Favorites persistence in a line-oriented file under the user's home folder."""

import logging
import os
import stat
import tempfile
from pathlib import Path

from .catalog import Song
from .config import FAVORITES_PATH
from .errors import FavoritesError

logger = logging.getLogger(__name__)

ADDED = "added"
ALREADY_EXISTS = "already_exists"
REMOVED = "removed"
NOT_FOUND = "not_found"

FIELD_SEPARATOR = "|"


def escape(text: str | None) -> str:
    """Flatten line breaks so one song always occupies one line."""
    if text is None:
        return ""
    return text.replace("\n", " ").replace("\r", " ")


def encode_song(song: Song) -> str:
    """Encode as `title|url`. A `|` inside the title does not survive decoding."""
    return f"{escape(song.title)}{FIELD_SEPARATOR}{escape(song.url)}"


def decode_line(line: str) -> Song:
    # Split once: only the first separator divides title from url.
    title, _, url = line.partition(FIELD_SEPARATOR)
    return Song(title=title, url=url)


class FavoritesStore:
    """Deduplicated favorites list backed by a single text file."""

    def __init__(self, path: Path = FAVORITES_PATH) -> None:
        self.path = Path(path)

    def load_lines(self) -> list[str]:
        """Return distinct non-blank lines in file order."""
        if not self.path.exists():
            return []

        lines: dict[str, None] = {}
        try:
            # Undecodable bytes become U+FFFD instead of failing the whole load.
            with self.path.open("r", encoding="utf-8", errors="replace") as file:
                for raw_line in file:
                    line = raw_line.rstrip("\r\n")
                    if line.strip():
                        lines.setdefault(line)
        except OSError as exc:
            raise FavoritesError(f"Failed to load favorites from {self.path}: {exc}") from exc

        return list(lines)

    def list_songs(self) -> list[Song]:
        return [decode_line(line) for line in self.load_lines()]

    def contains(self, song: Song) -> bool:
        return encode_song(song) in self.load_lines()

    def add(self, song: Song) -> str:
        """Append one song unless its encoded line is already stored."""
        line = encode_song(song)
        if line in self.load_lines():
            return ALREADY_EXISTS

        try:
            with self.path.open("a", encoding="utf-8") as file:
                file.write(line + "\n")
        except OSError as exc:
            raise FavoritesError(f"Failed to add favorite to {self.path}: {exc}") from exc

        logger.debug("Appended favorite %r to %s", song.title, self.path)
        return ADDED

    def remove(self, song: Song) -> str:
        """Drop the first matching favorite and rewrite the file with the rest."""
        favorites = self.list_songs()
        if song not in favorites:
            return NOT_FOUND

        favorites.remove(song)
        self._rewrite(favorites)
        logger.debug("Removed favorite %r, %d left", song.title, len(favorites))
        return REMOVED

    def _rewrite(self, songs: list[Song]) -> None:
        """Replace the file contents atomically with the given songs."""
        try:
            fd, temp_name = tempfile.mkstemp(prefix=f"{self.path.name}.", suffix=".tmp", dir=self.path.parent)
        except OSError as exc:
            raise FavoritesError(f"Failed to update favorites in {self.path}: {exc}") from exc

        try:
            with os.fdopen(fd, "w", encoding="utf-8") as file:
                for song in songs:
                    file.write(encode_song(song) + "\n")
            if self.path.exists():
                # mkstemp creates 0600 files; keep the existing permissions.
                os.chmod(temp_name, stat.S_IMODE(self.path.stat().st_mode))
            os.replace(temp_name, self.path)
        except OSError as exc:
            # Leave the previous file untouched and drop the partial copy.
            try:
                os.unlink(temp_name)
            except FileNotFoundError:
                pass
            raise FavoritesError(f"Failed to update favorites in {self.path}: {exc}") from exc
