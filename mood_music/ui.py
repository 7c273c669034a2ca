import shutil
import sys
import textwrap
from collections.abc import Callable

from .catalog import Song
from .config import MAX_TERMINAL_WIDTH

HELP_LINES = [
    "Commands:",
    "  m <n>      select mood n",
    "  r          recommend songs for the selected mood",
    "  s <query>  search for an artist, song or mood",
    "  o <n>      open playlist song n in the browser",
    "  p <n>      open playlist song n in Spotify",
    "  a <n>      add playlist song n to favorites",
    "  f          show favorites",
    "  fo <n>     open favorite n",
    "  fr <n>     remove favorite n",
    "  h          show this help",
    "  q          quit",
]

QUIT_WORDS = {"q", "quit", "exit"}


def get_terminal_width() -> int:
    return min(MAX_TERMINAL_WIDTH, shutil.get_terminal_size(fallback=(MAX_TERMINAL_WIDTH, 24)).columns)


def clear_terminal() -> None:
    if not sys.stdout.isatty():
        return

    sys.stdout.write("\033[2J\033[3J\033[H")
    sys.stdout.flush()


def build_song_lines(index: int, song: Song, width: int) -> list[str]:
    title_width = max(30, width - 8)
    title_lines = textwrap.wrap(
        song.title,
        width=title_width,
        break_long_words=False,
        break_on_hyphens=False,
    ) or [song.title]

    lines = [f"[{index}] {title_lines[0]}"]
    for continuation in title_lines[1:]:
        lines.append(f"    {continuation}")
    return lines


def build_mood_line(moods: list[str], selected: str) -> str:
    labels = []
    for index, mood in enumerate(moods, start=1):
        label = f"{index}:{mood}"
        labels.append(f"<{label}>" if mood == selected else label)
    return "Moods  " + "  ".join(labels)


def build_list_lines(heading: str, songs: list[Song], width: int) -> list[str]:
    lines = [heading, "-" * min(width, max(len(heading), 8))]
    if not songs:
        lines.append("    (empty)")
        return lines

    for index, song in enumerate(songs, start=1):
        lines.extend(build_song_lines(index=index, song=song, width=width))
    return lines


def build_screen_lines(
    moods: list[str],
    selected_mood: str,
    playlist: list[Song],
    status: str,
    favorites: list[Song] | None = None,
) -> list[str]:
    width = get_terminal_width()
    divider = "=" * width
    lines = [
        divider,
        "Mood Music Recommender",
        build_mood_line(moods, selected_mood),
        divider,
    ]
    lines.extend(build_list_lines("Playlist", playlist, width))
    if favorites is not None:
        lines.append("")
        lines.extend(build_list_lines("Your Favorites", favorites, width))
    lines.append(divider)
    lines.append(status)
    return lines


def render_screen(
    moods: list[str],
    selected_mood: str,
    playlist: list[Song],
    status: str,
    favorites: list[Song] | None = None,
) -> None:
    clear_terminal()
    print("\n".join(build_screen_lines(moods, selected_mood, playlist, status, favorites=favorites)))


def parse_command(raw_value: str) -> tuple[str, str]:
    """Split a typed line into a lowercase command word and its raw argument."""
    stripped = raw_value.strip()
    if not stripped:
        return "", ""

    command, _, argument = stripped.partition(" ")
    command = command.lower()
    if command in QUIT_WORDS:
        return "q", ""
    return command, argument.strip()


def parse_index(raw_value: str, count: int) -> int | None:
    """Convert a 1-based list number into a 0-based index, or None when out of range."""
    raw_value = raw_value.strip()
    if raw_value.isdigit():
        choice = int(raw_value)
        if 1 <= choice <= count:
            return choice - 1

    return None


def prompt_command(input_fn: Callable[[str], str] = input) -> tuple[str, str]:
    try:
        raw_value = input_fn("Command [h for help] -> ")
    except (EOFError, KeyboardInterrupt):
        # Closed stdin or Ctrl-C behaves like quitting.
        print()
        return "q", ""
    return parse_command(raw_value)
