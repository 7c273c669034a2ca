"""Interactive shell: mood selection, playlist actions, and favorites management."""

import logging
import random
import webbrowser
from collections.abc import Callable
from dataclasses import dataclass, field

import spotipy

from .catalog import Catalog, Song, list_moods
from .errors import EmptyQueryError, MoodMusicError
from .favorites import ALREADY_EXISTS, NOT_FOUND, FavoritesStore
from .links import open_link
from .recommender import recommend, search_song
from .spotify_client import find_spotify_link
from .ui import HELP_LINES, parse_index, prompt_command, render_screen

logger = logging.getLogger(__name__)


@dataclass
class ShellState:
    catalog: Catalog
    store: FavoritesStore
    mood: str
    playlist: list[Song] = field(default_factory=list)
    favorites: list[Song] = field(default_factory=list)
    status: str = "Ready"
    favorites_visible: bool = False
    spotify: spotipy.Spotify | None = None
    opener: Callable[[str], bool] = webbrowser.open
    rng: random.Random | None = None


def pick_song(songs: list[Song], argument: str) -> Song | None:
    index = parse_index(argument, len(songs))
    if index is None:
        return None
    return songs[index]


def out_of_range_message(songs: list[Song], label: str) -> str:
    if not songs:
        return f"No {label} to choose from."
    return f"Pick a {label} number between 1 and {len(songs)}."


def do_select_mood(state: ShellState, argument: str) -> None:
    moods = list_moods(state.catalog)
    index = parse_index(argument, len(moods))
    if index is None:
        state.status = f"Pick a mood number between 1 and {len(moods)}."
        return

    state.mood = moods[index]
    do_recommend(state)


def do_recommend(state: ShellState) -> None:
    state.playlist = recommend(state.mood, catalog=state.catalog, rng=state.rng)
    state.status = f'Recommended {len(state.playlist)} songs for "{state.mood}"'


def do_search(state: ShellState, argument: str) -> None:
    song = search_song(argument)
    state.playlist = [song]
    state.status = f"Search results for: {song.title}"


def do_open(state: ShellState, song: Song) -> None:
    if open_link(song.url, opener=state.opener):
        state.status = f"Opened: {song.title}"
    else:
        state.status = f"No link for: {song.title}"


def do_open_spotify(state: ShellState, song: Song) -> None:
    if state.spotify is None:
        state.status = "Spotify lookup is off. Set SPOTIPY_CLIENT_ID and SPOTIPY_CLIENT_SECRET."
        return

    link = find_spotify_link(state.spotify, song)
    if not link:
        state.status = f"No Spotify match for: {song.title}"
        return

    open_link(link, opener=state.opener)
    state.status = f"Opened in Spotify: {song.title}"


def do_add_favorite(state: ShellState, song: Song) -> None:
    if state.store.add(song) == ALREADY_EXISTS:
        state.status = "Already in favorites"
    else:
        state.status = f"Added to favorites: {song.title}"
    if state.favorites_visible:
        state.favorites = state.store.list_songs()


def do_show_favorites(state: ShellState) -> None:
    state.favorites = state.store.list_songs()
    state.favorites_visible = bool(state.favorites)
    if not state.favorites:
        state.status = "No favorites yet."
        return

    state.status = f"{len(state.favorites)} favorites. Use fo <n> to open, fr <n> to remove."


def do_remove_favorite(state: ShellState, song: Song) -> None:
    result = state.store.remove(song)
    state.favorites = state.store.list_songs()
    state.favorites_visible = bool(state.favorites)
    if result == NOT_FOUND:
        state.status = f"Not in favorites: {song.title}"
    else:
        state.status = "Favorites updated"


# Commands taking a playlist song number.
PLAYLIST_ACTIONS = {
    "o": do_open,
    "p": do_open_spotify,
    "a": do_add_favorite,
}

# Commands taking a favorites number from the last shown list.
FAVORITE_ACTIONS = {
    "fo": do_open,
    "fr": do_remove_favorite,
}


def handle_command(state: ShellState, command: str, argument: str) -> bool:
    """Run one shell command. Returns False when the shell should exit."""
    if command == "q":
        return False

    try:
        if command == "":
            pass
        elif command == "h":
            state.status = "\n".join(HELP_LINES)
        elif command == "m":
            do_select_mood(state, argument)
        elif command == "r":
            do_recommend(state)
        elif command == "s":
            do_search(state, argument)
        elif command == "f":
            do_show_favorites(state)
        elif command in PLAYLIST_ACTIONS:
            song = pick_song(state.playlist, argument)
            if song is None:
                state.status = out_of_range_message(state.playlist, "song")
            else:
                PLAYLIST_ACTIONS[command](state, song)
        elif command in FAVORITE_ACTIONS:
            # Favorites numbers refer to the last list shown with `f`.
            song = pick_song(state.favorites, argument)
            if song is None:
                state.status = out_of_range_message(state.favorites, "favorite")
            else:
                FAVORITE_ACTIONS[command](state, song)
        else:
            state.status = f"Unknown command: {command}. Type h for help."
    except EmptyQueryError as exc:
        state.status = str(exc)
    except MoodMusicError as exc:
        # Failures end the current action only; the shell keeps running.
        logger.debug("Command %r failed: %s", command, exc)
        state.status = f"Error: {exc}"

    return True


def run_shell(state: ShellState, input_fn: Callable[[str], str] = input) -> None:
    """Recommend for the starting mood, then process commands until quit."""
    do_recommend(state)
    moods = list_moods(state.catalog)

    while True:
        render_screen(
            moods,
            state.mood,
            state.playlist,
            state.status,
            favorites=state.favorites if state.favorites_visible else None,
        )
        command, argument = prompt_command(input_fn)
        if not handle_command(state, command, argument):
            break
