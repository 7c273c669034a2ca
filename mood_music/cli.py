"""CLI entrypoint and high-level application orchestration."""

import argparse
import logging

from .app import ShellState, run_shell
from .catalog import DEFAULT_CATALOG, list_moods
from .env import has_spotify_credentials, load_env_file
from .favorites import FavoritesStore
from .spotify_client import close_sessions, create_spotify_client


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse CLI options for the starting mood, Spotify lookup, and logging."""
    parser = argparse.ArgumentParser(description="Mood-based music recommender")
    parser.add_argument(
        "--mood",
        choices=list_moods(DEFAULT_CATALOG),
        default=list_moods(DEFAULT_CATALOG)[0],
        help="Mood to recommend for on startup (default: the first catalog mood).",
    )
    parser.add_argument(
        "--spotify",
        action="store_true",
        help="Require Spotify track lookup; fails when credentials are missing.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log debug details to stderr.",
    )
    return parser.parse_args(argv)


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main(argv: list[str] | None = None) -> None:
    """Run the full app lifecycle: setup, command loop, and shutdown."""
    args = parse_args(argv)
    configure_logging(args.verbose)
    # Credentials may come from a local .env file.
    load_env_file()

    # Spotify lookup is optional unless explicitly requested.
    sp = None
    if args.spotify or has_spotify_credentials():
        sp = create_spotify_client()

    state = ShellState(
        catalog=DEFAULT_CATALOG,
        store=FavoritesStore(),
        mood=args.mood,
        spotify=sp,
    )
    try:
        run_shell(state)
    finally:
        # Ensure HTTP sessions are closed on normal exit or error.
        if sp is not None:
            close_sessions(sp)
