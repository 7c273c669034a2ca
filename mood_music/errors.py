"""Exception types raised by the recommender, favorites and link helpers."""


class MoodMusicError(Exception):
    """Base class for failures the shell reports without exiting."""


class EmptyQueryError(MoodMusicError, ValueError):
    """Ad hoc search was submitted with a blank query."""


class FavoritesError(MoodMusicError, OSError):
    """Reading or writing the favorites file failed."""


class LinkOpenError(MoodMusicError):
    """A song link could not be handed to the browser or resolved."""
