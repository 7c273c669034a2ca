"""Hand song links to the operating system's default browser."""

import logging
import webbrowser
from collections.abc import Callable

from .errors import LinkOpenError

logger = logging.getLogger(__name__)


def open_link(url: str, opener: Callable[[str], bool] = webbrowser.open) -> bool:
    """Open a non-empty url unmodified; blank urls are ignored."""
    if not url or not url.strip():
        return False

    try:
        opened = opener(url)
    except (webbrowser.Error, OSError) as exc:
        logger.warning("Browser failed for %s: %s", url, exc)
        raise LinkOpenError(f"Could not open link: {exc}") from exc

    if not opened:
        logger.warning("No browser accepted %s", url)
        raise LinkOpenError("Could not open link: no browser available.")
    return True
