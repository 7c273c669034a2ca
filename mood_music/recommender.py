"""Mood playlist selection and ad hoc search songs."""

import logging
import random

from .catalog import DEFAULT_CATALOG, Catalog, Song, search_url
from .config import RECOMMENDATION_SIZE
from .errors import EmptyQueryError

logger = logging.getLogger(__name__)


def build_pool(mood: str, catalog: Catalog, limit: int) -> list[Song]:
    """Collect the mood's songs, backfilling from every mood until `limit` is reached."""
    pool: list[Song] = []
    for song in catalog.get(mood, ()):
        if song not in pool:
            pool.append(song)

    if len(pool) >= limit:
        return pool

    # Backfill scans moods in catalog order, skipping songs already pooled.
    for songs in catalog.values():
        for song in songs:
            if len(pool) >= limit:
                return pool
            if song not in pool:
                pool.append(song)

    return pool


def recommend(
    mood: str,
    catalog: Catalog = DEFAULT_CATALOG,
    rng: random.Random | None = None,
    limit: int = RECOMMENDATION_SIZE,
) -> list[Song]:
    """Return up to `limit` shuffled songs for a mood."""
    pool = build_pool(mood, catalog, limit)
    if mood not in catalog:
        logger.debug("Unknown mood %r, pool built from backfill only", mood)

    (rng or random).shuffle(pool)
    picked = pool[:limit]
    logger.debug("Recommended %d of %d pooled songs for %r", len(picked), len(pool), mood)
    return picked


def search_song(query: str) -> Song:
    """Wrap a free-text query as a single song pointing at its web search."""
    terms = query.strip()
    if not terms:
        raise EmptyQueryError("Type an artist, song or mood to search.")
    return Song(title=terms, url=search_url(terms))
