import pytest

from mood_music.catalog import DEFAULT_CATALOG, Song, build_catalog, list_moods, search_url


def test_default_catalog_moods_in_order():
    assert list_moods(DEFAULT_CATALOG) == ["Happy", "Energetic", "Chill", "Romantic", "Hit Singles"]


def test_default_catalog_songs_have_titles_and_links():
    for songs in DEFAULT_CATALOG.values():
        assert songs
        for song in songs:
            assert song.title
            assert song.url.startswith("https://www.youtube.com/results?search_query=")


def test_catalog_is_read_only():
    catalog = build_catalog({"Happy": [Song("A")]})
    with pytest.raises(TypeError):
        catalog["Sad"] = (Song("B"),)
    assert isinstance(catalog["Happy"], tuple)


def test_catalog_does_not_track_source_lists():
    songs = [Song("A")]
    catalog = build_catalog({"Happy": songs})
    songs.append(Song("B"))
    assert catalog["Happy"] == (Song("A"),)


@pytest.mark.parametrize(
    "entries",
    [
        {"": [Song("A")]},
        {"Happy": []},
        {"Happy": [Song("")]},
    ],
)
def test_invalid_catalog_rejected(entries):
    with pytest.raises(ValueError):
        build_catalog(entries)


def test_song_equality_and_display():
    assert Song("A", "u") == Song("A", "u")
    assert Song("A", "u") != Song("A", "v")
    assert len({Song("A", "u"), Song("A", "u")}) == 1
    assert str(Song("Title", "u")) == "Title"


def test_search_url_encodes_terms():
    assert search_url("Dua Lipa & friends") == "https://www.youtube.com/results?search_query=Dua+Lipa+%26+friends"
