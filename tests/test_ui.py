import pytest

from mood_music.catalog import Song
from mood_music.ui import (
    build_list_lines,
    build_mood_line,
    build_screen_lines,
    build_song_lines,
    parse_command,
    parse_index,
    prompt_command,
)


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("r", ("r", "")),
        ("  S  Dua Lipa  ", ("s", "Dua Lipa")),
        ("o 2", ("o", "2")),
        ("quit", ("q", "")),
        ("EXIT", ("q", "")),
        ("   ", ("", "")),
    ],
)
def test_parse_command(raw, expected):
    assert parse_command(raw) == expected


def test_parse_index():
    assert parse_index("1", 3) == 0
    assert parse_index(" 3 ", 3) == 2
    assert parse_index("0", 3) is None
    assert parse_index("4", 3) is None
    assert parse_index("x", 3) is None
    assert parse_index("1", 0) is None


def test_prompt_command_treats_eof_as_quit():
    def closed_input(prompt):
        raise EOFError

    assert prompt_command(closed_input) == ("q", "")


def test_prompt_command_reads_line():
    assert prompt_command(lambda prompt: "a 1") == ("a", "1")


def test_song_lines_wrap_long_titles():
    title = " ".join(["word"] * 20)
    lines = build_song_lines(index=2, song=Song(title), width=40)
    assert lines[0].startswith("[2] word")
    assert len(lines) > 1
    assert all(line.startswith("    ") for line in lines[1:])


def test_mood_line_marks_selection():
    assert build_mood_line(["Happy", "Chill"], "Chill") == "Moods  1:Happy  <2:Chill>"


def test_empty_list_lines():
    assert build_list_lines("Playlist", [], 80) == ["Playlist", "--------", "    (empty)"]


def test_screen_lines_include_favorites_only_when_given():
    playlist = [Song("A"), Song("B")]
    lines = build_screen_lines(["Happy"], "Happy", playlist, "Ready")
    assert "[1] A" in lines and "[2] B" in lines
    assert "Your Favorites" not in lines
    assert lines[-1] == "Ready"

    lines = build_screen_lines(["Happy"], "Happy", playlist, "Ready", favorites=[Song("F")])
    assert "Your Favorites" in lines
    assert lines.count("[1] F") == 1
