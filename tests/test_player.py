from pathlib import Path

import pytest

from slidearcade.library import Track
from slidearcade.player import (
    PlaybackError,
    Player,
    color_code,
    run_session,
)


class FakeBackend:
    def __init__(self, fail_seek=False):
        self.calls = []
        self.fail_seek = fail_seek

    def load(self, path):
        self.calls.append(("load", path))

    def play(self):
        self.calls.append(("play",))

    def pause(self):
        self.calls.append(("pause",))

    def resume(self):
        self.calls.append(("resume",))

    def rewind(self):
        self.calls.append(("rewind",))

    def set_position(self, seconds):
        if self.fail_seek:
            raise PlaybackError("position not supported")
        self.calls.append(("set_position", seconds))

    def stop(self):
        self.calls.append(("stop",))

    def loaded(self):
        return [call[1] for call in self.calls if call[0] == "load"]


TRACKS = [
    Track(name="Impossible", path=Path("music/Impossible.mp3")),
    Track(name="Victory", path=Path("music/Victory.mp3")),
    Track(name="Binary Star", path=Path("music/Binary Star.mp3")),
    Track(name="Star Sky", path=Path("music/Star Sky.mp3")),
]


def scripted(numbers, words=()):
    ints = iter(numbers)
    texts = iter(words)
    output = []
    return (lambda: next(ints)), (lambda: next(texts)), output.append, output


def test_color_codes_from_settings_menu():
    assert color_code(3) == "\033[0;30;47m"
    assert color_code(4) == "\033[0;31;47m"
    assert color_code(1) == color_code(2)


@pytest.mark.parametrize("choice", [0, 5, -1])
def test_color_code_rejects_unknown_choice(choice):
    with pytest.raises(ValueError):
        color_code(choice)


def test_play_loads_then_plays():
    backend = FakeBackend()
    player = Player(backend)
    player.play(TRACKS[1])
    assert backend.calls == [("load", TRACKS[1].path), ("play",)]
    assert player.current == TRACKS[1]
    assert player.paused is False


def test_controls_need_a_loaded_track():
    player = Player(FakeBackend())
    with pytest.raises(PlaybackError):
        player.pause()
    with pytest.raises(PlaybackError):
        player.seek(3)


def test_pause_and_resume_toggle_state():
    player = Player(FakeBackend())
    player.play(TRACKS[0])
    player.pause()
    assert player.paused is True
    player.resume()
    assert player.paused is False


def test_seek_rewinds_before_setting_position():
    backend = FakeBackend()
    player = Player(backend)
    player.play(TRACKS[0])
    player.seek(30)
    assert backend.calls[-2:] == [("rewind",), ("set_position", 30)]


def test_seek_rejects_negative_position():
    player = Player(FakeBackend())
    player.play(TRACKS[0])
    with pytest.raises(PlaybackError):
        player.seek(-5)


def test_stop_clears_current_track():
    backend = FakeBackend()
    player = Player(backend)
    player.play(TRACKS[0])
    player.stop()
    assert player.current is None
    assert backend.calls[-1] == ("stop",)


def test_session_plays_selection_and_stops():
    backend = FakeBackend()
    read_int, read_text, write, output = scripted([2, 1])
    run_session(Player(backend), TRACKS, read_int, read_text, write)
    assert backend.loaded() == [TRACKS[1].path]
    assert backend.calls[-1] == ("stop",)
    assert "2.Victory\n" in "".join(output)


def test_session_rejects_out_of_range_selection():
    backend = FakeBackend()
    read_int, read_text, write, output = scripted([0, 9, 3, 1])
    run_session(Player(backend), TRACKS, read_int, read_text, write)
    assert backend.loaded() == [TRACKS[2].path]
    assert "".join(output).count("INVALID INPUT!\n") == 2


def test_session_change_music():
    backend = FakeBackend()
    read_int, read_text, write, _ = scripted([1, 4, 4, 1])
    run_session(Player(backend), TRACKS, read_int, read_text, write)
    assert backend.loaded() == [TRACKS[0].path, TRACKS[3].path]


def test_session_shows_paused_notice():
    backend = FakeBackend()
    read_int, read_text, write, output = scripted([1, 2, 1])
    run_session(Player(backend), TRACKS, read_int, read_text, write)
    assert "The Music has been paused\n" in "".join(output)
    assert ("pause",) in backend.calls


def test_session_search_plays_chosen_result():
    backend = FakeBackend()
    read_int, read_text, write, output = scripted([1, 7, 2, 1], ["Star"])
    run_session(Player(backend), TRACKS, read_int, read_text, write)
    assert backend.loaded() == [TRACKS[0].path, TRACKS[3].path]
    assert "1.Binary Star\n2.Star Sky\n" in "".join(output)


def test_session_search_without_results_can_give_up():
    backend = FakeBackend()
    read_int, read_text, write, output = scripted([1, 7, 2, 1], ["nothing"])
    run_session(Player(backend), TRACKS, read_int, read_text, write)
    assert backend.loaded() == [TRACKS[0].path]
    assert "No music found\n" in "".join(output)


def test_session_search_again_after_miss():
    backend = FakeBackend()
    read_int, read_text, write, _ = scripted([1, 7, 1, 1, 1], ["zzz", "Victory"])
    run_session(Player(backend), TRACKS, read_int, read_text, write)
    assert backend.loaded() == [TRACKS[0].path, TRACKS[1].path]


def test_session_reports_failed_seek_and_continues():
    backend = FakeBackend(fail_seek=True)
    read_int, read_text, write, output = scripted([1, 6, 10, 1])
    run_session(Player(backend), TRACKS, read_int, read_text, write)
    assert "position not supported" in "".join(output)
    assert backend.calls[-1] == ("stop",)


def test_session_unknown_command_is_reported():
    backend = FakeBackend()
    read_int, read_text, write, output = scripted([1, 42, 1])
    run_session(Player(backend), TRACKS, read_int, read_text, write)
    assert "INVALID INPUT!!\n" in "".join(output)
    assert backend.calls == [("load", TRACKS[0].path), ("play",), ("stop",)]


def test_session_without_tracks_raises():
    read_int, read_text, write, _ = scripted([])
    with pytest.raises(PlaybackError):
        run_session(Player(FakeBackend()), [], read_int, read_text, write)