"""Terminal music player: playback control, colour settings and the session loop."""

from __future__ import annotations

import argparse
import os
import sys
from contextlib import contextmanager
from pathlib import Path
from typing import Callable, Iterable, Iterator, Optional, Sequence, TextIO

from slidearcade.library import (
    LibraryError,
    Track,
    format_listing,
    load_lists,
    scan_directory,
    search,
)
from slidearcade.menu import Menu, read_key

try:
    import termios
except ImportError:  # not available on every platform
    termios = None

CLEAR = "\033[2J\033[H"
DEFAULT_COLOURS = "\033[0;30;47m"

_COLOUR_CODES = {
    1: "\033[0;32m",
    2: "\033[0;32m",
    3: "\033[0;30;47m",
    4: "\033[0;31;47m",
}

COLOUR_MENU = (
    "1. Black Background White Text\n"
    "2. Black Background Green Text\n"
    "3. White Background Black Text\n"
    "4. White Background Red Text\n"
)

COMMANDS = (
    "Input 1 to stop playing music and exit\n"
    "Input 2 to pause music\n"
    "Input 3 to resume music\n"
    "Input 4 to change music\n"
    "Input 5 to rewind music\n"
    "Input 6 to set position music (seconds)\n"
    "Input 7 to search music\n"
)

MENU_TITLE = "\t\t\t\t\t\tMUSIC PLAYER\n\n"
MENU_OPTIONS = ("Start", "Setting", "Help", "Exit")
MENU_FOOTER = (
    "\n\n\n\n\n\nNOTE: To navigate through this section, use arrow keys to go up "
    "and down\n      and press enter to get inside the chosen function\n"
)
HELP_TEXT = "This is a music player that can play a music\n"

DEFAULT_MUSIC_DIR = "./Music"

ReadInt = Callable[[], int]
ReadText = Callable[[], str]
Write = Callable[[str], object]


class PlaybackError(Exception):
    """Raised when music cannot be loaded, played or positioned."""


class PygameBackend:
    """Audio output through the pygame mixer."""

    def __init__(self, frequency: int = 22050, channels: int = 2, buffer: int = 4096) -> None:
        import pygame

        self._error = pygame.error
        try:
            pygame.mixer.init(frequency=frequency, size=-16, channels=channels, buffer=buffer)
        except pygame.error as error:
            raise PlaybackError(f"could not open audio: {error}") from error
        self._mixer = pygame.mixer
        self._music = pygame.mixer.music

    def load(self, path: Path) -> None:
        """Load the music file at ``path``."""
        try:
            self._music.load(str(path))
        except self._error as error:
            raise PlaybackError(f"could not load {path}: {error}") from error

    def play(self) -> None:
        """Play the loaded music once from the start."""
        try:
            self._music.play()
        except self._error as error:
            raise PlaybackError(f"could not play music: {error}") from error

    def pause(self) -> None:
        self._music.pause()

    def resume(self) -> None:
        self._music.unpause()

    def rewind(self) -> None:
        self._music.rewind()

    def set_position(self, seconds: float) -> None:
        """Jump to ``seconds`` into the music."""
        try:
            self._music.set_pos(seconds)
        except self._error as error:
            raise PlaybackError(str(error)) from error

    def stop(self) -> None:
        """Stop playback and close the audio device."""
        self._music.stop()
        self._music.unload()
        self._mixer.quit()


class Player:
    """Tracks what is playing and drives an audio backend."""

    def __init__(self, backend) -> None:
        self.backend = backend
        self.current: Optional[Track] = None
        self.paused = False

    def _require_track(self) -> None:
        if self.current is None:
            raise PlaybackError("no music is loaded")

    def play(self, track: Track) -> None:
        """Load ``track`` and start playing it."""
        self.backend.load(track.path)
        self.backend.play()
        self.current = track
        self.paused = False

    def pause(self) -> None:
        self._require_track()
        self.backend.pause()
        self.paused = True

    def resume(self) -> None:
        self._require_track()
        self.backend.resume()
        self.paused = False

    def rewind(self) -> None:
        self._require_track()
        self.backend.rewind()

    def seek(self, seconds: float) -> None:
        """Rewind, then move ``seconds`` into the current track."""
        self._require_track()
        if seconds < 0:
            raise PlaybackError(f"position must not be negative, got {seconds}")
        self.backend.rewind()
        self.backend.set_position(seconds)

    def stop(self) -> None:
        self.backend.stop()
        self.current = None
        self.paused = False


def color_code(choice: int) -> str:
    """Return the terminal escape sequence for a colour menu choice (1-4)."""
    try:
        return _COLOUR_CODES[choice]
    except KeyError:
        raise ValueError(f"colour choice must be from 1 to 4, got {choice}") from None


def _pick_track(
    tracks: Sequence[Track], read_int: ReadInt, write: Write, header: str, prompt: str, complain: bool
) -> Track:
    while True:
        write(header + format_listing(tracks) + prompt)
        number = read_int()
        if 1 <= number <= len(tracks):
            return tracks[number - 1]
        if complain:
            write("INVALID INPUT!\n")
        write(CLEAR)


def _search_and_play(
    player: Player, tracks: Sequence[Track], read_int: ReadInt, read_text: ReadText, write: Write
) -> None:
    while True:
        write("Search your song\n\n")
        found = search(tracks, read_text().strip())
        if found:
            break
        while True:
            write("No music found\n\nSearch again?\n1.Yes\n2.No\n")
            answer = read_int()
            if answer == 1:
                break
            if answer == 2:
                return
            write(CLEAR)
    choice = _pick_track(found, read_int, write, "", "Input your music number\n", complain=True)
    player.play(choice)


def run_session(
    player: Player,
    tracks: Iterable[Track],
    read_int: ReadInt,
    read_text: ReadText,
    write: Write,
) -> None:
    """Let the user pick a track and control playback until they stop."""
    tracks = list(tracks)
    if not tracks:
        raise PlaybackError("there are no tracks to play")
    first = _pick_track(
        tracks, read_int, write, "MUSIC PLAYER\n\n", "\n\nSelect a music to play\n", complain=True
    )
    player.play(first)
    while True:
        write(COMMANDS)
        if player.paused:
            write("The Music has been paused\n")
        command = read_int()
        if command == 1:
            player.stop()
            return
        if command == 2:
            player.pause()
        elif command == 3:
            player.resume()
        elif command == 4:
            player.play(_pick_track(tracks, read_int, write, CLEAR, "", complain=False))
        elif command == 5:
            player.rewind()
        elif command == 6:
            write("Skip Music to (second)\n")
            seconds = read_int()
            try:
                player.seek(seconds)
            except PlaybackError as error:
                write(f"Could not set music position: {error}\n")
        elif command == 7:
            _search_and_play(player, tracks, read_int, read_text, write)
        else:
            write("INVALID INPUT!!\n")
        write(CLEAR)


@contextmanager
def _single_keys(stream: TextIO) -> Iterator[None]:
    """Switch a terminal to unbuffered, silent input for the duration."""
    try:
        fd = stream.fileno()
        interactive = termios is not None and os.isatty(fd)
    except (AttributeError, OSError, ValueError):
        interactive = False
    if not interactive:
        yield
        return
    saved = termios.tcgetattr(fd)
    changed = termios.tcgetattr(fd)
    changed[3] &= ~(termios.ICANON | termios.ECHO)
    termios.tcsetattr(fd, termios.TCSANOW, changed)
    try:
        yield
    finally:
        termios.tcsetattr(fd, termios.TCSANOW, saved)


class _Console:
    """Reads keys, lines and numbers from one input stream."""

    def __init__(self, stdin: TextIO, stdout: TextIO) -> None:
        self._stdin = stdin
        self._stdout = stdout

    def write(self, text: str) -> None:
        self._stdout.write(text)
        self._stdout.flush()

    def key(self) -> str:
        with _single_keys(self._stdin):
            return read_key(self._stdin)

    def line(self) -> str:
        text = self._stdin.readline()
        if not text:
            raise EOFError("input closed")
        return text

    def word(self) -> str:
        while True:
            words = self.line().split()
            if words:
                return words[0]

    def integer(self) -> int:
        while True:
            try:
                return int(self.word())
            except ValueError:
                self.write("Please enter a number: ")


def _settings(console: _Console) -> None:
    while True:
        console.write("\t1.Change color\n\t2.Back to main menu\n\nChoose one of them!\n")
        choice = console.integer()
        if choice == 2:
            return
        if choice == 1:
            break
    while True:
        console.write(COLOUR_MENU)
        try:
            console.write(color_code(console.integer()))
            return
        except ValueError:
            console.write("Invalid Input!")


def _main_menu(console: _Console) -> bool:
    """Show the main menu; True to start playing, False to exit."""
    menu = Menu(MENU_TITLE, MENU_OPTIONS)
    while True:
        console.write(CLEAR + menu.render() + MENU_FOOTER)
        key = console.key()
        if key == "up":
            menu.move_up()
        elif key == "down":
            menu.move_down()
        elif key == "enter":
            if menu.choice == "Start":
                return True
            if menu.choice == "Exit":
                return False
            console.write(CLEAR)
            if menu.choice == "Setting":
                _settings(console)
            else:
                console.write(HELP_TEXT + "Press any key to continue . . .")
                console.key()


def main(argv: Optional[list[str]] = None) -> int:
    """Run the music player in the terminal."""
    parser = argparse.ArgumentParser(prog="music-player", description="Play music from a folder.")
    parser.add_argument(
        "--music-dir", default=DEFAULT_MUSIC_DIR, help="folder holding the music files"
    )
    parser.add_argument(
        "--lists",
        nargs=2,
        metavar=("PATHS_FILE", "NAMES_FILE"),
        help="read track paths and names from two list files instead of a folder",
    )
    args = parser.parse_args(argv)
    console = _Console(sys.stdin, sys.stdout)
    console.write(DEFAULT_COLOURS)
    try:
        while _main_menu(console):
            console.write(CLEAR)
            try:
                if args.lists:
                    tracks = load_lists(*args.lists)
                else:
                    tracks = scan_directory(args.music_dir)
            except LibraryError as error:
                console.write(f"{error}\n")
                return 1
            try:
                player = Player(PygameBackend())
                run_session(player, tracks, console.integer, console.word, console.write)
            except PlaybackError as error:
                console.write(f"{error}\n")
                return 1
            console.write("Press any key to continue . . .")
            console.key()
    except EOFError:
        return 0
    return 0


if __name__ == "__main__":
    sys.exit(main())