"""Interactive slide-puzzle game for the terminal."""

from __future__ import annotations

import argparse
import os
import random
import sys
from contextlib import contextmanager
from typing import Callable, Iterator, Optional, TextIO

from slidearcade.board import MAX_SIZE, MIN_SIZE, Board, InvalidMove
from slidearcade.menu import Menu, read_key

try:
    import termios
except ImportError:  # not available on every platform
    termios = None

CLEAR = "\033[2J\033[H"
COLOURS = "\033[34;47m"

INTRO = (
    "---------------------------------Slide Puzzle----------------------------\n\n"
    "This is the sliding-tile game that used to come with the desktop widgets.\n"
    "It is not exactly the same as the original, but it keeps its elements.\n"
    "Enjoy it as much as the original one :)\n\n"
    "Press Enter to continue"
)

HELP_TEXT = (
    "\tHOW TO PLAY\n"
    "[1] Register your Name and ID, id is automatically generate \n"
    "[2] Insert the size of your board \n"
    "[3] Look at your bottom on the most right space!\n"
    "[4] Insert the number that is around the blank space!\n"
    "[5] If you put the number beside the blank space, it will swap their postion\n"
    "[6] The winning state  of this game is to arrange the number to proper "
    "position, take a look of example below\n"
    "\nexample:\n"
    "  1  2  3\n"
    "  4  5  6\n"
    "  7  _  8      Your Move: 8\n\n"
    "  1  2  3\n"
    "  4  5  6\n"
    "  7  8  _      You win!\n\n"
)

MENU_TITLE = (
    "\t-----------------SLIDE PUZZLE-----------------\n\n\n"
    "\t It is very fun game to play\n"
)
MENU_OPTIONS = ("register", "Tell me what this is", "Let me quit")
MENU_FOOTER = "\n\n\nPress w or s to navigate"

_SHUFFLE_BASE = 100
_SHUFFLE_MOVE_LIMIT = 10**6

ReadInt = Callable[[], int]
Write = Callable[[str], object]


def ask_board_size(read_int: ReadInt, write: Write) -> int:
    """Ask until a board size within the allowed range is given."""
    while True:
        write(f"Please insert your board size ({MIN_SIZE} - {MAX_SIZE}): ")
        size = read_int()
        if MIN_SIZE <= size <= MAX_SIZE:
            return size
        write(f"The size is only from {MIN_SIZE} to {MAX_SIZE}!!!\n\n")


def play_round(board: Board, read_int: ReadInt, write: Write) -> Optional[int]:
    """Play until solved or abandoned.

    Returns the number of moves made on a win, or None when the player
    gives up with a negative number.  Zero shows the rules.
    """
    moves = 0
    write(board.render())
    while not board.is_solved():
        write("Your Move : ")
        move = read_int()
        if move == 0:
            write(CLEAR + HELP_TEXT)
            write(board.render())
            continue
        if move < 0:
            write(CLEAR + "\nNo way i am winning this game\n\n")
            return None
        try:
            board.slide(move)
        except InvalidMove:
            write("Put the number around the blank space!!\n\n")
            continue
        moves += 1
        write(CLEAR + board.render())
    write("\nYou Win!\n\n")
    write(f"your best score is {moves}")
    return moves


def _shuffle_base(size: int) -> int:
    base = _SHUFFLE_BASE
    while base > 1 and base**size > _SHUFFLE_MOVE_LIMIT:
        base -= 1
    return base


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

    def integer(self) -> int:
        while True:
            words = self.line().split()
            if words:
                try:
                    return int(words[0])
                except ValueError:
                    pass
            self.write("Please enter a number: ")


def _choose_from_menu(console: _Console) -> int:
    menu = Menu(MENU_TITLE, MENU_OPTIONS)
    while True:
        console.write(CLEAR + menu.render() + MENU_FOOTER)
        key = console.key()
        if key == "up":
            menu.move_up()
        elif key == "down":
            menu.move_down()
        elif key == "enter":
            return menu.selected


def _register(console: _Console, rng: random.Random) -> None:
    console.write(CLEAR + "What is your name : ")
    console.line()
    console.write(f"This is your id : {rng.randrange(10**6, 10**7)}")
    console.key()
    console.write(CLEAR)


def _play(console: _Console, rng: random.Random) -> int:
    while True:
        size = ask_board_size(console.integer, console.write)
        board = Board(size)
        console.write("Please wait . . .\n")
        board.shuffle(rng, _shuffle_base(size))
        console.write(CLEAR)
        play_round(board, console.integer, console.write)
        while True:
            console.write(
                "\nwant to play some more? (press -1 for quit, and 0 for help)\n"
            )
            answer = console.integer()
            if answer == 0:
                console.write(CLEAR + HELP_TEXT)
            elif answer < 0:
                return 0
            else:
                break
        console.write(CLEAR)


def main(argv: Optional[list[str]] = None) -> int:
    """Run the slide puzzle in the terminal."""
    parser = argparse.ArgumentParser(
        prog="slide-puzzle", description="Play the sliding-tile puzzle."
    )
    parser.add_argument("--seed", type=int, default=None, help="seed for shuffling")
    args = parser.parse_args(argv)
    rng = random.Random(args.seed)
    console = _Console(sys.stdin, sys.stdout)
    try:
        console.write(COLOURS + CLEAR + INTRO)
        console.key()
        choice = _choose_from_menu(console)
        if choice == 2:
            return 0
        if choice == 1:
            console.write(CLEAR + HELP_TEXT + "Press Enter if you understand")
            console.key()
        _register(console, rng)
        return _play(console, rng)
    except EOFError:
        return 0


if __name__ == "__main__":
    sys.exit(main())