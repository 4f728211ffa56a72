# slidearcade

Two small terminal programs:

- **Slide puzzle** (`slide-puzzle`): the classic sliding-tile game on a board from 2×2 up to 8×8.
- **Music player** (`slidearcade-player`): a menu-driven player for audio files, built on pygame's mixer.

## Installation

```
pip install .
```

pygame is installed as a dependency; the music player needs it for audio output.
To run the tests, install the `test` extra (`pip install .[test]`) and run `pytest`.

## Slide puzzle

```
slide-puzzle [--seed N]
```

`--seed` fixes the random shuffle so a game can be replayed.

After the intro screen, a menu offers *register*, *Tell me what this is* (the rules) and
*Let me quit*. Move the highlight with `w`/`s` or the arrow keys and press Enter. Registering
asks for your name and shows a randomly generated id.

Then choose a board size from 2 to 8. The board is shuffled and the blank space, shown as
`_`, ends up in the bottom-right corner. On each turn, type the number of a tile next to the
blank to slide it into the gap. Put the tiles back in order, `1` in the top-left and the
blank in the bottom-right, to win; the number of moves is shown. Enter `0` for help or a
negative number to give up. Afterwards, enter a positive number to play again, `0` for help
or `-1` to quit.

```
  1  2  3

  4  5  6

  7  _  8      Your Move: 8
```

The board can be used from Python:

```python
import random
from slidearcade.board import Board, InvalidMove

board = Board(3)                      # sizes 2 to 8, ValueError otherwise
board.shuffle(random.Random(1), 10)   # 10 ** 3 random moves, blank parked bottom-right
print(board.render())
try:
    board.slide(8)
except InvalidMove:
    print("8 is not next to the blank")
print(board.tile_at(2, 2))            # None: the blank
print(board.is_solved())
```

## Music player

```
slidearcade-player [--music-dir DIR] [--lists PATHS_FILE NAMES_FILE]
```

The main menu offers *Start*, *Setting*, *Help* and *Exit*; move with the arrow keys (or
`w`/`s`) and press Enter. *Setting* lets you change the terminal colours.

By default the player lists every file in `./Music` (or `--music-dir`), ordered by file
name and shown without its four-character extension such as `.mp3`. With `--lists`, track
paths are read from one file (whitespace-separated) and names from another (one per line).

Pick a track by number, then enter a command:

| Input | Action |
|-------|--------|
| 1 | stop playing and return to the main menu |
| 2 | pause |
| 3 | resume |
| 4 | change track |
| 5 | rewind |
| 6 | jump to a position in seconds |
| 7 | search tracks by part of their name and play one |

The library helpers work on their own:

```python
from slidearcade.library import scan_directory, search, format_listing

tracks = scan_directory("Music")
print(format_listing(search(tracks, "Star")))
```

`slidearcade.player.Player` wraps any backend object with `load`, `play`, `pause`,
`resume`, `rewind`, `set_position` and `stop` methods; `PygameBackend` is the one used by
the command.

## What it does not do

Both programs are text-only: there is no graphical window, and nothing displays images.
The music player has no playlists, volume control or track progress display.