"""Finding music tracks on disk and searching them by name."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Union

PathLike = Union[str, Path]

_EXTENSION_LENGTH = 4


class LibraryError(Exception):
    """Raised when the music library cannot be read."""


@dataclass(frozen=True)
class Track:
    """A playable music file and the name shown for it."""

    name: str
    path: Path


def _display_name(filename: str) -> str:
    # Drops a four-character extension such as ".mp3" or ".wav".
    if len(filename) > _EXTENSION_LENGTH:
        return filename[:-_EXTENSION_LENGTH]
    return filename


def scan_directory(directory: PathLike) -> list[Track]:
    """Return a track for every file in ``directory``, ordered by file name."""
    folder = Path(directory)
    try:
        entries = sorted(folder.iterdir(), key=lambda entry: entry.name)
    except OSError as error:
        raise LibraryError(f"Could not open directory {folder}") from error
    return [
        Track(name=_display_name(entry.name), path=entry)
        for entry in entries
        if entry.is_file()
    ]


def _read_text(path: PathLike) -> str:
    try:
        return Path(path).read_text()
    except OSError as error:
        raise LibraryError(f"Could not read {path}") from error


def load_lists(paths_file: PathLike, names_file: PathLike) -> list[Track]:
    """Pair the paths listed in one file with the names listed in another.

    The paths file holds whitespace-separated paths; the names file holds
    one name per newline-terminated line.  A final line without a newline
    is not counted.
    """
    paths = _read_text(paths_file).split()
    names = _read_text(names_file).split("\n")[:-1]
    if len(paths) != len(names):
        raise LibraryError(
            f"{len(paths)} paths but {len(names)} names in the track lists"
        )
    return [Track(name=name, path=Path(path)) for name, path in zip(paths and names, paths)]


def search(tracks: Iterable[Track], query: str) -> list[Track]:
    """Return the tracks whose name contains ``query``, in their given order."""
    return [track for track in tracks if query in track.name]


def format_listing(tracks: Iterable[Track]) -> str:
    """Return a numbered list of track names, one per line, starting at 1."""
    return "".join(f"{number}.{track.name}\n" for number, track in enumerate(tracks, start=1))