import json
import logging
from pathlib import Path
from typing import List, Union

from .music.types import NoteSpec

_LOG = logging.getLogger("sinesong.songs")

SONG_SUFFIX = ".json"

PathLike = Union[str, Path]


class SongError(Exception):
    """Base class for problems locating or decoding a song."""


class SongDirectoryError(SongError):
    pass


class SongNotFoundError(SongError):
    def __init__(self, name: str, path: Path) -> None:
        super().__init__(f"Song '{name}' not found")
        self.name = name
        self.path = path


class SongFormatError(SongError):
    pass


def list_songs(directory: PathLike) -> List[str]:
    songs_dir = Path(directory)
    if not songs_dir.is_dir():
        raise SongDirectoryError(f"Failed to read songs directory {songs_dir}")
    return sorted(entry.name for entry in songs_dir.iterdir() if entry.is_file())


def resolve_song_path(name: str, directory: PathLike) -> Path:
    file_name = name if name.endswith(SONG_SUFFIX) else name + SONG_SUFFIX
    path = Path(directory) / file_name
    if not path.is_file():
        raise SongNotFoundError(name, path)
    return path


def _parse_record(index: int, record: object) -> NoteSpec:
    if not isinstance(record, dict):
        raise SongFormatError(f"Entry #{index} is not an object")
    note = record.get("note")
    duration = record.get("duration")
    if not isinstance(note, str):
        raise SongFormatError(f"Entry #{index} is missing a 'note' string")
    # bool is an int subclass; reject it explicitly
    if isinstance(duration, bool) or not isinstance(duration, (int, float)):
        raise SongFormatError(f"Entry #{index} is missing a numeric 'duration'")
    if duration < 0:
        raise SongFormatError(f"Entry #{index} has a negative duration ({duration})")
    return NoteSpec(note=note, duration=float(duration))


def load_song(path: PathLike) -> List[NoteSpec]:
    """Read a JSON song file: a list of ``{"note": ..., "duration": ...}`` objects."""
    song_path = Path(path)
    try:
        raw = json.loads(song_path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise SongError(f"Failed to read song file {song_path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise SongFormatError(f"Failed to parse JSON in {song_path}: {exc}") from exc

    if not isinstance(raw, list):
        raise SongFormatError(f"{song_path} must contain a JSON list of notes")

    notes = [_parse_record(index, record) for index, record in enumerate(raw)]
    _LOG.debug("Loaded %d notes from %s", len(notes), song_path)
    return notes
