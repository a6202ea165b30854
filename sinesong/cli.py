import argparse
import logging
from pathlib import Path
from typing import List, Optional, Sequence

from . import player
from .config import load_settings
from .music.note_mapper import NoteFormatError
from .music.synthesis import build_playback_sequence
from .songs import SongError, SongNotFoundError, list_songs, load_song, resolve_song_path

_LOG = logging.getLogger("sinesong.cli")

PROG = "sinesong"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog=PROG, description="Play a JSON song as sine tones.")
    parser.add_argument("song", nargs="?", help="song name from the songs directory (.json optional)")
    parser.add_argument("--songs-dir", type=Path, default=None, help="override SINESONG_SONGS_DIR")
    parser.add_argument("-o", "--output", type=Path, default=None, help="write a WAV file instead of playing")
    parser.add_argument(
        "--skip-invalid",
        action="store_true",
        help="drop malformed notes with a warning instead of aborting",
    )
    return parser


def _print_available(songs_dir: Path) -> None:
    print("Available songs:")
    try:
        names: List[str] = list_songs(songs_dir)
    except SongError as exc:
        _LOG.error("%s", exc)
        print(f"  ({exc})")
        names = []
    for name in names:
        print(f"  {name}")
    print(f"\nUsage: {PROG} <song_name>")


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = load_settings()
    songs_dir = args.songs_dir or settings.songs_dir

    if not args.song:
        _print_available(songs_dir)
        return 1

    try:
        song_path = resolve_song_path(args.song, songs_dir)
    except SongNotFoundError as exc:
        print(exc)
        return 1

    try:
        notes = load_song(song_path)
        sequence = build_playback_sequence(notes, skip_invalid=args.skip_invalid)
    except (SongError, NoteFormatError) as exc:
        _LOG.error("Cannot play %s: %s", args.song, exc)
        print(f"Error: {exc}")
        return 1

    try:
        if args.output:
            player.export_sequence(sequence, args.output)
            print(f"Wrote {args.song} to {args.output}")
        else:
            print(f"Playing: {args.song}")
            player.play_sequence(sequence)
    except Exception as exc:  # pydub and the audio backends raise many things
        _LOG.exception("Failed to render %s", args.song)
        print(f"Couldn't play that song ({exc}).")
        return 1
    return 0
