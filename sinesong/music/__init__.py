"""Music helpers for sinesong."""

from .note_mapper import (
    InvalidAccidental,
    InvalidNoteFormat,
    InvalidOctaveDigit,
    NoteFormatError,
    UnknownPitchLetter,
    note_to_frequency,
    resolve_notes,
    semitones_from_a4,
)
from .synthesis import SineWave, build_playback_sequence, silence
from .types import NoteSpec

__all__ = [
    "InvalidAccidental",
    "InvalidNoteFormat",
    "InvalidOctaveDigit",
    "NoteFormatError",
    "NoteSpec",
    "SineWave",
    "UnknownPitchLetter",
    "build_playback_sequence",
    "note_to_frequency",
    "resolve_notes",
    "semitones_from_a4",
    "silence",
]
