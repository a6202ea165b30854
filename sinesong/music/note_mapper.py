import logging
import math
import string
from typing import Dict, Iterable, List, Tuple

from .types import A4_FREQUENCY, OCTAVE_SEMITONES, REFERENCE_OCTAVE, NoteSpec

_LOG = logging.getLogger("sinesong.note_mapper")

# Semitones from A of the same octave number; the octave number
# increments between B and C, so C4 sits below A4.
LETTER_OFFSETS: Dict[str, int] = {
    "A": 0,
    "B": 2,
    "C": -9,
    "D": -7,
    "E": -5,
    "F": -4,
    "G": -2,
}

ACCIDENTAL_OFFSETS: Dict[str, int] = {
    "b": -1,  # flat
    "#": 1,  # sharp
}


class NoteFormatError(ValueError):
    """Base class for malformed pitch names."""

    def __init__(self, pitch_name: str, message: str) -> None:
        super().__init__(message)
        self.pitch_name = pitch_name


class InvalidNoteFormat(NoteFormatError):
    def __init__(self, pitch_name: str) -> None:
        super().__init__(
            pitch_name,
            f"Invalid note {pitch_name!r}: expected 2 or 3 characters, got {len(pitch_name)}",
        )


class UnknownPitchLetter(NoteFormatError):
    def __init__(self, pitch_name: str) -> None:
        super().__init__(
            pitch_name,
            f"Invalid note {pitch_name!r}: unknown pitch letter {pitch_name[0]!r}",
        )


class InvalidAccidental(NoteFormatError):
    def __init__(self, pitch_name: str) -> None:
        super().__init__(
            pitch_name,
            f"Invalid note {pitch_name!r}: accidental must be 'b' or '#', got {pitch_name[1]!r}",
        )


class InvalidOctaveDigit(NoteFormatError):
    def __init__(self, pitch_name: str) -> None:
        super().__init__(
            pitch_name,
            f"Invalid note {pitch_name!r}: octave must be a digit, got {pitch_name[-1]!r}",
        )


def semitones_from_a4(pitch_name: str) -> int:
    """Return the signed semitone distance of ``pitch_name`` from A4.

    Accepts ``<letter><octave>`` or ``<letter><accidental><octave>``, for
    example ``"A4"``, ``"C#5"`` or ``"Bb3"``. Raises a ``NoteFormatError``
    subclass describing the first problem found.
    """
    if len(pitch_name) not in (2, 3):
        raise InvalidNoteFormat(pitch_name)

    letter = pitch_name[0]
    if letter not in LETTER_OFFSETS:
        raise UnknownPitchLetter(pitch_name)

    accidental_offset = 0
    if len(pitch_name) == 3:
        accidental = pitch_name[1]
        if accidental not in ACCIDENTAL_OFFSETS:
            raise InvalidAccidental(pitch_name)
        accidental_offset = ACCIDENTAL_OFFSETS[accidental]

    octave_char = pitch_name[-1]
    if octave_char not in string.digits:
        raise InvalidOctaveDigit(pitch_name)
    relative_octave = int(octave_char) - REFERENCE_OCTAVE

    return LETTER_OFFSETS[letter] + relative_octave * OCTAVE_SEMITONES + accidental_offset


def note_to_frequency(pitch_name: str) -> float:
    semitones = semitones_from_a4(pitch_name)
    return A4_FREQUENCY * math.pow(2, semitones / OCTAVE_SEMITONES)


def resolve_notes(notes: Iterable[NoteSpec], skip_invalid: bool = False) -> List[Tuple[float, float]]:
    """Map each note to a ``(frequency, duration)`` pair, in order.

    A malformed note aborts the whole song unless ``skip_invalid`` is set,
    in which case it is logged and left out.
    """
    resolved: List[Tuple[float, float]] = []
    for index, spec in enumerate(notes):
        try:
            frequency = note_to_frequency(spec.note)
        except NoteFormatError as exc:
            if not skip_invalid:
                raise
            _LOG.warning("Skipping note #%d: %s", index, exc)
            continue
        resolved.append((frequency, spec.duration))
    return resolved
