from dataclasses import dataclass

SAMPLE_RATE = 44100  # samples per second
CHANNELS = 1  # mono
A4_FREQUENCY = 440.0  # Hz
REFERENCE_OCTAVE = 4
OCTAVE_SEMITONES = 12
AMPLITUDE = 0.5  # headroom against clipping between streams
NOTE_GAP_SECONDS = 0.005


@dataclass(frozen=True)
class NoteSpec:
    note: str  # e.g. "A4", "C#5", "Bb3"
    duration: float  # seconds
