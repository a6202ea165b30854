"""sinesong: play JSON note lists as equal-tempered sine tones."""

from .music import NoteSpec, SineWave, build_playback_sequence, note_to_frequency

__version__ = "0.1.0"

__all__ = ["NoteSpec", "SineWave", "build_playback_sequence", "note_to_frequency"]
