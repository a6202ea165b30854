import logging
from datetime import timedelta
from typing import Iterable, Iterator, List

from pydub.generators import Sine

from .note_mapper import resolve_notes
from .types import AMPLITUDE, CHANNELS, NOTE_GAP_SECONDS, SAMPLE_RATE, NoteSpec

_LOG = logging.getLogger("sinesong.synthesis")


class SineWave:
    """Finite, lazily generated sine tone.

    Samples are drawn one at a time from pydub's ``Sine`` generator as the
    consumer iterates, scaled to half amplitude. The sample
    count is ``round(duration * SAMPLE_RATE)`` (Python rounding, ties go to
    the even count). A frequency of 0 yields silence. Each instance is
    traversed once; build a new one to play the same tone again.
    """

    channels = CHANNELS
    sample_rate = SAMPLE_RATE

    def __init__(self, frequency: float, duration: float) -> None:
        if frequency < 0:
            raise ValueError(f"Frequency must be >= 0, got {frequency}")
        if duration < 0:
            raise ValueError(f"Duration must be >= 0, got {duration}")
        self.frequency = float(frequency)
        self.duration = float(duration)
        self.total_samples = round(self.duration * self.sample_rate)
        self._current_sample = 0
        self._signal = Sine(self.frequency, sample_rate=self.sample_rate).generate()

    @property
    def total_duration(self) -> timedelta:
        return timedelta(seconds=self.duration)

    def __len__(self) -> int:
        return self.total_samples

    def __iter__(self) -> Iterator[float]:
        return self

    def __next__(self) -> float:
        if self._current_sample >= self.total_samples:
            raise StopIteration
        self._current_sample += 1
        return next(self._signal) * AMPLITUDE

    def __repr__(self) -> str:
        return f"SineWave(frequency={self.frequency!r}, duration={self.duration!r})"


def silence(duration: float = NOTE_GAP_SECONDS) -> SineWave:
    return SineWave(0.0, duration)


def build_playback_sequence(notes: Iterable[NoteSpec], skip_invalid: bool = False) -> List[SineWave]:
    """Turn a song into the ordered list of streams a player should queue.

    Every note is resolved before any stream is built, so a malformed note
    fails the song up front rather than part way through playback. Each
    note contributes its tone followed by a short silence that keeps the
    joins between tones free of clicks.
    """
    resolved = resolve_notes(notes, skip_invalid=skip_invalid)
    sequence: List[SineWave] = []
    for frequency, duration in resolved:
        sequence.append(SineWave(frequency, duration))
        sequence.append(silence())
    _LOG.debug("Built playback sequence: %d notes, %d streams", len(resolved), len(sequence))
    return sequence
