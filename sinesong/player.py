import logging
from pathlib import Path
from typing import Iterable, List, Union

import numpy as np
from pydub import AudioSegment
from pydub.playback import play

from .music.synthesis import SineWave
from .music.types import CHANNELS, SAMPLE_RATE

_LOG = logging.getLogger("sinesong.player")

_SAMPLE_WIDTH = 2  # bytes, 16-bit PCM
_PCM_PEAK = 32767


def _stream_to_pcm(stream: SineWave) -> np.ndarray:
    samples = np.fromiter(stream, dtype=np.float64)
    return (np.clip(samples, -1.0, 1.0) * _PCM_PEAK).astype(np.int16)


def _pcm_to_segment(pcm: np.ndarray, sample_rate: int, channels: int) -> AudioSegment:
    if pcm.size == 0:
        return AudioSegment.silent(duration=0, frame_rate=sample_rate)
    return AudioSegment(
        pcm.tobytes(),
        frame_rate=sample_rate,
        sample_width=_SAMPLE_WIDTH,
        channels=channels,
    )


def stream_to_segment(stream: SineWave) -> AudioSegment:
    """Drain one stream into a 16-bit PCM segment."""
    return _pcm_to_segment(_stream_to_pcm(stream), stream.sample_rate, stream.channels)


def render_sequence(streams: Iterable[SineWave]) -> AudioSegment:
    # Streams are appended strictly in order and joined once at the end.
    chunks: List[np.ndarray] = [_stream_to_pcm(stream) for stream in streams]
    pcm = np.concatenate(chunks) if chunks else np.zeros(0, dtype=np.int16)
    _LOG.debug("Rendered %d streams into %d frames", len(chunks), pcm.size)
    return _pcm_to_segment(pcm, SAMPLE_RATE, CHANNELS)


def play_sequence(streams: Iterable[SineWave]) -> None:
    """Queue every stream and block until playback has drained."""
    segment = render_sequence(streams)
    _LOG.info("Playing %.2f seconds of audio", segment.duration_seconds)
    play(segment)


def export_sequence(streams: Iterable[SineWave], path: Union[str, Path]) -> Path:
    out_path = Path(path)
    segment = render_sequence(streams)
    handle = segment.export(str(out_path), format="wav")
    handle.close()
    _LOG.info("Wrote %.2f seconds of audio to %s", segment.duration_seconds, out_path)
    return out_path
