from __future__ import annotations

import io
import itertools
from pathlib import Path
from typing import Callable, Dict, Iterable, Iterator, Tuple, Union

from .logger import get_logger
from .models import DEFAULT_RATE, ComboSettings, ModulateSettings, PlainSettings
from .shapes import ShapeFunc, get_shape, silence
from .signal import Signal
from .sink import FileLike, WavSink

logger = get_logger(__name__)

PEAK = 32767

Frame = Tuple[int, int]
AnySettings = Union[PlainSettings, ComboSettings, ModulateSettings]


def quantize(amplitude: float, peak: int = PEAK) -> int:
	"""Scale an amplitude in [-1, 1] to a signed 16-bit sample, truncating toward zero."""
	if not -1.0 <= amplitude <= 1.0:
		raise ValueError(f"amplitude {amplitude!r} outside [-1, 1]")
	return int(amplitude * peak)


def tone(rate: int, freq: float, dur: float, phase: float, shape: ShapeFunc) -> Iterator[Frame]:
	"""Stereo frames of one waveform, right channel shifted by ``phase`` degrees.

	Both tick sources are built (and validated) before this returns.
	"""
	left = Signal(rate, freq, dur, 0.0)
	right = Signal(rate, freq, dur, phase)
	return ((quantize(shape(l)), quantize(shape(r))) for l, r in zip(left, right))


def _plain_frames(s: PlainSettings) -> Iterator[Frame]:
	return tone(s.rate, s.frequency, s.duration, s.phase, get_shape(s.shape))


def _combo_frames(s: ComboSettings) -> Iterator[Frame]:
	shape = get_shape(s.shape)
	repeats = s.repeats()

	def blocks() -> Iterator[Iterator[Frame]]:
		for n in range(repeats):
			yield tone(s.rate, s.frequency, s.duration, s.phase_step * n, shape)
			yield tone(s.rate, s.frequency, s.silence, 0.0, silence)

	return itertools.chain.from_iterable(blocks())


def _modulate_frames(s: ModulateSettings) -> Iterator[Frame]:
	f1 = get_shape(s.shape_1)
	f2 = get_shape(s.shape_2)
	s1 = Signal(s.rate, s.frequency_1, s.duration)
	s2 = Signal(s.rate, s.frequency_2, s.duration)

	def frame(p1: float, p2: float) -> Frame:
		# product of two values in [-1, 1] stays in [-1, 1]
		v = quantize(f1(p1) * f2(p2))
		return v, v

	return (frame(p1, p2) for p1, p2 in zip(s1, s2))


_FRAMES: Dict[str, Callable[..., Iterator[Frame]]] = {
	"plain": _plain_frames,
	"combo": _combo_frames,
	"modulate": _modulate_frames,
}


def frames(settings: AnySettings) -> Iterator[Frame]:
	"""Stereo frames for any mode. Configuration errors surface here, not mid-stream."""
	return _FRAMES[settings.mode](settings)


def frame_count(settings: AnySettings) -> int:
	return settings.frame_total()


def _describe(file: FileLike) -> str:
	return str(file) if isinstance(file, (str, Path)) else "<stream>"


def write_frames(file: FileLike, rate: int, stream: Iterable[Frame]) -> int:
	with WavSink(file, rate) as sink:
		for l, r in stream:
			sink.write_sample(l)
			sink.write_sample(r)
	return sink.frames_written


def render(file: FileLike, settings: AnySettings) -> int:
	"""Synthesize ``settings`` into a stereo 16-bit WAV. Returns frames written."""
	stream = frames(settings)
	n = write_frames(file, settings.rate, stream)
	logger.info("wrote %d %s frames at %d Hz to %s", n, settings.mode, settings.rate, _describe(file))
	return n


def plain(
	file: FileLike,
	rate: int = DEFAULT_RATE,
	duration: float = 1.0,
	frequency: float = 440.0,
	phase: float = 0.0,
	shape: str = "sine",
) -> int:
	s = PlainSettings(rate=rate, duration=duration, frequency=frequency, phase=phase, shape=shape)
	return render(file, s)


def combo(
	file: FileLike,
	rate: int = DEFAULT_RATE,
	duration: float = 1.0,
	silence: float = 0.5,
	frequency: float = 440.0,
	phase_step: float = 45.0,
	shape: str = "sine",
) -> int:
	"""Tone then silence, repeated while the right channel's phase sweeps by ``phase_step``."""
	s = ComboSettings(
		rate=rate,
		duration=duration,
		silence=silence,
		frequency=frequency,
		phase_step=phase_step,
		shape=shape,
	)
	return render(file, s)


def modulate(
	file: FileLike,
	rate: int = DEFAULT_RATE,
	duration: float = 1.0,
	frequency_1: float = 440.0,
	shape_1: str = "sine",
	frequency_2: float = 2.0,
	shape_2: str = "sine",
) -> int:
	"""Amplitude product of two tones, identical on both channels."""
	s = ModulateSettings(
		rate=rate,
		duration=duration,
		frequency_1=frequency_1,
		shape_1=shape_1,
		frequency_2=frequency_2,
		shape_2=shape_2,
	)
	return render(file, s)


def wav_bytes(settings: AnySettings) -> bytes:
	buf = io.BytesIO()
	render(buf, settings)
	return buf.getvalue()
