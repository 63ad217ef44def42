from __future__ import annotations

import math
from typing import Iterator

import numpy as np
import numpy.typing as npt


def _validate(sample_rate: float, frequency: float, duration: float, phase: float) -> None:
	for name, value in (("sample rate", sample_rate), ("frequency", frequency), ("duration", duration), ("phase", phase)):
		if not math.isfinite(value):
			raise ValueError(f"{name} must be finite, got {value}")
	if duration < 0.0:
		raise ValueError(f"duration must be >= 0, got {duration}")
	if sample_rate <= 0.0:
		raise ValueError(f"sample rate must be > 0, got {sample_rate}")
	if not 0.0 < frequency < sample_rate:
		raise ValueError(f"frequency must be in (0, {sample_rate}), got {frequency}")
	if not 0.0 <= phase < 360.0:
		raise ValueError(f"phase must be in [0, 360), got {phase}")


def tick_count(sample_rate: float, duration: float) -> int:
	ticks = duration * sample_rate
	if not math.isfinite(ticks):
		raise ValueError(f"{duration} s at {sample_rate} Hz is not a countable number of samples")
	return int(math.floor(ticks))


class Signal:
	"""Phase accumulator yielding one normalized phase in [0, 1) per sample.

	The accumulator counts in units of samples and is wrapped by
	``sample_rate`` rather than recomputed from the tick index, so it stays
	bounded however long the signal runs. A Signal is exhausted after
	``floor(duration * sample_rate)`` values and cannot be restarted.

	Args:
		sample_rate: Samples per second
		frequency: Frequency in Hz, strictly between 0 and ``sample_rate``
		duration: Duration in seconds
		phase: Initial phase offset in degrees, in [0, 360)
	"""

	def __init__(self, sample_rate: float, frequency: float, duration: float, phase: float = 0.0) -> None:
		_validate(sample_rate, frequency, duration, phase)
		self.sample_rate = float(sample_rate)
		self.frequency = float(frequency)
		self.total = tick_count(sample_rate, duration)
		self.emitted = 0
		self._acc = phase * self.sample_rate / 360.0

	def __iter__(self) -> Iterator[float]:
		return self

	def __next__(self) -> float:
		if self.emitted >= self.total:
			raise StopIteration
		self.emitted += 1
		# frequency < sample_rate, so one wrap is always enough
		if self._acc >= self.sample_rate:
			self._acc -= self.sample_rate
		t = self._acc / self.sample_rate
		self._acc += self.frequency
		return t

	def __len__(self) -> int:
		return self.total - self.emitted


def tick_array(sample_rate: float, frequency: float, duration: float, phase: float = 0.0) -> npt.NDArray[np.float64]:
	"""Index-based phases, ``fract(frequency * n / sample_rate + phase / 360)``.

	Same length and validation as :class:`Signal`; values agree with it
	within floating point tolerance.
	"""
	_validate(sample_rate, frequency, duration, phase)
	n = np.arange(tick_count(sample_rate, duration), dtype=np.float64)
	x = frequency * n / sample_rate + phase / 360.0
	x = x - np.floor(x)
	# fract() of a value just below an integer can round up to 1.0
	x[x >= 1.0] = 0.0
	return x
