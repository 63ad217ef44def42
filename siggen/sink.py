from __future__ import annotations

from pathlib import Path
from types import TracebackType
from typing import BinaryIO, List, Optional, Type, Union

import numpy as np
import soundfile as sf

from .logger import get_logger

logger = get_logger(__name__)

I16_MIN = -32768
I16_MAX = 32767
CHANNELS = 2

FileLike = Union[str, Path, BinaryIO]


class WavSink:
	"""Stereo signed 16-bit PCM WAV writer fed one sample at a time.

	Samples arrive interleaved (left, right, left, right, ...) and are
	buffered into whole frames, then handed to soundfile in blocks.
	"""

	def __init__(self, file: FileLike, sample_rate: int, block_frames: int = 4096) -> None:
		self.sample_rate = sample_rate
		self.block_frames = block_frames
		self.frames_written = 0
		self._pending: List[int] = []
		self._sf: Optional[sf.SoundFile] = sf.SoundFile(
			file,
			mode="w",
			samplerate=sample_rate,
			channels=CHANNELS,
			subtype="PCM_16",
			format="WAV",
		)
		logger.debug("opened %s at %d Hz", file, sample_rate)

	def write_sample(self, value: int) -> None:
		if self._sf is None:
			raise ValueError("sink is closed")
		if not I16_MIN <= value <= I16_MAX:
			raise ValueError(f"sample {value} outside the signed 16-bit range")
		self._pending.append(value)
		if len(self._pending) >= self.block_frames * CHANNELS:
			self._flush()

	def write_frame(self, left: int, right: int) -> None:
		self.write_sample(left)
		self.write_sample(right)

	def _flush(self) -> None:
		if self._sf is None:
			raise ValueError("sink is closed")
		whole = len(self._pending) - len(self._pending) % CHANNELS
		if whole == 0:
			return
		block = np.asarray(self._pending[:whole], dtype=np.int16).reshape(-1, CHANNELS)
		self._sf.write(block)
		self.frames_written += block.shape[0]
		del self._pending[:whole]

	def close(self) -> None:
		if self._sf is None:
			return
		try:
			self._flush()
		finally:
			snd, self._sf = self._sf, None
			snd.close()
		if self._pending:
			self._pending.clear()
			raise ValueError("closed with an incomplete stereo frame")
		logger.debug("closed sink after %d frames", self.frames_written)

	def __enter__(self) -> "WavSink":
		return self

	def __exit__(
		self,
		exc_type: Optional[Type[BaseException]],
		exc: Optional[BaseException],
		tb: Optional[TracebackType],
	) -> None:
		if exc is not None:
			# do not let a dangling half frame mask the original error
			del self._pending[len(self._pending) - len(self._pending) % CHANNELS:]
		self.close()
