from __future__ import annotations

from typing import Annotated, List, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, model_validator

from .signal import tick_count


DEFAULT_RATE = 44100

# RIFF sizes are 32-bit; a stereo 16-bit frame is 4 bytes
MAX_FRAMES = (2**32 - 1 - 44) // 4
# phase steps finer than a thousandth of a degree
MAX_REPEATS = 360_000

ShapeName = Literal["sine", "square", "saw", "triangle", "silence"]


class _BaseSettings(BaseModel):
	model_config = ConfigDict(allow_inf_nan=False)

	rate: int = Field(default=DEFAULT_RATE, gt=0)
	duration: float = Field(ge=0.0)

	def frequencies(self) -> List[float]:
		return []

	def frame_total(self) -> int:
		return tick_count(self.rate, self.duration)

	@model_validator(mode="after")
	def check_limits(self) -> "_BaseSettings":
		for f in self.frequencies():
			if f >= self.rate:
				raise ValueError(f"frequency {f} Hz must be below the sample rate {self.rate} Hz")
		if self.frame_total() > MAX_FRAMES:
			raise ValueError(f"output would exceed {MAX_FRAMES} frames, the WAV size limit")
		return self


class PlainSettings(_BaseSettings):
	mode: Literal["plain"] = "plain"
	frequency: float = Field(gt=0.0)
	phase: float = Field(default=0.0, ge=0.0, lt=360.0)
	shape: ShapeName = Field(default="sine")

	def frequencies(self) -> List[float]:
		return [self.frequency]


class ComboSettings(_BaseSettings):
	mode: Literal["combo"] = "combo"
	silence: float = Field(ge=0.0)
	frequency: float = Field(gt=0.0)
	phase_step: float = Field(gt=0.0)
	shape: ShapeName = Field(default="sine")

	def frequencies(self) -> List[float]:
		return [self.frequency]

	def repeats(self) -> int:
		"""Number of tone+silence blocks, one per right-channel phase offset."""
		ratio = 360.0 / self.phase_step
		if not ratio <= MAX_REPEATS:
			raise ValueError(f"phase step {self.phase_step} gives more than {MAX_REPEATS} repetitions")
		return int(ratio)

	def frame_total(self) -> int:
		block = tick_count(self.rate, self.duration) + tick_count(self.rate, self.silence)
		return self.repeats() * block


class ModulateSettings(_BaseSettings):
	mode: Literal["modulate"] = "modulate"
	frequency_1: float = Field(gt=0.0)
	shape_1: ShapeName = Field(default="sine")
	frequency_2: float = Field(gt=0.0)
	shape_2: ShapeName = Field(default="sine")

	def frequencies(self) -> List[float]:
		return [self.frequency_1, self.frequency_2]


Settings = Annotated[
	Union[PlainSettings, ComboSettings, ModulateSettings],
	Field(discriminator="mode"),
]

AnySettingsAdapter = TypeAdapter(Settings)
