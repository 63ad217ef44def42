import math
from typing import Callable, Dict, List

ShapeFunc = Callable[[float], float]


def _check_phase(x: float) -> None:
	if not 0.0 <= x < 1.0:
		raise ValueError(f"phase {x!r} outside [0, 1)")


def sine(x: float) -> float:
	_check_phase(x)
	return math.sin(2.0 * math.pi * x)


def square(x: float) -> float:
	_check_phase(x)
	return 1.0 if x < 0.5 else -1.0


def saw(x: float) -> float:
	_check_phase(x)
	return 2.0 * x - 1.0


def triangle(x: float) -> float:
	_check_phase(x)
	if x < 0.5:
		return 1.0 - 4.0 * x
	return 4.0 * x - 3.0


def silence(x: float) -> float:
	_check_phase(x)
	return 0.0


SHAPES: Dict[str, ShapeFunc] = {
	"sine": sine,
	"square": square,
	"saw": saw,
	"triangle": triangle,
	"silence": silence,
}

# Names selectable from the command line
WAVEFORMS: List[str] = ["sine", "square", "saw", "triangle"]


def get_shape(name: str) -> ShapeFunc:
	"""Resolve a waveform name to its shape function (case-sensitive)."""
	try:
		return SHAPES[name]
	except KeyError:
		known = ", ".join(SHAPES)
		raise ValueError(f"unknown shape {name!r}, expected one of: {known}") from None
