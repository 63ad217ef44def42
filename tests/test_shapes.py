import math

import numpy as np
import pytest

from siggen.shapes import SHAPES, WAVEFORMS, get_shape, saw, silence, sine, square, triangle


def test_all_shapes_bounded():
	xs = np.linspace(0.0, 1.0, 1000, endpoint=False)
	for name, f in SHAPES.items():
		assert all(abs(f(float(x))) <= 1.0 for x in xs), name


def test_sine_quadrants():
	assert sine(0.0) == 0.0
	assert sine(0.25) == pytest.approx(1.0)
	assert sine(0.5) == pytest.approx(0.0, abs=1e-12)
	assert sine(0.75) == pytest.approx(-1.0)


def test_square_halves():
	assert square(0.0) == 1.0
	assert square(0.49) == 1.0
	assert square(0.5) == -1.0
	assert square(0.99) == -1.0


def test_saw_linear_increasing():
	assert saw(0.0) == -1.0
	assert saw(0.5) == 0.0
	assert saw(math.nextafter(1.0, 0.0)) == pytest.approx(1.0)
	xs = np.linspace(0.0, 1.0, 100, endpoint=False)
	ys = [saw(float(x)) for x in xs]
	assert all(b > a for a, b in zip(ys, ys[1:]))


def test_triangle_corners():
	assert triangle(0.0) == 1.0
	assert triangle(0.25) == 0.0
	assert triangle(0.5) == -1.0
	assert triangle(0.75) == 0.0


def test_silence_is_zero():
	assert silence(0.0) == 0.0
	assert silence(0.3) == 0.0


def test_phase_outside_domain_fails():
	for f in SHAPES.values():
		with pytest.raises(ValueError):
			f(1.0)
		with pytest.raises(ValueError):
			f(-0.1)


def test_get_shape_exact_name():
	assert get_shape("triangle") is triangle
	assert get_shape("silence") is silence
	with pytest.raises(ValueError):
		get_shape("Sine")
	with pytest.raises(ValueError):
		get_shape("noise")


def test_waveforms_exclude_silence():
	assert WAVEFORMS == ["sine", "square", "saw", "triangle"]
