import numpy as np
import pytest

from siggen.signal import Signal, tick_array, tick_count


def test_length_then_exhausted():
	s = Signal(1000, 100.0, 1.0)
	assert len(s) == 1000
	values = list(s)
	assert len(values) == 1000
	assert len(s) == 0
	with pytest.raises(StopIteration):
		next(s)
	assert list(s) == []


def test_values_in_unit_interval():
	values = list(Signal(44100, 12345.6, 0.5, 271.0))
	assert min(values) >= 0.0
	assert max(values) < 1.0


def test_wraps_with_period_ten():
	values = list(Signal(1000, 100.0, 0.5))
	assert len(values) == 500
	assert values[:10] == pytest.approx([i / 10 for i in range(10)])
	for i in range(10, 500):
		assert values[i] == values[i - 10]


def test_phase_offset_in_degrees():
	assert next(Signal(1000, 100.0, 1.0, 90.0)) == 0.25
	assert next(Signal(1000, 100.0, 1.0, 0.0)) == 0.0


def test_floor_of_duration():
	assert len(list(Signal(44100, 440.0, 0.001))) == 44
	assert list(Signal(44100, 440.0, 0.0)) == []


@pytest.mark.parametrize(
	"rate,freq,dur,phase",
	[
		(1000, 100.0, -0.1, 0.0),
		(0, 100.0, 1.0, 0.0),
		(1000, 0.0, 1.0, 0.0),
		(1000, 1000.0, 1.0, 0.0),
		(1000, 100.0, 1.0, 360.0),
		(1000, 100.0, 1.0, -1.0),
	],
)
def test_invalid_construction(rate, freq, dur, phase):
	with pytest.raises(ValueError):
		Signal(rate, freq, dur, phase)
	with pytest.raises(ValueError):
		tick_array(rate, freq, dur, phase)


def test_index_based_matches_accumulator():
	rate, freq, dur, phase = 8000, 440.0, 0.5, 45.0
	acc = np.array(list(Signal(rate, freq, dur, phase)))
	idx = tick_array(rate, freq, dur, phase)
	assert acc.shape == idx.shape
	diff = np.abs(acc - idx)
	# a value on either side of the wrap point is the same phase
	diff = np.minimum(diff, 1.0 - diff)
	assert np.max(diff) < 1e-9
	assert np.all((idx >= 0.0) & (idx < 1.0))


@pytest.mark.parametrize(
	"rate,freq,dur,phase",
	[
		(1000, 100.0, float("inf"), 0.0),
		(1000, 100.0, float("nan"), 0.0),
		(float("inf"), 100.0, 1.0, 0.0),
		(1000, float("nan"), 1.0, 0.0),
		(1000, 100.0, 1.0, float("nan")),
	],
)
def test_non_finite_construction(rate, freq, dur, phase):
	with pytest.raises(ValueError):
		Signal(rate, freq, dur, phase)


def test_uncountable_duration():
	with pytest.raises(ValueError):
		tick_count(44100, 1e307)
	assert tick_count(1000, 0.5) == 500
