import pytest

import waveforms.oscillator


@pytest.fixture
def quarter_osc () -> waveforms.oscillator.Oscillator:

	"""A 1 Hz oscillator at 4 Hz sample rate, so each step advances a quarter cycle."""

	return waveforms.oscillator.Oscillator(sample_rate=4.0, frequency=1.0, seed=0)
