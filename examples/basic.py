"""Basic demo: a default sine oscillator.

Builds a 440 Hz sine at 44.1 kHz and prints the first few samples.  The
first sample is always 0.0 because the phase starts at zero.
"""

import logging

import waveforms

logging.basicConfig(level=logging.INFO)

wave = waveforms.Oscillator.default()

samples = [wave.process() for _ in range(4)]

print(f"Generated samples: {samples}")
