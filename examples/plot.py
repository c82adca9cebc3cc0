"""Plot demo: every waveform shape as an ASCII chart.

A 20 Hz oscillator at 1 kHz completes two full cycles in 100 samples, which
fits neatly across a terminal.  Noise is seeded so the chart is the same on
every run.
"""

import logging

import waveforms
import waveforms.plot

logging.basicConfig(level=logging.INFO)

SAMPLE_RATE = 1000.0
FREQUENCY = 20.0
SAMPLE_COUNT = 100

for waveform_type in waveforms.WaveformType:

	wave = waveforms.Oscillator(SAMPLE_RATE, FREQUENCY, waveform_type, seed=42)

	print(f"{wave.waveform_name()}()")
	print(waveforms.plot.plot(wave, SAMPLE_COUNT, width=SAMPLE_COUNT, height=16))
	print()
