"""
Waveforms - a single-channel periodic signal generator.

An ``Oscillator`` keeps a phase accumulator and produces one sample per call
to ``process()``. It supports five shapes (sine, square, triangle, sawtooth
and noise) with adjustable frequency, amplitude, DC offset and phase offset.

- **One sample at a time.** No buffers, no audio device, no scheduling.
  Call ``process()`` as often as you need samples and send them wherever
  you like.
- **Safe parameters.** Frequencies are clamped to [0, Nyquist], phase
  offsets are wrapped to a single cycle, and the phase never grows beyond
  2π.
- **Reproducible noise.** Each oscillator owns its own random generator.
  Pass ``seed=`` for repeatable noise, or leave it out to seed from the clock.

Minimal example:

    ```python
    import waveforms

    osc = waveforms.Oscillator(sample_rate=44100.0, frequency=440.0)
    osc.set_waveform_type(waveforms.WaveformType.SQUARE)
    osc.set_amplitude(0.5)

    samples = [osc.process() for _ in range(100)]
    ```

Run ``python -m waveforms [config.yaml]`` to print or chart samples from the
command line.

Package-level exports: ``Oscillator``, ``WaveformType``, ``InvalidWaveformType``.
"""

import waveforms.oscillator
import waveforms.waveform_type


Oscillator = waveforms.oscillator.Oscillator
WaveformType = waveforms.waveform_type.WaveformType
InvalidWaveformType = waveforms.waveform_type.InvalidWaveformType
