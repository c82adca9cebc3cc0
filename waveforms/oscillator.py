import logging
import math
import random
import time
import typing

import waveforms.constants
import waveforms.waveform_type


logger = logging.getLogger(__name__)

TWO_PI = waveforms.constants.TWO_PI

WaveformType = waveforms.waveform_type.WaveformType


def _validate_sample_rate (sample_rate: float) -> float:

	"""Return *sample_rate* as a float, or raise ``ValueError`` if it is not a positive finite number."""

	sample_rate = float(sample_rate)

	if not math.isfinite(sample_rate) or sample_rate <= 0:
		raise ValueError(f"Sample rate must be a positive finite number, got {sample_rate!r}")

	return sample_rate


def _require_finite (name: str, value: float) -> None:

	"""Raise ``ValueError`` if *value* is NaN or infinite."""

	if not math.isfinite(value):
		raise ValueError(f"{name} must be a finite number, got {value!r}")


def _clock_seed () -> int:

	"""Derive a noise seed from the system clock, or use the fixed fallback if the clock cannot be read."""

	try:
		return time.time_ns()
	except OSError as e:
		logger.warning(f"Could not read clock for noise seed ({e}), using fallback seed {waveforms.constants.FALLBACK_SEED}")
		return waveforms.constants.FALLBACK_SEED


class Oscillator:

	"""
	A single-channel phase-accumulator oscillator.

	Each call to ``process()`` returns one sample and advances the phase by
	``frequency * 2π / sample_rate`` radians, wrapping within [0, 2π).

	Example:
		```python
		osc = Oscillator(sample_rate=48000.0, frequency=220.0, waveform_type=WaveformType.TRIANGLE)
		osc.set_amplitude(0.5)
		samples = [osc.process() for _ in range(480)]
		```

	Instances are not thread-safe; every method mutates shared state.
	"""

	def __init__ (
		self,
		sample_rate: float = waveforms.constants.DEFAULT_SAMPLE_RATE,
		frequency: float = waveforms.constants.DEFAULT_FREQUENCY,
		waveform_type: typing.Union[WaveformType, int] = WaveformType.SINE,
		seed: typing.Optional[int] = None
	) -> None:

		"""
		Initialize an oscillator.

		Parameters:
			sample_rate: Samples per second. Must be positive.
			frequency: Oscillation frequency in Hz, clamped to [0, sample_rate / 2].
			waveform_type: Initial shape, as a ``WaveformType`` or its discriminant.
			seed: Seed for the noise generator. Taken from the clock when omitted.
		"""

		self._sample_rate = _validate_sample_rate(sample_rate)
		self._frequency = 0.0
		self._amplitude = 1.0
		self._phase = 0.0
		self._phase_increment = 0.0
		self._phase_offset = 0.0
		self._dc_offset = 0.0
		self._waveform_type = WaveformType.SINE

		if seed is None:
			seed = _clock_seed()

		self._rng = random.Random(seed)
		logger.debug(f"Noise generator seeded with {seed}")

		self.set_frequency(frequency)
		self.set_waveform_type(waveform_type)

	@classmethod
	def default (cls) -> "Oscillator":

		"""Return a 440 Hz sine oscillator at 44100 Hz."""

		return cls(waveforms.constants.DEFAULT_SAMPLE_RATE, waveforms.constants.DEFAULT_FREQUENCY)

	def __repr__ (self) -> str:

		return (
			f"Oscillator(sample_rate={self._sample_rate!r}, frequency={self._frequency!r}, "
			f"waveform_type={self._waveform_type.label})"
		)

	# ------------------------------------------------------------------
	# Configuration
	# ------------------------------------------------------------------

	@property
	def sample_rate (self) -> float:
		return self._sample_rate

	def set_sample_rate (self, sample_rate: float) -> None:

		"""
		Change the sample rate.

		The current frequency is re-applied, so it is clamped to the new
		Nyquist limit and the phase increment follows the new rate.
		"""

		self._sample_rate = _validate_sample_rate(sample_rate)
		self.set_frequency(self._frequency)

	@property
	def frequency (self) -> float:

		"""The frequency in Hz after clamping."""

		return self._frequency

	def set_frequency (self, frequency: float) -> None:

		"""
		Set the frequency, clamped to [0, sample_rate / 2].

		NaN and infinite values raise ``ValueError``.
		"""

		_require_finite("Frequency", frequency)

		nyquist = self._sample_rate / 2.0

		if frequency < 0.0:
			self._frequency = 0.0
		elif frequency > nyquist:
			self._frequency = nyquist
		else:
			self._frequency = float(frequency)

		self._phase_increment = (self._frequency * TWO_PI) / self._sample_rate

		logger.debug(f"Frequency set to {self._frequency} Hz (requested {frequency})")

	@property
	def amplitude (self) -> float:
		return self._amplitude

	def set_amplitude (self, amplitude: float) -> None:

		"""Set the peak multiplier. Zero and negative values are allowed."""

		self._amplitude = amplitude

	@property
	def dc_offset (self) -> float:
		return self._dc_offset

	def set_dc_offset (self, dc_offset: float) -> None:

		"""Set the constant added to every sample."""

		self._dc_offset = dc_offset

	@property
	def phase_offset (self) -> float:

		"""The phase offset in radians, within (-2π, 2π]."""

		return self._phase_offset

	def set_phase_offset (self, phase_offset: float) -> None:

		"""
		Set the phase offset in radians.

		Values beyond a full cycle in either direction are wrapped, keeping
		their sign: 7.0 becomes 7.0 - 2π and -7.0 becomes -(7.0 - 2π).
		NaN and infinite values raise ``ValueError``.
		"""

		_require_finite("Phase offset", phase_offset)

		if phase_offset > TWO_PI:
			self._phase_offset = phase_offset % TWO_PI
		elif phase_offset < -TWO_PI:
			self._phase_offset = -(-phase_offset % TWO_PI)
		else:
			self._phase_offset = phase_offset

	@property
	def waveform_type (self) -> WaveformType:
		return self._waveform_type

	def set_waveform_type (self, waveform_type: typing.Union[WaveformType, int]) -> None:

		"""
		Select the shape used by the next ``process()`` call.

		Accepts a ``WaveformType`` or an integer discriminant (0-4). Invalid
		discriminants raise ``InvalidWaveformType``.
		"""

		if not isinstance(waveform_type, WaveformType):
			waveform_type = WaveformType.from_discriminant(waveform_type)

		self._waveform_type = waveform_type

	def waveform_name (self) -> str:

		"""Return the current shape's name, e.g. ``"Triangle"``."""

		return self._waveform_type.label

	@property
	def phase (self) -> float:

		"""Current accumulator position in radians, within [0, 2π)."""

		return self._phase

	def reset (self) -> None:

		"""Move the phase back to the start of the cycle. Other settings are kept."""

		self._phase = 0.0

	# ------------------------------------------------------------------
	# Sample generation
	# ------------------------------------------------------------------

	def _shape (self, phase: float) -> float:

		"""Map a phase in [0, 2π) to a raw value in [-1, 1] for the current shape."""

		waveform_type = self._waveform_type

		if waveform_type == WaveformType.SINE:
			return math.sin(phase)

		elif waveform_type == WaveformType.SQUARE:
			return 1.0 if phase < math.pi else -1.0

		elif waveform_type == WaveformType.TRIANGLE:
			# -1 at 0, +1 at π, back to -1 at 2π
			if phase < math.pi:
				return -1.0 + (2.0 * phase / math.pi)
			return 3.0 - (2.0 * phase / math.pi)

		elif waveform_type == WaveformType.SAWTOOTH:
			return -1.0 + (2.0 * phase / TWO_PI)

		elif waveform_type == WaveformType.NOISE:
			return self._rng.random() * 2.0 - 1.0

		raise AssertionError(f"Unhandled waveform type {waveform_type!r}")

	def process (self) -> float:

		"""
		Return the next sample and advance the phase.

		The sample is computed from the phase at the start of the call
		(shifted by the phase offset), scaled by the amplitude and biased by
		the DC offset.
		"""

		phase = (self._phase + self._phase_offset) % TWO_PI

		# Rounding can land a tiny negative sum exactly on 2π.
		if phase >= TWO_PI:
			phase = 0.0

		sample = self._dc_offset + self._shape(phase) * self._amplitude

		self._phase = (self._phase + self._phase_increment) % TWO_PI

		return sample
