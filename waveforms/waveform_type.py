"""Waveform shapes an oscillator can produce.

Each shape has a fixed integer discriminant, so a shape can be stored or sent
as a plain number and converted back:

    WaveformType.from_discriminant(2)     # WaveformType.TRIANGLE
    WaveformType.from_name("saw")         # WaveformType.SAWTOOTH

Available shapes:

    0  "sine"      Pure sinusoid.
    1  "square"    +1 for the first half cycle, -1 for the second.
    2  "triangle"  Linear rise from -1 at the cycle start to +1 at half a cycle, then back down.
    3  "sawtooth"  Linear ramp from -1 to just under +1 (alias "saw").
    4  "noise"     Uniform white noise, independent of phase.

Conversions never fall back to a default shape: unknown values raise
:class:`InvalidWaveformType`.
"""

import enum
import typing


class InvalidWaveformType (ValueError):

	"""Raised when a value cannot be converted to a :class:`WaveformType`."""

	def __init__ (self, value: typing.Any, message: str) -> None:

		super().__init__(message)
		self.value = value


class WaveformType (enum.IntEnum):

	"""The shaping function used by an oscillator."""

	SINE = 0
	SQUARE = 1
	TRIANGLE = 2
	SAWTOOTH = 3
	NOISE = 4

	@property
	def label (self) -> str:

		"""Human-readable name, e.g. ``"Sine"`` or ``"Sawtooth"``."""

		return self.name.capitalize()

	@classmethod
	def from_discriminant (cls, value: int) -> "WaveformType":

		"""Return the shape for an integer discriminant in 0..4.

		Raises :class:`InvalidWaveformType` for anything else, including
		booleans and floats.
		"""

		if isinstance(value, bool) or not isinstance(value, int):
			raise InvalidWaveformType(value, f"Waveform discriminant must be an integer, got {value!r}")

		try:
			return cls(value)
		except ValueError:
			raise InvalidWaveformType(
				value,
				f"Unknown waveform discriminant {value}. Expected 0-{len(cls) - 1}"
			) from None

	@classmethod
	def from_name (cls, name: str) -> "WaveformType":

		"""Return the shape for a case-insensitive name such as ``"triangle"``.

		Raises :class:`InvalidWaveformType` for unknown names.
		"""

		key = name.strip().lower()

		if key not in _NAMES:
			available = ", ".join(f'"{k}"' for k in sorted(_NAMES))
			raise InvalidWaveformType(
				name,
				f"Unknown waveform {name!r}. Available waveforms: {available}"
			)

		return _NAMES[key]


_NAMES: typing.Dict[str, WaveformType] = {
	"sine":     WaveformType.SINE,
	"square":   WaveformType.SQUARE,
	"triangle": WaveformType.TRIANGLE,
	"sawtooth": WaveformType.SAWTOOTH,
	"saw":      WaveformType.SAWTOOTH,
	"noise":    WaveformType.NOISE,
}
