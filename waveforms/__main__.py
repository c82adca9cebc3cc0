import logging
import os
import sys
import typing

import yaml

import waveforms.constants
import waveforms.oscillator
import waveforms.plot
import waveforms.waveform_type


logger = logging.getLogger(__name__)

DEFAULT_SAMPLE_COUNT = 100


def load_config (config_path: str = 'config.yaml') -> dict:

	"""
	Load configuration from a YAML file.
	"""

	if not os.path.exists(config_path):
		logger.warning(f"Config file {config_path} not found. Using defaults.")
		return {}

	with open(config_path, 'r') as f:
		return yaml.safe_load(f) or {}


def parse_waveform (value: typing.Union[str, int]) -> waveforms.waveform_type.WaveformType:

	"""
	Convert a config value (a name like ``"square"`` or a discriminant like ``1``) to a waveform type.
	"""

	if isinstance(value, str):
		return waveforms.waveform_type.WaveformType.from_name(value)

	return waveforms.waveform_type.WaveformType.from_discriminant(value)


def build_oscillator (config: dict) -> waveforms.oscillator.Oscillator:

	"""
	Create an oscillator from the ``oscillator`` section of a config dict.
	"""

	settings = config.get('oscillator') or {}

	osc = waveforms.oscillator.Oscillator(
		sample_rate=settings.get('sample_rate', waveforms.constants.DEFAULT_SAMPLE_RATE),
		frequency=settings.get('frequency', waveforms.constants.DEFAULT_FREQUENCY),
		waveform_type=parse_waveform(settings.get('waveform', 'sine')),
		seed=settings.get('seed')
	)

	osc.set_amplitude(settings.get('amplitude', 1.0))
	osc.set_dc_offset(settings.get('dc_offset', 0.0))
	osc.set_phase_offset(settings.get('phase_offset', 0.0))

	return osc


def main (argv: typing.Optional[typing.List[str]] = None) -> None:

	"""
	Main entry point: print or chart samples from a configured oscillator.
	"""

	logging.basicConfig(level=logging.INFO)

	if argv is None:
		argv = sys.argv[1:]

	config = load_config(argv[0]) if argv else load_config()

	osc = build_oscillator(config)

	output = config.get('output') or {}
	count = output.get('samples', DEFAULT_SAMPLE_COUNT)
	mode = output.get('mode', 'print')

	logger.info(f"Generating {count} samples from {osc!r}")

	if mode == 'plot':
		print(f"{osc.waveform_name()}()")
		print(waveforms.plot.plot(osc, count))
	elif mode == 'print':
		samples = [osc.process() for _ in range(count)]
		print(f"Generated samples: {samples}")
	else:
		raise ValueError(f"Unknown output mode {mode!r}. Expected 'print' or 'plot'")


if __name__ == "__main__":
	main()
