"""ASCII charts of oscillator output.

Draws a run of samples as a block of text, one column per sample, with the
sample range labelled on the left:

	   1.000 |    ***         ***
	         |  **   **     **   **
	         | *       *   *       *
	  -1.000 |*         ***         *

Useful for checking a waveform shape in a terminal without a plotting
library:

```python
osc = waveforms.Oscillator(1000.0, 20.0)
print(waveforms.plot.plot(osc, 100))
```
"""

import typing

import waveforms.oscillator


_LABEL_WIDTH = 8
_POINT = "*"
_DEFAULT_WIDTH = 80
_DEFAULT_HEIGHT = 20


def _resample (samples: typing.Sequence[float], width: int) -> typing.List[float]:

	"""Pick at most *width* evenly spaced samples."""

	if len(samples) <= width:
		return list(samples)

	step = len(samples) / width
	return [samples[int(i * step)] for i in range(width)]


def render (samples: typing.Sequence[float], width: int = _DEFAULT_WIDTH, height: int = _DEFAULT_HEIGHT) -> str:

	"""Render *samples* as a multi-line ASCII chart.

	Parameters:
		samples: The values to draw, oldest first.
		width: Maximum number of sample columns. Longer inputs are
			resampled to fit.
		height: Number of rows.

	Returns:
		The chart as a string of *height* lines, or an empty string when
		there are no samples.
	"""

	if width < 1 or height < 1:
		raise ValueError(f"Chart width and height must be at least 1, got {width}x{height}")

	if not samples:
		return ""

	columns = _resample(samples, width)

	low = min(columns)
	high = max(columns)
	span = high - low

	rows = [[" "] * len(columns) for _ in range(height)]

	for x, value in enumerate(columns):

		if span == 0 or height == 1:
			y = (height - 1) // 2
		else:
			y = round((high - value) / span * (height - 1))

		rows[y][x] = _POINT

	lines = []

	for y, row in enumerate(rows):

		if y == 0:
			label = f"{high:.3f}"
		elif y == height - 1:
			label = f"{low:.3f}"
		else:
			label = ""

		lines.append(f"{label:>{_LABEL_WIDTH}} |{''.join(row).rstrip()}")

	return "\n".join(lines)


def plot (oscillator: waveforms.oscillator.Oscillator, count: int, width: int = _DEFAULT_WIDTH, height: int = _DEFAULT_HEIGHT) -> str:

	"""Draw *count* samples from *oscillator* and render them with :func:`render`."""

	samples = [oscillator.process() for _ in range(count)]

	return render(samples, width=width, height=height)
