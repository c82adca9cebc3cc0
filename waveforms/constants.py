"""Oscillator constants.

Defaults used when an ``Oscillator`` is built without arguments, plus the
fixed seed used when the noise generator cannot be seeded from the clock.
"""

import math

# Construction defaults
DEFAULT_SAMPLE_RATE = 44100.0   # CD-quality audio rate
DEFAULT_FREQUENCY = 440.0       # A4

# One full cycle in radians
TWO_PI = 2.0 * math.pi

# Noise seed used when the clock cannot be read
FALLBACK_SEED = 0
