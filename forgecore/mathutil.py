"""Scalar math helpers, constants and pseudo-random numbers."""

from __future__ import annotations

import math
import random

from forgecore import platform

PI = math.pi
PI_2 = 2.0 * PI
HALF_PI = 0.5 * PI
QUARTER_PI = 0.25 * PI
ONE_OVER_PI = 1.0 / PI
ONE_OVER_TWO_PI = 1.0 / PI_2
SQRT_TWO = math.sqrt(2.0)
SQRT_THREE = math.sqrt(3.0)
SQRT_ONE_OVER_TWO = math.sqrt(0.5)
SQRT_ONE_OVER_THREE = math.sqrt(1.0 / 3.0)
DEG2RAD_MULTIPLIER = PI / 180.0
RAD2DEG_MULTIPLIER = 180.0 / PI

# Multiplier to convert seconds to milliseconds.
SEC_TO_MS_MULTIPLIER = 1000.0
# Multiplier to convert milliseconds to seconds.
MS_TO_SEC_MULTIPLIER = 0.001

# A huge number that should be larger than any valid number used.
INFINITY = 1e30
# Smallest positive number where 1.0 + FLOAT_EPSILON != 1.0 in single precision.
FLOAT_EPSILON = 1.192092896e-07

# Largest value returned by random_int.
RAND_MAX = 2147483647

_generator: random.Random | None = None


def _rng() -> random.Random:
    global _generator
    if _generator is None:
        _generator = random.Random(int(platform.get_absolute_time()))
    return _generator


def is_power_of_2(value: int) -> bool:
    """True if ``value`` is a power of two; 0 is not."""
    return value != 0 and (value & (value - 1)) == 0


def random_int() -> int:
    """A pseudo-random integer in [0, RAND_MAX]."""
    return _rng().randint(0, RAND_MAX)


def random_int_in_range(minimum: int, maximum: int) -> int:
    """A pseudo-random integer in [minimum, maximum]."""
    if maximum < minimum:
        raise ValueError(f"maximum {maximum} is below minimum {minimum}")
    return _rng().randint(minimum, maximum)


def random_float() -> float:
    """A pseudo-random float in [0.0, 1.0]."""
    return random_int() / RAND_MAX


def random_float_in_range(minimum: float, maximum: float) -> float:
    """A pseudo-random float between ``minimum`` and ``maximum`` inclusive."""
    return minimum + random_float() * (maximum - minimum)


def deg_to_rad(degrees: float) -> float:
    """Convert degrees to radians."""
    return degrees * DEG2RAD_MULTIPLIER


def rad_to_deg(radians: float) -> float:
    """Convert radians to degrees."""
    return radians * RAD2DEG_MULTIPLIER