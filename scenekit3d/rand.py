"""Uniform random numbers over a closed or half-open range."""

from __future__ import annotations

import math
import random
import threading
from numbers import Integral, Real
from typing import TypeVar

T = TypeVar("T", int, float)

_local = threading.local()


def _engine() -> random.Random:
    engine = getattr(_local, "engine", None)
    if engine is None:
        engine = random.Random(random.SystemRandom().getrandbits(64))
        _local.engine = engine
    return engine


def generate(minimum: T, maximum: T) -> T:
    """Random number between minimum and maximum.

    Integers are drawn from [minimum, maximum]; floats from [minimum, maximum).
    Raises TypeError for non-numeric bounds and ValueError if minimum > maximum.
    """
    for bound in (minimum, maximum):
        if isinstance(bound, bool) or not isinstance(bound, Real):
            raise TypeError("bounds must be integers or floating-point numbers")
    if minimum > maximum:
        raise ValueError("minimum must not exceed maximum")

    engine = _engine()
    if isinstance(minimum, Integral) and isinstance(maximum, Integral):
        return engine.randint(int(minimum), int(maximum))

    low, high = float(minimum), float(maximum)
    value = low + (high - low) * engine.random()
    if value >= high and high > low:
        value = math.nextafter(high, low)
    return value