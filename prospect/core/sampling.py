"""
Sampling primitives.

Every generator draws from an explicit ``random.Random`` stream passed in as
``rng``. Passing a seeded stream (see ``make_rng``) makes a whole generation
run reproducible; leaving it out uses a module-level stream.
"""

import random
from typing import Optional, Sequence, TypeVar

T = TypeVar("T")

_default_rng = random.Random()


def make_rng(seed: Optional[int] = None) -> random.Random:
    """Create a random stream, seeded when ``seed`` is given."""
    return random.Random(seed)


def resolve_rng(rng: Optional[random.Random] = None) -> random.Random:
    """Return ``rng`` or the shared module stream."""
    return rng if rng is not None else _default_rng


def clamp(value: float, low: float, high: float) -> float:
    """Clamp a value into ``[low, high]``."""
    return max(low, min(high, value))


def normal(mean: float, std_dev: float, rng: Optional[random.Random] = None) -> float:
    """Draw an unbounded normal variate."""
    return resolve_rng(rng).gauss(mean, std_dev)


def bounded_normal(
    mean: float,
    std_dev: float,
    minimum: float,
    maximum: float,
    rng: Optional[random.Random] = None,
) -> float:
    """
    Draw a normal variate and clamp it into ``[minimum, maximum]``.

    Clamping piles the clipped tails onto the bounds, so values at exactly
    ``minimum``/``maximum`` are more likely than a true truncated normal.
    """
    return clamp(normal(mean, std_dev, rng), minimum, maximum)


def random_int(low: int, high: int, rng: Optional[random.Random] = None) -> int:
    """Uniform integer in ``[low, high]`` (inclusive)."""
    return resolve_rng(rng).randint(low, high)


def random_float(low: float, high: float, rng: Optional[random.Random] = None) -> float:
    """Uniform float in ``[low, high]``."""
    return resolve_rng(rng).uniform(low, high)


def chance(probability: float, rng: Optional[random.Random] = None) -> bool:
    """Return True with the given probability."""
    return resolve_rng(rng).random() < probability


def random_element(items: Sequence[T], rng: Optional[random.Random] = None) -> T:
    """Pick one element uniformly."""
    return resolve_rng(rng).choice(items)


def weighted_choice(
    options: Sequence[tuple[T, float]],
    rng: Optional[random.Random] = None,
) -> T:
    """
    Pick a value from ``(value, weight)`` pairs.

    Weights are expected to sum to 1 but only their proportions matter.
    """
    values, weights = zip(*options)
    return resolve_rng(rng).choices(values, weights=weights)[0]
