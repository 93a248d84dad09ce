"""RNG utilities for reproducible genetics.

Every stochastic decision in the genetics core is derived from a single
``random()`` call on an injected random source. This keeps the core free of
ambient randomness: tests pass ``random.Random(seed)`` and get identical
genotypes, clutches and rolls on every run.

The helpers here deliberately build on ``random()`` alone rather than
``randint``/``choices``/``shuffle`` so that any object satisfying
:class:`RandomSource` is a complete source, not just ``random.Random``.
"""

import math
from typing import List, Mapping, Optional, Protocol, Sequence, TypeVar, runtime_checkable

T = TypeVar("T")


@runtime_checkable
class RandomSource(Protocol):
    """Capability object producing uniform floats in ``[0, 1)``.

    ``random.Random`` satisfies this protocol.
    """

    def random(self) -> float:
        ...


class MissingRNGError(RuntimeError):
    """Raised when an RNG is required but not available.

    This indicates a wiring bug - generation, breeding and Dark Energy rolls
    must always receive the caller's random source explicitly.
    """

    pass


def require_rng_param(rng: Optional[RandomSource], context: str) -> RandomSource:
    """Validate that an RNG parameter was provided, failing loudly if not.

    Use this instead of silently creating an unseeded fallback.

    Args:
        rng: The RNG that should have been provided
        context: Description of where this is called from (for error messages)

    Returns:
        The validated RNG

    Raises:
        MissingRNGError: If rng is None

    Example:
        def breed(self, parent_a, parent_b, rng=None):
            rng = require_rng_param(rng, "BreedingEngine.breed")
    """
    if rng is None:
        raise MissingRNGError(f"RNG required: {context}. Pass a random source explicitly.")
    return rng


def random_int(rng: RandomSource, min_val: int, max_val: int) -> int:
    """Uniform integer in ``[min_val, max_val]`` (inclusive)."""
    return int(math.floor(rng.random() * (max_val - min_val + 1))) + min_val


def weighted_random_int(
    rng: RandomSource,
    min_val: int,
    max_val: int,
    weights: Optional[Sequence[float]] = None,
) -> int:
    """Pick an integer in ``[min_val, max_val]`` using relative weights.

    ``weights[i]`` is the relative probability of ``min_val + i``. Without
    weights the draw is uniform.
    """
    if not weights:
        return random_int(rng, min_val, max_val)
    total = sum(weights)
    r = rng.random() * total
    for i, weight in enumerate(weights):
        if r < weight:
            return min_val + i
        r -= weight
    # Float drift can leave a sliver past the last bucket
    return max_val


def pick_weighted_tier(rng: RandomSource, tier_weights: Mapping[int, float]) -> int:
    """Pick a key from a ``{tier: weight}`` map proportionally to its weight."""
    entries = sorted(tier_weights.items())
    total = sum(weight for _, weight in entries)
    r = rng.random() * total
    for tier, weight in entries:
        if r < weight:
            return tier
        r -= weight
    return entries[-1][0]


def shuffled(rng: RandomSource, items: Sequence[T]) -> List[T]:
    """Return a Fisher-Yates shuffled copy of *items*."""
    out = list(items)
    for i in range(len(out) - 1, 0, -1):
        j = int(math.floor(rng.random() * (i + 1)))
        out[i], out[j] = out[j], out[i]
    return out


def chance(rng: RandomSource, probability: float) -> bool:
    """Return True with the given probability."""
    return rng.random() < probability


def choose(rng: RandomSource, items: Sequence[T]) -> T:
    """Uniformly choose one element of a non-empty sequence."""
    return items[int(math.floor(rng.random() * len(items)))]
