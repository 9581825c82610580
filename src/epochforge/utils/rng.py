"""Deterministic random number generation for Epoch Forge.

Every random decision the engine makes is drawn from a :class:`SeededRandom`
built from an explicit string seed.  This guarantees that:
- Reproducibility: the same seed always produces the same stream
- Share links: a match seed is enough to rebuild every loadout
- Reroll isolation: each player draws from an independent stream

Seeds are reduced to a 64-bit integer with SHA-256 so the stream does not
depend on Python's per-process string hashing.

Examples:
    >>> rng = SeededRandom(derive_seed("EF-1234", "resolve"))
    >>> 0.0 <= rng.next_float() < 1.0
    True
    >>> rng.choice(["Tiny", "Small", "Medium"]) in ["Tiny", "Small", "Medium"]
    True
"""

from __future__ import annotations

import hashlib
import random
from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")


def derive_seed(*parts: object) -> str:
    """Build a sub-seed by joining its components with ``:``.

    Args:
        *parts: Seed components (match seed, context labels, indices)

    Returns:
        Seed string such as ``"EF-1234:resolve"``

    Examples:
        >>> derive_seed("EF-1234", "Taco", 0)
        'EF-1234:Taco:0'

    Raises:
        ValueError: If no components are given
    """
    if not parts:
        raise ValueError("derive_seed requires at least one component")
    return ":".join(str(part) for part in parts)


def resolution_seed(match_seed: str) -> str:
    """Seed for the configuration resolver."""

    return derive_seed(match_seed, "resolve")


def player_seed(match_seed: str, player_name: str, index: int) -> str:
    """Seed for a player's first generation."""

    return derive_seed(match_seed, player_name, index)


def reroll_seed(match_seed: str, player_name: str, index: int) -> str:
    """Seed for a player's single reroll."""

    return f"{match_seed}-{player_name}-{index}-REROLL"


def _seed_to_int(seed: str) -> int:
    """Convert seed string to a stable 64-bit integer for random.Random().

    Args:
        seed: Seed string

    Returns:
        64-bit integer derived from SHA-256(seed)
    """
    digest = hashlib.sha256(seed.encode("utf-8")).digest()
    # Use first 8 bytes for a 64-bit integer
    return int.from_bytes(digest[:8], "big", signed=False)


class SeededRandom:
    """Reproducible random stream keyed by a string seed."""

    def __init__(self, seed: str) -> None:
        self.seed = seed
        self._rng = random.Random(_seed_to_int(seed))

    def next_float(self) -> float:
        """Return the next float in ``[0, 1)``."""

        return self._rng.random()

    def next_int(self, max_exclusive: int) -> int:
        """Return an integer in ``[0, max_exclusive)``.

        Raises:
            ValueError: If ``max_exclusive`` is not positive
        """
        if max_exclusive <= 0:
            raise ValueError(f"max_exclusive must be positive, got {max_exclusive}")
        return self._rng.randrange(max_exclusive)

    def randint(self, low: int, high: int) -> int:
        """Return an integer in ``[low, high]`` (inclusive).

        Raises:
            ValueError: If ``low > high``
        """
        if low > high:
            raise ValueError(f"low ({low}) cannot be greater than high ({high})")
        return low + self.next_int(high - low + 1)

    def uniform(self, low: float, high: float) -> float:
        """Return a float in ``[low, high)``."""

        return low + (high - low) * self.next_float()

    def choice(self, options: Sequence[T]) -> T:
        """Choose one element uniformly.

        Raises:
            ValueError: If ``options`` is empty
        """
        if not options:
            raise ValueError("options cannot be empty")
        return options[self.next_int(len(options))]

    def weighted_choice(self, options: Sequence[T], weights: Sequence[float]) -> T:
        """Choose one element with probability proportional to its weight.

        Raises:
            ValueError: If the sequences differ in length, are empty, or no
                weight is positive
        """
        if len(options) != len(weights):
            raise ValueError("options and weights must have the same length")
        if not options:
            raise ValueError("options cannot be empty")
        clamped = [max(0.0, w) for w in weights]
        if sum(clamped) <= 0.0:
            raise ValueError("at least one weight must be positive")
        return self._rng.choices(options, weights=clamped, k=1)[0]

    def weighted_order(self, options: Sequence[T], weights: Sequence[float]) -> list[T]:
        """Return ``options`` in a random order biased toward heavier weights.

        Uses the Efraimidis-Spirakis key ``u ** (1 / w)``; zero-weight options
        sort last in their original order.
        """
        if len(options) != len(weights):
            raise ValueError("options and weights must have the same length")
        keyed: list[tuple[float, int, T]] = []
        for index, (option, weight) in enumerate(zip(options, weights, strict=True)):
            draw = self.next_float()
            key = draw ** (1.0 / weight) if weight > 0 else -1.0
            keyed.append((key, -index, option))
        keyed.sort(key=lambda entry: (entry[0], entry[1]), reverse=True)
        return [option for _, _, option in keyed]
