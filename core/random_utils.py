# core/random_utils.py
from __future__ import annotations
import secrets
from typing import Protocol


class RandomSource(Protocol):
    """Anything that returns a uniform int in [0, bound)."""

    def randbelow(self, bound: int) -> int: ...


class SystemRandomSource:
    """
    CSPRNG-backed source. secrets.randbelow rejects out-of-range samples
    internally, so indexes carry no modulo bias.
    """

    def randbelow(self, bound: int) -> int:
        if bound <= 0:
            raise ValueError("bound must be positive")
        return secrets.randbelow(bound)


_DEFAULT = SystemRandomSource()

def resolve(rng: RandomSource | None) -> RandomSource:
    return rng if rng is not None else _DEFAULT
