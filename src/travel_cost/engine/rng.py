# engine/rng.py
from __future__ import annotations

from dataclasses import dataclass
from functools import cache
from zlib import crc32

import numpy as np


def _u32(x: int) -> int:
    return int(x & 0xFFFFFFFF)


def _crc32_u32(s: str) -> int:
    return _u32(crc32(s.encode("utf-8")))


@dataclass(frozen=True)
class RNGKey:
    """Hierarchical key: stream name + optional ints/strings for substreams."""

    stream: str
    parts: tuple[int, ...]  # already normalized to u32

    @classmethod
    def from_parts(cls, stream: str, *parts: object) -> RNGKey:
        norm: list[int] = [_crc32_u32(stream)]
        for p in parts:
            if isinstance(p, (int, np.integer)):
                norm.append(_u32(int(p)))
            elif isinstance(p, str):
                norm.append(_crc32_u32(p))
            else:
                norm.append(_crc32_u32(repr(p)))
        return cls(stream=stream, parts=tuple(norm))


class RNGRegistry:
    """
    Registry of numpy.random.Generator streams.
    Derivation path: [master_seed, scenario, worker, *key.parts]

    With master_seed=None the root entropy comes from the OS, so every run sees
    different congestion; a fixed seed makes the whole run reproducible.
    """

    def __init__(self, master_seed: int | None = None, *, scenario: str | int = 0, worker: int = 0):
        if master_seed is None:
            master_seed = np.random.SeedSequence().entropy
        self.master_seed = _u32(master_seed)
        self.scenario_tag = _crc32_u32(str(scenario))
        self.worker = _u32(worker)

    def _make(self, key: RNGKey) -> np.random.Generator:
        ss = np.random.SeedSequence(
            entropy=[self.master_seed, self.scenario_tag, self.worker, *key.parts]
        )
        return np.random.Generator(np.random.PCG64(ss))

    @cache
    def generator(self, key: RNGKey) -> np.random.Generator:
        """Get (and cache) a long-lived named generator."""
        return self._make(key)

    def fresh(self, name: str, *parts: object) -> np.random.Generator:
        """
        Uncached generator for one-shot use, e.g. one congestion snapshot per query.
        Same key => same draws; the caller owns the returned generator exclusively.
        """
        return self._make(RNGKey.from_parts(name, *parts))

    # Convenience shorthands
    def stream(self, name: str) -> np.random.Generator:
        return self.generator(RNGKey.from_parts(name))

    def substream(self, name: str, *parts: object) -> np.random.Generator:
        return self.generator(RNGKey.from_parts(name, *parts))
