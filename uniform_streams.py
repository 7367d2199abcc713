"""Uniform pseudo-random streams on [0, 1).

Two sources are provided:

* ``MultiplicativeCongruential``: x[i] = (multiplier * x[i-1]) mod modulus,
  with x[0] = seed and output x[i] / modulus.
* ``PlatformUniform``: numpy's default bit generator (PCG64).

Both expose ``generate(n)`` for a whole sample and ``draw(size=None)`` for
stream consumption by the discrete samplers.
"""

import numpy as np

from lab_config import CONGRUENTIAL_PARAMS


def freeze(sample):
    """Mark a freshly produced sample as read-only and return it."""
    sample.setflags(write=False)
    return sample


def _check_size(n):
    if n < 0:
        raise ValueError(f"sample size must be non-negative, got {n}")


# ======== CONGRUENTIAL GENERATOR ========

class MultiplicativeCongruential:
    def __init__(self, seed=CONGRUENTIAL_PARAMS['seed'],
                 multiplier=CONGRUENTIAL_PARAMS['multiplier'],
                 modulus=CONGRUENTIAL_PARAMS['modulus']):
        if modulus < 2:
            raise ValueError(f"modulus must be at least 2, got {modulus}")
        if not 0 < multiplier < modulus:
            raise ValueError("multiplier must lie in (0, modulus)")
        if not 0 < seed < modulus:
            raise ValueError("seed must lie in (0, modulus)")
        # python ints: multiplier * x never overflows
        self.seed = int(seed)
        self.multiplier = int(multiplier)
        self.modulus = int(modulus)
        self.current = self.seed

    def next_int(self):
        """Return the current state and advance the recurrence."""
        value = self.current
        self.current = (self.multiplier * self.current) % self.modulus
        return value

    def draw(self, size=None):
        if size is None:
            return self.next_int() / self.modulus
        _check_size(size)
        states = [self.next_int() for _ in range(size)]
        return np.array(states, dtype=np.float64) / self.modulus

    def generate(self, n=1000):
        """Sample of ``n`` values starting from the seed; does not touch the stream state."""
        _check_size(n)
        states = np.zeros(n, dtype=np.int64)
        x = self.seed
        for i in range(n):
            states[i] = x
            x = (self.multiplier * x) % self.modulus
        return freeze(states / self.modulus)

    def reset(self):
        self.current = self.seed

    def __repr__(self):
        return (f"MultiplicativeCongruential(seed={self.seed}, "
                f"multiplier={self.multiplier}, modulus={self.modulus})")


# ======== PLATFORM GENERATOR ========

class PlatformUniform:
    """U[0, 1) draws from ``numpy.random.default_rng``."""

    def __init__(self, seed=None):
        self.seed = seed
        self.rng = np.random.default_rng(seed)

    def draw(self, size=None):
        if size is None:
            return float(self.rng.random())
        _check_size(size)
        return self.rng.random(size)

    def generate(self, n=1000):
        _check_size(n)
        return freeze(self.rng.random(n))

    def __repr__(self):
        return f"PlatformUniform(seed={self.seed})"
