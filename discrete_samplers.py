"""Bernoulli, binomial, geometric and Poisson samplers built on a U[0, 1) stream.

Every sampler takes an optional ``source``: any object with
``draw(size=None)`` returning U[0, 1) values (see ``uniform_streams``).
Without one a fresh ``PlatformUniform`` is created per call.
"""
import logging
import math

import numpy as np

from uniform_streams import PlatformUniform, freeze

logger = logging.getLogger(__name__)


def _source_or_default(source):
    return PlatformUniform() if source is None else source


def _check_size(size):
    if size < 0:
        raise ValueError(f"size must be non-negative, got {size}")


def _check_probability(p, closed=True):
    ok = 0 <= p <= 1 if closed else 0 < p < 1
    if not ok:
        bounds = "[0, 1]" if closed else "(0, 1)"
        raise ValueError(f"p must lie in {bounds}, got {p}")


# ======== BERNOULLI / BINOMIAL ========

def sample_bernoulli(p, size, source=None):
    _check_probability(p)
    _check_size(size)
    u = _source_or_default(source).draw(size)
    return freeze((u <= p).astype(np.int64))


def sample_binomial(m, p, size, source=None):
    """Each value is the number of successes in ``m`` Bernoulli(p) trials."""
    if m < 1 or int(m) != m:
        raise ValueError(f"m must be a positive integer, got {m}")
    _check_probability(p)
    _check_size(size)
    u = _source_or_default(source).draw(size * int(m)).reshape(size, int(m))
    return freeze((u <= p).sum(axis=1).astype(np.int64))


# ======== GEOMETRIC (INVERSE TRANSFORM) ========

def _positive_draw(source):
    u = source.draw()
    while u == 0.0:
        # ln(0) is undefined
        logger.debug("geometric: resampling an exact zero draw")
        u = source.draw()
    return u


def sample_geometric(p, size, source=None):
    """Trials until the first success: ceil(ln(u) / ln(1 - p))."""
    _check_probability(p, closed=False)
    _check_size(size)
    source = _source_or_default(source)
    u = np.asarray(source.draw(size), dtype=np.float64).copy()
    for i in np.flatnonzero(u == 0.0):
        u[i] = _positive_draw(source)
    ks = np.ceil(np.log(u) / math.log1p(-p)).astype(np.int64)
    # support starts at 1; only reachable for u == 1
    ks[ks == 0] = 1
    return freeze(ks)


# ======== POISSON (KNUTH) ========

def _neg_log(u):
    return -math.log(u) if u > 0.0 else math.inf


def sample_poisson(lam, size, source=None):
    """Knuth's product method in log space.

    ``prod(u) < exp(-lam)`` is tested as ``sum(-ln u) > lam`` so that large
    ``lam`` cannot underflow the threshold.
    """
    if lam <= 0:
        raise ValueError(f"lam must be positive, got {lam}")
    _check_size(size)
    source = _source_or_default(source)
    res = np.zeros(size, dtype=np.int64)
    for i in range(size):
        k = 1
        total = _neg_log(source.draw())
        while total <= lam:
            total += _neg_log(source.draw())
            k += 1
        res[i] = k - 1
    return freeze(res)


SAMPLERS = {
    'bernoulli': sample_bernoulli,
    'binomial': sample_binomial,
    'geometric': sample_geometric,
    'poisson': sample_poisson,
}


def sample(name, size, source=None, **params):
    """Dispatch to a sampler by distribution name."""
    try:
        sampler = SAMPLERS[name]
    except KeyError:
        raise ValueError(f"unknown distribution {name!r}; expected one of {sorted(SAMPLERS)}") from None
    return sampler(size=size, source=source, **params)
