"""Bias-corrected sample moments and their theoretical counterparts."""
import numpy as np
from scipy import stats


class Moments:
    """Sample moments of a (usually integer) sample.

    Corrections follow the g-statistics: the unbiased variance needs at least
    2 values, the third moment and skewness 3, the excess kurtosis 4.
    """

    def __init__(self, elements):
        self.elements = np.asarray(elements, dtype=np.float64)
        self.m = len(self.elements)

    def _require(self, minimum, what):
        if self.m < minimum:
            raise ValueError(f"{what} needs at least {minimum} values, got {self.m}")

    def mean(self):
        self._require(1, "mean")
        return float(self.elements.sum() / self.m)

    def central_moment(self, order):
        self._require(1, "central moment")
        return float(np.sum((self.elements - self.mean()) ** order) / self.m)

    def central_moment_2_unbiased(self):
        self._require(2, "unbiased variance")
        m = self.m
        return self.central_moment(2) * m / (m - 1)

    def variance_unbiased(self):
        return self.central_moment_2_unbiased()

    def central_moment_3_unbiased(self):
        self._require(3, "unbiased third moment")
        m = self.m
        return self.central_moment(3) * m / (m - 1) * m / (m - 2)

    def skewness_unbiased(self):
        """Undefined (nan) for a constant sample, as in ``scipy.stats.skew``."""
        cm3u = self.central_moment_3_unbiased()
        cm2u = self.central_moment_2_unbiased()
        if cm2u == 0:
            return float('nan')
        return cm3u / cm2u ** 1.5

    def kurtosis_unbiased(self):
        """Excess kurtosis; nan for a constant sample."""
        self._require(4, "unbiased kurtosis")
        m = self.m
        cm2 = self.central_moment(2)
        if cm2 == 0:
            return float('nan')
        cm4 = self.central_moment(4)
        res = cm4 / cm2 / cm2 - 3 + 6.0 / (m + 1)
        res *= (m - 1) / (m - 2)
        res *= (m + 1) / (m - 3)
        return res

    def summary(self):
        return {
            'mean': self.mean(),
            'variance': self.variance_unbiased(),
            'skewness': self.skewness_unbiased(),
            'kurtosis': self.kurtosis_unbiased(),
        }


# ======== THEORETICAL MOMENTS ========

def frozen_distribution(name, **params):
    if name == 'bernoulli':
        return stats.bernoulli(params['p'])
    if name == 'binomial':
        return stats.binom(params['m'], params['p'])
    if name == 'geometric':
        return stats.geom(params['p'])  # support {1, 2, ...}
    if name == 'poisson':
        return stats.poisson(params['lam'])
    raise ValueError(f"unknown distribution {name!r}")


def theoretical_moments(name, **params):
    """Mean, variance, skewness and excess kurtosis of the named distribution."""
    mean, var, skew, kurt = frozen_distribution(name, **params).stats(moments='mvsk')
    return {
        'mean': float(mean),
        'variance': float(var),
        'skewness': float(skew),
        'kurtosis': float(kurt),
    }
