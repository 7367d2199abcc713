"""Chi-square and Kolmogorov goodness-of-fit tests against U[0, 1]."""
from typing import NamedTuple

import numpy as np
from scipy import stats

from lab_config import BINS_CNT, CHI_SQUARE_THRESHOLD, KOLMOGOROV_THRESHOLD


class TestVerdict(NamedTuple):
    statistic: float
    passed: bool


# =*=*=*=*=*=*=*
# HISTOGRAM
# =*=*=*=*=*=*=*

def calc_bins(sample, bins_cnt=BINS_CNT, start=0.0, end=1.0):
    """Counts over ``bins_cnt`` equal-width intervals of [start, end].

    Intervals are half-open ``(lo, hi]`` through cumulative upper-bound
    search, so the last one is closed at ``end``.
    """
    if bins_cnt < 1:
        raise ValueError(f"bins_cnt must be at least 1, got {bins_cnt}")
    ordered = np.sort(np.asarray(sample, dtype=np.float64))
    edges = np.linspace(start, end, bins_cnt + 1)[1:]
    cumulative = np.searchsorted(ordered, edges, side='right')
    return np.diff(cumulative, prepend=0)


# =*=*=*=*=*=*=*
# STATISTICS
# =*=*=*=*=*=*=*

def chi_square(sample, bins_cnt=BINS_CNT):
    n = len(sample)
    if n == 0:
        raise ValueError("chi-square statistic needs a non-empty sample")
    bins = calc_bins(sample, bins_cnt)
    expected = n / bins_cnt  # P(a < x <= a + 1/bins_cnt) * n
    return float(np.sum((bins - expected) ** 2 / expected))


def kolmogorov(sample):
    """D = max |(i + 1) / n - F(x_(i))| with F the U[0, 1] CDF."""
    n = len(sample)
    if n == 0:
        raise ValueError("Kolmogorov statistic needs a non-empty sample")
    ordered = np.sort(np.asarray(sample, dtype=np.float64))
    f = np.clip(ordered, 0.0, 1.0)
    f_hat = np.arange(1, n + 1) / n
    return float(np.max(np.abs(f_hat - f)))


def chi_square_test(sample, threshold=CHI_SQUARE_THRESHOLD, bins_cnt=BINS_CNT):
    value = chi_square(sample, bins_cnt)
    return TestVerdict(value, value < threshold)


def kolmogorov_test(sample, threshold=KOLMOGOROV_THRESHOLD):
    value = kolmogorov(sample)
    return TestVerdict(value, bool(np.sqrt(len(sample)) * value < threshold))


def critical_values(alpha=0.05, bins_cnt=BINS_CNT):
    """Thresholds for both tests at significance ``alpha``.

    At alpha = 0.05 and 10 bins these round to 16.92 and 1.36.
    """
    if not 0 < alpha < 1:
        raise ValueError(f"alpha must lie in (0, 1), got {alpha}")
    chi2_crit = float(stats.chi2.ppf(1 - alpha, bins_cnt - 1))
    ks_crit = float(stats.kstwobign.ppf(1 - alpha))
    return chi2_crit, ks_crit


def reference_ks_pvalue(sample):
    """Two-sided KS p-value from scipy, used as a cross-check in reports."""
    return float(stats.kstest(np.asarray(sample), 'uniform').pvalue)


def run_battery(sample, chi_square_threshold=CHI_SQUARE_THRESHOLD,
                kolmogorov_threshold=KOLMOGOROV_THRESHOLD):
    return {
        'chi-square': chi_square_test(sample, chi_square_threshold),
        'kolmogorov': kolmogorov_test(sample, kolmogorov_threshold),
    }
