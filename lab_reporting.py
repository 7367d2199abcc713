"""Console reports and flat-text persistence of samples."""
import os

import numpy as np
import pandas as pd
from tabulate import tabulate

from goodness_of_fit import reference_ks_pvalue, run_battery
from lab_config import CHI_SQUARE_THRESHOLD, KOLMOGOROV_THRESHOLD
from sample_moments import Moments, theoretical_moments


# =*=*=*=*=*=*=*
# CONSOLE
# =*=*=*=*=*=*=*

def describe_sample(sample, label):
    sample = np.asarray(sample)
    print(f"{label}:")
    print(f"size: {len(sample)}")
    print("some elements:")
    print(" ".join(f"{x:.6f}" for x in sample[:50:10]))
    if len(sample) == 0:
        return
    print(f"mean: {np.mean(sample):.6f}")
    if len(sample) > 1:
        print(f"std: {np.std(sample, ddof=1):.6f}")


def report_verdicts(sample, label, chi_square_threshold=CHI_SQUARE_THRESHOLD,
                    kolmogorov_threshold=KOLMOGOROV_THRESHOLD):
    verdicts = run_battery(sample, chi_square_threshold, kolmogorov_threshold)
    chi, ks = verdicts['chi-square'], verdicts['kolmogorov']
    df = pd.DataFrame([
        {"Test": "chi-square", "Value": chi.statistic,
         "Compared": chi.statistic, "Threshold": chi_square_threshold,
         "Status": "PASS" if chi.passed else "FAIL"},
        {"Test": "kolmogorov", "Value": ks.statistic,
         "Compared": np.sqrt(len(sample)) * ks.statistic, "Threshold": kolmogorov_threshold,
         "Status": "PASS" if ks.passed else "FAIL"},
    ])
    print(f"\ngoodness of fit for {label}:")
    print(tabulate(df, headers="keys", tablefmt="github", showindex=False, floatfmt=".4f"))
    print(f"scipy kstest p-value: {reference_ks_pvalue(sample):.4f}")
    return df


def report_moments(sample, name, **params):
    observed = Moments(sample).summary()
    expected = theoretical_moments(name, **params)
    df = pd.DataFrame({"sample": observed, "theoretical": expected})
    df.index.name = "moment"
    print(tabulate(df, headers="keys", tablefmt="github", floatfmt=".3f"))
    return df


# =*=*=*=*=*=*=*
# FILES
# =*=*=*=*=*=*=*

def _format_param(value):
    if isinstance(value, (int, np.integer)):
        return str(value)
    return f"{value:.2f}"


def sample_filename(name, *params):
    """``sample_filename('binomial', 5, 0.25)`` -> ``'binomial_5_0.25.txt'``."""
    return "_".join([name, *map(_format_param, params)]) + ".txt"


def save_sample(sample, filename, out_dir="."):
    """Write one value per line and return the path written."""
    sample = np.asarray(sample)
    os.makedirs(out_dir, exist_ok=True)
    path = os.path.join(out_dir, filename)
    fmt = "%d" if np.issubdtype(sample.dtype, np.integer) else "%.3f"
    np.savetxt(path, sample, fmt=fmt)
    return path
