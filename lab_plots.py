import matplotlib.pyplot as plt
import numpy as np

from sample_moments import frozen_distribution


# ======== HISTOGRAMS ========
def plot_histograms(samples, bins=20, show=True):
    """One histogram per labelled uniform sample, side by side."""
    fig, axes = plt.subplots(1, len(samples), figsize=(5 * len(samples), 4), squeeze=False)
    colors = ['skyblue', 'salmon', 'lightgreen']
    for i, (ax, (label, sample)) in enumerate(zip(axes[0], samples.items())):
        ax.hist(sample, bins=bins, range=(0.0, 1.0), color=colors[i % len(colors)], edgecolor='black')
        ax.set_title(f"Histogram - {label}")
    fig.tight_layout()
    if show:
        plt.show()
    return fig


# ======== SAMPLE VS PMF ========
def plot_pmf_comparison(sample, name, show=True, **params):
    sample = np.asarray(sample)
    dist = frozen_distribution(name, **params)
    lo = int(min(sample.min(), dist.ppf(0.001)))
    hi = int(max(sample.max(), dist.ppf(0.999)))
    ks = np.arange(lo, hi + 1)
    bins = np.arange(lo - 0.5, hi + 1.5, 1)

    fig, ax = plt.subplots(figsize=(8, 5))
    ax.hist(sample, bins=bins, density=True, alpha=0.6, label='Sample')
    ax.plot(ks, dist.pmf(ks), 'ko-', label='Theoretical PMF', ms=4)
    ax.set_xlabel('k')
    ax.set_ylabel('Relative frequency / probability')
    ax.set_title(f'{name} {params}')
    ax.legend()
    ax.grid(alpha=0.4, linestyle='--')
    fig.tight_layout()
    if show:
        plt.show()
    return fig
