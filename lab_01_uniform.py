"""Lab 1: two uniform generators on [0, 1) and their MacLaren-Marsaglia combination.

The multiplicative congruential generator, numpy's generator and the
combined stream are each checked with the chi-square and Kolmogorov tests.

    python lab_01_uniform.py -n 1000 --seed 42 --plot
"""
import argparse
import logging

from goodness_of_fit import critical_values
from lab_config import A_STAR_0, BINS_CNT, CONGRUENTIAL_PARAMS, K, M, SEPARATOR
from lab_reporting import describe_sample, report_verdicts
from maclaren_marsaglia import maclaren_marsaglia
from uniform_streams import MultiplicativeCongruential, PlatformUniform


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("-n", "--n-rolls", type=int, default=1000, help="sample size per generator")
    parser.add_argument("--seed", type=int, default=None, help="seed of the platform generator")
    parser.add_argument("--k", type=int, default=K, help="MacLaren-Marsaglia buffer size")
    parser.add_argument("--plot", action="store_true", help="show histograms")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser.parse_args(argv)


def check_sample(sample, label):
    """Describe a sample and run both tests when it has any values."""
    describe_sample(sample, label)
    if len(sample):
        report_verdicts(sample, label)
    else:
        print(f"\nno values to test for {label}")


def run(n_rolls=1000, seed=None, k=K, plot=False):
    print(f"\n{SEPARATOR}\n")
    print("parameters:")
    print(f"A_STAR_0: {A_STAR_0}")
    print(f"M: {M}")
    print(f"K: {k}")
    chi2_crit, ks_crit = critical_values(0.05, BINS_CNT)
    print(f"chi-square critical value (alpha=0.05, {BINS_CNT - 1} dof): {chi2_crit:.2f}")
    print(f"kolmogorov critical value (alpha=0.05): {ks_crit:.2f}")

    # ======== MULTIPLICATIVE CONGRUENTIAL ========
    print(f"\n{SEPARATOR}\n")
    mult_congr = MultiplicativeCongruential(**CONGRUENTIAL_PARAMS).generate(n_rolls)
    check_sample(mult_congr, "multiplicative congruential")

    # ======== PLATFORM UNIFORM ========
    print(f"\n{SEPARATOR}\n")
    builtin = PlatformUniform(seed).generate(n_rolls)
    check_sample(builtin, "builtin uniform")

    # ======== MACLAREN-MARSAGLIA ========
    print(f"\n{SEPARATOR}\n")
    combined = maclaren_marsaglia(mult_congr, builtin, k)
    check_sample(combined, "maclaren marsaglia")

    samples = {
        "multiplicative congruential": mult_congr,
        "builtin uniform": builtin,
        "maclaren marsaglia": combined,
    }
    if plot:
        from lab_plots import plot_histograms
        plot_histograms(samples)
    return samples


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")
    run(args.n_rolls, args.seed, args.k, args.plot)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
