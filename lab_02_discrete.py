"""Lab 2: Bernoulli, binomial, geometric and Poisson samples from a U[0, 1) stream.

Each sample is summarised by its bias-corrected moments next to the
theoretical ones and written to ``<name>_<params>.txt``.

    python lab_02_discrete.py -n 1000 --seed 7 --out-dir results
"""
import argparse
import logging

from discrete_samplers import sample
from lab_config import DISTRIBUTION_PARAMS, N_ROLLS
from lab_reporting import report_moments, sample_filename, save_sample
from uniform_streams import PlatformUniform

SEPARATOR = "-" * 20


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("-n", "--n-rolls", type=int, default=N_ROLLS)
    parser.add_argument("--seed", type=int, default=None,
                        help="seed shared by all samplers (fresh entropy per sampler if omitted)")
    parser.add_argument("--out-dir", default=".")
    parser.add_argument("--plot", action="store_true", help="compare each sample with its PMF")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser.parse_args(argv)


def run(n_rolls=N_ROLLS, seed=None, out_dir=".", plot=False, params=DISTRIBUTION_PARAMS):
    source = PlatformUniform(seed) if seed is not None else None
    results = {}
    for name, dist_params in params.items():
        print(SEPARATOR)
        print(f"{name}:")
        values = sample(name, n_rolls, source=source, **dist_params)
        if len(values) >= 4:
            report_moments(values, name, **dist_params)
        else:
            # kurtosis needs at least 4 values
            print(f"too few values for moments: {len(values)}")
        path = save_sample(values, sample_filename(name, *dist_params.values()), out_dir)
        print(f"saved to {path}\n")
        if plot and len(values):
            from lab_plots import plot_pmf_comparison
            plot_pmf_comparison(values, name, **dist_params)
        results[name] = values
    return results


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")
    run(args.n_rolls, args.seed, args.out_dir, args.plot)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
