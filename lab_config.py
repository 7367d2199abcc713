"""Fixed parameters of both labs."""

# ======== LAB 1: UNIFORM GENERATORS ========
A_STAR_0 = 24_389
BETA = A_STAR_0
M = 2**31
K = 32

CONGRUENTIAL_PARAMS = {'seed': A_STAR_0, 'multiplier': BETA, 'modulus': M}

# chi2 with 9 degrees of freedom and asymptotic Kolmogorov, alpha = 0.05
BINS_CNT = 10
CHI_SQUARE_THRESHOLD = 16.92
KOLMOGOROV_THRESHOLD = 1.36

# ======== LAB 2: DISCRETE DISTRIBUTIONS ========
N_ROLLS = 1000

DISTRIBUTION_PARAMS = {
    'bernoulli': {'p': 0.7},
    'binomial': {'m': 5, 'p': 0.25},
    'geometric': {'p': 0.7},
    'poisson': {'lam': 2},
}

SEPARATOR = "-" * 27
