"""MacLaren-Marsaglia combination of two uniform streams."""
import logging

import numpy as np

from lab_config import K
from uniform_streams import freeze

logger = logging.getLogger(__name__)


def maclaren_marsaglia(first, second, k=K):
    """Shuffle ``first`` through a buffer of size ``k`` indexed by ``second``.

    The buffer starts as the first ``k`` values of ``first``. For every
    output position ``i`` the selector ``s = floor(second[i] * k)`` picks the
    buffered value to emit, and the slot is refilled with ``first[i + k]``.
    Output length is ``min(len(first), len(second)) - k``; it is empty when
    ``k < 1`` or either input is not longer than ``k``.
    """
    first = np.asarray(first, dtype=np.float64)
    second = np.asarray(second, dtype=np.float64)
    size = min(len(first), len(second)) - k
    if k < 1 or size <= 0:
        logger.debug("maclaren_marsaglia: k=%d leaves no output for inputs of length %d and %d",
                     k, len(first), len(second))
        return freeze(np.empty(0, dtype=np.float64))

    res = np.empty(size, dtype=np.float64)
    v = first[:k].copy()
    for i in range(size):
        s = min(max(int(second[i] * k), 0), k - 1)
        res[i] = v[s]
        v[s] = first[i + k]
    return freeze(res)
