import numpy as np

from .errors import EmptySampleError


def working_array(x, dtype=None):
    """Materialize `x` as a 1d array of the working precision.

    Integer and boolean data have no usable division, so they are promoted
    to float64. Any other dtype (float32, longdouble, object for Fraction)
    is kept as is.

    """
    if not isinstance(x, np.ndarray):
        x = list(x)
    x = np.array(x, dtype=dtype)

    if x.dtype.kind in 'biu':
        x = x.astype(np.float64)

    return x.reshape(-1)


def pairwise_sum(x):
    """Sum `x` by combining partial sums pairwise (binary tree order).

    Rounding error grows like O(log N) rather than O(N), and exact types
    such as Fraction are never rounded.

    Args:
        x (numpy array): N values.

    Returns:
        Sum of `x` in the working precision of `x`.

    """
    n = x.size
    b = np.zeros(max(n, 1), dtype=x.dtype)

    # first pass folds x into b, halving the problem size
    h = n // 2
    b[:h] = x[0:2 * h:2] + x[1:2 * h:2]
    if n % 2:
        b[h] = x[n - 1]

    # largest power of two not exceeding n
    t, i = n, int(n > 0)
    while t // 2:
        t //= 2
        i *= 2

    # b[:i] now covers every partial sum (zero padded), reduce pairwise
    i //= 2
    while i:
        b[:i] = b[0:2 * i:2] + b[1:2 * i:2]
        i //= 2

    return b[0]


def pairwise_mean(x):
    """Mean of `x` computed with `pairwise_sum`.

    Raises:
        EmptySampleError: `x` holds no observations.

    """
    n = x.size
    if n == 0:
        raise EmptySampleError('mean of zero observations is undefined')

    return pairwise_sum(x) / n
