import numpy as np
import numpy.linalg as ln
from scipy.linalg import toeplitz

from .pairwise import working_array, pairwise_mean
from .zohar import symmetric_zohar_linear_solve


def autocorrelation(x, k, subtract_mean=True):
    """Biased sample autocorrelations.

    Args:
        x (array-like): Observations.
        k (int): Largest lag.
        subtract_mean (bool): Remove the (pairwise) sample mean first.

    Returns:
        numpy array: Lag 1, ..., k autocorrelations normalized by lag 0.

    """
    x = working_array(x)
    if subtract_mean:
        x = x - pairwise_mean(x)

    n = x.size
    if k >= n:
        raise ValueError('k must be smaller than the number of samples.')

    c0 = np.dot(x, x)
    if c0 == 0:
        return np.zeros(k, dtype=x.dtype)

    rho = np.zeros(k, dtype=x.dtype)
    for j in range(1, k + 1):
        rho[j - 1] = np.dot(x[j:], x[:n - j]) / c0

    return rho


def aryule(rho, k):
    """Solve the Yule-Walker equation with a dense solver.

    Args:
        rho (numpy array): Lag 1, ..., k autocorrelations (lag 0 is one).
        k (int): Assuming the AR(k) model.

    Returns:
        numpy array: a_1, ..., a_k for x_n + a_1 x_{n-1} + ... = e_n,
            i.e. R a = -rho.

    """
    rho = np.asarray(rho, dtype=float)
    a = np.zeros(k)

    # ignore a singular matrix
    R = toeplitz(np.append(1.0, rho[:k - 1]))
    if np.isfinite(ln.cond(R)):
        a = -np.dot(ln.inv(R), rho[:k])

    return a


def aryule_zohar(rho):
    """Solve the Yule-Walker equation with the Zohar recursion.

    The (p + 1) x (p + 1) symmetric Toeplitz system built from
    [1, rho_1, ..., rho_p] is solved against [1, 0, ..., 0]; the solution is
    proportional to [1, a_1, ..., a_p].

    Args:
        rho (array-like): Lag 1, ..., p autocorrelations. The dtype fixes
            the working precision.

    Returns:
        numpy array: a_1, ..., a_p.

    """
    rho = working_array(rho)

    d = np.zeros(rho.size + 1, dtype=rho.dtype)
    d[0] = 1
    s = symmetric_zohar_linear_solve(rho, d)

    return s[1:] / s[0]
