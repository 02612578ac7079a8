from collections import namedtuple

import numpy as np

from .errors import DegenerateErrorPowerError
from .pairwise import working_array, pairwise_mean

from logging import getLogger
logger = getLogger('ARBurg')


BurgResult = namedtuple('BurgResult',
                        ['n', 'mean', 'maxorder', 'params', 'sigma2e', 'gain', 'autocor'])


def _inner(x, y, init):
    # numpy returns a bare 0 (not the working type) for empty object arrays
    if x.size == 0:
        return init
    return init + np.dot(x, y)


def burg_method(data, maxorder, subtract_mean=False, hierarchy=False, dtype=None):
    """Fit an autoregressive model to stationary time series data using Burg's method.

    Assuming a zero-mean model
        x_n + a_1 x_{n-1} + ... + a_p x_{n-p} = e_n,
    find a_i such that the squared errors of both the forward and the
    backward predictions are minimized. All models AR(1), ..., AR(maxorder)
    are always computed; `hierarchy` only controls what is returned.

    Refactored from Collomb, C. "Burg's Method, Algorithm and Recursion"
    (2009). Gain and autocorrelations follow sections 5.2 and 5.3 of
    Broersen, P. M. T. "Automatic autocorrelation and spectral analysis"
    (Springer, 2006).

    Args:
        data (iterable): Observations, read once. The array dtype fixes the
            working precision (float32, float64, longdouble, or object for
            exact types such as Fraction).
        maxorder (int): Maximum model order desired. Limited to N - 1.
        subtract_mean (bool): Remove the sample mean before fitting.
        hierarchy (bool): Return every model AR(1), ..., AR(maxorder)
            instead of only AR(maxorder).
        dtype: Optional dtype to materialize `data` with.

    Returns:
        BurgResult:
            n: number of observations processed.
            mean: pairwise-summed sample mean (reported even when not removed).
            maxorder: maximum model order actually computed.
            params: a_1, ..., a_maxorder, or in hierarchy mode the
                maxorder * (maxorder + 1) / 2 coefficients of AR(1), AR(2), ...
                concatenated.
            sigma2e: innovation variance for each returned model.
            gain: sigma2x / sigma2e for each returned model.
            autocor: lag 1 through lag maxorder autocorrelations. Lag 0 is
                always one and never returned. Multiply by gain * sigma2e to
                obtain autocovariances.

    Raises:
        EmptySampleError: `data` is empty.
        DegenerateErrorPowerError: The prediction error power vanished.

    """
    if maxorder < 0:
        raise ValueError('maxorder must be 0 or more.')

    f = working_array(data, dtype)
    N = f.size

    mean = pairwise_mean(f)

    # at most N - 1 can be fit from N samples
    requested, maxorder = maxorder, min(maxorder, N - 1)
    if maxorder < requested:
        logger.debug('Requested order %d clamped to %d for %d samples' % (requested, maxorder, N))

    empty = np.array([], dtype=f.dtype)
    if maxorder == 0:
        return BurgResult(N, mean, 0, empty, empty.copy(), empty.copy(), empty.copy())

    if subtract_mean:
        f = f - mean

    # mean squared discrepancy sigma2e and the error power Dk
    sigma2e = np.dot(f, f)
    Dk = 2 * sigma2e - f[0] * f[0] - f[N - 1] * f[N - 1]
    sigma2e = sigma2e / N

    b = f.copy()
    Ak = np.zeros(maxorder + 1, dtype=f.dtype)
    Ak[0] = 1
    gain = 1
    autocor = np.zeros(maxorder, dtype=f.dtype)

    params, sigma2es, gains = [], [], []

    for k in range(1, maxorder + 1):
        if Dk == 0:
            raise DegenerateErrorPowerError(k)

        # reflection coefficient; afterwards Ak[1:k+1] holds AR(k) and
        # Ak[k] is the new reflection coefficient (up to sign)
        mu = 2 / Dk * np.dot(f[k:], b[:N - k])
        one_minus_mu2 = 1 - mu * mu
        if one_minus_mu2 == 0:
            raise DegenerateErrorPowerError(
                k, 'reflection coefficient of unit magnitude at order %d' % k)

        sigma2e = sigma2e * one_minus_mu2
        Ak[:k + 1] = Ak[:k + 1] - mu * Ak[k::-1]

        # Broersen (5.25)
        gain = gain * (1 / (1 - Ak[k] * Ak[k]))

        # Broersen (5.28) and (5.31): uses lags 1..k-1 only
        autocor[k - 1] = -_inner(autocor[k - 2::-1] if k > 1 else empty, Ak[1:k], Ak[k])

        if hierarchy or k == maxorder:
            params.append(Ak[1:k + 1].copy())
            sigma2es.append(sigma2e)
            gains.append(gain)

        if k < maxorder:
            fk = f[k:] - mu * b[:N - k]
            bk = b[:N - k] - mu * f[k:]
            f[k:] = fk
            b[:N - k] = bk
            Dk = one_minus_mu2 * Dk - f[k] * f[k] - b[N - k - 1] * b[N - k - 1]

    return BurgResult(N, mean, maxorder,
                      np.concatenate(params),
                      np.array(sigma2es, dtype=f.dtype),
                      np.array(gains, dtype=f.dtype),
                      autocor)


def hierarchy_params(params, maxorder):
    """Split flat hierarchy output into one coefficient array per order.

    Args:
        params (numpy array): maxorder * (maxorder + 1) / 2 coefficients.
        maxorder (int): Achieved order reported by `burg_method`.

    Returns:
        list of numpy array: [a(AR(1)), a(AR(2)), ..., a(AR(maxorder))].

    """
    expected = maxorder * (maxorder + 1) // 2
    if len(params) != expected:
        raise ValueError('expected %d hierarchy coefficients but got %d' % (expected, len(params)))

    out = []
    start = 0
    for k in range(1, maxorder + 1):
        out.append(params[start:start + k])
        start += k

    return out
