import numpy as np

from .errors import SingularToeplitzError


def zohar_linear_solve(a, r, d, out=None):
    """Solve a Toeplitz set of linear equations L s = d.

    L is the (n + 1) x (n + 1) Toeplitz matrix with a unit diagonal,
    first row [1, a_0, ..., a_{n-1}] and first column [1, r_0, ..., r_{n-1}].
    A symmetric solve passes the same vector as `a` and `r`.

    The algorithm is from Zohar, S. "The Solution of a Toeplitz Set of
    Linear Equations." J. ACM 21 (1974): 272-276, improving upon Trench
    (1967). Complexity is like O(2 (n + 1)^2). Names ending in `hat` denote
    reversed vectors.

    Args:
        a (array-like): n entries above the diagonal.
        r (array-like): n entries below the diagonal.
        d (array-like): n + 1 right-hand side entries. Its dtype fixes the
            working precision.
        out (array-like): Optional n + 1 entry output. Passing `d` itself
            solves in place.

    Returns:
        numpy array (or `out`): the solution s.

    Raises:
        ValueError: `a` has fewer than one entry or `d` is too short.
        TypeError: `out` is an integer or boolean array.
        SingularToeplitzError: a leading principal minor is singular.

    """
    d_values = np.array(d).reshape(-1)
    if d_values.dtype.kind in 'biu':
        d_values = d_values.astype(np.float64)

    dtype = d_values.dtype
    a = np.asarray(a, dtype=dtype).reshape(-1)
    r = np.asarray(r, dtype=dtype).reshape(-1)

    n = a.size
    if n < 1:
        raise ValueError('a must have at least one entry.')
    if r.size < n:
        raise ValueError('r must have at least %d entries.' % n)
    if d_values.size < n + 1:
        raise ValueError('d must have at least %d entries.' % (n + 1))
    if isinstance(out, np.ndarray) and out.dtype.kind in 'biu':
        raise TypeError('out must have a floating or object dtype, not %s.' % out.dtype)

    s = np.zeros(n + 1, dtype=dtype)
    g = np.zeros(n, dtype=dtype)
    s[0] = d_values[0]
    ehat = np.array([-a[0]], dtype=dtype)
    g[0] = -r[0]
    lam = 1 - a[0] * r[0]

    # s and g update in place, ehat is rebuilt at every level
    # "It is only necessary to retain quantities computed at level m - 1
    # until the computations at level m are complete." [Trench 1967]
    for i in range(1, n):
        if lam == 0:
            raise SingularToeplitzError(i)

        rhat = r[i - 1::-1]

        # theta_i =  delta_{i+1}  - s_i' rhat_i
        neg_theta = np.dot(s[:i], rhat) - d_values[i]
        # eta_i   = -rho_{-(i+1)} - a_i' ehat_i
        neg_eta = np.dot(ehat, a[:i]) + a[i]
        # gamma_i = -rho_{i+1}    - g_i' rhat_i
        neg_gamma = np.dot(g[:i], rhat) + r[i]

        theta_by_lambda = -neg_theta / lam
        eta_by_lambda = -neg_eta / lam
        gamma_by_lambda = -neg_gamma / lam

        s[:i] += theta_by_lambda * ehat
        next_ehat = np.empty(i + 1, dtype=dtype)
        next_ehat[0] = eta_by_lambda
        next_ehat[1:] = ehat + eta_by_lambda * g[:i]
        g[:i] += gamma_by_lambda * ehat

        s[i] = theta_by_lambda
        g[i] = gamma_by_lambda
        ehat = next_ehat

        # lambda_{i+1} = lambda_i - eta_i gamma_i / lambda_i
        lam = lam - neg_eta * neg_gamma / lam

    # Zohar's "last computed values": only s is needed at i = n
    if lam == 0:
        raise SingularToeplitzError(n)

    neg_theta = np.dot(s[:n], r[n - 1::-1]) - d_values[n]
    theta_by_lambda = -neg_theta / lam
    s[:n] += theta_by_lambda * ehat
    s[n] = theta_by_lambda

    if out is None:
        return s

    out[:n + 1] = s
    return out


def zohar_linear_solve_inplace(a, r, d):
    """Solve L s = d overwriting the first n + 1 entries of `d` with s."""
    return zohar_linear_solve(a, r, d, out=d)


def symmetric_zohar_linear_solve(a, d, out=None):
    """Solve a real-valued, symmetric Toeplitz set of linear equations.

    Same as `zohar_linear_solve` with `a` serving as both the row and the
    column generator.

    """
    return zohar_linear_solve(a, a, d, out=out)
