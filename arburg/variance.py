"""Method-specific empirical variance estimates following Broersen.

See Broersen, P. M. T. "Finite sample criteria for autoregressive order
selection." IEEE Transactions on Signal Processing 48 (2000): 3550-3558,
and Broersen, P. M. T. and H. E. Wensink. "On Finite Sample Theory for
Autoregressive Model Order Selection." IEEE Transactions on Signal
Processing 41 (1993): 194+.
"""
from collections.abc import Sequence


def _reciprocal(den):
    # least squares formulas reach a zero denominator at high orders
    if den == 0:
        return float('inf')
    return 1 / den


class MeanHandling:
    """How the sample mean was treated before estimation."""

    name = None

    def empirical_variance_zero(self, n, result=float):
        raise NotImplementedError

    def __repr__(self):
        return '%s()' % self.__class__.__name__


class MeanSubtracted(MeanHandling):
    """The sample mean was subtracted from the signal before estimation."""

    name = 'mean_subtracted'

    def empirical_variance_zero(self, n, result=float):
        return 1 / result(n)


class MeanRetained(MeanHandling):
    """The sample mean was retained in the signal during estimation."""

    name = 'mean_retained'

    def empirical_variance_zero(self, n, result=float):
        return result(0)


MEAN_SUBTRACTED = MeanSubtracted()
MEAN_RETAINED = MeanRetained()


class EstimationMethod:

    name = None

    def __init__(self, mean_handling=MEAN_SUBTRACTED):
        """Autoregressive parameter estimation technique.

        Args:
            mean_handling (MeanHandling): MEAN_SUBTRACTED or MEAN_RETAINED.

        """
        self.mean_handling = mean_handling

    def empirical_variance(self, n, i, result=float):
        """Approximate the empirical variance estimate.

        Args:
            n (int): Number of observations.
            i (int): Variance order.
            result (type): Result type, e.g. float or Fraction.

        """
        if n < 1:
            raise ValueError('n must be 1 or more.')
        if i < 0 or i > n:
            raise ValueError('i must be in [0, %d] but got %d.' % (n, i))

        if i == 0:
            return self.mean_handling.empirical_variance_zero(n, result)

        return self._empirical_variance(n, i, result)

    def _empirical_variance(self, n, i, result):
        raise NotImplementedError

    def empirical_variances(self, n, result=float):
        return EmpiricalVariances(self, n, result)

    def empirical_variance_generator(self, n, result=float):
        """Yield the empirical variance for orders 0, 1, ..., n."""
        for i in range(n + 1):
            yield self.empirical_variance(n, i, result)

    def __repr__(self):
        return '%s(%r)' % (self.__class__.__name__, self.mean_handling)


class YuleWalker(EstimationMethod):
    """Estimation by solving the Yule-Walker equations."""

    name = 'yule_walker'

    def _empirical_variance(self, n, i, result):
        return result(n - i) / result(n * (n + 2))


class Burg(EstimationMethod):
    """Estimation using Burg's recursive method."""

    name = 'burg'

    def _empirical_variance(self, n, i, result):
        return 1 / result(n + 1 - i)


class LSFB(EstimationMethod):
    """Forward and backward prediction least squares minimization."""

    name = 'lsfb'

    def _empirical_variance(self, n, i, result):
        # kept unfactored so that exact types stay exact
        return _reciprocal(result(n) + result(3) / 2 - result(3) / 2 * i)


class LSF(EstimationMethod):
    """Forward prediction least squares minimization."""

    name = 'lsf'

    def _empirical_variance(self, n, i, result):
        return _reciprocal(result(n + 2 - 2 * i))


METHODS = {cls.name: cls for cls in (YuleWalker, Burg, LSFB, LSF)}


def get_method(name, subtract_mean=True):
    """Look up an estimation method by name ('yule_walker', 'burg', 'lsfb', 'lsf')."""
    try:
        cls = METHODS[name]
    except KeyError:
        raise ValueError('unknown estimation method: %s' % name)

    return cls(MEAN_SUBTRACTED if subtract_mean else MEAN_RETAINED)


class EmpiricalVariances(Sequence):

    def __init__(self, method, n, result=float):
        """Lazy sequence of a method's empirical variances for orders 0, 1, ..., n.

        Values are computed on access, and the sequence may be iterated
        any number of times.

        """
        if n < 1:
            raise ValueError('n must be 1 or more.')

        self.method = method
        self.n = n
        self.result = result

    def __len__(self):
        return self.n + 1

    def __getitem__(self, i):
        if isinstance(i, slice):
            return [self[j] for j in range(*i.indices(len(self)))]

        if i < 0:
            i += len(self)
        if i < 0 or i >= len(self):
            raise IndexError('order out of range')

        return self.method.empirical_variance(self.n, i, self.result)

    def __repr__(self):
        return 'EmpiricalVariances(%r, %d)' % (self.method, self.n)
