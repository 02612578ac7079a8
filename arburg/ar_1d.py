import numpy as np

from .burg import burg_method, hierarchy_params
from .variance import get_method

from logging import getLogger
logger = getLogger('ARBurg')


class AR_1D:

    def __init__(self, k, subtract_mean=True):
        """AR(k): k-th order AR model fitted by Burg's method.

        Args:
            k (int): Order of the AR model.
            subtract_mean (bool): Remove the sample mean before fitting.

        """
        if k < 1:
            raise ValueError('k must be 1 or more.')

        self.k = k
        self.subtract_mean = subtract_mean

        # initialize the parameters
        self.mu = self.sigma = 0.0
        self.gain = 1.0
        self.a = np.zeros(self.k)
        self.autocor = np.zeros(self.k)

    def estimate(self, x):
        """Estimate the parameters of the AR model.
        The algorithm assumes that the data source is stationary.

        Args:
            x (numpy array): all t data points (1, ..., t).

        """
        res = burg_method(x, self.k, subtract_mean=self.subtract_mean)

        if res.maxorder < self.k:
            logger.warning('AR(%d) cannot be fit from %d points, using AR(%d)' % (self.k, res.n, res.maxorder))
            self.k = res.maxorder

        self.mu = res.mean
        self.a = res.params
        self.autocor = res.autocor

        if res.maxorder == 0:
            self.sigma, self.gain = 0.0, 1.0
        else:
            self.sigma = res.sigma2e[-1]
            self.gain = res.gain[-1]


class ModelSelection:

    criteria = ('aic', 'fsic', 'cic')

    def __init__(self, max_k=50, criterion='aic', subtract_mean=True):
        """Model selection of the AR model.

        Args:
            max_k (int): Max number of possible k for the AR(k) model.
            criterion (str): 'aic', or one of Broersen's finite sample
                criteria 'fsic' and 'cic'.
            subtract_mean (bool): Remove the sample mean before fitting.

        """
        if criterion not in self.criteria:
            raise ValueError('unknown criterion: %s' % criterion)

        self.max_k = max_k
        self.criterion = criterion
        self.subtract_mean = subtract_mean
        self.method = get_method('burg', subtract_mean)

    def select(self, x):
        """For the given data points, select the best model order.

        Every model AR(1), ..., AR(max_k) comes out of a single Burg recursion.

        Args:
            x (numpy array): all t data points (1, ..., t).

        Returns:
            (int, float): Selected k and its criterion value.

        """
        return self._select(self._fit(x))

    def _fit(self, x):
        return burg_method(x, self.max_k, subtract_mean=self.subtract_mean, hierarchy=True)

    def _select(self, res):
        selected_k = 0
        min_score = np.inf

        for k in range(1, res.maxorder + 1):
            score = self.score(float(res.sigma2e[k - 1]), res.n, k)

            if score < min_score:
                selected_k = k
                min_score = score

        logger.debug('Selected AR(%d) out of %d orders (%s = %f)' % (selected_k, res.maxorder, self.criterion, min_score))

        return selected_k, min_score

    def score(self, sigma, n, k):
        """Criterion value of an AR(k) fit with innovation variance `sigma`."""
        # sigma could be negative/zero
        if self.criterion == 'aic':
            v = max(2 * np.pi * sigma, 1e-100)
            return n * (np.log(v) + 1) + 2 * (k + 1)

        v = np.array(self.method.empirical_variances(n)[:k + 1])
        fsic = np.prod((1 + v) / (1 - v)) - 1
        penalty = fsic if self.criterion == 'fsic' else max(fsic, 3 * np.sum(v))

        return np.log(max(sigma, 1e-100)) + penalty

    def select_params(self, x):
        """Select the model order and return (k, a_1, ..., a_k) for it."""
        res = self._fit(x)
        k, _ = self._select(res)
        if k == 0:
            return 0, np.zeros(0)

        return k, hierarchy_params(res.params, res.maxorder)[k - 1]
