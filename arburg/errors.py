class ARBurgError(Exception):
    """Base exception for autoregressive estimation errors."""

    pass


class EmptySampleError(ARBurgError, ValueError):
    """Raised when a mean is requested from zero observations."""

    pass


class DegenerateErrorPowerError(ARBurgError, ZeroDivisionError):
    """Raised when Burg's prediction error power vanishes mid-recursion.

    Typically the input is constant (after mean removal) or perfectly
    predictable at some order below the requested one.
    """

    def __init__(self, order, msg=None):
        self.order = order
        if msg is None:
            msg = 'prediction error power reached zero at order %d' % order
        super().__init__(msg)


class SingularToeplitzError(ARBurgError, ZeroDivisionError):
    """Raised when a leading principal minor of the Toeplitz matrix is singular."""

    def __init__(self, step):
        self.step = step
        super().__init__('zero pivot at step %d of the Toeplitz recursion' % step)
