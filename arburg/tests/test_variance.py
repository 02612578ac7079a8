from unittest import TestCase

import os
import sys
from fractions import Fraction

try:
    from arburg.variance import (YuleWalker, Burg, LSFB, LSF, MEAN_SUBTRACTED, MEAN_RETAINED,
                                 EmpiricalVariances, get_method)
except ImportError:
    sys.path.append(os.path.join(os.path.join(os.path.dirname(os.path.abspath(__file__)),
                                 os.pardir), os.pardir))
    from arburg.variance import (YuleWalker, Burg, LSFB, LSF, MEAN_SUBTRACTED, MEAN_RETAINED,
                                 EmpiricalVariances, get_method)


class EmpiricalVarianceTest(TestCase):

    def test_order_zero(self):
        for cls in (YuleWalker, Burg, LSFB, LSF):
            self.assertEqual(cls(MEAN_SUBTRACTED).empirical_variance(10, 0), 0.1)
            self.assertEqual(cls(MEAN_RETAINED).empirical_variance(10, 0), 0.0)

    def test_formulas(self):
        self.assertEqual(YuleWalker().empirical_variance(10, 2, Fraction), Fraction(1, 15))
        self.assertEqual(Burg().empirical_variance(10, 3, Fraction), Fraction(1, 8))
        self.assertEqual(LSFB().empirical_variance(10, 2, Fraction), Fraction(2, 17))
        self.assertEqual(LSF().empirical_variance(10, 3, Fraction), Fraction(1, 6))

        self.assertAlmostEqual(Burg().empirical_variance(10, 3), 0.125)

    def test_preconditions(self):
        with self.assertRaises(ValueError):
            Burg().empirical_variance(0, 0)
        with self.assertRaises(ValueError):
            Burg().empirical_variance(10, -1)
        with self.assertRaises(ValueError):
            Burg().empirical_variance(10, 11)

    def test_get_method(self):
        m = get_method('burg', subtract_mean=False)
        self.assertIsInstance(m, Burg)
        self.assertIs(m.mean_handling, MEAN_RETAINED)
        self.assertIsInstance(get_method('yule_walker'), YuleWalker)

        with self.assertRaises(ValueError):
            get_method('xxx')


class EmpiricalVariancesTest(TestCase):

    def setUp(self):
        self.method = Burg(MEAN_SUBTRACTED)
        self.seq = EmpiricalVariances(self.method, 5, Fraction)

    def test_sequence(self):
        expected = [Fraction(1, 5), Fraction(1, 5), Fraction(1, 4),
                    Fraction(1, 3), Fraction(1, 2), Fraction(1, 1)]

        self.assertEqual(len(self.seq), 6)
        self.assertEqual(list(self.seq), expected)

        # restartable
        self.assertEqual(list(self.seq), expected)

        self.assertEqual(self.seq[-1], Fraction(1))
        self.assertEqual(self.seq[1:3], expected[1:3])
        with self.assertRaises(IndexError):
            self.seq[6]

    def test_generator(self):
        self.assertEqual(list(self.method.empirical_variance_generator(5, Fraction)), list(self.seq))
        self.assertEqual(list(self.method.empirical_variances(5, Fraction)), list(self.seq))

    def test_invalid_size(self):
        with self.assertRaises(ValueError):
            EmpiricalVariances(self.method, 0)

    def test_least_squares_high_orders(self):
        # LSF: n + 2 - 2i vanishes at i = n/2 + 1
        v = list(EmpiricalVariances(LSF(), 4))
        self.assertEqual(len(v), 5)
        self.assertEqual(v[3], float('inf'))
        self.assertAlmostEqual(v[4], -0.5)

        # LSFB: n + 3/2 - 3i/2 vanishes at i = 2n/3 + 1
        v = list(EmpiricalVariances(LSFB(), 3, Fraction))
        self.assertEqual(v[3], float('inf'))
        self.assertEqual(v[2], Fraction(2, 3))

        for n in range(1, 12):
            self.assertEqual(len(list(EmpiricalVariances(LSF(), n))), n + 1)
            self.assertEqual(len(list(EmpiricalVariances(LSFB(), n))), n + 1)
