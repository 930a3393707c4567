#!/usr/bin/env python3

""" TODO Copyright & licensing notices

This module contains unit tests for the monthly module
"""

# Standard library imports
import unittest

# Set path to include modules to be tested (must be before local imports)
from unit_tests.common import test_setup
test_setup()

# Local imports
import dwelling_model.monthly as monthly

class TestMonthly(unittest.TestCase):
    """ Unit tests for month vector functions """

    def setUp(self):
        self.a = [float(m) for m in range(12)]
        self.b = [2.0] * 12
        self.c = [0.5 * m - 1.0 for m in range(12)]

    def test_is_summer(self):
        summer = [monthly.is_summer(m) for m in range(12)]
        self.assertEqual(
            summer,
            [False, False, False, False, False, True, True, True, True, False, False, False],
            "incorrect summer months",
            )

    def test_elementwise_operations(self):
        self.assertEqual(monthly.add(self.a, self.b), [m + 2.0 for m in range(12)], "incorrect sum")
        self.assertEqual(monthly.sub(self.a, self.b), [m - 2.0 for m in range(12)], "incorrect difference")
        self.assertEqual(monthly.mul(self.a, self.b), [m * 2.0 for m in range(12)], "incorrect product")
        self.assertEqual(monthly.scale(self.a, 3.0), [m * 3.0 for m in range(12)], "incorrect scaling")
        self.assertEqual(monthly.mean(self.a), 5.5, "incorrect mean")

    def test_results_are_lists(self):
        result = monthly.add(self.a, self.b)
        self.assertIsInstance(result, list, "month vector should be a list")
        self.assertIsInstance(result[0], float, "month vector values should be floats")

    def test_wrong_length(self):
        with self.assertRaises(ValueError):
            monthly.add(self.a, [1.0] * 11)
        with self.assertRaises(ValueError):
            monthly.sum_vectors([self.a, [1.0] * 13])

    def test_sum_vectors_empty(self):
        self.assertEqual(monthly.sum_vectors([]), [0.0] * 12, "sum of no vectors should be zeros")

    def test_sum_vectors_grouping(self):
        """ Summing partial sums gives the same result as summing all vectors directly """
        direct = monthly.sum_vectors([self.a, self.b, self.c])
        grouped = monthly.add(monthly.sum_vectors([self.a, self.b]), self.c)
        reordered = monthly.sum_vectors([self.c, monthly.add(self.b, self.a)])
        for m in range(12):
            with self.subTest(month=m):
                self.assertAlmostEqual(direct[m], grouped[m], msg="grouped sum differs")
                self.assertAlmostEqual(direct[m], reordered[m], msg="reordered sum differs")

if __name__ == '__main__':
    unittest.main()
