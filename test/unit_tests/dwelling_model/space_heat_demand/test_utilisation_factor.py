#!/usr/bin/env python3

""" TODO Copyright & licensing notices

This module contains unit tests for the utilisation_factor module
"""

# Standard library imports
import unittest

# Set path to include modules to be tested (must be before local imports)
from unit_tests.common import test_setup
test_setup()

# Local imports
from dwelling_model.space_heat_demand.utilisation_factor import \
    calc_time_constant, calc_utilisation_factor, calc_temperature_reduction

class TestUtilisationFactor(unittest.TestCase):
    """ Unit tests for utilisation factor and temperature reduction """

    def setUp(self):
        # Loss of 1000 W with H = 100 W/K and a 10 K temperature difference
        self.TMP = 250.0
        self.HLP = 2.0
        self.H = 100.0
        self.Ti = 20.0
        self.Te = 10.0

    def eta(self, G):
        return calc_utilisation_factor(self.TMP, self.HLP, self.H, self.Ti, self.Te, G)

    def test_time_constant(self):
        self.assertAlmostEqual(calc_time_constant(250.0, 2.0), 250.0 / 7.2, msg="incorrect time constant")

    def test_gamma_one(self):
        a = 1.0 + calc_time_constant(self.TMP, self.HLP) / 15.0
        self.assertAlmostEqual(self.eta(1000.0), a / (a + 1.0), msg="incorrect value at gamma = 1")

    def test_continuity_at_gamma_one(self):
        at_one = self.eta(1000.0)
        for G in (999.9, 999.99, 1000.01, 1000.1):
            with self.subTest(G=G):
                self.assertAlmostEqual(self.eta(G), at_one, 3, "discontinuity near gamma = 1")

    def test_range_and_monotonic(self):
        previous = 1.0
        for G in (100.0, 500.0, 1000.0, 2000.0, 10000.0, 1e6):
            with self.subTest(G=G):
                eta = self.eta(G)
                self.assertGreater(eta, 0.0, "utilisation factor not positive")
                self.assertLessEqual(eta, 1.0, "utilisation factor above 1")
                self.assertLess(eta, previous, "utilisation factor not decreasing with gains")
                previous = eta

    def test_no_gains_or_losses(self):
        self.assertEqual(self.eta(0.0), 0.0, "non-zero utilisation factor with zero gains")
        self.assertEqual(self.eta(-50.0), 0.0, "non-zero utilisation factor with negative gains")
        self.assertEqual(
            calc_utilisation_factor(self.TMP, self.HLP, self.H, 10.0, 10.0, 500.0),
            0.0,
            "non-zero utilisation factor with zero losses",
            )
        self.assertEqual(
            calc_utilisation_factor(self.TMP, self.HLP, self.H, 10.0, 15.0, 500.0),
            0.0,
            "non-zero utilisation factor with negative losses",
            )

    def test_non_positive_hlp(self):
        self.assertEqual(
            calc_utilisation_factor(self.TMP, 0.0, self.H, self.Ti, self.Te, 500.0),
            0.0,
            "non-zero utilisation factor with zero HLP",
            )

    def test_temperature_reduction(self):
        G = 500.0
        u = calc_temperature_reduction(self.TMP, self.HLP, self.H, self.Ti, self.Te, G, 1.0, 21.0, 8)
        self.assertGreater(u, 0.0, "no temperature reduction during off period")
        self.assertLess(u, 21.0 - self.Te, "reduction exceeds temperature difference")

    def test_temperature_reduction_longer_off_period(self):
        G = 500.0
        short = calc_temperature_reduction(self.TMP, self.HLP, self.H, self.Ti, self.Te, G, 1.0, 21.0, 7)
        long = calc_temperature_reduction(self.TMP, self.HLP, self.H, self.Ti, self.Te, G, 1.0, 21.0, 16)
        self.assertGreater(long, short, "longer off period gives smaller reduction")

    def test_temperature_reduction_degenerate(self):
        self.assertEqual(
            calc_temperature_reduction(self.TMP, 0.0, self.H, self.Ti, self.Te, 500.0, 1.0, 21.0, 8),
            0.0,
            "non-zero reduction with zero HLP",
            )
        self.assertEqual(
            calc_temperature_reduction(self.TMP, self.HLP, 0.0, self.Ti, self.Te, 500.0, 1.0, 21.0, 8),
            0.0,
            "non-zero reduction with zero H",
            )

if __name__ == '__main__':
    unittest.main()
