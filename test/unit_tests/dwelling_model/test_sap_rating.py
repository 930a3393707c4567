#!/usr/bin/env python3

""" TODO Copyright & licensing notices

This module contains unit tests for the sap_rating module
"""

# Standard library imports
import unittest

# Set path to include modules to be tested (must be before local imports)
from unit_tests.common import test_setup
test_setup()

# Local imports
from dwelling_model.sap_rating import energy_cost_factor, rating_from_ecf, rating_band, SAP
from dwelling_model.datasets import Datasets

class TestRating(unittest.TestCase):
    """ Unit tests for energy rating functions """

    def setUp(self):
        self.bands = Datasets.load_default().rating_bands()

    def test_energy_cost_factor(self):
        self.assertAlmostEqual(energy_cost_factor(1000.0, 100.0), 420.0 / 145.0, msg="incorrect ECF")
        self.assertAlmostEqual(energy_cost_factor(0.0, 100.0), 0.0, msg="non-zero ECF with no cost")

    def test_rating_linear(self):
        self.assertEqual(rating_from_ecf(0.0), 100.0, "incorrect rating for zero ECF")
        self.assertAlmostEqual(rating_from_ecf(1.0), 86.05, msg="incorrect rating below threshold")

    def test_rating_logarithmic(self):
        self.assertAlmostEqual(rating_from_ecf(10.0), -4.0, msg="incorrect rating above threshold")

    def test_rating_threshold(self):
        """ The linear and logarithmic formulae differ slightly at the threshold """
        below = rating_from_ecf(3.5 - 1e-12)
        at = rating_from_ecf(3.5)
        self.assertAlmostEqual(below, 51.175, msg="incorrect rating just below threshold")
        self.assertAlmostEqual(at, 51.1678, 4, "incorrect rating at threshold")
        self.assertGreater(below - at, 0.005, "formulae unexpectedly continuous at threshold")
        self.assertLess(below - at, 0.01, "discontinuity at threshold too large")

    def test_rating_band(self):
        for rating, letter in (
                (150.0, 'A'),
                (92.0, 'A'),
                (91.5, 'A'),
                (91.4, 'B'),
                (69.0, 'C'),
                (54.6, 'D'),
                (20.6, 'F'),
                (1.0, 'G'),
                (0.3, 'G'),
                (-20.0, 'G'),
                ):
            with self.subTest(rating=rating):
                self.assertEqual(rating_band(rating, self.bands)['letter'], letter, "incorrect band")

    def test_rating_band_nan(self):
        self.assertIsNone(rating_band(float('nan'), self.bands), "band found for NaN rating")


class TestSAP(unittest.TestCase):
    """ Unit tests for rating calculation stage """

    def setUp(self):
        self.datasets = Datasets.load_default()

    def test_sap(self):
        data = {'total_cost': 1000.0, 'TFA': 100.0}
        SAP(data, self.datasets)
        sap = data['SAP']
        self.assertEqual(sap['energy_cost_deflator'], 0.42, "incorrect deflator")
        self.assertAlmostEqual(sap['energy_cost_factor'], 420.0 / 145.0, msg="incorrect ECF")
        self.assertAlmostEqual(sap['rating'], 100.0 - 13.95 * 420.0 / 145.0, msg="incorrect rating")
        self.assertEqual(sap['band'], 'D', "incorrect band")
        self.assertEqual(sap['band_color'], '#f5ec00', "incorrect band colour")

    def test_sap_no_cost(self):
        data = {'total_cost': 0.0, 'TFA': 100.0}
        SAP(data, self.datasets)
        self.assertEqual(data['SAP']['rating'], 100.0, "incorrect rating with no cost")
        self.assertEqual(data['SAP']['band'], 'A', "incorrect band with no cost")

    def test_sap_nan_cost(self):
        data = {'total_cost': float('nan'), 'TFA': 100.0}
        SAP(data, self.datasets)
        self.assertIsNone(data['SAP']['band'], "band found for NaN rating")
        self.assertIsNone(data['SAP']['band_color'], "band colour found for NaN rating")

if __name__ == '__main__':
    unittest.main()
