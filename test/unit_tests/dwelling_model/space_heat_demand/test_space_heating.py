#!/usr/bin/env python3

""" TODO Copyright & licensing notices

This module contains unit tests for the space_heating module
"""

# Standard library imports
import unittest

# Set path to include modules to be tested (must be before local imports)
from unit_tests.common import test_setup
test_setup()

# Local imports
from dwelling_model.space_heat_demand.space_heating import monthly_W_to_kWh, space_heating
from dwelling_model.datasets import Datasets

class TestSpaceHeating(unittest.TestCase):
    """ Unit tests for space heating calculation stage """

    def setUp(self):
        self.datasets = Datasets.load_default()
        self.data = {
            'TFA': 100.0,
            'TMP': 250.0,
            'losses_WK': {'fabric': [100.0] * 12},
            'gains_W': {},
            'energy_requirements': {},
            'internal_temperature': [20.0] * 12,
            'external_temperature': [10.0] * 12,
            }

    def test_monthly_W_to_kWh(self):
        self.assertEqual(
            monthly_W_to_kWh([1000.0] * 12),
            [24.0 * n for n in (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)],
            "incorrect conversion of monthly power to energy",
            )

    def test_heating_without_gains(self):
        space_heating(self.data, self.datasets)
        heating = self.data['space_heating']
        self.assertEqual(heating['delta_T'], [10.0] * 12, "incorrect temperature difference")
        self.assertEqual(heating['heat_demand'], [1000.0] * 12, "incorrect heat demand")
        self.assertEqual(heating['cooling_demand'], [0.0] * 12, "non-zero cooling demand")
        self.assertAlmostEqual(heating['annual_heating_demand'], 8760.0, msg="incorrect annual heating demand")
        self.assertEqual(
            self.data['energy_requirements']['space_heating'],
            {'name': 'Space Heating', 'quantity': heating['annual_heating_demand']},
            "heating requirement not registered",
            )
        self.assertNotIn('space_cooling', self.data['energy_requirements'], "cooling requirement registered")
        self.assertAlmostEqual(self.data['fabric_energy_efficiency'], 87.6, msg="incorrect FEE")

    def test_utilisation_of_gains(self):
        self.data['gains_W'] = {'solar': [500.0] * 12}
        space_heating(self.data, self.datasets)
        heating = self.data['space_heating']
        for m in range(12):
            with self.subTest(month=m):
                eta = heating['utilisation_factor'][m]
                self.assertGreater(eta, 0.0, "utilisation factor not positive")
                self.assertLess(eta, 1.0, "utilisation factor not less than 1")
                self.assertAlmostEqual(heating['useful_gains'][m], 500.0 * eta, msg="incorrect useful gains")
                self.assertAlmostEqual(
                    heating['heat_demand'][m],
                    1000.0 - 500.0 * eta,
                    msg="incorrect heat demand",
                    )

    def test_cooling(self):
        self.data['gains_W'] = {'solar': [1500.0] * 12}
        self.data['space_heating'] = {'use_utilfactor_forgains': False}
        space_heating(self.data, self.datasets)
        heating = self.data['space_heating']
        self.assertEqual(heating['useful_gains'], [1500.0] * 12, "gains not used in full")
        self.assertEqual(heating['heat_demand'], [0.0] * 12, "non-zero heat demand")
        self.assertEqual(heating['cooling_demand'], [500.0] * 12, "incorrect cooling demand")
        self.assertAlmostEqual(heating['annual_cooling_demand'], 4380.0, msg="incorrect annual cooling demand")
        self.assertIn('space_cooling', self.data['energy_requirements'], "cooling requirement not registered")
        self.assertNotIn('space_heating', self.data['energy_requirements'], "heating requirement registered")

    def test_zero_floor_area(self):
        self.data['TFA'] = 0.0
        space_heating(self.data, self.datasets)
        self.assertEqual(self.data['fabric_energy_efficiency'], 0.0, "non-zero FEE with zero floor area")

    def test_zero_floor_area_gains_not_useful(self):
        self.data['TFA'] = 0.0
        self.data['gains_W'] = {'solar': [500.0] * 12}
        space_heating(self.data, self.datasets)
        heating = self.data['space_heating']
        self.assertEqual(heating['utilisation_factor'], [0.0] * 12, "non-zero utilisation factor")
        self.assertEqual(heating['heat_demand'], [1000.0] * 12, "gains offset demand with zero floor area")

if __name__ == '__main__':
    unittest.main()
