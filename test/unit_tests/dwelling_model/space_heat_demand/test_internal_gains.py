#!/usr/bin/env python3

""" TODO Copyright & licensing notices

This module contains unit tests for the internal_gains module
"""

# Standard library imports
import unittest

# Set path to include modules to be tested (must be before local imports)
from unit_tests.common import test_setup
test_setup()

# Local imports
from dwelling_model.space_heat_demand.internal_gains import \
    SeasonalEnergyProfile, daylighting_correction, LAC, appliancelist
from dwelling_model.datasets import Datasets

def new_record():
    return {
        'TFA': 100.0,
        'occupancy': 2.5,
        'GL': 0.1,
        'use_LAC': True,
        'use_appliancelist': False,
        'gains_W': {},
        'energy_requirements': {},
        }

class TestSeasonalEnergyProfile(unittest.TestCase):
    """ Unit tests for SeasonalEnergyProfile class """

    def test_flat_profile(self):
        profile = SeasonalEnergyProfile(365.0, 0.0, 0.0)
        days = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
        for m, (energy, gain) in enumerate(zip(profile.energy_monthly(), profile.gains_monthly())):
            with self.subTest(month=m):
                self.assertAlmostEqual(energy, float(days[m]), msg="incorrect monthly energy")
                self.assertAlmostEqual(gain, 1000.0 / 24.0 * 0.85, msg="incorrect monthly gain")

    def test_seasonal_profile(self):
        energy = SeasonalEnergyProfile(1000.0, 0.5, 0.2).energy_monthly()
        self.assertGreater(energy[0] / 31.0, energy[6] / 31.0, "winter use not above summer use")

    def test_reduction(self):
        standard = SeasonalEnergyProfile(1000.0, 0.5, 0.2).gains_monthly()
        reduced = SeasonalEnergyProfile(1000.0, 0.5, 0.2, 0.4).gains_monthly()
        self.assertAlmostEqual(reduced[0], 0.4 * standard[0], msg="reduction not applied to gains")

    def test_daylighting_correction(self):
        self.assertAlmostEqual(daylighting_correction(0.0), 1.433, msg="incorrect correction with no glazing")
        self.assertEqual(daylighting_correction(0.2), 0.96, "incorrect correction above threshold")


class TestLAC(unittest.TestCase):
    """ Unit tests for lighting, appliances and cooking stage """

    def setUp(self):
        self.datasets = Datasets.load_default()
        self.data = new_record()

    def test_lac(self):
        LAC(self.data, self.datasets)
        lac = self.data['LAC']
        X = (100.0 * 2.5) ** 0.4714
        self.assertAlmostEqual(lac['EB'], 59.73 * X, msg="incorrect baseline lighting energy")
        self.assertEqual(lac['C1'], 0.5, "incorrect low energy lighting correction")
        self.assertEqual(lac['C2'], 0.96, "incorrect daylighting correction")
        self.assertAlmostEqual(lac['EL'], lac['EB'] * 0.48, msg="incorrect lighting energy")
        self.assertAlmostEqual(
            self.data['energy_requirements']['lighting']['quantity'],
            lac['EL'],
            delta=0.01 * lac['EL'],
            msg="incorrect lighting requirement",
            )
        self.assertAlmostEqual(
            self.data['energy_requirements']['appliances']['quantity'],
            lac['EA'],
            msg="incorrect appliances requirement",
            )
        self.assertEqual(lac['GC'], 52.5, "incorrect cooking gains")
        self.assertAlmostEqual(lac['EC'], 52.5 * 8.76, msg="incorrect cooking energy")
        self.assertEqual(self.data['gains_W']['cooking'], [52.5] * 12, "cooking gains not registered")
        for category in ('lighting', 'appliances'):
            with self.subTest(category=category):
                self.assertEqual(len(self.data['gains_W'][category]), 12, "gains not registered")

    def test_reduced_gains(self):
        self.data['LAC'] = {'reduced_internal_heat_gains': True}
        LAC(self.data, self.datasets)
        self.assertEqual(self.data['LAC']['GC'], 35.5, "incorrect reduced cooking gains")

    def test_no_lighting_outlets(self):
        self.data['LAC'] = {'L': 0}
        LAC(self.data, self.datasets)
        self.assertNotIn('EL', self.data['LAC'], "lighting calculated with no outlets")
        self.assertNotIn('lighting', self.data['gains_W'], "lighting gains registered with no outlets")
        self.assertIn('appliances', self.data['gains_W'], "appliance gains not registered")

    def test_lac_not_used(self):
        self.data['use_LAC'] = False
        LAC(self.data, self.datasets)
        self.assertEqual(self.data['gains_W'], {}, "gains registered where LAC not used")
        self.assertEqual(self.data['energy_requirements'], {}, "requirements registered where LAC not used")
        self.assertIn('EA', self.data['LAC'], "appliance energy not calculated")


class TestApplianceList(unittest.TestCase):
    """ Unit tests for appliance list stage """

    def setUp(self):
        self.datasets = Datasets.load_default()
        self.data = new_record()

    def test_default_appliance(self):
        appliancelist(self.data, self.datasets)
        applist = self.data['appliancelist']
        self.assertEqual(
            applist['list'],
            [{'name': 'LED Light', 'power': 6, 'hours': 12, 'energy': 72}],
            "default appliance not added to empty list",
            )
        self.assertEqual(applist['totalwh'], 72.0, "incorrect total daily energy")
        self.assertAlmostEqual(applist['annualkwh'], 26.28, msg="incorrect annual energy")
        self.assertEqual(applist['gains_W'], 3.0, "incorrect gains")
        self.assertEqual(self.data['gains_W'], {}, "gains registered where appliance list not used")

    def test_appliance_list(self):
        self.data['use_appliancelist'] = True
        self.data['appliancelist'] = {'list': [
            {'name': 'Fridge', 'power': 100, 'hours': 2},
            {'name': 'Kettle', 'power': 2000, 'hours': 0.5},
            ]}
        appliancelist(self.data, self.datasets)
        applist = self.data['appliancelist']
        self.assertEqual(len(applist['list']), 2, "default appliance added to non-empty list")
        self.assertEqual(applist['totalwh'], 1200.0, "incorrect total daily energy")
        self.assertEqual(self.data['gains_W']['appliances'], [50.0] * 12, "appliance gains not registered")
        self.assertAlmostEqual(
            self.data['energy_requirements']['appliances']['quantity'],
            438.0,
            msg="appliance requirement not registered",
            )

if __name__ == '__main__':
    unittest.main()
