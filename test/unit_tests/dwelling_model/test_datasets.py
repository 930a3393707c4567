#!/usr/bin/env python3

""" TODO Copyright & licensing notices

This module contains unit tests for the datasets module
"""

# Standard library imports
import unittest

# Set path to include modules to be tested (must be before local imports)
from unit_tests.common import test_setup
test_setup()

# Local imports
from dwelling_model.datasets import \
    Datasets, REGIONS, TABLE_U1, TABLE_U2, TABLE_U3, TABLE_U4, TABLE_U5, \
    SOLAR_DECLINATION, TABLE_1C, TABLE_1D, TABLE_H4

class TestTables(unittest.TestCase):
    """ Unit tests for shape of the built-in tables """

    def test_region_tables(self):
        n_regions = len(REGIONS)
        self.assertEqual(n_regions, 22, "incorrect number of regions")
        for name, table in (('U1', TABLE_U1), ('U2', TABLE_U2), ('U3', TABLE_U3)):
            with self.subTest(table=name):
                self.assertEqual(len(table), n_regions, "table does not cover all regions")
                for row in table:
                    self.assertEqual(len(row), 12, "table row does not cover all months")
        self.assertEqual(len(TABLE_U4), n_regions, "latitudes do not cover all regions")

    def test_monthly_tables(self):
        for name, table in (
                ('declination', SOLAR_DECLINATION),
                ('1c', TABLE_1C),
                ('1d', TABLE_1D),
                ('H4', TABLE_H4),
                ):
            with self.subTest(table=name):
                self.assertEqual(len(table), 12, "table does not cover all months")

    def test_solar_flux_constants(self):
        self.assertEqual(len(TABLE_U5), 9, "incorrect number of constants")
        for row in TABLE_U5:
            self.assertEqual(len(row), 5, "constants do not cover all orientations")


class TestDatasets(unittest.TestCase):
    """ Unit tests for Datasets class """

    def setUp(self):
        self.datasets = Datasets.load_default()

    def test_fuels(self):
        fuels = self.datasets.fuels()
        self.assertEqual(
            fuels['gas'],
            {
                'name': 'Mains gas',
                'fuelcost': 0.043,
                'standingcharge': 0.0,
                'co2factor': 0.216,
                'primaryenergyfactor': 1.22,
            },
            "incorrect properties for mains gas",
            )
        for code in ('oil', 'wood', 'electric', 'greenelectric', 'electric-high', 'electric-low'):
            with self.subTest(code=code):
                self.assertIn(code, fuels, "fuel missing from default data")

    def test_fuels_are_copies(self):
        fuels = self.datasets.fuels()
        fuels['gas']['fuelcost'] = 99.0
        self.assertEqual(self.datasets.fuels()['gas']['fuelcost'], 0.043, "fuel data modified via copy")

    def test_energy_system(self):
        self.assertEqual(
            self.datasets.energy_system('gasboiler'),
            {'name': 'Gas boiler', 'efficiency': 0.9, 'fuel': 'gas'},
            "incorrect gas boiler",
            )
        self.assertEqual(
            self.datasets.energy_system('heatpump')['efficiency'],
            3.0,
            "incorrect heat pump efficiency",
            )
        self.assertIsNone(self.datasets.energy_system('fusionreactor'), "unknown system found")

    def test_energy_system_fuels_known(self):
        """ Every bundled energy system refers to a bundled fuel """
        fuels = self.datasets.fuels()
        for code in ('gasboiler', 'oilboiler', 'woodstove', 'electricimmersion', 'greenheatpump'):
            with self.subTest(code=code):
                self.assertIn(self.datasets.energy_system(code)['fuel'], fuels, "unknown fuel")

    def test_rating_bands(self):
        bands = self.datasets.rating_bands()
        self.assertEqual([b['letter'] for b in bands], list('ABCDEFG'), "incorrect band order")
        self.assertEqual(bands[0]['start'], 92, "incorrect start of band A")
        self.assertEqual(bands[-1]['start'], 1, "incorrect start of band G")
        for upper, lower in zip(bands, bands[1:]):
            with self.subTest(band=lower['letter']):
                self.assertEqual(lower['end'] + 1, upper['start'], "bands not contiguous")

    def test_climate_lookups(self):
        self.assertEqual(self.datasets.external_temperature(0)[0], 4.5, "incorrect January temperature")
        self.assertEqual(self.datasets.wind_speed(0)[0], 5.4, "incorrect January wind speed")
        self.assertEqual(self.datasets.horizontal_irradiance(0)[5], 201, "incorrect June irradiance")
        self.assertEqual(self.datasets.latitude(0), 53.4, "incorrect latitude")
        self.assertEqual(self.datasets.solar_declination(5), 23.1, "incorrect June declination")
        with self.assertRaises(IndexError):
            self.datasets.external_temperature(len(REGIONS))

if __name__ == '__main__':
    unittest.main()
