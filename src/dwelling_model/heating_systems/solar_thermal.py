#!/usr/bin/env python3

""" TODO Copyright & licensing notices

This module contains objects that represent solar water heating systems.
Method from SAP 2012 Appendix H.
"""

# Standard library imports
from math import exp, log

# Local imports
import dwelling_model.units as units
from dwelling_model.defaults import add_defaults

SHW_DEFAULTS = {
    'SHW': {
        'A': 1.25,
        'n0': 0.599,
        'a1': 2.772,
        'a2': 0.009,
        'inclination': 35,
        'orientation': 4,
        'overshading': 1.0,
        'Vs': 75,
        'combined_cylinder_volume': 0,
        },
    }

# Collector performance ratio at which the performance factor formula changes
PERFORMANCE_RATIO_THRESHOLD = 20.0

# Fraction of the non-dedicated part of a combined cylinder counted as solar storage
COMBINED_CYLINDER_FRACTION = 0.3


class SolarWaterHeating:
    """ An object to represent a solar water heating system """

    def __init__(
            self,
            aperture_area,
            zero_loss_efficiency,
            linear_hlc,
            second_order_hlc,
            inclination,
            orientation,
            overshading,
            dedicated_solar_volume,
            combined_cylinder_volume,
            ext_cond,
            ):
        """ Construct a SolarWaterHeating object

        Arguments:
        aperture_area            -- aperture area of collector, in m2
        zero_loss_efficiency     -- zero-loss collector efficiency (n0)
        linear_hlc               -- collector linear heat loss coefficient (a1), in W / (m2.K)
        second_order_hlc         -- collector second order heat loss coefficient (a2),
                                    in W / (m2.K2)
        inclination              -- tilt of collector from horizontal, in degrees
        orientation              -- orientation code of collector, 0 (North) to 4 (South)
        overshading              -- overshading factor, from SAP 2012 Table H2
        dedicated_solar_volume   -- dedicated solar storage volume (Vs), in litres
        combined_cylinder_volume -- volume of combined cylinder, in litres (0 if none)
        ext_cond                 -- reference to ExternalConditions object
        """
        self.__aperture_area = aperture_area
        self.__zero_loss_efficiency = zero_loss_efficiency
        self.__linear_hlc = linear_hlc
        self.__second_order_hlc = second_order_hlc
        self.__inclination = inclination
        self.__orientation = orientation
        self.__overshading = overshading
        self.__dedicated_solar_volume = dedicated_solar_volume
        self.__combined_cylinder_volume = combined_cylinder_volume
        self.__ext_cond = ext_cond

    def heat_loss_coefficient(self):
        """ Return the collector heat loss coefficient (a), in W / (m2.K) """
        return 0.892 * (self.__linear_hlc + 45.0 * self.__second_order_hlc)

    def collector_performance_ratio(self):
        return self.heat_loss_coefficient() / self.__zero_loss_efficiency

    def annual_solar_radiation(self):
        """ Return annual solar radiation on the collector, in kWh/m2 """
        return self.__ext_cond.annual_solar_radiation(self.__orientation, self.__inclination)

    def solar_energy_available(self):
        """ Return annual solar energy available, in kWh """
        return self.__aperture_area * self.__zero_loss_efficiency \
            * self.annual_solar_radiation() * self.__overshading

    def solar_load_ratio(self, annual_energy_content):
        """ Return ratio of solar energy available to hot water energy content

        Arguments:
        annual_energy_content -- annual energy content of hot water used, in kWh
        """
        if annual_energy_content <= 0:
            return 0.0
        return self.solar_energy_available() / annual_energy_content

    def utilisation_factor(self, solar_load_ratio):
        if solar_load_ratio > 0:
            return 1.0 - exp(-1.0 / solar_load_ratio)
        return 0.0

    def collector_performance_factor(self):
        ratio = self.collector_performance_ratio()
        if ratio < PERFORMANCE_RATIO_THRESHOLD:
            factor = 0.97 - 0.0367 * ratio + 0.0006 * ratio ** 2
        else:
            factor = 0.693 - 0.0108 * ratio
        return max(factor, 0.0)

    def effective_solar_volume(self):
        """ Return effective solar storage volume (Veff), in litres """
        if self.__combined_cylinder_volume > 0:
            return self.__dedicated_solar_volume + COMBINED_CYLINDER_FRACTION \
                * (self.__combined_cylinder_volume - self.__dedicated_solar_volume)
        return self.__dedicated_solar_volume

    def storage_volume_factor(self, volume_ratio):
        """ Return solar storage volume factor (f2), capped at 1

        Returns 0 where the volume ratio is not positive (no solar storage).
        """
        if volume_ratio <= 0:
            return 0.0
        return min(1.0 + 0.2 * log(volume_ratio), 1.0)

    def solar_input_monthly(self, annual_solar_input):
        """ Return list of solar input to hot water for each month, in kWh

        Values are negative as solar input reduces the output required from
        the water heater. The annual input is distributed in proportion to
        the solar radiation on the collector in each month.
        """
        radiation = self.__ext_cond.solar_radiation_monthly(self.__orientation, self.__inclination)
        average_radiation = sum(radiation) / len(radiation)
        if average_radiation == 0:
            return [0.0] * len(radiation)
        return [
            - annual_solar_input * (rad / average_radiation) * n_days / units.days_per_year
            for rad, n_days in zip(radiation, units.days_in_month)
            ]


def create_solar_water_heating(shw, ext_cond):
    """ Create SolarWaterHeating object from the SHW section of the assessment record """
    return SolarWaterHeating(
        shw['A'],
        shw['n0'],
        shw['a1'],
        shw['a2'],
        shw['inclination'],
        shw['orientation'],
        shw['overshading'],
        shw['Vs'],
        shw['combined_cylinder_volume'],
        ext_cond,
        )

def calc_solar_water_heating(data, ext_cond, annual_energy_content, Vd_average):
    """ Calculate solar input to hot water and record results in the SHW section

    Arguments:
    data                  -- assessment record
    ext_cond              -- reference to ExternalConditions object
    annual_energy_content -- annual energy content of hot water used, in kWh
    Vd_average            -- average daily hot water use, in litres

    Returns list of solar input for each month, in kWh (negative values).
    """
    add_defaults(data, SHW_DEFAULTS)
    shw = data['SHW']
    system = create_solar_water_heating(shw, ext_cond)

    shw['a'] = system.heat_loss_coefficient()
    shw['collector_performance_ratio'] = system.collector_performance_ratio()
    shw['annual_solar'] = system.annual_solar_radiation()
    shw['solar_energy_available'] = system.solar_energy_available()
    shw['solar_load_ratio'] = system.solar_load_ratio(annual_energy_content)
    shw['utilisation_factor'] = system.utilisation_factor(shw['solar_load_ratio'])
    shw['collector_performance_factor'] = system.collector_performance_factor()
    shw['Veff'] = system.effective_solar_volume()
    shw['volume_ratio'] = shw['Veff'] / Vd_average
    shw['f2'] = system.storage_volume_factor(shw['volume_ratio'])
    shw['Qs'] = shw['solar_energy_available'] * shw['utilisation_factor'] \
        * shw['collector_performance_factor'] * shw['f2']
    shw['Qs_monthly'] = system.solar_input_monthly(shw['Qs'])

    return shw['Qs_monthly']
