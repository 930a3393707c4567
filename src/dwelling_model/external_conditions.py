#!/usr/bin/env python3

""" TODO Copyright & licensing notices

This module provides object(s) to look up monthly data on external conditions
(e.g. external air temperature) for a climate region.

Calculation of solar radiation on a surface of a given orientation and tilt is
based on SAP 2012 Appendix U (U3.2 and U3.3).
"""

# Standard library imports
from math import cos, sin, radians

# Local imports
import dwelling_model.units as units


class ExternalConditions:
    """ An object to look up monthly external conditions for a climate region """

    def __init__(self, region, altitude, datasets):
        """ Construct an ExternalConditions object

        Arguments:
        region   -- index of climate region, into tables U1 to U4
        altitude -- altitude of the dwelling above sea level, in m
        datasets -- reference to Datasets object holding the climate tables
        """
        self.__region = region
        self.__altitude = altitude
        self.__datasets = datasets

    def air_temp_monthly(self):
        """ Return list of mean external air temperatures, in deg C, adjusted for altitude

        Temperature falls by 0.3 deg C for every 50 m of altitude.
        """
        altitude_adjustment = 0.3 * self.__altitude / 50.0
        return [
            temp - altitude_adjustment
            for temp in self.__datasets.external_temperature(self.__region)
            ]

    def wind_speed_monthly(self):
        """ Return list of mean wind speeds, in m/s """
        return list(self.__datasets.wind_speed(self.__region))

    def horizontal_irradiance_monthly(self):
        """ Return list of mean global irradiance on a horizontal plane, in W/m2 """
        return list(self.__datasets.horizontal_irradiance(self.__region))

    def latitude(self):
        return self.__datasets.latitude(self.__region)

    def solar_declination(self, month):
        return self.__datasets.solar_declination(month)

    def solar_radiation(self, orientation, tilt, month):
        """ Return mean solar irradiance on an inclined surface, in W/m2, for one month

        Arguments:
        orientation -- orientation code, 0 (North) to 4 (South), see Table U5
        tilt        -- inclination of the surface from horizontal, in degrees
        month       -- month index, 0 (January) to 11 (December)
        """
        k = self.__datasets.solar_flux_constants()

        sinp = sin(radians(tilt))
        sin2p = sinp * sinp
        sin3p = sin2p * sinp

        A = k[0][orientation] * sin3p + k[1][orientation] * sin2p + k[2][orientation] * sinp
        B = k[3][orientation] * sin3p + k[4][orientation] * sin2p + k[5][orientation] * sinp
        C = k[6][orientation] * sin3p + k[7][orientation] * sin2p + k[8][orientation] * sinp + 1.0

        cos1 = cos(radians(self.latitude() - self.solar_declination(month)))
        cos2 = cos1 * cos1

        # Rh-inc(orient, p, m) = A x cos2(lat - decl) + B x cos(lat - decl) + C
        rh_inc = A * cos2 + B * cos1 + C

        return self.__datasets.horizontal_irradiance(self.__region)[month] * rh_inc

    def solar_radiation_monthly(self, orientation, tilt):
        """ Return list of mean solar irradiance on an inclined surface, in W/m2 """
        return [
            self.solar_radiation(orientation, tilt, month)
            for month in range(len(units.days_in_month))
            ]

    def annual_solar_radiation(self, orientation, tilt):
        """ Return annual solar radiation on an inclined surface, in kWh/m2 """
        return sum(
            units.watt_days_to_kWh(n_days * rad)
            for n_days, rad in zip(units.days_in_month, self.solar_radiation_monthly(orientation, tilt))
            )
