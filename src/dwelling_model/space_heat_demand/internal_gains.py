#!/usr/bin/env python3

""" TODO Copyright & licensing notices

This module provides the calculation stages for internal gains and energy
requirements from lighting, electrical appliances and cooking, according to
SAP 2012 Appendix L, and from a user-defined list of appliances.
"""

# Standard library imports
from math import cos, pi

# Local imports
import dwelling_model.monthly as monthly
import dwelling_model.units as units
from dwelling_model.defaults import add_defaults
from dwelling_model.categories import \
    GainCategory, RequirementType, set_gains, set_requirement

LAC_DEFAULTS = {
    'LAC': {
        'LLE': 1,
        'L': 1,
        'reduced_internal_heat_gains': False,
        },
    }

APPLIANCELIST_DEFAULTS = {
    'appliancelist': {
        'list': [],
        },
    }

# Added to an empty appliance list, rather than via the defaults template, so
# that no default name, power or hours is ever merged onto a user's appliance
DEFAULT_APPLIANCE = {'name': 'LED Light', 'power': 6, 'hours': 12}

# Proportion of lighting and appliance energy that becomes internal heat gain
FRACTION_TO_GAINS = 0.85

# Constants for the seasonal variation of energy use, from SAP 2012 (L2, L10)
LIGHTING_BASELINE_COEFF = 59.73
LIGHTING_SCALE = 0.5
LIGHTING_SHIFT = 0.2
LIGHTING_REDUCTION = 0.4
APPLIANCES_BASELINE_COEFF = 207.8
APPLIANCES_SCALE = 0.157
APPLIANCES_SHIFT = 1.78
APPLIANCES_REDUCTION = 0.67

# Threshold of glazing ratio (GL) above which the daylighting correction is constant
GL_THRESHOLD = 0.095


class SeasonalEnergyProfile:
    """ An object to represent energy use that varies with a cosine profile over the year """

    def __init__(self, annual_baseline, scale, shift, reduction=1.0):
        """ Construct a SeasonalEnergyProfile object

        Arguments:
        annual_baseline -- annual energy use before seasonal variation, in kWh
        scale           -- amplitude of the seasonal variation, as a fraction of baseline
        shift           -- phase shift of the seasonal variation, in months
        reduction       -- factor applied to heat gains (1 for standard gains)
        """
        self.__annual_baseline = annual_baseline
        self.__scale = scale
        self.__shift = shift
        self.__reduction = reduction

    def energy_monthly(self):
        """ Return list of energy use for each month, in kWh """
        return [
            self.__annual_baseline
            * (1.0 + self.__scale * cos(2.0 * pi * (m - self.__shift) / 12.0))
            * n_days / units.days_per_year
            for m, n_days in enumerate(units.days_in_month)
            ]

    def gains_monthly(self):
        """ Return list of mean heat gains for each month, in W """
        return [
            units.kWh_per_month_to_watts(energy, m) * FRACTION_TO_GAINS * self.__reduction
            for m, energy in enumerate(self.energy_monthly())
            ]


def daylighting_correction(GL):
    """ Return correction factor for lighting energy use due to daylighting """
    if GL <= GL_THRESHOLD:
        return 52.2 * GL ** 2 - 9.94 * GL + 1.433
    return 0.96

def LAC(data, datasets):
    """ Calculate gains and energy requirements for lighting, appliances and cooking

    Gains and requirements are only registered where use_LAC is set.
    """
    add_defaults(data, LAC_DEFAULTS)
    lac = data['LAC']
    N = data['occupancy']
    reduced_gains = lac['reduced_internal_heat_gains']

    X = (data['TFA'] * N) ** 0.4714
    lac['EB'] = LIGHTING_BASELINE_COEFF * X

    # Lighting, skipped if there are no fixed lighting outlets
    if lac['L'] != 0:
        lac['C1'] = 1.0 - 0.5 * lac['LLE'] / lac['L']
        lac['C2'] = daylighting_correction(data['GL'])
        lac['EL'] = lac['EB'] * lac['C1'] * lac['C2']

        lighting = SeasonalEnergyProfile(
            lac['EL'],
            LIGHTING_SCALE,
            LIGHTING_SHIFT,
            LIGHTING_REDUCTION if reduced_gains else 1.0,
            )
        lighting_energy = sum(lighting.energy_monthly())
        if data['use_LAC']:
            set_gains(data, GainCategory.LIGHTING, lighting.gains_monthly())
            if lighting_energy > 0:
                set_requirement(data, RequirementType.LIGHTING, 'Lighting', lighting_energy)

    # Electrical appliances
    appliances = SeasonalEnergyProfile(
        APPLIANCES_BASELINE_COEFF * X,
        APPLIANCES_SCALE,
        APPLIANCES_SHIFT,
        APPLIANCES_REDUCTION if reduced_gains else 1.0,
        )
    lac['EA'] = sum(appliances.energy_monthly())
    if data['use_LAC']:
        set_gains(data, GainCategory.APPLIANCES, appliances.gains_monthly())
        if lac['EA'] > 0:
            set_requirement(data, RequirementType.APPLIANCES, 'Appliances', lac['EA'])

    # Cooking gains, in W
    if reduced_gains:
        lac['GC'] = 23.0 + 5.0 * N
    else:
        lac['GC'] = 35.0 + 7.0 * N
    lac['EC'] = units.watts_to_kWh_per_year(lac['GC'])
    if data['use_LAC']:
        set_gains(data, GainCategory.COOKING, monthly.constant(lac['GC']))
        if lac['GC'] > 0:
            set_requirement(data, RequirementType.COOKING, 'Cooking', lac['EC'])

def appliancelist(data, datasets):
    """ Calculate energy use and gains from a list of appliances

    Each appliance has power (in W) and hours of use per day. Where
    use_appliancelist is set, these replace the appliance gains and energy
    requirement calculated by the LAC stage.
    """
    add_defaults(data, APPLIANCELIST_DEFAULTS)
    applist = data['appliancelist']

    if len(applist['list']) == 0:
        applist['list'].append(dict(DEFAULT_APPLIANCE))

    totalwh = 0.0
    for appliance in applist['list']:
        appliance['energy'] = appliance['power'] * appliance['hours']
        totalwh += appliance['energy']

    applist['totalwh'] = totalwh
    applist['annualkwh'] = totalwh * units.days_per_year / units.W_per_kW
    applist['gains_W'] = totalwh / units.hours_per_day
    applist['gains_W_monthly'] = monthly.constant(applist['gains_W'])

    if data['use_appliancelist']:
        set_gains(data, GainCategory.APPLIANCES, applist['gains_W_monthly'])
        if applist['annualkwh'] > 0:
            set_requirement(data, RequirementType.APPLIANCES, 'Appliances', applist['annualkwh'])
