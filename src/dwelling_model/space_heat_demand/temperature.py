#!/usr/bin/env python3

""" TODO Copyright & licensing notices

This module provides the calculation stage for the mean internal temperature
of the dwelling in each month, according to SAP 2012 section 7 and Table 9c.

The living area and the rest of the dwelling are each heated to their own
target temperature, with reductions for the weekday and weekend heating off
periods. The mean internal temperature is the floor-area-weighted combination
of the two.
"""

# Standard library imports
from math import isnan

# Third-party imports
from loguru import logger

# Local imports
import dwelling_model.monthly as monthly
import dwelling_model.units as units
from dwelling_model.defaults import add_defaults
from dwelling_model.categories import total_losses, total_gains
from dwelling_model.external_conditions import ExternalConditions
from dwelling_model.space_heat_demand.utilisation_factor import \
    calc_utilisation_factor, calc_temperature_reduction

# Heating off periods, in hours, from SAP 2012 Table 9
OFF_PERIODS_WEEKDAY = (7, 8)
OFF_PERIODS_WEEKEND = (0, 8)
WEEKDAYS_PER_WEEK = 5
WEEKEND_DAYS_PER_WEEK = 2

# HLP used for rest of dwelling utilisation factor is capped at this value
MAX_HLP_REST_OF_DWELLING = 6.0


def temperature_defaults(data):
    return {
        'temperature': {
            'control_type': 1,
            'living_area': data['TFA'],
            'target': 21,
            'responsiveness': 1,
            },
        }

def rest_of_dwelling_target(control_type, Th, HLP):
    """ Return heating target temperature for rest of dwelling, in deg C

    Arguments:
    control_type -- heating control type, 1 to 3 (SAP 2012 Table 4e)
    Th           -- heating target temperature for living area, in deg C
    HLP          -- heat loss parameter, in W / (m2.K)
    """
    if control_type == 1:
        Th2 = Th - 0.5 * HLP
    elif control_type in (2, 3):
        Th2 = Th - HLP + HLP ** 2 / 12.0
    else:
        return Th

    if isnan(Th2):
        return Th
    return Th2

def mean_temperature_with_off_periods(TMP, HLP, H, Te, G, R, Th):
    """ Return mean temperature over a week, allowing for heating off periods, in deg C """
    def temp_for_off_periods(off_periods):
        reduction = sum(
            calc_temperature_reduction(TMP, HLP, H, Th, Te, G, R, Th, toff)
            for toff in off_periods
            )
        return Th - reduction

    temp_weekday = temp_for_off_periods(OFF_PERIODS_WEEKDAY)
    temp_weekend = temp_for_off_periods(OFF_PERIODS_WEEKEND)
    return (WEEKDAYS_PER_WEEK * temp_weekday + WEEKEND_DAYS_PER_WEEK * temp_weekend) \
        / (WEEKDAYS_PER_WEEK + WEEKEND_DAYS_PER_WEEK)

def temperature(data, datasets):
    """ Calculate mean internal and external temperature for each month """
    add_defaults(data, temperature_defaults(data))
    temp = data['temperature']

    R = temp['responsiveness']
    Th = temp['target']
    TMP = data['TMP']
    TFA = data['TFA']

    control_type = temp['control_type']
    if control_type not in (1, 2, 3):
        logger.warning('Unknown heating control type: {}', control_type)

    H = total_losses(data)
    G = total_gains(data)
    # HLP is taken as 0 with no floor area, as for the other per-area quantities
    HLP = [h / TFA if TFA > 0 else 0.0 for h in H]
    Te = ExternalConditions(data['region'], data['altitude'], datasets).air_temp_monthly()

    utilisation_factor_A = []
    utilisation_factor_B = []
    Ti_livingarea = []
    Ti_restdwelling = []
    for m in range(monthly.MONTHS):
        utilisation_factor_A.append(calc_utilisation_factor(TMP, HLP[m], H[m], Th, Te[m], G[m]))
        Ti_livingarea.append(
            mean_temperature_with_off_periods(TMP, HLP[m], H[m], Te[m], G[m], R, Th)
            )

        Th2 = rest_of_dwelling_target(control_type, Th, HLP[m])
        HLP_capped = min(HLP[m], MAX_HLP_REST_OF_DWELLING)
        utilisation_factor_B.append(calc_utilisation_factor(TMP, HLP_capped, H[m], Th2, Te[m], G[m]))
        Ti_restdwelling.append(
            mean_temperature_with_off_periods(TMP, HLP[m], H[m], Te[m], G[m], R, Th2)
            )

    fLA = temp['living_area'] / TFA if TFA > 0 else 0.0

    internal_temperature = [
        fLA * Ti_la + (1.0 - fLA) * Ti_rd
        for Ti_la, Ti_rd in zip(Ti_livingarea, Ti_restdwelling)
        ]

    temp['H'] = H
    temp['HLP'] = HLP
    temp['G'] = G
    temp['utilisation_factor_A'] = utilisation_factor_A
    temp['utilisation_factor_B'] = utilisation_factor_B
    temp['Ti_livingarea'] = Ti_livingarea
    temp['Ti_restdwelling'] = Ti_restdwelling
    temp['fLA'] = fLA
    temp['mean_internal_temperature'] = units.average_monthly_to_annual(internal_temperature)

    data['internal_temperature'] = internal_temperature
    data['external_temperature'] = Te
