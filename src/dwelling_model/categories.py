#!/usr/bin/env python3

""" TODO Copyright & licensing notices

This module defines the closed sets of heat loss categories, heat gain
categories and energy requirement types that calculation stages may register
in the assessment record, and the functions used to register and total them.

The record holds the enum values (strings) as keys so that it remains
JSON-serialisable:
    data['losses_WK'][category]          -- month vector of heat loss coefficients, in W/K
    data['gains_W'][category]            -- month vector of heat gains, in W
    data['energy_requirements'][req_type] -- {'name': ..., 'quantity': annual kWh}
"""

# Standard library imports
from enum import Enum

# Local imports
import dwelling_model.monthly as monthly


class LossCategory(Enum):
    FABRIC = 'fabric'
    VENTILATION = 'ventilation'


class GainCategory(Enum):
    SOLAR = 'solar'
    LIGHTING = 'lighting'
    APPLIANCES = 'appliances'
    COOKING = 'cooking'
    WATER_HEATING = 'waterheating'


class RequirementType(Enum):
    SPACE_HEATING = 'space_heating'
    SPACE_COOLING = 'space_cooling'
    WATER_HEATING = 'waterheating'
    LIGHTING = 'lighting'
    APPLIANCES = 'appliances'
    COOKING = 'cooking'
    SOLAR = 'solarpv'
    WIND = 'wind'
    HYDRO = 'hydro'
    SOLAR_PV = 'solarpv2'


def set_losses(data, category, heat_loss_coeffs):
    """ Register the month vector of heat loss coefficients (W/K) for a loss category """
    if not isinstance(category, LossCategory):
        raise TypeError('Not a heat loss category: ' + repr(category))
    if len(heat_loss_coeffs) != monthly.MONTHS:
        raise ValueError('Heat loss for ' + category.value + ' must have 12 monthly values')
    data['losses_WK'][category.value] = list(heat_loss_coeffs)

def set_gains(data, category, gains):
    """ Register the month vector of heat gains (W) for a gain category """
    if not isinstance(category, GainCategory):
        raise TypeError('Not a heat gain category: ' + repr(category))
    if len(gains) != monthly.MONTHS:
        raise ValueError('Heat gains for ' + category.value + ' must have 12 monthly values')
    data['gains_W'][category.value] = list(gains)

def set_requirement(data, req_type, name, quantity):
    """ Register an annual energy requirement (kWh/year, negative for generation) """
    if not isinstance(req_type, RequirementType):
        raise TypeError('Not an energy requirement type: ' + repr(req_type))
    data['energy_requirements'][req_type.value] = {'name': name, 'quantity': quantity}

def total_losses(data):
    """ Return month vector of total heat loss coefficient (W/K) over all loss categories """
    return monthly.sum_vectors(data['losses_WK'].values())

def total_gains(data):
    """ Return month vector of total heat gains (W) over all gain categories """
    return monthly.sum_vectors(data['gains_W'].values())
