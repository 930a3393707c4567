#!/usr/bin/env python3

""" TODO Copyright & licensing notices

This module provides the calculation stages for dwelling geometry (floor
areas and volumes) and for occupancy, which is estimated from total floor
area using the SAP 2012 Table 1b formula unless given explicitly.
"""

# Standard library imports
from math import exp

# Local imports
from dwelling_model.defaults import add_defaults

# Occupancy is 1 for dwellings with total floor area at or below this, in m2
MIN_AREA_FOR_OCCUPANCY_FORMULA = 13.9

FLOORS_DEFAULTS = {'floors': []}
OCCUPANCY_DEFAULTS = {
    'use_custom_occupancy': False,
    'custom_occupancy': 1,
    }


def calc_occupancy(total_floor_area):
    """ Return assumed number of occupants for a given total floor area, in m2 """
    if total_floor_area > MIN_AREA_FOR_OCCUPANCY_FORMULA:
        area_over_min = total_floor_area - MIN_AREA_FOR_OCCUPANCY_FORMULA
        return 1.0 \
            + 1.76 * (1.0 - exp(-0.000349 * area_over_min ** 2)) \
            + 0.0013 * area_over_min
    return 1.0

def floors(data, datasets):
    """ Calculate volume of each floor, and total floor area, volume and number of floors """
    add_defaults(data, FLOORS_DEFAULTS)

    for floor in data['floors']:
        floor['volume'] = floor['area'] * floor['height']
        data['TFA'] += floor['area']
        data['volume'] += floor['volume']
        data['num_of_floors'] += 1

def occupancy(data, datasets):
    """ Set number of occupants, either as given or estimated from total floor area """
    add_defaults(data, OCCUPANCY_DEFAULTS)

    if data['use_custom_occupancy']:
        data['occupancy'] = data['custom_occupancy']
    else:
        data['occupancy'] = calc_occupancy(data['TFA'])
