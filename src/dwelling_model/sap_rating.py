#!/usr/bin/env python3

""" TODO Copyright & licensing notices

This module provides the calculation stage for the energy rating on the 1 to
100 scale, from the energy cost factor (SAP 2012 section 13), and the lookup
of the rating band.
"""

# Standard library imports
from math import floor, isnan, log10

ENERGY_COST_DEFLATOR = 0.42

# Added to total floor area when calculating the energy cost factor, in m2
FLOOR_AREA_OFFSET = 45.0

# Energy cost factor at and above which the logarithmic formula applies. Note
# that the two formulae do not meet exactly at this value
ECF_THRESHOLD = 3.5


def energy_cost_factor(total_cost, total_floor_area):
    """ Return energy cost factor from annual energy cost and total floor area (m2) """
    return total_cost * ENERGY_COST_DEFLATOR / (total_floor_area + FLOOR_AREA_OFFSET)

def rating_from_ecf(ecf):
    """ Return energy rating for the given energy cost factor """
    if ecf >= ECF_THRESHOLD:
        return 117.0 - 121.0 * log10(ecf)
    return 100.0 - 13.95 * ecf

def rating_band(rating, bands):
    """ Return the band (letter, start, end, color) for a rating

    Ratings are rounded to the nearest integer before lookup. Ratings above
    the top band fall in the top band, and ratings below the bottom band fall
    in the bottom band. Returns None if the rating is not a number.

    Arguments:
    rating -- energy rating
    bands  -- list of rating bands, ordered from best to worst
    """
    if isnan(rating):
        return None
    rounded = floor(rating + 0.5)
    for band in bands:
        if rounded >= band['start']:
            return band
    return bands[-1]

def SAP(data, datasets):
    """ Calculate energy cost factor, energy rating and rating band """
    sap = {}
    sap['energy_cost_deflator'] = ENERGY_COST_DEFLATOR
    sap['energy_cost_factor'] = energy_cost_factor(data['total_cost'], data['TFA'])
    sap['rating'] = rating_from_ecf(sap['energy_cost_factor'])

    band = rating_band(sap['rating'], datasets.rating_bands())
    sap['band'] = band['letter'] if band is not None else None
    sap['band_color'] = band['color'] if band is not None else None

    data['SAP'] = sap
