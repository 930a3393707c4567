#!/usr/bin/env python3

""" TODO Copyright & licensing notices

This module provides helper functions for month vectors, i.e. lists of twelve
values (one per calendar month, January first). All arithmetic between month
vectors is element-wise and the result is always a plain list, so that month
vectors can be stored in the assessment record and serialised as JSON.
"""

# Third-party imports
import numpy as np

MONTHS = 12

# Months treated as summer for access factors and primary circuit losses
# (June to September, where January is month 0)
SUMMER_MONTHS = range(5, 9)


def is_summer(month):
    """ Return True if month index (0 to 11) is a summer month """
    return month in SUMMER_MONTHS

def zeros():
    """ Return a month vector of zeros """
    return [0.0] * MONTHS

def constant(value):
    """ Return a month vector with the same value in every month """
    return [value] * MONTHS

def _as_array(vector):
    arr = np.asarray(vector, dtype=float)
    if arr.shape != (MONTHS,):
        raise ValueError('Month vector must have exactly 12 values, got shape ' + str(arr.shape))
    return arr

def add(a, b):
    """ Element-wise sum of two month vectors """
    return (_as_array(a) + _as_array(b)).tolist()

def sub(a, b):
    """ Element-wise difference of two month vectors """
    return (_as_array(a) - _as_array(b)).tolist()

def mul(a, b):
    """ Element-wise product of two month vectors """
    return (_as_array(a) * _as_array(b)).tolist()

def scale(vector, factor):
    """ Multiply every value of a month vector by a scalar """
    return (_as_array(vector) * factor).tolist()

def sum_vectors(vectors):
    """ Sum any number of month vectors element-wise

    Arguments:
    vectors -- iterable of month vectors; an empty iterable gives a vector of zeros
    """
    arrays = [_as_array(v) for v in vectors]
    if len(arrays) == 0:
        return zeros()
    return np.sum(arrays, axis=0).tolist()

def mean(vector):
    """ Arithmetic mean of the twelve values of a month vector """
    return float(np.mean(_as_array(vector)))
