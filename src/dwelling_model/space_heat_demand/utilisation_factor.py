#!/usr/bin/env python3

""" TODO Copyright & licensing notices

This module provides functions to calculate the utilisation factor for heat
gains and the reduction in internal temperature during heating off periods,
according to SAP 2012 Tables 9a and 9b.

Symbols and units:
    TMP -- thermal mass parameter, in kJ / (m2.K)
    HLP -- heat loss parameter, in W / (m2.K)
    H   -- heat transfer coefficient, in W / K
    Ti  -- internal temperature, in deg C
    Te  -- external temperature, in deg C
    G   -- total heat gains, in W
    R   -- responsiveness of the heating system, 0 to 1
    Th  -- temperature during heating periods, in deg C
    toff -- length of heating off period, in hours
"""

# Standard library imports
from math import isnan

# Gain-to-loss ratio is rounded to this many decimal places, to avoid
# instability when it is close to 1
GAMMA_DECIMAL_PLACES = 8


def calc_time_constant(TMP, HLP):
    """ Return time constant of the dwelling, in hours """
    return TMP / (3.6 * HLP)

def calc_utilisation_factor(TMP, HLP, H, Ti, Te, G):
    """ Return the utilisation factor for heat gains

    The utilisation factor is (1 - gamma^a) / (1 - gamma^(a+1)), where gamma is
    the ratio of gains to losses and a = 1 + tau / 15, with the limit value
    a / (a + 1) where gamma is exactly 1. Where gamma is greater than 1 the
    equivalent form (gamma^-a - 1) / (gamma^-a - gamma) is evaluated, so that
    large exponents do not overflow.

    Returns 0 where there are no positive gains or no positive losses, where
    HLP is not positive, and where the result is not a number.
    """
    if not HLP > 0:
        return 0.0

    tau = calc_time_constant(TMP, HLP)
    a = 1.0 + tau / 15.0

    L = H * (Ti - Te)
    if not (G > 0 and L > 0):
        return 0.0

    gamma = round(G / L, GAMMA_DECIMAL_PLACES)

    if gamma <= 0:
        eta = 0.0
    elif gamma == 1.0:
        eta = a / (a + 1.0)
    elif gamma < 1.0:
        eta = (1.0 - gamma ** a) / (1.0 - gamma ** (a + 1.0))
    else:
        gamma_neg_a = gamma ** -a
        eta = (gamma_neg_a - 1.0) / (gamma_neg_a - gamma)

    if isnan(eta):
        return 0.0
    return eta

def calc_temperature_reduction(TMP, HLP, H, Ti, Te, G, R, Th, toff):
    """ Return reduction in mean internal temperature during an off period, in K

    Set-back temperature Tsc = (1 - R)(Th - 2) + R(Te + eta G / H), and the
    characteristic time tc = 4 + 0.25 tau. Reduction is
    0.5 toff^2 (Th - Tsc) / (24 tc) where toff <= tc, otherwise
    (Th - Tsc)(toff - 0.5 tc) / 24.

    Returns 0 where HLP is not positive, H is zero or the result is not a number.
    """
    if not HLP > 0 or H == 0:
        return 0.0

    tau = calc_time_constant(TMP, HLP)
    eta = calc_utilisation_factor(TMP, HLP, H, Ti, Te, G)
    tc = 4.0 + 0.25 * tau

    Tsc = (1.0 - R) * (Th - 2.0) + R * (Te + eta * G / H)

    if toff <= tc:
        u = 0.5 * toff ** 2 * (Th - Tsc) / (24.0 * tc)
    else:
        u = (Th - Tsc) * (toff - 0.5 * tc) / 24.0

    if isnan(u):
        return 0.0
    return u
