#!/usr/bin/env python3

""" TODO Copyright & licensing notices

This module contains common unit conversions for use by other modules.
"""

W_per_kW = 1000
seconds_per_hour = 3600
hours_per_day = 24
days_per_year = 365

# Number of days in each month, January first (SAP Table 1a)
days_in_month = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

def watt_days_to_kWh(watt_days):
    """ Convert an energy in watt-days to kWh """
    return watt_days * hours_per_day / W_per_kW

def watts_to_kWh_per_year(watts):
    """ Convert a constant power in W to an annual energy in kWh """
    return watt_days_to_kWh(watts * days_per_year)

def kWh_per_month_to_watts(energy_kWh, month):
    """ Convert an energy in kWh over a month to the mean power in W

    Arguments:
    energy_kWh -- energy over the month, in kWh
    month      -- month index, 0 (January) to 11 (December)
    """
    return energy_kWh * W_per_kW / (days_in_month[month] * hours_per_day)

def average_monthly_to_annual(list_monthly_averages):
    """ Calculate annual average from list of monthly averages, weighted by days in month """
    assert len(list_monthly_averages) == len(days_in_month)
    return sum(
        monthly_ave * n_days
        for monthly_ave, n_days in zip(list_monthly_averages, days_in_month)
        ) \
        / sum(days_in_month)
