#!/usr/bin/env python3

""" TODO Copyright & licensing notices

This module provides the calculation stage for space heating and space cooling
demand, from monthly heat losses (at the mean internal temperature) net of
useful heat gains.
"""

# Local imports
import dwelling_model.monthly as monthly
import dwelling_model.units as units
from dwelling_model.defaults import add_defaults
from dwelling_model.categories import \
    RequirementType, total_losses, total_gains, set_requirement
from dwelling_model.space_heat_demand.utilisation_factor import calc_utilisation_factor

SPACE_HEATING_DEFAULTS = {
    'space_heating': {
        'use_utilfactor_forgains': True,
        },
    }


def monthly_W_to_kWh(vector):
    """ Convert month vector of mean power in W to month vector of energy in kWh """
    return [
        units.watt_days_to_kWh(power * n_days)
        for power, n_days in zip(vector, units.days_in_month)
        ]

def space_heating(data, datasets):
    """ Calculate monthly and annual space heating and cooling demand """
    add_defaults(data, SPACE_HEATING_DEFAULTS)
    heating = data['space_heating']
    TFA = data['TFA']

    Ti = data['internal_temperature']
    Te = data['external_temperature']
    delta_T = monthly.sub(Ti, Te)
    H = total_losses(data)
    losses = monthly.mul(H, delta_T)
    gains = total_gains(data)

    # HLP is taken as 0 with no floor area, which makes no gains useful
    utilisation_factor = [
        calc_utilisation_factor(data['TMP'], H[m] / TFA if TFA > 0 else 0.0, H[m], Ti[m], Te[m], gains[m])
        for m in range(monthly.MONTHS)
        ]

    if heating['use_utilfactor_forgains']:
        useful_gains = monthly.mul(utilisation_factor, gains)
    else:
        useful_gains = list(gains)

    net_demand = monthly.sub(losses, useful_gains)
    heat_demand = [max(demand, 0.0) for demand in net_demand]
    cooling_demand = [max(-demand, 0.0) for demand in net_demand]

    heat_demand_kwh = monthly_W_to_kWh(heat_demand)
    cooling_demand_kwh = monthly_W_to_kWh(cooling_demand)
    annual_heating_demand = sum(heat_demand_kwh)
    annual_cooling_demand = sum(cooling_demand_kwh)

    heating['delta_T'] = delta_T
    heating['total_losses'] = losses
    heating['total_gains'] = gains
    heating['utilisation_factor'] = utilisation_factor
    heating['useful_gains'] = useful_gains
    heating['heat_demand'] = heat_demand
    heating['cooling_demand'] = cooling_demand
    heating['heat_demand_kwh'] = heat_demand_kwh
    heating['cooling_demand_kwh'] = cooling_demand_kwh
    heating['annual_heating_demand'] = annual_heating_demand
    heating['annual_cooling_demand'] = annual_cooling_demand

    if annual_heating_demand > 0:
        set_requirement(data, RequirementType.SPACE_HEATING, 'Space Heating', annual_heating_demand)
    if annual_cooling_demand > 0:
        set_requirement(data, RequirementType.SPACE_COOLING, 'Space Cooling', annual_cooling_demand)

    if TFA > 0:
        data['fabric_energy_efficiency'] = (annual_heating_demand + annual_cooling_demand) / TFA
    else:
        data['fabric_energy_efficiency'] = 0.0
