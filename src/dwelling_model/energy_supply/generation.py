#!/usr/bin/env python3

""" TODO Copyright & licensing notices

This module provides the calculation stage for on-site electricity generation
(solar PV, wind and hydro). Generation used on site is credited as a negative
energy requirement met by electricity, and generation earns income from a
feed-in tariff.

Solar PV yield is calculated from installed peak power according to SAP 2012
Appendix M.
"""

# Local imports
from dwelling_model.defaults import add_defaults
from dwelling_model.categories import RequirementType, set_requirement
from dwelling_model.external_conditions import ExternalConditions

GENERATION_DEFAULTS = {
    'generation': {
        'solar_annual_kwh': 0,
        'solar_fraction_used_onsite': 0.5,
        'solar_FIT': 0,
        'wind_annual_kwh': 0,
        'wind_fraction_used_onsite': 0.5,
        'wind_FIT': 0,
        'hydro_annual_kwh': 0,
        'hydro_fraction_used_onsite': 0.5,
        'hydro_FIT': 0,
        'solarpv_orientation': 4,
        'solarpv_kwp_installed': 0,
        'solarpv_inclination': 35,
        'solarpv_overshading': 1,
        'solarpv_fraction_used_onsite': 0.5,
        'solarpv_FIT': 0,
        },
    }

# Ratio of annual PV output (kWh) to peak power (kWp) times annual solar radiation (kWh/m2)
PV_SYSTEM_FACTOR = 0.8


def electric_supply():
    """ Return energy system assignment for generation offsetting mains electricity """
    return [{'system': 'electric', 'fraction': 1, 'efficiency': 1}]

def solar_pv_annual_kwh(kwp_installed, annual_solar_radiation, overshading_factor):
    """ Return annual output of a solar PV system, in kWh

    Arguments:
    kwp_installed          -- installed peak power, in kWp
    annual_solar_radiation -- annual solar radiation on the array, in kWh/m2
    overshading_factor     -- overshading factor, from SAP 2012 Table H2
    """
    return PV_SYSTEM_FACTOR * kwp_installed * annual_solar_radiation * overshading_factor

def credit_generation(data, req_type, name, annual_kwh, fraction_used_onsite, feed_in_tariff):
    """ Register generation used on site as a negative requirement and add its income """
    set_requirement(data, req_type, name, -annual_kwh * fraction_used_onsite)
    data['total_income'] += annual_kwh * feed_in_tariff

def generation(data, datasets):
    """ Calculate solar PV yield and, where use_generation is set, credit on-site generation """
    add_defaults(data, GENERATION_DEFAULTS)
    gen = data['generation']

    ext_cond = ExternalConditions(data['region'], data['altitude'], datasets)
    gen['solarpv_annual_solar_radiation'] = ext_cond.annual_solar_radiation(
        gen['solarpv_orientation'],
        gen['solarpv_inclination'],
        )
    gen['solarpv_annual_kwh'] = solar_pv_annual_kwh(
        gen['solarpv_kwp_installed'],
        gen['solarpv_annual_solar_radiation'],
        gen['solarpv_overshading'],
        )

    if not data['use_generation']:
        return

    energy_systems = data.setdefault('energy_systems', {})

    if gen['solar_annual_kwh'] > 0:
        credit_generation(
            data, RequirementType.SOLAR, 'Solar PV',
            gen['solar_annual_kwh'], gen['solar_fraction_used_onsite'], gen['solar_FIT'],
            )
        energy_systems[RequirementType.SOLAR.value] = electric_supply()

    if gen['wind_annual_kwh'] > 0:
        credit_generation(
            data, RequirementType.WIND, 'Wind',
            gen['wind_annual_kwh'], gen['wind_fraction_used_onsite'], gen['wind_FIT'],
            )
        energy_systems[RequirementType.WIND.value] = electric_supply()

    # TODO Hydro is credited only when there is wind output. Confirm whether
    #      this should test hydro_annual_kwh instead
    if gen['wind_annual_kwh'] > 0:
        credit_generation(
            data, RequirementType.HYDRO, 'Hydro',
            gen['hydro_annual_kwh'], gen['hydro_fraction_used_onsite'], gen['hydro_FIT'],
            )
        energy_systems[RequirementType.HYDRO.value] = electric_supply()

    if gen['solarpv_annual_kwh'] > 0:
        credit_generation(
            data, RequirementType.SOLAR_PV, 'Solar PV',
            gen['solarpv_annual_kwh'], gen['solarpv_fraction_used_onsite'], gen['solarpv_FIT'],
            )
        energy_systems.setdefault(RequirementType.SOLAR_PV.value, electric_supply())
