#!/usr/bin/env python3

""" TODO Copyright & licensing notices

This module provides the calculation stage for domestic hot water demand,
losses and heat gains, according to SAP 2012 section 4, including the
contribution of any solar water heating system (Appendix H).
"""

# Third-party imports
from loguru import logger

# Local imports
import dwelling_model.monthly as monthly
import dwelling_model.units as units
from dwelling_model.defaults import add_defaults
from dwelling_model.categories import \
    GainCategory, RequirementType, set_gains, set_requirement
from dwelling_model.datasets import TABLE_1C, TABLE_1D, TABLE_H4
from dwelling_model.external_conditions import ExternalConditions
from dwelling_model.heating_systems.solar_thermal import SHW_DEFAULTS, calc_solar_water_heating

WATER_HEATING_DEFAULTS = {
    'water_heating': {
        'instantaneous_hotwater': False,
        'declared_loss_factor_known': False,
        'manufacturer_loss_factor': 0,
        'temperature_factor_a': 0.6,
        'storage_volume': 0,
        'loss_factor_b': 0,
        'volume_factor_b': 0,
        'temperature_factor_b': 0,
        'hot_water_control_type': 'no_cylinder_thermostat',
        'community_heating': False,
        'hot_water_store_in_dwelling': False,
        'contains_dedicated_solar_storage_or_WWHRS': False,
        'combi_loss': [0.0] * monthly.MONTHS,
        'pipework_insulated_fraction': 1,
        'low_water_use_design': False,
        'solar_water_heating': False,
        },
    }

# Specific heat capacity of water, in kJ / (litre.K)
SPECIFIC_HEAT_WATER = 4.190

# Fraction of energy content delivered at the tap, the remainder being
# distribution loss
FRACTION_DELIVERED = 0.85
DISTRIBUTION_LOSS_FACTOR = 0.15

# Reduction in hot water use for dwellings designed for low water use
LOW_WATER_USE_FACTOR = 0.95

# Hours per day the primary circuit is hot, outside summer, by control type
PRIMARY_CIRCUIT_HOURS = {
    'no_cylinder_thermostat': 11,
    'cylinder_thermostat_without_timer': 5,
    'cylinder_thermostat_with_timer': 3,
    }
PRIMARY_CIRCUIT_HOURS_SUMMER = 3
PRIMARY_CIRCUIT_HOURS_COMMUNITY = 3

# Proportion of energy content and of losses that become internal heat gains
FRACTION_CONTENT_TO_GAINS = 0.25
FRACTION_LOSSES_TO_GAINS = 0.8


def average_daily_volume(occupancy, low_water_use_design):
    """ Return average daily hot water use (Vd,average), in litres """
    Vd_average = 25.0 * occupancy + 36.0
    if low_water_use_design:
        Vd_average *= LOW_WATER_USE_FACTOR
    return Vd_average

def storage_loss_per_day(water_heating):
    """ Return energy lost from hot water storage, in kWh/day """
    if water_heating['declared_loss_factor_known']:
        return water_heating['manufacturer_loss_factor'] * water_heating['temperature_factor_a']
    return water_heating['storage_volume'] \
        * water_heating['loss_factor_b'] \
        * water_heating['volume_factor_b'] \
        * water_heating['temperature_factor_b']

def dedicated_solar_storage_fraction(storage_volume, dedicated_solar_volume):
    """ Return fraction of storage loss remaining where part of the store is dedicated to solar

    Returns 0 where there is no storage volume.
    """
    if storage_volume == 0:
        return 0.0
    return (storage_volume - dedicated_solar_volume) / storage_volume

def primary_circuit_hours(month, control_type, community_heating):
    """ Return hours per day for which the primary circuit is hot """
    if monthly.is_summer(month):
        return PRIMARY_CIRCUIT_HOURS_SUMMER
    if community_heating:
        return PRIMARY_CIRCUIT_HOURS_COMMUNITY
    return PRIMARY_CIRCUIT_HOURS.get(control_type, 0)

def primary_circuit_loss(month, hours_per_day, insulated_fraction, solar_water_heating):
    """ Return primary circuit loss for the month, in kWh """
    loss = units.days_in_month[month] * 14.0 * (
        (0.0091 * insulated_fraction + 0.0245 * (1.0 - insulated_fraction)) * hours_per_day
        + 0.0263
        )
    if solar_water_heating:
        loss *= TABLE_H4[month]
    return loss

def water_heating(data, datasets):
    """ Calculate hot water energy requirement and heat gains from water heating

    Gains and requirement are only registered where use_water_heating is set.
    """
    add_defaults(data, WATER_HEATING_DEFAULTS)
    add_defaults(data, SHW_DEFAULTS)
    wh = data['water_heating']
    control_type = wh['hot_water_control_type']
    combi_loss = wh['combi_loss']

    Vd_average = average_daily_volume(data['occupancy'], wh['low_water_use_design'])
    Vd_monthly = [factor * Vd_average for factor in TABLE_1C]
    energy_content = [
        SPECIFIC_HEAT_WATER * Vd_m * n_days * delta_T / units.seconds_per_hour
        for Vd_m, n_days, delta_T in zip(Vd_monthly, units.days_in_month, TABLE_1D)
        ]
    annual_energy_content = sum(energy_content)

    distribution_loss = monthly.zeros()
    storage_loss = monthly.zeros()
    primary_loss = monthly.zeros()
    storage_loss_daily = 0.0

    if wh['instantaneous_hotwater']:
        total_heat_required = [FRACTION_DELIVERED * content for content in energy_content]
    else:
        if not wh['community_heating'] and control_type not in PRIMARY_CIRCUIT_HOURS:
            logger.warning('Unknown hot water control type: {}', control_type)

        storage_loss_daily = storage_loss_per_day(wh)
        # Dedicated solar volume may be given with the store, else with the collector
        dedicated_solar_volume = wh['Vs'] if 'Vs' in wh else data['SHW']['Vs']
        # Community heating pipework is treated as fully insulated
        insulated_fraction = 1.0 if wh['community_heating'] else wh['pipework_insulated_fraction']

        total_heat_required = []
        for m in range(monthly.MONTHS):
            distribution_loss[m] = DISTRIBUTION_LOSS_FACTOR * energy_content[m]
            storage_loss[m] = units.days_in_month[m] * storage_loss_daily
            if wh['contains_dedicated_solar_storage_or_WWHRS']:
                storage_loss[m] *= dedicated_solar_storage_fraction(
                    wh['storage_volume'],
                    dedicated_solar_volume,
                    )
            hours = primary_circuit_hours(m, control_type, wh['community_heating'])
            primary_loss[m] = primary_circuit_loss(m, hours, insulated_fraction, wh['solar_water_heating'])

            total_heat_required.append(
                FRACTION_DELIVERED * energy_content[m]
                + distribution_loss[m]
                + storage_loss[m]
                + primary_loss[m]
                + combi_loss[m]
                )

    ext_cond = ExternalConditions(data['region'], data['altitude'], datasets)
    solar_input = calc_solar_water_heating(data, ext_cond, annual_energy_content, Vd_average)

    if wh['solar_water_heating']:
        heater_output = monthly.add(total_heat_required, solar_input)
    else:
        heater_output = list(total_heat_required)
    heater_output = [max(output, 0.0) for output in heater_output]
    annual_waterheating_demand = sum(heater_output)

    store_losses_to_dwelling = wh['hot_water_store_in_dwelling'] or wh['community_heating']
    gains = []
    for m in range(monthly.MONTHS):
        if store_losses_to_dwelling:
            gains_kWh = FRACTION_CONTENT_TO_GAINS * (FRACTION_DELIVERED * energy_content[m] + combi_loss[m]) \
                + FRACTION_LOSSES_TO_GAINS * (distribution_loss[m] + storage_loss[m] + primary_loss[m])
        else:
            gains_kWh = FRACTION_CONTENT_TO_GAINS * FRACTION_DELIVERED * energy_content[m] \
                + FRACTION_LOSSES_TO_GAINS * (distribution_loss[m] + primary_loss[m])
        gains.append(units.kWh_per_month_to_watts(gains_kWh, m))

    wh['Vd_average'] = Vd_average
    wh['Vd_monthly'] = Vd_monthly
    wh['monthly_energy_content'] = energy_content
    wh['annual_energy_content'] = annual_energy_content
    wh['energy_lost_from_water_storage'] = storage_loss_daily
    wh['distribution_loss'] = distribution_loss
    wh['monthly_storage_loss'] = storage_loss
    wh['primary_circuit_loss'] = primary_loss
    wh['total_heat_required'] = total_heat_required
    wh['hot_water_heater_output'] = heater_output
    wh['annual_waterheating_demand'] = annual_waterheating_demand
    wh['waterheating_gains'] = gains

    if data['use_water_heating']:
        set_gains(data, GainCategory.WATER_HEATING, gains)
        if annual_waterheating_demand > 0:
            set_requirement(data, RequirementType.WATER_HEATING, 'Water Heating', annual_waterheating_demand)
