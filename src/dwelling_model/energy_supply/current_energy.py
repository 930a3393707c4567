#!/usr/bin/env python3

""" TODO Copyright & licensing notices

This module provides the calculation stage for current energy use, as
recorded from bills and travel, as opposed to the modelled energy use. Each
energy item has an annual quantity in its own units (e.g. litres of oil,
miles driven) which is converted to energy, CO2 emissions and cost.
"""

# Local imports
import dwelling_model.units as units
from dwelling_model.defaults import add_defaults

# Litres per gallon, to convert vehicle fuel properties per litre to per gallon
LITRES_PER_GALLON = 4.5

ELECTRICITY_CO2 = 0.512
ELECTRICITY_PRIMARY_ENERGY = 2.4
GREEN_ELECTRICITY_CO2 = 0.02
GREEN_ELECTRICITY_PRIMARY_ENERGY = 1.3


def electricity_item(name, note=''):
    return {
        'name': name, 'note': note, 'quantity': 0, 'units': 'kWh', 'kwh': 1.0,
        'co2': ELECTRICITY_CO2, 'primaryenergy': ELECTRICITY_PRIMARY_ENERGY,
        'unitcost': 0.15, 'standingcharge': 0.0,
        }

def vehicle_item(name):
    return {
        'name': name, 'note': '', 'quantity': 0, 'units': 'miles', 'mpg': 35.0,
        'kwh': 9.7 * LITRES_PER_GALLON, 'co2': 2.31 * LITRES_PER_GALLON, 'primaryenergy': 1.1,
        'unitcost': 0.0, 'standingcharge': 0.0,
        }

def fuel_item(name, unit_name, kwh, co2, unitcost, note=''):
    return {
        'name': name, 'note': note, 'quantity': 0, 'units': unit_name, 'kwh': kwh,
        'co2': co2, 'primaryenergy': 1.1, 'unitcost': unitcost, 'standingcharge': 0.0,
        }

ENERGY_ITEMS = {
    'electric': electricity_item('Electricity'),
    'electric-heating': electricity_item('Electricity for direct heating', 'e.g: Storage Heaters'),
    'electric-heatpump': electricity_item('Electricity for heatpump', 'annual electricity input to the heatpump'),
    'electric-waterheating': electricity_item('Electricity for water heating'),
    'electric-car': electricity_item('Electric car'),
    'wood-logs': fuel_item('Wood Logs', 'm3', 1380, 0.0, 69),
    'wood-pellets': fuel_item('Wood Pellets', 'm3', 4800, 0.0, 240),
    'oil': fuel_item('Oil', 'L', 10.27, 2.518, 0.55),
    'gas': fuel_item('Mains gas', 'm3', 9.8, 2.198, 0.4214),
    'lpg': fuel_item('LPG', 'kWh', 11.0, 1.5, 0.55),
    'bottledgas': fuel_item('Bottled gas', 'kg', 13.9, 2.198, 1.8),
    'car1': vehicle_item('Car 1'),
    'car2': vehicle_item('Car 2'),
    'car3': vehicle_item('Car 3'),
    'motorbike': vehicle_item('Motorbike'),
    'bus': fuel_item('Bus', 'miles', 0.53, 0.176, 0.0),
    'train': fuel_item('Train', 'miles', 0.096, 0.096, 0.0),
    'boat': fuel_item('Boat', 'miles', 1.0, 0.192, 0.0),
    'plane': fuel_item('Plane', 'miles', 0.69, 0.43, 0.0),
    }

# Conversion factors are fixed: only quantity, unit cost, standing charge,
# note and mpg can be set by the user
FIXED_PROPERTIES = ('name', 'units', 'kwh', 'co2', 'primaryenergy')

ELECTRIC_ITEMS = (
    'electric',
    'electric-heating',
    'electric-heatpump',
    'electric-waterheating',
    'electric-car',
    )

SPACE_HEATING_ITEMS = (
    'electric-heating',
    'electric-heatpump',
    'wood-logs',
    'wood-pellets',
    'oil',
    'gas',
    'lpg',
    'bottledgas',
    )

# Household energy items, excluding transport
HOUSEHOLD_ITEMS = (
    'electric',
    'electric-heating',
    'electric-waterheating',
    'electric-heatpump',
    'wood-logs',
    'wood-pellets',
    'oil',
    'gas',
    'lpg',
    'bottledgas',
    )


def calc_energy_item(item):
    """ Calculate annual energy (kWh), CO2 (kg) and cost for an energy item, in place """
    if 'mpg' in item:
        # Quantity is miles travelled, converted to gallons of fuel
        amount = item['quantity'] / item['mpg'] if item['mpg'] != 0 else float('nan')
    else:
        amount = item['quantity']

    item['annual_kwh'] = amount * item['kwh']
    item['kwhd'] = item['annual_kwh'] / units.days_per_year
    item['annual_co2'] = amount * item['co2']
    item['annual_cost'] = item['quantity'] * item['unitcost'] \
        + units.days_per_year * item['standingcharge']

def currentenergy(data, datasets):
    """ Calculate current energy use, CO2 emissions and cost from recorded quantities """
    add_defaults(data, {'currentenergy': {'energyitems': ENERGY_ITEMS, 'greenenergy': False}})
    current = data['currentenergy']
    items = current['energyitems']

    for tag, default_item in ENERGY_ITEMS.items():
        for prop in FIXED_PROPERTIES:
            items[tag][prop] = default_item[prop]

    for tag in ELECTRIC_ITEMS:
        if current['greenenergy']:
            items[tag]['co2'] = GREEN_ELECTRICITY_CO2
            items[tag]['primaryenergy'] = GREEN_ELECTRICITY_PRIMARY_ENERGY
        else:
            items[tag]['co2'] = ELECTRICITY_CO2
            items[tag]['primaryenergy'] = ELECTRICITY_PRIMARY_ENERGY

    for item in items.values():
        calc_energy_item(item)

    spaceheating_annual_kwh = sum(items[tag]['annual_kwh'] for tag in SPACE_HEATING_ITEMS)
    primaryenergy_annual_kwh = sum(
        items[tag]['annual_kwh'] * items[tag]['primaryenergy'] for tag in HOUSEHOLD_ITEMS
        )
    total_co2 = sum(items[tag]['annual_co2'] for tag in HOUSEHOLD_ITEMS)
    total_cost = sum(items[tag]['annual_cost'] for tag in HOUSEHOLD_ITEMS)

    current['spaceheating_annual_kwh'] = spaceheating_annual_kwh
    current['primaryenergy_annual_kwh'] = primaryenergy_annual_kwh
    current['total_co2'] = total_co2
    current['total_cost'] = total_cost

    TFA = data['TFA']
    for name, value in (
            ('spaceheating_annual_kwhm2', spaceheating_annual_kwh),
            ('primaryenergy_annual_kwhm2', primaryenergy_annual_kwh),
            ('total_co2m2', total_co2),
            ('total_costm2', total_cost),
            ):
        current[name] = value / TFA if TFA > 0 else 0.0
