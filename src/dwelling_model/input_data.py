#!/usr/bin/env python3

""" TODO Copyright & licensing notices

This module provides the extraction of the user-supplied input fields from an
assessment record, so that a record can be saved without its calculated
results. Fields absent from the record are absent from the extracted input.
"""

# Standard library imports
from copy import deepcopy

# Local imports
from dwelling_model.energy_supply.generation import GENERATION_DEFAULTS

TOP_LEVEL_FIELDS = (
    'scenario_name',
    'household',
    'region',
    'altitude',
    'use_custom_occupancy',
    'custom_occupancy',
    'use_LAC',
    'use_generation',
    'use_water_heating',
    'use_appliancelist',
    'fuels',
    )

FLOOR_FIELDS = ('name', 'area', 'height')

ELEMENT_FIELDS = (
    'type', 'name', 'description', 'subtractfrom', 'l', 'h', 'area', 'uvalue', 'kvalue',
    'orientation', 'overshading', 'g', 'gL', 'ff',
    )

SECTION_FIELDS = {
    'ventilation': (
        'number_of_chimneys',
        'number_of_openflues',
        'number_of_intermittentfans',
        'number_of_passivevents',
        'number_of_fluelessgasfires',
        'air_permeability_test',
        'air_permeability_value',
        'dwelling_construction',
        'suspended_wooden_floor',
        'draught_lobby',
        'percentage_draught_proofed',
        'number_of_sides_sheltered',
        'ventilation_type',
        'system_air_change_rate',
        'balanced_heat_recovery_efficiency',
        ),
    'LAC': ('LLE', 'L', 'reduced_internal_heat_gains'),
    'generation': tuple(GENERATION_DEFAULTS['generation'].keys()),
    'water_heating': (
        'low_water_use_design',
        'instantaneous_hotwater',
        'solar_water_heating',
        'pipework_insulated_fraction',
        'declared_loss_factor_known',
        'manufacturer_loss_factor',
        'storage_volume',
        'temperature_factor_a',
        'loss_factor_b',
        'volume_factor_b',
        'temperature_factor_b',
        'community_heating',
        'hot_water_store_in_dwelling',
        'contains_dedicated_solar_storage_or_WWHRS',
        'Vs',
        'hot_water_control_type',
        'combi_loss',
        ),
    'SHW': ('A', 'n0', 'a1', 'a2', 'inclination', 'orientation', 'overshading', 'Vs',
            'combined_cylinder_volume'),
    'temperature': ('responsiveness', 'target', 'control_type', 'living_area'),
    'space_heating': ('use_utilfactor_forgains',),
    }

APPLIANCE_FIELDS = ('name', 'power', 'hours')
ENERGY_SYSTEM_FIELDS = ('system', 'description', 'fraction', 'efficiency')
ENERGY_ITEM_FIELDS = ('quantity', 'unitcost', 'standingcharge', 'note', 'mpg')


def pick(section, fields):
    """ Return a copy of the given fields of a section, omitting any that are absent """
    return {field: deepcopy(section[field]) for field in fields if field in section}

def extract_inputdata(data):
    """ Return the user-supplied input fields of an assessment record

    The result contains no calculated values and shares no mutable state with
    the record, so it can be serialised and later passed back in for
    recalculation.
    """
    inputdata = pick(data, TOP_LEVEL_FIELDS)

    if 'floors' in data:
        inputdata['floors'] = [pick(floor, FLOOR_FIELDS) for floor in data['floors']]

    if 'fabric' in data:
        inputdata['fabric'] = pick(data['fabric'], ('thermal_bridging_yvalue',))
        inputdata['fabric']['elements'] = [
            pick(element, ELEMENT_FIELDS)
            for element in data['fabric'].get('elements', [])
            ]

    for section_name, fields in SECTION_FIELDS.items():
        if section_name in data:
            inputdata[section_name] = pick(data[section_name], fields)

    if 'appliancelist' in data:
        inputdata['appliancelist'] = {
            'list': [
                pick(appliance, APPLIANCE_FIELDS)
                for appliance in data['appliancelist'].get('list', [])
                ],
            }

    if 'currentenergy' in data:
        current = data['currentenergy']
        inputdata['currentenergy'] = pick(current, ('greenenergy',))
        inputdata['currentenergy']['energyitems'] = {
            tag: pick(item, ENERGY_ITEM_FIELDS)
            for tag, item in current.get('energyitems', {}).items()
            }

    if 'energy_systems' in data:
        inputdata['energy_systems'] = {
            requirement_type: [pick(assignment, ENERGY_SYSTEM_FIELDS) for assignment in assignments]
            for requirement_type, assignments in data['energy_systems'].items()
            }

    return inputdata
