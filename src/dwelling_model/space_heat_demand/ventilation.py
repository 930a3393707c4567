#!/usr/bin/env python3

""" TODO Copyright & licensing notices

This module provides the calculation stage for infiltration and ventilation
heat loss, and objects to represent each type of ventilation system.

Infiltration is calculated according to SAP 2012 section 2, from openings
(chimneys, flues, fans and vents), structural leakage (or an air permeability
test result), shelter and regional wind speed. The effective air change rate
depends on the type of ventilation system (SAP 2012 worksheet (24a) to (24d)).
"""

# Third-party imports
from loguru import logger

# Local imports
from dwelling_model.defaults import add_defaults
from dwelling_model.categories import LossCategory, set_losses
from dwelling_model.external_conditions import ExternalConditions

VENTILATION_DEFAULTS = {
    'ventilation': {
        'number_of_chimneys': 0,
        'number_of_openflues': 0,
        'number_of_intermittentfans': 0,
        'number_of_passivevents': 0,
        'number_of_fluelessgasfires': 0,
        'air_permeability_test': False,
        'air_permeability_value': 0,
        'dwelling_construction': 'timberframe',
        # 'unsealed', 'sealed' or 0 if no suspended wooden floor
        'suspended_wooden_floor': 0,
        'draught_lobby': False,
        'percentage_draught_proofed': 0,
        'number_of_sides_sheltered': 0,
        'ventilation_type': 'd',
        'system_air_change_rate': 0,
        'balanced_heat_recovery_efficiency': 100,
        },
    }

# Infiltration rates for openings, in m3 per hour
INF_RATE_CHIMNEY = 40.0
INF_RATE_OPEN_FLUE = 20.0
INF_RATE_INTERMITTENT_FAN = 10.0
INF_RATE_PASSIVE_VENT = 10.0
INF_RATE_FLUELESS_GAS_FIRE = 10.0

# Structural infiltration, in air changes per hour
INF_PER_ADDITIONAL_STOREY = 0.1
INF_CONSTRUCTION = {
    'timberframe': 0.2,
    'masonry': 0.35,
    }
INF_SUSPENDED_WOODEN_FLOOR = {
    'unsealed': 0.2,
    'sealed': 0.1,
    }
INF_NO_DRAUGHT_LOBBY = 0.05

# Reduction in shelter factor per sheltered side
SHELTER_PER_SIDE = 0.075

# Divisor to convert air permeability at 50 Pa to air changes per hour
PERMEABILITY_DIVISOR = 20.0

# Wind speed (m/s) at which the adjusted infiltration equals the calculated infiltration
REFERENCE_WIND_SPEED = 4.0

# Heat capacity of air per unit volume, in Wh / (m3.K)
HEAT_CAPACITY_AIR = 0.33


class VentilationBalancedHeatRecovery:
    """ Balanced mechanical ventilation with heat recovery, type 'a' """

    def __init__(self, system_air_change_rate, heat_recovery_efficiency):
        """ Construct a VentilationBalancedHeatRecovery object

        Arguments:
        system_air_change_rate   -- air change rate through the system, in ach
        heat_recovery_efficiency -- efficiency of heat recovery, in %
        """
        self.__offset = system_air_change_rate * (1.0 - heat_recovery_efficiency / 100.0)

    def effective_air_change_rate(self, infiltration):
        return infiltration + self.__offset


class VentilationPositiveInputOrExtract:
    """ Positive input ventilation from outside or whole-house extract, type 'b' """

    def __init__(self, system_air_change_rate):
        self.__system_air_change_rate = system_air_change_rate

    def effective_air_change_rate(self, infiltration):
        return infiltration + self.__system_air_change_rate


class VentilationIntermittentExtract:
    """ Positive input ventilation from loft or intermittent extract, type 'c' """

    def __init__(self, system_air_change_rate):
        self.__system_air_change_rate = system_air_change_rate

    def effective_air_change_rate(self, infiltration):
        # Where infiltration is less than half the system rate, the system rate applies
        return max(
            self.__system_air_change_rate,
            infiltration + 0.5 * self.__system_air_change_rate,
            )


class VentilationNatural:
    """ Natural ventilation, or whole-house positive input from loft, type 'd' """

    def effective_air_change_rate(self, infiltration):
        if infiltration >= 1.0:
            return infiltration
        return 0.5 + 0.5 * infiltration ** 2


class VentilationUnknown:
    """ Fallback for unrecognised ventilation types: effective rate equals infiltration """

    def effective_air_change_rate(self, infiltration):
        return infiltration


def create_ventilation_system(ventilation):
    """ Create ventilation system object for the type given in the ventilation section """
    ventilation_type = ventilation['ventilation_type']
    if ventilation_type == 'a':
        return VentilationBalancedHeatRecovery(
            ventilation['system_air_change_rate'],
            ventilation['balanced_heat_recovery_efficiency'],
            )
    elif ventilation_type == 'b':
        return VentilationPositiveInputOrExtract(ventilation['system_air_change_rate'])
    elif ventilation_type == 'c':
        return VentilationIntermittentExtract(ventilation['system_air_change_rate'])
    elif ventilation_type == 'd':
        return VentilationNatural()
    else:
        logger.warning('Unknown ventilation type: {}', ventilation_type)
        return VentilationUnknown()

def calc_infiltration(ventilation, volume, num_of_floors):
    """ Return infiltration rate, in ach, before adjustment for shelter and wind speed

    Arguments:
    ventilation   -- ventilation section of the assessment record
    volume        -- total volume of the dwelling, in m3
    num_of_floors -- number of storeys in the dwelling
    """
    openings = ventilation['number_of_chimneys'] * INF_RATE_CHIMNEY \
        + ventilation['number_of_openflues'] * INF_RATE_OPEN_FLUE \
        + ventilation['number_of_intermittentfans'] * INF_RATE_INTERMITTENT_FAN \
        + ventilation['number_of_passivevents'] * INF_RATE_PASSIVE_VENT \
        + ventilation['number_of_fluelessgasfires'] * INF_RATE_FLUELESS_GAS_FIRE

    # Zero volume gives no infiltration from openings
    infiltration = openings / volume if volume != 0 else 0.0

    if ventilation['air_permeability_test']:
        infiltration += ventilation['air_permeability_value'] / PERMEABILITY_DIVISOR
    else:
        infiltration += (num_of_floors - 1) * INF_PER_ADDITIONAL_STOREY
        infiltration += INF_CONSTRUCTION.get(ventilation['dwelling_construction'], 0.0)
        infiltration += INF_SUSPENDED_WOODEN_FLOOR.get(ventilation['suspended_wooden_floor'], 0.0)
        if not ventilation['draught_lobby']:
            infiltration += INF_NO_DRAUGHT_LOBBY
        # Window infiltration
        infiltration += 0.25 - 0.2 * ventilation['percentage_draught_proofed'] / 100.0

    return infiltration

def ventilation(data, datasets):
    """ Calculate monthly ventilation heat loss and register the 'ventilation' loss category """
    add_defaults(data, VENTILATION_DEFAULTS)
    vent = data['ventilation']

    infiltration = calc_infiltration(vent, data['volume'], data['num_of_floors'])
    shelter_factor = 1.0 - SHELTER_PER_SIDE * vent['number_of_sides_sheltered']
    infiltration *= shelter_factor

    ext_cond = ExternalConditions(data['region'], data['altitude'], datasets)
    adjusted_infiltration = [
        infiltration * wind_speed / REFERENCE_WIND_SPEED
        for wind_speed in ext_cond.wind_speed_monthly()
        ]

    system = create_ventilation_system(vent)
    effective_air_change_rate = [
        system.effective_air_change_rate(inf) for inf in adjusted_infiltration
        ]
    infiltration_WK = [
        ach * data['volume'] * HEAT_CAPACITY_AIR for ach in effective_air_change_rate
        ]

    vent['infiltration'] = infiltration
    vent['shelter_factor'] = shelter_factor
    vent['adjusted_infiltration'] = adjusted_infiltration
    vent['effective_air_change_rate'] = effective_air_change_rate
    vent['infiltration_WK'] = infiltration_WK
    vent['average_WK'] = sum(infiltration_WK) / len(infiltration_WK)

    set_losses(data, LossCategory.VENTILATION, infiltration_WK)
