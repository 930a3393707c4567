#!/usr/bin/env python3

""" TODO Copyright & licensing notices

This module provides the high-level control flow for the monthly dwelling
energy assessment. Calculation stages are run in a fixed order on a single
assessment record (a nested dictionary of input data, which the stages
complete with defaults and populate with results).

Each stage is a function taking the assessment record and the reference
datasets. Stages that produce heat gains run before the temperature and space
heating stages, as these use the total of all gains.
"""

# Third-party imports
from loguru import logger

# Local imports
import dwelling_model.monthly as monthly
import dwelling_model.units as units
from dwelling_model.defaults import add_defaults
from dwelling_model.datasets import Datasets
from dwelling_model.input_data import extract_inputdata
from dwelling_model.geometry import floors, occupancy
from dwelling_model.space_heat_demand.fabric import fabric
from dwelling_model.space_heat_demand.ventilation import ventilation
from dwelling_model.space_heat_demand.internal_gains import LAC, appliancelist
from dwelling_model.space_heat_demand.temperature import temperature
from dwelling_model.space_heat_demand.space_heating import space_heating
from dwelling_model.water_heat_demand.water_heating import water_heating
from dwelling_model.energy_supply.generation import generation
from dwelling_model.energy_supply.current_energy import currentenergy
from dwelling_model.energy_supply.energy_supply import energy_systems
from dwelling_model.sap_rating import SAP

START_DEFAULTS = {
    'region': 0,
    'altitude': 0,
    'household': {},
    'use_LAC': True,
    'use_water_heating': True,
    'use_appliancelist': False,
    'use_generation': False,
    }

# Placeholder temperatures, in deg C, until the temperature stage has run
INITIAL_INTERNAL_TEMPERATURE = 18.0
INITIAL_EXTERNAL_TEMPERATURE = 10.0


def start(data, datasets):
    """ Add top-level defaults and reset all calculated aggregates """
    add_defaults(data, START_DEFAULTS)

    data['num_of_floors'] = 0
    data['TFA'] = 0.0
    data['volume'] = 0.0
    data['occupancy'] = 0.0

    data['internal_temperature'] = monthly.constant(INITIAL_INTERNAL_TEMPERATURE)
    data['external_temperature'] = monthly.constant(INITIAL_EXTERNAL_TEMPERATURE)
    data['losses_WK'] = {}
    data['gains_W'] = {}
    data['energy_requirements'] = {}

    data['fuel_totals'] = {}
    data['total_cost'] = 0.0
    data['total_income'] = 0.0
    data['net_cost'] = 0.0
    data['energy_use'] = 0.0
    data['annualco2'] = 0.0
    data['primary_energy_use'] = 0.0
    data['fabric_energy_efficiency'] = 0.0
    data['totalWK'] = 0.0

def summary_metrics(data):
    """ Calculate metrics per floor area and per person from the completed record """
    TFA = data['TFA']
    N = data['occupancy']

    data['totalWK'] = data['fabric']['total_heat_loss_WK'] + data['ventilation']['average_WK']

    if TFA > 0:
        data['primary_energy_use_m2'] = data['primary_energy_use'] / TFA
        data['kgco2perm2'] = data['annualco2'] / TFA
    else:
        data['primary_energy_use_m2'] = 0.0
        data['kgco2perm2'] = 0.0

    if N > 0:
        data['kwhdpp'] = data['energy_use'] / units.days_per_year / N
        data['primarykwhdpp'] = data['primary_energy_use'] / units.days_per_year / N
    else:
        data['kwhdpp'] = 0.0
        data['primarykwhdpp'] = 0.0


class Assessment:
    """ An object to represent an assessment of a single dwelling """

    STAGES = (
        start,
        floors,
        occupancy,
        fabric,
        ventilation,
        LAC,
        water_heating,
        appliancelist,
        generation,
        currentenergy,
        temperature,
        space_heating,
        energy_systems,
        SAP,
        )

    def __init__(self, data=None, datasets=None):
        """ Construct an Assessment object

        Arguments:
        data     -- assessment record: dictionary of input data, which may be
                    partially specified (or None for all defaults). The record
                    is completed and populated with results in place.
        datasets -- reference to Datasets object holding reference data (if
                    None, the reference data bundled with the package is used)
        """
        self.__data = data if data is not None else {}
        self.__datasets = datasets if datasets is not None else Datasets.load_default()

    def data(self):
        return self.__data

    def run(self):
        """ Run all calculation stages in order and return the populated record

        Exceptions raised by a stage are not caught, so the record is left in
        whatever partial state it had reached.
        """
        for stage in self.STAGES:
            logger.debug('Running calculation stage: {}', stage.__name__)
            stage(self.__data, self.__datasets)

        summary_metrics(self.__data)
        return self.__data

    def input_data(self):
        """ Return the user-supplied input fields of the assessment record """
        return extract_inputdata(self.__data)


def calc(data=None, datasets=None):
    """ Run an assessment on the given record and return the populated record """
    return Assessment(data, datasets).run()
