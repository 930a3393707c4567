#!/usr/bin/env python3

""" TODO Copyright & licensing notices

This module contains objects that represent energy supplies such as mains gas,
mains electricity or other fuels (e.g. oil, wood), and the calculation stage
that assigns each energy requirement to the systems that meet it and totals
the annual fuel use, cost, primary energy and CO2 emissions for each fuel.
"""

# Standard library imports
import sys

# Third-party imports
from loguru import logger

# Local imports
import dwelling_model.units as units
from dwelling_model.defaults import add_defaults

# Systems assumed for each end use where none are specified
DEFAULT_ENERGY_SYSTEMS = {
    'space_heating': [{'system': 'gasboiler', 'fraction': 1, 'efficiency': 0.9}],
    'waterheating': [{'system': 'gasboiler', 'fraction': 1, 'efficiency': 0.9}],
    'lighting': [{'system': 'electric', 'fraction': 1, 'efficiency': 1.0}],
    'appliances': [{'system': 'electric', 'fraction': 1, 'efficiency': 1.0}],
    'cooking': [{'system': 'electric', 'fraction': 1, 'efficiency': 1.0}],
    }


class EnergySupplyConnection:
    """ An object to represent the connection of a system that consumes energy to the energy supply

    This object encapsulates the name of the connection, meaning that the
    system consuming the energy does not have to specify these on every call,
    and helping to enforce that each connection to a single supply has a unique
    name.
    """

    def __init__(self, energy_supply, end_user_name):
        """ Construct an EnergySupplyConnection object

        Arguments:
        energy_supply -- reference to the EnergySupply object that the connection is to
        end_user_name -- name of the system (and end use, where applicable)
                         consuming energy from this connection
        """
        self.__energy_supply = energy_supply
        self.__end_user_name = end_user_name

    def demand_energy(self, amount_demanded):
        """ Forwards the annual amount of energy demanded (in kWh) to the relevant EnergySupply object """
        self.__energy_supply._EnergySupply__demand_energy(self.__end_user_name, amount_demanded)


class EnergySupply:
    """ An object to represent an energy supply, and to report annual energy consumption """

    def __init__(self, fuel_type, unit_cost, standing_charge, co2_factor, primary_energy_factor):
        """ Construct an EnergySupply object

        Arguments:
        fuel_type             -- string denoting type of fuel
        unit_cost             -- cost of fuel, per kWh
        standing_charge       -- standing charge, per day
        co2_factor            -- CO2 emissions, in kg per kWh of fuel
        primary_energy_factor -- primary energy per kWh of fuel

        Other variables:
        demand_total       -- total annual demand on this energy supply, in kWh
        demand_by_end_user -- dictionary of annual demand from each end user on
                              this energy supply, in kWh
        """
        self.__fuel_type             = fuel_type
        self.__unit_cost             = unit_cost
        self.__standing_charge       = standing_charge
        self.__co2_factor            = co2_factor
        self.__primary_energy_factor = primary_energy_factor
        self.__demand_total          = 0.0
        self.__demand_by_end_user    = {}

    def connection(self, end_user_name):
        """ Return an EnergySupplyConnection object and initialise demand for the end user """
        # Check that end_user_name is not already registered/connected
        if end_user_name in self.__demand_by_end_user.keys():
            sys.exit("Error: End user name already used: "+end_user_name)

        self.__demand_by_end_user[end_user_name] = 0.0
        return EnergySupplyConnection(self, end_user_name)

    def __demand_energy(self, end_user_name, amount_demanded):
        """ Record annual energy demand (in kWh) for the end user specified.

        Note: Call via an EnergySupplyConnection object, not directly.
        """
        # Check that end_user_name is already connected/registered
        if end_user_name not in self.__demand_by_end_user.keys():
            sys.exit("Error: End user name ("+end_user_name+
                     ") not already registered by calling connection function.")

        self.__demand_total += amount_demanded
        self.__demand_by_end_user[end_user_name] += amount_demanded

    def fuel_type(self):
        return self.__fuel_type

    def results_total(self):
        """ Return the total annual demand on this energy supply, in kWh """
        return self.__demand_total

    def results_by_end_user(self):
        """ Return the annual demand from each end user on this energy supply, in kWh

        Returns dictionary where keys are names of end users.
        """
        return self.__demand_by_end_user

    def annual_cost(self):
        """ Return annual cost of fuel, including standing charge """
        return self.__demand_total * self.__unit_cost \
            + self.__standing_charge * units.days_per_year

    def primary_energy(self):
        """ Return annual primary energy, in kWh """
        return self.__demand_total * self.__primary_energy_factor

    def co2_emissions(self):
        """ Return annual CO2 emissions, in kg """
        return self.__demand_total * self.__co2_factor

    def totals(self):
        """ Return dictionary of annual totals for the fuel totals section of the assessment record """
        return {
            'name': self.__fuel_type,
            'quantity': self.__demand_total,
            'annualcost': self.annual_cost(),
            'fuelcost': self.__unit_cost,
            'primaryenergy': self.primary_energy(),
            'annualco2': self.co2_emissions(),
            }


def create_energy_supply(fuel_type, fuel):
    """ Create EnergySupply object from fuel properties in the assessment record """
    return EnergySupply(
        fuel_type,
        fuel['fuelcost'],
        fuel['standingcharge'],
        fuel['co2factor'],
        fuel['primaryenergyfactor'],
        )

def energy_systems(data, datasets):
    """ Calculate annual fuel use, cost, primary energy and CO2 emissions for each fuel

    Each energy requirement is met by the systems assigned to it, each serving
    a fraction of the requirement at a given efficiency. Assignments to
    unrecognised systems, or to systems using unrecognised fuels, are skipped.
    """
    add_defaults(data, {'energy_systems': DEFAULT_ENERGY_SYSTEMS, 'fuels': datasets.fuels()})

    energy_supplies = {}
    for requirement_type, requirement in data['energy_requirements'].items():
        quantity = requirement['quantity']
        assignments = data['energy_systems'].setdefault(requirement_type, [])

        for idx, assignment in enumerate(assignments):
            system = datasets.energy_system(assignment['system'])
            if system is None:
                logger.warning(
                    'Unknown energy system {} for {}; assignment skipped',
                    assignment['system'],
                    requirement_type,
                    )
                continue

            fuel_type = system['fuel']
            if fuel_type not in data['fuels']:
                logger.warning(
                    'Unknown fuel {} for energy system {}; assignment skipped',
                    fuel_type,
                    assignment['system'],
                    )
                continue

            efficiency = assignment.get('efficiency', system['efficiency'])
            assignment['demand'] = quantity * assignment['fraction']
            if efficiency == 0:
                logger.warning(
                    'Energy system {} for {} has zero efficiency',
                    assignment['system'],
                    requirement_type,
                    )
                assignment['fuelinput'] = float('nan')
            else:
                assignment['fuelinput'] = assignment['demand'] / efficiency

            if fuel_type not in energy_supplies:
                energy_supplies[fuel_type] = create_energy_supply(fuel_type, data['fuels'][fuel_type])
            conn = energy_supplies[fuel_type].connection(
                requirement_type + ': ' + assignment['system'] + ' (' + str(idx) + ')'
                )
            conn.demand_energy(assignment['fuelinput'])

    data['fuel_totals'] = {}
    data['energy_use'] = 0.0
    data['annualco2'] = 0.0
    data['primary_energy_use'] = 0.0
    for fuel_type, energy_supply in energy_supplies.items():
        totals = energy_supply.totals()
        data['fuel_totals'][fuel_type] = totals
        data['total_cost'] += totals['annualcost']
        data['energy_use'] += totals['quantity']
        data['annualco2'] += totals['annualco2']
        data['primary_energy_use'] += totals['primaryenergy']

    data['net_cost'] = data['total_cost'] - data['total_income']
