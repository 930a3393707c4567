#!/usr/bin/env python3

""" TODO Copyright & licensing notices

This module provides the entry point to the program and defines the command-line interface.
"""

# Standard library imports
import sys
import json
import csv
import os
import argparse

# Third-party imports
from loguru import logger

# Local imports
from dwelling_model.assessment import Assessment
from dwelling_model.datasets import Datasets


def run_assessment(inp_filename, input_only=False):
    file_path = os.path.splitext(inp_filename)
    output_file = file_path[0] + '_results.json'
    output_file_summary = file_path[0] + '_results_summary.csv'

    with open(inp_filename) as json_file:
        assessment_dict = json.load(json_file)

    assessment = Assessment(assessment_dict, Datasets.load_default())

    if input_only:
        # Complete the record with defaults before extracting the input fields
        assessment.run()
        with open(file_path[0] + '_input.json', 'w') as input_file:
            json.dump(assessment.input_data(), input_file, sort_keys=True, indent=4)
        return # Skip writing results if input only option has been selected

    results = assessment.run()
    logger.info('Calculated assessment for {}', inp_filename)

    with open(output_file, 'w') as results_file:
        json.dump(results, results_file, sort_keys=True, indent=4)

    write_core_output_file_summary(output_file_summary, results)

def write_core_output_file_summary(output_file_summary, results):
    space_heating = results['space_heating']
    water_heating = results['water_heating']
    # Note: need to specify newline='' below, otherwise an extra carriage return
    # character is written when running on Windows
    with open(output_file_summary, 'w', newline='') as f:
        writer = csv.writer(f)
        writer.writerow(['', '', 'Total'])
        writer.writerow(['Total floor area', 'm2', results['TFA']])
        writer.writerow(['Occupancy', 'persons', results['occupancy']])
        writer.writerow(['Total heat loss coefficient', 'W / K', results['totalWK']])
        writer.writerow(['Space heat demand', 'kWh', space_heating['annual_heating_demand']])
        writer.writerow(['Space cool demand', 'kWh', space_heating['annual_cooling_demand']])
        writer.writerow(['Water heating demand', 'kWh', water_heating['annual_waterheating_demand']])
        writer.writerow(['Fabric energy efficiency', 'kWh / m2', results['fabric_energy_efficiency']])
        writer.writerow(['Delivered energy', 'kWh', results['energy_use']])
        writer.writerow(['Primary energy', 'kWh', results['primary_energy_use']])
        writer.writerow(['CO2 emissions', 'kg', results['annualco2']])
        writer.writerow(['Total cost', '', results['total_cost']])
        writer.writerow(['Net cost', '', results['net_cost']])
        writer.writerow(['Energy rating', '', results['SAP']['rating']])
        writer.writerow(['Energy rating band', '', results['SAP']['band']])


if __name__ == '__main__':
    parser = argparse.ArgumentParser(description='Monthly dwelling energy assessment')
    parser.add_argument(
        'input_file',
        nargs='+',
        help=('path(s) to file(s) containing dwelling specifications to run'),
        )
    parser.add_argument(
        '--parallel', '-p',
        action='store',
        type=int,
        default=0,
        help=('run calculations for different input files in parallel'
              '(specify no of files to run simultaneously)'),
        )
    parser.add_argument(
        '--input-only',
        action='store_true',
        default=False,
        help='write input fields only (completed with defaults), without results',
        )
    parser.add_argument(
        '--log-level',
        action='store',
        default='WARNING',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
        help='minimum level of log messages to display',
        )
    cli_args = parser.parse_args()

    logger.remove()
    logger.add(sys.stderr, level=cli_args.log_level)

    inp_filenames = cli_args.input_file
    input_only = cli_args.input_only

    if cli_args.parallel == 0:
        print('Running '+str(len(inp_filenames))+' cases in series')
        for inpfile in inp_filenames:
            run_assessment(inpfile, input_only)
    else:
        import multiprocessing as mp
        print('Running '+str(len(inp_filenames))+' cases in parallel'
              ' ('+str(cli_args.parallel)+' at a time)')
        run_assessment_args = [
            (inpfile, input_only)
            for inpfile in inp_filenames
            ]
        with mp.Pool(processes=cli_args.parallel) as p:
            p.starmap(run_assessment, run_assessment_args)
