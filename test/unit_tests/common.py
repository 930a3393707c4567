#!/usr/bin/env python3

""" TODO Copyright & licensing notices

This module contains common setup for the unit tests
"""

# Standard library imports
import os
import sys

this_directory = os.path.dirname(os.path.abspath(__file__))
src_directory = os.path.join(this_directory, '..', '..', 'src')


def test_setup():
    """ Add the source directory to the path, so that modules to be tested can be imported """
    src_path = os.path.normpath(src_directory)
    if src_path not in sys.path:
        sys.path.insert(0, src_path)
