#!/usr/bin/env python3

""" TODO Copyright & licensing notices

This module provides the recursive default-merge used by every calculation
stage to complete partially specified input.

A value in the configuration is either a nested section (a dict) or a leaf
(anything else: numbers, strings, booleans, lists, None). Leaves already
present in the configuration are never replaced, so user input at any depth
survives, and merging a further template onto an already-completed record only
adds what is still missing.
"""

# Standard library imports
from copy import deepcopy


def is_section(value):
    """ Return True if value is a nested configuration section rather than a leaf """
    return isinstance(value, dict)

def add_defaults(data, defaults):
    """ Add default values from a template onto a configuration, in place

    For example, add_defaults({}, {'a': 1}) gives {'a': 1}, whereas
    add_defaults({'a': 2}, {'a': 1}) leaves the first argument unchanged as 'a'
    is already specified. Nested sections are merged recursively, so
    add_defaults({'a': {'b': 1}}, {'a': {'c': 3}}) gives {'a': {'b': 1, 'c': 3}}.

    Arguments:
    data     -- dict holding the configuration to be completed (modified in place)
    defaults -- dict holding the template of default values (not modified)

    Returns the (modified) data argument.
    """
    for key, default_value in defaults.items():
        if key not in data:
            # Copy so that records never share mutable state with the template
            data[key] = deepcopy(default_value)
        elif is_section(data[key]) and is_section(default_value):
            add_defaults(data[key], default_value)
    return data
