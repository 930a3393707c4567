#!/usr/bin/env python3

""" TODO Copyright & licensing notices

This module contains unit tests for the defaults module
"""

# Standard library imports
import unittest

# Set path to include modules to be tested (must be before local imports)
from unit_tests.common import test_setup
test_setup()

# Local imports
from dwelling_model.defaults import add_defaults, is_section

class TestAddDefaults(unittest.TestCase):
    """ Unit tests for recursive default merge """

    def test_missing_key_added(self):
        self.assertEqual(add_defaults({}, {'a': 1}), {'a': 1}, "missing key not added")

    def test_present_leaf_not_replaced(self):
        data = {'a': 2}
        add_defaults(data, {'a': 1})
        self.assertEqual(data, {'a': 2}, "present value replaced")

    def test_nested_merge(self):
        data = {'a': {'b': 1}}
        add_defaults(data, {'a': {'c': 3}})
        self.assertEqual(data, {'a': {'b': 1, 'c': 3}}, "nested sections not merged")

    def test_deep_nesting(self):
        data = {'a': {'b': {'c': None}}}
        add_defaults(data, {'a': {'b': {'c': 5, 'd': 6}, 'e': [1, 2]}})
        self.assertEqual(
            data,
            {'a': {'b': {'c': None, 'd': 6}, 'e': [1, 2]}},
            "deeply nested sections not merged correctly",
            )

    def test_leaf_not_replaced_by_section(self):
        """ A leaf in the data is kept even where the template has a section """
        data = {'a': 0}
        add_defaults(data, {'a': {'b': 1}})
        self.assertEqual(data, {'a': 0}, "leaf replaced by section")

    def test_section_not_replaced_by_leaf(self):
        data = {'a': {'b': 1}}
        add_defaults(data, {'a': 0})
        self.assertEqual(data, {'a': {'b': 1}}, "section replaced by leaf")

    def test_lists_are_leaves(self):
        data = {'a': [3]}
        add_defaults(data, {'a': [1, 2]})
        self.assertEqual(data, {'a': [3]}, "list merged rather than kept")

    def test_repeat_merge_idempotent(self):
        template = {'a': {'b': 1, 'c': {'d': 2}}, 'e': 3}
        data = {'a': {'c': {'d': 7}}}
        add_defaults(data, template)
        first = repr(data)
        add_defaults(data, template)
        self.assertEqual(repr(data), first, "repeated merge changed the data")

    def test_template_not_aliased(self):
        """ Values copied from the template do not share mutable state with it """
        template = {'a': {'b': [1, 2]}}
        data = add_defaults({}, template)
        data['a']['b'].append(3)
        self.assertEqual(template, {'a': {'b': [1, 2]}}, "template modified via data")

    def test_is_section(self):
        self.assertTrue(is_section({}), "dict not recognised as section")
        for leaf in (0, 1.5, 'x', True, None, [1]):
            with self.subTest(leaf=leaf):
                self.assertFalse(is_section(leaf), "leaf recognised as section")

if __name__ == '__main__':
    unittest.main()
