#!/usr/bin/env python3

""" TODO Copyright & licensing notices

This module provides objects to represent building fabric elements such as
walls, floors, roofs and windows, and the calculation stage for fabric heat
loss, thermal mass and solar gains through windows.

Heat loss for each element is its net area (gross area less the area of any
windows within it) multiplied by its U-value. Thermal bridging is accounted for
as a Y-value applied to the total external area. Solar gains through windows
are calculated according to SAP 2012 section 6 and Table 6d.
"""

# Standard library imports
from enum import Enum
from numbers import Number

# Third-party imports
from loguru import logger

# Local imports
import dwelling_model.monthly as monthly
import dwelling_model.units as units
from dwelling_model.defaults import add_defaults
from dwelling_model.categories import LossCategory, GainCategory, set_losses, set_gains
from dwelling_model.external_conditions import ExternalConditions

FABRIC_DEFAULTS = {
    'fabric': {
        'elements': [],
        'thermal_bridging_yvalue': 0.15,
        },
    }

# Tilt of windows for solar radiation calculation, in degrees from horizontal
WINDOW_TILT = 90

# Proportion of solar radiation transmitted at normal incidence that is
# transmitted on average over all angles of incidence
FRACTION_TRANSMITTED = 0.9


def is_number(value):
    """ Return True if value is a number (booleans are not numbers here) """
    return isinstance(value, Number) and not isinstance(value, bool)


class ElementType(Enum):
    FLOOR = 'floor'
    WALL = 'wall'
    ROOF = 'roof'
    WINDOW = 'window'

    @classmethod
    def from_string(cls, strval):
        """ Return the element type matching strval, or None if not recognised """
        for element_type in cls:
            if element_type.value == strval:
                return element_type
        return None


class BuildingElement:
    """ A base class with common functionality for building fabric elements

    Classes for particular types of building element should inherit from this
    one and add/override functionality as required.
    """

    def __init__(self, area, u_value, k_value):
        """ Initialisation common to all building element types

        Arguments:
        area    -- gross area (in m2) of this building element
        u_value -- heat transfer coefficient of the element, in W / (m2.K)
        k_value -- areal heat capacity of the element, in kJ / (m2.K)

        Other variables:
        window_area -- total area of windows within this element, in m2
        """
        self.__area = area
        self.__u_value = u_value
        self.__k_value = k_value
        self.__window_area = 0.0

    def subtract_window(self, window_area):
        """ Register a window of the given area (in m2) within this element """
        self.__window_area += window_area

    def area(self):
        return self.__area

    def window_area(self):
        return self.__window_area

    def net_area(self):
        """ Return area of element, excluding any windows within it, in m2 """
        return self.__area - self.__window_area

    def u_value(self):
        return self.__u_value

    def is_external(self):
        """ Return True if element is part of the external envelope

        Elements with zero U-value (e.g. internal walls) lose no heat and are
        not included in the area subject to thermal bridging.
        """
        return self.__u_value != 0

    def fabric_heat_loss(self):
        """ Return the fabric heat loss for the element, in W / K """
        return self.net_area() * self.__u_value

    def heat_capacity(self):
        """ Return the heat capacity of the element, in kJ / K """
        if self.__k_value == 0:
            return 0.0
        return self.__k_value * self.net_area()

    def solar_gains_monthly(self, external_conditions):
        """ Return list of solar gains through the element, in W (none for opaque elements) """
        return monthly.zeros()


class BuildingElementOpaque(BuildingElement):
    """ A class to represent opaque building elements (floors, walls and roofs) """
    pass


class BuildingElementTransparent(BuildingElement):
    """ A class to represent transparent building elements (windows) """

    # Access factors from SAP 2012 Table 6d, indexed by overshading class then
    # winter (0) or summer (1)
    __ACCESS_FACTORS = (
        (0.3, 0.5),   # Heavy overshading
        (0.54, 0.7),  # More than average
        (0.77, 0.9),  # Average or unknown
        (1.0, 1.0),   # Very little
        )

    # Solar access factors for calculation of daylighting, by overshading class
    __LIGHT_ACCESS_FACTORS = (0.5, 0.67, 0.83, 1.0)

    # Orientation codes for secondary compass points map onto the codes
    # used for solar radiation (SE/SW, East/West, NE/NW)
    __ORIENTATION_MAP = {5: 3, 6: 2, 7: 1}

    def __init__(self, area, u_value, k_value, orientation, overshading, g_value, frame_factor):
        """ Construct a BuildingElementTransparent object

        Arguments (in addition to those for BuildingElement):
        orientation  -- orientation code, 0 (North) to 7; codes 5 to 7 are
                        treated as 3 (SE/SW), 2 (East/West) and 1 (NE/NW)
        overshading  -- overshading class, 0 (heavy) to 3 (very little)
        g_value      -- total solar energy transmittance at normal incidence
        frame_factor -- fraction of window area that is glazed
        """
        super().__init__(area, u_value, k_value)
        self.__orientation = self.__ORIENTATION_MAP.get(orientation, orientation)
        self.__overshading = overshading
        self.__g_value = g_value
        self.__frame_factor = frame_factor

    def orientation(self):
        return self.__orientation

    def access_factor(self, month):
        season = 1 if monthly.is_summer(month) else 0
        return self.__ACCESS_FACTORS[self.__overshading][season]

    def solar_gains_monthly(self, external_conditions):
        """ Return list of mean solar gains through the window for each month, in W """
        return [
            self.access_factor(month)
            * self.area()
            * external_conditions.solar_radiation(self.__orientation, WINDOW_TILT, month)
            * FRACTION_TRANSMITTED
            * self.__g_value
            * self.__frame_factor
            for month in range(monthly.MONTHS)
            ]

    def light_gain(self):
        """ Return the effective glazed area for daylighting, in m2 (numerator of GL) """
        return FRACTION_TRANSMITTED * self.area() * self.__g_value * self.__frame_factor \
            * self.__LIGHT_ACCESS_FACTORS[self.__overshading]


def element_area(element):
    """ Return gross area of element from its dimensions, or its area, or zero """
    if is_number(element.get('l')) and is_number(element.get('h')):
        return element['l'] * element['h']
    if is_number(element.get('area')):
        return element['area']
    return 0.0

def subtractfrom_index(element, num_elements):
    """ Return the index of the element a window's area is subtracted from

    Raises IndexError if the reference is not a whole number within the
    element list. Negative indices are not counted from the end of the list.
    """
    index = element['subtractfrom']
    if (isinstance(index, float) and not index.is_integer()) \
            or not 0 <= index < num_elements:
        raise IndexError(
            'Window subtractfrom reference out of range: ' + str(index)
            )
    return int(index)

def create_element(element, element_type):
    """ Create a BuildingElement object from its definition in the assessment record """
    area = element_area(element)
    u_value = element.get('uvalue', float('nan'))
    k_value = element.get('kvalue', 0)

    if element_type == ElementType.WINDOW:
        return BuildingElementTransparent(
            area,
            u_value,
            k_value,
            element['orientation'],
            element['overshading'],
            element.get('g', float('nan')),
            element.get('ff', float('nan')),
            )
    return BuildingElementOpaque(area, u_value, k_value)

def fabric(data, datasets):
    """ Calculate fabric heat loss, thermal mass parameter and solar gains

    Registers the 'fabric' heat loss and 'solar' heat gain month vectors and
    sets TMP (thermal mass parameter) and GL (glazing light gain ratio).
    """
    add_defaults(data, FABRIC_DEFAULTS)
    fabric_data = data['fabric']
    element_dicts = fabric_data['elements']

    element_types = []
    for element in element_dicts:
        element_type = ElementType.from_string(element.get('type'))
        if element_type is None:
            logger.warning('Unknown fabric element type: {}', element.get('type'))
        element_types.append(element_type)

    elements = [
        create_element(element, element_type)
        for element, element_type in zip(element_dicts, element_types)
        ]

    # Net off window areas from the elements which contain them
    for element, element_type, element_obj in zip(element_dicts, element_types, elements):
        if element_type == ElementType.WINDOW and is_number(element.get('subtractfrom')):
            elements[subtractfrom_index(element, len(elements))].subtract_window(element_obj.area())

    totals_WK = {element_type: 0.0 for element_type in ElementType}
    totals_area = {element_type: 0.0 for element_type in ElementType}
    total_heat_loss_WK = 0.0
    total_external_area = 0.0
    total_thermal_capacity = 0.0
    annual_solar_gain = 0.0
    light_gain = 0.0
    solar_gains = monthly.zeros()

    ext_cond = ExternalConditions(data['region'], data['altitude'], datasets)

    for element, element_type, element_obj in zip(element_dicts, element_types, elements):
        heat_loss = element_obj.fabric_heat_loss()
        element['area'] = element_obj.area()
        element['netarea'] = element_obj.net_area()
        element['wk'] = heat_loss
        if element_type != ElementType.WINDOW:
            element['windowarea'] = element_obj.window_area()

        total_heat_loss_WK += heat_loss
        if element_obj.is_external():
            total_external_area += element_obj.net_area()
        if element_type is not None:
            totals_WK[element_type] += heat_loss
            totals_area[element_type] += element_obj.net_area()

        total_thermal_capacity += element_obj.heat_capacity()

        if element_type == ElementType.WINDOW:
            gains = element_obj.solar_gains_monthly(ext_cond)
            solar_gains = monthly.add(solar_gains, gains)
            element['gain'] = monthly.mean(gains)
            annual_solar_gain += element['gain']
            light_gain += element_obj.light_gain()

    thermal_bridging_heat_loss = total_external_area * fabric_data['thermal_bridging_yvalue']
    total_heat_loss_WK += thermal_bridging_heat_loss

    for element_type in ElementType:
        fabric_data['total_' + element_type.value + '_WK'] = totals_WK[element_type]
        fabric_data['total_' + element_type.value + '_area'] = totals_area[element_type]
    fabric_data['total_external_area'] = total_external_area
    fabric_data['thermal_bridging_heat_loss'] = thermal_bridging_heat_loss
    fabric_data['total_heat_loss_WK'] = total_heat_loss_WK
    fabric_data['total_thermal_capacity'] = total_thermal_capacity
    fabric_data['annual_solar_gain'] = annual_solar_gain
    fabric_data['annual_solar_gain_kwh'] = units.watts_to_kWh_per_year(annual_solar_gain)

    if data['TFA'] > 0:
        data['TMP'] = total_thermal_capacity / data['TFA']
        data['GL'] = light_gain / data['TFA']
    else:
        data['TMP'] = 0.0
        data['GL'] = 0.0

    set_losses(data, LossCategory.FABRIC, monthly.constant(total_heat_loss_WK))
    set_gains(data, GainCategory.SOLAR, solar_gains)
