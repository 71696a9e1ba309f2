"""gpsaxis.coord.

Copyright (c) 2025 Will Bickerstaff
Licensed under the MIT License.
See LICENSE file in the root directory of this project.

Description: Latitude, Longitude and the coordinate pair holding both
Author: Will Bickerstaff
Version: 0.1
"""

import logging
import math
import numbers
import re
from collections.abc import Mapping
from enum import Enum
from typing import Optional, Tuple
from xml.etree.ElementTree import Element
from gpsaxis import parser
from gpsaxis.common import Axis, GpsError
from gpsaxis.element import CoordinateAxisElement, DMS
from gpsaxis.typetool import associated_string

PART_KEYS = ("direction", "degrees", "minutes", "seconds")


class InputKind(Enum):
    """The kinds of value accepted by `try_parse`."""

    ELEMENT = "element"
    AGGREGATE = "aggregate"
    DECIMAL = "decimal"
    ATTRIBUTES = "attributes"
    STRING = "string"
    UNSUPPORTED = "unsupported"


def classify(value, element_cls: type) -> Tuple[InputKind, object]:
    """Classify `value` for parsing into an `element_cls` instance.

    Args:
        value: The value to classify.
        element_cls (type): The target axis class.

    Returns:
        Tuple[InputKind, object]: The input kind and the payload to parse,
            which is the value itself, a float, a mapping of attributes or a
            string depending on the kind.
    """
    if value is None:
        return InputKind.UNSUPPORTED, None
    if isinstance(value, element_cls):
        return InputKind.ELEMENT, value
    if isinstance(value, Coordinate):
        return InputKind.AGGREGATE, value
    if isinstance(value, numbers.Real) and not isinstance(value, bool):
        try:
            return InputKind.DECIMAL, float(value)
        except OverflowError:
            return InputKind.UNSUPPORTED, None
    if isinstance(value, Element):
        return InputKind.ATTRIBUTES, value.attrib
    if isinstance(value, Mapping):
        return InputKind.ATTRIBUTES, value
    text = associated_string(value)
    if text is None:
        return InputKind.UNSUPPORTED, None
    return InputKind.STRING, text


class _AxisValue(CoordinateAxisElement):
    """Parsing and comparison shared by `Latitude` and `Longitude`."""

    @classmethod
    def _build(cls, dms: DMS):
        """Construct from DMS parts, returning None if they are invalid."""
        try:
            return cls(*dms)
        except GpsError as e:
            logging.debug("COORD: %s %s rejected: %s", cls.AXIS.value,
                          tuple(dms), e)
            return None

    @classmethod
    def from_decimal(cls, decimal_value: float):
        """Create an instance from signed decimal degrees.

        Raises:
            GpsError: If the value is out of range for the axis.
        """
        return cls(*cls.decimal_to_dms(decimal_value, cls.AXIS.is_longitude))

    @classmethod
    def try_parse_string(cls, text: str):
        """Parse a coordinate text without raising.

        Args:
            text (str): The text, see `gpsaxis.parser.parse` for formats.

        Returns:
            The parsed instance, or None if the text is not a valid value for
            the axis.
        """
        dms = parser.parse(text, cls.AXIS)
        if dms is None:
            return None
        return cls._build(dms)

    @classmethod
    def try_parse(cls, value):
        """Convert any supported value to an instance without raising.

        Accepted values, in order of precedence: an instance of the class
        (returned unchanged), a `Coordinate` (its member for the axis), a
        real number of decimal degrees, a mapping or XML element of
        attributes, and anything with a string form.

        Returns:
            The instance, or None if the value cannot be converted.
        """
        kind, payload = classify(value, cls)
        if kind is InputKind.ELEMENT:
            return payload
        if kind is InputKind.AGGREGATE:
            return payload.latitude if cls.AXIS is Axis.LATITUDE \
                else payload.longitude
        if kind is InputKind.DECIMAL:
            if not math.isfinite(payload):
                return None
            return cls._build(
                cls.decimal_to_dms(payload, cls.AXIS.is_longitude))
        if kind is InputKind.ATTRIBUTES:
            return cls._from_attributes(payload)
        if kind is InputKind.STRING:
            return cls.try_parse_string(payload)
        logging.debug("COORD: Cannot parse %s from %s", cls.AXIS.value,
                      type(value).__name__)
        return None

    @classmethod
    def _from_attributes(cls, attributes: Mapping):
        """Parse serialized attributes, e.g. from XML or JSON.

        Either a single attribute named after the axis holds the whole value,
        or `direction`, `degrees`, `minutes` and optionally `seconds` hold
        the parts.
        """
        keys = {str(key).lower(): key for key in attributes}
        axis_key = keys.get(cls.AXIS.value.lower())
        if axis_key is not None:
            inner = attributes[axis_key]
            if isinstance(inner, Mapping):
                return None
            return cls.try_parse(inner)
        if not all(key in keys for key in PART_KEYS[:3]):
            return None
        parts = [attributes[keys[key]] if key in keys else None
                 for key in PART_KEYS]
        return cls._build(DMS(*parts))

    def equals(self, value) -> bool:
        """Return True if `value` denotes the same axis value.

        The value is converted with `try_parse` and the canonical texts are
        compared. Values that cannot be converted are never equal.
        """
        other = type(self).try_parse(value)
        if other is None:
            return False
        return other.canonical == self.canonical


class Latitude(_AxisValue):
    """A latitude, from 90° N (90.0) to 90° S (-90.0)."""

    AXIS = Axis.LATITUDE


class Longitude(_AxisValue):
    """A longitude, from 180° E (180.0) to 180° W (-180.0)."""

    AXIS = Axis.LONGITUDE


class Coordinate:
    """A position made of one `Latitude` and one `Longitude`.

    Args:
        latitude: Anything `Latitude.try_parse` accepts.
        longitude: Anything `Longitude.try_parse` accepts.

    Raises:
        ValueError: If either value cannot be converted.
    """

    PAIR_SEPARATOR = re.compile(r'\s*[;,]\s+|\s*;\s*')

    def __init__(self, latitude, longitude):
        self._lat = Latitude.try_parse(latitude)
        if self._lat is None:
            logging.error("COORD: Invalid latitude %r", latitude)
            raise ValueError(f"Invalid latitude: {latitude!r}")
        self._lon = Longitude.try_parse(longitude)
        if self._lon is None:
            logging.error("COORD: Invalid longitude %r", longitude)
            raise ValueError(f"Invalid longitude: {longitude!r}")

    @property
    def latitude(self) -> Latitude:
        return self._lat

    @property
    def longitude(self) -> Longitude:
        return self._lon

    @property
    def decimal_value(self) -> Tuple[float, float]:
        """Return (latitude, longitude) in decimal degrees."""
        return self._lat.decimal_value, self._lon.decimal_value

    @classmethod
    def try_parse_string(cls, text: str) -> Optional["Coordinate"]:
        """Parse a "latitude, longitude" text without raising.

        The two values are separated by ';' or by ',' followed by whitespace,
        so a ',' decimal separator inside a value is not mistaken for the
        separator.
        """
        if not isinstance(text, str):
            return None
        parts = cls.PAIR_SEPARATOR.split(text.strip())
        if len(parts) != 2:
            logging.debug("COORD: %r is not a latitude/longitude pair", text)
            return None
        lat = Latitude.try_parse_string(parts[0])
        lon = Longitude.try_parse_string(parts[1])
        if lat is None or lon is None:
            return None
        return cls(lat, lon)

    def to_string(self) -> str:
        return "{}\n{}".format(self._lat.to_string(), self._lon.to_string())

    def __str__(self) -> str:
        return f"{self._lat}, {self._lon}"

    def __repr__(self) -> str:
        return f"Coordinate({self._lat!r}, {self._lon!r})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, Coordinate):
            return NotImplemented
        return self._lat == other.latitude and self._lon == other.longitude

    def __hash__(self) -> int:
        return hash((self._lat, self._lon))
