"""gpsaxis.element.

Copyright (c) 2025 Will Bickerstaff
Licensed under the MIT License.
See LICENSE file in the root directory of this project.

Description: Validation and decimal/DMS conversion for one coordinate axis
Author: Will Bickerstaff
Version: 0.1
"""

import logging
import math
from typing import NamedTuple, Optional, Union
from gpsaxis.common import Axis, GPSDir, GpsError, GpsErrorType
from gpsaxis.typetool import to_float

# Decimal places used for seconds in the canonical text form
SECONDS_PRECISION = 3

Number = Union[int, float, str]


class DMS(NamedTuple):
    """Direction, degrees, minutes and seconds of one axis value."""

    direction: str
    degrees: Number
    minutes: Number
    seconds: Optional[Number] = None


def decimal_to_dms(decimal_value: float, is_longitude: bool) -> DMS:
    """Split a signed decimal degree value into its DMS parts.

    No validation is done here, the result is meant to be passed to a
    coordinate constructor which validates it.

    Args:
        decimal_value (float): The signed decimal degrees.
        is_longitude (bool): Select E/W instead of N/S letters.

    Returns:
        DMS: The direction letter, integer degrees, integer minutes and
             float seconds.
    """
    axis = Axis.LONGITUDE if is_longitude else Axis.LATITUDE
    direction = axis.negative if decimal_value < 0 else axis.positive
    value = abs(decimal_value)
    degrees = math.floor(value)
    remainder = (value - degrees) * 60
    minutes = math.floor(remainder)
    seconds = (remainder - minutes) * 60
    logging.debug("AXIS: %s decimal %s is %s %s %s %s", axis.value,
                  decimal_value, degrees, minutes, seconds, direction)
    return DMS(direction, degrees, minutes, seconds)


def _as_int(value) -> Optional[int]:
    """Return `value` as an int if it denotes a whole number."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str):
        text = value.strip()
        try:
            return int(text)
        except ValueError:
            pass
        try:
            number = to_float(text)
        except ValueError:
            return None
        return int(number) if number.is_integer() else None
    return None


def _as_float(value) -> Optional[float]:
    """Return `value` as a finite float or None."""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        try:
            number = float(value)
        except OverflowError:
            return None
    elif isinstance(value, str):
        try:
            number = to_float(value)
        except ValueError:
            return None
    else:
        return None
    return number if math.isfinite(number) else None


class CoordinateAxisElement:
    """A validated latitude or longitude value.

    Holds the direction letter, degrees, minutes and seconds of the value and
    the signed decimal degrees derived from them. Concrete classes bind the
    axis through the `AXIS` class attribute. Instances are immutable, all
    validation happens in the constructor.

    Args:
        direction (Union[str, GPSDir]): The direction letter, case is
                                        ignored.
        degrees (Union[int, str]): Whole degrees.
        minutes (Union[int, float, str]): Minutes. May be fractional when
                                          `seconds` is omitted.
        seconds (Optional[Union[int, float, str]]): Seconds.

    Raises:
        GpsError: If any of the parts is invalid for the axis.
    """

    AXIS: Axis = None

    def __init__(self, direction: Union[str, GPSDir], degrees: Number,
                 minutes: Number, seconds: Optional[Number] = None):
        if self.AXIS is None:
            raise TypeError(f"{type(self).__name__} has no axis")
        self._init_direction(direction)
        self._init_degrees(degrees)
        self._init_minutes(minutes, seconds)
        self._calc_dec()

    decimal_to_dms = staticmethod(decimal_to_dms)

    @property
    def axis(self) -> Axis:
        return self.AXIS

    @property
    def is_latitude(self) -> bool:
        """Return True if the value is a latitude (North/South)."""
        return self.AXIS is Axis.LATITUDE

    @property
    def is_longitude(self) -> bool:
        """Return True if the value is a longitude (East/West)."""
        return self.AXIS is Axis.LONGITUDE

    @property
    def lat_lng_str(self) -> str:
        """Return 'Latitude' or 'Longitude'."""
        return self.AXIS.value

    @property
    def direction(self) -> str:
        """The upper case direction letter."""
        return self._dir

    @property
    def degrees(self) -> int:
        return self._deg

    @property
    def minutes(self) -> int:
        return self._min

    @property
    def seconds(self) -> float:
        return self._sec

    @property
    def decimal_value(self) -> float:
        """Return the signed decimal degrees of the value."""
        return self._dec

    @property
    def deg_min_sec(self) -> str:
        """Get a readable Degrees, Minutes, Seconds (DMS) description.

        Returns:
            str: The formatted DMS string.
        """
        return "{} degrees, {} minutes, {} seconds {}".format(
            self.degrees, self.minutes, round(self.seconds, 2),
            self.direction)

    @property
    def canonical(self) -> str:
        """The canonical text form, `{deg}°{min}'{sec}"{dir}`.

        Seconds are rounded to `SECONDS_PRECISION` places. A rounding that
        reaches 60 seconds is carried into minutes, and 60 minutes into
        degrees, so the text can always be parsed back.
        """
        degrees, minutes = self.degrees, self.minutes
        seconds = round(self.seconds, SECONDS_PRECISION)
        if seconds >= 60:
            seconds -= 60
            minutes += 1
        if minutes >= 60:
            minutes -= 60
            degrees += 1
        return "{}°{}'{:.{prec}f}\"{}".format(
            degrees, minutes, seconds, self.direction,
            prec=SECONDS_PRECISION)

    def to_string(self) -> str:
        """String representation as deg, min, sec and decimal degrees."""
        return "{}: {}\t({})".format(self.lat_lng_str, self.deg_min_sec,
                                    round(self.decimal_value, 6))

    def __str__(self) -> str:
        return self.canonical

    def __repr__(self) -> str:
        return "{}({!r}, {!r}, {!r}, {!r})".format(
            type(self).__name__, self.direction, self.degrees,
            self.minutes, self.seconds)

    def __eq__(self, other) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.canonical == other.canonical

    def __hash__(self) -> int:
        return hash((self.AXIS, self.canonical))

    def _init_direction(self, direction: Union[str, GPSDir]) -> None:
        """Validate and store the direction letter.

        Raises:
            GpsError: If the direction is empty, not a single letter or not
                      one of the axis letters.
        """
        if isinstance(direction, GPSDir):
            direction = direction.value
        if not isinstance(direction, str) or not direction.strip():
            logging.debug("AXIS: Empty %s direction %r", self.lat_lng_str,
                          direction)
            raise GpsError(GpsErrorType.DIRECTION,
                           f"A {self.lat_lng_str} requires a direction.")
        letter = direction.strip().upper()
        if letter not in self.AXIS.letters:
            logging.debug("AXIS: Direction %r is invalid for %s",
                          direction, self.lat_lng_str)
            raise GpsError(GpsErrorType.DIRECTION,
                           f"'{direction}' is not one of "
                           f"{'/'.join(self.AXIS.letters)}.")
        self._dir = letter

    def _init_degrees(self, degrees: Number) -> None:
        """Validate and store the whole degrees.

        Raises:
            GpsError: If degrees is not a whole number within
                      [0, max degrees] for the axis.
        """
        value = _as_int(degrees)
        if value is None or not 0 <= value <= self.AXIS.max_degrees:
            logging.debug("AXIS: Degrees %r out of range for %s", degrees,
                          self.lat_lng_str)
            raise GpsError(GpsErrorType.DEGREES,
                           f"'{degrees}' is not within 0 and "
                           f"{self.AXIS.max_degrees}.")
        self._deg = value

    def _init_minutes(self, minutes: Number,
                      seconds: Optional[Number]) -> None:
        """Validate and store minutes and seconds.

        With `seconds` given, minutes must be whole and both parts must lie
        within [0, 60). Without `seconds`, minutes may be fractional, the
        fraction is converted into seconds.

        Raises:
            GpsError: If minutes or seconds are invalid.
        """
        if seconds is not None:
            value = _as_int(minutes)
            if value is None or not 0 <= value < 60:
                raise self._minutes_error(minutes)
            sec = _as_float(seconds)
            if sec is None or not 0 <= sec < 60:
                logging.debug("AXIS: Seconds %r out of range", seconds)
                raise GpsError(GpsErrorType.SECONDS,
                               f"'{seconds}' is not within [0, 60).")
            self._min = value
            self._sec = sec
            return

        fractional = _as_float(minutes)
        if fractional is None or fractional < 0:
            raise self._minutes_error(minutes)
        value = math.floor(fractional)
        if value >= 60:
            raise self._minutes_error(minutes)
        self._min = value
        # Derived, so never range checked
        self._sec = (fractional - value) * 60

    @staticmethod
    def _minutes_error(minutes) -> GpsError:
        logging.debug("AXIS: Minutes %r out of range", minutes)
        return GpsError(GpsErrorType.MINUTES,
                        f"'{minutes}' is not within [0, 60).")

    def _calc_dec(self) -> None:
        """Calculate the signed decimal degrees from the validated parts.

        Raises:
            GpsError: If the value exceeds the axis maximum, e.g. 90°30'N.
        """
        magnitude = self._deg + (self._min / 60) + (self._sec / 3600)
        if magnitude > self.AXIS.max_degrees:
            logging.debug("AXIS: %s %s exceeds %s degrees", self.lat_lng_str,
                          magnitude, self.AXIS.max_degrees)
            raise GpsError(GpsErrorType.DEGREES,
                           f"{magnitude} exceeds {self.AXIS.max_degrees}.")
        sign = -1 if self._dir == self.AXIS.negative else 1
        self._dec = sign * magnitude
        logging.debug("AXIS: %s is %s (%s decimal degrees)",
                      self.lat_lng_str, self.deg_min_sec, self._dec)
