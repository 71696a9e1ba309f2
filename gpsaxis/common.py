"""gpsaxis.common.

Copyright (c) 2025 Will Bickerstaff
Licensed under the MIT License.
See LICENSE file in the root directory of this project.

Description: Directions, axes and errors shared by the coordinate classes
Author: Will Bickerstaff
Version: 0.1
"""

from enum import Enum
from typing import Optional


class GPSDir(Enum):
    """Enumeration for cardinal directions in GPS coordinates."""

    North = 'N'
    N = 'N'
    South = 'S'
    S = 'S'
    East = 'E'
    E = 'E'
    West = 'W'
    W = 'W'


class Axis(Enum):
    """The two coordinate axes and the constants bound to each of them."""

    LATITUDE = "Latitude"
    LONGITUDE = "Longitude"

    @property
    def positive(self) -> str:
        """Direction letter for positive decimal values (N or E)."""
        return GPSDir.North.value if self is Axis.LATITUDE \
            else GPSDir.East.value

    @property
    def negative(self) -> str:
        """Direction letter for negative decimal values (S or W)."""
        return GPSDir.South.value if self is Axis.LATITUDE \
            else GPSDir.West.value

    @property
    def letters(self) -> tuple:
        """Both direction letters valid for the axis."""
        return (self.positive, self.negative)

    @property
    def max_degrees(self) -> int:
        """Largest degree value allowed on the axis."""
        return 90 if self is Axis.LATITUDE else 180

    @property
    def is_longitude(self) -> bool:
        return self is Axis.LONGITUDE


class GpsErrorType(str, Enum):
    """The coordinate part a validation failure refers to."""

    DIRECTION = "direction"
    DEGREES = "degrees"
    MINUTES = "minutes"
    SECONDS = "seconds"


class GpsError(ValueError):
    """Raised when a part of a coordinate axis value is invalid.

    The message always names the offending part, any additional detail is
    appended to it.

    Args:
        error_type (GpsErrorType): The part of the coordinate that failed
                                   validation.
        msg (Optional[str]): Additional detail for the message.
        code (int): Numeric error code. Defaults to 256.
        cause (Optional[BaseException]): The underlying error, if any.
    """

    DEFAULT_CODE = 256

    def __init__(self, error_type: GpsErrorType, msg: Optional[str] = None,
                 code: int = DEFAULT_CODE,
                 cause: Optional[BaseException] = None):
        self._error_type = GpsErrorType(error_type)
        self._code = code
        message = ("Invalid or unknown value for a geo coordinate "
                   f"\"{self._error_type.value}\" element/part!")
        if msg:
            message = f"{message} {msg}"
        super().__init__(message)
        if cause is not None:
            self.__cause__ = cause

    @property
    def error_type(self) -> GpsErrorType:
        """The coordinate part that caused the error."""
        return self._error_type

    @property
    def code(self) -> int:
        return self._code
