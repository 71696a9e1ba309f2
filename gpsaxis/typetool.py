"""gpsaxis.typetool.

Copyright (c) 2025 Will Bickerstaff
Licensed under the MIT License.
See LICENSE file in the root directory of this project.

Description: Value recognizers used when coercing input to coordinates
Author: Will Bickerstaff
Version: 0.1
"""

import numbers
import re
from typing import Optional

DECIMAL_PATTERN = re.compile(r'^-?\d+(?:[.,]\d+)?$')


def match_decimal(text: str) -> Optional[re.Match]:
    """Match `text` if it denotes a decimal number.

    An optional leading '-' is allowed and the fractional separator may be
    either '.' or ','. Surrounding whitespace is ignored.
    """
    if not isinstance(text, str):
        return None
    return DECIMAL_PATTERN.match(text.strip())


def is_decimal(text: str) -> bool:
    """Return True if `text` denotes a decimal number."""
    return match_decimal(text) is not None


def normalize_decimal(text: str) -> str:
    """Trim `text` and replace a ',' decimal separator with '.'."""
    return text.strip().replace(',', '.')


def to_float(text: str) -> float:
    """Convert a decimal string using either separator to a float.

    Raises:
        ValueError: If the text is not numeric.
    """
    return float(normalize_decimal(text))


def associated_string(value) -> Optional[str]:
    """Return the string form of `value`, or None if it has none.

    Strings are returned unchanged, bytes are decoded as UTF-8 and numbers
    are formatted with `str()`. Any other object only has a string form when
    its class defines its own `__str__`. Booleans and None have no string
    form.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, (bytes, bytearray)):
        try:
            return bytes(value).decode("utf-8")
        except UnicodeDecodeError:
            return None
    if isinstance(value, numbers.Number):
        return str(value)
    if type(value).__str__ is not object.__str__:
        return str(value)
    return None
