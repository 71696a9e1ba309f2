"""gpsaxis.parser.

Copyright (c) 2025 Will Bickerstaff
Licensed under the MIT License.
See LICENSE file in the root directory of this project.

Description: Ordered rule chain turning coordinate text into DMS parts
Author: Will Bickerstaff
Version: 0.1
"""

import logging
import math
import re
from typing import Callable, NamedTuple, Optional, Tuple
from gpsaxis.common import Axis
from gpsaxis.element import DMS, decimal_to_dms
from gpsaxis.typetool import match_decimal, normalize_decimal, to_float

DEGREE_WORD = re.compile(r'\s*deg(?:rees?)?', re.IGNORECASE)
SIGNED_DEGREES = re.compile(r'^(-?)\d+[°d:]')

DMS_PATTERN = re.compile(r'^(\d{1,3})[°d:]\s*(\d{1,2})[:\'](.+)$')
FRACTIONAL_MINUTES_PATTERN = re.compile(r'^(\d{1,3})°\s*([\d.,]+)\'?$')
SECONDS_FIRST_PATTERN = re.compile(
    r'^(\d{1,3})°\s*([\d.,]+)"\s*([\d.,]+)\'?$')


class ParseRule(NamedTuple):
    """A named matcher and the extractor building DMS parts from its match.

    `match` is called with the stripped text, `extract` with the match, the
    direction letter found so far (None for top level rules) and the axis.
    An extractor returning None rejects the match and the next rule is tried.
    """

    name: str
    match: Callable[[str], Optional[re.Match]]
    extract: Callable[[re.Match, Optional[str], Axis], Optional[DMS]]


def _decimal_value(match: re.Match, direction: Optional[str],
                   axis: Axis) -> Optional[DMS]:
    """Signed decimal text, the sign selects the direction.

    Used on the whole text and again on the text left after a direction
    letter was removed, where the letter is ignored. Digit strings too long
    for a float give None.
    """
    value = to_float(match.group(0))
    if not math.isfinite(value):
        logging.debug("PARSE: %s decimal %r is out of float range",
                      axis.value, match.group(0)[:20])
        return None
    return decimal_to_dms(value, axis.is_longitude)


def _dms_token(match: re.Match, direction: str, axis: Axis) -> DMS:
    seconds = match.group(3).strip().rstrip('"')
    return DMS(direction, match.group(1), match.group(2),
               normalize_decimal(seconds))


def _fractional_minutes_token(match: re.Match, direction: str,
                              axis: Axis) -> DMS:
    return DMS(direction, match.group(1), normalize_decimal(match.group(2)))


def _seconds_first_token(match: re.Match, direction: str,
                         axis: Axis) -> DMS:
    # The value before '"' is passed as minutes and the value before "'"
    # as seconds. Existing callers depend on this order.
    return DMS(direction, match.group(1), normalize_decimal(match.group(2)),
               normalize_decimal(match.group(3)))


# Rules tried on the whole text before any direction handling
TEXT_RULES: Tuple[ParseRule, ...] = (
    ParseRule("decimal", match_decimal, _decimal_value),
)

# Rules tried, in order, on the text left after direction extraction
TOKEN_RULES: Tuple[ParseRule, ...] = (
    ParseRule("dms", DMS_PATTERN.match, _dms_token),
    ParseRule("decimal", match_decimal, _decimal_value),
    ParseRule("fractional_minutes", FRACTIONAL_MINUTES_PATTERN.match,
              _fractional_minutes_token),
    ParseRule("seconds_first", SECONDS_FIRST_PATTERN.match,
              _seconds_first_token),
)

_LEADING_LETTER = {
    axis: re.compile(r'^([{}])(.+)$'.format(''.join(axis.letters)),
                     re.IGNORECASE)
    for axis in Axis}
_TRAILING_LETTER = {
    axis: re.compile(r'^(.+)([{}])$'.format(''.join(axis.letters)),
                     re.IGNORECASE)
    for axis in Axis}


def extract_direction(text: str, axis: Axis) -> Optional[Tuple[str, str]]:
    """Split the direction of a coordinate text from the rest of it.

    A leading or trailing direction letter of the axis is used when present.
    Otherwise a text starting with (optionally negative) degrees followed by
    a degree marker gives the negative letter for a leading '-' and the
    positive letter without one.

    Args:
        text (str): The coordinate text, degree words already replaced.
        axis (Axis): The axis being parsed.

    Returns:
        Optional[Tuple[str, str]]: The direction letter and the remaining
                                   text, or None if no direction is found.
    """
    match = _LEADING_LETTER[axis].match(text)
    if match:
        return match.group(1).upper(), match.group(2).strip()
    match = _TRAILING_LETTER[axis].match(text)
    if match:
        return match.group(2).upper(), match.group(1).strip()
    match = SIGNED_DEGREES.match(text)
    if match:
        if match.group(1) == '-':
            return axis.negative, text[1:].strip()
        return axis.positive, text
    return None


def _apply(rules: Tuple[ParseRule, ...], text: str,
           direction: Optional[str], axis: Axis) -> Optional[DMS]:
    for rule in rules:
        match = rule.match(text)
        if not match:
            continue
        dms = rule.extract(match, direction, axis)
        if dms is not None:
            logging.debug("PARSE: %s rule '%s' matched %r", axis.value,
                          rule.name, text)
            return dms
    return None


def parse(text: str, axis: Axis) -> Optional[DMS]:
    """Extract the DMS parts of a coordinate text for one axis.

    Only the syntax is checked, the parts are validated when passed to a
    coordinate constructor. The first matching rule wins.

    Supported forms include:
        - Decimal degrees: "40.446195", "-79,948862"
        - DMS: "40°26'46.302\"N", "N 40d 26' 46\"", "-79:56:55.903"
        - Decimal minutes: "40° 26.7717'N"
        - Direction with decimal degrees: "40.446195 N"

    Args:
        text (str): The coordinate text.
        axis (Axis): The axis to parse for.

    Returns:
        Optional[DMS]: The parts, or None if no rule matches.
    """
    if not isinstance(text, str):
        return None
    text = text.strip()
    dms = _apply(TEXT_RULES, text, None, axis)
    if dms is not None:
        return dms

    text = DEGREE_WORD.sub('°', text)
    extracted = extract_direction(text, axis)
    if extracted is None:
        logging.debug("PARSE: No %s direction in %r", axis.value, text)
        return None
    direction, token = extracted
    dms = _apply(TOKEN_RULES, token.strip(), direction, axis)
    if dms is None:
        logging.debug("PARSE: No rule matched %s text %r", axis.value, text)
    return dms
