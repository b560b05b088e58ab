"""
Contains the string helpers shared by the validators: lexical number predicates, the canonical text form of
number values and the compiled pattern cache.
"""
import math
import re
from decimal import Decimal
from functools import lru_cache
from typing import Any, Optional

from fieldguard.validation.core.errors import InvalidPatternError

_FLOAT_REGEX = re.compile(r"[+-]?[0-9]+(?:\.[0-9]*)?")
_INT_REGEX = re.compile(r"[+-]?[0-9]+")

# Outside of this range numbers are written in exponent notation (which is never a valid float lexical form).
_PLAIN_NOTATION_MIN = 1e-6
_PLAIN_NOTATION_MAX = 1e21


def is_float(text: str) -> bool:
    """
    True iff `text` is a decimal number: an optional sign, digits, an optional decimal point and optional fraction
    digits. Only ASCII digits are accepted, there is no locale handling.
    """
    return _FLOAT_REGEX.fullmatch(text) is not None


def is_int(text: str) -> bool:
    """
    True iff `text` is an integer: an optional sign followed by ASCII digits only.
    """
    return _INT_REGEX.fullmatch(text) is not None


def is_blank(char: str) -> bool:
    """True if the character is whitespace (including the byte order mark)"""
    return char.isspace() or char == "\ufeff"


def to_canonical_text(value: Optional[Any]) -> str:
    """
    Returns the text form of a number value as it would have been typed by a user.
    Strings are returned as they are, `None` becomes the empty string and integral floats lose their trailing `.0`.
    """
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if not math.isfinite(value):
            return str(value)
        if value.is_integer() and abs(value) < _PLAIN_NOTATION_MAX:
            return str(int(value))
        if _PLAIN_NOTATION_MIN <= abs(value) < _PLAIN_NOTATION_MAX:
            return format(Decimal(repr(value)), "f")
        return repr(value)
    if isinstance(value, Decimal):
        return format(value, "f")
    return str(value)


def to_number(text: str) -> float:
    """
    Parses the text for the bound comparisons. Unparsable text results in NaN which compares false to any bound.
    """
    if "_" in text:
        # float() accepts digit grouping underscores, a typed number doesn't
        return math.nan
    try:
        return float(text)
    except ValueError:
        return math.nan


@lru_cache(maxsize=256)
def compile_pattern(pattern: str) -> re.Pattern[str]:
    """
    Compiles (and caches) the regular expression of a string spec.
    Raises an InvalidPatternError if the pattern is not a valid regular expression.
    """
    try:
        return re.compile(pattern)
    except re.error as error:
        raise InvalidPatternError(pattern, error) from error
