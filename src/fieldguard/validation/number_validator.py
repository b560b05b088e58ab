"""
Contains the validator factory for number values. Numbers are validated in their text form because the value of a
number input may still be the text the user is typing (e.g. "-" or "1.").
"""
from typing import Any, Optional

from fieldguard.logging import logger
from fieldguard.model import INT64_FORMAT, NumberSpec
from fieldguard.validation.core import Check, CheckSequence, ErrorKind
from fieldguard.validation.core.config import NumberValidatorConfig, build_config
from fieldguard.validation.core.types import NumberValue, ValidationResult, Validator
from fieldguard.validation.core.utils import is_blank, is_float, is_int, to_canonical_text, to_number


def _is_empty(text: str) -> bool:
    """
    A number consisting of whitespace only has not been entered at all.
    """
    return all(is_blank(char) for char in text)


def _starts_with_zero(text: str) -> bool:
    """
    True for "01" or "-02" but not for "0", "-0", "0.5" or "-0.5".
    """
    if len(text) > 1 and text[0] == "0" and text[1] != ".":
        return True
    return len(text) > 2 and text[:2] == "-0" and text[2] != "."


def get_number_validator(
    config: Optional[NumberValidatorConfig] = None, /, **options: Any
) -> Validator[NumberSpec, NumberValue]:
    """
    Returns a validator for number values. The value is converted to its text form first (absent -> ""). The checks
    are evaluated in this order:
        1. required: a required value must not be empty
        2. lexical checks on non-empty text: no leading space, no trailing space, no trailing dot, a decimal number,
           no leading zero (except for "0" itself and decimal fractions like "0.5")
        3. maximum: the numeric value must not be greater than `spec.maximum`
        4. minimum: the numeric value must not be less than `spec.minimum`
        5. int: if `spec.format` is "int64" the text must be an integer
    """
    number_config = build_config(NumberValidatorConfig, config, options)
    checks: CheckSequence[NumberSpec, str] = CheckSequence.build(
        number_config.error_messages,
        [
            (
                number_config.ignore_required_check,
                Check(
                    name="required",
                    kind=ErrorKind.REQUIRED,
                    violated=lambda spec, text: spec.required and _is_empty(text),
                ),
            ),
            (
                number_config.ignore_space_start_check,
                Check(
                    name="space_start",
                    kind=ErrorKind.SPACE_START,
                    violated=lambda spec, text: bool(text) and is_blank(text[0]),
                ),
            ),
            (
                number_config.ignore_space_end_check,
                Check(
                    name="space_end",
                    kind=ErrorKind.SPACE_END,
                    violated=lambda spec, text: bool(text) and is_blank(text[-1]),
                ),
            ),
            (
                number_config.ignore_dot_end,
                Check(name="dot_end", kind=ErrorKind.DOT_END, violated=lambda spec, text: text.endswith(".")),
            ),
            (
                number_config.ignore_number_check,
                Check(
                    name="number",
                    kind=ErrorKind.NUMBER,
                    violated=lambda spec, text: bool(text) and not is_float(text),
                ),
            ),
            (
                number_config.ignore_zero_start,
                Check(
                    name="zero_start",
                    kind=ErrorKind.ZERO_START,
                    violated=lambda spec, text: _starts_with_zero(text),
                ),
            ),
            (
                number_config.ignore_maximum_check,
                Check(
                    name="maximum",
                    kind=ErrorKind.MAX_NUMBER,
                    violated=lambda spec, text: spec.maximum is not None
                    and bool(text)
                    and to_number(text) > spec.maximum,
                    bound=lambda spec, text: spec.maximum,
                ),
            ),
            (
                number_config.ignore_minimum_check,
                Check(
                    name="minimum",
                    kind=ErrorKind.MIN_NUMBER,
                    violated=lambda spec, text: spec.minimum is not None
                    and bool(text)
                    and spec.minimum > to_number(text),
                    bound=lambda spec, text: spec.minimum,
                ),
            ),
            (
                number_config.ignore_int_check,
                Check(
                    name="int",
                    kind=ErrorKind.INT,
                    violated=lambda spec, text: spec.format == INT64_FORMAT and bool(text) and not is_int(text),
                ),
            ),
        ],
    )
    logger.get().debug("Created number validator with checks %s", checks.names)

    def validate_number(spec: NumberSpec, value: Optional[NumberValue] = None) -> ValidationResult:
        return checks.run(spec, to_canonical_text(value))

    return validate_number
