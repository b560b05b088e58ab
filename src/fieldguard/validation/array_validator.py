"""
Contains the validator factory for array (list) values.
"""
from collections.abc import Sequence
from typing import Any, Optional

from fieldguard.logging import logger
from fieldguard.model import ArraySpec
from fieldguard.validation.core import Check, CheckSequence, ErrorKind
from fieldguard.validation.core.config import ArrayValidatorConfig, build_config
from fieldguard.validation.core.types import ArrayValue, ValidationResult, Validator


def _is_array(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes))


def _array_length(value: Any) -> int:
    return len(value) if _is_array(value) else 0


def get_array_validator(
    config: Optional[ArrayValidatorConfig] = None, /, **options: Any
) -> Validator[ArraySpec, ArrayValue]:
    """
    Returns a validator for array values. The checks are evaluated in this order:
        1. required: a required value must be a list (or tuple)
        2. max length: the value must not contain more than `spec.max_length` elements
        3. min length: the value must not contain less than `spec.min_length` elements
    An absent value counts as empty for the length checks.
    """
    array_config = build_config(ArrayValidatorConfig, config, options)
    checks: CheckSequence[ArraySpec, Optional[ArrayValue]] = CheckSequence.build(
        array_config.error_messages,
        [
            (
                array_config.ignore_required_check,
                Check(
                    name="required",
                    kind=ErrorKind.REQUIRED,
                    violated=lambda spec, value: spec.required and not _is_array(value),
                ),
            ),
            (
                array_config.ignore_max_length_check,
                Check(
                    name="max_length",
                    kind=ErrorKind.MAX_LENGTH_ARR,
                    violated=lambda spec, value: spec.max_length is not None
                    and _array_length(value) > spec.max_length,
                    bound=lambda spec, value: spec.max_length,
                ),
            ),
            (
                array_config.ignore_min_length_check,
                Check(
                    name="min_length",
                    kind=ErrorKind.MIN_LENGTH_ARR,
                    violated=lambda spec, value: spec.min_length is not None
                    and _array_length(value) < spec.min_length,
                    bound=lambda spec, value: spec.min_length,
                ),
            ),
        ],
    )
    logger.get().debug("Created array validator with checks %s", checks.names)

    def validate_array(spec: ArraySpec, value: Optional[ArrayValue] = None) -> ValidationResult:
        return checks.run(spec, value)

    return validate_array
