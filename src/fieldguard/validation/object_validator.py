"""
Contains the validator factory for object (mapping) values.
"""
from collections.abc import Mapping
from typing import Any, Optional

from fieldguard.logging import logger
from fieldguard.model import ObjectSpec
from fieldguard.validation.core import Check, CheckSequence, ErrorKind
from fieldguard.validation.core.config import ObjectValidatorConfig, build_config
from fieldguard.validation.core.types import ObjectValue, ValidationResult, Validator


def _is_missing(value: Any) -> bool:
    """
    Absent or falsy (False, 0, ""). Any mapping, even an empty one, is present.
    """
    return value is None or (not isinstance(value, Mapping) and not value)


def get_object_validator(
    config: Optional[ObjectValidatorConfig] = None, /, **options: Any
) -> Validator[ObjectSpec, ObjectValue]:
    """
    Returns a validator for object values. A required object must not be absent or falsy; an empty mapping is an
    object and therefore satisfies the required check.
    """
    object_config = build_config(ObjectValidatorConfig, config, options)
    checks: CheckSequence[ObjectSpec, Optional[ObjectValue]] = CheckSequence.build(
        object_config.error_messages,
        [
            (
                object_config.ignore_required_check,
                Check(
                    name="required",
                    kind=ErrorKind.REQUIRED,
                    violated=lambda spec, value: spec.required and _is_missing(value),
                ),
            ),
        ],
    )
    logger.get().debug("Created object validator with checks %s", checks.names)

    def validate_object(spec: ObjectSpec, value: Optional[ObjectValue] = None) -> ValidationResult:
        return checks.run(spec, value)

    return validate_object
