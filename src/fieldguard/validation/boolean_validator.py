"""
Contains the validator factory for boolean values.
"""
from typing import Any, Optional

from fieldguard.logging import logger
from fieldguard.model import BooleanSpec
from fieldguard.validation.core import Check, CheckSequence, ErrorKind
from fieldguard.validation.core.config import BooleanValidatorConfig, build_config
from fieldguard.validation.core.types import ValidationResult, Validator


def get_boolean_validator(
    config: Optional[BooleanValidatorConfig] = None, /, **options: Any
) -> Validator[BooleanSpec, bool]:
    """
    Returns a validator for boolean values. The only check is the required check, and it treats `False` like an
    absent value: a required boolean (e.g. "I accept the terms") has to be affirmed explicitly.
    """
    boolean_config = build_config(BooleanValidatorConfig, config, options)
    checks: CheckSequence[BooleanSpec, Optional[bool]] = CheckSequence.build(
        boolean_config.error_messages,
        [
            (
                boolean_config.ignore_required_check,
                Check(
                    name="required",
                    kind=ErrorKind.REQUIRED,
                    violated=lambda spec, value: spec.required and not value,
                ),
            ),
        ],
    )
    logger.get().debug("Created boolean validator with checks %s", checks.names)

    def validate_boolean(spec: BooleanSpec, value: Optional[bool] = None) -> ValidationResult:
        return checks.run(spec, value)

    return validate_boolean
