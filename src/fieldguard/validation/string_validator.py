"""
Contains the validator factory for string values.
"""
from typing import Any, Callable, Optional

from fieldguard.logging import logger
from fieldguard.model import StringSpec
from fieldguard.validation.core import Check, CheckSequence, ErrorKind
from fieldguard.validation.core.config import StringValidatorConfig, build_config
from fieldguard.validation.core.types import ValidationResult, Validator
from fieldguard.validation.core.utils import compile_pattern, is_blank


def _pattern_mismatch(ignore_reg_exp_check: bool) -> Callable[[StringSpec, str], bool]:
    """
    The pattern is compiled even if the check is ignored, so that a broken pattern never goes unnoticed.
    """

    def violated(spec: StringSpec, value: str) -> bool:
        if not spec.pattern:
            return False
        regex = compile_pattern(spec.pattern)
        return not ignore_reg_exp_check and regex.search(value) is None

    return violated


def get_string_validator(
    config: Optional[StringValidatorConfig] = None, /, **options: Any
) -> Validator[StringSpec, str]:
    """
    Returns a validator for string values. An absent value is validated as empty string. The checks are evaluated
    in this order:
        1. required: a required value must not be empty
        2. no leading space, no trailing space (only for non-empty values)
        3. max length: at most `spec.max_length` characters
        4. min length: at least `spec.min_length` characters
        5. pattern: `spec.pattern` must be found in the value; reports `spec.pattern_error` if it is set and the
           generic INVALID message otherwise
    An invalid pattern raises an InvalidPatternError. Patterns use the Python `re` dialect: unlike a JavaScript
    RegExp, `$` also matches right before a trailing newline, so "12\n" matches "^[0-9]+$" (the space end check
    reports the newline unless it is ignored). Use `\Z` to anchor at the very end.
    """
    string_config = build_config(StringValidatorConfig, config, options)
    checks: CheckSequence[StringSpec, str] = CheckSequence.build(
        string_config.error_messages,
        [
            (
                string_config.ignore_required_check,
                Check(
                    name="required",
                    kind=ErrorKind.REQUIRED,
                    violated=lambda spec, value: spec.required and not value,
                ),
            ),
            (
                string_config.ignore_space_start_check,
                Check(
                    name="space_start",
                    kind=ErrorKind.SPACE_START,
                    violated=lambda spec, value: bool(value) and is_blank(value[0]),
                ),
            ),
            (
                string_config.ignore_space_end_check,
                Check(
                    name="space_end",
                    kind=ErrorKind.SPACE_END,
                    violated=lambda spec, value: bool(value) and is_blank(value[-1]),
                ),
            ),
            (
                string_config.ignore_max_length_check,
                Check(
                    name="max_length",
                    kind=ErrorKind.MAX_LENGTH,
                    violated=lambda spec, value: spec.max_length is not None and len(value) > spec.max_length,
                    bound=lambda spec, value: spec.max_length,
                ),
            ),
            (
                string_config.ignore_min_length_check,
                Check(
                    name="min_length",
                    kind=ErrorKind.MIN_LENGTH,
                    violated=lambda spec, value: spec.min_length is not None and len(value) < spec.min_length,
                    bound=lambda spec, value: spec.min_length,
                ),
            ),
            (
                False,
                Check(
                    name="pattern",
                    kind=ErrorKind.INVALID,
                    violated=_pattern_mismatch(string_config.ignore_reg_exp_check),
                    message_override=lambda spec, value: spec.pattern_error,
                ),
            ),
        ],
    )
    logger.get().debug("Created string validator with checks %s", checks.names)

    def validate_string(spec: StringSpec, value: Optional[str] = None) -> ValidationResult:
        return checks.run(spec, "" if value is None else value)

    return validate_string
