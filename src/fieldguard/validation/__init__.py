"""
fieldguard validates single field values against declarative specs. There is one validator factory per value kind;
each factory returns a validator function `(spec, value) -> False | error message`.
"""

from fieldguard.validation.array_validator import get_array_validator
from fieldguard.validation.boolean_validator import get_boolean_validator
from fieldguard.validation.core import (
    DEFAULT_ERROR_MESSAGES,
    ArrayValidatorConfig,
    BooleanValidatorConfig,
    ErrorKind,
    ErrorMessages,
    InvalidPatternError,
    NumberValidatorConfig,
    ObjectValidatorConfig,
    StringValidatorConfig,
    UnknownValueKindError,
    ValidationResult,
    Validator,
    ValidatorConfig,
    is_float,
    is_int,
)
from fieldguard.validation.number_validator import get_number_validator
from fieldguard.validation.object_validator import get_object_validator
from fieldguard.validation.registry import VALIDATOR_FACTORIES, ValueKind, get_validator, kind_of, validate_field
from fieldguard.validation.string_validator import get_string_validator
