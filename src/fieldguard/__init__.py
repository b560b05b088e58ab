"""
fieldguard is a field-level validation engine: it decides whether a single value (array, boolean, number, object or
string) satisfies a declarative spec and, if it doesn't, returns a user-facing error message.

    >>> from fieldguard import StringSpec, get_string_validator
    >>> validate = get_string_validator()
    >>> validate(StringSpec(min_length=3), "ab")
    'The value must be at least 3 characters long'
    >>> validate(StringSpec(min_length=3), "abc")
    False
"""
from fieldguard.model import ArraySpec, BooleanSpec, FieldSpec, NumberSpec, ObjectSpec, StringSpec
from fieldguard.validation import (
    DEFAULT_ERROR_MESSAGES,
    VALIDATOR_FACTORIES,
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
    ValueKind,
    get_array_validator,
    get_boolean_validator,
    get_number_validator,
    get_object_validator,
    get_string_validator,
    get_validator,
    is_float,
    is_int,
    kind_of,
    validate_field,
)
