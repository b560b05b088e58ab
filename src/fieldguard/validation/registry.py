"""
Contains the lookup from value kinds (and spec types) to the validator factories.
"""
from enum import StrEnum
from typing import Any, Callable, Optional

from fieldguard.model import ArraySpec, BooleanSpec, FieldSpec, NumberSpec, ObjectSpec, StringSpec
from fieldguard.validation.array_validator import get_array_validator
from fieldguard.validation.boolean_validator import get_boolean_validator
from fieldguard.validation.core import UnknownValueKindError, ValidationResult, Validator
from fieldguard.validation.core.config import ValidatorConfig
from fieldguard.validation.number_validator import get_number_validator
from fieldguard.validation.object_validator import get_object_validator
from fieldguard.validation.string_validator import get_string_validator


class ValueKind(StrEnum):
    """
    The kinds of values a validator exists for
    """

    ARRAY = "array"
    BOOLEAN = "boolean"
    NUMBER = "number"
    OBJECT = "object"
    STRING = "string"


VALIDATOR_FACTORIES: dict[ValueKind, Callable[..., Validator]] = {
    ValueKind.ARRAY: get_array_validator,
    ValueKind.BOOLEAN: get_boolean_validator,
    ValueKind.NUMBER: get_number_validator,
    ValueKind.OBJECT: get_object_validator,
    ValueKind.STRING: get_string_validator,
}

SPEC_KINDS: dict[type[FieldSpec], ValueKind] = {
    ArraySpec: ValueKind.ARRAY,
    BooleanSpec: ValueKind.BOOLEAN,
    NumberSpec: ValueKind.NUMBER,
    ObjectSpec: ValueKind.OBJECT,
    StringSpec: ValueKind.STRING,
}


def kind_of(spec: FieldSpec) -> ValueKind:
    """
    Returns the value kind a spec describes. Subclasses of the spec models are supported.
    """
    for spec_type in type(spec).__mro__:
        if spec_type in SPEC_KINDS:
            return SPEC_KINDS[spec_type]
    raise UnknownValueKindError(type(spec))


def get_validator(kind: ValueKind | str, config: Optional[ValidatorConfig] = None, /, **options: Any) -> Validator:
    """
    Returns the validator for the given value kind, configured by either a config instance or keyword options.
    """
    try:
        factory = VALIDATOR_FACTORIES[ValueKind(kind)]
    except ValueError as value_error:
        raise UnknownValueKindError(kind) from value_error
    return factory(config, **options)


def validate_field(spec: FieldSpec, value: Optional[Any] = None, **options: Any) -> ValidationResult:
    """
    Validates a single value against its spec with a validator matching the spec type.
    If you validate the same field repeatedly, create the validator once with `get_validator` instead.
    """
    return get_validator(kind_of(spec), **options)(spec, value)
