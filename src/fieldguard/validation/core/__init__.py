"""
Contains the core functionality shared by all validators
"""
from fieldguard.validation.core.checks import Check, CheckSequence
from fieldguard.validation.core.config import (
    ArrayValidatorConfig,
    BooleanValidatorConfig,
    NumberValidatorConfig,
    ObjectValidatorConfig,
    StringValidatorConfig,
    ValidatorConfig,
)
from fieldguard.validation.core.errors import InvalidPatternError, UnknownValueKindError
from fieldguard.validation.core.messages import DEFAULT_ERROR_MESSAGES, ErrorKind, ErrorMessages
from fieldguard.validation.core.types import (
    ArrayValue,
    Bound,
    MessageFactory,
    MessageTemplate,
    NumberValue,
    ObjectValue,
    ValidationResult,
    Validator,
)
from fieldguard.validation.core.utils import is_float, is_int
