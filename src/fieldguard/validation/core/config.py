"""
This module provides the classes which hold the configuration of the validator factories.
"""

from typing import Any, Optional, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from fieldguard.validation.core.messages import DEFAULT_ERROR_MESSAGES, ErrorKind, ErrorMessages
from fieldguard.validation.core.types import MessageTemplate

ConfigT = TypeVar("ConfigT", bound="ValidatorConfig")


class ValidatorConfig(BaseModel):
    """
    The options every validator factory understands. All ignore flags default to False, i.e. every check is active
    unless it is switched off explicitly. Unknown options are rejected so that a typo cannot silently enable a check.
    Once a validator has been created from a config, the config governs every call of that validator.
    """

    model_config = ConfigDict(extra="forbid", frozen=True, alias_generator=to_camel, populate_by_name=True)

    ignore_required_check: bool = False
    custom_error_messages: Optional[dict[ErrorKind, MessageTemplate]] = None
    """
    Messages which replace the default catalog entries of the same kind. Kinds which are not listed here keep their
    default message.
    """

    @property
    def error_messages(self) -> ErrorMessages:
        """
        The default catalog with the custom error messages applied.
        """
        return DEFAULT_ERROR_MESSAGES.merged(self.custom_error_messages)


class ArrayValidatorConfig(ValidatorConfig):
    """
    Options of the array validator
    """

    ignore_max_length_check: bool = False
    ignore_min_length_check: bool = False


class BooleanValidatorConfig(ValidatorConfig):
    """
    Options of the boolean validator
    """


class NumberValidatorConfig(ValidatorConfig):
    """
    Options of the number validator
    """

    ignore_space_start_check: bool = False
    ignore_space_end_check: bool = False
    ignore_number_check: bool = False
    ignore_maximum_check: bool = False
    ignore_minimum_check: bool = False
    ignore_int_check: bool = False
    ignore_dot_end: bool = False
    ignore_zero_start: bool = False


class ObjectValidatorConfig(ValidatorConfig):
    """
    Options of the object validator
    """


class StringValidatorConfig(ValidatorConfig):
    """
    Options of the string validator
    """

    ignore_space_start_check: bool = False
    ignore_space_end_check: bool = False
    ignore_max_length_check: bool = False
    ignore_min_length_check: bool = False
    ignore_reg_exp_check: bool = False


def build_config(config_type: type[ConfigT], config: Optional[ConfigT], options: dict[str, Any]) -> ConfigT:
    """
    Returns the config a factory works with: either the ready config instance or a new one built from the keyword
    options (snake_case or camelCase). Providing both is ambiguous and raises a ValueError.
    """
    if config is not None:
        if options:
            raise ValueError(f"Either pass a {config_type.__name__} or keyword options, not both: {sorted(options)}")
        if not isinstance(config, config_type):
            raise TypeError(f"Expected a {config_type.__name__} but got {type(config).__name__}")
        return config
    return config_type.model_validate(options)
