"""
The field specs: declarative constraints for a single value. A spec never carries the value itself; both are passed
to a validator together.
"""
from typing import Optional, TypeAlias

from pydantic import BaseModel, ConfigDict, NonNegativeInt, field_validator  # pylint: disable=no-name-in-module
from pydantic.alias_generators import to_camel

INT64_FORMAT = "int64"


class BaseSpec(BaseModel):
    """
    Common base of all specs. Specs are immutable and accept both snake_case and camelCase field names, so that
    specs can be loaded from JSON schemas directly.
    """

    model_config = ConfigDict(extra="ignore", frozen=True, alias_generator=to_camel, populate_by_name=True)

    required: bool = False


class ArraySpec(BaseSpec):
    """
    Constraints for a list of opaque elements.
    """

    max_length: Optional[NonNegativeInt] = None
    min_length: Optional[NonNegativeInt] = None


class BooleanSpec(BaseSpec):
    """
    Constraints for a boolean. Note that a required boolean is only satisfied by `True`.
    """


class NumberSpec(BaseSpec):
    """
    Constraints for a number which may still be the text typed by the user.
    """

    maximum: Optional[int | float] = None
    minimum: Optional[int | float] = None
    format: Optional[str] = None
    """
    The only format with its own check is "int64".
    """


class ObjectSpec(BaseSpec):
    """
    Constraints for a mapping of opaque fields.
    """


class StringSpec(BaseSpec):
    """
    Constraints for a string.
    """

    max_length: Optional[NonNegativeInt] = None
    min_length: Optional[NonNegativeInt] = None
    pattern: Optional[str] = None
    """
    A regular expression which has to be found in the value.
    """
    pattern_error: Optional[str] = None
    """
    The message reported instead of the generic INVALID message if the pattern does not match.
    """

    @field_validator("pattern")
    @staticmethod
    def validate_pattern_compiles(value: Optional[str]) -> Optional[str]:
        """
        Fail fast on a pattern which is no valid regular expression.
        """
        # pylint: disable=import-outside-toplevel
        from fieldguard.validation.core.utils import compile_pattern

        if value:
            compile_pattern(value)
        return value


FieldSpec: TypeAlias = ArraySpec | BooleanSpec | NumberSpec | ObjectSpec | StringSpec
