"""
Contains the types used in the validation framework
"""
from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any, Callable, Literal, Optional, TypeAlias, TypeVar

if TYPE_CHECKING:
    from fieldguard.model import FieldSpec

Bound: TypeAlias = int | float
ValidationResult: TypeAlias = Literal[False] | str
"""
`False` means the value is valid, a string is the message of the first violated check.
"""
MessageFactory: TypeAlias = Callable[[Optional[Bound]], str]
MessageTemplate: TypeAlias = str | Callable[[Optional[Bound]], str]
"""
What a caller may provide as custom error message: a fixed string or a function of the bound.
"""

ArrayValue: TypeAlias = Sequence[Any]
NumberValue: TypeAlias = str | int | float
ObjectValue: TypeAlias = Mapping[str, Any]

SpecT = TypeVar("SpecT", bound="FieldSpec")
ValueT = TypeVar("ValueT")
Validator: TypeAlias = Callable[[SpecT, Optional[ValueT]], ValidationResult]
