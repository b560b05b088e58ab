"""
Contains the error message catalog. Every entry is stored as a message factory with the same call shape
`(bound=None) -> str`, so the validators never have to distinguish fixed messages from bound-aware ones.
"""
from collections.abc import Mapping
from enum import StrEnum
from typing import Optional

from frozendict import frozendict
from typeguard import check_type

from fieldguard.validation.core.types import Bound, MessageFactory, MessageTemplate


class ErrorKind(StrEnum):
    """
    The keys of the error message catalog.
    """

    REQUIRED = "REQUIRED"
    SPACE_START = "SPACE_START"
    SPACE_END = "SPACE_END"
    DOT_END = "DOT_END"
    NUMBER = "NUMBER"
    ZERO_START = "ZERO_START"
    INT = "INT"
    INVALID = "INVALID"
    MAX_LENGTH_ARR = "maxLengthArr"
    MIN_LENGTH_ARR = "minLengthArr"
    MAX_LENGTH = "maxLength"
    MIN_LENGTH = "minLength"
    MAX_NUMBER = "maxNumber"
    MIN_NUMBER = "minNumber"

    @property
    def takes_bound(self) -> bool:
        """True if the message of this kind mentions a numeric bound"""
        return self in _BOUND_KINDS


_BOUND_KINDS = frozenset(
    {
        ErrorKind.MAX_LENGTH_ARR,
        ErrorKind.MIN_LENGTH_ARR,
        ErrorKind.MAX_LENGTH,
        ErrorKind.MIN_LENGTH,
        ErrorKind.MAX_NUMBER,
        ErrorKind.MIN_NUMBER,
    }
)


def _format_bound(bound: Optional[Bound]) -> str:
    if isinstance(bound, float) and bound.is_integer():
        return str(int(bound))
    return str(bound)


def _check_bound_template(kind: ErrorKind, template: str) -> None:
    """
    Formats the template once, so that a template with unknown placeholders or unbalanced braces is rejected when
    the validator is created and not each time the message is rendered.
    """
    try:
        template.format(bound=_format_bound(0))
    except (AttributeError, IndexError, KeyError, ValueError) as error:
        raise ValueError(
            f"The custom message for {kind} must only contain the placeholder {{bound}} (use {{{{ and }}}} for literal "
            f"braces): {template!r}"
        ) from error


def to_message_factory(kind: ErrorKind, template: MessageTemplate) -> MessageFactory:
    """
    Wraps a custom message into a message factory.
    Strings of bound-taking kinds are formatted with the bound, e.g. "At most {bound} items"; any other placeholder
    raises a ValueError.
    Callables are called with the bound (`None` for kinds without a bound).
    """
    if isinstance(template, str):
        if kind.takes_bound:
            _check_bound_template(kind, template)
            return lambda bound=None: template.format(bound=_format_bound(bound))
        return lambda bound=None: template
    if callable(template):
        return lambda bound=None: template(bound)
    raise TypeError(f"The custom message for {kind} must be a string or a callable, got {type(template).__name__}")


class ErrorMessages:
    """
    An immutable catalog which maps each ErrorKind to a message factory.
    """

    def __init__(self, factories: Mapping[ErrorKind, MessageFactory]):
        missing_kinds = set(ErrorKind) - set(factories.keys())
        if missing_kinds:
            raise ValueError(f"The catalog misses message(s) for {sorted(missing_kinds)}")
        self._factories: frozendict[ErrorKind, MessageFactory] = frozendict(factories)

    def merged(self, overrides: Optional[Mapping[ErrorKind | str, MessageTemplate]]) -> "ErrorMessages":
        """
        Returns a new catalog in which the overridden kinds use the custom messages and all other kinds keep the
        messages of this catalog. Unknown keys raise a ValueError.
        """
        if not overrides:
            return self
        custom_factories = {ErrorKind(key): value for key, value in overrides.items()}
        factories: dict[ErrorKind, MessageFactory] = {}
        for kind in ErrorKind:
            if kind in custom_factories:
                factories[kind] = to_message_factory(kind, custom_factories[kind])
            else:
                factories[kind] = self._factories[kind]
        return ErrorMessages(factories)

    def render(self, kind: ErrorKind, bound: Optional[Bound] = None) -> str:
        """
        Returns the message for the given kind. A message factory returning anything but a string raises a
        typeguard.TypeCheckError.
        """
        message = self._factories[kind](bound)
        check_type(message, str)
        return message

    def __getitem__(self, kind: ErrorKind | str) -> MessageFactory:
        return self._factories[ErrorKind(kind)]

    def __eq__(self, other):
        return isinstance(other, ErrorMessages) and self._factories == other._factories

    def __hash__(self):
        return hash(self._factories)

    def __repr__(self) -> str:
        return f"ErrorMessages({', '.join(kind.value for kind in self._factories)})"


DEFAULT_ERROR_MESSAGES = ErrorMessages(
    {
        ErrorKind.REQUIRED: lambda bound=None: "This field is required",
        ErrorKind.SPACE_START: lambda bound=None: "The value must not start with a space",
        ErrorKind.SPACE_END: lambda bound=None: "The value must not end with a space",
        ErrorKind.DOT_END: lambda bound=None: "The value must not end with a dot",
        ErrorKind.NUMBER: lambda bound=None: "The value must be a number",
        ErrorKind.ZERO_START: lambda bound=None: "The value must not start with a zero",
        ErrorKind.INT: lambda bound=None: "The value must be an integer",
        ErrorKind.INVALID: lambda bound=None: "The value is invalid",
        ErrorKind.MAX_LENGTH_ARR: lambda bound=None: f"The list must contain at most {_format_bound(bound)} items",
        ErrorKind.MIN_LENGTH_ARR: lambda bound=None: f"The list must contain at least {_format_bound(bound)} items",
        ErrorKind.MAX_LENGTH: lambda bound=None: f"The value must be at most {_format_bound(bound)} characters long",
        ErrorKind.MIN_LENGTH: lambda bound=None: f"The value must be at least {_format_bound(bound)} characters long",
        ErrorKind.MAX_NUMBER: lambda bound=None: f"The value must not be greater than {_format_bound(bound)}",
        ErrorKind.MIN_NUMBER: lambda bound=None: f"The value must not be less than {_format_bound(bound)}",
    }
)
"""
The catalog used for every kind that a validator's custom error messages do not override.
"""
