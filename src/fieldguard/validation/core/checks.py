"""
Contains the building blocks of every validator: a check pairs a predicate with the message it reports, and the
checks of a validator are evaluated top to bottom until the first one is violated.
"""
from typing import Callable, Generic, Iterable, Optional

import attrs

from fieldguard.logging import logger
from fieldguard.validation.core.messages import ErrorKind, ErrorMessages
from fieldguard.validation.core.types import Bound, SpecT, ValidationResult, ValueT


def _no_bound(spec, value) -> Optional[Bound]:  # pylint: disable=unused-argument
    return None


@attrs.frozen(kw_only=True)
class Check(Generic[SpecT, ValueT]):
    """
    A single check of a validator.
    `violated` receives the spec and the (already normalized) value and returns True if the value breaks the check.
    `bound` returns the numeric bound which is passed to the message of bound-taking error kinds.
    """

    name: str = attrs.field(validator=attrs.validators.instance_of(str))
    kind: ErrorKind = attrs.field(validator=attrs.validators.instance_of(ErrorKind))
    violated: Callable[[SpecT, ValueT], bool] = attrs.field(validator=attrs.validators.is_callable())
    bound: Callable[[SpecT, ValueT], Optional[Bound]] = attrs.field(
        default=_no_bound, validator=attrs.validators.is_callable()
    )
    message_override: Optional[Callable[[SpecT, ValueT], Optional[str]]] = attrs.field(default=None)
    """
    Returns a message which replaces the catalog message (e.g. the pattern error of a string spec), None to keep it.
    """

    def describe(self, spec: SpecT, value: ValueT, error_messages: ErrorMessages) -> str:
        """
        Returns the message reported if this check is violated.
        """
        if self.message_override is not None:
            override = self.message_override(spec, value)
            if override:
                return override
        return error_messages.render(self.kind, self.bound(spec, value))


@attrs.frozen
class CheckSequence(Generic[SpecT, ValueT]):
    """
    The ordered checks of one validator together with the catalog its messages are taken from.
    The order is part of the contract: e.g. an empty required value always reports REQUIRED, never a later check.
    """

    checks: tuple[Check[SpecT, ValueT], ...]
    error_messages: ErrorMessages

    @classmethod
    def build(
        cls, error_messages: ErrorMessages, entries: Iterable[tuple[bool, Check[SpecT, ValueT]]]
    ) -> "CheckSequence[SpecT, ValueT]":
        """
        Creates the sequence from (ignored, check) pairs. Ignored checks are dropped once, so that they never run.
        """
        return cls(tuple(check for ignored, check in entries if not ignored), error_messages)

    def run(self, spec: SpecT, value: ValueT) -> ValidationResult:
        """
        Returns the message of the first violated check or False if the value passes all checks.
        """
        for check in self.checks:
            if check.violated(spec, value):
                message = check.describe(spec, value, self.error_messages)
                logger.get().debug("Check %s failed: %s", check.name, message)
                return message
        return False

    @property
    def names(self) -> list[str]:
        """The names of the active checks in evaluation order"""
        return [check.name for check in self.checks]
