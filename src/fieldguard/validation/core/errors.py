"""
Contains the exceptions raised for malformed specs or configurations.
A value that fails validation never raises; it produces an error message instead.
"""
import re


class InvalidPatternError(ValueError):
    """
    Raised if the regular expression of a string spec cannot be compiled.
    This is an error in the schema, not in the validated value.
    """

    def __init__(self, pattern: str, cause: re.error):
        super().__init__(f"Invalid regular expression {pattern!r}: {cause}")
        self.pattern = pattern
        self.cause = cause


class UnknownValueKindError(KeyError):
    """
    Raised if no validator factory is registered for the requested value kind or spec type.
    """

    def __init__(self, kind: object):
        super().__init__(f"There is no validator for {kind!r}")
        self.kind = kind
