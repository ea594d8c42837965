"""
Exceptions raised by the pricing and sequence functions.

All of them subclass ValueError, so callers that already guard numeric
input with ``except ValueError`` keep working.
"""


class OptionsSheetError(ValueError):
    """Base class for invalid input to an options_sheet function."""


class InvalidOptionTypeError(OptionsSheetError):
    """Option type is neither 'call' nor 'put'."""

    def __init__(self, option_type):
        self.option_type = option_type
        super().__init__(f"option_type must be 'call' or 'put', got {option_type!r}")


class InvalidParameterError(OptionsSheetError):
    """A numeric argument is outside its valid domain."""


class ZeroRowCountError(InvalidParameterError):
    """A sequence was requested with zero rows."""
