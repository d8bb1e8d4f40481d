"""Exceptions raised by the relative-date helpers."""


class PeriodError(ValueError):
    """Base class for errors raised when building a relative moment."""

    def __init__(self, message: str, unit: str, value: int) -> None:
        super().__init__(message)
        self.unit = unit
        self.value = value


class NegativeValueError(PeriodError):
    """A negative amount was passed to an *_ago or *_from_now helper."""

    def __init__(self, unit: str, suggestion: str, value: int) -> None:
        super().__init__(
            f"{unit} must be positive. Did you mean {suggestion}({abs(value)})?",
            unit,
            value,
        )
        self.suggestion = suggestion


class PeriodOverflowError(PeriodError, OverflowError):
    """The requested offset falls outside the representable datetime range."""

    def __init__(self, unit: str, value: int) -> None:
        super().__init__(f"{unit} value {value} is too large", unit, value)


def validate_non_negative(value: int, unit: str, suggestion: str) -> None:
    """Reject negative amounts, pointing the caller at the mirror function.

    Args:
        value: Amount passed by the caller.
        unit: Unit name used in the message (e.g. "days").
        suggestion: Name of the function covering the other direction.

    Raises:
        NegativeValueError: If value is negative.
    """
    if value < 0:
        raise NegativeValueError(unit, suggestion, value)
