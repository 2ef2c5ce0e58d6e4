"""
Analysis errors: validation failures shared by every indicator.
"""
from enum import Enum


class AnalysisErrorKind(str, Enum):
    GAIN_LESS_THAN_ZERO = "gain < 0"
    LOSS_LESS_THAN_ZERO = "loss < 0"
    CLOSE_GREATER_THAN_HIGH = "close > high"
    CLOSE_LESS_THAN_LOW = "close < low"
    HIGH_LESS_THAN_LOW = "high < low"
    SLICE_IS_EMPTY = "slice is empty"

    @property
    def description(self) -> str:
        return self.value


class AnalysisError(ValueError):
    """Raised when indicator inputs fail validation.

    Carries exactly one AnalysisErrorKind. Errors compare equal by kind,
    so tests can match them against a freshly built instance.
    """

    def __init__(self, kind: AnalysisErrorKind):
        self.kind = AnalysisErrorKind(kind)
        super().__init__(f"error: {self.kind.description}")

    @property
    def description(self) -> str:
        return self.kind.description

    def __eq__(self, other):
        if not isinstance(other, AnalysisError):
            return NotImplemented
        return self.kind is other.kind

    def __hash__(self):
        return hash(self.kind)

    def __reduce__(self):
        return (type(self), (self.kind,))

    def __repr__(self):
        return f"AnalysisError({self.kind.name})"
