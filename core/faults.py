"""
Fault taxonomy for the demonstrations.

Every scenario catches exactly one family of errors and turns it into a
FaultReport tagged with one of the eleven FaultKind members.
"""

from dataclasses import dataclass
from enum import Enum


class FaultKind(Enum):
    """Closed set of fault categories the demonstrator knows about."""
    IO_FAILURE = 'IOFailure'
    FILE_NOT_FOUND = 'FileNotFound'
    END_OF_STREAM = 'EndOfStream'
    DATABASE_FAILURE = 'DatabaseFailure'
    CLASS_RESOLUTION_FAILURE = 'ClassResolutionFailure'
    ARITHMETIC_FAULT = 'ArithmeticFault'
    NULL_REFERENCE_FAULT = 'NullReferenceFault'
    BOUNDS_FAULT = 'BoundsFault'
    TYPE_CAST_FAULT = 'TypeCastFault'
    INVALID_ARGUMENT_FAULT = 'InvalidArgumentFault'
    NUMERIC_FORMAT_FAULT = 'NumericFormatFault'

    @property
    def label(self) -> str:
        """Name shown in report lines."""
        return self.value

    @property
    def is_io(self) -> bool:
        """True for I/O failures, including the more specific ones."""
        return self in (FaultKind.IO_FAILURE, FaultKind.FILE_NOT_FOUND,
                        FaultKind.END_OF_STREAM)


@dataclass(frozen=True)
class FaultReport:
    """
    A caught fault, ready to be shown.

    Created inside a scenario when its expected error fires and handed
    straight to the reporter.
    """
    scenario: str
    kind: FaultKind
    message: str

    @classmethod
    def from_error(cls, scenario: str, kind: FaultKind, error: BaseException) -> 'FaultReport':
        """Build a report from a caught exception."""
        return cls(scenario=scenario, kind=kind, message=cls.single_line(str(error)))

    @staticmethod
    def single_line(text: str) -> str:
        """Collapse a multi-line message so each report stays on one line."""
        return ' '.join(part.strip() for part in text.splitlines() if part.strip())

    @property
    def line(self) -> str:
        return f"{self.kind.label} caught: {self.message}"

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            'scenario': self.scenario,
            'kind': self.kind.label,
            'message': self.message,
        }
