"""Base data structures for the assertion system."""

from dataclasses import dataclass
from enum import Enum


class FailureMode(str, Enum):
    """How a failed check affects the iteration that raised it."""

    HARD = "hard"
    SOFT = "soft"


class _Undefined:
    """Marker for a value that was never set, distinct from ``None``."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "undefined"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self):
        return (_Undefined, ())


UNDEFINED = _Undefined()


@dataclass
class AssertionResult:
    """Result of a single check registered with a controller.

    Attributes:
        name: Short label for the check, the first line of its message.
        passed: Whether the check passed.
        message: Full diagnostic text as dispatched.
    """

    name: str
    passed: bool
    message: str

    @classmethod
    def from_label(cls, label: str, passed: bool) -> "AssertionResult":
        name = label.splitlines()[0] if label else ""
        return cls(name=name, passed=passed, message=label)
