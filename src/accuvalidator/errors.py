"""
Contains the failure record and the exception raised when a validation run collected failures.
"""
from dataclasses import dataclass
from typing import Any, Mapping

from frozendict import frozendict

from .types import FailureSet

DEFAULT_FAILURE_MESSAGE = "Validation failed"


@dataclass(frozen=True)
class FailureDetail:
    """
    Holds a single failed check. `value` is the offending value (if the check provided one) and is only kept
    for diagnostics.
    """

    message: str
    value: Any = None


class ValidationFailureError(Exception):
    """
    Raised when one or more checks of a validation run failed. `failures` maps every failed name onto the
    FailureDetail of the most recent failing check for that name.
    """

    def __init__(self, message: str, failures: Mapping[str, FailureDetail]):
        frozen_failures: FailureSet = failures if isinstance(failures, frozendict) else frozendict(failures)
        # copy and pickle rebuild the error from `args`
        super().__init__(message, frozen_failures)
        self.message = message
        self.failures: FailureSet = frozen_failures

    def __eq__(self, other):
        return (
            isinstance(other, ValidationFailureError)
            and self.message == other.message
            and self.failures == other.failures
        )

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        # failure values may be unhashable
        return hash(self.message) + hash(tuple(self.failures))

    def __str__(self):
        lines = [self.message]
        lines.extend(f"{name}: {detail.message}" for name, detail in self.failures.items())
        return "\n".join(lines)

    def __repr__(self):
        return f"ValidationFailureError({self.message!r}, {dict(self.failures)!r})"
