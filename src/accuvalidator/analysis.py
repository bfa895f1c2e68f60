"""
Contains the outcome of a validation run. `run_to_outcome` returns either a `Success` or a `Failure` instead of
raising a ValidationFailureError, so callers can branch on the failed names, e.g. to fall back to defaults:
```
outcome = run_to_outcome(block)
if "a" in outcome.failures:
    a = 0
```
"""
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, TypeAlias, TypeVar

from frozendict import frozendict

from .errors import ValidationFailureError
from .types import FailureSet

if TYPE_CHECKING:
    from .accumulator import ValidationAccumulator

ResultT = TypeVar("ResultT")


@dataclass(frozen=True)
class Success:
    """All checks of the run passed"""

    accumulator: "ValidationAccumulator"

    @property
    def is_success(self) -> bool:
        return True

    @property
    def is_failure(self) -> bool:
        return False

    @property
    def failures(self) -> FailureSet:
        """Always empty"""
        return frozendict()

    def get_or_raise(self) -> "ValidationAccumulator":
        """Returns the accumulator of the run"""
        return self.accumulator

    def fold(
        self,
        on_success: Callable[["ValidationAccumulator"], ResultT],
        on_failure: Callable[[ValidationFailureError], ResultT],  # pylint: disable=unused-argument
    ) -> ResultT:
        """Calls `on_success` with the accumulator and returns its result"""
        return on_success(self.accumulator)

    def __bool__(self):
        return True


@dataclass(frozen=True)
class Failure:
    """
    At least one check of the run failed. The ValidationFailureError which would have been raised by
    `run_throwing` is kept in `error`.
    """

    error: ValidationFailureError

    @property
    def is_success(self) -> bool:
        return False

    @property
    def is_failure(self) -> bool:
        return True

    @property
    def failures(self) -> FailureSet:
        """Maps each failed name onto its FailureDetail"""
        return self.error.failures

    @property
    def message(self) -> str:
        """The overall failure message"""
        return self.error.message

    def get_or_raise(self) -> "ValidationAccumulator":
        """Raises the stored ValidationFailureError"""
        raise self.error

    def fold(
        self,
        on_success: Callable[["ValidationAccumulator"], ResultT],  # pylint: disable=unused-argument
        on_failure: Callable[[ValidationFailureError], ResultT],
    ) -> ResultT:
        """Calls `on_failure` with the stored error and returns its result"""
        return on_failure(self.error)

    def __bool__(self):
        return False


ValidationOutcome: TypeAlias = Success | Failure
