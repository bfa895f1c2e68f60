"""
Contains the two ways to run a batch of checks. Both create a fresh ValidationAccumulator, hand it to the
registration block and evaluate the collected failures once the block returned:

- `run_throwing` raises a ValidationFailureError if any check failed. Use it e.g. in `__post_init__` to abort
  the construction of invalid objects.
- `run_to_outcome` returns a `Success` or a `Failure` instead.
"""
import logging

from .accumulator import ValidationAccumulator
from .analysis import Failure, Success, ValidationOutcome
from .errors import DEFAULT_FAILURE_MESSAGE, ValidationFailureError
from .types import RegistrationBlock

logger = logging.getLogger(__name__)


def run_throwing(block: RegistrationBlock, message: str = DEFAULT_FAILURE_MESSAGE) -> ValidationAccumulator:
    """
    Runs all checks registered by `block`. If at least one of them failed, a ValidationFailureError containing
    every failure is raised. Otherwise, the (finished) accumulator is returned.
    E.g.:
    ```
    @dataclass(frozen=True)
    class Apple:
        id: int

        def __post_init__(self):
            run_throwing(lambda v: v.check("id", "Id must be positive", lambda: self.id > 0))
    ```
    Any exception raised inside `block` (e.g. by a predicate) is propagated as is.
    """
    accumulator = ValidationAccumulator()
    block(accumulator)
    accumulator.finish(message)
    return accumulator


def run_to_outcome(block: RegistrationBlock, message: str = DEFAULT_FAILURE_MESSAGE) -> ValidationOutcome:
    """
    Runs all checks registered by `block` like `run_throwing` does, but returns a `Failure` instead of raising
    the ValidationFailureError. If no check failed, a `Success` is returned.
    Only the failures of this run get converted. Any exception raised inside `block` is propagated as is, even a
    ValidationFailureError of a nested run.
    """
    accumulator = ValidationAccumulator()
    block(accumulator)
    try:
        accumulator.finish(message)
    except ValidationFailureError as error:
        logger.debug("Converting failed validation run into outcome: %s", list(error.failures))
        return Failure(error)
    return Success(accumulator)
