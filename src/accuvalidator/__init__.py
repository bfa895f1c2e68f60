"""
This package lets you run a batch of named checks and collects every failure instead of stopping at the first
one. Use `run_throwing` to raise a ValidationFailureError or `run_to_outcome` to get a Success/Failure outcome.
"""

from .accumulator import ValidationAccumulator
from .analysis import Failure, Success, ValidationOutcome
from .errors import DEFAULT_FAILURE_MESSAGE, FailureDetail, ValidationFailureError
from .execution import run_throwing, run_to_outcome
from .types import FailureSet, Predicate, RegistrationBlock
