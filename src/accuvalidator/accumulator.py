"""
Contains the ValidationAccumulator which evaluates named checks and collects every failure of a validation run.
"""
import logging
from typing import Any

from frozendict import frozendict

from .errors import DEFAULT_FAILURE_MESSAGE, FailureDetail, ValidationFailureError
from .types import FailureSet, Predicate

logger = logging.getLogger(__name__)


class ValidationAccumulator:
    """
    Collects the failures of one validation run. Each check is identified by a name (usually the name of the
    property under test). A failing check stores a FailureDetail under its name; a later failing check with the
    same name overwrites it, a later passing check leaves it untouched.

    An accumulator is meant to be used for exactly one run: once `finish` got called it won't accept any further
    checks. Use `run_throwing` or `run_to_outcome` instead of instantiating this class yourself.
    """

    def __init__(self):
        self._failures: dict[str, FailureDetail] = {}
        self._finished = False

    def check(self, name: str, message: str, predicate: Predicate, value: Any = None) -> None:
        """
        Evaluates `predicate` once. If it returns a falsy value, a FailureDetail with `message` and `value` is
        stored under `name`. Exceptions raised by the predicate are not caught.
        E.g.:
        ```
        acc.check("type", "Invalid type", lambda: apple_type in APPLE_TYPES, value=apple_type)
        ```
        """
        if self._finished:
            raise RuntimeError(f"Cannot check '{name}': this validation run is already finished")
        if not predicate():
            logger.debug("Check '%s' failed: %s", name, message)
            self._failures[name] = FailureDetail(message, value)

    def finish(self, message: str = DEFAULT_FAILURE_MESSAGE) -> None:
        """
        Ends the validation run. Raises a ValidationFailureError containing all failures if any check failed.
        """
        if self._finished:
            raise RuntimeError("This validation run is already finished")
        self._finished = True
        logger.debug("Validation run finished with %d failure(s)", len(self._failures))
        if len(self._failures) > 0:
            raise ValidationFailureError(message, self._failures)

    @property
    def failures(self) -> FailureSet:
        """Snapshot of the failures collected so far"""
        return frozendict(self._failures)

    @property
    def is_valid(self) -> bool:
        """True if no check failed (yet)"""
        return len(self._failures) == 0

    @property
    def finished(self) -> bool:
        """True once `finish` got called"""
        return self._finished

    def __bool__(self):
        return self.is_valid

    def __contains__(self, name: object) -> bool:
        return name in self._failures

    def __repr__(self):
        return f"ValidationAccumulator(failures={dict(self._failures)!r}, finished={self._finished})"
