"""
Contains the types used in the validation accumulator
"""
from typing import TYPE_CHECKING, Callable, TypeAlias

from frozendict import frozendict

if TYPE_CHECKING:
    from .accumulator import ValidationAccumulator
    from .errors import FailureDetail


Predicate: TypeAlias = Callable[[], bool]
RegistrationBlock: TypeAlias = Callable[["ValidationAccumulator"], None]
FailureSet: TypeAlias = "frozendict[str, FailureDetail]"  # pylint: disable=invalid-name
