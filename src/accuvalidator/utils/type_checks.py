"""
Contains some useful utility functions to be used in check predicates.
"""
from typing import Any

from typeguard import CollectionCheckStrategy, TypeCheckError, check_type


def conforms_to(value: Any, expected_type: Any) -> bool:
    """
    Returns True if `value` matches the type annotation `expected_type` and False otherwise. Contrary to
    `isinstance` this also works for parametrized generics and special forms. E.g.:
    ```
    acc.check("tags", "tags must be a list of strings", lambda: conforms_to(tags, list[str]), value=tags)
    acc.check("type", "Invalid type", lambda: conforms_to(apple_type, Literal["Cortland", "Granny Smith"]))
    ```
    Every item of a collection gets checked, not only the first one.
    """
    try:
        check_type(value, expected_type, collection_check_strategy=CollectionCheckStrategy.ALL_ITEMS)
    except TypeCheckError:
        return False
    return True
