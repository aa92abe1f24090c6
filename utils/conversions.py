"""Runtime-checked conversions."""

from typing import Any, Type, TypeVar

T = TypeVar('T')


def checked_cast(value: Any, target_type: Type[T]) -> T:
    """
    Return value unchanged if it already is a target_type.

    Nothing is converted: an int is never turned into a str.

    Raises:
        TypeError: If value is not an instance of target_type
    """
    if isinstance(value, target_type):
        return value
    raise TypeError(
        f"class {type(value).__name__} cannot be cast to class {target_type.__name__}"
    )
