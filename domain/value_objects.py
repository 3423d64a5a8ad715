"""
Domain value objects.
"""

from typing import Any, TypeVar, Union

T = TypeVar("T")


class _Unset:
    """Marker for a partial-update attribute that was not supplied."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self):
        return "UNSET"

    def __bool__(self):
        return False

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self


UNSET: Any = _Unset()

# An attribute of a partial update: either a concrete value or UNSET.
OptionalField = Union[T, _Unset]


def is_set(value: Any) -> bool:
    """True when a partial-update attribute carries a value."""
    return value is not UNSET


def from_nullable(value: Any) -> Any:
    """Map a wire value to an optional field; null means "leave unchanged"."""
    return UNSET if value is None else value
