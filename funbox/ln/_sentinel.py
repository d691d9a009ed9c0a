from __future__ import annotations

from typing import Any, Final, Literal, TypeVar, Union

__all__ = (
    "MaybeUnset",
    "SingletonType",
    "Unset",
    "UnsetType",
    "is_unset",
)

T = TypeVar("T")


class _SingletonMeta(type):
    """Metaclass that guarantees exactly one instance per subclass."""

    _cache: dict[type, SingletonType] = {}

    def __call__(cls, *a, **kw):
        if cls not in cls._cache:
            cls._cache[cls] = super().__call__(*a, **kw)
        return cls._cache[cls]


class SingletonType(metaclass=_SingletonMeta):
    """Base class for singleton sentinel types.

    Sentinels keep their identity across copy/deepcopy/pickle and are falsy,
    so they can be compared with ``is``.
    """

    __slots__: tuple[str, ...] = ()

    def __deepcopy__(self, memo):
        return self

    def __copy__(self):
        return self

    # concrete classes *must* override the two methods below
    def __bool__(self) -> bool: ...
    def __repr__(self) -> str: ...


class UnsetType(SingletonType):
    """Sentinel for a slot that exists but currently holds no value.

    A consumed ``Fun`` has its behavior slot set to ``Unset``.
    """

    __slots__ = ()

    def __bool__(self) -> Literal[False]:
        return False

    def __repr__(self) -> Literal["Unset"]:
        return "Unset"

    def __reduce__(self):
        """Ensure pickle preservation of singleton identity."""
        return "Unset"


Unset: Final = UnsetType()

MaybeUnset = Union[T, UnsetType]


def is_unset(value: Any) -> bool:
    return value is Unset
