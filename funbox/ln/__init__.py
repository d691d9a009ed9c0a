from ._sentinel import MaybeUnset, SingletonType, Unset, UnsetType, is_unset

__all__ = (
    "MaybeUnset",
    "SingletonType",
    "Unset",
    "UnsetType",
    "is_unset",
)
