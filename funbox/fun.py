# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""One-shot unary function wrapper.

A ``Fun[A, B]`` owns a single callable ``A -> B``. Invoking it or composing
it hands that callable over and leaves the wrapper consumed:

    >>> double = Fun(lambda x: x * 2)
    >>> double(1)
    2
    >>> double(1)
    Traceback (most recent call last):
    ...
    funbox._errors.ConsumedError: Cannot call '<lambda>': wrapper has already been consumed

Composition is lazy. ``f.then(g)`` (or ``f >> g``) only builds a new wrapper;
neither behavior runs until that wrapper is invoked.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from typing import Any, Generic, TypeVar

from ._errors import ConsumedError, ValidationError
from .ln import MaybeUnset, Unset, is_unset

__all__ = (
    "Fun",
    "id",
)

logger = logging.getLogger(__name__)

A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")


def _behavior_name(behavior: Any) -> str:
    if isinstance(behavior, Fun):
        return behavior.name
    return getattr(behavior, "__name__", type(behavior).__name__)


class Fun(Generic[A, B]):
    """Owned, single-use callable from ``A`` to ``B``."""

    __slots__ = ("_behavior", "_lock", "name")

    def __init__(
        self, behavior: Callable[[A], B], /, *, name: str | None = None
    ):
        if not callable(behavior):
            raise ValidationError.from_value(
                behavior,
                expected="callable",
                message="Fun behavior must be callable",
            )
        self.name = name or _behavior_name(behavior)
        if isinstance(behavior, Fun):
            behavior = behavior._take("wrap")
        self._behavior: MaybeUnset[Callable[[A], B]] = behavior
        self._lock = threading.Lock()
        logger.debug(f"Fun {self.name!r} constructed")

    @property
    def consumed(self) -> bool:
        return is_unset(self._behavior)

    def _take(self, operation: str) -> Callable[[A], B]:
        """Hand the behavior over exactly once."""
        with self._lock:
            behavior, self._behavior = self._behavior, Unset
        if is_unset(behavior):
            raise ConsumedError.for_wrapper(self.name, operation)
        logger.debug(f"Fun {self.name!r} consumed by {operation}")
        return behavior

    def call(self, arg: A, /) -> B:
        """Apply the behavior to ``arg``. Consumes the wrapper."""
        return self._take("call")(arg)

    def __call__(self, arg: A, /) -> B:
        return self.call(arg)

    def then(self, g: Fun[B, C], /) -> Fun[A, C]:
        """Return ``x -> g(self(x))``. Consumes both wrappers.

        Raises:
            ValidationError: ``g`` is not a ``Fun``, or ``g`` is ``self``.
            ConsumedError: either operand is already consumed.
        """
        if not isinstance(g, Fun):
            raise ValidationError.from_value(
                g, expected="Fun", message="Can only compose with another Fun"
            )
        if g is self:
            raise ValidationError("then operands must be distinct wrappers")
        if g.consumed:
            raise ConsumedError.for_wrapper(g.name, "then")

        first = self._take("then")
        second = g._take("then")

        def composed(x: A) -> C:
            return second(first(x))

        return Fun(composed, name=f"{self.name} >> {g.name}")

    def __rshift__(self, g: Fun[B, C]) -> Fun[A, C]:
        return self.then(g)

    def __repr__(self) -> str:
        state = "consumed" if self.consumed else "ready"
        return f"Fun({self.name!r}, {state})"


def _identity(x):
    return x


def id() -> Fun[A, A]:  # noqa: A001
    """Fresh wrapper that returns its argument unchanged."""
    return Fun(_identity, name="id")
