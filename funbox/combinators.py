# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Wrappers built from other wrappers.

Each combinator takes ownership of the ``Fun`` operands it is given. The
returned wrapper owns their behaviors and may apply them any number of times
within its own single invocation.
"""

from __future__ import annotations

import builtins
import logging
from collections.abc import Callable
from typing import Any, TypeVar

from ._errors import ConsumedError, ValidationError
from .fun import Fun, id

__all__ = (
    "equals",
    "if_then",
    "repeat",
    "repeat_until",
    "tap",
)

logger = logging.getLogger(__name__)

A = TypeVar("A")
B = TypeVar("B")


def _take_all(operation: str, **operands: Any) -> list[Callable[[Any], Any]]:
    """Validate every operand first, then consume them all.

    Either every operand is consumed or none is.
    """
    for role, value in operands.items():
        if not isinstance(value, Fun):
            raise ValidationError.from_value(
                value, expected="Fun", message=f"{role} must be a Fun", role=role
            )
    values = list(operands.values())
    if len({builtins.id(v) for v in values}) != len(values):
        raise ValidationError(f"{operation} operands must be distinct wrappers")
    for value in values:
        if value.consumed:
            raise ConsumedError.for_wrapper(value.name, operation)
    return [value._take(operation) for value in values]


def equals(y: A) -> Fun[A, bool]:
    def _equals(x: A) -> bool:
        return x == y

    return Fun(_equals, name=f"equals({y!r})")


def if_then(
    condition: Fun[A, bool], then_fn: Fun[A, B], else_fn: Fun[A, B]
) -> Fun[A, B]:
    """Run ``then_fn`` when ``condition`` holds on the argument, else ``else_fn``.

    All three wrappers are consumed when the result is built. Only the chosen
    branch runs on invocation.
    """
    check, on_true, on_false = _take_all(
        "if_then", condition=condition, then_fn=then_fn, else_fn=else_fn
    )

    def _branch(x: A) -> B:
        return (on_true if check(x) else on_false)(x)

    return Fun(
        _branch,
        name=f"if_then({condition.name}, {then_fn.name}, {else_fn.name})",
    )


def repeat(f: Fun[A, A], times: int) -> Fun[A, A]:
    """Apply the endomorphism ``f`` ``times`` times; ``times <= 0`` is ``id()``."""
    if isinstance(times, bool) or not isinstance(times, int):
        raise ValidationError.from_value(
            times, expected="int", message="repeat count must be an int"
        )
    (step,) = _take_all("repeat", f=f)
    if times <= 0:
        return id()

    def _repeat(x: A) -> A:
        for _ in range(times):
            x = step(x)
        return x

    return Fun(_repeat, name=f"repeat({f.name}, {times})")


def repeat_until(f: Fun[A, A], condition: Fun[A, bool]) -> Fun[A, A]:
    """Apply ``f`` until ``condition`` holds on the current value.

    The condition is checked before each step, so an argument that already
    satisfies it comes back unchanged. Does not terminate if the condition is
    never reached.
    """
    step, done = _take_all("repeat_until", f=f, condition=condition)

    def _repeat_until(x: A) -> A:
        while not done(x):
            x = step(x)
        return x

    return Fun(_repeat_until, name=f"repeat_until({f.name}, {condition.name})")


def tap(message: str | None = None, *, level: int = logging.INFO) -> Fun[A, A]:
    """Identity wrapper that logs the value passing through it."""

    def _tap(x: A) -> A:
        if message:
            logger.log(level, f"{message}: {x!r}")
        else:
            logger.log(level, repr(x))
        return x

    return Fun(_tap, name="tap")
