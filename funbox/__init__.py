# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

import logging

from ._errors import ConsumedError, FunboxError, ValidationError
from .combinators import equals, if_then, repeat, repeat_until, tap
from .fun import Fun, id
from .ln import Unset
from .version import __version__

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())

__all__ = (
    "__version__",
    "ConsumedError",
    "Fun",
    "FunboxError",
    "Unset",
    "ValidationError",
    "equals",
    "id",
    "if_then",
    "logger",
    "repeat",
    "repeat_until",
    "tap",
)
