#!/usr/bin/env python
# Copyright (c) 2023 - 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

"""
Command-line entry point: doubles 1 and prints the result.
"""

import argparse
import logging

from pydantic import ValidationError

from ..config import AppSettings, get_settings
from ..fun import Fun

logger = logging.getLogger("funbox-cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Construct a doubling wrapper, call it with 1, print the result",
        prog="funbox",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging on stderr",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """
    Main entry point for the funbox command-line interface.
    """
    args = build_parser().parse_args(argv)

    # bad logging settings must not stop the program from running
    settings_error = None
    try:
        settings = get_settings()
    except ValidationError as e:
        settings_error = e
        settings = AppSettings.model_construct()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else settings.log_level(),
        format=settings.LOG_FORMAT,
    )
    if settings_error is not None:
        logger.warning(
            f"Ignoring invalid FUNBOX_* settings, using defaults: {settings_error}"
        )

    double = Fun(lambda x: x * 2, name="double")
    result = double.call(1)
    logger.debug(f"{double!r} returned {result!r}")

    print(f"Result: {result}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
