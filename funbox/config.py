# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

import logging
from typing import Any, ClassVar

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class AppSettings(BaseSettings, frozen=True):
    """Application settings with environment variable support.

    Only the logging surface is configurable; nothing here changes what a
    wrapper computes or what the CLI prints on stdout.
    """

    model_config = SettingsConfigDict(
        env_prefix="FUNBOX_",
        env_file=(".env", ".env.local"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    LOG_LEVEL: str = Field(
        default="WARNING", description="Root log level used by the CLI"
    )
    LOG_FORMAT: str = Field(
        default=DEFAULT_LOG_FORMAT,
        description="Format string passed to logging.basicConfig",
    )

    # Class variable to store the singleton instance
    _instance: ClassVar[Any] = None

    @field_validator("LOG_LEVEL")
    @classmethod
    def _check_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level

    def log_level(self) -> int:
        """Numeric form of ``LOG_LEVEL``."""
        return logging.getLevelName(self.LOG_LEVEL)


def get_settings() -> AppSettings:
    """Build the settings from the environment on first use, then reuse them.

    Raises:
        pydantic.ValidationError: the environment holds an invalid value.
    """
    if AppSettings._instance is None:
        AppSettings._instance = AppSettings()
    return AppSettings._instance
