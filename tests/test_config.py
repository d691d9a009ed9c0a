# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Tests for configuration module."""

import logging

import pytest
from pydantic import ValidationError

from funbox.config import DEFAULT_LOG_FORMAT, AppSettings, get_settings


@pytest.fixture
def fresh_settings(monkeypatch):
    """Drop any cached settings so the environment is read again."""
    monkeypatch.setattr(AppSettings, "_instance", None)


class TestAppSettings:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("FUNBOX_LOG_LEVEL", raising=False)
        monkeypatch.delenv("FUNBOX_LOG_FORMAT", raising=False)
        config = AppSettings(_env_file=None)
        assert config.LOG_LEVEL == "WARNING"
        assert config.LOG_FORMAT == DEFAULT_LOG_FORMAT
        assert config.log_level() == logging.WARNING

    def test_reads_prefixed_environment(self, monkeypatch):
        monkeypatch.setenv("FUNBOX_LOG_LEVEL", "debug")
        config = AppSettings(_env_file=None)
        assert config.LOG_LEVEL == "DEBUG"
        assert config.log_level() == logging.DEBUG

    def test_unknown_level_rejected(self, monkeypatch):
        monkeypatch.setenv("FUNBOX_LOG_LEVEL", "LOUD")
        with pytest.raises(ValidationError):
            AppSettings(_env_file=None)

    def test_frozen(self):
        config = AppSettings(_env_file=None)
        with pytest.raises(ValidationError):
            config.LOG_LEVEL = "INFO"

    def test_model_construct_gives_defaults_without_env(self, monkeypatch):
        monkeypatch.setenv("FUNBOX_LOG_LEVEL", "LOUD")
        config = AppSettings.model_construct()
        assert config.LOG_LEVEL == "WARNING"
        assert config.log_level() == logging.WARNING


class TestGetSettings:
    def test_built_once_and_reused(self, fresh_settings):
        first = get_settings()
        assert isinstance(first, AppSettings)
        assert get_settings() is first
        assert AppSettings._instance is first

    def test_invalid_environment_raises_on_first_use(
        self, fresh_settings, monkeypatch
    ):
        monkeypatch.setenv("FUNBOX_LOG_LEVEL", "LOUD")
        with pytest.raises(ValidationError):
            get_settings()
        assert AppSettings._instance is None
