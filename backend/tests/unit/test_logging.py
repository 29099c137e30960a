"""Tests for logging setup."""

import logging

import pytest

from autotag.utils.logging import NOISY_LOGGERS, get_logger, setup_logging


@pytest.mark.unit
def test_level_override_applies_to_package_logger():
    setup_logging("debug")

    assert get_logger("autotag").level == logging.DEBUG


@pytest.mark.unit
def test_http_client_loggers_are_quieted():
    setup_logging()

    for name in NOISY_LOGGERS:
        assert get_logger(name).level == logging.WARNING


@pytest.mark.unit
def test_unknown_level_falls_back_to_info():
    setup_logging("chatty")

    assert get_logger("autotag").level == logging.INFO
