import logging

import pytest

from clipper.core.config.settings import settings
from clipper.core.log_setup import configure_logging


@pytest.fixture
def clean_root_logger():
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    yield root
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)


def _clipper_handlers(root):
    return [h for h in root.handlers if getattr(h, "_clipper", False)]


def test_level_comes_from_settings(clean_root_logger, monkeypatch):
    monkeypatch.setattr(settings, "LOG_LEVEL", "WARNING")

    configure_logging()

    assert clean_root_logger.level == logging.WARNING


def test_explicit_level_overrides_settings(clean_root_logger):
    configure_logging("DEBUG")

    assert clean_root_logger.level == logging.DEBUG


def test_repeated_calls_attach_one_handler(clean_root_logger):
    configure_logging()
    configure_logging()

    assert len(_clipper_handlers(clean_root_logger)) == 1
    assert logging.getLogger("urllib3").level == logging.WARNING
