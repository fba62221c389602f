"""
Pytest fixtures for compressible tests.
"""

import pytest

from compressible.config import get_settings


@pytest.fixture(autouse=True)
def clear_settings_cache(monkeypatch):
    """Give every test fresh settings and no stray COMPRESSIBLE_* variables."""
    import os

    for key in list(os.environ):
        if key.startswith("COMPRESSIBLE_"):
            monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def fresh_table_slot(monkeypatch):
    """Reset the process-wide reference table so a test can watch it being built."""
    import compressible.table as table_module

    monkeypatch.setattr(table_module, "_table", None)
    return table_module


@pytest.fixture
def sample_entries():
    """Small, valid reference data."""
    return [
        ("text/plain", True),
        ("application/json", True),
        ("application/x-future", False),
    ]


@pytest.fixture
def malformed_inputs():
    """Strings that are not media types."""
    return [
        "",
        " ",
        "text",
        "text/",
        "/plain",
        "text/plain/extra",
        "as;ldfkjas;ldfkja;lsdfj",
        ";charset=utf-8",
        "text/pla in",
        "text/plain\x00",
        "text/plaïn",
        "*",
        "*/*",
        "text/" + "a" * 200,
    ]


@pytest.fixture
def reset_logging(monkeypatch):
    """Drop structlog configuration so the next log call configures it again."""
    import structlog

    from compressible import logging as compressible_logging

    for name in ("table_logger", "classifier_logger", "middleware_logger", "cli_logger"):
        monkeypatch.setattr(getattr(compressible_logging, name), "_logger", None)
    structlog.reset_defaults()
    compressible_logging.configure_logging.cache_clear()
    yield compressible_logging
    structlog.reset_defaults()
    compressible_logging.configure_logging.cache_clear()
