import logging

from chat_relay.core.logging import configure_logging


def test_service_loggers_follow_log_level(make_settings):
    level = configure_logging(make_settings(LOG_LEVEL="debug"))

    assert level == logging.DEBUG
    assert logging.getLogger("chat_relay").level == logging.DEBUG
    assert logging.getLogger("uvicorn.access").level == logging.DEBUG


def test_sdk_loggers_are_quieter_by_default(make_settings):
    configure_logging(make_settings())

    assert logging.getLogger("chat_relay").level == logging.INFO
    assert logging.getLogger("google_genai").level == logging.WARNING
    assert logging.getLogger("httpx").level == logging.WARNING


def test_unknown_levels_fall_back(make_settings):
    level = configure_logging(make_settings(LOG_LEVEL="chatty", SDK_LOG_LEVEL=""))

    assert level == logging.INFO
    assert logging.getLogger("httpcore").level == logging.WARNING
