import io
import json
import logging

import pytest
import structlog

from walletlink.logging_config import setup_logging


@pytest.fixture
def restore_logging():
    package_logger = logging.getLogger("walletlink")
    handlers, level, propagate = list(package_logger.handlers), package_logger.level, package_logger.propagate
    yield
    package_logger.handlers[:] = handlers
    package_logger.setLevel(level)
    package_logger.propagate = propagate
    structlog.reset_defaults()


def test_info_level_emits_json_lines(restore_logging):
    stream = io.StringIO()
    setup_logging("INFO", stream=stream)

    logging.getLogger("walletlink.core.messaging.correlator").error("Request ID 'X' was not found")

    record = json.loads(stream.getvalue().strip().splitlines()[-1])
    assert record["event"] == "Request ID 'X' was not found"
    assert record["level"] == "error"
    assert record["logger"] == "walletlink.core.messaging.correlator"


def test_level_filters_debug(restore_logging):
    stream = io.StringIO()
    setup_logging("WARNING", stream=stream)

    logging.getLogger("walletlink.auth.flow").info("Signed in as alice.near")

    assert stream.getvalue() == ""


def test_structlog_events_share_the_stream(restore_logging):
    stream = io.StringIO()
    setup_logging("INFO", stream=stream)

    structlog.stdlib.get_logger("walletlink.core.messaging.channel").error(
        "wallet_message_unparseable", data="'{'"
    )

    record = json.loads(stream.getvalue().strip().splitlines()[-1])
    assert record["event"] == "wallet_message_unparseable"
    assert record["data"] == "'{'"
