"""Logging configuration tests."""

import io
import logging
import sys

from keyshorty.logging_config import configure_logging


def test_logs_go_to_the_given_stream():
    buf = io.StringIO()
    try:
        configure_logging(log_level="debug", stream=buf)
        logging.getLogger("keyshorty.client.book").warning("adding application failed: boom")
        assert "adding application failed: boom" in buf.getvalue()
    finally:
        configure_logging()


def test_defaults_to_stdout():
    try:
        configure_logging()
        handler = logging.getLogger().handlers[0]
        assert handler.stream is sys.stdout
    finally:
        configure_logging()
