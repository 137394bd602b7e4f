"""Conftest module."""

import pytest

from color_logger.log_sink import LogSink


class RecordingSink(LogSink):
    """Sink that keeps every ``(level, message)`` pair it receives."""

    def __init__(self):
        self.records = []

    def write(self, level, message):
        self.records.append((level, message))

    @property
    def messages(self):
        return [message for _, message in self.records]


@pytest.fixture
def sink():
    return RecordingSink()
