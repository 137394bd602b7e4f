import io
import logging

import pytest

from color_logger.colors import RESET, Foreground
from color_logger.log_sink import ConsoleLogSink, FileLogSink, LogSink, StdLoggingSink


def test_base_sink_is_abstract():
    with pytest.raises(NotImplementedError):
        LogSink().info("nope")


def test_std_logging_sink_forwards_at_info(caplog):
    caplog.set_level(logging.INFO, logger="mod.std")
    sink = StdLoggingSink("mod.std")
    sink.info("100% done %s")

    records = [r for r in caplog.records if r.name == "mod.std"]
    assert len(records) == 1
    assert records[0].levelno == logging.INFO
    assert records[0].getMessage() == "100% done %s"


def test_std_logging_sink_maps_levels(caplog):
    caplog.set_level(logging.DEBUG, logger="mod.levels")
    sink = StdLoggingSink("mod.levels")
    sink.write("WARN", "w")
    sink.write("error", "e")
    sink.write("SOMETHING", "x")

    levels = [r.levelno for r in caplog.records if r.name == "mod.levels"]
    assert levels == [logging.WARNING, logging.ERROR, logging.INFO]


def test_console_sink_writes_lines():
    stream = io.StringIO()
    sink = ConsoleLogSink(stream)
    sink.info(f"{Foreground.RED}>>> hi{RESET}")
    sink.info("second")
    assert stream.getvalue() == f"{Foreground.RED}>>> hi{RESET}\nsecond\n"


def test_file_sink_strips_colors(tmp_path):
    path = tmp_path / "logs" / "mod.log"
    sink = FileLogSink(path)
    sink.info(f"{Foreground.RED}>>> hi{RESET}")

    lines = path.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 1
    assert lines[0].endswith("] INFO: >>> hi")
    assert "\x1b" not in lines[0]


def test_file_sink_can_keep_colors(tmp_path):
    path = tmp_path / "mod.log"
    sink = FileLogSink(path, strip_colors=False)
    sink.info(f">>> hi{RESET}")
    sink.info(">>> again")

    lines = path.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 2
    assert lines[0].endswith(f"INFO: >>> hi{RESET}")
    assert sink.path == path
