import io

from lumberjack.logger import _LEVELS, get_logger


def test_logger_info_output():
    buf = io.StringIO()
    logger = get_logger("test")
    logger.stream = buf  # type: ignore
    logger.info("Hello", "World")
    out = buf.getvalue()
    assert "INFO" in out and "test: Hello World" in out


def test_logger_filters_below_min_level():
    buf = io.StringIO()
    logger = get_logger("quiet")
    logger.stream = buf  # type: ignore
    logger.min_level = _LEVELS["WARN"]
    logger.debug("hidden")
    logger.info("hidden")
    logger.warn("shown")
    logger.error("also shown")
    lines = buf.getvalue().splitlines()
    assert len(lines) == 2
    assert "WARN" in lines[0] and "ERROR" in lines[1]


def test_logger_without_stream_is_silent():
    logger = get_logger("none")
    logger.stream = None
    logger.error("nothing happens")


def test_logger_survives_closed_stream():
    buf = io.StringIO()
    logger = get_logger("closed")
    logger.stream = buf  # type: ignore
    buf.close()
    logger.error("written to a closed stream")
