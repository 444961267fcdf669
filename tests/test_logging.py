import json
import logging
import sys

from paginator.config import Settings
from paginator.core.logging import (
    CorrelationIdFilter,
    StructuredFormatter,
    get_correlation_id,
    get_logger,
    set_correlation_id,
    setup_logging,
    shutdown_logging,
)


def make_record(msg="Repaired pagination parameters", exc_info=None):
    return logging.LogRecord(
        name="paginator.modules.pagination.normalizer",
        level=logging.WARNING,
        pathname=__file__,
        lineno=10,
        msg=msg,
        args=(),
        exc_info=exc_info,
    )


def test_get_logger_namespaces():
    assert get_logger().name == "paginator"
    assert get_logger("paginator.modules.pagination.window").name == (
        "paginator.modules.pagination.window"
    )
    assert get_logger("scripts").name == "paginator.scripts"


def test_correlation_id_filter():
    set_correlation_id("abc12345")
    record = make_record()
    assert CorrelationIdFilter().filter(record) is True
    assert record.correlation_id == "abc12345"
    assert get_correlation_id() == "abc12345"


def test_structured_formatter_emits_json():
    set_correlation_id("req-1")
    formatter = StructuredFormatter(fmt="%(message)s")
    payload = json.loads(formatter.format(make_record()))
    assert payload["message"] == "Repaired pagination parameters"
    assert payload["level"] == "WARNING"
    assert payload["logger_name"] == "paginator.modules.pagination.normalizer"
    assert payload["correlation_id"] == "req-1"
    assert payload["service"]["name"] == "paginator"
    assert "msg" not in payload


def test_structured_formatter_includes_exception():
    try:
        raise ValueError("bad page")
    except ValueError:
        record = make_record(msg="failed", exc_info=sys.exc_info())
    payload = json.loads(StructuredFormatter(fmt="%(message)s").format(record))
    assert payload["exception"]["type"] == "ValueError"
    assert payload["exception"]["message"] == "bad page"


def test_setup_logging_console(reset_logging):
    logger = setup_logging(settings=Settings(log_level="DEBUG"))
    assert logger.name == "paginator"
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0].formatter, StructuredFormatter)
    # Second call is a no-op
    assert setup_logging(settings=Settings()) is logger
    assert len(logger.handlers) == 1


def test_setup_logging_to_file(tmp_path, reset_logging):
    log_file = tmp_path / "logs" / "paginator.log"
    logger = setup_logging(
        log_to_file=True,
        log_file_path=str(log_file),
        log_level="INFO",
        use_json_format=True,
        settings=Settings(),
    )
    set_correlation_id("file-run")
    get_logger("paginator.tests").info("written to file")

    shutdown_logging()

    lines = [json.loads(line) for line in log_file.read_text().splitlines()]
    assert any(
        line["message"] == "written to file" and line["correlation_id"] == "file-run"
        for line in lines
    )
    assert logger.handlers == []


def test_shutdown_restores_propagation(tmp_path, reset_logging):
    setup_logging(
        log_to_file=True,
        log_file_path=str(tmp_path / "app.log"),
        settings=Settings(),
    )
    logger = get_logger()
    assert logger.propagate is False

    shutdown_logging()

    assert logger.propagate is True
    assert logger.handlers == []
