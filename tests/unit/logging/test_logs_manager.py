import io
import json
import logging
import threading

import pytest

from fhir_schema.logging.logs_manager import (
    LOG_FORMAT,
    EnrichedJsonFormatter,
    add_source_to_logger,
    init_logging,
    source_context_var,
)


def test_decorator_sets_source_in_context():
    @add_source_to_logger()
    def decode(source):  # noqa: ARG001
        return source_context_var.get()

    result = decode("tests/fixtures/fhir5/patient-example.json")

    assert result == "tests/fixtures/fhir5/patient-example.json"
    assert source_context_var.get() is None


def test_decorator_preserves_function_return_value_and_arguments():
    @add_source_to_logger()
    def decode(source, *, strict=False):
        return source, strict

    assert decode("patient.json", strict=True) == ("patient.json", True)


def test_source_is_reset_when_function_raises():
    @add_source_to_logger()
    def decode(source):
        raise ValueError(source)

    with pytest.raises(ValueError, match="broken.json"):
        decode("broken.json")

    assert source_context_var.get() is None


def test_source_context_is_properly_isolated():
    results = {}

    @add_source_to_logger()
    def decode(source):  # noqa: ARG001
        results[threading.current_thread().name] = source_context_var.get()

    threads = [threading.Thread(target=decode, name=name, args=(f"{name}.json",)) for name in ("A", "B", "C")]

    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert results == {"A": "A.json", "B": "B.json", "C": "C.json"}
    assert source_context_var.get() is None


@pytest.fixture
def log_stream():
    stream = io.StringIO()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(EnrichedJsonFormatter(LOG_FORMAT))

    test_logger = logging.getLogger("test_logger")
    test_logger.handlers = []
    test_logger.addHandler(handler)
    test_logger.setLevel(logging.INFO)
    yield stream
    test_logger.removeHandler(handler)


def test_enriched_json_formatter_adds_all_fields(log_stream):
    @add_source_to_logger()
    def decode(source):  # noqa: ARG001
        logging.getLogger("test_logger").info("Decoding resource", extra={"resource_type": "Patient"})

    decode("patient.json")
    logged_json = json.loads(log_stream.getvalue())

    assert logged_json["source"] == "patient.json"
    assert "asctime" in logged_json
    assert logged_json["levelname"] == "INFO"
    assert logged_json["name"] == "test_logger"
    assert logged_json["module"] == "test_logs_manager"
    assert logged_json["funcName"] == "decode"
    assert "lineno" in logged_json
    assert logged_json["message"] == "Decoding resource"
    assert logged_json["resource_type"] == "Patient"


def test_formatter_without_source(log_stream):
    logging.getLogger("test_logger").info("Outside any decode")

    assert json.loads(log_stream.getvalue())["source"] == "-"


def test_init_logging_installs_json_handler():
    saved_handlers, saved_level = logging.root.handlers[:], logging.root.level
    try:
        init_logging(quieten=("noisy",), level=logging.DEBUG)

        assert len(logging.root.handlers) == 1
        assert isinstance(logging.root.handlers[0].formatter, EnrichedJsonFormatter)
        assert logging.root.level == logging.DEBUG
        assert logging.getLogger("noisy").level == logging.WARNING
    finally:
        logging.root.handlers = saved_handlers
        logging.root.setLevel(saved_level)
