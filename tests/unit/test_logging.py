from __future__ import annotations

import json
import logging

from fourier_fit.utils.logging import JsonFormatter, _json_formatter, configure_logging

EXPECTED_SAMPLES = 512
EXPECTED_ORDER = 4


def _record(msg: str = "filtered") -> logging.LogRecord:
    return logging.LogRecord(
        name="test.logger",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg=msg,
        args=(),
        exc_info=None,
    )


def test_json_formatter_promotes_standard_extra_fields() -> None:
    record = _record()
    record.samples = EXPECTED_SAMPLES
    record.filter = "butterworth"

    payload = json.loads(_json_formatter(record))

    assert payload["level"] == "INFO"
    assert payload["logger"] == "test.logger"
    assert payload["message"] == "filtered"
    assert payload["samples"] == EXPECTED_SAMPLES
    assert payload["filter"] == "butterworth"
    assert "pathname" not in payload


def test_json_formatter_supports_nested_extra_field() -> None:
    record = _record()
    record.extra = {"order": EXPECTED_ORDER}

    payload = json.loads(_json_formatter(record))

    assert payload["order"] == EXPECTED_ORDER
    assert "extra" not in payload


def test_json_formatter_serialises_complex_values() -> None:
    record = _record()
    record.pole = complex(0.5, -0.25)

    payload = json.loads(_json_formatter(record))

    assert payload["pole"] == {"re": 0.5, "im": -0.25}


def test_json_formatter_class_matches_function() -> None:
    record = _record("hello")
    assert json.loads(JsonFormatter().format(record))["message"] == "hello"


def test_configure_logging_sets_root_level() -> None:
    root = logging.getLogger()
    previous = root.level
    try:
        configure_logging(level="WARNING", json_logs=True)
        assert root.level == logging.WARNING
        assert isinstance(root.handlers[0].formatter, JsonFormatter)
    finally:
        root.setLevel(previous)
