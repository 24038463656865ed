import json
import logging

from leasefee.adapters.logging_utils import JsonLogFormatter, get_logger, log_context


def test_json_formatter_merges_context():
    record = logging.LogRecord(
        name="leasefee.test",
        level=logging.DEBUG,
        pathname=__file__,
        lineno=1,
        msg="fee evaluated",
        args=(),
        exc_info=None,
    )
    record.context = {"fee": 4200.0, "lease_type": "new"}

    payload = json.loads(JsonLogFormatter().format(record))
    assert payload["message"] == "fee evaluated"
    assert payload["level"] == "DEBUG"
    assert payload["fee"] == 4200.0
    assert payload["lease_type"] == "new"


def test_log_context_wraps_fields():
    assert log_context(rent=1.0) == {"context": {"rent": 1.0}}


def test_get_logger_attaches_single_handler():
    a = get_logger("leasefee.test.single", level="DEBUG")
    b = get_logger("leasefee.test.single")
    assert a is b
    assert len(a.handlers) == 1
    assert a.propagate is False
