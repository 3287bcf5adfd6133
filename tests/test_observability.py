import logging

import pytest

from observers.errors import InvalidArgumentError
from observers.identity import IdentityRef
from observers.observability import Metrics, get_logger


def test_metrics_snapshot():
    metrics = Metrics()
    metrics.increment("registered")
    metrics.increment("registered", 2)
    metrics.set_gauge("observers", 3)
    assert metrics.snapshot() == {
        "counters": {"registered": 3},
        "gauges": {"observers": 3},
    }
    assert metrics.get_counter("missing") == 0


def test_get_logger_attaches_one_handler_and_keeps_level():
    first = get_logger("observers.test.handlers")
    second = get_logger("observers.test.handlers", logging.DEBUG)
    assert first is second
    assert len(second.handlers) == 1
    assert second.level == logging.INFO


def test_identity_ref_equality_and_call():
    def callback(value):
        return value * 2

    assert IdentityRef(callback) == IdentityRef(callback)
    assert hash(IdentityRef(callback)) == hash(IdentityRef(callback))
    assert IdentityRef([]) != IdentityRef([])
    assert IdentityRef(callback) != callback
    assert IdentityRef(callback)(21) == 42


def test_identity_ref_rejects_none():
    with pytest.raises(InvalidArgumentError):
        IdentityRef(None)
