import logging

from prometheus_client import CollectorRegistry, Counter

from judgment_search.api import state


def _counter(labelnames=()):
    return Counter('judgment_search_test_total', 'test counter', list(labelnames), registry=CollectorRegistry())


def test_inc_counts_with_and_without_labels():
    plain = _counter()
    state.inc(plain)
    assert plain._value.get() == 1

    labelled = _counter(['status'])
    state.inc(labelled, 'ok')
    assert labelled.labels('ok')._value.get() == 1


def test_inc_ignores_missing_metric():
    state.inc(None, 'ok')


def test_inc_label_mismatch_is_logged(caplog):
    labelled = _counter(['status'])
    with caplog.at_level(logging.DEBUG, logger='judgment_search.api.state'):
        state.inc(labelled)
    assert any('could not increment' in rec.getMessage() for rec in caplog.records)
