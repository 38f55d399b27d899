import logging

import pytest

from kdtreex import build, nearest
from kdtreex import config as cx_config
from kdtreex.diagnostics import log_operation
from kdtreex.logging import get_logger
from tests.utils.datasets import K2_POINTS


@pytest.fixture(autouse=True)
def reset_runtime_config(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv("KDTREEX_ENABLE_DIAGNOSTICS", raising=False)
    monkeypatch.delenv("KDTREEX_LOG_LEVEL", raising=False)
    cx_config.reset_runtime_config_cache()
    yield
    cx_config.reset_runtime_config_cache()


def _messages(caplog: pytest.LogCaptureFixture, op: str) -> list[str]:
    return [record.message for record in caplog.records if f"op={op}" in record.message]


def test_get_logger_namespaces_under_package():
    assert get_logger("queries.knn").name == "kdtreex.queries.knn"
    assert get_logger("kdtreex.algo").name == "kdtreex.algo"
    assert get_logger().name == "kdtreex"


def test_build_emits_resource_log(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO, logger="kdtreex.algo.build")

    build(K2_POINTS)

    records = _messages(caplog, "kdtree_build")
    assert records, "expected build operation log"
    message = records[-1]
    assert "wall_ms=" in message
    assert "cpu_user_ms=" in message
    assert "rss_delta=" in message
    assert "points=6" in message
    assert "dimension=2" in message
    assert "height=3" in message


def test_knn_emits_resource_log(caplog: pytest.LogCaptureFixture) -> None:
    tree = build(K2_POINTS)
    caplog.set_level(logging.INFO, logger="kdtreex.queries.knn")

    nearest(tree, [1, 1], 2)

    records = _messages(caplog, "knn_query")
    assert records, "expected knn operation log"
    message = records[-1]
    assert "k=2" in message
    assert "returned=2" in message


def test_failed_query_is_logged_as_error(caplog: pytest.LogCaptureFixture) -> None:
    tree = build(K2_POINTS)
    caplog.set_level(logging.INFO, logger="kdtreex.queries.knn")

    with pytest.raises(ValueError):
        nearest(tree, [1, 1, 1])

    records = _messages(caplog, "knn_query")
    assert records
    assert "status=error" in records[-1]


def test_diagnostics_can_be_disabled(
    caplog: pytest.LogCaptureFixture, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("KDTREEX_ENABLE_DIAGNOSTICS", "0")
    cx_config.reset_runtime_config_cache()
    tree = build(K2_POINTS)
    caplog.set_level(logging.INFO, logger="kdtreex.queries.knn")

    nearest(tree, [1, 1])

    records = _messages(caplog, "knn_query")
    assert records
    message = records[-1]
    assert "cpu_user_ms=NA" in message
    assert "rss_delta=NA" in message


def test_log_operation_yields_none_when_logger_disabled(caplog: pytest.LogCaptureFixture) -> None:
    logger = get_logger("tests.quiet")
    logger.setLevel(logging.WARNING)
    try:
        with log_operation(logger, "quiet") as op_log:
            assert op_log is None
    finally:
        logger.setLevel(logging.NOTSET)

    assert not _messages(caplog, "quiet")
