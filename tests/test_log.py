import logging

from chibitools.log import ChibiLog


def test_info_emits_debug_record(caplog):
    log = ChibiLog("chibitools.test")
    with caplog.at_level(logging.DEBUG, logger="chibitools.test"):
        log.info("hello world")
    assert [r.getMessage() for r in caplog.records] == ["hello world"]
    assert caplog.records[0].levelno == logging.DEBUG


def test_info_keeps_percent_signs(caplog):
    log = ChibiLog("chibitools.pct")
    with caplog.at_level(logging.DEBUG, logger="chibitools.pct"):
        log.info("100% done")
    assert caplog.records[0].getMessage() == "100% done"