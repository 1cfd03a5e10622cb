import logging

from backend.scrapers.common import ImportLog


def test_lines_are_kept_in_order():
    log = ImportLog()
    log.add("first")
    log.error("second")

    assert log.lines == ["first", "second"]


def test_listeners_receive_every_line():
    received = []
    log = ImportLog(listeners=[received.append])
    log.add("Searching for courses...")
    log.subscribe(lambda line: received.append(line.upper()))
    log.warning("skipped")

    assert received == ["Searching for courses...", "skipped", "SKIPPED"]


def test_failing_listener_does_not_break_feed():
    def broken(line):
        raise RuntimeError("listener down")

    log = ImportLog(listeners=[broken])
    log.add("still recorded")

    assert log.lines == ["still recorded"]


def test_lines_forwarded_to_logger(caplog):
    logger = logging.getLogger("tests.import_log")
    log = ImportLog(log=logger)

    with caplog.at_level(logging.INFO, logger="tests.import_log"):
        log.add("Inserting course: Oakmont")
        log.error("Error inserting course: duplicate key")

    levels = [(r.levelno, r.getMessage()) for r in caplog.records if r.name == "tests.import_log"]
    assert levels == [
        (logging.INFO, "Inserting course: Oakmont"),
        (logging.ERROR, "Error inserting course: duplicate key")
    ]
