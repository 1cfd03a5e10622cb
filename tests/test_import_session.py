import threading

import pytest

from backend.etl.import_session import ImportAlreadyRunning, ImportPhase, ImportSession


def _runner(courses=2, holes=36, errors=()):
    def runner(settings, log):
        log.add("Starting database population process...")
        return {"courses_added": courses, "holes_added": holes, "errors": list(errors)}
    return runner


def test_new_session_waits_for_credentials():
    session = ImportSession(runner=_runner())
    state = session.snapshot()

    assert state["phase"] == "credentials"
    assert state["running"] is False
    assert state["logs"] == []
    assert state["summary"] == {"courses": 0, "holes": 0}


def test_inline_run_completes_with_summary(settings):
    session = ImportSession(runner=_runner())
    session.start(settings, background=False)
    state = session.snapshot()

    assert state["phase"] == "complete"
    assert state["summary"] == {"courses": 2, "holes": 36}
    assert state["logs"] == ["Starting database population process..."]


def test_background_run(settings):
    session = ImportSession(runner=_runner(courses=1, holes=18))
    session.start(settings)
    session.wait(timeout=5)

    assert session.phase == ImportPhase.COMPLETE
    assert session.summary == {"courses": 1, "holes": 18}


def test_second_start_while_running_is_refused(settings):
    release = threading.Event()

    def slow_runner(settings, log):
        release.wait(5)
        return {"courses_added": 0, "holes_added": 0, "errors": []}

    session = ImportSession(runner=slow_runner)
    session.start(settings)
    try:
        with pytest.raises(ImportAlreadyRunning):
            session.start(settings)
        with pytest.raises(ImportAlreadyRunning):
            session.reset()
        assert session.snapshot()["running"] is True
    finally:
        release.set()
        session.wait(timeout=5)

    assert session.phase == ImportPhase.COMPLETE


def test_runner_exception_completes_session(settings):
    def broken_runner(settings, log):
        raise RuntimeError("unexpected")

    session = ImportSession(runner=broken_runner)
    session.start(settings, background=False)

    assert session.phase == ImportPhase.COMPLETE
    assert session.log.lines == ["Error in course import: unexpected"]
    assert session.summary == {"courses": 0, "holes": 0}


def test_reset_clears_state(settings):
    session = ImportSession(runner=_runner(errors=["Error importing course 1: boom"]))
    session.start(settings, background=False)
    assert session.snapshot()["errors"] == ["Error importing course 1: boom"]

    session.reset()
    state = session.snapshot()

    assert state["phase"] == "credentials"
    assert state["logs"] == []
    assert state["errors"] == []
    assert state["summary"] == {"courses": 0, "holes": 0}
