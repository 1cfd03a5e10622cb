"""
Import session state for the web front end.

The session tracks the three phases shown by the UI (credentials entry,
importing, complete), the progress feed of the current run and its final
summary. Runs execute on a background thread; only one can be active.
"""
import logging
import threading
from enum import Enum
from typing import Any, Callable, Dict, Optional

from backend.etl.course_import import run_course_import
from backend.scrapers.common import ImportLog
from backend.models.import_settings import ImportSettings

logger = logging.getLogger(__name__)


class ImportPhase(str, Enum):
    CREDENTIALS = "credentials"
    IMPORTING = "importing"
    COMPLETE = "complete"


class ImportAlreadyRunning(Exception):
    """Raised when a run is requested while another one is in progress."""


class ImportSession:
    """
    Holds the state of the latest import run.

    Args:
        runner: Function performing the import, called as
            ``runner(settings, log=...)`` (run_course_import by default)
    """

    def __init__(self, runner: Callable[..., Dict[str, Any]] = run_course_import):
        self.runner = runner
        self.phase = ImportPhase.CREDENTIALS
        self.log = ImportLog()
        self.summary = {"courses": 0, "holes": 0}
        self.errors = []
        self._lock = threading.Lock()
        self._thread: Optional[threading.Thread] = None

    @property
    def is_running(self) -> bool:
        return self.phase == ImportPhase.IMPORTING

    def start(self, settings: ImportSettings, background: bool = True) -> None:
        """
        Start an import run.

        Args:
            settings: Validated settings for the run
            background: Run on a daemon thread (False runs inline)

        Raises:
            ImportAlreadyRunning: If a run is already in progress
        """
        with self._lock:
            if self.is_running:
                raise ImportAlreadyRunning("An import is already running")
            self.phase = ImportPhase.IMPORTING
            self.log = ImportLog()
            self.summary = {"courses": 0, "holes": 0}
            self.errors = []

        logger.info(f"Starting course import ({settings.max_courses_per_term} courses per term)")
        if background:
            self._thread = threading.Thread(target=self._run, args=(settings,), daemon=True)
            self._thread.start()
        else:
            self._run(settings)

    def _run(self, settings: ImportSettings) -> None:
        results = {}
        try:
            results = self.runner(settings, log=self.log)
        except Exception as e:
            self.log.error(f"Error in course import: {str(e)}")
        finally:
            with self._lock:
                self.summary = {
                    "courses": results.get("courses_added", 0),
                    "holes": results.get("holes_added", 0)
                }
                self.errors = list(results.get("errors", []))
                self.phase = ImportPhase.COMPLETE

    def wait(self, timeout: Optional[float] = None) -> None:
        """Block until the background run finishes."""
        if self._thread is not None:
            self._thread.join(timeout)

    def reset(self) -> None:
        """
        Return to credential entry and clear the feed and summary.

        Raises:
            ImportAlreadyRunning: If a run is in progress
        """
        with self._lock:
            if self.is_running:
                raise ImportAlreadyRunning("Cannot reset while an import is running")
            self.phase = ImportPhase.CREDENTIALS
            self.log = ImportLog()
            self.summary = {"courses": 0, "holes": 0}
            self.errors = []

    def snapshot(self) -> Dict[str, Any]:
        """JSON-ready view of the session for the UI."""
        with self._lock:
            return {
                "phase": self.phase.value,
                "running": self.is_running,
                "logs": self.log.lines,
                "summary": dict(self.summary),
                "errors": list(self.errors)
            }
