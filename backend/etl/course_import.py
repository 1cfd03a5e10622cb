"""
Course import process for the Course Populator application.

This module searches the Golf Course API for a fixed list of well-known
courses, fetches the details of the first few results per term, and loads
them into the Supabase ``courses`` and ``course_holes`` tables.

The run is strictly sequential and waits a fixed delay after every course so
the API is not hammered. Failures are written to the import log and never
abort the run.
"""
import time
import logging
import datetime
from typing import Any, Callable, Dict, Optional, Sequence, Tuple

from backend.database.supabase_client import create_supabase
from backend.etl.course_storage import CourseDataStorage
from backend.etl.course_transformer import main_tee_holes
from backend.models.golf_course import CourseSummary
from backend.models.import_settings import ImportSettings
from backend.scrapers.common import ImportLog, setup_logger
from backend.scrapers.golf_course_api import GolfCourseAPIClient

logger = logging.getLogger(__name__)

SEARCH_TERMS = (
    'Pebble Beach', 'Augusta', 'St Andrews', 'Pinehurst',
    'Bethpage', 'Torrey Pines', 'Whistling Straits', 'Oakmont',
    'Muirfield', 'Royal Melbourne', 'TPC Sawgrass', 'Kiawah Island'
)


def configure_import_logging(log_file: Optional[str] = None) -> logging.Logger:
    """
    Send import log lines to the console and, optionally, to a log file.

    Args:
        log_file: Path of the log file (optional)

    Returns:
        Configured logger
    """
    return setup_logger(__name__, log_file=log_file)


def import_course(summary: CourseSummary, api_client: GolfCourseAPIClient,
                  storage: CourseDataStorage) -> Tuple[bool, int]:
    """
    Fetch, store and count one course from the search results.

    Args:
        summary: Course summary from the search endpoint
        api_client: Golf Course API client
        storage: Supabase storage handler

    Returns:
        Tuple of (course inserted, number of holes inserted)
    """
    course_details = api_client.get_course_details(summary.id)
    if course_details is None:
        return False, 0

    inserted_course = storage.store_course(course_details)
    if inserted_course is None:
        return False, 0

    holes = main_tee_holes(course_details)
    holes_added = 0
    if storage.store_course_holes(inserted_course["id"], holes):
        holes_added = len(holes)

    # The course counts even when its holes could not be stored
    return True, holes_added


def run_course_import(settings: ImportSettings,
                      api_client: Optional[GolfCourseAPIClient] = None,
                      storage: Optional[CourseDataStorage] = None,
                      log: Optional[ImportLog] = None,
                      sleep: Callable[[float], None] = time.sleep,
                      search_terms: Sequence[str] = SEARCH_TERMS) -> Dict[str, Any]:
    """
    Run the course import.

    Args:
        settings: Credentials, per-term cap and delay for this run
        api_client: Golf Course API client (built from settings if omitted)
        storage: Supabase storage handler (built from settings if omitted)
        log: Progress feed (a new one is created if omitted)
        sleep: Function used for the delay between courses
        search_terms: Terms to search, in order

    Returns:
        Dictionary with import results
    """
    log = log or ImportLog()
    start_time = datetime.datetime.now()
    results = {
        "start_time": start_time,
        "end_time": None,
        "terms_processed": 0,
        "courses_added": 0,
        "holes_added": 0,
        "errors": []
    }
    owns_client = api_client is None

    try:
        log.add("Starting database population process...")

        if storage is None:
            supabase = create_supabase(settings.supabase_url, settings.supabase_key)
            storage = CourseDataStorage(supabase, log=log)
        if api_client is None:
            api_client = GolfCourseAPIClient(
                settings.api_key,
                log=log,
                base_url=settings.api_base_url,
                timeout=settings.api_timeout_seconds
            )

        for term in search_terms:
            try:
                courses = api_client.search_courses(term)
            except Exception as e:
                error_msg = f"Error searching courses for \"{term}\": {str(e)}"
                log.error(error_msg)
                results["errors"].append(error_msg)
                results["terms_processed"] += 1
                continue

            # Limit to the configured number of courses per search term
            for summary in courses[:settings.max_courses_per_term]:
                try:
                    course_added, holes_added = import_course(summary, api_client, storage)
                    if course_added:
                        results["courses_added"] += 1
                        results["holes_added"] += holes_added
                except Exception as e:
                    error_msg = f"Error importing course {summary.id}: {str(e)}"
                    log.error(error_msg)
                    results["errors"].append(error_msg)

                if settings.delay_seconds > 0:
                    sleep(settings.delay_seconds)

            results["terms_processed"] += 1

        log.add("Database population complete!")
        log.add(f"Successfully added {results['courses_added']} courses with "
                f"{results['holes_added']} holes to the database")

    except Exception as e:
        error_msg = f"Error in course import: {str(e)}"
        log.error(error_msg)
        results["errors"].append(error_msg)

    finally:
        if owns_client and api_client is not None:
            api_client.close()

    # Record end time
    results["end_time"] = datetime.datetime.now()
    results["duration_seconds"] = (results["end_time"] - results["start_time"]).total_seconds()
    results["log"] = log.lines

    return results
