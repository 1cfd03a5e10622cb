"""
Golf Course API client for the Course Populator application.

This module wraps the two Golf Course API endpoints used by the import job:
course search by free-text term and course detail lookup by id. Neither call
raises; failures are written to the import log and reported as an empty
result.
"""
import logging
from typing import List, Optional

import requests
from pydantic import ValidationError

from .common import ImportLog
from backend.models.golf_course import CourseSummary, CourseDetail

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.golfcourseapi.com/v1"


class GolfCourseAPIError(Exception):
    """Raised internally when the API answers with a non-success status."""


class GolfCourseAPIClient:
    """
    Client for the Golf Course API.

    Args:
        api_key: Golf Course API key, sent as ``Authorization: Key <api_key>``
        log: Progress feed receiving one line per step
        base_url: API root, without trailing slash
        timeout: Per-request timeout in seconds
        session: Optional requests session (mainly for tests)
    """

    def __init__(self, api_key: str, log: Optional[ImportLog] = None, base_url: str = DEFAULT_BASE_URL,
                 timeout: float = 30.0, session: Optional[requests.Session] = None):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.log = log or ImportLog()
        self.session = session or requests.Session()

    @property
    def headers(self):
        return {"Authorization": f"Key {self.api_key}"}

    def _get_json(self, path: str, params=None):
        response = self.session.get(
            f"{self.base_url}{path}",
            params=params,
            headers=self.headers,
            timeout=self.timeout
        )
        if not response.ok:
            raise GolfCourseAPIError(f"API responded with status: {response.status_code}")
        return response.json()

    def search_courses(self, search_query: str) -> List[CourseSummary]:
        """
        Search courses matching a term.

        Args:
            search_query: Free-text search term

        Returns:
            Course summaries in API order, or an empty list on failure
        """
        self.log.add(f'Searching for courses with term: "{search_query}"...')

        try:
            data = self._get_json("/search", params={"search_query": search_query})
        except (requests.RequestException, GolfCourseAPIError, ValueError) as e:
            self.log.error(f"Error searching courses: {str(e)}")
            return []

        raw_courses = data.get("courses") if isinstance(data, dict) else None
        courses = []
        for raw in raw_courses or []:
            try:
                courses.append(CourseSummary.model_validate(raw))
            except ValidationError as e:
                self.log.warning(f"Skipping invalid course summary for \"{search_query}\": {e.errors()[0]['msg']}")

        self.log.add(f'Found {len(raw_courses or [])} courses for "{search_query}"')
        return courses

    def get_course_details(self, course_id: int) -> Optional[CourseDetail]:
        """
        Fetch the full record of a course.

        Args:
            course_id: Golf Course API course id

        Returns:
            CourseDetail or None on failure
        """
        self.log.add(f"Fetching details for course ID: {course_id}...")

        try:
            data = self._get_json(f"/courses/{course_id}")
            # Detail responses may wrap the record in a "course" key
            if isinstance(data, dict) and isinstance(data.get("course"), dict):
                data = data["course"]
            details = CourseDetail.model_validate(data)
        except (requests.RequestException, GolfCourseAPIError, ValueError) as e:
            # pydantic's ValidationError is a ValueError
            self.log.error(f"Error fetching details for course {course_id}: {str(e)}")
            return None

        self.log.add(f"Successfully fetched details for {details.display_name}")
        return details

    def close(self) -> None:
        self.session.close()
