"""
Data transformation module for the Course Populator application.

This module maps Golf Course API course details onto the rows stored in the
Supabase ``courses`` and ``course_holes`` tables.
"""
import math
import uuid
import logging
from typing import Callable, List, Optional
from datetime import datetime, timezone

from backend.models.golf_course import CourseDetail, CourseRow, HoleData, HoleRow, TeeBox

# Configure logging
logger = logging.getLogger(__name__)

YARDS_TO_METERS = 0.9144
DEFAULT_TOTAL_HOLES = 18
DEFAULT_HOLE_PAR = 4


def select_main_tees(course: CourseDetail) -> List[TeeBox]:
    """
    Pick the tee list used for the course: ``male``, else ``female``, else none.

    Args:
        course: Course detail from the API

    Returns:
        List of tee boxes (possibly empty)
    """
    tees = course.tees
    if tees is None:
        return []
    if tees.male is not None:
        return tees.male
    if tees.female is not None:
        return tees.female
    return []


def select_main_tee(course: CourseDetail) -> Optional[TeeBox]:
    """Return the first tee of the main tee list, or None."""
    tees = select_main_tees(course)
    return tees[0] if tees else None


def main_tee_holes(course: CourseDetail) -> List[HoleData]:
    """Holes of the main tee, in playing order."""
    main_tee = select_main_tee(course)
    return list(main_tee.holes) if main_tee else []


def yards_to_meters(yards: Optional[float]) -> Optional[int]:
    """
    Convert a yardage to whole meters, rounding halves up.

    Returns None when the yardage is missing or zero.
    """
    if not yards:
        return None
    return int(math.floor(yards * YARDS_TO_METERS + 0.5)) or None


def _or_none(value):
    # Zero and empty values from the API mean "unknown"
    return value if value else None


def _utc_now() -> str:
    return datetime.now(timezone.utc).isoformat()


class CourseTransformer:
    """
    Transforms Golf Course API details into Supabase rows.
    """

    def __init__(self, id_factory: Optional[Callable[[], str]] = None, clock: Optional[Callable[[], str]] = None):
        """
        Initialize the transformer.

        Args:
            id_factory: Callable returning a new row id (uuid4 string by default)
            clock: Callable returning the ISO timestamp for created_at/updated_at
        """
        self.id_factory = id_factory or (lambda: str(uuid.uuid4()))
        self.clock = clock or _utc_now

    def transform_course(self, course: CourseDetail) -> CourseRow:
        """
        Build the ``courses`` row for a course.

        Aggregate fields come from the main tee; without one the course is
        assumed to have 18 holes and par, rating and slope stay empty.

        Args:
            course: Course detail from the API

        Returns:
            CourseRow with a freshly generated id
        """
        main_tee = select_main_tee(course)
        location = course.location
        now = self.clock()

        return CourseRow(
            id=self.id_factory(),
            name=course.display_name,
            address=_or_none(location.address) if location else None,
            city=_or_none(location.city) if location else None,
            state=_or_none(location.state) if location else None,
            country=_or_none(location.country) if location else None,
            latitude=_or_none(location.latitude) if location else None,
            longitude=_or_none(location.longitude) if location else None,
            total_holes=(main_tee.number_of_holes if main_tee else None) or DEFAULT_TOTAL_HOLES,
            par=_or_none(main_tee.par_total) if main_tee else None,
            rating=_or_none(main_tee.course_rating) if main_tee else None,
            slope=_or_none(main_tee.slope_rating) if main_tee else None,
            aggregate_score=None,
            confidence_rating=None,
            created_at=now,
            updated_at=now
        )

    def transform_holes(self, course_id: str, holes: List[HoleData]) -> List[HoleRow]:
        """
        Build the ``course_holes`` rows for a course.

        Args:
            course_id: Id of the already inserted course row
            holes: Holes of the main tee, in playing order

        Returns:
            One HoleRow per hole, numbered from 1
        """
        now = self.clock()
        rows = []
        for idx, hole in enumerate(holes):
            rows.append(HoleRow(
                id=self.id_factory(),
                course_id=course_id,
                hole_number=idx + 1,
                par=hole.par or DEFAULT_HOLE_PAR,
                distance_yards=_or_none(hole.yardage),
                distance_meters=yards_to_meters(hole.yardage),
                handicap_index=_or_none(hole.handicap),
                created_at=now,
                updated_at=now
            ))
        return rows
