"""
Storage of transformed course data in Supabase.
"""
import logging
from typing import Any, Dict, List, Optional

from supabase import Client

from backend.database.supabase_data import describe_error, insert_course, insert_course_holes
from backend.etl.course_transformer import CourseTransformer
from backend.scrapers.common import ImportLog
from backend.models.golf_course import CourseDetail, HoleData

logger = logging.getLogger(__name__)


class CourseDataStorage:
    """
    Stores course details and their holes in Supabase.

    Writes are not transactional: a course row stays in place when its holes
    fail to insert.
    """

    def __init__(self, supabase: Client, log: Optional[ImportLog] = None,
                 transformer: Optional[CourseTransformer] = None):
        self.supabase = supabase
        self.log = log or ImportLog()
        self.transformer = transformer or CourseTransformer()

    def store_course(self, course: CourseDetail) -> Optional[Dict[str, Any]]:
        """
        Insert the course row for a course detail.

        Args:
            course: Course detail from the API

        Returns:
            The inserted row, or None if the insert failed
        """
        try:
            course_row = self.transformer.transform_course(course)
            course_data = course_row.model_dump()

            self.log.add(f"Inserting course: {course_row.name}")
            try:
                inserted = insert_course(self.supabase, course_data)
            except Exception as e:
                self.log.error(f"Error inserting course: {describe_error(e)}")
                return None

            self.log.add(f"Successfully inserted course: {course_row.name} with ID: {course_row.id}")
            return inserted or course_data
        except Exception as e:
            self.log.error(f"Error in store_course: {str(e)}")
            return None

    def store_course_holes(self, course_id: str, holes: List[HoleData]) -> bool:
        """
        Bulk insert the holes of a course.

        Args:
            course_id: Id of the inserted course row
            holes: Holes of the main tee, in playing order

        Returns:
            True if the holes were inserted, False otherwise (including
            when there are no holes)
        """
        try:
            if not holes:
                self.log.add(f"No holes data available for course {course_id}")
                return False

            self.log.add(f"Preparing to insert {len(holes)} holes for course {course_id}")
            holes_data = [row.model_dump() for row in self.transformer.transform_holes(course_id, holes)]

            try:
                inserted = insert_course_holes(self.supabase, holes_data)
            except Exception as e:
                self.log.error(f"Error inserting course holes: {describe_error(e)}")
                return False

            self.log.add(f"Successfully inserted {inserted} holes for course {course_id}")
            return True
        except Exception as e:
            self.log.error(f"Error in store_course_holes: {str(e)}")
            return False
