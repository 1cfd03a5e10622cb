"""
Supabase data access module for the Course Populator application.

This module provides the table operations used by the course import. Errors
raised by the Supabase client are left to the caller, which decides how a
failed write affects the rest of the import.
"""
import logging
from typing import Any, Dict, List, Optional

from supabase import Client

# Configure logging
logger = logging.getLogger(__name__)

COURSES_TABLE = 'courses'
COURSE_HOLES_TABLE = 'course_holes'


def describe_error(error: Exception) -> str:
    """
    Get a readable message for a Supabase/PostgREST error.

    Args:
        error: Exception raised by the client

    Returns:
        The API error message when there is one, otherwise str(error)
    """
    message = getattr(error, 'message', None)
    return message if message else str(error)


def insert_course(supabase: Client, course_data: Dict[str, Any]) -> Optional[Dict[str, Any]]:
    """
    Insert a course row.

    Args:
        supabase: Supabase client
        course_data: Row for the courses table

    Returns:
        The inserted row as returned by Supabase, or None when the
        project does not return inserted rows
    """
    response = supabase.table(COURSES_TABLE) \
        .insert([course_data]) \
        .execute()

    return response.data[0] if response.data else None


def insert_course_holes(supabase: Client, holes_data: List[Dict[str, Any]]) -> int:
    """
    Bulk insert hole rows.

    Args:
        supabase: Supabase client
        holes_data: Rows for the course_holes table

    Returns:
        Number of rows sent
    """
    supabase.table(COURSE_HOLES_TABLE) \
        .insert(holes_data) \
        .execute()

    return len(holes_data)
