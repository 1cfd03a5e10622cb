"""
Models package for the Course Populator application.

This package contains the pydantic records for Golf Course API payloads,
the Supabase rows built from them, and the import run settings.
"""

from .golf_course import (
    CourseSummary, CourseLocation, HoleData, TeeBox, CourseTees,
    CourseDetail, CourseRow, HoleRow
)
from .import_settings import ImportSettings, MAX_COURSES_CHOICES

__all__ = [
    'CourseSummary', 'CourseLocation', 'HoleData', 'TeeBox', 'CourseTees',
    'CourseDetail', 'CourseRow', 'HoleRow', 'ImportSettings', 'MAX_COURSES_CHOICES'
]
