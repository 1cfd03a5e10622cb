"""
Data source package for the Course Populator application.

This package contains the client for the Golf Course API and the shared
logging helpers used by the import job.
"""
from .golf_course_api import GolfCourseAPIClient, GolfCourseAPIError

__all__ = ['GolfCourseAPIClient', 'GolfCourseAPIError']
