"""
ETL (Extract, Transform, Load) package for the Course Populator application.

This package contains modules for extracting course data from the Golf Course
API, transforming it to the Supabase schema, and loading it into the database.
"""
from backend.etl.course_import import run_course_import, SEARCH_TERMS
from backend.etl.course_transformer import CourseTransformer
from backend.etl.course_storage import CourseDataStorage
from backend.scrapers.common import ImportLog

__all__ = ['run_course_import', 'SEARCH_TERMS', 'CourseTransformer', 'CourseDataStorage', 'ImportLog']
