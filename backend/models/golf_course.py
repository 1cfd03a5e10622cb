"""
Golf course models for the Course Populator application.

This module defines the records exchanged with the Golf Course API (search
summaries and course details) and the rows written to the Supabase
``courses`` and ``course_holes`` tables.
"""
from typing import List, Optional, Union
from pydantic import BaseModel, ConfigDict, field_validator


class ApiRecord(BaseModel):
    """Base for Golf Course API payloads; unknown fields are ignored."""
    model_config = ConfigDict(extra="ignore")


class CourseSummary(ApiRecord):
    """Single entry of the ``courses`` array returned by the search endpoint."""

    id: int
    club_name: Optional[str] = None
    course_name: Optional[str] = None


class CourseLocation(ApiRecord):
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    country: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None


class HoleData(ApiRecord):
    """A hole as listed on a tee box."""

    par: Optional[int] = None
    yardage: Optional[int] = None
    handicap: Optional[int] = None


class TeeBox(ApiRecord):
    """A tee configuration with aggregate metrics and its ordered hole list."""

    tee_name: Optional[str] = None
    course_rating: Optional[float] = None
    slope_rating: Optional[Union[int, float]] = None
    bogey_rating: Optional[float] = None
    total_yards: Optional[int] = None
    par_total: Optional[int] = None
    number_of_holes: Optional[int] = None
    holes: List[HoleData] = []

    @field_validator("holes", mode="before")
    @classmethod
    def tolerate_missing_holes(cls, value):
        # A null list means no hole data; a null entry keeps its position as an empty hole
        if value is None:
            return []
        if isinstance(value, list):
            return [hole if isinstance(hole, (dict, HoleData)) else {} for hole in value]
        return value


class CourseTees(ApiRecord):
    male: Optional[List[TeeBox]] = None
    female: Optional[List[TeeBox]] = None


class CourseDetail(ApiRecord):
    """Full course payload returned by the detail endpoint."""

    id: Optional[int] = None
    club_name: Optional[str] = None
    course_name: Optional[str] = None
    location: Optional[CourseLocation] = None
    tees: Optional[CourseTees] = None

    @property
    def display_name(self) -> str:
        """Name in the ``<club> - <course>`` form used for logs and rows."""
        parts = [part.strip() for part in (self.club_name, self.course_name) if part and part.strip()]
        return " - ".join(parts)


class CourseRow(BaseModel):
    """Row for the ``courses`` table."""

    id: str
    name: str
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    country: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    total_holes: int = 18
    par: Optional[int] = None
    rating: Optional[float] = None
    slope: Optional[Union[int, float]] = None
    # Reserved for review-based scoring
    aggregate_score: Optional[float] = None
    confidence_rating: Optional[float] = None
    created_at: str
    updated_at: str

    def __repr__(self):
        return f"<CourseRow(id={self.id}, name={self.name}, holes={self.total_holes}, par={self.par})>"


class HoleRow(BaseModel):
    """Row for the ``course_holes`` table."""

    id: str
    course_id: str
    hole_number: int
    par: int = 4
    distance_yards: Optional[int] = None
    distance_meters: Optional[int] = None
    handicap_index: Optional[int] = None
    created_at: str
    updated_at: str

    def __repr__(self):
        return f"<HoleRow(id={self.id}, course_id={self.course_id}, hole_number={self.hole_number}, par={self.par})>"
