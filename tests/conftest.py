import pytest
from unittest.mock import MagicMock

from backend.models.import_settings import ImportSettings
from backend.scrapers.common import ImportLog


class FakeAPIError(Exception):
    """Stands in for postgrest's APIError, which carries a ``message``."""

    def __init__(self, message):
        super().__init__(message)
        self.message = message


def hole_payloads(count, par=4, yardage=400):
    return [{"par": par, "yardage": yardage, "handicap": i + 1} for i in range(count)]


def course_payload(course_id=1, club="Pebble Beach Golf Links", course="Pebble Beach", holes=18,
                   tees="male"):
    """Helper: Golf Course API detail payload with one tee under ``tees``."""
    payload = {
        "id": course_id,
        "club_name": club,
        "course_name": course,
        "location": {
            "address": "1700 17 Mile Dr, Pebble Beach, CA 93953, USA",
            "city": "Pebble Beach",
            "state": "CA",
            "country": "United States",
            "latitude": 36.5681,
            "longitude": -121.95
        },
        "tees": {}
    }
    if tees:
        payload["tees"][tees] = [{
            "tee_name": "Blue",
            "course_rating": 74.9,
            "slope_rating": 144,
            "par_total": 72,
            "number_of_holes": holes,
            "holes": hole_payloads(holes)
        }]
    return payload


def make_response(payload=None, status=200):
    response = MagicMock()
    response.ok = 200 <= status < 400
    response.status_code = status
    response.json.return_value = payload
    return response


class FakeGolfAPI:
    """
    Routes requests.Session.get calls to canned search and detail payloads.

    Args:
        searches: term -> list of course summaries, or an int status code
        details: course id -> detail payload, or an int status code
    """

    def __init__(self, searches=None, details=None):
        self.searches = searches or {}
        self.details = details or {}
        self.session = MagicMock()
        self.session.get.side_effect = self._get

    def _get(self, url, params=None, headers=None, timeout=None):
        if url.endswith("/search"):
            result = self.searches.get(params["search_query"], [])
            if isinstance(result, int):
                return make_response({"message": "error"}, status=result)
            return make_response({"courses": result})

        course_id = int(url.rsplit("/", 1)[1])
        result = self.details.get(course_id, 404)
        if isinstance(result, int):
            return make_response({"message": "not found"}, status=result)
        return make_response(result)

    def detail_calls(self):
        return [c for c in self.session.get.call_args_list if "/courses/" in c.args[0]]


class FakeSupabase:
    """MagicMock-backed Supabase client recording inserts per table."""

    def __init__(self, course_error=None, holes_error=None):
        self.client = MagicMock()
        self.inserts = {"courses": [], "course_holes": []}
        self.errors = {"courses": course_error, "course_holes": holes_error}
        self.client.table.side_effect = self._table

    def _table(self, name):
        table = MagicMock()

        def insert(rows):
            self.inserts[name].append(rows)
            query = MagicMock()
            if self.errors[name] is not None:
                query.execute.side_effect = self.errors[name]
            else:
                query.execute.return_value = MagicMock(data=list(rows))
            return query

        table.insert.side_effect = insert
        return table


@pytest.fixture
def import_log():
    return ImportLog()


@pytest.fixture
def settings():
    return ImportSettings(
        supabase_url="https://example.supabase.co",
        supabase_key="service-key",
        api_key="golf-key",
        max_courses_per_term=3,
        delay_seconds=0
    )


@pytest.fixture
def fake_supabase():
    return FakeSupabase()
