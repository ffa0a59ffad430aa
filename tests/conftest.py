"""Shared fixtures: fake HTTP sessions, an in-memory backend, and src on sys.path."""

import json
import sys
from pathlib import Path

import pytest
import requests

_root = Path(__file__).resolve().parents[1]
_src = _root / "src"
if _src.is_dir() and str(_src) not in sys.path:
    sys.path.insert(0, str(_src))

from pos_client.services.api import ApiClient  # noqa: E402
from pos_client.services.errors import FetchError, SaveError  # noqa: E402

BASE_URL = "http://pos.test/api"


def make_response(status_code=200, body=None, reason="OK", url=BASE_URL):
    """Build a real requests.Response carrying a JSON body (or no body when body is None)."""
    response = requests.Response()
    response.status_code = status_code
    response.reason = reason
    response.url = url
    response._content = b"" if body is None else json.dumps(body).encode("utf-8")
    response.encoding = "utf-8"
    return response


class FakeSession:
    """Stands in for requests.Session: replays queued responses and records every call.

    Queued entries may be Response objects or exceptions to raise.
    """

    def __init__(self, *outcomes):
        self.outcomes = list(outcomes)
        self.calls = []

    def request(self, method, url, **kwargs):
        self.calls.append({"method": method, "url": url, **kwargs})
        outcome = self.outcomes.pop(0) if len(self.outcomes) > 1 else self.outcomes[0]
        if isinstance(outcome, BaseException):
            raise outcome
        return outcome


class RoutingSession:
    """requests.Session stand-in that answers by (method, url).

    Routes map to a Response or an exception to raise. Unrouted GETs are 404,
    unrouted writes echo the JSON body back with 201.
    """

    def __init__(self, routes=None):
        self.routes = dict(routes or {})
        self.calls = []

    def request(self, method, url, **kwargs):
        self.calls.append({"method": method, "url": url, **kwargs})
        outcome = self.routes.get((method, url))
        if outcome is None:
            if method == "GET":
                return make_response(404, {"error": "not found"}, reason="Not Found", url=url)
            return make_response(201, kwargs.get("json"), reason="Created", url=url)
        if isinstance(outcome, BaseException):
            raise outcome
        return outcome

    def writes(self):
        return [call for call in self.calls if call["method"] != "GET"]


def routed_client(routes, sleep=None):
    """ApiClient on BASE_URL backed by a RoutingSession; returns (client, session)."""
    session = RoutingSession(routes)
    client = ApiClient(base_url=BASE_URL, timeout=3, session=session, sleep=sleep or (lambda _: None))
    return client, session


def collection_routes(**tables):
    """GET routes answering each named collection with its rows as JSON."""
    return {("GET", f"{BASE_URL}/{name}"): make_response(200, rows) for name, rows in tables.items()}


class FakeBackend:
    """In-memory stand-in for ApiClient used by the bootstrap tests.

    Tables missing from `tables` (or listed in `unavailable`) fail with FetchError.
    """

    def __init__(self, tables=None, unavailable=(), failing_saves=()):
        self.tables = {name: list(rows) for name, rows in (tables or {}).items()}
        self.unavailable = set(unavailable)
        self.failing_saves = set(failing_saves)
        self.fetches = []
        self.saves = []

    def get_all(self, table):
        self.fetches.append(table)
        if table in self.unavailable or table not in self.tables:
            raise FetchError(table, status=404, message="Not Found")
        return json.loads(json.dumps(self.tables[table]))

    def save(self, table, items, retries=2):
        if table in self.failing_saves:
            raise SaveError(table, status=500, message="Internal Server Error")
        self.saves.append((table, json.loads(json.dumps(items))))
        self.tables[table] = json.loads(json.dumps(items))
        return items


@pytest.fixture
def sleeps():
    """Collects the delays ApiClient asks to sleep for."""
    return []


@pytest.fixture
def make_client(sleeps):
    """Factory: ApiClient wired to a FakeSession replaying the given outcomes."""

    def _make(*outcomes):
        session = FakeSession(*outcomes)
        client = ApiClient(base_url=BASE_URL, timeout=3, session=session, sleep=sleeps.append)
        return client, session

    return _make


@pytest.fixture
def empty_backend():
    return FakeBackend(
        tables={
            "menu_items": [],
            "orders": [],
            "transactions": [],
            "waiters": [],
            "cash_closures": [],
            "config": [],
        }
    )
