"""
Test doubles for the remote events API.
"""

import threading


BASE_URL = "https://api.test/api/test-sandbox/events/"


class FakeResponse:
    """
    Minimal stand-in for requests.Response.
    """

    def __init__(self, status_code=200, body=None, reason="OK"):
        self.status_code = status_code
        self.reason = reason
        self._body = body

    def json(self):
        if self._body is None:
            raise ValueError("No JSON body")
        return self._body


class FakeEventsApi:
    """
    In-memory version of the remote events collection.

    Behaves like a requests.Session for get/post/delete. Use fail() to make
    the next call of a method return an error response or raise.
    """

    def __init__(self, events=None, base_url=BASE_URL):
        self.base_url = base_url
        self.events = [dict(e) for e in (events or [])]
        self.calls = []
        self.failures = {}
        self._next_id = max([e["id"] for e in self.events], default=0) + 1
        self._lock = threading.Lock()

    def fail(self, method, outcome):
        self.failures[method] = outcome

    def _failure(self, method):
        outcome = self.failures.pop(method, None)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    def get(self, url, timeout=None):
        self.calls.append(("GET", url))
        failed = self._failure("GET")
        if failed is not None:
            return failed
        with self._lock:
            return FakeResponse(200, {"success": True, "data": [dict(e) for e in self.events]})

    def post(self, url, json=None, headers=None, timeout=None):
        self.calls.append(("POST", url))
        failed = self._failure("POST")
        if failed is not None:
            return failed
        with self._lock:
            created = {"id": self._next_id, **json, "cohortId": 7}
            self._next_id += 1
            self.events.append(created)
        return FakeResponse(201, {"success": True, "data": created}, reason="Created")

    def delete(self, url, timeout=None):
        self.calls.append(("DELETE", url))
        failed = self._failure("DELETE")
        if failed is not None:
            return failed
        event_id = url[len(self.base_url):]
        with self._lock:
            remaining = [e for e in self.events if str(e["id"]) != event_id]
            if len(remaining) == len(self.events):
                return FakeResponse(
                    404,
                    {"success": False, "error": {"name": "NotFoundError", "message": "Event not found"}},
                    reason="Not Found",
                )
            self.events = remaining
        return FakeResponse(204, reason="No Content")
