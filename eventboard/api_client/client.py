"""
HTTP client for the remote events CRUD API.
Provides list, create and delete over JSON, returning ApiResult values.

Usage:
    client = EventsApiClient("https://.../api/<sandbox>/events/")
    result = client.list_events()
    if result.ok:
        events = result.data
"""

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional
from urllib.parse import quote

import requests


DEFAULT_TIMEOUT = 10


@dataclass(frozen=True)
class ApiResult:
    """
    Outcome of one API call.

    ok is True on success. data holds the parsed payload (the event list for
    list_events). error holds a user-safe message when ok is False.
    """

    ok: bool
    data: Any = None
    error: Optional[str] = None

    @classmethod
    def success(cls, data: Any = None) -> "ApiResult":
        return cls(ok=True, data=data)

    @classmethod
    def failure(cls, message: str) -> "ApiResult":
        return cls(ok=False, error=message)


def _is_success(response: requests.Response) -> bool:
    return 200 <= response.status_code < 300


def error_message(response: requests.Response) -> str:
    """
    Extract the structured error message from a failed response.

    The API answers failures with { "error": { "message": "..." } }.
    Falls back to '<status> <reason>' when the body has no such field.

    Args:
        response (requests.Response): The non-2xx response.

    Returns:
        str: The error message.
    """
    try:
        message = response.json()["error"]["message"]
    except (ValueError, KeyError, TypeError):
        message = None

    if not message:
        return f"{response.status_code} {response.reason or ''}".strip()
    return str(message)


class EventsApiClient:
    """
    Wraps the events collection endpoint.

    No method raises on network or API failures. Failures are logged and
    returned as ApiResult.failure(...).
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.base_url = base_url if base_url.endswith("/") else base_url + "/"
        self.timeout = timeout
        self.session = session or requests.Session()

    # --- LIST ---
    def list_events(self) -> ApiResult:
        """
        Fetch every event in the collection.

        Returns:
            ApiResult: data is the list from the response's 'data' field,
                       in the order the API returned it.
        """
        try:
            response = self.session.get(self.base_url, timeout=self.timeout)
        except requests.RequestException as e:
            logging.error(f"[EventsAPI] Failed to list events: {e}")
            return ApiResult.failure("Could not reach the events service.")

        if not _is_success(response):
            message = error_message(response)
            logging.error(f"[EventsAPI] Listing events failed: {message}")
            return ApiResult.failure(message)

        try:
            events = response.json()["data"]
        except (ValueError, KeyError, TypeError) as e:
            logging.error(f"[EventsAPI] Unreadable event list response: {e}")
            return ApiResult.failure("The events service sent an unreadable response.")

        if not isinstance(events, list) or not all(isinstance(e, dict) for e in events):
            logging.error(f"[EventsAPI] Unexpected event list payload: {events!r}")
            return ApiResult.failure("The events service sent an unreadable response.")

        logging.info(f"[EventsAPI] Listed {len(events)} events")
        return ApiResult.success(events)

    # --- CREATE ---
    def create_event(self, event: Mapping[str, Any]) -> ApiResult:
        """
        Create a new event on the server.

        The id the server assigns is not returned; callers re-fetch the list.

        Args:
            event (Mapping): JSON body with name, description, date, location.

        Returns:
            ApiResult: ok on any 2xx response.
        """
        name = event.get("name")
        try:
            response = self.session.post(
                self.base_url,
                json=dict(event),
                headers={"Content-Type": "application/json"},
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logging.error(f"[EventsAPI] Failed to create event '{name}': {e}")
            return ApiResult.failure("Could not reach the events service.")

        if not _is_success(response):
            message = error_message(response)
            logging.error(f"[EventsAPI] Creating event '{name}' failed: {message}")
            return ApiResult.failure(message)

        logging.info(f"[EventsAPI] Created event '{name}'")
        return ApiResult.success()

    # --- DELETE ---
    def delete_event(self, event_id: Any) -> ApiResult:
        """
        Delete an event by its id.

        Args:
            event_id: The id assigned by the API.

        Returns:
            ApiResult: ok on any 2xx response.
        """
        url = self.base_url + quote(str(event_id), safe="")
        try:
            response = self.session.delete(url, timeout=self.timeout)
        except requests.RequestException as e:
            logging.error(f"[EventsAPI] Failed to delete event {event_id}: {e}")
            return ApiResult.failure("Could not reach the events service.")

        if not _is_success(response):
            message = error_message(response)
            logging.error(f"[EventsAPI] Deleting event {event_id} failed: {message}")
            return ApiResult.failure(message)

        logging.info(f"[EventsAPI] Deleted event {event_id}")
        return ApiResult.success()
