"""
Application state: the last event list fetched from the API.
"""

import threading
from typing import Any, Dict, Iterable, Iterator, List, Tuple

from eventboard.api_client.client import ApiResult, EventsApiClient


class EventStore:
    """
    Holds the ordered event records from the last successful list fetch.

    The collection is only ever replaced as a whole. A lock guards the swap,
    but nothing orders concurrent refreshes: the last one to finish wins.
    """

    def __init__(self, records: Iterable[Dict[str, Any]] = ()) -> None:
        self._lock = threading.Lock()
        self._events: Tuple[Dict[str, Any], ...] = tuple(dict(r) for r in records)

    def snapshot(self) -> Tuple[Dict[str, Any], ...]:
        with self._lock:
            return self._events

    def replace(self, records: Iterable[Dict[str, Any]]) -> None:
        events = tuple(dict(r) for r in records)
        with self._lock:
            self._events = events

    def refresh(self, client: EventsApiClient) -> ApiResult:
        """
        Re-fetch the list and replace the state when the fetch succeeds.

        Args:
            client (EventsApiClient): The API client to list with.

        Returns:
            ApiResult: The list result. On failure the state is untouched.
        """
        result = client.list_events()
        if result.ok:
            self.replace(result.data)
        return result

    def ids(self) -> List[Any]:
        return [event.get("id") for event in self.snapshot()]

    def __len__(self) -> int:
        return len(self.snapshot())

    def __iter__(self) -> Iterator[Dict[str, Any]]:
        return iter(self.snapshot())
