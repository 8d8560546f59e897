"""
Event record model.
Builds outgoing event payloads from form input and normalizes their dates.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, Mapping, Optional


class InvalidEventError(ValueError):
    """Raised when form input cannot be turned into an event record."""


def normalize_date(val: Optional[str]) -> str:
    """
    Normalize a date or datetime string to ISO-8601 UTC with milliseconds.

    Accepted inputs:
    - 'YYYY-MM-DD' (midnight UTC)
    - 'YYYY-MM-DDTHH:MM[:SS]' from a datetime-local input (read as UTC)
    - any ISO-8601 value with an offset or a trailing 'Z'

    Args:
        val (str): The raw date string.

    Returns:
        str: The normalized timestamp, e.g. '2024-05-01T00:00:00.000Z'.

    Raises:
        InvalidEventError: If the value is empty or not a valid date.
    """
    if not val or not val.strip():
        raise InvalidEventError("date is required")

    raw = val.strip()
    if raw[-1] in ("Z", "z"):
        raw = raw[:-1] + "+00:00"

    try:
        dt = datetime.fromisoformat(raw)
    except (ValueError, TypeError):
        raise InvalidEventError(f"Invalid date: {val}") from None

    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    try:
        dt = dt.astimezone(timezone.utc)
    except OverflowError:
        # Offset pushes the value outside years 1..9999
        raise InvalidEventError(f"Invalid date: {val}") from None

    return dt.isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass(frozen=True)
class Event:
    """
    An event as sent to the remote API.

    The id is assigned by the API and stays None until the record is persisted.
    """

    name: str
    description: str
    date: str
    location: str
    id: Optional[Any] = None

    @classmethod
    def from_form(cls, form: Mapping[str, str]) -> "Event":
        """
        Build an event from the creation form fields.

        Args:
            form: Mapping with 'title', 'description', 'date' and 'location'.

        Returns:
            Event: A new, unsaved event with a normalized date.

        Raises:
            InvalidEventError: If the date field is missing or invalid.
        """
        return cls(
            name=(form.get("title") or "").strip(),
            description=(form.get("description") or "").strip(),
            date=normalize_date(form.get("date")),
            location=(form.get("location") or "").strip(),
        )

    def to_payload(self) -> Dict[str, Any]:
        """JSON body for a create request. The id is never sent."""
        return {
            "name": self.name,
            "description": self.description,
            "date": self.date,
            "location": self.location,
        }
