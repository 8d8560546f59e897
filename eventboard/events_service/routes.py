"""
Events view routes: render the event list, create events, delete events.
Every mutation is followed by a full re-fetch and re-render.
"""

import logging
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

from flask import Blueprint, Response, current_app, jsonify, render_template, request

from eventboard.api_client.client import EventsApiClient
from eventboard.events_service.models import Event, InvalidEventError
from eventboard.events_service.store import EventStore

events_bp = Blueprint("events", __name__, template_folder="templates")


def get_services() -> Tuple[EventsApiClient, EventStore]:
    """
    Return the API client and state store attached to the current app.
    """
    services = current_app.extensions["eventboard"]
    return services["client"], services["store"]


# --- REQUEST LOGGING ---
@events_bp.before_request
def before_request() -> None:
    logging.info(f"[Events] Incoming {request.method} {request.path}")


@events_bp.after_request
def after_request(response: Response) -> Response:
    logging.info(f"[Events] Response {response.status}")
    return response


# --- RENDER ---
def render(
    events: Sequence[Dict[str, Any]],
    errors: Optional[List[str]] = None,
    form: Optional[Mapping[str, str]] = None,
) -> str:
    """
    Render the whole page from a state snapshot.

    The list is rebuilt from scratch on every call, so the output depends
    only on the arguments.

    Args:
        events: The records to show, in display order.
        errors: Messages for the error banner, if any step failed.
        form: Values to put back into the creation form.

    Returns:
        str: The rendered HTML page.
    """
    return render_template(
        "index.html",
        events=events,
        errors=errors or [],
        form=form or {},
    )


def refresh_and_render(errors: List[str], form: Optional[Mapping[str, str]] = None) -> str:
    """
    Re-fetch the event list, then render whatever the state holds.

    A failed fetch leaves the previous state in place and adds its message
    to the banner.
    """
    client, store = get_services()
    result = store.refresh(client)
    if not result.ok:
        errors.append(result.error)
    return render(store.snapshot(), errors=errors, form=form)


# --- LIST ---
@events_bp.route("/", methods=["GET"])
def index() -> str:
    """
    Initial page load: fetch the events and render them.
    """
    return refresh_and_render([])


@events_bp.route("/events.json", methods=["GET"])
def list_events() -> Tuple[Response, int]:
    """
    Return the freshly fetched state as JSON.

    Returns:
        200: { "data": [...] } with the current state.
        502: { "error": "...", "data": [...] } when the fetch failed;
             data is the last state that was fetched successfully.
    """
    client, store = get_services()
    result = store.refresh(client)
    events = list(store.snapshot())
    if not result.ok:
        return jsonify({"error": result.error, "data": events}), 502
    return jsonify({"data": events}), 200


# --- CREATE ---
@events_bp.route("/events", methods=["POST"])
def create_event() -> str:
    """
    Handle the creation form.

    Form fields: title, description, date, location.
    The date is normalized before the event is sent. When the form is
    invalid the create call is skipped, but the list is still refreshed.
    """
    client, _ = get_services()
    errors: List[str] = []

    try:
        event = Event.from_form(request.form)
    except InvalidEventError as e:
        logging.error(f"[Events] Rejected form submission: {e}")
        errors.append(str(e))
    else:
        result = client.create_event(event.to_payload())
        if not result.ok:
            errors.append(result.error)

    # Keep what the user typed only when something went wrong
    return refresh_and_render(errors, form=request.form if errors else None)


# --- DELETE ---
@events_bp.route("/events/<event_id>/delete", methods=["POST"])
def delete_event(event_id: str) -> str:
    """
    Delete one event, then refresh and re-render the list.
    """
    client, _ = get_services()
    errors: List[str] = []

    result = client.delete_event(event_id)
    if not result.ok:
        errors.append(result.error)

    return refresh_and_render(errors)
