"""
Quick manual check against a locally running event board.
Tests: load the page, create an event, list events, delete it.

Start the app first:
    python -m eventboard.gateway.server
"""

import requests

BASE = "http://localhost:5050"

# 1) Load the page (fetch + render)
r = requests.get(f"{BASE}/")
print("INDEX:", r.status_code)

# 2) Submit the creation form
r = requests.post(f"{BASE}/events", data={
    "title": "Smoke Test Event",
    "description": "Simple test",
    "date": "2025-10-20",
    "location": "Room 101"
})
print("CREATE EVENT:", r.status_code, "Smoke Test Event" in r.text)

# 3) List all events
r = requests.get(f"{BASE}/events.json")
print("LIST EVENTS:", r.status_code, r.json())

# 4) Delete the event we just created
created = [e for e in r.json().get("data", []) if e.get("name") == "Smoke Test Event"]
if created:
    r = requests.post(f"{BASE}/events/{created[-1]['id']}/delete")
    print("DELETE EVENT:", r.status_code, "Smoke Test Event" not in r.text)
