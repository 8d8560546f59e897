import pytest

from eventboard.api_client.client import EventsApiClient
from eventboard.events_service.store import EventStore
from eventboard.gateway.server import create_app
from eventboard.tests.fakes import BASE_URL, FakeEventsApi


@pytest.fixture
def sample_events():
    return [
        {
            "id": 1,
            "name": "Launch Party",
            "description": "Drinks on the roof",
            "date": "2024-04-12T18:00:00.000Z",
            "location": "Rooftop",
            "cohortId": 7,
        },
        {
            "id": 2,
            "name": "Book Club",
            "description": "Chapter 3",
            "date": "2024-04-20T17:30:00.000Z",
            "location": "Library",
            "cohortId": 7,
        },
    ]


@pytest.fixture
def fake_api(sample_events):
    return FakeEventsApi(sample_events)


@pytest.fixture
def api_client(fake_api):
    return EventsApiClient(BASE_URL, session=fake_api)


@pytest.fixture
def store():
    return EventStore()


@pytest.fixture
def app(fake_api):
    app = create_app({
        "TESTING": True,
        "EVENTS_API_URL": BASE_URL,
        "EVENTS_API_SESSION": fake_api,
    })
    return app


@pytest.fixture
def client(app):
    return app.test_client()
