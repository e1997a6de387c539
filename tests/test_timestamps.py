from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient
from pydantic import TypeAdapter
from sqlalchemy import event, inspect
from sqlmodel import Session

from helpdesk.models import Note, TeamMember, Ticket
from helpdesk.schemas import TicketRead

TIMESTAMP_FIELDS = ("created_at", "updated_at")
parse_timestamp = TypeAdapter(datetime).validate_python


@pytest.fixture
def naive_writes():
    """Collects every naive datetime flushed to the database while active."""
    offenders = []

    def check(session, flush_context, instances):
        for obj in list(session.new) + list(session.dirty):
            state = inspect(obj)
            for name in TIMESTAMP_FIELDS:
                if name not in state.attrs:
                    continue
                for value in state.attrs[name].history.added:
                    if isinstance(value, datetime) and value.tzinfo is None:
                        offenders.append((type(obj).__name__, name))

    event.listen(Session, "before_flush", check)
    yield offenders
    event.remove(Session, "before_flush", check)


def test_model_defaults_are_timezone_aware():
    ticket = Ticket(title="Laptop", reporter_name="Dana")

    assert ticket.created_at.tzinfo is not None
    assert ticket.updated_at.utcoffset() == timedelta(0)
    assert Note(ticket_id=1, author_name="Jane", content="x").created_at.tzinfo is not None
    assert TeamMember(name="Kim", email="kim@example.com").created_at.tzinfo is not None


def test_touch_sets_aware_timestamp():
    ticket = Ticket(title="Laptop", reporter_name="Dana")
    ticket.updated_at = datetime(2020, 1, 1, tzinfo=timezone.utc)

    ticket.touch()

    assert ticket.updated_at.tzinfo is not None
    assert ticket.updated_at > datetime(2020, 1, 1, tzinfo=timezone.utc)


def test_writes_only_store_aware_timestamps(naive_writes, app):
    with TestClient(app) as client:
        ticket = client.post("/api/tickets", json={"title": "VPN down", "reporter_name": "Dana"}).json()
        client.put(f"/api/tickets/{ticket['id']}", json={"status": "in_progress"})
        client.post(f"/api/tickets/{ticket['id']}/notes", json={"author_name": "Jane", "content": "Looking"})
        attachment = client.post(
            f"/api/tickets/{ticket['id']}/attachments",
            files={"file": ("vpn.log", b"timeout", "text/plain")},
        ).json()
        client.delete(f"/api/attachments/{attachment['id']}")
        client.post("/api/team", json={"name": "Kim", "email": "kim@example.com"})

    assert naive_writes == []


def test_api_timestamps_carry_utc_offset(client, make_ticket):
    ticket = make_ticket()

    fetched = client.get(f"/api/tickets/{ticket['id']}").json()

    for payload in (ticket, fetched):
        for name in TIMESTAMP_FIELDS:
            assert parse_timestamp(payload[name]).utcoffset() == timedelta(0)


def test_read_schema_treats_naive_values_as_utc():
    naive = datetime(2024, 5, 1, 12, 30)

    ticket = TicketRead(
        id=1,
        title="Laptop",
        reporter_name="Dana",
        status="new",
        priority="medium",
        category="software",
        created_at=naive,
        updated_at=naive,
    )

    assert ticket.created_at == naive.replace(tzinfo=timezone.utc)
