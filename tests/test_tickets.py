from datetime import datetime

from pydantic import TypeAdapter
from sqlmodel import select

from helpdesk.models import Note

parse_timestamp = TypeAdapter(datetime).validate_python


def test_create_ticket_applies_defaults(client):
    response = client.post(
        "/api/tickets",
        json={"title": "VPN drops", "reporter_name": "Sam", "description": "Every hour"},
    )

    assert response.status_code == 201
    ticket = response.json()
    assert ticket["status"] == "new"
    assert ticket["priority"] == "medium"
    assert ticket["category"] == "software"
    assert ticket["assignee_id"] is None
    assert ticket["description"] == "Every hour"
    assert parse_timestamp(ticket["updated_at"]) >= parse_timestamp(ticket["created_at"])


def test_create_ticket_requires_title_and_reporter(client):
    missing_title = client.post("/api/tickets", json={"reporter_name": "Sam"})
    missing_reporter = client.post("/api/tickets", json={"title": "No mouse"})
    blank_title = client.post("/api/tickets", json={"title": "   ", "reporter_name": "Sam"})

    for response in (missing_title, missing_reporter, blank_title):
        assert response.status_code == 400
        assert response.json()["detail"] == "Title and reporter name are required"

    assert client.get("/api/tickets").json() == []


def test_create_ticket_rejects_unknown_enum_value(client):
    response = client.post(
        "/api/tickets",
        json={"title": "Laptop", "reporter_name": "Sam", "priority": "critical"},
    )

    assert response.status_code == 400
    assert "priority" in response.json()["detail"]


def test_create_ticket_with_unknown_assignee_is_rejected(client):
    response = client.post(
        "/api/tickets",
        json={"title": "Laptop", "reporter_name": "Sam", "assignee_id": 9999},
    )

    assert response.status_code == 400
    assert response.json()["detail"] == "Assignee not found"


def test_get_ticket_includes_assignee_notes_and_attachments(client, make_ticket, team):
    member = team["jane.doe@example.com"]
    ticket = make_ticket(assignee_id=member["id"])
    client.post(f"/api/tickets/{ticket['id']}/notes", json={"author_name": "Jane", "content": "first"})
    client.post(f"/api/tickets/{ticket['id']}/notes", json={"author_name": "Jane", "content": "second"})

    response = client.get(f"/api/tickets/{ticket['id']}")

    assert response.status_code == 200
    detail = response.json()
    assert detail["assignee_name"] == "Jane Doe"
    assert detail["assignee_email"] == "jane.doe@example.com"
    assert [note["content"] for note in detail["notes"]] == ["first", "second"]
    assert detail["attachments"] == []


def test_get_missing_ticket_returns_404(client):
    response = client.get("/api/tickets/424242")

    assert response.status_code == 404
    assert response.json() == {"detail": "Ticket not found"}


def test_update_preserves_omitted_fields(client, make_ticket):
    ticket = make_ticket(description="Paper stuck", priority="high", category="hardware")

    response = client.put(f"/api/tickets/{ticket['id']}", json={"status": "in_progress"})

    assert response.status_code == 200
    updated = response.json()
    assert updated["status"] == "in_progress"
    assert updated["title"] == ticket["title"]
    assert updated["description"] == "Paper stuck"
    assert updated["reporter_name"] == ticket["reporter_name"]
    assert updated["priority"] == "high"
    assert updated["category"] == "hardware"
    assert parse_timestamp(updated["updated_at"]) >= parse_timestamp(ticket["updated_at"])


def test_update_treats_null_as_absent_for_regular_fields(client, make_ticket):
    ticket = make_ticket(description="Keep me")

    response = client.put(f"/api/tickets/{ticket['id']}", json={"description": None, "title": None})

    assert response.status_code == 200
    assert response.json()["description"] == "Keep me"
    assert response.json()["title"] == ticket["title"]


def test_update_without_assignee_key_unassigns_ticket(client, make_ticket, team):
    member = team["bob.wilson@example.com"]
    ticket = make_ticket(assignee_id=member["id"])
    assert ticket["assignee_id"] == member["id"]

    response = client.put(f"/api/tickets/{ticket['id']}", json={"priority": "urgent"})

    assert response.status_code == 200
    updated = response.json()
    assert updated["priority"] == "urgent"
    assert updated["assignee_id"] is None
    assert updated["assignee_name"] is None


def test_update_with_explicit_assignee_sets_it(client, make_ticket, team):
    member = team["alice.johnson@example.com"]
    ticket = make_ticket()

    assigned = client.put(f"/api/tickets/{ticket['id']}", json={"assignee_id": member["id"]})
    cleared = client.put(f"/api/tickets/{ticket['id']}", json={"assignee_id": None})

    assert assigned.json()["assignee_id"] == member["id"]
    assert assigned.json()["assignee_name"] == "Alice Johnson"
    assert cleared.json()["assignee_id"] is None


def test_update_rejects_blank_title(client, make_ticket):
    ticket = make_ticket()

    response = client.put(f"/api/tickets/{ticket['id']}", json={"title": ""})

    assert response.status_code == 400


def test_update_missing_ticket_returns_404(client):
    response = client.put("/api/tickets/31337", json={"title": "Ghost"})

    assert response.status_code == 404


def test_delete_ticket_removes_notes(client, make_ticket, session):
    ticket = make_ticket()
    client.post(f"/api/tickets/{ticket['id']}/notes", json={"author_name": "Kim", "content": "on it"})

    response = client.delete(f"/api/tickets/{ticket['id']}")

    assert response.status_code == 200
    assert response.json() == {"success": True}
    assert client.get(f"/api/tickets/{ticket['id']}").status_code == 404
    assert session.exec(select(Note).where(Note.ticket_id == ticket["id"])).all() == []


def test_delete_missing_ticket_returns_404(client):
    assert client.delete("/api/tickets/999").status_code == 404
