from fastapi.testclient import TestClient

from helpdesk.main import create_application
from helpdesk.services.seed import DEFAULT_TEAM_MEMBERS


def test_default_team_is_seeded_and_sorted_by_name(client):
    response = client.get("/api/team")

    assert response.status_code == 200
    names = [member["name"] for member in response.json()]
    assert names == sorted(name for name, _ in DEFAULT_TEAM_MEMBERS)
    assert all(member["open_tickets"] == 0 for member in response.json())


def test_seeding_is_skipped_when_team_exists(client, settings):
    # second startup against the same database must not duplicate members
    with TestClient(create_application(settings)) as second_client:
        assert len(second_client.get("/api/team").json()) == len(DEFAULT_TEAM_MEMBERS)


def test_create_member(client):
    response = client.post("/api/team", json={"name": "Eve Adams", "email": "eve@example.com"})

    assert response.status_code == 201
    member = response.json()
    assert member["name"] == "Eve Adams"
    assert member["email"] == "eve@example.com"
    assert member["open_tickets"] == 0


def test_create_member_requires_name_and_email(client):
    response = client.post("/api/team", json={"name": "Eve Adams"})

    assert response.status_code == 400
    assert response.json()["detail"] == "Name and email are required"


def test_duplicate_email_is_reported_distinctly(client):
    response = client.post("/api/team", json={"name": "Another John", "email": "john.smith@example.com"})

    assert response.status_code == 400
    assert response.json()["detail"] == "Email already exists"


def test_update_member_keeps_omitted_fields(client, team):
    bob = team["bob.wilson@example.com"]

    response = client.put(f"/api/team/{bob['id']}", json={"name": "Robert Wilson"})

    assert response.status_code == 200
    assert response.json()["name"] == "Robert Wilson"
    assert response.json()["email"] == "bob.wilson@example.com"


def test_update_member_to_taken_email_is_rejected(client, team):
    bob = team["bob.wilson@example.com"]

    response = client.put(f"/api/team/{bob['id']}", json={"email": "jane.doe@example.com"})

    assert response.status_code == 400
    assert response.json()["detail"] == "Email already exists"
    assert client.get(f"/api/team/{bob['id']}").json()["email"] == "bob.wilson@example.com"


def test_member_counts_only_open_tickets(client, make_ticket, team):
    jane = team["jane.doe@example.com"]
    make_ticket(assignee_id=jane["id"])
    make_ticket(assignee_id=jane["id"], status="resolved")
    make_ticket(assignee_id=jane["id"], status="closed")

    response = client.get(f"/api/team/{jane['id']}")

    assert response.status_code == 200
    assert response.json()["open_tickets"] == 2


def test_get_missing_member_returns_404(client):
    assert client.get("/api/team/9999").status_code == 404
    assert client.put("/api/team/9999", json={"name": "Nobody"}).status_code == 404
    assert client.delete("/api/team/9999").status_code == 404


def test_deleting_member_unassigns_their_tickets(client, make_ticket, team):
    alice = team["alice.johnson@example.com"]
    first = make_ticket(assignee_id=alice["id"])
    second = make_ticket(assignee_id=alice["id"], status="closed")

    response = client.delete(f"/api/team/{alice['id']}")

    assert response.status_code == 200
    assert response.json() == {"success": True}
    for ticket in (first, second):
        refreshed = client.get(f"/api/tickets/{ticket['id']}")
        assert refreshed.status_code == 200
        assert refreshed.json()["assignee_id"] is None
        assert refreshed.json()["assignee_name"] is None
