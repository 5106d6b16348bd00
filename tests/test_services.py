# tests/test_services.py
import threading

import pytest

from app.ticket.exceptions import NotFound, ValidationError
from app.ticket.models import Ticket
from app.ticket.seed import fake_tickets
from app.ticket.services import TicketCollection


@pytest.fixture
def tickets():
    return TicketCollection()


def test_create_appends_short_ticket(tickets):
    items = tickets.create("A", "B")
    assert len(items) == 1
    assert "description" not in items[0]
    assert items[0]["status"] is False
    assert tickets.get_full(items[0]["id"]).description == "B"


def test_list_keeps_insertion_order(tickets):
    for name in ("first", "second", "third"):
        tickets.create(name, "text")
    assert [t["name"] for t in tickets.list()] == ["first", "second", "third"]


@pytest.mark.parametrize("name, description", [("", "B"), ("A", ""), (None, "B"), ("A", None), (1, "B")])
def test_create_requires_name_and_description(tickets, name, description):
    with pytest.raises(ValidationError, match="Name and description are required"):
        tickets.create(name, description)
    assert len(tickets) == 0


def test_create_checks_operation_tag(tickets):
    tickets.create("A", "B", method="createTicket")
    with pytest.raises(ValidationError, match="Invalid method"):
        tickets.create("A", "B", method="updateTicket")
    assert len(tickets) == 1


def test_required_operation_tag():
    strict = TicketCollection(require_operation_tag=True)
    with pytest.raises(ValidationError):
        strict.create("A", "B")
    assert strict.create("A", "B", method="createTicket")


def test_update_status_changes_both_views(tickets):
    tid = tickets.create("A", "B")[0]["id"]
    before = tickets.get_full(tid)

    items = tickets.update(tid, {"status": True})

    after = tickets.get_full(tid)
    assert items[0]["status"] is True
    assert after.status is True
    assert after.id == before.id
    assert after.created_at == before.created_at
    assert after.name == before.name
    assert after.description == before.description


def test_update_parses_status_string(tickets):
    tid = tickets.create("A", "B")[0]["id"]
    tickets.update(tid, {"status": "true"})
    assert tickets.get_full(tid).status is True
    tickets.update(tid, {"status": "false"})
    assert tickets.get_full(tid).status is False


@pytest.mark.parametrize("status", ["True", "1", "yes", 0, None, [True]])
def test_update_rejects_malformed_status(tickets, status):
    tid = tickets.create("A", "B")[0]["id"]
    with pytest.raises(ValidationError, match="Status must be true or false"):
        tickets.update(tid, {"status": status})
    assert tickets.get_full(tid).status is False


@pytest.mark.parametrize("changes", [{"id": "x"}, {"createdAt": "now"}, {"priority": "high"}])
def test_update_rejects_unknown_fields(tickets, changes):
    tid = tickets.create("A", "B")[0]["id"]
    with pytest.raises(ValidationError, match="Unknown field"):
        tickets.update(tid, changes)


@pytest.mark.parametrize("changes", [{"name": ""}, {"description": "  "}, {"name": None}])
def test_update_rejects_empty_text(tickets, changes):
    tid = tickets.create("A", "B")[0]["id"]
    with pytest.raises(ValidationError):
        tickets.update(tid, changes)
    assert tickets.get_full(tid).name == "A"


def test_update_unknown_id_is_noop(tickets):
    tickets.create("A", "B")
    before = tickets.list()
    assert tickets.update("missing", {"status": True}) == before


@pytest.mark.parametrize("ticket_id", ["", "   ", None])
def test_blank_id_is_rejected(tickets, ticket_id):
    with pytest.raises(ValidationError, match="Id is required"):
        tickets.update(ticket_id, {"status": True})
    with pytest.raises(ValidationError, match="Id is required"):
        tickets.delete(ticket_id)
    with pytest.raises(ValidationError, match="Id is required"):
        tickets.get_full(ticket_id)


def test_delete_twice_is_idempotent(tickets):
    tid = tickets.create("A", "B")[0]["id"]
    tickets.create("C", "D")
    assert len(tickets.delete(tid)) == 1
    assert len(tickets.delete(tid)) == 1
    assert tid not in tickets


def test_get_full_after_delete_raises_not_found(tickets):
    tid = tickets.create("A", "B")[0]["id"]
    tickets.delete(tid)
    with pytest.raises(NotFound) as exc_info:
        tickets.get_full(tid)
    assert exc_info.value.to_dict() == {"error": "NOT_FOUND", "message": "Ticket not found", "ticket_id": tid}


def test_get_description(tickets):
    tid = tickets.create("Printer broken", "Floor 3")[0]["id"]
    assert tickets.get_description(tid) == "Floor 3"


def test_seeded_collection():
    seeded = TicketCollection(fake_tickets())
    items = seeded.list()
    assert len(items) == 3
    assert [t["status"] for t in items] == [False, True, False]
    assert all("description" not in t for t in items)


def test_duplicate_seed_ids_are_rejected():
    ticket = Ticket.create("A", "B")
    with pytest.raises(ValidationError, match="Duplicate ticket id"):
        TicketCollection([ticket, ticket])


def test_concurrent_creates_keep_views_consistent(tickets):
    def worker():
        for i in range(50):
            tickets.create(f"ticket {i}", "text")

    threads = [threading.Thread(target=worker) for _ in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    items = tickets.list()
    assert len(items) == tickets.count == 200
    assert len({t["id"] for t in items}) == 200


def test_scenario(tickets):
    items = tickets.create("Printer broken", "Floor 3")
    assert len(items) == 1
    assert set(items[0]) == {"id", "name", "created_at", "status"}
    tid = items[0]["id"]

    assert tickets.update(tid, {"status": True})[0]["status"] is True
    assert tickets.delete(tid) == []
    assert tickets.list() == []
