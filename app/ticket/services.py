# app/ticket/services.py
from __future__ import annotations

import logging
import threading
from typing import Any, Iterable

from pydantic import ValidationError as PydanticValidationError

from app.ticket.exceptions import NotFound, ValidationError
from app.ticket.models import Ticket
from app.ticket.schemas import TicketUpdate

logger = logging.getLogger(__name__)

CREATE_OPERATION = "createTicket"


def _require_id(ticket_id: str | None) -> str:
    if not isinstance(ticket_id, str) or not ticket_id.strip():
        raise ValidationError("Id is required", field="id")
    return ticket_id


def _translate(exc: PydanticValidationError) -> ValidationError:
    error = exc.errors()[0]
    field = str(error["loc"][0]) if error["loc"] else None
    if error["type"] == "extra_forbidden":
        return ValidationError(f"Unknown field: {field}", field=field)
    if error["type"] == "status_format":
        return ValidationError(error["msg"], field=field)
    return ValidationError(f"Invalid {field}: {error['msg']}", field=field)


class TicketCollection:
    """In-memory ticket store with a redacted short view.

    Full tickets live in one insertion-ordered dict keyed by id. The short
    view is projected from it on every read, so both views always agree.
    All access goes through one lock; mutations never expose a partial state.
    """

    def __init__(self, tickets: Iterable[Ticket] = (), require_operation_tag: bool = False):
        self._lock = threading.Lock()
        self._tickets: dict[str, Ticket] = {}
        self.require_operation_tag = require_operation_tag
        for ticket in tickets:
            if ticket.id in self._tickets:
                raise ValidationError(f"Duplicate ticket id: {ticket.id}", field="id")
            self._tickets[ticket.id] = ticket

    def __len__(self) -> int:
        with self._lock:
            return len(self._tickets)

    def __contains__(self, ticket_id: object) -> bool:
        with self._lock:
            return ticket_id in self._tickets

    @property
    def count(self) -> int:
        return len(self)

    def _short_view(self) -> list[dict[str, Any]]:
        return [ticket.short() for ticket in self._tickets.values()]

    def list(self) -> list[dict[str, Any]]:
        with self._lock:
            return self._short_view()

    def get_full(self, ticket_id: str | None) -> Ticket:
        ticket_id = _require_id(ticket_id)
        with self._lock:
            ticket = self._tickets.get(ticket_id)
        if ticket is None:
            raise NotFound("Ticket not found", ticket_id=ticket_id)
        return ticket

    def get_description(self, ticket_id: str | None) -> str:
        return self.get_full(ticket_id).description

    def create(self, name: Any, description: Any, method: str | None = None) -> list[dict[str, Any]]:
        """Add a ticket and return the updated short view.

        ``method`` is the operation tag a generic request body may carry. When
        present it must be ``createTicket``; it is mandatory only when the
        collection was built with ``require_operation_tag``.
        """
        if method is None and self.require_operation_tag:
            raise ValidationError("Invalid method", field="method")
        if method is not None and method != CREATE_OPERATION:
            raise ValidationError("Invalid method", field="method")

        ticket = Ticket.create(name, description)
        with self._lock:
            self._tickets[ticket.id] = ticket
            logger.info("Ticket %s created", ticket.id)
            return self._short_view()

    def update(self, ticket_id: str | None, changes: Any) -> list[dict[str, Any]]:
        """Merge ``changes`` into the ticket; an unknown id changes nothing."""
        ticket_id = _require_id(ticket_id)
        if not isinstance(changes, dict):
            raise ValidationError("Invalid request body")
        try:
            payload = TicketUpdate.model_validate(changes)
        except PydanticValidationError as exc:
            raise _translate(exc) from exc

        with self._lock:
            ticket = self._tickets.get(ticket_id)
            if ticket is None:
                logger.debug("Update skipped, ticket %s not found", ticket_id)
                return self._short_view()
            self._tickets[ticket_id] = ticket.merge(payload.model_dump(exclude_unset=True))
            logger.info("Ticket %s updated", ticket_id)
            return self._short_view()

    def delete(self, ticket_id: str | None) -> list[dict[str, Any]]:
        ticket_id = _require_id(ticket_id)
        with self._lock:
            if self._tickets.pop(ticket_id, None) is None:
                logger.debug("Delete skipped, ticket %s not found", ticket_id)
            else:
                logger.info("Ticket %s deleted", ticket_id)
            return self._short_view()
