# app/ticket/models.py
import uuid
from dataclasses import asdict, dataclass, field, replace
from datetime import datetime, timezone
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from app.ticket.exceptions import ValidationError
from app.ticket.schemas import TicketCreate

MUTABLE_FIELDS = ("name", "description", "status")


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class Ticket:
    """One support request.

    ``id`` and ``created_at`` are fixed at creation; changes go through
    ``merge`` which hands back a new instance.
    """

    name: str
    description: str
    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    created_at: datetime = field(default_factory=_utcnow)
    status: bool = False

    @classmethod
    def create(cls, name: Any, description: Any) -> "Ticket":
        try:
            payload = TicketCreate(name=name, description=description)
        except PydanticValidationError as exc:
            raise ValidationError("Name and description are required") from exc
        return cls(name=payload.name, description=payload.description)

    def short(self) -> dict[str, Any]:
        data = asdict(self)
        data.pop("description")
        return data

    def merge(self, changes: dict[str, Any]) -> "Ticket":
        unknown = set(changes) - set(MUTABLE_FIELDS)
        if unknown:
            name = min(unknown)
            raise ValidationError(f"Unknown field: {name}", field=name)
        return replace(self, **changes)
