# app/core/dependencies.py
import json
from typing import Any

from fastapi import Request

from app.ticket.exceptions import ValidationError
from app.ticket.services import TicketCollection

FORM_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


def get_tickets(request: Request) -> TicketCollection:
    return request.app.state.tickets


async def request_body(request: Request) -> dict[str, Any]:
    """Parse a JSON, form or plain-text JSON body into a dict."""
    content_type = request.headers.get("content-type", "")
    if content_type.startswith(FORM_TYPES):
        form = await request.form()
        return dict(form)

    raw = await request.body()
    if not raw.strip():
        return {}
    try:
        data = json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError, RecursionError) as exc:
        raise ValidationError("Invalid request body") from exc
    if not isinstance(data, dict):
        raise ValidationError("Invalid request body")
    return data
