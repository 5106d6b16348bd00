# app/ticket/routes.py
import json
from typing import Any

from fastapi import APIRouter, Depends, Response
from pydantic import BaseModel
from app.core.dependencies import get_tickets, request_body
from app.ticket.schemas import TicketCreate, TicketShort, TicketUpdate
from app.ticket.services import TicketCollection

router = APIRouter(prefix="/tickets", tags=["Tickets"])

STATUS_MESSAGE_HEADER = "X-Status-Message"


def _body_schema(model: type[BaseModel]) -> dict[str, Any]:
    # bodies are parsed by request_body, so document them by hand
    schema = model.model_json_schema()
    return {
        "requestBody": {
            "required": True,
            "content": {
                "application/json": {"schema": schema},
                "application/x-www-form-urlencoded": {"schema": schema},
            },
        }
    }


def _status_message(response: Response, message: str) -> None:
    response.headers[STATUS_MESSAGE_HEADER] = json.dumps(message)


# "/" routes keep /tickets/ reachable when static files are mounted at the root
@router.get("", response_model=list[TicketShort])
@router.get("/", response_model=list[TicketShort], include_in_schema=False)
def list_all(response: Response, tickets: TicketCollection = Depends(get_tickets)):
    _status_message(response, "Tickets received")
    return tickets.list()


@router.get("/{ticket_id}", response_model=str)
def get_description(ticket_id: str, response: Response, tickets: TicketCollection = Depends(get_tickets)):
    description = tickets.get_description(ticket_id)
    _status_message(response, "Description received")
    return description


@router.post("", response_model=list[TicketShort], status_code=201, openapi_extra=_body_schema(TicketCreate))
@router.post("/", response_model=list[TicketShort], status_code=201, include_in_schema=False)
def create(
    response: Response,
    body: dict[str, Any] = Depends(request_body),
    tickets: TicketCollection = Depends(get_tickets),
):
    items = tickets.create(body.get("name"), body.get("description"), method=body.get("method"))
    _status_message(response, "Ticket created")
    return items


@router.patch("/{ticket_id}", response_model=list[TicketShort], openapi_extra=_body_schema(TicketUpdate))
def update(
    ticket_id: str,
    response: Response,
    body: dict[str, Any] = Depends(request_body),
    tickets: TicketCollection = Depends(get_tickets),
):
    items = tickets.update(ticket_id, body)
    _status_message(response, "Ticket updated")
    return items


@router.delete("/{ticket_id}", response_model=list[TicketShort])
def delete(ticket_id: str, response: Response, tickets: TicketCollection = Depends(get_tickets)):
    items = tickets.delete(ticket_id)
    _status_message(response, "Ticket deleted")
    return items
