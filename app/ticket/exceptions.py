# app/ticket/exceptions.py
"""Errors raised by the ticket collection.

Every error carries a human readable ``message``; the HTTP layer turns any
``TicketError`` into a 400 response whose body is that message.
"""


class TicketError(Exception):
    def __init__(self, message: str, code: str | None = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(message)

    def to_dict(self) -> dict:
        return {"error": self.code, "message": self.message}


class ValidationError(TicketError):
    """Missing or empty required field, malformed status or wrong operation tag."""

    def __init__(self, message: str, field: str | None = None):
        self.field = field
        code = f"VALIDATION_ERROR_{field.upper()}" if field else "VALIDATION_ERROR"
        super().__init__(message, code)

    def to_dict(self) -> dict:
        result = super().to_dict()
        if self.field:
            result["field"] = self.field
        return result


class NotFound(TicketError):
    """Lookup by id found nothing."""

    def __init__(self, message: str = "Ticket not found", ticket_id: str | None = None):
        self.ticket_id = ticket_id
        super().__init__(message, "NOT_FOUND")

    def to_dict(self) -> dict:
        result = super().to_dict()
        if self.ticket_id:
            result["ticket_id"] = self.ticket_id
        return result
