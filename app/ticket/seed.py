# app/ticket/seed.py
"""Demo tickets loaded at startup so a fresh frontend has something to show."""
from datetime import timezone

from faker import Faker

from app.ticket.models import Ticket


def fake_tickets(faker: Faker | None = None) -> list[Ticket]:
    faker = faker or Faker()
    return [
        Ticket(
            id=faker.uuid4(),
            name="Build an API prototype for the help request service",
            description="A frontend will be attached to it later",
            created_at=faker.date_time_this_year(tzinfo=timezone.utc),
            status=False,
        ),
        Ticket(
            id=faker.uuid4(),
            name=faker.sentence(nb_words=10),
            description=faker.paragraph(nb_sentences=5),
            created_at=faker.date_time_this_year(tzinfo=timezone.utc),
            status=True,
        ),
        Ticket(
            id=faker.uuid4(),
            name=faker.sentence(nb_words=5),
            description=faker.paragraph(nb_sentences=3),
            created_at=faker.date_time_this_year(tzinfo=timezone.utc),
            status=False,
        ),
    ]
