"""Attendee data model for conference registration."""
from dataclasses import dataclass
from enum import Enum

from src.utils.date_utils import is_iso_timestamp
from src.utils.exceptions import ValidationError


class TicketType(str, Enum):
    """Ticket types sold for the conference."""

    GENERAL = "General"
    VIP = "VIP"
    SPEAKER = "Speaker"

    @classmethod
    def values(cls):
        return [member.value for member in cls]


@dataclass
class Attendee:
    """Individual registered for the conference."""

    id: int
    name: str
    email: str
    ticket_type: TicketType
    registered_at: str  # ISO 8601 format

    def __post_init__(self):
        """Validate attendee data."""
        if isinstance(self.id, bool) or not isinstance(self.id, int) or self.id <= 0:
            raise ValidationError("Attendee ID must be a positive integer")

        if not isinstance(self.name, str) or not self.name.strip():
            raise ValidationError("Name cannot be empty")

        if not isinstance(self.email, str) or not self.email.strip():
            raise ValidationError("Email cannot be empty")

        if not isinstance(self.ticket_type, TicketType):
            raise ValidationError(f"Ticket type must be a TicketType, got: {self.ticket_type!r}")

        if not is_iso_timestamp(self.registered_at):
            raise ValidationError(f"Invalid timestamp format: {self.registered_at}")
