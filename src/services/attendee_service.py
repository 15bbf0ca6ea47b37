"""Attendee registry with capacity limits and unique emails."""
import logging
from typing import Any, Dict, Optional, Tuple, Union

from src.models.attendee import Attendee, TicketType
from src.services.record_collection import RecordCollection
from src.utils.date_utils import timestamp_now
from src.utils.exceptions import InvalidCategoryError
from src.utils.settings import get_max_capacity

logger = logging.getLogger(__name__)


class AttendeeRegistry(RecordCollection[Attendee]):
    """Registrations for a single conference."""

    record_label = "attendee"
    required_fields = ("name", "email", "ticket_type")
    text_fields = ("name", "email")
    match_field = "email"
    match_case_sensitive = True
    categories = {"ticket_type": tuple(TicketType)}

    def __init__(self, max_capacity: Optional[int] = None):
        super().__init__(capacity=max_capacity if max_capacity is not None else get_max_capacity())

    @property
    def max_capacity(self) -> int:
        return self.capacity

    def coerce_category(self, field_name: str, value: Any) -> Any:
        if field_name == "ticket_type":
            try:
                return TicketType(value)
            except ValueError:
                raise InvalidCategoryError(
                    f"Invalid ticket type {value!r}. Allowed types: {', '.join(TicketType.values())}"
                ) from None
        return super().coerce_category(field_name, value)

    def validate_fields(self, fields: Dict[str, Any]) -> None:
        fields["ticket_type"] = self.coerce_category("ticket_type", fields["ticket_type"])

    def is_duplicate(self, existing: Attendee, fields: Dict[str, Any]) -> bool:
        return existing.email == fields["email"]

    def build_record(self, record_id: int, fields: Dict[str, Any]) -> Attendee:
        return Attendee(
            id=record_id,
            name=fields["name"],
            email=fields["email"],
            ticket_type=fields["ticket_type"],
            registered_at=timestamp_now(),
        )

    def register(self, name: str, email: str, ticket_type: Union[str, TicketType]) -> Attendee:
        """
        Register a new attendee.

        Args:
            name: Attendee's full name
            email: Attendee's email address (must be unique)
            ticket_type: General, VIP or Speaker

        Returns:
            The created Attendee

        Raises:
            ValidationError: Missing fields
            InvalidCategoryError: Unknown ticket type
            CapacityExceededError: Conference is full
            DuplicateError: Email already registered
        """
        return self.add(name=name, email=email, ticket_type=ticket_type)

    def remove_attendee(self, email: str) -> Attendee:
        """Remove an attendee by exact email. Raises NotFoundError."""
        return self.remove(email)

    def list_attendees(self) -> Tuple[Attendee, ...]:
        return self.list()

    def count_by_ticket_type(self, ticket_type: Union[str, TicketType]) -> int:
        """Count attendees holding ticket_type. Raises InvalidCategoryError."""
        return self.count_by_field("ticket_type", ticket_type)

    def ticket_type_breakdown(self) -> Dict[TicketType, int]:
        """Attendee count for every ticket type, in enumeration order."""
        return self.breakdown("ticket_type")

    def statistics(self) -> Dict[str, Any]:
        """
        Summarize registrations.

        Returns:
            Dict with total, capacity, remaining, is_full and a per-type
            breakdown of {"count", "percentage"} (percentage is 0.0 when
            nobody has registered yet)
        """
        total = len(self)
        breakdown = {}
        for ticket_type, count in self.ticket_type_breakdown().items():
            percentage = (count / total) * 100.0 if total else 0.0
            breakdown[ticket_type.value] = {"count": count, "percentage": percentage}

        return {
            "total": total,
            "capacity": self.capacity,
            "remaining": self.remaining_capacity(),
            "is_full": self.is_full(),
            "breakdown": breakdown,
        }
