"""Generic in-memory record collection with sequential IDs."""
import logging
from typing import Any, Dict, Generic, Iterator, List, Optional, Sequence, Tuple, TypeVar

from src.utils.exceptions import (
    CapacityExceededError,
    DuplicateError,
    InvalidCategoryError,
    NotFoundError,
    ValidationError,
)
from src.utils.validation import is_blank, missing_fields, non_text_fields, normalize_text

logger = logging.getLogger(__name__)

T = TypeVar("T")


class RecordCollection(Generic[T]):
    """
    Ordered mutable list of records.

    Subclasses configure the class attributes and override the hooks:
        - validate_fields: record-specific rules, raises ValidationError
        - is_duplicate: uniqueness predicate against an existing record
        - build_record: construct the record once an ID is assigned
        - text_fields: names that must hold strings when present
        - coerce_category: map a raw value onto a closed enumeration

    All checks run before any mutation, so a failed add or remove leaves
    the collection unchanged.
    """

    record_label = "record"
    required_fields: Tuple[str, ...] = ()
    text_fields: Tuple[str, ...] = ()
    match_field = "id"
    match_case_sensitive = True
    categories: Dict[str, Tuple[Any, ...]] = {}

    def __init__(self, capacity: Optional[int] = None):
        if capacity is not None and (isinstance(capacity, bool) or not isinstance(capacity, int) or capacity <= 0):
            raise ValidationError("Capacity must be a positive integer")
        self.capacity = capacity
        self._records: List[T] = []
        self._next_id = 1

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[T]:
        return iter(tuple(self._records))

    # Hooks

    def validate_fields(self, fields: Dict[str, Any]) -> None:
        """Record-specific validation. Default accepts everything."""

    def is_duplicate(self, existing: T, fields: Dict[str, Any]) -> bool:
        """Uniqueness predicate. Default never collides."""
        return False

    def build_record(self, record_id: int, fields: Dict[str, Any]) -> T:
        """Construct the record. Subclasses must override."""
        raise NotImplementedError

    def coerce_category(self, field_name: str, value: Any) -> Any:
        """
        Map value onto the enumeration configured for field_name.

        Raises:
            InvalidCategoryError: If value is not an allowed value
        """
        allowed = self.categories.get(field_name)
        if allowed is None or value in allowed:
            return value
        raise InvalidCategoryError(
            f"Invalid {field_name} {value!r}. Allowed: {', '.join(str(v) for v in allowed)}"
        )

    # Operations

    def add(self, **fields: Any) -> T:
        """
        Validate and append a new record.

        Returns:
            The created record with its assigned ID

        Raises:
            ValidationError: Missing or invalid fields
            CapacityExceededError: Collection is full
            DuplicateError: Uniqueness predicate matched an existing record
        """
        missing = missing_fields(fields, self.required_fields)
        if missing:
            logger.warning(f"Rejected {self.record_label}: missing {missing}")
            raise ValidationError(
                f"Missing required fields: {', '.join(missing)}",
                errors=[f"{name} is required" for name in missing],
            )

        not_text = non_text_fields(fields, self.text_fields)
        if not_text:
            logger.warning(f"Rejected {self.record_label}: non-text {not_text}")
            raise ValidationError(
                f"Fields must be strings: {', '.join(not_text)}",
                errors=[f"{name} must be a string" for name in not_text],
            )

        self.validate_fields(fields)

        if self.is_full():
            logger.warning(f"Rejected {self.record_label}: capacity {self.capacity} reached")
            raise CapacityExceededError(
                f"Collection has reached maximum capacity ({self.capacity} {self.record_label}s)"
            )

        for existing in self._records:
            if self.is_duplicate(existing, fields):
                logger.warning(f"Rejected duplicate {self.record_label}")
                raise DuplicateError(f"This {self.record_label} already exists")

        record = self.build_record(self._next_id, fields)
        self._next_id += 1
        self._records.append(record)
        logger.info(f"Added {self.record_label} #{getattr(record, 'id', '?')}")
        return record

    def _matches(self, record: T, match_key: Any) -> bool:
        value = getattr(record, self.match_field)
        if not self.match_case_sensitive and isinstance(value, str) and isinstance(match_key, str):
            return normalize_text(value) == normalize_text(match_key)
        return value == match_key

    def find(self, match_key: Any) -> Optional[T]:
        """First record whose match field equals match_key, or None."""
        for record in self._records:
            if self._matches(record, match_key):
                return record
        return None

    def remove(self, match_key: Any) -> T:
        """
        Remove the first record matching match_key.

        Raises:
            NotFoundError: If no record matches
        """
        for index, record in enumerate(self._records):
            if self._matches(record, match_key):
                removed = self._records.pop(index)
                logger.info(f"Removed {self.record_label} #{getattr(removed, 'id', '?')}")
                return removed

        logger.warning(f"No {self.record_label} found with {self.match_field}={match_key!r}")
        raise NotFoundError(f"No {self.record_label} found with {self.match_field} \"{match_key}\"")

    def list(self) -> Tuple[T, ...]:
        """Snapshot of all records in insertion order."""
        return tuple(self._records)

    def count_by_field(self, field_name: str, value: Any) -> int:
        """
        Count records whose field equals value.

        Raises:
            InvalidCategoryError: If field_name has a closed enumeration
                and value is not part of it
        """
        value = self.coerce_category(field_name, value)
        return sum(1 for record in self._records if getattr(record, field_name) == value)

    def breakdown(self, field_name: str, allowed_values: Optional[Sequence[Any]] = None) -> Dict[Any, int]:
        """
        Count records per allowed value, in enumeration order.

        Args:
            field_name: Record attribute to group by
            allowed_values: Values to count (defaults to the field's enumeration)
        """
        if allowed_values is None:
            allowed_values = self.categories.get(field_name)
        if allowed_values is None:
            raise InvalidCategoryError(f"No enumeration configured for {field_name}")
        return {value: self.count_by_field(field_name, value) for value in allowed_values}

    def is_full(self) -> bool:
        """Check if collection is at capacity."""
        if self.capacity is None:
            return False
        return len(self._records) >= self.capacity

    def remaining_capacity(self) -> Optional[int]:
        """Free slots, or None when unbounded."""
        if self.capacity is None:
            return None
        return max(self.capacity - len(self._records), 0)

    def search_by_field(self, field_name: str, substring: str) -> List[T]:
        """
        Case-insensitive substring search on a text field.

        Raises:
            ValidationError: If substring is blank
        """
        if not isinstance(substring, str):
            raise ValidationError(f"{field_name} search term must be a string")
        if is_blank(substring):
            raise ValidationError(f"Please provide a {field_name} to search for")
        needle = substring.lower()
        return [
            record for record in self._records
            if needle in str(getattr(record, field_name)).lower()
        ]
