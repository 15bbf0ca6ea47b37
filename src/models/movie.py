"""Movie data model."""
from dataclasses import dataclass

from src.utils.exceptions import ValidationError
from src.utils.validation import validate_year


@dataclass
class Movie:
    """A movie in a personal collection."""

    id: int
    title: str
    director: str
    genre: str
    year: int

    def __post_init__(self):
        """Validate movie data after initialization."""
        if isinstance(self.id, bool) or not isinstance(self.id, int) or self.id <= 0:
            raise ValidationError("Movie ID must be a positive integer")

        if not isinstance(self.title, str) or not self.title.strip():
            raise ValidationError("Title cannot be empty")

        if not isinstance(self.director, str) or not self.director.strip():
            raise ValidationError("Director cannot be empty")

        if not isinstance(self.genre, str) or not self.genre.strip():
            raise ValidationError("Genre cannot be empty")

        if isinstance(self.year, bool) or not isinstance(self.year, int):
            raise ValidationError(f"Year must be an integer, got: {self.year!r}")

        is_valid, error_msg = validate_year(self.year)
        if not is_valid:
            raise ValidationError(error_msg)
