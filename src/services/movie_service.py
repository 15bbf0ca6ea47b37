"""Personal movie catalog with search and collection statistics."""
import logging
from typing import Any, Dict, List, Tuple

from src.models.movie import Movie
from src.services.record_collection import RecordCollection
from src.utils.exceptions import ValidationError
from src.utils.statistics import maximum, minimum
from src.utils.validation import normalize_text, parse_year, validate_year

logger = logging.getLogger(__name__)


class MovieCatalog(RecordCollection[Movie]):
    """Movies keyed by (title, director), compared case-insensitively."""

    record_label = "movie"
    required_fields = ("title", "director", "genre", "year")
    text_fields = ("title", "director", "genre")
    match_field = "title"
    match_case_sensitive = False

    def validate_fields(self, fields: Dict[str, Any]) -> None:
        is_valid, error_msg = validate_year(fields["year"])
        if not is_valid:
            logger.warning(f"Rejected movie {fields['title']!r}: {error_msg}")
            raise ValidationError(error_msg, errors=[error_msg])
        fields["year"] = parse_year(fields["year"])

    def is_duplicate(self, existing: Movie, fields: Dict[str, Any]) -> bool:
        return (
            normalize_text(existing.title) == normalize_text(fields["title"])
            and normalize_text(existing.director) == normalize_text(fields["director"])
        )

    def build_record(self, record_id: int, fields: Dict[str, Any]) -> Movie:
        return Movie(
            id=record_id,
            title=fields["title"],
            director=fields["director"],
            genre=fields["genre"],
            year=fields["year"],
        )

    def add_movie(self, title: str, director: str, genre: str, year: Any) -> Movie:
        """
        Add a movie to the catalog.

        Args:
            title: Movie title
            director: Director's name
            genre: Movie genre
            year: Release year, int or numeric string

        Returns:
            The created Movie

        Raises:
            ValidationError: Missing fields or year outside [1800, current year + 5]
            DuplicateError: Same title and director already in the catalog
        """
        return self.add(title=title, director=director, genre=genre, year=year)

    def remove_movie(self, title: str) -> Movie:
        """Remove the first movie with this title (case-insensitive)."""
        return self.remove(title)

    def list_movies(self) -> Tuple[Movie, ...]:
        return self.list()

    def search_by_director(self, director: str) -> List[Movie]:
        return self.search_by_field("director", director)

    def search_by_genre(self, genre: str) -> List[Movie]:
        return self.search_by_field("genre", genre)

    def count_by_genre(self, genre: str) -> int:
        return self.count_by_field("genre", genre)

    def year_range(self) -> Tuple[int, int]:
        """
        Earliest and latest release year.

        Raises:
            EmptyInputError: If the catalog is empty
        """
        years = [movie.year for movie in self._records]
        return minimum(years), maximum(years)

    def _tally(self, field_name: str) -> Dict[str, int]:
        counts: Dict[str, int] = {}
        for movie in self._records:
            key = getattr(movie, field_name)
            counts[key] = counts.get(key, 0) + 1
        return counts

    def director_counts(self) -> Dict[str, int]:
        """Movies per director, first-seen order."""
        return self._tally("director")

    def directors_with_multiple_films(self) -> Dict[str, int]:
        return {director: count for director, count in self.director_counts().items() if count > 1}

    def genre_counts(self) -> Dict[str, int]:
        """Movies per genre, first-seen order."""
        return self._tally("genre")
