"""Starter records used to populate a fresh app session."""
from typing import Tuple

from src.services.attendee_service import AttendeeRegistry
from src.services.movie_service import MovieCatalog

SAMPLE_ATTENDEES: Tuple[Tuple[str, str, str], ...] = (
    ("Alice Johnson", "alice@example.com", "VIP"),
    ("Bob Smith", "bob@example.com", "General"),
    ("Carol Davis", "carol@example.com", "Speaker"),
    ("David Wilson", "david@example.com", "General"),
    ("Emma Brown", "emma@example.com", "VIP"),
    ("Frank Miller", "frank@example.com", "General"),
    ("Grace Lee", "grace@example.com", "Speaker"),
    ("Henry Taylor", "henry@example.com", "VIP"),
)

SAMPLE_MOVIES: Tuple[Tuple[str, str, str, int], ...] = (
    ("The Shawshank Redemption", "Frank Darabont", "Drama", 1994),
    ("The Godfather", "Francis Ford Coppola", "Crime", 1972),
    ("The Godfather Part II", "Francis Ford Coppola", "Crime", 1974),
    ("Inception", "Christopher Nolan", "Science Fiction", 2010),
    ("Interstellar", "Christopher Nolan", "Science Fiction", 2014),
    ("The Dark Knight", "Christopher Nolan", "Action", 2008),
    ("Pulp Fiction", "Quentin Tarantino", "Crime", 1994),
    ("Kill Bill Vol. 1", "Quentin Tarantino", "Action", 2003),
    ("Forrest Gump", "Robert Zemeckis", "Drama", 1994),
    ("The Matrix", "The Wachowskis", "Science Fiction", 1999),
)


def build_sample_registry() -> AttendeeRegistry:
    registry = AttendeeRegistry()
    for name, email, ticket_type in SAMPLE_ATTENDEES:
        registry.register(name, email, ticket_type)
    return registry


def build_sample_catalog() -> MovieCatalog:
    catalog = MovieCatalog()
    for title, director, genre, year in SAMPLE_MOVIES:
        catalog.add_movie(title, director, genre, year)
    return catalog
