"""Unit tests for the generic record collection."""
from dataclasses import dataclass

import pytest

from src.services.record_collection import RecordCollection
from src.utils.exceptions import (
    CapacityExceededError,
    DuplicateError,
    InvalidCategoryError,
    NotFoundError,
    ValidationError,
)


@dataclass
class Book:
    id: int
    title: str
    shelf: str


class Library(RecordCollection[Book]):
    """Minimal collection used to exercise the base class."""

    record_label = "book"
    required_fields = ("title", "shelf")
    match_field = "title"
    match_case_sensitive = False
    categories = {"shelf": ("A", "B", "C")}

    def validate_fields(self, fields):
        self.coerce_category("shelf", fields["shelf"])

    def is_duplicate(self, existing, fields):
        return existing.title.lower() == fields["title"].lower()

    def build_record(self, record_id, fields):
        return Book(id=record_id, title=fields["title"], shelf=fields["shelf"])


@pytest.fixture
def library():
    lib = Library(capacity=3)
    lib.add(title="Dune", shelf="A")
    lib.add(title="Emma", shelf="B")
    return lib


class TestAdd:
    """Test add."""

    def test_assigns_sequential_ids(self, library):
        assert [book.id for book in library.list()] == [1, 2]

    def test_returns_created_record(self):
        lib = Library()
        book = lib.add(title="Ulysses", shelf="C")
        assert book == Book(id=1, title="Ulysses", shelf="C")

    def test_missing_fields_listed(self):
        lib = Library()
        with pytest.raises(ValidationError) as exc_info:
            lib.add(title="  ")
        assert exc_info.value.errors == ["title is required", "shelf is required"]
        assert len(lib) == 0

    def test_invalid_category_rejected(self, library):
        with pytest.raises(InvalidCategoryError):
            library.add(title="Odyssey", shelf="Z")
        assert len(library) == 2

    def test_duplicate_does_not_change_size(self, library):
        with pytest.raises(DuplicateError):
            library.add(title="DUNE", shelf="B")
        assert len(library) == 2

    def test_capacity_exceeded_does_not_change_size(self, library):
        library.add(title="Odyssey", shelf="C")
        assert library.is_full() is True

        with pytest.raises(CapacityExceededError):
            library.add(title="Beloved", shelf="A")
        assert len(library) == 3

    def test_capacity_checked_before_duplicate(self, library):
        library.add(title="Odyssey", shelf="C")
        with pytest.raises(CapacityExceededError):
            library.add(title="Dune", shelf="A")

    def test_ids_not_reused_after_removal(self, library):
        library.remove("Emma")
        book = library.add(title="Odyssey", shelf="C")
        assert book.id == 3

    @pytest.mark.parametrize("capacity", [0, -1, True, 2.5])
    def test_invalid_capacity_rejected(self, capacity):
        with pytest.raises(ValidationError, match="Capacity"):
            Library(capacity=capacity)


class TestRemove:
    """Test remove and find."""

    def test_remove_present_key(self, library):
        removed = library.remove("dune")
        assert removed.title == "Dune"
        assert len(library) == 1

    def test_remove_absent_key(self, library):
        with pytest.raises(NotFoundError):
            library.remove("Missing")
        assert len(library) == 2

    def test_find(self, library):
        assert library.find("EMMA").id == 2
        assert library.find("nope") is None


class TestListing:
    """Test list snapshots."""

    def test_list_is_snapshot(self, library):
        snapshot = library.list()
        library.add(title="Odyssey", shelf="C")
        assert len(snapshot) == 2
        assert isinstance(snapshot, tuple)

    def test_iteration_in_insertion_order(self, library):
        assert [book.title for book in library] == ["Dune", "Emma"]


class TestCounting:
    """Test count_by_field and breakdown."""

    def test_count_by_field(self, library):
        assert library.count_by_field("shelf", "A") == 1
        assert library.count_by_field("shelf", "C") == 0

    def test_count_unknown_category_raises_error(self, library):
        with pytest.raises(InvalidCategoryError):
            library.count_by_field("shelf", "Z")

    def test_count_open_field(self, library):
        assert library.count_by_field("title", "Dune") == 1

    def test_breakdown_in_enumeration_order(self, library):
        assert list(library.breakdown("shelf").items()) == [("A", 1), ("B", 1), ("C", 0)]

    def test_breakdown_with_explicit_values(self, library):
        assert library.breakdown("title", ["Emma", "Dune"]) == {"Emma": 1, "Dune": 1}

    def test_breakdown_without_enumeration_raises_error(self, library):
        with pytest.raises(InvalidCategoryError):
            library.breakdown("title")


class TestCapacity:
    """Test capacity helpers."""

    def test_unbounded_collection_never_full(self):
        lib = Library()
        assert lib.is_full() is False
        assert lib.remaining_capacity() is None

    def test_remaining_capacity(self, library):
        assert library.remaining_capacity() == 1


class TestSearch:
    """Test search_by_field."""

    def test_case_insensitive_substring(self, library):
        assert [book.title for book in library.search_by_field("title", "M")] == ["Emma"]

    def test_no_matches(self, library):
        assert library.search_by_field("title", "zzz") == []

    @pytest.mark.parametrize("term", ["", "   "])
    def test_blank_search_rejected(self, library, term):
        with pytest.raises(ValidationError):
            library.search_by_field("title", term)


class Shelf(Library):
    """Library variant that declares its text fields."""

    text_fields = ("title",)


class TestTextFields:
    """Test the text_fields check."""

    def test_non_string_text_field_rejected(self):
        shelf = Shelf()
        with pytest.raises(ValidationError) as exc_info:
            shelf.add(title=99, shelf="A")
        assert exc_info.value.errors == ["title must be a string"]
        assert len(shelf) == 0

    def test_string_text_field_accepted(self):
        assert Shelf().add(title="Dune", shelf="A").id == 1

    def test_non_string_search_term_rejected(self, library):
        with pytest.raises(ValidationError, match="search term must be a string"):
            library.search_by_field("title", 5)


class TestBuildRecordHook:
    def test_base_class_requires_override(self):
        with pytest.raises(NotImplementedError):
            RecordCollection().add()
