"""Test genre facet extraction."""

from movie_browser.core.models import MovieRecord
from movie_browser.core.services import extract_genres, split_values


def test_split_values_trims_tokens():
    """Test splitting a comma-joined field."""
    assert split_values("Action, Science Fiction ,Drame") == [
        "Action",
        "Science Fiction",
        "Drame",
    ]


def test_split_values_drops_empty_tokens():
    """Test that empty tokens and missing values yield nothing."""
    assert split_values("Action,, ,Drame,") == ["Action", "Drame"]
    assert split_values("") == []
    assert split_values(None) == []


def test_extract_genres_sorted_and_distinct(sample_records):
    """Test that genres are distinct and sorted."""
    genres = extract_genres(sample_records)

    assert genres == ["Action", "Comédie", "Crime", "Drame", "Romance", "Science Fiction"]


def test_extract_genres_ignores_records_without_genres():
    """Test records with missing or empty genres."""
    records = [
        MovieRecord(title="Alien", source="Olivier"),
        MovieRecord(title="Heat", source="Olivier", genres=""),
        MovieRecord(title="Ronin", source="Loïc", genres="Action"),
    ]

    assert extract_genres(records) == ["Action"]


def test_extract_genres_empty_collection():
    """Test that an empty collection has no genres."""
    assert extract_genres([]) == []


def test_extract_genres_is_case_sensitive():
    """Test that differently cased genres stay distinct."""
    records = [
        MovieRecord(title="Alien", source="Olivier", genres="drame"),
        MovieRecord(title="Heat", source="Olivier", genres="Drame"),
    ]

    assert extract_genres(records) == ["Drame", "drame"]
