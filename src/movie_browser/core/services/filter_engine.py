"""Filter engine: narrows the unified collection to the active criteria."""

from typing import Iterable, List

from ..models import FilterCriteria, LanguageFilter, MovieRecord

DEFAULT_LANGUAGE_TARGET = "français"


def matches_search(record: MovieRecord, term: str) -> bool:
    """Check the free-text criterion against title, original title and directors.

    Args:
        record: Record to test.
        term: Lower-cased search term.
    """
    for value in (record.title, record.original_title, record.directors):
        if value and term in value.lower():
            return True
    return False


def matches_language(record: MovieRecord, mode: LanguageFilter, target: str) -> bool:
    """Check the language criterion.

    Args:
        record: Record to test.
        mode: Language filter mode.
        target: Lower-cased language searched for in the languages field.
    """
    if mode == LanguageFilter.ANY:
        return True
    has_target = target in (record.languages or "").lower()
    return has_target if mode == LanguageFilter.INCLUDES else not has_target


def matches(
    record: MovieRecord, criteria: FilterCriteria, language_target: str = DEFAULT_LANGUAGE_TARGET
) -> bool:
    """Check a record against every active criterion."""
    term = criteria.search_term
    if term and not matches_search(record, term):
        return False

    # Substring match on the raw field, not a token match
    if criteria.genre and criteria.genre not in (record.genres or ""):
        return False

    if criteria.source and record.source != criteria.source:
        return False

    if not matches_language(record, criteria.language, language_target.lower()):
        return False

    if criteria.film_rating and record.film_rating != criteria.film_rating:
        return False

    return True


def filter_movies(
    records: Iterable[MovieRecord],
    criteria: FilterCriteria,
    language_target: str = DEFAULT_LANGUAGE_TARGET,
) -> List[MovieRecord]:
    """Return the records satisfying all active criteria, in input order.

    Args:
        records: Unified collection.
        criteria: Current filter criteria.
        language_target: Language used by the language criterion.

    Returns:
        New list with the matching records.
    """
    return [record for record in records if matches(record, criteria, language_target)]
