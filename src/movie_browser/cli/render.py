"""Text rendering of records for the command line."""

from typing import List, Sequence

from ..config.models import BrowserConfig
from ..core.models import MovieRecord, SortConfig, SortDirection
from ..utils import (
    column_label,
    external_link,
    format_cast,
    format_cell,
    format_languages,
    format_rating,
    format_runtime,
    format_votes,
    leading_genres,
    parse_cast,
    truncate_summary,
)

CARD_SUMMARY_LIMIT = 150
MAX_CELL_WIDTH = 40


def render_card(record: MovieRecord, browser: BrowserConfig) -> str:
    """Render the compact card of a record."""
    lines = [record.title]
    if record.original_title and record.original_title != record.title:
        lines.append(f"  ({record.original_title})")

    badges = [record.source, record.release_year, format_runtime(record.runtime)]
    lines.append("  " + " | ".join(badge for badge in badges if badge))

    genres = leading_genres(record.genres)
    if genres:
        lines.append(f"  Genres: {genres}")
    if record.directors:
        lines.append(f"  Réalisateur: {record.directors}")

    cast = parse_cast(record.cast, browser.cast_limit)
    if cast:
        lines.append(f"  Avec: {format_cast(cast)}")

    summary = truncate_summary(record.summary, CARD_SUMMARY_LIMIT)
    if summary:
        lines.append(f"  {summary}")

    link = external_link(record.imdb_id, browser.external_link_template)
    if link:
        lines.append(f"  Voir sur IMDb → {link}")

    return "\n".join(lines)


def render_detail(record: MovieRecord, browser: BrowserConfig) -> str:
    """Render every field of a record."""
    fields = [
        ("Titre original", record.original_title),
        ("Collection", record.source),
        ("Année", record.release_year),
        ("Durée", format_runtime(record.runtime)),
        ("Classification", record.film_rating),
        ("Réalisateur(s)", record.directors),
        ("Genres", record.genres),
        ("Langue(s)", format_languages(record.languages)),
        ("Pays", record.country_of_origin),
        ("Note IMDb", format_rating(record.rating)),
        ("Nombre de votes", format_votes(record.number_of_votes)),
    ]

    lines = [record.title, "=" * len(record.title)]
    lines.extend(f"{label}: {value}" for label, value in fields if value)

    cast = parse_cast(record.cast, browser.cast_limit)
    if cast:
        lines.append("Acteurs principaux:")
        lines.extend(f"  - {member.display_name}" for member in cast)

    if record.summary:
        lines.extend(["", record.summary])

    link = external_link(record.imdb_id, browser.external_link_template)
    if link:
        lines.extend(["", f"Voir sur IMDb → {link}"])

    return "\n".join(lines)


def render_table(
    records: Sequence[MovieRecord],
    columns: Sequence[str],
    browser: BrowserConfig,
    sort_config: SortConfig = SortConfig(),
) -> str:
    """Render records as a fixed-width table.

    The sorted column header carries ▲ or ▼.
    """
    headers: List[str] = []
    for column in columns:
        header = column_label(column)
        if sort_config.key == column:
            header += " ▲" if sort_config.direction == SortDirection.ASC else " ▼"
        headers.append(header)

    rows = [
        [
            _clip(format_cell(record, column, browser.cast_limit, browser.summary_limit))
            for column in columns
        ]
        for record in records
    ]

    widths = [len(header) for header in headers]
    for row in rows:
        widths = [max(width, len(cell)) for width, cell in zip(widths, row)]

    def line(cells: Sequence[str]) -> str:
        return " | ".join(cell.ljust(width) for cell, width in zip(cells, widths)).rstrip()

    output = [line(headers), "-+-".join("-" * width for width in widths)]
    output.extend(line(row) for row in rows)
    return "\n".join(output)


def _clip(text: str) -> str:
    text = " ".join(text.split())
    if len(text) <= MAX_CELL_WIDTH:
        return text
    return text[: MAX_CELL_WIDTH - 1] + "…"
