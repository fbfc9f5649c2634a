"""Display helpers for movie record fields.

Every helper accepts missing input and never raises.
"""

import json
import re
from typing import Any, Dict, List, Optional, Sequence

from ..core.models import CastMember, MovieRecord

GLOBE_FLAG = "🌐"

LANGUAGE_FLAGS: Dict[str, str] = {
    "français": "🇫🇷",
    "french": "🇫🇷",
    "anglais": "🇬🇧",
    "english": "🇬🇧",
    "espagnol": "🇪🇸",
    "spanish": "🇪🇸",
    "italien": "🇮🇹",
    "italian": "🇮🇹",
    "allemand": "🇩🇪",
    "german": "🇩🇪",
    "portugais": "🇵🇹",
    "portuguese": "🇵🇹",
    "japonais": "🇯🇵",
    "japanese": "🇯🇵",
    "chinois": "🇨🇳",
    "chinese": "🇨🇳",
    "mandarin": "🇨🇳",
    "coréen": "🇰🇷",
    "korean": "🇰🇷",
    "russe": "🇷🇺",
    "russian": "🇷🇺",
    "arabe": "🇸🇦",
    "arabic": "🇸🇦",
    "hindi": "🇮🇳",
    "néerlandais": "🇳🇱",
    "dutch": "🇳🇱",
    "suédois": "🇸🇪",
    "swedish": "🇸🇪",
    "norvégien": "🇳🇴",
    "norwegian": "🇳🇴",
    "danois": "🇩🇰",
    "danish": "🇩🇰",
    "polonais": "🇵🇱",
    "polish": "🇵🇱",
    "tchèque": "🇨🇿",
    "czech": "🇨🇿",
    "grec": "🇬🇷",
    "greek": "🇬🇷",
    "turc": "🇹🇷",
    "turkish": "🇹🇷",
    "hébreu": "🇮🇱",
    "hebrew": "🇮🇱",
    "thaï": "🇹🇭",
    "thai": "🇹🇭",
    "vietnamien": "🇻🇳",
    "vietnamese": "🇻🇳",
    "indonésien": "🇮🇩",
    "indonesian": "🇮🇩",
    "malais": "🇲🇾",
    "malay": "🇲🇾",
    "filipino": "🇵🇭",
    "tagalog": "🇵🇭",
    "hongrois": "🇭🇺",
    "hungarian": "🇭🇺",
    "roumain": "🇷🇴",
    "romanian": "🇷🇴",
    "ukrainien": "🇺🇦",
    "ukrainian": "🇺🇦",
    "finnois": "🇫🇮",
    "finnish": "🇫🇮",
    "afrikaans": "🇿🇦",
    "swahili": "🇰🇪",
    "persan": "🇮🇷",
    "persian": "🇮🇷",
    "farsi": "🇮🇷",
}

FILM_RATINGS: Dict[str, str] = {
    "TP": "TP - Tous Publics",
    "U": "U - Universal",
    "12": "12+ ans",
    "16": "16+ ans",
    "18": "18+ ans",
    "PG": "PG - Parental Guidance",
    "PG-13": "PG-13",
    "R": "R - Restricted",
}

AVAILABLE_COLUMNS: List[str] = [
    "Title",
    "Original Title",
    "Directors",
    "Release Year",
    "Genres",
    "Runtime",
    "source",
    "Languages",
    "Cast",
    "Summary",
]

COLUMN_LABELS: Dict[str, str] = {
    "Title": "Titre",
    "Original Title": "Titre original",
    "Directors": "Réalisateur(s)",
    "Release Year": "Année",
    "Genres": "Genres",
    "Runtime": "Durée",
    "source": "Collection",
    "Languages": "Langue(s)",
    "Cast": "Acteurs",
    "Summary": "Résumé",
}

DEFAULT_LINK_TEMPLATE = "https://www.imdb.com/title/{imdb_id}"

EMPTY_CELL = "-"

_LEADING_INT = re.compile(r"^\s*(\d+)")


def parse_cast(cast: Optional[str], limit: int = 3) -> List[CastMember]:
    """Decode the JSON cast field.

    Args:
        cast: JSON array of ``{"actor": ..., "character": ...}`` objects.
        limit: Maximum number of entries returned.

    Returns:
        At most ``limit`` cast members in order, or an empty list if the field
        is missing or not a valid JSON array.
    """
    if not cast:
        return []

    try:
        entries = json.loads(cast)
    except (ValueError, TypeError, RecursionError):
        return []

    if not isinstance(entries, list):
        return []

    members = []
    for entry in entries[:limit]:
        if not isinstance(entry, dict):
            continue
        actor = entry.get("actor")
        character = entry.get("character")
        members.append(
            CastMember(
                actor=str(actor) if actor else "",
                character=str(character) if character else None,
            )
        )
    return members


def format_cast(members: Sequence[CastMember]) -> str:
    """Join cast members as ``Actor (Character)``."""
    return ", ".join(member.display_name for member in members)


def format_runtime(minutes: Optional[str]) -> Optional[str]:
    """Format a runtime in minutes as ``1h30``, ``1h`` or ``45min``.

    Args:
        minutes: Runtime as stored in the record.

    Returns:
        Formatted runtime, the input unchanged if it does not start with a
        number, or None if it is missing.
    """
    if not minutes:
        return None

    match = _LEADING_INT.match(str(minutes))
    if not match:
        return minutes

    hours, remaining = divmod(int(match.group(1)), 60)
    if hours == 0:
        return f"{remaining}min"
    if remaining == 0:
        return f"{hours}h"
    return f"{hours}h{remaining:02d}"


def format_languages(languages: Optional[str]) -> str:
    """Annotate each language with its flag.

    ``"français, English"`` becomes ``"Français 🇫🇷, English 🇬🇧"``; unknown
    languages get a globe.
    """
    if not languages:
        return ""

    formatted = []
    for language in (token.strip() for token in languages.split(",")):
        flag = LANGUAGE_FLAGS.get(language.lower(), GLOBE_FLAG)
        formatted.append(f"{language[:1].upper()}{language[1:]} {flag}")
    return ", ".join(formatted)


def external_link(imdb_id: Optional[str], template: str = DEFAULT_LINK_TEMPLATE) -> Optional[str]:
    """Build the external page URL of a record, or None without an identifier."""
    if not imdb_id or not imdb_id.strip():
        return None
    return template.format(imdb_id=imdb_id.strip())


def format_rating(rating: Optional[str]) -> Optional[str]:
    """Format a rating as ``⭐ 8.7/10``; non-numeric ratings are returned unchanged."""
    if not rating:
        return None
    try:
        return f"⭐ {float(rating):.1f}/10"
    except ValueError:
        return rating


def format_votes(votes: Optional[str]) -> Optional[str]:
    if not votes:
        return None
    return f"{votes} votes"


def truncate_summary(summary: Optional[str], limit: int = 100) -> Optional[str]:
    """Cut a summary to ``limit`` characters followed by an ellipsis."""
    if not summary:
        return None
    return f"{summary[:limit]}..."


def leading_genres(genres: Optional[str], limit: int = 3) -> Optional[str]:
    """Keep the first ``limit`` genres of a comma-joined field."""
    if not genres:
        return None
    return ", ".join(token.strip() for token in genres.split(",")[:limit])


def column_label(column: str) -> str:
    return COLUMN_LABELS.get(column, column)


def toggle_column(visible: Sequence[str], column: str) -> List[str]:
    """Return the visible columns with ``column`` removed if shown, appended otherwise."""
    if column in visible:
        return [name for name in visible if name != column]
    return [*visible, column]


def format_cell(
    record: MovieRecord, column: str, cast_limit: int = 3, summary_limit: int = 100
) -> str:
    """Render one table cell of a record.

    Args:
        record: Record to render.
        column: Column name.
        cast_limit: Number of cast members shown.
        summary_limit: Summary length.

    Returns:
        Display value, ``"-"`` when there is nothing to show.
    """
    value: Any
    if column == "Cast":
        value = format_cast(parse_cast(record.cast, cast_limit))
    elif column == "Summary":
        value = truncate_summary(record.summary, summary_limit)
    elif column == "Genres":
        value = leading_genres(record.genres)
    elif column == "Runtime":
        value = format_runtime(record.runtime)
    elif column == "Languages":
        value = format_languages(record.languages)
    else:
        value = record.get(column)
    return str(value) if value else EMPTY_CELL
