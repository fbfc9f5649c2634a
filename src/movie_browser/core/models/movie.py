"""Movie-related data models."""

from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class MovieRecord(BaseModel):
    """One row of a collection export plus the tag of the source it came from.

    Values are the raw strings read from the file. Multi-value fields (genres,
    languages) stay comma-joined; splitting them is left to presentation code.
    Columns unknown to the model are kept as extra fields.
    """

    title: str = Field(..., alias="Title", description="Movie title")
    original_title: Optional[str] = Field(
        None, alias="Original Title", description="Original title"
    )
    directors: Optional[str] = Field(None, alias="Directors", description="Director name(s)")
    release_year: Optional[str] = Field(None, alias="Release Year", description="Release year")
    genres: Optional[str] = Field(None, alias="Genres", description="Comma-separated genres")
    runtime: Optional[str] = Field(None, alias="Runtime", description="Runtime in minutes")
    languages: Optional[str] = Field(
        None, alias="Languages", description="Comma-separated languages"
    )
    cast: Optional[str] = Field(
        None, alias="Cast", description="JSON array of actor/character pairs"
    )
    summary: Optional[str] = Field(None, alias="Summary", description="Plot summary")
    rating: Optional[str] = Field(None, alias="Rating", description="IMDb-style rating (0-10)")
    number_of_votes: Optional[str] = Field(None, alias="Number of Votes", description="Vote count")
    country_of_origin: Optional[str] = Field(
        None, alias="Country of Origin", description="Country of origin"
    )
    film_rating: Optional[str] = Field(None, alias="Film Rating", description="Age classification")
    imdb_id: Optional[str] = Field(None, alias="IMDB ID", description="IMDb identifier")
    source: str = Field(..., alias="source", description="Tag of the source collection")

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="allow")

    @classmethod
    def column_names(cls) -> Tuple[str, ...]:
        """Column names (CSV headers) of the known fields, in declaration order."""
        return tuple(info.alias or name for name, info in cls.model_fields.items())

    def get(self, column: str, default: Any = None) -> Any:
        """Get a raw value by column name or attribute name.

        Args:
            column: CSV header (``"Release Year"``), attribute (``"release_year"``)
                or the name of an extra column.
            default: Value returned when the column is unknown or unset.

        Returns:
            Raw column value.
        """
        field_name = _COLUMN_TO_FIELD.get(column, column)
        if field_name in type(self).model_fields:
            value = getattr(self, field_name)
        else:
            value = (self.model_extra or {}).get(column)
        return default if value is None else value


_COLUMN_TO_FIELD: Dict[str, str] = {
    (info.alias or name): name for name, info in MovieRecord.model_fields.items()
}


class CastMember(BaseModel):
    """One entry of a record's cast list."""

    actor: str = Field(..., description="Actor name")
    character: Optional[str] = Field(None, description="Character played")

    model_config = ConfigDict(frozen=True)

    @property
    def display_name(self) -> str:
        """Get display name for the cast entry."""
        return f"{self.actor} ({self.character})" if self.character else self.actor
