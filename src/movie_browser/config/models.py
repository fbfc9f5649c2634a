"""Configuration data models."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

DEFAULT_VISIBLE_COLUMNS = [
    "Title",
    "Directors",
    "Release Year",
    "Genres",
    "Runtime",
    "source",
]


class SourceConfig(BaseModel):
    """One CSV document consumed by the collection loader."""

    location: str = Field(..., description="File path or http(s) URL of the CSV document")
    tag: str = Field(..., description="Source tag attached to every record")

    @field_validator("location", "tag")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        """Reject empty values."""
        if not v.strip():
            raise ValueError("Value must not be empty")
        return v.strip()


class CollectionConfig(BaseModel):
    """Collection loading configuration."""

    sources: List[SourceConfig] = Field(
        default_factory=lambda: [
            SourceConfig(location="public/movies-olivier.csv", tag="Olivier"),
            SourceConfig(location="public/movies-loic.csv", tag="Loïc"),
        ],
        description="Ordered list of sources",
    )
    base_path: Optional[str] = Field(
        default=None, description="Directory that relative source paths are resolved against"
    )
    timeout: Optional[int] = Field(
        default=None, gt=0, description="HTTP retrieval timeout in seconds (none by default)"
    )

    @model_validator(mode="after")
    def validate_unique_tags(self) -> "CollectionConfig":
        """Source tags identify records, so they must be unique."""
        tags = [source.tag for source in self.sources]
        duplicates = sorted({tag for tag in tags if tags.count(tag) > 1})
        if duplicates:
            raise ValueError(f"Duplicate source tags: {duplicates}")
        return self


class RefreshSourceConfig(BaseModel):
    """Directory scanned by the refresh utility and the file it feeds."""

    name: str = Field(..., description="Display name of the source")
    source_dir: str = Field(..., description="Directory holding dated CSV exports")
    target_file: str = Field(..., description="Canonical CSV file read by the loader")


class RefreshConfig(BaseModel):
    """Source refresh configuration."""

    sources: List[RefreshSourceConfig] = Field(
        default_factory=lambda: [
            RefreshSourceConfig(
                name="Olivier",
                source_dir="public/datasources/le_maitre_de_l_arbre",
                target_file="public/movies-olivier.csv",
            ),
            RefreshSourceConfig(
                name="Loïc",
                source_dir="public/datasources/le_pianiste",
                target_file="public/movies-loic.csv",
            ),
        ],
        description="Directories to refresh from",
    )
    extension: str = Field(default=".csv", description="Extension of exported files")


class BrowserConfig(BaseModel):
    """Browsing and rendering configuration."""

    language_filter_target: str = Field(
        default="français", description="Language matched by the language filter"
    )
    visible_columns: List[str] = Field(
        default_factory=lambda: list(DEFAULT_VISIBLE_COLUMNS),
        description="Columns shown in table view",
    )
    external_link_template: str = Field(
        default="https://www.imdb.com/title/{imdb_id}",
        description="Template used to build external links",
    )
    cast_limit: int = Field(default=3, gt=0, description="Number of cast members displayed")
    summary_limit: int = Field(default=100, gt=0, description="Summary length in table view")

    @field_validator("external_link_template")
    @classmethod
    def validate_template(cls, v: str) -> str:
        """Template must reference the identifier."""
        if "{imdb_id}" not in v:
            raise ValueError("External link template must contain '{imdb_id}'")
        return v

    @field_validator("language_filter_target")
    @classmethod
    def validate_language(cls, v: str) -> str:
        """Store the target lower-cased, matching is case-insensitive."""
        if not v.strip():
            raise ValueError("Language filter target must not be empty")
        return v.strip().lower()


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO", description="Logging level")
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log format string",
    )
    file: Optional[str] = Field(default=None, description="Log file path")
    max_size_mb: int = Field(default=10, gt=0, description="Maximum log file size in MB")
    backup_count: int = Field(default=5, ge=0, description="Number of backup log files")

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Validate logging level."""
        allowed = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in allowed:
            raise ValueError(f"Logging level must be one of: {allowed}")
        return v.upper()


class Config(BaseModel):
    """Main configuration model."""

    collection: CollectionConfig = Field(
        default_factory=CollectionConfig, description="Collection configuration"
    )
    refresh: RefreshConfig = Field(
        default_factory=RefreshConfig, description="Source refresh configuration"
    )
    browser: BrowserConfig = Field(
        default_factory=BrowserConfig, description="Browser configuration"
    )
    logging: LoggingConfig = Field(
        default_factory=LoggingConfig, description="Logging configuration"
    )

    model_config = ConfigDict(
        validate_assignment=True,
        populate_by_name=True,
    )
