"""Pytest configuration and fixtures."""

import json

import pytest

from movie_browser.config import ConfigManager
from movie_browser.core.models import MovieRecord
from movie_browser.infrastructure import Container

CSV_HEADER = (
    "Title,Original Title,Directors,Release Year,Genres,Runtime,Languages,Cast,"
    "Summary,Rating,Number of Votes,Country of Origin,Film Rating,IMDB ID"
)

MATRIX_CAST = json.dumps(
    [
        {"actor": "Keanu Reeves", "character": "Neo"},
        {"actor": "Laurence Fishburne", "character": "Morpheus"},
    ]
)


def csv_cell(value: str) -> str:
    """Quote a CSV cell."""
    return '"' + value.replace('"', '""') + '"'


OLIVIER_CSV = "\n".join(
    [
        CSV_HEADER,
        ",".join(
            [
                "Matrix",
                "The Matrix",
                csv_cell("Lana Wachowski, Lilly Wachowski"),
                "1999",
                csv_cell("Action, Science Fiction"),
                "136",
                "English",
                csv_cell(MATRIX_CAST),
                "Neo discovers the truth.",
                "8.7",
                "2100000",
                "United States",
                "12",
                "tt0133093",
            ]
        ),
        "Amélie,,Jean-Pierre Jeunet,2001,\"Comédie, Romance\",122,français,,,8.3,,France,TP,",
        ",Ghost Film,Nobody,2000,Drame,90,,,,,,,,",
    ]
)

LOIC_CSV = "\n".join(
    [
        CSV_HEADER,
        "La Haine,,Mathieu Kassovitz,1995,\"Drame, Crime\",98,"
        "\"français, English\",,,8.1,,France,12,",
        "Parasite,기생충,Bong Joon Ho,2019,\"Thriller, Drame\","
        "132,coréen,,,8.5,,South Korea,16,",
    ]
)


def make_record(title: str, source: str = "Olivier", **fields) -> MovieRecord:
    """Build a record from attribute names."""
    return MovieRecord(title=title, source=source, **fields)


@pytest.fixture
def sample_sources(tmp_path):
    """Write the two sample collections to disk."""
    public = tmp_path / "public"
    public.mkdir()
    olivier = public / "movies-olivier.csv"
    olivier.write_text(OLIVIER_CSV, encoding="utf-8")
    loic = public / "movies-loic.csv"
    loic.write_text(LOIC_CSV, encoding="utf-8")
    return {"Olivier": olivier, "Loïc": loic}


@pytest.fixture
def temp_config_file(tmp_path, sample_sources):
    """Create a temporary configuration file."""
    config_content = f"""
collection:
  sources:
    - location: "{sample_sources['Olivier']}"
      tag: "Olivier"
    - location: "{sample_sources['Loïc']}"
      tag: "Loïc"

refresh:
  sources:
    - name: "Olivier"
      source_dir: "{tmp_path / 'datasources' / 'olivier'}"
      target_file: "{tmp_path / 'refreshed' / 'movies-olivier.csv'}"
    - name: "Loïc"
      source_dir: "{tmp_path / 'datasources' / 'loic'}"
      target_file: "{tmp_path / 'refreshed' / 'movies-loic.csv'}"

logging:
  level: "WARNING"
"""
    config_file = tmp_path / "config.yaml"
    config_file.write_text(config_content, encoding="utf-8")
    return config_file


@pytest.fixture
def config_manager(temp_config_file):
    """Create a configuration manager with test config."""
    return ConfigManager(temp_config_file)


@pytest.fixture
def config(config_manager):
    """Load test configuration."""
    return config_manager.load_config()


@pytest.fixture
def container(config_manager):
    """Create a test container with default services."""
    container = Container(config_manager)
    container.configure_default_services()
    return container


@pytest.fixture
def sample_records():
    """Small in-memory collection."""
    return (
        make_record(
            "Matrix",
            original_title="The Matrix",
            directors="Lana Wachowski, Lilly Wachowski",
            release_year="1999",
            genres="Action, Science Fiction",
            languages="English",
            film_rating="12",
        ),
        make_record(
            "Amélie",
            directors="Jean-Pierre Jeunet",
            release_year="2001",
            genres="Comédie, Romance",
            languages="français",
            film_rating="TP",
        ),
        make_record(
            "La Haine",
            source="Loïc",
            directors="Mathieu Kassovitz",
            release_year="1995",
            genres="Drame, Crime",
            languages="Français, English",
            film_rating="12",
        ),
        make_record(
            "Matrix Reloaded",
            source="Loïc",
            directors="Lana Wachowski, Lilly Wachowski",
            release_year="2003",
            genres="Science Fiction",
            languages="English",
            film_rating="12",
        ),
    )


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "integration: tests that run the command line")


@pytest.fixture
def olivier_csv():
    """Sample export with one untitled row."""
    return OLIVIER_CSV


@pytest.fixture
def loic_csv():
    """Second sample export."""
    return LOIC_CSV


@pytest.fixture
def matrix_cast():
    """Serialized cast of the first sample movie."""
    return MATRIX_CAST
