#!/usr/bin/env python3
"""Create sample CSV exports in the default refresh source directories."""

import csv
import json
import os
import sys
from datetime import date
from pathlib import Path

COLUMNS = [
    "Title",
    "Original Title",
    "Directors",
    "Release Year",
    "Genres",
    "Runtime",
    "Languages",
    "Cast",
    "Summary",
    "Rating",
    "Number of Votes",
    "Country of Origin",
    "Film Rating",
    "IMDB ID",
]

# (title, original title, directors, year, genres, runtime, languages, cast, rating, votes,
#  country, film rating, imdb id)
OLIVIER_MOVIES = [
    ("Matrix", "The Matrix", "Lana Wachowski, Lilly Wachowski", "1999", "Action, Science Fiction",
     "136", "English", [("Keanu Reeves", "Neo"), ("Laurence Fishburne", "Morpheus"),
                        ("Carrie-Anne Moss", "Trinity"), ("Hugo Weaving", "Agent Smith")],
     "8.7", "2100000", "United States", "12", "tt0133093"),
    ("Le Fabuleux Destin d'Amélie Poulain", "", "Jean-Pierre Jeunet", "2001",
     "Comédie, Romance", "122", "français", [("Audrey Tautou", "Amélie Poulain"),
                                             ("Mathieu Kassovitz", "Nino Quincampoix")],
     "8.3", "780000", "France", "TP", "tt0211915"),
    ("Le Voyage de Chihiro", "千と千尋の神隠し", "Hayao Miyazaki", "2001",
     "Animation, Fantastique, Aventure", "125", "japonais", [("Rumi Hiiragi", "Chihiro")],
     "8.6", "850000", "Japan", "TP", "tt0245429"),
]

LOIC_MOVIES = [
    ("Matrix", "The Matrix", "Lana Wachowski, Lilly Wachowski", "1999", "Action, Science Fiction",
     "136", "English", [("Keanu Reeves", "Neo")], "8.7", "2100000", "United States", "12",
     "tt0133093"),
    ("La Haine", "", "Mathieu Kassovitz", "1995", "Drame, Crime", "98", "français",
     [("Vincent Cassel", "Vinz"), ("Hubert Koundé", "Hubert"), ("Saïd Taghmaoui", "Saïd")],
     "8.1", "190000", "France", "12", "tt0113247"),
    ("Parasite", "기생충", "Bong Joon Ho", "2019", "Thriller, Drame, Comédie", "132", "coréen",
     [("Song Kang-ho", "Ki-taek")], "8.5", "950000", "South Korea", "16", "tt6751668"),
]


def write_export(directory: Path, movies: list) -> Path:
    """Write one dated export file.

    Args:
        directory: Source directory.
        movies: Rows to write.

    Returns:
        Path of the created file.
    """
    directory.mkdir(parents=True, exist_ok=True)
    export_path = directory / f"export-{date.today():%Y-%m-%d}.csv"

    with open(export_path, "w", encoding="utf-8", newline="") as f:
        writer = csv.writer(f)
        writer.writerow(COLUMNS)
        for movie in movies:
            *head, cast, rating, votes, country, film_rating, imdb_id = movie
            cast_json = json.dumps(
                [{"actor": actor, "character": character} for actor, character in cast],
                ensure_ascii=False,
            )
            writer.writerow([*head, cast_json, "", rating, votes, country, film_rating, imdb_id])

    return export_path


def main() -> None:
    """Create the sample exports under ``public/datasources``."""
    root = Path(os.environ.get("MOVIE_BROWSER_ROOT", ".")).resolve()
    datasources = root / "public" / "datasources"

    try:
        olivier = write_export(datasources / "le_maitre_de_l_arbre", OLIVIER_MOVIES)
        loic = write_export(datasources / "le_pianiste", LOIC_MOVIES)
    except PermissionError as e:
        print(f"Permission denied: {e}")
        sys.exit(1)

    print(f"Created {olivier}")
    print(f"Created {loic}")
    print("Run 'movie-browser refresh' to copy them to the canonical files.")


if __name__ == "__main__":
    main()
