"""Integration test fixtures and configuration."""

import os
import subprocess
import sys
from pathlib import Path

import pytest
import yaml

PROJECT_ROOT = Path(__file__).parent.parent.parent


@pytest.fixture
def project_root():
    """Repository root."""
    return PROJECT_ROOT


@pytest.fixture
def export_dirs(tmp_path, olivier_csv, loic_csv):
    """Directories holding dated exports for the refresh command."""
    olivier_dir = tmp_path / "datasources" / "le_maitre_de_l_arbre"
    loic_dir = tmp_path / "datasources" / "le_pianiste"
    olivier_dir.mkdir(parents=True)
    loic_dir.mkdir(parents=True)
    (olivier_dir / "export-2024-06-01.csv").write_text(olivier_csv, encoding="utf-8")
    (loic_dir / "export-2024-06-02.csv").write_text(loic_csv, encoding="utf-8")
    return {"Olivier": olivier_dir, "Loïc": loic_dir}


@pytest.fixture
def integration_config(tmp_path, sample_sources, export_dirs):
    """Configuration file wired to the sample collections."""
    config_data = {
        "collection": {
            "sources": [
                {"location": str(sample_sources["Olivier"]), "tag": "Olivier"},
                {"location": str(sample_sources["Loïc"]), "tag": "Loïc"},
            ]
        },
        "refresh": {
            "sources": [
                {
                    "name": tag,
                    "source_dir": str(directory),
                    "target_file": str(tmp_path / "refreshed" / f"{directory.name}.csv"),
                }
                for tag, directory in export_dirs.items()
            ]
        },
        "browser": {"visible_columns": ["Title", "Release Year", "source"]},
        "logging": {"level": "WARNING"},
    }

    config_path = tmp_path / "integration_config.yaml"
    with open(config_path, "w", encoding="utf-8") as f:
        yaml.dump(config_data, f, allow_unicode=True)
    return config_path


@pytest.fixture
def run_cli():
    """Run the command line in a subprocess."""

    def _run(*args: str) -> subprocess.CompletedProcess:
        env = dict(os.environ)
        env["PYTHONPATH"] = os.pathsep.join(
            filter(None, [str(PROJECT_ROOT / "src"), env.get("PYTHONPATH")])
        )
        env["PYTHONIOENCODING"] = "utf-8"
        env.pop("MOVIE_BROWSER_CONFIG", None)
        return subprocess.run(
            [sys.executable, "-m", "movie_browser.cli", *args],
            capture_output=True,
            text=True,
            encoding="utf-8",
            cwd=PROJECT_ROOT,
            env=env,
            timeout=60,
        )

    return _run
