"""Allow running the CLI with ``python -m movie_browser.cli``."""

from .main import main

main()
