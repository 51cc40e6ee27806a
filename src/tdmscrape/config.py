"""Local configuration for tdmscrape."""

from __future__ import annotations

import os

from tdmscrape import __version__

DEFAULT_FETCH_TIMEOUT_S = 30.0
DEFAULT_USER_AGENT = f"tdmscrape/{__version__} (+https://github.com/agarmu/datamine-scraper)"
DEFAULT_PANDOC_PATH = "pandoc"

TDMSCRAPE_FETCH_TIMEOUT_S = float(os.getenv("TDMSCRAPE_FETCH_TIMEOUT_S", str(DEFAULT_FETCH_TIMEOUT_S)))
TDMSCRAPE_USER_AGENT = os.getenv("TDMSCRAPE_USER_AGENT", DEFAULT_USER_AGENT)
# Executable used to turn the generated Markdown into .ipynb.
TDMSCRAPE_PANDOC_PATH = os.getenv("TDMSCRAPE_PANDOC_PATH", DEFAULT_PANDOC_PATH)
