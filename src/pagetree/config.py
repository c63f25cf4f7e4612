"""Local configuration for pagetree."""

from __future__ import annotations

import os
from pathlib import Path


DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_SNAPSHOT_PARSER = "lxml"

# Optional TOML catalog replacing the built-in component kinds.
_catalog_path = os.getenv("PAGETREE_CATALOG_PATH")
PAGETREE_CATALOG_PATH = Path(_catalog_path).expanduser().resolve() if _catalog_path else None
PAGETREE_LOG_LEVEL = os.getenv("PAGETREE_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
PAGETREE_SNAPSHOT_PARSER = os.getenv("PAGETREE_SNAPSHOT_PARSER", DEFAULT_SNAPSHOT_PARSER)
