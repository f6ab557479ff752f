# /boltpath/core/config.py

"""
Runtime configuration for the boltpath backend.

Values come from the process environment, optionally populated from a local
`.env` file. Nothing here is persisted; every setting only shapes how a
single running instance starts up.
"""

import logging
import os

from dotenv import load_dotenv

load_dotenv()

# Seed the store with the demo roster on startup (disable for an empty classroom).
SEED_MOCK_DATA = os.getenv("BOLTPATH_SEED_MOCK_DATA", "true").lower() == "true"

# Comma-separated list of origins allowed by the CORS middleware.
CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("BOLTPATH_CORS_ORIGINS", "*").split(",")
    if origin.strip()
]

LOG_LEVEL = os.getenv("BOLTPATH_LOG_LEVEL", "INFO").upper()
if not isinstance(logging.getLevelName(LOG_LEVEL), int):
    raise ValueError(
        f"BOLTPATH_LOG_LEVEL must be one of DEBUG, INFO, WARNING, ERROR or CRITICAL, got {LOG_LEVEL!r}"
    )
