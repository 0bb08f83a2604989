"""Runtime settings, overridable through environment variables."""

import os
from pathlib import Path

# Where converted libraries are written when no output path is given
OUTPUT_DIR = Path(os.environ.get("LIBRARY_LOADER_OUTPUT", Path.home() / "library_loader"))

# ECAD label used by the CLI when --format is omitted
DEFAULT_FORMAT = os.environ.get("LIBRARY_LOADER_FORMAT", "kicad")

LOG_LEVEL = os.environ.get("LIBRARY_LOADER_LOG_LEVEL", "INFO").upper()
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
if LOG_LEVEL not in LOG_LEVELS:
    LOG_LEVEL = "INFO"
