"""Configuration constants and paths for chuk-css-builders."""

import os
from pathlib import Path

# Adapter tables shipped with the package
LIBRARY_PATH = Path(__file__).parent / "adapters" / "library"

# Project tables override library tables with the same name
# Override via CHUK_CSS_ADAPTERS_DIR environment variable
_project_dir = os.getenv("CHUK_CSS_ADAPTERS_DIR")
PROJECT_ADAPTERS_DIR: Path | None = Path(_project_dir) if _project_dir else None

# Output separators
CLASS_SEPARATOR = " "
STYLE_SEPARATOR = "; "

# Table schema version - frozen for v1
ADAPTER_SCHEMA = "adapter/v1"
