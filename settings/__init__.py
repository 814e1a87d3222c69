"""Application settings."""

import os
from pathlib import Path

# Database
DB_PATH = os.getenv("QV_DB_PATH", "quadvote.duckdb")

# Logging
LOG_DIR = Path(os.getenv("QV_LOG_DIR", "logs"))
LOG_LEVEL = os.getenv("QV_LOG_LEVEL", "INFO")

# Network graph canvas
CANVAS_WIDTH = int(os.getenv("QV_CANVAS_WIDTH", "700"))
CANVAS_HEIGHT = int(os.getenv("QV_CANVAS_HEIGHT", "500"))

# Analytics stages run on a thread pool; 1 runs them sequentially
ANALYTICS_WORKERS = int(os.getenv("QV_ANALYTICS_WORKERS", "4"))
