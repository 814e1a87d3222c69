#!/usr/bin/env python3
"""Run the analytics dashboard (Streamlit).

Usage:
    python run.py                       # Dashboard over QV_DB_PATH
    python run.py --db other.duckdb     # Dashboard over another database
    python run.py -- --server.port 8600 # Extra arguments go to streamlit
"""

import os
import subprocess
import sys
from pathlib import Path

app = Path(__file__).parent / "web" / "streamlit" / "app.py"
args = sys.argv[1:]

if args[:1] == ["--db"] and len(args) > 1:
    os.environ["QV_DB_PATH"] = args[1]
    args = args[2:]
if args[:1] == ["--"]:
    args = args[1:]

sys.exit(subprocess.run([sys.executable, "-m", "streamlit", "run", str(app), *args]).returncode)
