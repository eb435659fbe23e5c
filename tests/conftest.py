"""Pytest configuration to ensure the `src` package layout is importable.

This adds the `src/` directory to `sys.path` so tests can import the
`tetramaster` package (e.g., `from tetramaster.api.app import create_app`)
without requiring an editable install in CI. The project root is added too so
the `main` launcher can be imported.
"""

import sys
from pathlib import Path

ROOT_PATH = Path(__file__).resolve().parents[1]
SRC_PATH = ROOT_PATH / "src"
for path in (SRC_PATH, ROOT_PATH):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))
