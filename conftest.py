"""Root conftest: keep the repository root importable for app.py under AppTest."""

import pathlib
import sys

ROOT = pathlib.Path(__file__).resolve().parent

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))
