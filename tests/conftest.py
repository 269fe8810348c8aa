"""
Pytest configuration and shared fixtures.
Run from project root: python -m pytest tests/ -v
"""

import os
import sys
import tempfile
from pathlib import Path

# Set env vars before any app imports (ensures deterministic test behavior).
# An empty SUPABASE_URL keeps the local store as the default backend.
os.environ["SUPABASE_URL"] = ""
os.environ["SUPABASE_KEY"] = ""
os.environ.setdefault("OPENAI_API_KEY", "test-key")
os.environ["DEV_MASTER_KEY"] = ""
os.environ["LOCAL_DATA_DIR"] = tempfile.mkdtemp(prefix="juzk-tests-")
os.environ.setdefault("LOG_FORMAT", "simple")

# Ensure project root is on path when running tests
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))
