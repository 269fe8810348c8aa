#!/usr/bin/env python3
"""
Juzk SAJ - Main Entry Point

Usage:
    python main.py                       # Run Streamlit UI (default)
    python main.py --seed [--office ID]  # Load demo data into the configured store
    python main.py --clear [--office ID] # Delete all clients, cases and theses of the office
"""

import argparse
import subprocess
import sys
from pathlib import Path

# Ensure project root is in path
PROJECT_ROOT = Path(__file__).parent
sys.path.insert(0, str(PROJECT_ROOT))

from juzk.config.logging_config import logger
from juzk.domain.errors import StoreUnavailableError
from juzk.services.data_store import get_data_store


def run_streamlit():
    """Launch the Streamlit web interface"""
    app_path = PROJECT_ROOT / "app.py"
    subprocess.run(["streamlit", "run", str(app_path)], check=True)


def run_maintenance(args: argparse.Namespace) -> int:
    store = get_data_store(args.office)
    try:
        if args.seed:
            store.seed_mock_data()
            logger.info("Demo data loaded (backend=%s, office=%s)", store.backend, store.office_id)
        else:
            store.clear_all_data()
            logger.info("All data cleared (backend=%s, office=%s)", store.backend, store.office_id)
    except StoreUnavailableError as e:
        logger.error("Maintenance failed: %s", e)
        return 1
    return 0


def main():
    """Main entry point"""
    parser = argparse.ArgumentParser(description="Juzk SAJ")
    group = parser.add_mutually_exclusive_group()
    group.add_argument("--seed", action="store_true", help="load demo data")
    group.add_argument("--clear", action="store_true", help="delete all practice data")
    parser.add_argument("--office", default=None, help="office id (defaults to the local 'default' office)")
    args = parser.parse_args()

    if args.seed or args.clear:
        sys.exit(run_maintenance(args))
    run_streamlit()


if __name__ == "__main__":
    main()
