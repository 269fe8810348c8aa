"""
Shared Supabase client for the Juzk UI (auth, data store, admin).

Lazy-loaded once per Streamlit session and reused by all UI modules.
Returns None when cloud sync is not configured; callers then use the local store.
"""

import streamlit as st

from juzk.config.logging_config import setup_logger
from juzk.services.data_store import create_supabase_client

logger = setup_logger(__name__)

SESSION_KEY = "ui_supabase"


def get_supabase_client():
    """Lazy-load synchronous Supabase client for the UI."""
    if SESSION_KEY not in st.session_state:
        try:
            st.session_state[SESSION_KEY] = create_supabase_client()
        except Exception as e:
            logger.warning("Supabase client unavailable, falling back to local store: %s", e)
            st.session_state[SESSION_KEY] = None
    return st.session_state[SESSION_KEY]
