"""
Configuration settings for Juzk SAJ
"""

import os
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

# Use find_dotenv() to locate .env regardless of the current working directory.
# Falls back to an explicit path relative to this file (project root) if not found.
_dotenv_path = find_dotenv(usecwd=True) or str(Path(__file__).resolve().parent.parent.parent / ".env")
load_dotenv(_dotenv_path)


def _env_flag(name: str, default: str) -> bool:
    return (os.getenv(name, default)).strip().lower() in ("true", "1", "yes")


# ============================================
# Environment-based Configuration
# ============================================


class Config:
    """
    Centralized configuration loaded from environment variables.
    Edit .env file to change these values.
    """

    # Backend-as-a-service. When either is missing the app runs on the local JSON store.
    SUPABASE_URL: str = os.getenv("SUPABASE_URL", "").strip()
    SUPABASE_KEY: str = (os.getenv("SUPABASE_KEY") or os.getenv("SUPABASE_ANON_KEY") or "").strip()

    # Local fallback store (one JSON file per office)
    LOCAL_DATA_DIR: str = (os.getenv("LOCAL_DATA_DIR") or "data/local_store").strip()

    # AI models: "fast" for structured summaries, "pro" for long-form drafting and research.
    AI_FAST_MODEL: str = os.getenv("AI_FAST_MODEL", "gpt-4o-mini")
    AI_PRO_MODEL: str = os.getenv("AI_PRO_MODEL", "gpt-4o")
    AI_TEMPERATURE: float = float(os.getenv("AI_TEMPERATURE", "0.3"))
    AI_MAX_TOKENS: int = int(os.getenv("AI_MAX_TOKENS", "4000"))
    AI_REQUEST_TIMEOUT: int = int(os.getenv("AI_REQUEST_TIMEOUT", "90"))
    # Set to false to hide the AI views when no OpenAI key is provisioned.
    AI_ENABLED: bool = _env_flag("AI_ENABLED", "true")

    # Input length limit (chars) for AI prompts - reject oversize text to avoid abuse and cost
    MAX_AI_INPUT_LENGTH: int = int(os.getenv("MAX_AI_INPUT_LENGTH", "20000"))

    # Clients view pagination
    CLIENTS_PAGE_SIZE: int = int(os.getenv("CLIENTS_PAGE_SIZE", "12"))

    # Developer login. Empty disables the developer panel entirely.
    DEV_MASTER_KEY: str = os.getenv("DEV_MASTER_KEY", "").strip()

    # Months shown in the finance chart
    FINANCE_CHART_MONTHS: int = int(os.getenv("FINANCE_CHART_MONTHS", "6"))


# Singleton instance
config = Config()


def is_supabase_configured() -> bool:
    """True when cloud sync is usable (URL looks like http(s) and a key is present)."""
    return bool(config.SUPABASE_URL) and config.SUPABASE_URL.startswith("http") and bool(config.SUPABASE_KEY)


def validate_config_dependencies() -> list[str]:
    """
    Cross-field validation of the loaded configuration.
    Returns a list of human-readable error strings (empty when valid).
    """
    errors: list[str] = []

    if config.AI_ENABLED and not os.getenv("OPENAI_API_KEY", "").strip():
        errors.append("AI_ENABLED=true but OPENAI_API_KEY is missing. Set it or disable AI.")

    if config.SUPABASE_URL and not config.SUPABASE_URL.startswith("http"):
        errors.append(f"SUPABASE_URL must start with http(s), got '{config.SUPABASE_URL}'.")
    if config.SUPABASE_URL and not config.SUPABASE_KEY:
        errors.append("SUPABASE_URL is set but SUPABASE_KEY is missing.")

    if not config.AI_FAST_MODEL:
        errors.append("AI_FAST_MODEL must not be empty.")
    if not config.AI_PRO_MODEL:
        errors.append("AI_PRO_MODEL must not be empty.")

    if not 0.0 <= config.AI_TEMPERATURE <= 2.0:
        errors.append(f"AI_TEMPERATURE must be between 0 and 2, got {config.AI_TEMPERATURE}.")
    if config.AI_MAX_TOKENS <= 0:
        errors.append(f"AI_MAX_TOKENS must be positive, got {config.AI_MAX_TOKENS}.")
    if config.AI_REQUEST_TIMEOUT <= 0:
        errors.append(f"AI_REQUEST_TIMEOUT must be positive, got {config.AI_REQUEST_TIMEOUT}.")
    if config.MAX_AI_INPUT_LENGTH <= 0:
        errors.append(f"MAX_AI_INPUT_LENGTH must be positive, got {config.MAX_AI_INPUT_LENGTH}.")

    if config.CLIENTS_PAGE_SIZE <= 0:
        errors.append(f"CLIENTS_PAGE_SIZE must be positive, got {config.CLIENTS_PAGE_SIZE}.")
    if not 1 <= config.FINANCE_CHART_MONTHS <= 24:
        errors.append(f"FINANCE_CHART_MONTHS must be between 1 and 24, got {config.FINANCE_CHART_MONTHS}.")

    return errors


def validate_env_for_app() -> None:
    """
    Validate configuration for the web app. Call at startup.
    Raises SystemExit with clear message if the configuration is unusable.
    """
    errors = validate_config_dependencies()
    if errors:
        raise SystemExit("Invalid configuration: " + " ".join(errors))


# ============================================
# UI Configuration (static values)
# ============================================

APP_TITLE = "Juzk SAJ"
APP_ICON = "⚖️"

# Streamlit Page Config
PAGE_CONFIG = {
    "page_title": APP_TITLE,
    "page_icon": APP_ICON,
    "layout": "wide",
    "initial_sidebar_state": "expanded",
}

DEFAULT_RESPONSIBLE = "Dr. Nexus IA"
