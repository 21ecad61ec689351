from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

BASE_DIR = Path(__file__).resolve().parents[1]
DEFAULT_OUTPUT_DIR = Path("outputs")
DEFAULT_SHARE_BASE_URL = "http://localhost:3000/"


@dataclass(frozen=True)
class Settings:
    output_dir: Path
    share_base_url: str
    log_level: str
    validate_plans: bool


def load_settings() -> Settings:
    """Read settings from the environment, after loading any .env files."""
    load_dotenv(BASE_DIR / ".env")
    load_dotenv()  # load defaults if present
    return Settings(
        output_dir=Path(os.getenv("SCRIPT_ARCHITECT_OUTPUT_DIR", str(DEFAULT_OUTPUT_DIR))),
        share_base_url=os.getenv("SCRIPT_ARCHITECT_SHARE_BASE_URL", DEFAULT_SHARE_BASE_URL),
        log_level=os.getenv("APP_LOG_LEVEL", "INFO").upper(),
        validate_plans=get_env_flag("SCRIPT_ARCHITECT_VALIDATE"),
    )


def ensure_output_dir(settings: Settings) -> Path:
    """Create the export folder."""
    settings.output_dir.mkdir(parents=True, exist_ok=True)
    return settings.output_dir


def get_env_flag(name: str, default: bool = False) -> bool:
    """Read a boolean flag from environment variables."""
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}
