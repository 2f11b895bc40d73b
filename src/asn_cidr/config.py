"""Runtime settings read from the environment (and an optional ``.env`` file)."""
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

BROWSER_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/131.0.0.0 Safari/537.36"
)


def _f(name: str, default: float) -> float:
    try:
        return float(os.getenv(name, default))
    except ValueError:
        return default


@dataclass(frozen=True)
class Settings:
    output_dir: Path = Path(".")
    timeout: float = 30.0
    user_agent: str = BROWSER_USER_AGENT
    log_level: str = "WARNING"


def get_settings() -> Settings:
    """Load settings from ``ASN_CIDR_*`` environment variables."""
    load_dotenv()

    return Settings(
        output_dir=Path(os.getenv("ASN_CIDR_OUTPUT_DIR", ".")),
        timeout=_f("ASN_CIDR_TIMEOUT", 30.0),
        user_agent=os.getenv("ASN_CIDR_USER_AGENT", BROWSER_USER_AGENT),
        log_level=os.getenv("ASN_CIDR_LOG_LEVEL", "WARNING").upper(),
    )
