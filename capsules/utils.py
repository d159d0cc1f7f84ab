"""
utils.py
--------
Shared helpers: launch-date normalization and log setup for the CLIs.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Optional

import pandas as pd

from capsules.config import LOG_DIR

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"


def setup_logging(name: str, log_dir: Optional[Path] = None) -> Path:
    """Send log records to <log_dir>/<name>.log and return that path."""
    log_dir = Path(log_dir or LOG_DIR)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / f"{name}.log"
    logging.basicConfig(
        filename=str(log_file),
        level=logging.INFO,
        format=LOG_FORMAT,
    )
    return log_file


def format_launch_date(value: Any) -> Optional[str]:
    """Return 'April 3, 2019' for an ISO timestamp, None if missing or unparseable."""
    if not isinstance(value, str) or not value.strip():
        return None
    ts = pd.to_datetime(value, errors="coerce", utc=True)
    if pd.isna(ts):
        return None
    return f"{ts.strftime('%B')} {ts.day}, {ts.year}"
