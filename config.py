"""
Settings for the loader, exports, CLI and dashboard.

Values come from the environment, after loading a .env file from the project
directory or the working directory. The aggregator reads none of these.
"""

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

BASE_DIR = Path(__file__).resolve().parent
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def load_env(project_dir: str | Path | None = None) -> Path | None:
    """Load the first .env found; returns its path, or None if there is none."""
    candidates = [Path(project_dir)] if project_dir else []
    candidates += [BASE_DIR, Path.cwd()]
    for d in candidates:
        env_file = d / ".env"
        if env_file.exists():
            load_dotenv(env_file)
            return env_file
    return None


def get_data_dir() -> Path:
    return Path(os.getenv("SALES_DATA_DIR", str(BASE_DIR / "data")))


def get_output_dir() -> Path:
    return Path(os.getenv("SALES_OUTPUT_DIR", str(BASE_DIR / "outputs")))


def get_log_level() -> str:
    return os.getenv("SALES_LOG_LEVEL", "INFO").upper()


def configure_logging(level: str | None = None) -> None:
    logging.basicConfig(level=level or get_log_level(), format=LOG_FORMAT)
