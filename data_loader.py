"""
Dataset loading: JSON on disk -> the mapping analyze_sales_data expects.

Only parsing happens here; shape checks are done by the aggregator.
"""

import json
import logging
from pathlib import Path
from typing import Any

from config import BASE_DIR, get_data_dir
from sales_analysis import DATASET_COLLECTIONS

logger = logging.getLogger(__name__)

DEFAULT_DATASET_NAME = "dataset.json"


def _read_json(path: Path) -> Any:
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def load_dataset(path: str | Path) -> dict[str, Any]:
    """
    Load a dataset from a single JSON file holding all four collections,
    or from a directory with one <collection>.json file per collection.
    """
    path = Path(path)
    if path.is_dir():
        dataset = {}
        for name in DATASET_COLLECTIONS:
            file_path = path / f"{name}.json"
            if not file_path.is_file():
                raise FileNotFoundError(f"Missing collection file: {file_path}")
            dataset[name] = _read_json(file_path)
    else:
        dataset = _read_json(path)

    if isinstance(dataset, dict):
        counts = {k: len(v) for k, v in dataset.items() if isinstance(v, list)}
        logger.info(f"Loaded dataset from {path}: {counts}")
    return dataset


def load_default_dataset() -> tuple[dict[str, Any] | None, str]:
    for path in [
        get_data_dir() / DEFAULT_DATASET_NAME,
        BASE_DIR / DEFAULT_DATASET_NAME,
    ]:
        if path.is_file():
            return load_dataset(path), path.name
    return None, ""
