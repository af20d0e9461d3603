from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Tuple

from marketing_browser.config.model import (
    DEFAULT_DATA_FILE,
    DEFAULT_SUBTITLE,
    DEFAULT_UI_TITLE,
    GlobalConfig,
)
from marketing_browser.core.dataset import Dataset
from marketing_browser.core.exceptions import ConfigError, DatasetSchemaError
from marketing_browser.validation.record_validation import build_records

logger = logging.getLogger(__name__)


def load_global_config(root: Path) -> GlobalConfig:
    """
    Load configuration from a config directory.

    Expected structure:

        root/
            global.json

    global.json keys (all optional):

    - ui_title: title for the UI, defaults to 'Marketing Dashboard Performance Optimization'
    - subtitle: navbar subtitle
    - data_file: records JSON. If relative, it is resolved relative to 'root'.

    :param root: Directory containing 'global.json'.
    :return: A GlobalConfig instance.
    :raises FileNotFoundError: if global.json does not exist.
    :raises ConfigError: if global.json is not a JSON object or a key has the wrong type.
    """
    root = Path(root)
    logger.info("Loading global config", extra={"config_root": str(root)})

    global_path = root / "global.json"
    if not global_path.is_file():
        raise FileNotFoundError(f"File not found at {global_path}")

    with global_path.open(encoding="utf-8") as f:
        try:
            raw_global = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"{global_path} is not valid JSON: {e}") from e

    if not isinstance(raw_global, dict):
        raise ConfigError(f"{global_path} must contain a JSON object")

    for key in ("ui_title", "subtitle", "data_file"):
        value = raw_global.get(key)
        if value is not None and not isinstance(value, str):
            raise ConfigError(f"{global_path}: '{key}' must be a string, got {type(value).__name__}")

    # Absolute paths are used as-is, relative ones are resolved against the config root.
    data_file = Path(raw_global.get("data_file") or DEFAULT_DATA_FILE)
    if not data_file.is_absolute():
        data_file = (root / data_file).resolve()

    return GlobalConfig(
        ui_title=raw_global.get("ui_title") or DEFAULT_UI_TITLE,
        subtitle=raw_global.get("subtitle") or DEFAULT_SUBTITLE,
        data_file=data_file,
    )


def load_records(path: Path) -> Dataset:
    """
    Read a JSON array of record objects into an immutable Dataset.

    :raises FileNotFoundError: if the file does not exist.
    :raises DatasetSchemaError: if the top-level value is not a list.
    :raises ValidationError: if any record is malformed.
    """
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"Records file not found at {path}")

    with path.open(encoding="utf-8") as f:
        try:
            raw: Any = json.load(f)
        except json.JSONDecodeError as e:
            raise DatasetSchemaError(f"{path} is not valid JSON: {e}") from e

    if not isinstance(raw, list):
        raise DatasetSchemaError(f"{path} must contain a JSON array of records")

    records = build_records(raw)
    dataset = Dataset(records, name=path.stem)

    logger.info(
        "Records loaded",
        extra={"path": str(path), "n_records": len(dataset)},
    )
    return dataset


def load_app_data(root: Path) -> Tuple[GlobalConfig, Dataset]:
    """
    Load the global configuration and the dataset it points at.

    Main entrypoint used by the UI.
    """
    global_config = load_global_config(root)
    dataset = load_records(global_config.data_file)
    return global_config, dataset
