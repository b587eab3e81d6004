from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

from voter_browser.config.model import GlobalConfig
from voter_browser.core.exceptions import ConfigError

logger = logging.getLogger(__name__)

ENV_OVERRIDES = {
    "VOTER_BROWSER_SAMPLE_SIZE": "sample_size",
    "VOTER_BROWSER_SAMPLE_SEED": "sample_seed",
    "VOTER_BROWSER_CSV_DELIMITER": "csv_delimiter",
}


def _as_int(raw: Any, key: str, *, minimum: int = 0, allow_none: bool = False) -> Optional[int]:
    if raw is None or raw == "":
        if allow_none:
            return None
        raise ConfigError(f"'{key}' must be an integer")
    try:
        value = int(raw)
    except (TypeError, ValueError):
        raise ConfigError(f"'{key}' must be an integer, got {raw!r}")
    if value < minimum:
        raise ConfigError(f"'{key}' must be >= {minimum}, got {value}")
    return value


def load_global_config(root: Path) -> GlobalConfig:
    """
    Load configuration from a directory.

    Expected structure:

        root/
            global.json      (optional; defaults are used when absent)

    Environment variables VOTER_BROWSER_SAMPLE_SIZE, VOTER_BROWSER_SAMPLE_SEED and
    VOTER_BROWSER_CSV_DELIMITER override the file.

    :param root: Directory containing 'global.json'.
    :return: A GlobalConfig instance.
    :raises ConfigError: if global.json is malformed or a value is invalid.
    """
    root = Path(root)
    logger.info(
        "Loading global config",
        extra={"config_root": str(root)},
    )

    raw: Dict[str, Any] = {}
    global_path = root / "global.json"
    if global_path.is_file():
        try:
            with global_path.open() as f:
                raw = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in {global_path}: {e}")
        if not isinstance(raw, dict):
            raise ConfigError(f"{global_path} must contain a JSON object")
    else:
        logger.warning(f"No global.json found at {global_path}, using defaults")

    for env_name, key in ENV_OVERRIDES.items():
        if env_name in os.environ:
            raw[key] = os.environ[env_name]

    defaults = GlobalConfig()

    delimiter = str(raw.get("csv_delimiter", defaults.csv_delimiter))
    if len(delimiter) != 1:
        raise ConfigError(f"'csv_delimiter' must be a single character, got {delimiter!r}")

    return GlobalConfig(
        ui_title=str(raw.get("ui_title", defaults.ui_title)),
        subtitle=str(raw.get("subtitle", defaults.subtitle)),
        sample_size=_as_int(raw.get("sample_size", defaults.sample_size), "sample_size"),
        sample_seed=_as_int(raw.get("sample_seed"), "sample_seed", allow_none=True),
        csv_delimiter=delimiter,
        page_size=_as_int(raw.get("page_size", defaults.page_size), "page_size", minimum=1),
        max_upload_bytes=_as_int(raw.get("max_upload_bytes", defaults.max_upload_bytes), "max_upload_bytes", minimum=1),
    )
