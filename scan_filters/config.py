from pathlib import Path
import os
import copy
import json

LOG_LEVEL = os.getenv("SCAN_FILTERS_LOG_LEVEL", "INFO").upper()
DEBUG = os.getenv("SCAN_FILTERS_DEBUG", "0").lower() in ("1", "true", "yes")

PACKAGE_DIR = Path(__file__).resolve().parent
CONFIG_TEMPLATE_PATH = PACKAGE_DIR / "config_template.json"

FILTER_SECTIONS = ["range_filter", "temp_median_filter"]

with open(CONFIG_TEMPLATE_PATH, "r", encoding="utf-8") as fh:
    DEFAULT_CONFIG = json.load(fh)


def merge_configs(user_config: dict) -> dict:
    """Merge user config with defaults. User config overwrites defaults."""
    merged = copy.deepcopy(DEFAULT_CONFIG)

    if not user_config:
        return merged

    for section in FILTER_SECTIONS:
        if section in user_config:
            for key, value in user_config[section].items():
                merged[section][key] = value

    return merged
