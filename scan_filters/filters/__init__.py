from typing import Any, Dict, Optional
import logging

from .. import config
from ..errors import ConfigError
from .base_filter import BaseFilter
from .range_filter import RangeFilter
from .temp_median_filter import TempMedianFilter

logger = logging.getLogger(__name__)

# filter type -> (class, config keys passed positionally)
FILTER_TYPES = {
    "range_filter": (RangeFilter, ("range_min", "range_max")),
    "temp_median_filter": (TempMedianFilter, ("num_samples", "window_depth")),
}


def create_filter(filter_type: str, config_dict: Optional[Dict[str, Any]] = None,
                  filter_id: Optional[str] = None) -> BaseFilter:
    """
    Build one filter from the default configuration merged with config_dict.

    Args:
        filter_type: A key of FILTER_TYPES.
        config_dict: Partial config, keyed by filter section like config_template.json.
        filter_id: Name used in log lines. Defaults to filter_type.
    """
    if filter_type not in FILTER_TYPES:
        raise ConfigError(f"Unknown filter type: {filter_type}. Use one of {sorted(FILTER_TYPES)}.")

    filter_cls, keys = FILTER_TYPES[filter_type]
    section = config.merge_configs(config_dict)[filter_type]
    logger.debug(f"[INIT] Creating {filter_type} with config: {section}")
    return filter_cls(*(section[key] for key in keys), filter_id=filter_id or filter_type)


__all__ = ["BaseFilter", "RangeFilter", "TempMedianFilter", "FILTER_TYPES", "create_filter"]
