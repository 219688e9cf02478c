from typing import Sequence, Tuple
import math
import logging

import numpy as np

from ..errors import ConfigError
from .base_filter import BaseFilter

logger = logging.getLogger(__name__)


class RangeFilter(BaseFilter):
    """
    Crop every sample below range_min (resp. above range_max) to range_min
    (resp. range_max). Keeps no state between frames.
    """

    def __init__(self, range_min: float, range_max: float, filter_id: str = "range_filter"):
        super().__init__(filter_id)
        self.range_min, self.range_max = self._check_range(range_min, range_max)
        logger.info(f"[INIT] Range filter {self.filter_id} initialized with [{self.range_min}, {self.range_max}]")

    def set_range(self, range_min: float, range_max: float):
        """Replace both bounds. The old bounds stay in place if the new ones are rejected."""
        self.range_min, self.range_max = self._check_range(range_min, range_max)
        logger.info(f"[CONF] Range filter {self.filter_id} set to [{self.range_min}, {self.range_max}]")

    def get_range(self) -> Tuple[float, float]:
        return self.range_min, self.range_max

    def update(self, frame: Sequence[float]) -> np.ndarray:
        arr = self._as_frame(frame)
        return np.clip(arr, self.range_min, self.range_max)

    def reset(self):
        logger.debug(f"[RESET] Range filter {self.filter_id} has no state to reset")

    def _check_range(self, range_min: float, range_max: float) -> Tuple[float, float]:
        try:
            low, high = float(range_min), float(range_max)
        except (TypeError, ValueError) as e:
            logger.warning(f"[{self.filter_id}] Rejected non-numeric range [{range_min!r}, {range_max!r}]")
            raise ConfigError(f"Invalid range settings in {self.filter_id}: {e}") from e
        if math.isnan(low) or math.isnan(high) or low > high:
            logger.warning(f"[{self.filter_id}] Rejected range [{range_min}, {range_max}]")
            raise ConfigError(f"Invalid range settings in {self.filter_id}: "
                              f"need range_min <= range_max, got [{range_min}, {range_max}]")
        return low, high

    def __repr__(self) -> str:
        return f"RangeFilter(range_min={self.range_min}, range_max={self.range_max}, filter_id={self.filter_id!r})"
