from abc import ABC, abstractmethod
from typing import Sequence
import logging

import numpy as np

from ..errors import ShapeError

logger = logging.getLogger(__name__)


class BaseFilter(ABC):
    """Common contract of every scan filter: one frame in, one frame out."""

    def __init__(self, filter_id: str):
        self.filter_id = filter_id

    @abstractmethod
    def update(self, frame: Sequence[float]) -> np.ndarray:
        """
        Filter one scan frame.
        Args:
            frame (array-like): Samples of one sweep, ordered by column.
        Returns:
            np.ndarray: New filtered frame of the same length.
        """
        pass

    @abstractmethod
    def reset(self):
        pass

    def _as_frame(self, frame: Sequence[float]) -> np.ndarray:
        try:
            arr = np.asarray(frame, dtype=np.float64)
        except (TypeError, ValueError) as e:
            logger.warning(f"[{self.filter_id}] Rejected frame that is not numeric: {e}")
            raise ShapeError(f"Invalid frame in {self.filter_id}: {e}") from e
        if arr.ndim != 1:
            logger.warning(f"[{self.filter_id}] Rejected frame with shape {arr.shape}")
            raise ShapeError(f"Invalid frame in {self.filter_id}: expected a 1-D frame, got shape {arr.shape}")
        return arr

    def __repr__(self) -> str:
        return f"{type(self).__name__}(filter_id={self.filter_id!r})"
