from collections import deque
from typing import Optional, Sequence
import logging

import numpy as np

from ..errors import ConfigError, SampleError, ShapeError
from ..utils.order_statistics import ColumnWindow
from .base_filter import BaseFilter

logger = logging.getLogger(__name__)


def _is_positive_int(value) -> bool:
    return isinstance(value, (int, np.integer)) and not isinstance(value, bool) and value > 0


class TempMedianFilter(BaseFilter):
    """
    Temporal median of the current scan and the previous D-1 scans, per column.

    Each column keeps its own sorted window, so a frame costs O(N log D): one
    insertion, at most one eviction and a positional median lookup per column.
    Before D frames have been seen the median is taken over the frames so far.
    """

    def __init__(self, num_samples: int, window_depth: int, filter_id: str = "temp_median_filter"):
        """
        Args:
            num_samples (int): Number of samples (columns) N in every frame.
            window_depth (int): Number of scans D the median is taken over,
                the current one included.
        """
        super().__init__(filter_id)
        if not (_is_positive_int(num_samples) and _is_positive_int(window_depth)):
            logger.warning(f"[{filter_id}] Rejected N={num_samples!r}, D={window_depth!r}")
            raise ConfigError(f"Invalid number settings in {filter_id}: N and D must be positive integers, "
                              f"got N={num_samples!r}, D={window_depth!r}")
        self._num_samples = int(num_samples)
        self._window_depth = int(window_depth)

        self.columns = [ColumnWindow() for _ in range(self._num_samples)]
        # the oldest scan sits at index 0 once the history is full
        self.scan_history: deque = deque(maxlen=self._window_depth)
        self._last_output: Optional[np.ndarray] = None
        logger.info(f"[INIT] Temporal median filter {self.filter_id} initialized with "
                    f"N={self._num_samples}, D={self._window_depth}")

    @property
    def num_samples(self) -> int:
        return self._num_samples

    @property
    def window_depth(self) -> int:
        return self._window_depth

    @property
    def window_size(self) -> int:
        """Number of scans each column window currently holds."""
        return len(self.scan_history)

    @property
    def last_output(self) -> Optional[np.ndarray]:
        if self._last_output is None:
            return None
        return self._last_output.copy()

    def update(self, frame: Sequence[float]) -> np.ndarray:
        arr = self._check_frame(frame)
        samples = arr.tolist()

        if len(self.scan_history) < self._window_depth:
            evicted = None
        else:
            evicted = self.scan_history[0].tolist()

        result = np.empty(self._num_samples, dtype=np.float64)
        for idx, column in enumerate(self.columns):
            column.add(samples[idx])
            if evicted is not None:
                column.evict(evicted[idx])
            result[idx] = column.median()

        # deque(maxlen=D) drops the oldest scan on append once full
        self.scan_history.append(arr)
        self._last_output = result
        logger.debug(f"[{self.filter_id}] Filtered frame with window size {len(self.scan_history)}")
        return result.copy()

    def reset(self):
        """Drop every stored scan. N and D are kept."""
        for column in self.columns:
            column.clear()
        self.scan_history.clear()
        self._last_output = None
        logger.debug(f"[RESET] Temporal median filter {self.filter_id} reset")

    def _check_frame(self, frame: Sequence[float]) -> np.ndarray:
        arr = self._as_frame(frame)
        if arr.shape[0] != self._num_samples:
            logger.warning(f"[{self.filter_id}] Rejected frame of size {arr.shape[0]}, expected {self._num_samples}")
            raise ShapeError(f"Invalid input in update of {self.filter_id}: "
                             f"frame size {arr.shape[0]} doesn't match N={self._num_samples}")
        if np.isnan(arr).any():
            bad = np.flatnonzero(np.isnan(arr)).tolist()
            logger.warning(f"[{self.filter_id}] Rejected frame with NaN samples at columns {bad}")
            raise SampleError(f"Invalid input in update of {self.filter_id}: "
                              f"NaN samples at columns {bad}")
        # history must not alias the caller's buffer
        return arr.copy()

    def __repr__(self) -> str:
        return (f"TempMedianFilter(num_samples={self._num_samples}, window_depth={self._window_depth}, "
                f"filter_id={self.filter_id!r})")
