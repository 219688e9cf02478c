import logging

import numpy as np
import pytest


@pytest.fixture
def clean_root_logger():
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    yield root
    for handler in root.handlers:
        if handler not in saved_handlers:
            handler.close()
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)
    if hasattr(root, "_project_logging_configured"):
        delattr(root, "_project_logging_configured")


def brute_force_medians(frames, window_depth):
    """Sort-and-pick median over the last min(n, D) frames, for every call n."""
    frames = [np.asarray(f, dtype=np.float64) for f in frames]
    out = []
    for n in range(1, len(frames) + 1):
        window = np.stack(frames[max(0, n - window_depth):n], axis=0)
        ordered = np.sort(window, axis=0)
        k = ordered.shape[0]
        if k % 2 == 1:
            out.append(ordered[k // 2])
        else:
            out.append((ordered[k // 2 - 1] + ordered[k // 2]) / 2.0)
    return out


@pytest.fixture
def brute_force():
    return brute_force_medians
