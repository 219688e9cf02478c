import pytest

from scan_filters.utils.order_statistics import ColumnWindow


def test_median_ranks_follow_parity():
    window = ColumnWindow()
    expected = {1: (0, 0), 2: (0, 1), 3: (1, 1), 4: (1, 2), 5: (2, 2)}
    for k in range(1, 6):
        window.add(float(k))
        assert window.median_ranks == expected[k]


def test_median_odd_and_even():
    window = ColumnWindow()
    for value in (5.0, 1.0, 3.0):
        window.add(value)
    assert window.median() == 3.0
    window.add(10.0)
    assert window.median() == 4.0


def test_evict_removes_single_duplicate():
    window = ColumnWindow()
    for value in (1.0, 1.0, 2.0):
        window.add(value)
    window.evict(1.0)
    assert window.values() == [1.0, 2.0]
    assert len(window) == 2


def test_evict_missing_value_raises():
    window = ColumnWindow()
    window.add(1.0)
    with pytest.raises(ValueError):
        window.evict(2.0)


def test_empty_window_has_no_median():
    with pytest.raises(IndexError):
        ColumnWindow().median()


def test_clear():
    window = ColumnWindow()
    window.add(1.0)
    window.clear()
    assert len(window) == 0
