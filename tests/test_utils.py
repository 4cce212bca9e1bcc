import pytest

from setbreaker.utils import format_time


@pytest.mark.parametrize(
    "seconds, expected",
    [(125, "02:05"), (5, "00:05"), (0, "00:00"), (300, "05:00"), (-3, "00:00")],
)
def test_format_time(seconds, expected):
    assert format_time(seconds) == expected
