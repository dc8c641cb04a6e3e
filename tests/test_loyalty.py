import sys
import os

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))
import pytest
from theater.domain import Category
from theater.errors import UnknownCategory
from theater.loyalty import credits_of


@pytest.mark.parametrize(
    "audience, expected",
    [
        (0, 0),
        (29, 0),
        (30, 0),
        (31, 1),
        (55, 25),
    ],
)
def test_tragedy_credits(audience, expected):
    assert credits_of(audience, Category.TRAGEDY) == expected


@pytest.mark.parametrize(
    "audience, expected",
    [
        (4, 0),  # 4 // 5 == 0, дробь отбрасывается
        (5, 1),
        (29, 5),
        (30, 6),
        (31, 7),
        (35, 12),
    ],
)
def test_comedy_credits(audience, expected):
    assert credits_of(audience, Category.COMEDY) == expected


def test_unknown_category_credits():
    with pytest.raises(UnknownCategory):
        credits_of(10, "musical")
