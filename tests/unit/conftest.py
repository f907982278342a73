"""Shared fixtures for tablecraft unit tests."""

import math

import pytest

from tablecraft.dataset import Dataset


@pytest.fixture
def ranking_dataset() -> Dataset:
    """Three ranked models with timings."""
    return Dataset.from_records(
        [
            {"Rank": 1, "Model": "A", "Time": 2.0},
            {"Rank": 2, "Model": "B", "Time": 2.5},
            {"Rank": 3, "Model": "C", "Time": 3.1},
        ]
    )


@pytest.fixture
def team_dataset() -> Dataset:
    """Football-style standings with a missing value in each numeric column."""
    return Dataset.from_records(
        [
            {"Team": "Arsenal", "Country": "ENG", "Points": 1234.5, "Wins": 30},
            {"Team": "Benfica", "Country": "POR", "Points": None, "Wins": 28},
            {"Team": "Celtic", "Country": "SCO", "Points": 980.26, "Wins": math.nan},
        ]
    )
