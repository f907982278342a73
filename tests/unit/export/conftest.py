"""Fixtures for exporter tests."""

import pytest

from tablecraft.builder import TableBuilder
from tablecraft.columns import ImageFormat, TextFormat
from tablecraft.dataset import Dataset
from tablecraft.model import RenderModel


@pytest.fixture
def standings_model(team_dataset: Dataset) -> RenderModel:
    """A model exercising images, composites, footnotes and notes."""
    return (
        TableBuilder()
        .add("Team", label="Club")
        .add("Country", label="Flag")
        .add("Points", label="Pts")
        .format_image("Flag", path_template="flags/{x}.png", height=12)
        .combine("Club", ImageFormat(path_template="logos/{x}.png"), TextFormat())
        .format_number("Pts", decimals=1)
        .footnote("Points after deductions", "Pts")
        .footnote("Provisional", "Pts", location="body", row=2)
        .title("Standings", subtitle="Matchday 30")
        .source_note("Source: league_data.csv")
        .render(team_dataset)
    )


@pytest.fixture
def plain_model(ranking_dataset: Dataset) -> RenderModel:
    """A text-only model."""
    return TableBuilder().select("Rank", "Model", "Time").render(ranking_dataset)
