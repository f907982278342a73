"""Tests for RenderModel and cell content types."""

import json

import pytest
from pydantic import ValidationError

from tablecraft.model import (
    BodyCell,
    Composite,
    HeaderCell,
    Image,
    RenderModel,
    Text,
    content_text,
)


def make_header(label: str = "Team") -> HeaderCell:
    """Create test HeaderCell."""
    return HeaderCell(label=label, align="left", source=label)


def make_cell(value: str = "Arsenal") -> BodyCell:
    """Create test BodyCell."""
    return BodyCell(content=Text(value=value), align="left", raw=value)


class TestRenderModel:
    """Tests for RenderModel."""

    def test_shape_enforced(self) -> None:
        """Rows must have one cell per header."""
        with pytest.raises(ValidationError):
            RenderModel(headers=(make_header(),), body=((make_cell(), make_cell()),))

    def test_counts(self) -> None:
        """Column and row counts follow headers and body."""
        model = RenderModel(
            headers=(make_header("a"), make_header("b")),
            body=((make_cell(), make_cell()),) * 3,
        )
        assert model.n_columns == 2
        assert model.n_rows == 3
        assert model.column(1) == (make_cell(),) * 3
        assert not model.has_images

    def test_has_images_in_composite(self) -> None:
        """Images nested in composites count."""
        cell = BodyCell(
            content=Composite(parts=(Image(reference="x.png"), Text(value="x"))), align="center"
        )
        model = RenderModel(headers=(make_header(),), body=((cell,),))
        assert model.has_images

    def test_to_json(self) -> None:
        """JSON output keeps the content tags."""
        model = RenderModel(headers=(make_header(),), body=((make_cell(),),), title="T")
        data = json.loads(model.to_json())
        assert data["title"] == "T"
        assert data["body"][0][0]["content"]["kind"] == "text"
        assert RenderModel.model_validate(data) == model


class TestContentText:
    """Tests for content_text()."""

    def test_text(self) -> None:
        """Text content is returned as-is."""
        assert content_text(Text(value="A")) == "A"

    def test_image_uses_alt(self) -> None:
        """Images contribute their alt text."""
        assert content_text(Image(reference="a.png", alt="logo")) == "logo"
        assert content_text(Image(reference="a.png")) == ""

    def test_composite_joins_parts(self) -> None:
        """Composite parts are joined, skipping empty ones."""
        content = Composite(parts=(Image(reference="a.png"), Text(value="Arsenal")))
        assert content_text(content) == "Arsenal"
