"""Format-independent render model.

The RenderModel is the output of a render call: ordered header cells,
ordered body rows and footnote definitions. It is immutable and is consumed
by exporters, which translate it into a concrete artifact.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

from tablecraft.columns import Alignment, FootnoteLocation


class Text(BaseModel):
    """Plain text cell content."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["text"] = "text"
    value: str


class Image(BaseModel):
    """Image reference cell content."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["image"] = "image"
    reference: str
    height: int | None = None
    alt: str | None = None


Part = Annotated[Text | Image, Field(discriminator="kind")]


class Composite(BaseModel):
    """Ordered mix of text and image parts shown in one cell."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["composite"] = "composite"
    parts: tuple[Part, ...]


CellContent = Annotated[Text | Image | Composite, Field(discriminator="kind")]


class HeaderCell(BaseModel):
    """A rendered column header."""

    model_config = ConfigDict(frozen=True)

    label: str
    align: Alignment
    source: str = Field(..., description="Source column this header was derived from")
    footnotes: tuple[str, ...] = Field(default=(), description="Footnote symbols")


class BodyCell(BaseModel):
    """A rendered body cell."""

    model_config = ConfigDict(frozen=True)

    content: CellContent
    align: Alignment
    raw: Any = Field(default=None, description="Source value before formatting")
    missing: bool = False
    footnotes: tuple[str, ...] = Field(default=(), description="Footnote symbols")

    @property
    def text(self) -> str:
        """Plain-text view of the content (images contribute their alt text)."""
        return content_text(self.content)


class FootnoteDef(BaseModel):
    """A footnote definition listed below the table."""

    model_config = ConfigDict(frozen=True)

    symbol: str
    text: str
    column: str
    location: FootnoteLocation
    row: int


class RenderModel(BaseModel):
    """Immutable, format-independent representation of a styled table."""

    model_config = ConfigDict(frozen=True)

    headers: tuple[HeaderCell, ...]
    body: tuple[tuple[BodyCell, ...], ...] = ()
    footnotes: tuple[FootnoteDef, ...] = ()
    title: str | None = None
    subtitle: str | None = None
    source_notes: tuple[str, ...] = ()

    @model_validator(mode="after")
    def check_shape(self) -> RenderModel:
        """Every body row must have one cell per header."""
        width = len(self.headers)
        for index, row in enumerate(self.body):
            if len(row) != width:
                raise ValueError(f"Body row {index} has {len(row)} cells, expected {width}")
        return self

    @property
    def n_columns(self) -> int:
        """Number of columns."""
        return len(self.headers)

    @property
    def n_rows(self) -> int:
        """Number of body rows."""
        return len(self.body)

    @property
    def has_images(self) -> bool:
        """Whether any body cell carries image content."""
        for row in self.body:
            for cell in row:
                if isinstance(cell.content, Image):
                    return True
                if isinstance(cell.content, Composite) and any(
                    isinstance(part, Image) for part in cell.content.parts
                ):
                    return True
        return False

    def column(self, index: int) -> tuple[BodyCell, ...]:
        """Return the body cells of one column."""
        return tuple(row[index] for row in self.body)

    def to_json(self, indent: int = 2) -> str:
        """Convert to JSON string."""
        return self.model_dump_json(indent=indent)


def content_text(content: Text | Image | Composite) -> str:
    """Flatten cell content to plain text."""
    if isinstance(content, Text):
        return content.value
    if isinstance(content, Image):
        return content.alt or ""
    return " ".join(filter(None, (content_text(part) for part in content.parts)))
