"""Column-level presentation directives.

Declarative, immutable configuration that tells the renderer which source
columns to show, in which order, under which label, with which value
transform and alignment. Everything here can be loaded from YAML via
``load_table_config``.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated, Any, Literal

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from tablecraft.errors import ConfigurationError

logger = logging.getLogger(__name__)

Alignment = Literal["left", "center", "right"]
FootnoteLocation = Literal["header", "body"]


# -----------------------------------------------------------------------------
# Value transforms
# -----------------------------------------------------------------------------


class NumberFormat(BaseModel):
    """Numeric formatting directive.

    Applies only to numeric values; anything else passes through as text.
    ``decimals=None`` keeps the value's own precision.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["number"] = "number"
    decimals: int | None = None
    group_separator: str | None = None
    decimal_separator: str | None = None
    pattern: str = Field(default="{x}", description="Template wrapping the formatted number")

    @field_validator("decimals")
    @classmethod
    def validate_decimals(cls, v: int | None) -> int | None:
        """Reject negative decimal counts."""
        if v is not None and v < 0:
            raise ValueError("decimals must be >= 0")
        return v


class ImageFormat(BaseModel):
    """Substitute an image reference for the raw value."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["image"] = "image"
    path_template: str = Field(default="{x}", description="Reference template, e.g. logos/{x}.png")
    height: int | None = Field(default=None, description="Image height in pixels")
    alt_template: str | None = Field(default=None, description="Alt text template")


class TextFormat(BaseModel):
    """Render the raw value through a text template."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["text"] = "text"
    pattern: str = "{x}"


PartFormat = Annotated[NumberFormat | ImageFormat | TextFormat, Field(discriminator="kind")]


class CompositeFormat(BaseModel):
    """Apply several formats to the same raw value, yielding one composite cell."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["composite"] = "composite"
    parts: tuple[PartFormat, ...]

    @field_validator("parts")
    @classmethod
    def validate_parts(cls, v: tuple[Any, ...]) -> tuple[Any, ...]:
        """Require at least one part."""
        if not v:
            raise ValueError("composite format needs at least one part")
        return v


ValueTransform = Annotated[
    NumberFormat | ImageFormat | TextFormat | CompositeFormat,
    Field(discriminator="kind"),
]


# -----------------------------------------------------------------------------
# Column descriptors
# -----------------------------------------------------------------------------


class ColumnDescriptor(BaseModel):
    """How one output column is derived from a source column and displayed."""

    model_config = ConfigDict(frozen=True)

    source: str = Field(..., description="Source column in the dataset")
    label: str | None = Field(default=None, description="Header label (defaults to source)")
    transform: ValueTransform | None = None
    align: Alignment | None = Field(default=None, description="Header and body alignment")
    header_align: Alignment | None = Field(default=None, description="Header-only alignment")
    body_align: Alignment | None = Field(default=None, description="Body-only alignment")
    missing_text: str | None = Field(default=None, description="Placeholder for missing values")

    @field_validator("source")
    @classmethod
    def validate_source(cls, v: str) -> str:
        """Validate source column name."""
        if not v or not v.strip():
            raise ValueError("Column source cannot be empty")
        return v

    @property
    def display_label(self) -> str:
        """Label shown in the header cell."""
        return self.label if self.label is not None else self.source


class ColumnSpec(BaseModel):
    """Ordered column descriptors.

    The same source column may appear more than once under different
    descriptors.
    """

    model_config = ConfigDict(frozen=True)

    columns: tuple[ColumnDescriptor, ...] = ()

    @classmethod
    def of(cls, *columns: ColumnDescriptor | str) -> ColumnSpec:
        """Build a spec from descriptors or bare source names."""
        return cls(
            columns=tuple(
                ColumnDescriptor(source=c) if isinstance(c, str) else c for c in columns
            )
        )

    @property
    def sources(self) -> tuple[str, ...]:
        """Source column of every descriptor, in order."""
        return tuple(c.source for c in self.columns)

    @property
    def labels(self) -> tuple[str, ...]:
        """Display label of every descriptor, in order."""
        return tuple(c.display_label for c in self.columns)

    def index_of(self, name: str) -> int:
        """Return the position of the first column with this label or source.

        Labels take precedence so that repeated sources can be told apart.

        Raises:
            KeyError: If no column matches

        """
        for index, column in enumerate(self.columns):
            if column.display_label == name:
                return index
        for index, column in enumerate(self.columns):
            if column.source == name:
                return index
        raise KeyError(name)

    def __len__(self) -> int:
        return len(self.columns)

    def __getitem__(self, index: int) -> ColumnDescriptor:
        return self.columns[index]


# -----------------------------------------------------------------------------
# Footnotes and table options
# -----------------------------------------------------------------------------


class Footnote(BaseModel):
    """A note attached to one header or body cell.

    Body notes mark the cell at (row, column). Header notes mark the column
    label; their row must still address a table row (row 0 is always valid).
    ``column`` is matched against labels first, then sources.
    """

    model_config = ConfigDict(frozen=True)

    text: str
    column: str
    location: FootnoteLocation = "header"
    row: int = 0
    symbol: str | None = None


class TableOptions(BaseModel):
    """Table-level decorations."""

    model_config = ConfigDict(frozen=True)

    title: str | None = None
    subtitle: str | None = None
    source_notes: tuple[str, ...] = ()


class TableConfig(BaseModel):
    """A complete table definition, as stored in YAML."""

    model_config = ConfigDict(frozen=True)

    title: str | None = None
    subtitle: str | None = None
    source_notes: tuple[str, ...] = ()
    columns: tuple[ColumnDescriptor, ...] = ()
    footnotes: tuple[Footnote, ...] = ()

    @property
    def column_spec(self) -> ColumnSpec:
        """Columns as a ColumnSpec."""
        return ColumnSpec(columns=self.columns)

    @property
    def options(self) -> TableOptions:
        """Decorations as TableOptions."""
        return TableOptions(
            title=self.title, subtitle=self.subtitle, source_notes=self.source_notes
        )


def load_table_config(path: str | Path) -> TableConfig:
    """Load a table definition from a YAML file.

    Args:
        path: Path to YAML file

    Returns:
        Parsed TableConfig

    Raises:
        ConfigurationError: If the file is missing, unreadable, or invalid

    """
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        raise ConfigurationError(f"Table configuration not found: {path}")
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {path}: {e}")
    except PermissionError:
        raise ConfigurationError(f"Permission denied reading: {path}")

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"Table configuration in {path} must be a mapping")

    try:
        table_config = TableConfig(**data)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid table configuration in {path}: {e}")

    logger.debug("Loaded table config from %s (%d columns)", path, len(table_config.columns))
    return table_config
