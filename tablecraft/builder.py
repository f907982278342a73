"""Immutable table builder.

Every step returns a new TableBuilder and leaves the receiver untouched, so a
partially configured table can be branched without hidden order dependence:

    base = TableBuilder().select("Rank", "Team", "Time").align("Team", align="left")
    plain = base.render(dataset)
    pretty = base.format_number("Time", decimals=2).render(dataset)
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from typing import Any

from tablecraft.columns import (
    Alignment,
    ColumnDescriptor,
    ColumnSpec,
    CompositeFormat,
    Footnote,
    FootnoteLocation,
    ImageFormat,
    NumberFormat,
    TableConfig,
    TableOptions,
    TextFormat,
)
from tablecraft.dataset import Dataset
from tablecraft.errors import ConfigurationError, UnknownColumnError
from tablecraft.model import RenderModel
from tablecraft.renderer import render_table

_SCOPES = ("both", "header", "body")


@dataclass(frozen=True)
class TableBuilder:
    """Accumulates column directives, footnotes and decorations."""

    spec: ColumnSpec = field(default_factory=ColumnSpec)
    footnotes: tuple[Footnote, ...] = ()
    options: TableOptions = field(default_factory=TableOptions)

    @classmethod
    def from_config(cls, table_config: TableConfig) -> TableBuilder:
        """Seed a builder from a loaded table definition."""
        return cls(
            spec=table_config.column_spec,
            footnotes=table_config.footnotes,
            options=table_config.options,
        )

    # -------------------------------------------------------------------------
    # Column selection
    # -------------------------------------------------------------------------

    def select(self, *columns: str | ColumnDescriptor) -> TableBuilder:
        """Replace the column list; order and repetition are kept as given."""
        return replace(self, spec=ColumnSpec.of(*columns))

    def add(self, source: str, **directives: Any) -> TableBuilder:
        """Append one column, e.g. ``add("Team", label="Logo", transform=ImageFormat())``."""
        descriptor = ColumnDescriptor(source=source, **directives)
        return replace(self, spec=ColumnSpec(columns=(*self.spec.columns, descriptor)))

    def _targets(self, names: tuple[str, ...]) -> list[int]:
        """Resolve column names to descriptor positions.

        A name matches descriptors by label first, then by source. No names
        means every column.

        Raises:
            UnknownColumnError: If a name matches no column

        """
        if not names:
            return list(range(len(self.spec)))

        indices: list[int] = []
        for name in names:
            matched = [i for i, c in enumerate(self.spec.columns) if c.display_label == name]
            if not matched:
                matched = [i for i, c in enumerate(self.spec.columns) if c.source == name]
            if not matched:
                raise UnknownColumnError(name, self.spec.labels)
            indices.extend(i for i in matched if i not in indices)
        return indices

    def _update(self, names: tuple[str, ...], **changes: Any) -> TableBuilder:
        targets = set(self._targets(names))
        columns = tuple(
            column.model_copy(update=changes) if index in targets else column
            for index, column in enumerate(self.spec.columns)
        )
        return replace(self, spec=ColumnSpec(columns=columns))

    # -------------------------------------------------------------------------
    # Column directives
    # -------------------------------------------------------------------------

    def relabel(self, labels: Mapping[str, str] | None = None, **kwargs: str) -> TableBuilder:
        """Override header labels, keyed by current label or source."""
        builder = self
        for name, label in {**(labels or {}), **kwargs}.items():
            builder = builder._update((name,), label=label)
        return builder

    def format_number(
        self,
        *columns: str,
        decimals: int | None = None,
        group_separator: str | None = None,
        decimal_separator: str | None = None,
        pattern: str = "{x}",
    ) -> TableBuilder:
        """Format numeric values; non-numeric values pass through unchanged."""
        transform = NumberFormat(
            decimals=decimals,
            group_separator=group_separator,
            decimal_separator=decimal_separator,
            pattern=pattern,
        )
        return self._update(columns, transform=transform)

    def format_image(
        self,
        *columns: str,
        path_template: str = "{x}",
        height: int | None = None,
        alt_template: str | None = None,
    ) -> TableBuilder:
        """Replace values with image references built from ``path_template``."""
        transform = ImageFormat(
            path_template=path_template, height=height, alt_template=alt_template
        )
        return self._update(columns, transform=transform)

    def format_text(self, *columns: str, pattern: str) -> TableBuilder:
        """Render values through a ``{x}`` text template."""
        return self._update(columns, transform=TextFormat(pattern=pattern))

    def combine(
        self, column: str, *parts: NumberFormat | ImageFormat | TextFormat
    ) -> TableBuilder:
        """Show several renderings of the same value in one cell.

        With no parts, defaults to an image from the value followed by the
        value as text.
        """
        if not parts:
            parts = (ImageFormat(), TextFormat())
        return self._update((column,), transform=CompositeFormat(parts=parts))

    def substitute_missing(self, *columns: str, text: str) -> TableBuilder:
        """Set the placeholder shown for missing values."""
        return self._update(columns, missing_text=text)

    def align(self, *columns: str, align: Alignment, scope: str = "both") -> TableBuilder:
        """Align columns in the header, the body, or both.

        Raises:
            ConfigurationError: If scope is not one of both, header, body

        """
        if scope not in _SCOPES:
            raise ConfigurationError(
                f"Invalid alignment scope {scope!r}, expected one of {_SCOPES}"
            )
        if align not in ("left", "center", "right"):
            raise ConfigurationError(f"Invalid alignment {align!r}")
        if scope == "header":
            return self._update(columns, header_align=align)
        if scope == "body":
            return self._update(columns, body_align=align)
        return self._update(columns, align=align, header_align=None, body_align=None)

    # -------------------------------------------------------------------------
    # Footnotes and decorations
    # -------------------------------------------------------------------------

    def footnote(
        self,
        text: str,
        column: str,
        location: FootnoteLocation = "header",
        row: int = 0,
        symbol: str | None = None,
    ) -> TableBuilder:
        """Attach a footnote; its target is validated at render time."""
        note = Footnote(text=text, column=column, location=location, row=row, symbol=symbol)
        return replace(self, footnotes=(*self.footnotes, note))

    def title(self, title: str, subtitle: str | None = None) -> TableBuilder:
        """Set the table title and optional subtitle."""
        options = self.options.model_copy(update={"title": title, "subtitle": subtitle})
        return replace(self, options=options)

    def source_note(self, text: str) -> TableBuilder:
        """Append a source note shown below the table."""
        options = self.options.model_copy(
            update={"source_notes": (*self.options.source_notes, text)}
        )
        return replace(self, options=options)

    def render(self, dataset: Dataset) -> RenderModel:
        """Render the configured table for a dataset."""
        return render_table(dataset, self.spec, self.footnotes, self.options)
