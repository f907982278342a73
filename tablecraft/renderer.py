"""Table renderer.

Deterministic, side-effect-free transform from a Dataset, a ColumnSpec and a
list of footnotes to an immutable RenderModel. Rendering never performs I/O.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Iterable, Sequence
from typing import Any

from tablecraft.columns import (
    ColumnDescriptor,
    ColumnSpec,
    CompositeFormat,
    Footnote,
    ImageFormat,
    NumberFormat,
    TableOptions,
)
from tablecraft.config import config
from tablecraft.dataset import Dataset, is_missing
from tablecraft.errors import ConfigurationError, FootnoteTargetError, UnknownColumnError
from tablecraft.formatting import apply_transform, is_numeric
from tablecraft.model import BodyCell, FootnoteDef, HeaderCell, RenderModel, Text

logger = logging.getLogger(__name__)

__all__ = ["render_table"]

# Header footnotes may name any table row. Row 0 is always addressable so
# header notes work on tables without body rows.
HEADER_ROWS = 1


def _as_spec(columns: ColumnSpec | Sequence[ColumnDescriptor | str]) -> ColumnSpec:
    if isinstance(columns, ColumnSpec):
        return columns
    return ColumnSpec.of(*columns)


def _default_alignment(descriptor: ColumnDescriptor, values: list[Any]) -> str:
    """Pick an alignment for a column that has no explicit directive."""
    if isinstance(descriptor.transform, ImageFormat | CompositeFormat):
        return config.image_alignment
    present = [v for v in values if not is_missing(v)]
    if present and all(is_numeric(v) for v in present):
        return config.numeric_alignment
    return config.text_alignment


def _resolve_alignment(descriptor: ColumnDescriptor, values: list[Any]) -> tuple[str, str]:
    """Return (header_align, body_align) for one column.

    Scoped directives beat the shared ``align``, which beats configured defaults.
    """
    default = _default_alignment(descriptor, values)
    body = descriptor.body_align or descriptor.align or default
    header = descriptor.header_align or descriptor.align or config.header_alignment or body
    return header, body


def _resolve_footnotes(
    footnotes: Iterable[Footnote],
    spec: ColumnSpec,
    n_rows: int,
) -> tuple[list[FootnoteDef], dict[tuple[str, int, int], list[str]]]:
    """Validate footnote targets and assign symbols.

    Footnotes keep their attachment order and are never deduplicated.

    Returns:
        Tuple of (definitions, refs keyed by (location, row, column index))

    Raises:
        FootnoteTargetError: If a footnote targets an unknown column or an
            out-of-range row

    """
    definitions: list[FootnoteDef] = []
    refs: dict[tuple[str, int, int], list[str]] = defaultdict(list)
    auto_index = 0

    for note in footnotes:
        try:
            col_index = spec.index_of(note.column)
        except KeyError:
            raise FootnoteTargetError(
                f"Footnote targets column {note.column!r}, which is not in the column spec",
                column=note.column,
                row=note.row,
                location=note.location,
            )

        limit = max(n_rows, HEADER_ROWS) if note.location == "header" else n_rows
        if not 0 <= note.row < limit:
            raise FootnoteTargetError(
                f"Footnote row {note.row} is out of range for the {note.location} "
                f"({limit} row{'s' if limit != 1 else ''})",
                column=note.column,
                row=note.row,
                location=note.location,
            )

        symbol = note.symbol
        if symbol is None:
            symbol = config.footnote_symbol(auto_index)
            auto_index += 1

        definitions.append(
            FootnoteDef(
                symbol=symbol,
                text=note.text,
                column=spec[col_index].display_label,
                location=note.location,
                row=note.row,
            )
        )
        # Header marks always sit on the single label row.
        ref_row = note.row if note.location == "body" else 0
        refs[(note.location, ref_row, col_index)].append(symbol)

    return definitions, refs


def render_table(
    dataset: Dataset,
    columns: ColumnSpec | Sequence[ColumnDescriptor | str],
    footnotes: Iterable[Footnote] = (),
    options: TableOptions | None = None,
) -> RenderModel:
    """Render a dataset into a RenderModel.

    Args:
        dataset: Source rows
        columns: Ordered column descriptors (bare names are shown as-is)
        footnotes: Footnotes to attach, in order
        options: Title, subtitle and source notes

    Returns:
        Immutable RenderModel whose columns follow the spec order exactly

    Raises:
        ConfigurationError: If the dataset has no columns or the spec is empty
        UnknownColumnError: If the spec names a column absent from the dataset
        FootnoteTargetError: If a footnote targets a cell outside the table

    """
    spec = _as_spec(columns)
    options = options or TableOptions()

    if not dataset.columns:
        raise ConfigurationError("Dataset has no columns")
    if len(spec) == 0:
        raise ConfigurationError("Column spec is empty")
    for descriptor in spec.columns:
        if descriptor.source not in dataset.columns:
            raise UnknownColumnError(descriptor.source, dataset.columns)

    n_rows = len(dataset)
    definitions, refs = _resolve_footnotes(footnotes, spec, n_rows)

    headers = []
    columns_out = []
    for col_index, descriptor in enumerate(spec.columns):
        values = dataset.column_values(descriptor.source)
        header_align, body_align = _resolve_alignment(descriptor, values)
        placeholder = (
            descriptor.missing_text if descriptor.missing_text is not None else config.missing_text
        )

        if isinstance(descriptor.transform, NumberFormat):
            passthrough = sum(1 for v in values if not is_missing(v) and not is_numeric(v))
            if passthrough:
                logger.debug(
                    "Number format on column %r left %d non-numeric value(s) unformatted",
                    descriptor.display_label,
                    passthrough,
                )

        headers.append(
            HeaderCell(
                label=descriptor.display_label,
                align=header_align,
                source=descriptor.source,
                footnotes=tuple(refs.get(("header", 0, col_index), ())),
            )
        )

        cells = []
        for row_index, raw in enumerate(values):
            missing = is_missing(raw)
            if missing:
                content = Text(value=placeholder)
            else:
                content = apply_transform(raw, descriptor.transform)
            cells.append(
                BodyCell(
                    content=content,
                    align=body_align,
                    raw=None if missing else raw,
                    missing=missing,
                    footnotes=tuple(refs.get(("body", row_index, col_index), ())),
                )
            )
        columns_out.append(cells)

    body = tuple(tuple(column[i] for column in columns_out) for i in range(n_rows))

    logger.debug(
        "Rendered table: %d columns, %d rows, %d footnotes",
        len(headers),
        n_rows,
        len(definitions),
    )

    return RenderModel(
        headers=tuple(headers),
        body=body,
        footnotes=tuple(definitions),
        title=options.title,
        subtitle=options.subtitle,
        source_notes=options.source_notes,
    )
