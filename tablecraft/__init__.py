"""tablecraft - presentation-ready tables from tabular datasets.

This package turns a dataset plus column-level presentation directives into
an immutable, format-independent render model, and exports that model as
Markdown, LaTeX or HTML.
"""

from tablecraft.builder import TableBuilder
from tablecraft.columns import (
    ColumnDescriptor,
    ColumnSpec,
    CompositeFormat,
    Footnote,
    ImageFormat,
    NumberFormat,
    TableConfig,
    TableOptions,
    TextFormat,
    load_table_config,
)
from tablecraft.dataset import Dataset, is_missing
from tablecraft.errors import (
    ConfigurationError,
    FootnoteTargetError,
    TableError,
    UnknownColumnError,
)
from tablecraft.model import (
    BodyCell,
    Composite,
    FootnoteDef,
    HeaderCell,
    Image,
    RenderModel,
    Text,
)
from tablecraft.renderer import render_table

__version__ = "0.1.0"

__all__ = [
    "BodyCell",
    "ColumnDescriptor",
    "ColumnSpec",
    "Composite",
    "CompositeFormat",
    "ConfigurationError",
    "Dataset",
    "Footnote",
    "FootnoteDef",
    "FootnoteTargetError",
    "HeaderCell",
    "Image",
    "ImageFormat",
    "NumberFormat",
    "RenderModel",
    "TableBuilder",
    "TableConfig",
    "TableError",
    "TableOptions",
    "Text",
    "TextFormat",
    "UnknownColumnError",
    "is_missing",
    "load_table_config",
    "render_table",
]
