"""Value transforms applied to individual cells."""

from __future__ import annotations

import math
import numbers
from decimal import Decimal
from typing import Any

import numpy as np

from tablecraft.columns import CompositeFormat, ImageFormat, NumberFormat, TextFormat
from tablecraft.config import config
from tablecraft.errors import ConfigurationError
from tablecraft.model import Composite, Image, Text

__all__ = ["apply_transform", "format_number", "is_numeric"]

_GROUP_MARK = "\x00"


def is_numeric(value: Any) -> bool:
    """Return True for real numbers (booleans excluded)."""
    if isinstance(value, bool | np.bool_):
        return False
    return isinstance(value, numbers.Real | Decimal)


def _fill(template: str, value: Any) -> str:
    """Fill a ``{x}`` template, converting template errors to ConfigurationError."""
    try:
        return template.format(x=value)
    except (KeyError, IndexError, ValueError, TypeError, AttributeError) as e:
        raise ConfigurationError(f"Invalid template {template!r} for value {value!r}: {e}")


def _as_decimal(value: Any) -> Any:
    """Convert a real number to Decimal so formatting never uses exponents.

    Floats go through their shortest repr; non-finite floats stay as they are.
    """
    if isinstance(value, Decimal):
        return value
    if isinstance(value, numbers.Integral):
        return Decimal(int(value))
    value = float(value)
    if math.isfinite(value):
        return Decimal(repr(value))
    return value


def format_number(value: Any, fmt: NumberFormat | None = None) -> str:
    """Format a numeric value with group and decimal separators.

    Non-numeric values are returned as ``str(value)`` unchanged.

    Args:
        value: Raw value
        fmt: Number directive (configured defaults when None)

    Returns:
        Formatted text

    Examples:
        >>> format_number(1234.5, NumberFormat(decimals=2))
        '1,234.50'
        >>> format_number(1234.5, NumberFormat(decimals=2, group_separator=".",
        ...                                    decimal_separator=","))
        '1.234,50'

    """
    if not is_numeric(value):
        return str(value)

    fmt = fmt or NumberFormat()
    decimals = fmt.decimals if fmt.decimals is not None else config.default_decimals
    group = fmt.group_separator if fmt.group_separator is not None else config.group_separator
    point = (
        fmt.decimal_separator if fmt.decimal_separator is not None else config.decimal_separator
    )

    if isinstance(value, np.generic):
        value = value.item()

    text = format(_as_decimal(value), f",.{decimals}f" if decimals is not None else ",f")

    text = text.replace(",", _GROUP_MARK).replace(".", point).replace(_GROUP_MARK, group)
    return _fill(fmt.pattern, text)


def _image(value: Any, fmt: ImageFormat) -> Image:
    height = fmt.height if fmt.height is not None else config.image_height
    alt = _fill(fmt.alt_template, value) if fmt.alt_template is not None else str(value)
    return Image(reference=_fill(fmt.path_template, value), height=height, alt=alt)


def apply_transform(
    value: Any,
    transform: NumberFormat | ImageFormat | TextFormat | CompositeFormat | None,
) -> Text | Image | Composite:
    """Turn a present (non-missing) raw value into cell content.

    Args:
        value: Raw value
        transform: Directive to apply (identity text when None)

    Returns:
        Text, Image or Composite content

    Raises:
        ConfigurationError: If a template cannot be filled

    """
    if transform is None:
        return Text(value=str(value))
    if isinstance(transform, NumberFormat):
        return Text(value=format_number(value, transform))
    if isinstance(transform, ImageFormat):
        return _image(value, transform)
    if isinstance(transform, TextFormat):
        return Text(value=_fill(transform.pattern, value))
    if isinstance(transform, CompositeFormat):
        return Composite(parts=tuple(apply_transform(value, part) for part in transform.parts))
    raise ConfigurationError(f"Unsupported transform: {type(transform).__name__}")
