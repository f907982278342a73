"""Tests for cell value transforms."""

from decimal import Decimal

import numpy as np
import pytest

from tablecraft.columns import CompositeFormat, ImageFormat, NumberFormat, TextFormat
from tablecraft.errors import ConfigurationError
from tablecraft.formatting import apply_transform, format_number, is_numeric
from tablecraft.model import Composite, Image, Text


class TestIsNumeric:
    """Tests for is_numeric()."""

    @pytest.mark.parametrize("value", [1, 2.5, Decimal("3.1"), np.int64(4), np.float32(0.5)])
    def test_numbers(self, value: object) -> None:
        """Python, Decimal and numpy numbers are numeric."""
        assert is_numeric(value)

    @pytest.mark.parametrize("value", [True, np.bool_(False), "12", None, 1 + 2j])
    def test_non_numbers(self, value: object) -> None:
        """Booleans, strings and complex numbers are not."""
        assert not is_numeric(value)


class TestFormatNumber:
    """Tests for format_number()."""

    def test_default_grouping(self) -> None:
        """Integers get group separators by default."""
        assert format_number(1234567) == "1,234,567"

    def test_float_keeps_precision(self) -> None:
        """Without decimals the value's own precision is kept."""
        assert format_number(1234.5) == "1,234.5"

    def test_fixed_decimals(self) -> None:
        """Decimals pad and round."""
        assert format_number(2, NumberFormat(decimals=2)) == "2.00"
        assert format_number(3.14159, NumberFormat(decimals=3)) == "3.142"

    def test_swapped_separators(self) -> None:
        """Group and decimal separators are replaced independently."""
        fmt = NumberFormat(decimals=2, group_separator=".", decimal_separator=",")
        assert format_number(1234567.891, fmt) == "1.234.567,89"

    def test_no_grouping(self) -> None:
        """An empty group separator removes grouping."""
        assert format_number(1234567, NumberFormat(group_separator="")) == "1234567"

    def test_pattern(self) -> None:
        """The pattern wraps the formatted number."""
        assert format_number(0.5, NumberFormat(decimals=1, pattern="{x} s")) == "0.5 s"

    def test_decimal_and_numpy(self) -> None:
        """Decimal and numpy values format like their Python counterparts."""
        assert format_number(Decimal("1234.50"), NumberFormat(decimals=1)) == "1,234.5"
        assert format_number(np.int64(1000)) == "1,000"
        assert format_number(np.float32(0.25), NumberFormat(decimals=2)) == "0.25"

    def test_large_and_small_floats_never_use_exponents(self) -> None:
        """Floats outside the plain repr range are written out in full."""
        assert format_number(12345678901234567.0) == "12,345,678,901,234,568"
        assert format_number(1e-7) == "0.0000001"
        fmt = NumberFormat(group_separator=".", decimal_separator=",")
        assert format_number(1.5e20, fmt) == "150.000.000.000.000.000.000"

    def test_big_ints_keep_every_digit(self) -> None:
        """Integers with fixed decimals are not rounded through float."""
        assert format_number(10**20 + 1, NumberFormat(decimals=2)) == (
            "100,000,000,000,000,000,001.00"
        )

    def test_non_finite_floats(self) -> None:
        """Infinity is shown as-is."""
        assert format_number(float("inf")) == "inf"
        assert format_number(float("-inf"), NumberFormat(decimals=2)) == "-inf"

    def test_non_numeric_passthrough(self) -> None:
        """Non-numeric values come back as plain strings."""
        assert format_number("Sonnet", NumberFormat(decimals=2)) == "Sonnet"
        assert format_number(True, NumberFormat(decimals=2)) == "True"

    def test_negative_decimals_rejected(self) -> None:
        """Negative decimal counts are invalid."""
        with pytest.raises(ValueError):
            NumberFormat(decimals=-1)


class TestApplyTransform:
    """Tests for apply_transform()."""

    def test_identity(self) -> None:
        """No transform yields the value as text."""
        assert apply_transform(42, None) == Text(value="42")

    def test_text_pattern(self) -> None:
        """Text patterns use the {x} placeholder."""
        assert apply_transform("A", TextFormat(pattern="Model {x}")) == Text(value="Model A")

    def test_image(self) -> None:
        """Images take their reference and alt text from templates."""
        content = apply_transform(
            "arsenal", ImageFormat(path_template="img/{x}.svg", alt_template="{x} logo")
        )
        assert content == Image(reference="img/arsenal.svg", alt="arsenal logo")

    def test_composite(self) -> None:
        """Composite parts are applied in order to the same value."""
        fmt = CompositeFormat(parts=(TextFormat(pattern="#{x}"), ImageFormat(), NumberFormat()))
        content = apply_transform(7, fmt)
        assert isinstance(content, Composite)
        assert content.parts == (Text(value="#7"), Image(reference="7", alt="7"), Text(value="7"))

    def test_composite_requires_parts(self) -> None:
        """Empty composites are rejected at construction."""
        with pytest.raises(ValueError):
            CompositeFormat(parts=())

    def test_template_error(self) -> None:
        """Broken templates raise ConfigurationError."""
        with pytest.raises(ConfigurationError):
            apply_transform(1, TextFormat(pattern="{0}"))
