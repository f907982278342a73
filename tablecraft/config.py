"""Rendering configuration loader.

Loads and provides access to rendering defaults from config.yaml so that
placeholders, separators and alignments are consistent across renders.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, cast

import yaml

__all__ = ["RenderConfig", "config"]

_SYMBOL_SETS = {
    "numeric": None,
    "letters": "abcdefghijklmnopqrstuvwxyz",
    "marks": "*†‡§¶",
}


class RenderConfig:
    """Rendering configuration singleton."""

    _instance: RenderConfig | None = None
    _config: dict[str, Any] | None = None

    def __new__(cls) -> RenderConfig:
        """Return the shared instance so config.yaml is read at most once."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self) -> None:
        """Read config.yaml next to this module on first use."""
        if self._config is None:
            config_path = Path(__file__).parent / "config.yaml"
            with open(config_path, encoding="utf-8") as f:
                self._config = yaml.safe_load(f) or {}

    def get(self, *keys: str, default: Any = None) -> Any:
        """Look up a value in config.yaml by its key path.

        Args:
            *keys: Path into config.yaml, e.g. ("export", "latex", "booktabs")
            default: Returned when any key along the path is absent

        Returns:
            The value at the path, or ``default``

        """
        value = self._config
        for key in keys:
            if not isinstance(value, dict) or key not in value:
                return default
            value = value[key]
        return value

    @property
    def missing_text(self) -> str:
        """Placeholder rendered in place of missing values."""
        return cast(str, self.get("rendering", "missing_text", default="NA"))

    @property
    def footnote_symbol_style(self) -> str:
        """Style used for auto-assigned footnote symbols."""
        return cast(str, self.get("rendering", "footnote_symbols", default="numeric"))

    @property
    def default_decimals(self) -> int | None:
        """Default number of decimal places (None keeps the value's own precision)."""
        return cast("int | None", self.get("numbers", "decimals", default=None))

    @property
    def group_separator(self) -> str:
        """Default digit group separator."""
        return cast(str, self.get("numbers", "group_separator", default=","))

    @property
    def decimal_separator(self) -> str:
        """Default decimal separator."""
        return cast(str, self.get("numbers", "decimal_separator", default="."))

    @property
    def text_alignment(self) -> str:
        """Default alignment for text columns."""
        return cast(str, self.get("alignment", "text", default="left"))

    @property
    def numeric_alignment(self) -> str:
        """Default alignment for all-numeric columns."""
        return cast(str, self.get("alignment", "numeric", default="right"))

    @property
    def image_alignment(self) -> str:
        """Default alignment for image and composite columns."""
        return cast(str, self.get("alignment", "image", default="center"))

    @property
    def header_alignment(self) -> str | None:
        """Header alignment override (None follows the body)."""
        return cast("str | None", self.get("alignment", "header", default=None))

    @property
    def image_height(self) -> int | None:
        """Default image height in pixels."""
        return cast("int | None", self.get("images", "height", default=None))

    @property
    def export_formats(self) -> list[str]:
        """Formats written by save_table when none are requested."""
        return cast(list[str], self.get("export", "formats", default=["md", "tex", "html"]))

    @property
    def latex_booktabs(self) -> bool:
        """Whether LaTeX tables use booktabs rules."""
        return cast(bool, self.get("export", "latex", "booktabs", default=True))

    @property
    def latex_image_height(self) -> str:
        """Height used for images embedded in LaTeX tables."""
        return cast(str, self.get("export", "latex", "image_height", default="1em"))

    @property
    def html_table_class(self) -> str:
        """CSS class attached to exported HTML tables."""
        return cast(str, self.get("export", "html", "table_class", default="tablecraft"))

    @property
    def config_version(self) -> str:
        """Configuration file version."""
        return cast(str, self.get("config_version", default="1.0.0"))

    def footnote_symbol(self, index: int) -> str:
        """Return the auto-assigned footnote symbol for a zero-based index.

        Args:
            index: Position of the footnote in attachment order

        Returns:
            Symbol string ("1", "2", ... for numeric; "a", "b", ... for letters;
            "*", "†", ... for marks, doubled once exhausted)

        """
        symbols = _SYMBOL_SETS.get(self.footnote_symbol_style)
        if symbols is None:
            return str(index + 1)
        repeat, position = divmod(index, len(symbols))
        return symbols[position] * (repeat + 1)


# Global singleton instance
config = RenderConfig()
