"""Write rendered tables to disk."""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

from tablecraft.config import config
from tablecraft.export.html import to_html
from tablecraft.export.latex import to_latex
from tablecraft.export.markdown import to_markdown
from tablecraft.model import RenderModel

logger = logging.getLogger(__name__)

_WRITERS: dict[str, Callable[[RenderModel], str]] = {
    "md": to_markdown,
    "tex": to_latex,
    "html": to_html,
    "json": lambda model: model.to_json(),
}


def save_table(
    model: RenderModel,
    name: str,
    output_dir: Path,
    formats: list[str] | None = None,
) -> list[Path]:
    """Save a render model in one or more text formats.

    Args:
        model: Render model
        name: File name stem (without extension)
        output_dir: Output directory (created if needed)
        formats: Any of "md", "tex", "html", "json" (configured defaults when None)

    Returns:
        Paths written, in format order

    Raises:
        ValueError: If a format is not supported (nothing is written)

    """
    if formats is None:
        formats = config.export_formats

    unknown = [fmt for fmt in formats if fmt not in _WRITERS]
    if unknown:
        raise ValueError(f"Unsupported export format(s): {unknown}; expected {sorted(_WRITERS)}")

    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    written = []
    for fmt in formats:
        path = output_dir / f"{name}.{fmt}"
        path.write_text(_WRITERS[fmt](model), encoding="utf-8")
        logger.info("Saved table: %s", path)
        written.append(path)
    return written
