"""Markdown table export."""

from __future__ import annotations

from tablecraft.model import Composite, Image, RenderModel, Text

_ALIGN_ROW = {"left": ":---", "center": ":---:", "right": "---:"}


def _escape(text: str) -> str:
    return text.replace("|", "\\|").replace("\n", " ")


def _marks(symbols: tuple[str, ...]) -> str:
    return "".join(f"<sup>{symbol}</sup>" for symbol in symbols)


def _content(content: Text | Image | Composite) -> str:
    if isinstance(content, Text):
        return _escape(content.value)
    if isinstance(content, Image):
        return f"![{_escape(content.alt or '')}]({content.reference})"
    return " ".join(_content(part) for part in content.parts)


def to_markdown(model: RenderModel) -> str:
    """Render a model as a Markdown pipe table.

    Images become inline image links and footnote marks become ``<sup>``
    tags. Title, subtitle, footnotes and source notes surround the table.

    Args:
        model: Render model

    Returns:
        Markdown text

    """
    md_lines: list[str] = []
    if model.title:
        md_lines.extend([f"# {model.title}", ""])
    if model.subtitle:
        md_lines.extend([f"_{model.subtitle}_", ""])

    header = [_escape(h.label) + _marks(h.footnotes) for h in model.headers]
    md_lines.append("| " + " | ".join(header) + " |")
    # Pipe tables carry one alignment per column, taken from the body.
    body_aligns = [
        model.body[0][i].align if model.body else h.align for i, h in enumerate(model.headers)
    ]
    md_lines.append("|" + "|".join(_ALIGN_ROW[align] for align in body_aligns) + "|")

    for row in model.body:
        cells = [_content(cell.content) + _marks(cell.footnotes) for cell in row]
        md_lines.append("| " + " | ".join(cells) + " |")

    if model.footnotes or model.source_notes:
        md_lines.append("")
    for note in model.footnotes:
        md_lines.append(f"<sup>{note.symbol}</sup> {note.text}  ")
    for source_note in model.source_notes:
        md_lines.append(f"{source_note}  ")

    return "\n".join(md_lines)
