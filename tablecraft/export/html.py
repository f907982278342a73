"""HTML table export."""

from __future__ import annotations

from html import escape

from tablecraft.config import config
from tablecraft.model import Composite, Image, RenderModel, Text


def _marks(symbols: tuple[str, ...]) -> str:
    return "".join(f"<sup>{escape(symbol)}</sup>" for symbol in symbols)


def _content(content: Text | Image | Composite) -> str:
    if isinstance(content, Text):
        return escape(content.value)
    if isinstance(content, Image):
        attrs = f'src="{escape(content.reference)}" alt="{escape(content.alt or "")}"'
        if content.height is not None:
            attrs += f' style="height: {content.height}px"'
        return f"<img {attrs}>"
    return " ".join(_content(part) for part in content.parts)


def to_html(model: RenderModel, table_class: str | None = None) -> str:
    """Render a model as an HTML ``<table>`` fragment.

    Args:
        model: Render model
        table_class: CSS class for the table (configured default when None)

    Returns:
        HTML text

    """
    table_class = table_class if table_class is not None else config.html_table_class
    html_lines = [f'<table class="{escape(table_class)}">']

    if model.title or model.subtitle:
        caption = escape(model.title or "")
        if model.subtitle:
            caption += f"<br><small>{escape(model.subtitle)}</small>"
        html_lines.append(f"  <caption>{caption}</caption>")

    html_lines.append("  <thead>")
    html_lines.append("    <tr>")
    for header in model.headers:
        html_lines.append(
            f'      <th style="text-align: {header.align}">'
            f"{escape(header.label)}{_marks(header.footnotes)}</th>"
        )
    html_lines.extend(["    </tr>", "  </thead>", "  <tbody>"])

    for row in model.body:
        html_lines.append("    <tr>")
        for cell in row:
            html_lines.append(
                f'      <td style="text-align: {cell.align}">'
                f"{_content(cell.content)}{_marks(cell.footnotes)}</td>"
            )
        html_lines.append("    </tr>")
    html_lines.append("  </tbody>")

    if model.footnotes or model.source_notes:
        html_lines.append("  <tfoot>")
        for note in model.footnotes:
            html_lines.append(
                f'    <tr><td colspan="{model.n_columns}">'
                f"<sup>{escape(note.symbol)}</sup> {escape(note.text)}</td></tr>"
            )
        for source_note in model.source_notes:
            html_lines.append(
                f'    <tr><td colspan="{model.n_columns}">{escape(source_note)}</td></tr>'
            )
        html_lines.append("  </tfoot>")

    html_lines.append("</table>")
    return "\n".join(html_lines)
